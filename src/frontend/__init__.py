"""Front-ends for the dictionary completion engine: CLI, Flask web UI and desktop GUI."""
