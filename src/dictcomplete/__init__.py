"""
Dictionary completion engine.

Prefix and wildcard lookup over word lists merged from per-context dictionary
files. Each candidate carries an optional short annotation and a longer
documentation text.

Example Usage:
    from dictcomplete import Engine

    eng = Engine("~/.dictcomplete/dict", contexts=["python-mode"], fuzzy=True)
    for entry in eng.complete("pri*f"):
        print(entry.label, entry.annotation or "")
    print(eng.meta("printf"))
"""

# src/dictcomplete/__init__.py
from .models import Entry, Corpus, Insertion, annotation_of, meta_of  # re-export
from .search import search
from .engine import Engine

__version__ = "1.0.0"
__all__ = ["Engine", "Entry", "Corpus", "Insertion", "annotation_of", "meta_of", "search"]
