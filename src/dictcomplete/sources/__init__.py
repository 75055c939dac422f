from .api import EntrySource, make_source, relevant_sources
from .dir_source import DirectorySource
from .memory_source import MemorySource

__all__ = ["EntrySource", "make_source", "relevant_sources", "DirectorySource", "MemorySource"]
