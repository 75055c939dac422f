# src/dictcomplete/sources/api.py
from __future__ import annotations
from typing import Iterable, Iterator, List, Protocol, Sequence

from ..models import Entry
from ..config import ALL_SOURCE


class EntrySource(Protocol):
    # Read the entries of every dictionary relevant to the given contexts
    def entries(self, contexts: Sequence[str]) -> Iterator[Entry]: ...
    # lifecycle
    def close(self) -> None: ...


def relevant_sources(contexts: Iterable[str]) -> List[str]:
    """
    Dictionary names to merge for the active contexts: the contexts in the
    order given, then the shared "all" dictionary. Empty names and repeats
    are dropped.
    """
    names: List[str] = []
    for name in [*contexts, ALL_SOURCE]:
        if name and name not in names:
            names.append(name)
    return names


def make_source(dsn: str) -> EntrySource:
    """
    Factory:
      - dir:///path or a plain filesystem path -> DirectorySource
      - memory://                              -> empty MemorySource
    """
    if dsn.startswith("memory://"):
        from .memory_source import MemorySource
        return MemorySource()

    if dsn.startswith("dir://"):
        path = dsn.removeprefix("dir://")
    elif "://" in dsn:
        raise ValueError(f"Unsupported source DSN: {dsn}")
    else:
        path = dsn

    # Lazy import to avoid a circular import
    from .dir_source import DirectorySource
    return DirectorySource(path)
