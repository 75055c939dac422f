# src/dictcomplete/sources/memory_source.py
from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from .api import EntrySource, relevant_sources
from ..models import Entry
from ..config import ALL_SOURCE


class MemorySource(EntrySource):
    """In-memory dictionaries keyed by name (useful for tests or embedding)."""
    def __init__(self, dictionaries: Optional[Union[Mapping[str, Iterable[Entry]], Iterable[Entry]]] = None) -> None:
        self._dicts: Dict[str, List[Entry]] = {}
        if dictionaries is None:
            return
        if isinstance(dictionaries, Mapping):
            for name, items in dictionaries.items():
                self._dicts[name] = list(items)
        else:
            self._dicts[ALL_SOURCE] = list(dictionaries)

    def add(self, name: str, items: Iterable[Entry]) -> None:
        """Replace the dictionary called `name`."""
        self._dicts[name] = list(items)

    def remove(self, name: str) -> None:
        self._dicts.pop(name, None)

    def entries(self, contexts: Sequence[str]) -> Iterator[Entry]:
        for name in relevant_sources(contexts):
            yield from self._dicts.get(name, ())

    def close(self) -> None:
        self._dicts.clear()
