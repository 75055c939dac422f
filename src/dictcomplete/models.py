# src/dictcomplete/models.py
"""
Data models for the dictionary completion engine.

- Entry: one completion candidate with its attached metadata.
- Corpus: all entries of the relevant dictionaries, sorted by label.
- Insertion: what the front-end should insert once a candidate is accepted.

These classes carry no search logic; locate.py and search.py operate on them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from itertools import chain
from operator import attrgetter
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Entry:
    """
    One completion candidate.

    Attributes
    ----------
    label : str
        The completion text. Non-empty; the sort and match key.
    annotation : Optional[str]
        Short hint shown beside the candidate.
    meta : Optional[str]
        Long-form documentation text.
    """
    label: str
    annotation: Optional[str] = None
    meta: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Entry label must be a non-empty string")


def annotation_of(entry: Entry) -> Optional[str]:
    return entry.annotation


def meta_of(entry: Entry) -> Optional[str]:
    return entry.meta


@dataclass(slots=True)
class Corpus:
    """
    Entries of every relevant dictionary, sorted by label.

    Sorting uses plain str ordering (code point order), never locale collation;
    the binary search in locate.py depends on it. Duplicate labels are legal
    and keep their load order.
    """
    entries: List[Entry] = field(default_factory=list)

    @classmethod
    def build(cls, *sources: Iterable[Entry]) -> "Corpus":
        """Concatenate the given entry lists, then sort once."""
        merged = list(chain.from_iterable(sources))
        merged.sort(key=attrgetter("label"))
        return cls(entries=merged)

    def is_sorted(self) -> bool:
        e = self.entries
        return all(e[i].label <= e[i + 1].label for i in range(len(e) - 1))

    def labels(self) -> List[str]:
        return [e.label for e in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, i: int) -> Entry:
        return self.entries[i]


@dataclass(frozen=True, slots=True)
class Insertion:
    """
    Text to put in the buffer after a candidate is accepted.

    start/end are absolute positions of the inserted text; cursor is where the
    caret goes afterwards. fields holds (number, start, end) spans of snippet
    placeholders, empty for plain labels.
    """
    text: str
    start: int
    end: int
    cursor: int
    fields: Tuple[Tuple[int, int, int], ...] = ()
