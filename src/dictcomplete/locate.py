"""
Binary search over a label-sorted entry list.

locate() finds *some* entry whose label starts with the target; first_index()
walks back from it to the start of the contiguous block of prefix matches.
"""
from __future__ import annotations
from typing import Optional, Sequence

from .models import Entry


def locate(entries: Sequence[Entry], target: str) -> Optional[int]:
    """Return an index whose label has `target` as prefix, or None."""
    low, high = 0, len(entries) - 1
    while low <= high:
        mid = (low + high) // 2
        label = entries[mid].label
        if label.startswith(target):
            return mid
        if target < label:
            high = mid - 1
        else:
            low = mid + 1
    return None


def first_index(entries: Sequence[Entry], target: str, anchor: int) -> int:
    """Walk back from a matching anchor to the first label starting with `target`."""
    i = anchor
    while i > 0 and entries[i - 1].label.startswith(target):
        i -= 1
    return i


def start_index(entries: Sequence[Entry], prefix: str) -> Optional[int]:
    """
    Where a forward scan for `prefix` should begin.

    An empty prefix matches everything, so the scan starts at 0.
    None means no label starts with `prefix`.
    """
    if not prefix:
        return 0
    hit = locate(entries, prefix)
    if hit is None:
        return None
    return first_index(entries, prefix, hit)
