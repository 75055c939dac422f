# src/dictcomplete/sources/dir_source.py
from __future__ import annotations
import logging
import os
from typing import Iterator, Sequence

from .api import EntrySource, relevant_sources
from ..loader import read_dictionary
from ..models import Entry

log = logging.getLogger(__name__)


class DirectorySource(EntrySource):
    """
    Dictionaries stored as files in one folder, each file named after the
    context it applies to (e.g. `python-mode`, `markdown`, `all`).
    """
    def __init__(self, root: str) -> None:
        self.root = os.path.abspath(os.path.expanduser(root))
        if not os.path.isdir(self.root):
            raise FileNotFoundError(self.root)

    def available(self) -> list[str]:
        return sorted(fn for fn in os.listdir(self.root) if os.path.isfile(os.path.join(self.root, fn)))

    def entries(self, contexts: Sequence[str]) -> Iterator[Entry]:
        for name in relevant_sources(contexts):
            path = os.path.join(self.root, name)
            if not os.path.isfile(path):
                continue
            try:
                found = read_dictionary(path)
            except OSError as exc:
                log.warning("skipping unreadable dictionary %s: %s", path, exc)
                continue
            yield from found

    def close(self) -> None:
        pass
