# src/dictcomplete/engine.py
from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional, Sequence, Tuple, Union

from . import config as CFG
from .models import Corpus, Entry, Insertion
from .locate import locate, first_index
from .search import search
from .sources import EntrySource, make_source, relevant_sources
from . import snippets

log = logging.getLogger(__name__)

AcceptHook = Callable[[Entry, Insertion], None]


class Engine:
    """
    Owns the corpus and answers completion queries against it.

      * attach(source):   choose where dictionaries come from (EntrySource or DSN)
      * set_context(...): choose which dictionaries are relevant
      * complete(query):  capped, label-ordered candidates
      * lookup/annotation/meta(label): metadata of a returned candidate
      * accept(label, position): post-selection insertion (+ snippet expansion)
      * refresh():        drop the corpus and rebuild it from the source
      * shutdown():       close the source

    The corpus is built lazily on first use and kept until refresh(), clear()
    or a context change.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        source: Union[EntrySource, str, None] = None,
        *,
        contexts: Sequence[str] = (),
        fuzzy: Optional[bool] = None,
        max_candidates: Optional[int] = None,
        snippets: Optional[bool] = None,
        on_accept: Sequence[AcceptHook] = (),
        verbose: bool = False,
    ) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)

        self.fuzzy = CFG.FUZZY_ENABLED if fuzzy is None else bool(fuzzy)
        self.max_candidates = CFG.MAX_CANDIDATES if max_candidates is None else int(max_candidates)
        self.snippets = CFG.SNIPPETS_ENABLED if snippets is None else bool(snippets)
        self.on_accept: List[AcceptHook] = list(on_accept)

        self._source: Optional[EntrySource] = None
        self._contexts: Tuple[str, ...] = tuple(contexts)
        self._corpus: Optional[Corpus] = None
        self._lock = threading.Lock()

        if source is not None:
            self.attach(source)

    # /* ~~~ Wire up where dictionaries are read from ~~~ */
    def attach(self, source: Union[EntrySource, str]) -> None:
        if isinstance(source, str):
            log.info("Opening entry source: %s", source)
            source = make_source(source)
        if self._source is not None and self._source is not source:
            self._source.close()
        self._source = source
        self.clear()

    @property
    def contexts(self) -> Tuple[str, ...]:
        return self._contexts

    def set_context(self, *contexts: str) -> None:
        """Switch the active contexts; the corpus is dropped only if the relevant dictionaries change."""
        with self._lock:
            if relevant_sources(contexts) != relevant_sources(self._contexts):
                self._corpus = None
            self._contexts = tuple(contexts)

    # ------------- corpus -------------

    @property
    def corpus(self) -> Corpus:
        if self._source is None:
            raise RuntimeError("Engine has no entry source. Call attach() first.")
        with self._lock:
            if self._corpus is None:
                self._corpus = self._build()
            return self._corpus

    def _build(self) -> Corpus:
        assert self._source is not None
        names = relevant_sources(self._contexts)
        log.info("Building corpus from dictionaries %s", names)
        corpus = Corpus.build(self._source.entries(self._contexts))
        log.info("Corpus ready: entries=%d", len(corpus))
        return corpus

    def clear(self) -> None:
        """Forget the cached corpus; the next query rebuilds it."""
        with self._lock:
            self._corpus = None

    # /* ~~~ Re-read every relevant dictionary from scratch ~~~ */
    def refresh(self) -> int:
        self.clear()
        return len(self.corpus)

    # ------------- query -------------

    def complete(self, query: str, *, top_k: Optional[int] = None, fuzzy: Optional[bool] = None) -> List[Entry]:
        k = self.max_candidates if top_k is None else top_k
        use_fuzzy = self.fuzzy if fuzzy is None else fuzzy
        return search(self.corpus, query, k, fuzzy=use_fuzzy)

    def lookup(self, label: str) -> Optional[Entry]:
        """First entry whose label is exactly `label`, or None."""
        entries = self.corpus.entries
        hit = locate(entries, label)
        if hit is None:
            return None
        # an exact label sorts first in its prefix block
        i = first_index(entries, label, hit)
        return entries[i] if entries[i].label == label else None

    def annotation(self, label: str) -> Optional[str]:
        entry = self.lookup(label)
        return entry.annotation if entry else None

    def meta(self, label: str) -> Optional[str]:
        entry = self.lookup(label)
        return entry.meta if entry else None

    # ------------- post-selection -------------

    def accept(self, label: str, position: int = 0) -> Insertion:
        """
        Called once the user picks `label`, inserted at `position`.
        With snippets enabled the label is expanded as a snippet; every
        on_accept hook then sees the entry and the final insertion.
        """
        entry = self.lookup(label) or Entry(label)
        if self.snippets:
            insertion = snippets.expand(label, position)
        else:
            insertion = snippets.plain(label, position)
        for hook in self.on_accept:
            hook(entry, insertion)
        return insertion

    # ------------- teardown -------------

    def shutdown(self) -> None:
        try:
            if self._source:
                self._source.close()
        finally:
            self._source = None
            self._corpus = None
            log.info("Engine shutdown complete")
