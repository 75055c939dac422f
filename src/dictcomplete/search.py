from __future__ import annotations
import re
from typing import Callable, List, Optional

from .models import Corpus, Entry
from .locate import start_index
from . import config as CFG

Matcher = Callable[[str], bool]


def literal_prefix(query: str, fuzzy: bool = CFG.FUZZY_ENABLED, wildcard: str = CFG.WILDCARD) -> str:
    """The part of the query that every match must start with."""
    if fuzzy and wildcard in query:
        return query.split(wildcard, 1)[0]
    return query


def compile_pattern(query: str, fuzzy: bool = CFG.FUZZY_ENABLED, wildcard: str = CFG.WILDCARD) -> Matcher:
    """
    /* ~~~ Build the per-label test ~~~ */
    Fuzzy + wildcard: every marker becomes `.*`, anchored at the label start
    only (whatever follows the pattern is unconstrained). Otherwise a plain
    startswith test.
    """
    if fuzzy and wildcard in query:
        body = ".*".join(re.escape(part) for part in query.split(wildcard))
        rx = re.compile(body, re.DOTALL)
        return lambda label: rx.match(label) is not None
    return lambda label: label.startswith(query)


def search(
    corpus: Corpus,
    query: str,
    max_results: int = CFG.MAX_CANDIDATES,
    *,
    fuzzy: bool = CFG.FUZZY_ENABLED,
    wildcard: str = CFG.WILDCARD,
) -> List[Entry]:
    """
    Return up to `max_results` entries matching `query`, in corpus order.

    The literal prefix narrows the scan to the block of labels starting with
    it; an empty literal prefix falls back to scanning from the first entry.
    A cap of zero or less returns nothing.
    """
    if max_results <= 0:
        return []
    entries = corpus.entries
    prefix = literal_prefix(query, fuzzy, wildcard)
    start: Optional[int] = start_index(entries, prefix)
    if start is None:
        return []

    matches = compile_pattern(query, fuzzy, wildcard)
    out: List[Entry] = []
    for i in range(start, len(entries)):
        label = entries[i].label
        # every match lies inside the literal-prefix block
        if prefix and not label.startswith(prefix):
            break
        if matches(label):
            out.append(entries[i])
            if len(out) >= max_results:
                break
    return out


def labels(results: List[Entry]) -> List[str]:
    return [e.label for e in results]
