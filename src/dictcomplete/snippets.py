"""
Snippet expansion for accepted candidates.

Labels may be written in a small snippet syntax:

    $1 / ${1}       empty tab stop number 1
    ${1:default}    tab stop pre-filled with "default"
    $0              final caret position
    \\$             a literal dollar sign

expand() returns the plain text together with the absolute spans of every tab
stop so a front-end can drive field navigation.
"""

from __future__ import annotations
import re
from typing import List, Tuple

from .models import Insertion

_FIELD_RE = re.compile(r"\\\$|\$(\d+)|\$\{(\d+)(?::([^}]*))?\}")


def expand(text: str, position: int = 0) -> Insertion:
    out: List[str] = []
    fields: List[Tuple[int, int, int]] = []
    cur = position
    last = 0
    for m in _FIELD_RE.finditer(text):
        literal = text[last:m.start()]
        out.append(literal)
        cur += len(literal)
        last = m.end()
        if m.group(0) == "\\$":
            out.append("$")
            cur += 1
            continue
        num = int(m.group(1) or m.group(2))
        default = m.group(3) or ""
        fields.append((num, cur, cur + len(default)))
        out.append(default)
        cur += len(default)
    tail = text[last:]
    out.append(tail)
    cur += len(tail)

    # tab order: 1, 2, ... then $0 last
    fields.sort(key=lambda f: (f[0] == 0, f[0], f[1]))
    cursor = fields[0][1] if fields else cur
    return Insertion(text="".join(out), start=position, end=cur, cursor=cursor, fields=tuple(fields))


def plain(text: str, position: int = 0) -> Insertion:
    """Insertion for a label taken verbatim."""
    end = position + len(text)
    return Insertion(text=text, start=position, end=end, cursor=end)
