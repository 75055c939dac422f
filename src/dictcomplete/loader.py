"""
Dictionary file reading.

A dictionary is a UTF-8 text file with one entry per line:

    label<TAB>annotation<TAB>meta

annotation and meta are optional; empty fields mean "absent". Inside meta the
two characters backslash-n stand for a line break so that long documentation
fits on one line. Blank lines are skipped.
"""

from __future__ import annotations
import logging
import os
from typing import List, Optional

from .models import Entry
from .config import ENCODING, FIELD_SEP

log = logging.getLogger(__name__)


def parse_line(line: str) -> Optional[Entry]:
    """
    Turn one dictionary line into an Entry, or None for lines with no label.

    Example:
        >>> parse_line("printf\\tfunction\\tprint formatted output")
        Entry(label='printf', annotation='function', meta='print formatted output')
    """
    line = line.rstrip("\r\n")
    if not line.strip():
        return None
    parts = line.split(FIELD_SEP, 2)
    label = parts[0]
    if not label:
        return None
    annotation = parts[1] if len(parts) > 1 and parts[1] else None
    meta = parts[2].replace("\\n", "\n") if len(parts) > 2 and parts[2] else None
    return Entry(label=label, annotation=annotation, meta=meta)


def read_dictionary(path: str) -> List[Entry]:
    """Read every entry of one dictionary file, in file order."""
    entries: List[Entry] = []
    with open(path, "r", encoding=ENCODING, errors="replace") as f:
        for raw in f:
            entry = parse_line(raw)
            if entry is not None:
                entries.append(entry)
    log.info("read %d entries from %s", len(entries), os.path.basename(path))
    return entries
