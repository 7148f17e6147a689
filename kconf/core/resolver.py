#!/usr/bin/env python3

import re
from typing import Optional, Sequence

from .errors import NotFoundError, RangeError, UsageError
from .library import Entry

ORDINAL_PATTERN = re.compile(r"[+-]?\d+")


def resolve(selector: Optional[str], entries: Sequence[Entry]) -> Entry:
    """
    Map a selector to one of ``entries``.

    A selector made of digits is a 1-based position in ``entries``, which
    must be the sorted listing shown by ``kconf -l``. Anything else is taken
    as an alias, compared after trimming surrounding whitespace.
    """
    if selector is None:
        raise UsageError("not enough arguments")

    if ORDINAL_PATTERN.fullmatch(selector):
        idx = int(selector)
        if idx < 1 or idx > len(entries):
            raise RangeError("index out of range")
        return entries[idx - 1]

    alias = selector.strip()
    for entry in entries:
        if entry.alias == alias:
            return entry
    raise NotFoundError(f"kubeconfig not found: {alias!r}")
