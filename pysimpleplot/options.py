"""Deduplication and canonical ordering of per-graph options.

A graph may be given several options of the same kind (two titles, a style
and a later style, ...). Only the first option of each kind is kept, and the
survivors are emitted style first, then color, then title, which is the
clause order gnuplot expects after the data source.
"""

from __future__ import annotations

import functools
from typing import Dict, Iterable, List, Tuple

from .models import Option

# Explicit "a comes before b" pairs between option kinds.
_BEFORE = {
    ("style", "title"),
    ("style", "color"),
    ("color", "title"),
}


def _compare_kinds(a: str, b: str) -> int:
    if a == b:
        return 0
    if (a, b) in _BEFORE:
        return -1
    if (b, a) in _BEFORE:
        return 1
    # unrelated kinds keep their input order under the stable sort
    return 0


def _dedupe(options: Iterable[Option]) -> List[Option]:
    seen: Dict[str, Option] = {}
    for opt in options:
        # first occurrence wins; later options of the same kind are dropped
        seen.setdefault(opt.kind, opt)
    return list(seen.values())


def normalize_options(options: Iterable[Option]) -> Tuple[Option, ...]:
    """Return ``options`` with duplicates removed and in canonical order.

    Idempotent: normalizing an already normalized sequence returns it unchanged.

    Args:
        options: Options in caller order, possibly several of the same kind.

    Returns:
        At most one option per kind, ordered style, color, title.
    """
    unique = _dedupe(options)
    return tuple(sorted(unique, key=functools.cmp_to_key(lambda a, b: _compare_kinds(a.kind, b.kind))))


def encode_options(options: Iterable[Option]) -> str:
    """Normalize ``options`` and join their gnuplot encodings with single spaces."""
    return " ".join(opt.to_gnuplot() for opt in normalize_options(options))
