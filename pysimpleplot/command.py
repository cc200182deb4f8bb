"""Synthesis of the single gnuplot command line for a plot call.

The command has the shape::

    <preamble 1>; <preamble 2>; plot "plot1.dat" with lines, sin(x) title "s"

Pure string building: the dataset files are returned, not written.
"""

from __future__ import annotations

import itertools
import os
import threading
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from .graphs import PreparedGraph
from .models import _check_literal, _quote

PLOT_VERBS = ("plot", "splot")

FileNamer = Callable[[int], str]


def position_namer(position: int) -> str:
    """``plot<N>.dat`` for the graph at 1-based ``position`` in the call."""
    return f"plot{position}.dat"


class UniqueNamer:
    """Process-wide counter namer: ``plot-<pid>-<N>.dat``.

    Filenames never repeat within a process, and the pid keeps processes that
    share a data directory apart. The position argument is ignored.
    """

    _counter = itertools.count(1)
    _lock = threading.Lock()

    def __call__(self, position: int) -> str:
        with self._lock:
            n = next(self._counter)
        return f"plot-{os.getpid()}-{n}.dat"


@dataclass(frozen=True)
class PlotCommand:
    """A synthesized command and the dataset files it refers to.

    text: the full command, passed to ``gnuplot -e``
    files: ``(filename, content)`` pairs that must exist before running it
    """

    text: str
    files: Tuple[Tuple[str, str], ...] = ()


def _clause(prepared: PreparedGraph, source: str) -> str:
    return f"{source} {prepared.options_text}"


def synthesize(
    preamble: Sequence[str],
    verb: str,
    graphs: Sequence[PreparedGraph],
    namer: FileNamer = position_namer,
) -> PlotCommand:
    """Combine preamble directives, the plot verb and prepared graphs.

    Every graph consumes a position number, but only file-backed graphs get a
    file; inline expressions are written straight into the clause.

    Args:
        preamble: Directives issued before the plot statement (terminal/output).
        verb: ``"plot"`` for 2D graphs, ``"splot"`` for 3D graphs.
        graphs: Prepared graphs in plot order.
        namer: Maps a 1-based position to a data filename.

    Returns:
        The command text and the files to write.

    Raises:
        ValueError: If ``verb`` is unknown or ``graphs`` is empty.
    """
    if verb not in PLOT_VERBS:
        raise ValueError(f"plot verb must be one of {PLOT_VERBS}, got {verb!r}")
    if not graphs:
        raise ValueError("at least one graph is required")

    clauses = []
    files = []
    for position, prepared in enumerate(graphs, start=1):
        if prepared.inline:
            clauses.append(_clause(prepared, prepared.source))
        else:
            filename = namer(position)
            files.append((filename, prepared.source))
            clauses.append(_clause(prepared, _quote(_check_literal(filename, "data file name"))))

    statement = f"{verb} " + ", ".join(clauses)
    text = "; ".join(list(preamble) + [statement])
    return PlotCommand(text=text, files=tuple(files))
