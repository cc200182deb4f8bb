"""Error types raised by pysimpleplot.

Each error also derives from the built-in exception a caller would expect
(``ValueError`` for bad values, ``TypeError`` for bad graph shapes,
``OSError`` for a missing engine), so plain ``except ValueError`` keeps working.
"""

from __future__ import annotations


class PlotError(Exception):
    """Base class for all pysimpleplot errors."""


class InvalidColorError(PlotError, ValueError):
    """An RGB channel is not an integer in [0, 255]."""


class InvalidTitleError(PlotError, ValueError):
    """A title or output path cannot be written as a gnuplot string literal."""


class InvalidAxisOptionError(PlotError, ValueError):
    """An axis option describes an empty or non-advancing sample domain."""


class InvalidGraphError(PlotError, TypeError):
    """The object passed to ``plot`` is not a graph shape we understand."""


class MixedDimensionError(InvalidGraphError):
    """2D and 3D graphs were requested in the same plot call."""


class EngineNotFoundError(PlotError, OSError):
    """The gnuplot executable could not be started."""
