"""Graph descriptions and their preparation into (options, data source) pairs.

Three kinds of graph exist for each dimensionality:

  - ``Function2D`` / ``Function3D``: a Python callable, sampled on a grid
  - ``Data2D`` / ``Data3D``: literal coordinate tuples
  - ``Gnuplot2D`` / ``Gnuplot3D``: a raw gnuplot expression such as ``x**2``

Example:

    prepared = prepare_graph(Function2D(math.sin, options=[Title("sine")]))
    prepared.options_text   # 'with lines title "sine"'
    prepared.source         # ' -5.0 0.9589...\\n -4.95 ...'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

from .config import PlotterConfig
from .exceptions import InvalidAxisOptionError, InvalidGraphError
from .models import (
    AxisOption,
    ColorOption,
    Option,
    Option2D,
    Option3D,
    Style,
    StyleOption,
    Title,
    _AxisPoints,
    _AxisRange,
    _AxisStep,
    encode_rows,
)
from .options import encode_options
from .utils import sample_axis

logger = logging.getLogger(__name__)


def _check_common(graph: Any) -> None:
    object.__setattr__(graph, "options", tuple(graph.options))
    object.__setattr__(graph, "axis_options", tuple(graph.axis_options))
    for opt in graph.options:
        if not isinstance(opt, (Title, StyleOption, ColorOption)):
            raise InvalidGraphError(
                f"Expected Title, StyleOption or ColorOption, got {type(opt).__name__}: {opt!r}"
            )
    for opt in graph.axis_options:
        if not isinstance(opt, (_AxisRange, _AxisPoints, _AxisStep)):
            raise TypeError(f"Expected an axis option, got {type(opt).__name__}")
        if graph.dimension == 2 and opt.axis != "x":
            raise InvalidAxisOptionError(
                f"{type(opt).__name__} applies to the y axis, which 2D graphs do not have"
            )


def _check_func(graph: Any) -> None:
    _check_common(graph)
    if not callable(graph.func):
        raise InvalidGraphError(f"{type(graph).__name__} needs a callable, got {type(graph.func).__name__}")


def _check_rows(graph: Any) -> None:
    _check_common(graph)
    rows = tuple(tuple(row) for row in graph.rows)
    for i, row in enumerate(rows):
        if len(row) != graph.dimension:
            raise InvalidGraphError(
                f"{type(graph).__name__} row {i} has {len(row)} values, "
                f"expected {graph.dimension}: {row!r}"
            )
    object.__setattr__(graph, "rows", rows)


def _check_expression(graph: Any) -> None:
    _check_common(graph)
    if not isinstance(graph.expression, str) or not graph.expression.strip():
        raise InvalidGraphError(f"{type(graph).__name__} needs a non-empty expression string")


@dataclass(frozen=True)
class Function2D:
    """A Python function ``f(x) -> y``, always drawn as a continuous line."""

    func: Callable[[float], Any]
    options: Sequence[Option] = ()
    axis_options: Sequence[Option2D] = ()
    dimension: ClassVar[int] = 2

    def __post_init__(self) -> None:
        _check_func(self)


@dataclass(frozen=True)
class Data2D:
    """Literal ``(x, y)`` pairs."""

    rows: Sequence[Tuple[Any, Any]]
    options: Sequence[Option] = ()
    axis_options: Sequence[Option2D] = ()
    dimension: ClassVar[int] = 2

    def __post_init__(self) -> None:
        _check_rows(self)


@dataclass(frozen=True)
class Gnuplot2D:
    """A gnuplot expression in ``x``, passed through untouched (e.g. ``2**cos(x)``)."""

    expression: str
    options: Sequence[Option] = ()
    axis_options: Sequence[Option2D] = ()
    dimension: ClassVar[int] = 2

    def __post_init__(self) -> None:
        _check_expression(self)


@dataclass(frozen=True)
class Function3D:
    """A Python function ``f(x, y) -> z``."""

    func: Callable[[float, float], Any]
    options: Sequence[Option] = ()
    axis_options: Sequence[Option3D] = ()
    dimension: ClassVar[int] = 3

    def __post_init__(self) -> None:
        _check_func(self)


@dataclass(frozen=True)
class Data3D:
    """Literal ``(x, y, z)`` triples."""

    rows: Sequence[Tuple[Any, Any, Any]]
    options: Sequence[Option] = ()
    axis_options: Sequence[Option3D] = ()
    dimension: ClassVar[int] = 3

    def __post_init__(self) -> None:
        _check_rows(self)


@dataclass(frozen=True)
class Gnuplot3D:
    """A gnuplot expression in ``x`` and ``y`` (e.g. ``x*y``)."""

    expression: str
    options: Sequence[Option] = ()
    axis_options: Sequence[Option3D] = ()
    dimension: ClassVar[int] = 3

    def __post_init__(self) -> None:
        _check_expression(self)


Graph2D = Union[Function2D, Data2D, Gnuplot2D]
Graph3D = Union[Function3D, Data3D, Gnuplot3D]
Graph = Union[Graph2D, Graph3D]


def function_graph(
    func: Callable[..., Any],
    options: Sequence[Option] = (),
    axis_options: Sequence[AxisOption] = (),
    dimension: int = 2,
) -> Graph:
    """Build a ``Function2D`` or ``Function3D`` depending on ``dimension``."""
    if dimension == 2:
        return Function2D(func, options, axis_options)
    if dimension == 3:
        return Function3D(func, options, axis_options)
    raise InvalidGraphError(f"dimension must be 2 or 3, got {dimension}")


def data_graph(
    rows: Sequence[Sequence[Any]],
    options: Sequence[Option] = (),
    axis_options: Sequence[AxisOption] = (),
) -> Graph:
    """Build a ``Data2D`` or ``Data3D`` from the width of the first row."""
    rows = [tuple(r) for r in rows]
    if not rows:
        raise InvalidGraphError("cannot infer the dimension of an empty dataset")
    if len(rows[0]) == 2:
        return Data2D(rows, options, axis_options)
    if len(rows[0]) == 3:
        return Data3D(rows, options, axis_options)
    raise InvalidGraphError(f"dataset rows must be pairs or triples, got {rows[0]!r}")


def expression_graph(
    expression: str,
    options: Sequence[Option] = (),
    axis_options: Sequence[AxisOption] = (),
    dimension: int = 3,
) -> Graph:
    """Build a ``Gnuplot3D`` (the default) or a ``Gnuplot2D``."""
    if dimension == 2:
        return Gnuplot2D(expression, options, axis_options)
    if dimension == 3:
        return Gnuplot3D(expression, options, axis_options)
    raise InvalidGraphError(f"dimension must be 2 or 3, got {dimension}")


# ==============================================================================
# Preparation
# ==============================================================================

@dataclass(frozen=True)
class PreparedGraph:
    """What the command synthesizer needs for one graph.

    options_text: normalized option clause, e.g. ``with lines title "t"``
    source: dataset file content, or the raw expression when ``inline``
    inline: True for gnuplot expressions, False for file-backed data
    """

    options_text: str
    source: str
    inline: bool = False


def _axis_samples(
    axis_options: Sequence[AxisOption], axis: str, config: PlotterConfig
) -> List[float]:
    first: Dict[str, AxisOption] = {}
    for opt in axis_options:
        if opt.axis == axis:
            first.setdefault(opt.kind, opt)

    start, stop, step = config.sample_start, config.sample_stop, config.sample_step
    points: Optional[Sequence[float]] = None
    if "range" in first:
        start, stop = first["range"].lo, first["range"].hi
    if "step" in first:
        step = first["step"].step
    if "points" in first:
        points = first["points"].points
    return sample_axis(start, stop, step, points)


def _evaluate(func: Callable[..., Any], *args: float) -> Any:
    """``func(*args)``, or NaN where the function is undefined (gnuplot skips NaN rows)."""
    try:
        return func(*args)
    except (ArithmeticError, ValueError) as e:
        logger.debug(f"No value at {args}: {type(e).__name__}: {e}")
        return float("nan")


def _sample_2d(graph: Function2D, config: PlotterConfig) -> List[Tuple[Any, ...]]:
    xs = _axis_samples(graph.axis_options, "x", config)
    return [(x, _evaluate(graph.func, x)) for x in xs]


def _sample_3d(graph: Function3D, config: PlotterConfig) -> List[Tuple[Any, ...]]:
    xs = _axis_samples(graph.axis_options, "x", config)
    ys = _axis_samples(graph.axis_options, "y", config)
    return [(x, y, _evaluate(graph.func, x, y)) for x in xs for y in ys]


def prepare_graph(graph: Graph, config: Optional[PlotterConfig] = None) -> PreparedGraph:
    """Turn one graph into its option clause and data source.

    Args:
        graph: Any of the six graph types.
        config: Sampling domain and number formatting; defaults apply if omitted.

    Returns:
        A ``PreparedGraph``; expressions are inline, everything else is
        file-backed data.

    Raises:
        InvalidGraphError: If ``graph`` is not a graph object.
        InvalidAxisOptionError: If axis options produce an empty sample domain.
    """
    config = config or PlotterConfig()

    if isinstance(graph, (Gnuplot2D, Gnuplot3D)):
        if graph.axis_options:
            logger.debug(f"{type(graph).__name__}: axis options ignored for gnuplot expressions")
        return PreparedGraph(encode_options(graph.options), graph.expression, inline=True)

    if isinstance(graph, (Data2D, Data3D)):
        if graph.axis_options:
            logger.debug(f"{type(graph).__name__}: axis options ignored for literal data")
        return PreparedGraph(
            encode_options(graph.options),
            encode_rows(graph.rows, config.number_format),
        )

    if isinstance(graph, Function2D):
        # the forced style goes first so it survives first-occurrence dedup
        options = (StyleOption(Style.LINES),) + graph.options
        rows = _sample_2d(graph, config)
        logger.debug(f"Function2D sampled at {len(rows)} points")
        return PreparedGraph(encode_options(options), encode_rows(rows, config.number_format))

    if isinstance(graph, Function3D):
        rows = _sample_3d(graph, config)
        logger.debug(f"Function3D sampled at {len(rows)} points")
        return PreparedGraph(encode_options(graph.options), encode_rows(rows, config.number_format))

    raise InvalidGraphError(f"Cannot prepare {type(graph).__name__} as a graph")
