"""Public entry point: ``plot(target, graphs)``.

``graphs`` may be any of a fixed set of shapes; each is recognized once by
``classify`` and turned into a ``PlotRequest`` (plot verb + graph list):

    plot(X11(), Data2D([(1, 2), (2, 4)], options=[Title("Sample Data")]))
    plot(X11(), Function2D(lambda x: math.sin(x) * math.cos(x)))
    plot(X11(), math.sin)                        # bare callable, 2D
    plot(PNG("plot.png"), [math.sin, math.cos])  # several functions
    plot(X11(), Gnuplot2D("2**cos(x)", options=[ColorOption(NamedColor.BLUE)]))
    plot(X11(), "x*y")                           # raw string, 3D
"""

from __future__ import annotations

import inspect
import logging
import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .command import FileNamer, PlotCommand, UniqueNamer, position_namer, synthesize
from .config import PlotterConfig
from .exceptions import InvalidGraphError, MixedDimensionError
from .graphs import (
    Data2D,
    Data3D,
    Function2D,
    Function3D,
    Gnuplot2D,
    Gnuplot3D,
    Graph,
    prepare_graph,
)
from .models import Terminal
from .runner import GnuplotRunner

logger = logging.getLogger(__name__)

GRAPH_TYPES = (Function2D, Data2D, Gnuplot2D, Function3D, Data3D, Gnuplot3D)
_VERBS = {2: "plot", 3: "splot"}


class InputShape(Enum):
    """Every argument shape ``plot`` accepts."""

    GRAPH_2D = "graph_2d"
    GRAPH_2D_LIST = "graph_2d_list"
    GRAPH_3D = "graph_3d"
    GRAPH_3D_LIST = "graph_3d_list"
    CALLABLE_2D = "callable_2d"
    CALLABLE_3D = "callable_3d"
    CALLABLE_LIST = "callable_list"
    PAIRS = "pairs"
    TRIPLES = "triples"
    EXPRESSION = "expression"
    EXPRESSION_LIST = "expression_list"


@dataclass(frozen=True)
class PlotRequest:
    """A validated plot call: one verb and a non-empty list of same-dimension graphs."""

    verb: str
    graphs: Tuple[Graph, ...]

    @property
    def dimension(self) -> int:
        return self.graphs[0].dimension


def _arity(func: Callable[..., Any]) -> int:
    """Number of positional arguments ``func`` needs (1 for unknown builtins)."""
    nin = getattr(func, "nin", None)  # numpy ufuncs
    if isinstance(nin, int):
        return nin
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return 1
    required = [
        p for p in sig.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    ]
    return len(required) if required else 1


def _is_row(item: Any) -> bool:
    if isinstance(item, (str, bytes)) or not isinstance(item, (tuple, list, np.ndarray)):
        return False
    return len(item) in (2, 3) and all(isinstance(v, (int, float, np.number)) for v in item)


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple, np.ndarray))


def classify(obj: Any) -> InputShape:
    """Work out which accepted shape ``obj`` is.

    Raises:
        InvalidGraphError: If ``obj`` matches none of the shapes, or a list
            mixes element kinds (e.g. graphs and bare rows).
        MixedDimensionError: If a list mixes 2D and 3D graphs.
    """
    if isinstance(obj, GRAPH_TYPES):
        return InputShape.GRAPH_2D if obj.dimension == 2 else InputShape.GRAPH_3D
    if isinstance(obj, str):
        return InputShape.EXPRESSION
    if callable(obj) and not _is_sequence(obj):
        return InputShape.CALLABLE_3D if _arity(obj) >= 2 else InputShape.CALLABLE_2D
    if not _is_sequence(obj):
        raise InvalidGraphError(f"Cannot plot an object of type {type(obj).__name__}")
    if len(obj) == 0:
        raise InvalidGraphError("Nothing to plot: the graph list is empty")

    items = list(obj)
    if all(isinstance(i, GRAPH_TYPES) for i in items):
        dims = {i.dimension for i in items}
        if len(dims) > 1:
            raise MixedDimensionError("2D and 3D graphs cannot be mixed in one plot")
        return InputShape.GRAPH_2D_LIST if dims == {2} else InputShape.GRAPH_3D_LIST
    if all(isinstance(i, str) for i in items):
        return InputShape.EXPRESSION_LIST
    if all(callable(i) and not isinstance(i, GRAPH_TYPES) for i in items):
        return InputShape.CALLABLE_LIST
    if all(_is_row(i) for i in items):
        widths = {len(i) for i in items}
        if widths == {2}:
            return InputShape.PAIRS
        if widths == {3}:
            return InputShape.TRIPLES
        raise MixedDimensionError("A dataset cannot mix pairs and triples")
    raise InvalidGraphError(
        "A plot list must contain only graphs, only callables, only expression "
        "strings, or only coordinate pairs/triples"
    )


def _callables(items: Sequence[Callable[..., Any]]) -> List[Graph]:
    graphs = [Function3D(f) if _arity(f) >= 2 else Function2D(f) for f in items]
    if len({g.dimension for g in graphs}) > 1:
        raise MixedDimensionError("2D and 3D functions cannot be mixed in one plot")
    return graphs


_BUILDERS: Dict[InputShape, Callable[[Any], List[Graph]]] = {
    InputShape.GRAPH_2D: lambda g: [g],
    InputShape.GRAPH_3D: lambda g: [g],
    InputShape.GRAPH_2D_LIST: list,
    InputShape.GRAPH_3D_LIST: list,
    InputShape.CALLABLE_2D: lambda f: [Function2D(f)],
    InputShape.CALLABLE_3D: lambda f: [Function3D(f)],
    InputShape.CALLABLE_LIST: _callables,
    InputShape.PAIRS: lambda rows: [Data2D(rows)],
    InputShape.TRIPLES: lambda rows: [Data3D(rows)],
    InputShape.EXPRESSION: lambda s: [Gnuplot3D(s)],
    InputShape.EXPRESSION_LIST: lambda items: [Gnuplot3D(s) for s in items],
}


def as_request(obj: Any) -> PlotRequest:
    """Resolve any accepted argument shape into a ``PlotRequest``."""
    shape = classify(obj)
    graphs = tuple(_BUILDERS[shape](obj))
    logger.debug(f"Plot argument resolved as {shape.value} with {len(graphs)} graph(s)")
    return PlotRequest(verb=_VERBS[graphs[0].dimension], graphs=graphs)


def _namer(config: PlotterConfig) -> FileNamer:
    base: FileNamer = UniqueNamer() if config.unique_filenames else position_namer
    if config.data_dir in ("", "."):
        return base
    data_dir = str(config.data_dir).replace("\\", "/")
    return lambda position: posixpath.join(data_dir, base(position))


def build_command(
    target: Terminal, graphs: Any, config: Optional[PlotterConfig] = None
) -> PlotCommand:
    """Everything ``plot`` does except writing files and running gnuplot."""
    if not hasattr(target, "to_gnuplot"):
        raise TypeError(f"Expected a terminal such as X11() or PNG(path), got {type(target).__name__}")
    config = config or PlotterConfig()
    request = as_request(graphs)
    prepared = [prepare_graph(g, config) for g in request.graphs]
    return synthesize(target.to_gnuplot(), request.verb, prepared, _namer(config))


def plot(target: Terminal, graphs: Any, config: Optional[PlotterConfig] = None) -> bool:
    """Plot ``graphs`` to ``target`` with gnuplot.

    Args:
        target: Where the output goes, e.g. ``X11()`` or ``PNG("out.png")``.
        graphs: A graph, a list of graphs of one dimensionality, a callable,
            a list of callables, a list of pairs or triples, a gnuplot
            expression string, or a list of such strings.
        config: Optional ``PlotterConfig``.

    Returns:
        True if gnuplot exited with status 0, False otherwise.

    Raises:
        InvalidGraphError: If ``graphs`` is not an accepted shape.
        MixedDimensionError: If 2D and 3D graphs are mixed.
        OSError: If a dataset file cannot be written.
        EngineNotFoundError: If gnuplot cannot be started.
    """
    config = config or PlotterConfig()
    command = build_command(target, graphs, config)
    return GnuplotRunner(config).run(command)
