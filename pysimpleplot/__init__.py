from .plot import plot, build_command, as_request, classify, InputShape, PlotRequest
from .models import (
    # Terminals
    Aqua,
    Windows,
    X11,
    PS,
    EPS,
    PNG,
    PDF,
    SVG,
    GIF,
    JPEG,
    Latex,
    # Colors, styles, options
    NamedColor,
    RGB,
    Style,
    Title,
    StyleOption,
    ColorOption,
    # Axis options
    Range,
    For,
    Step,
    RangeX,
    RangeY,
    ForX,
    ForY,
    StepX,
    StepY,
)

from .graphs import (
    Function2D,
    Data2D,
    Gnuplot2D,
    Function3D,
    Data3D,
    Gnuplot3D,
    PreparedGraph,
    prepare_graph,
    function_graph,
    data_graph,
    expression_graph,
)

from .options import normalize_options, encode_options
from .command import PlotCommand, synthesize, position_namer, UniqueNamer
from .runner import GnuplotRunner, run_command
from .config import PlotterConfig
from .exceptions import (
    PlotError,
    InvalidColorError,
    InvalidTitleError,
    InvalidAxisOptionError,
    InvalidGraphError,
    MixedDimensionError,
    EngineNotFoundError,
)

__all__ = [
    "plot",
    "build_command",
    "as_request",
    "classify",
    "InputShape",
    "PlotRequest",
    # Terminals
    "Aqua",
    "Windows",
    "X11",
    "PS",
    "EPS",
    "PNG",
    "PDF",
    "SVG",
    "GIF",
    "JPEG",
    "Latex",
    # Rendering options
    "NamedColor",
    "RGB",
    "Style",
    "Title",
    "StyleOption",
    "ColorOption",
    # Axis options
    "Range",
    "For",
    "Step",
    "RangeX",
    "RangeY",
    "ForX",
    "ForY",
    "StepX",
    "StepY",
    # Graphs
    "Function2D",
    "Data2D",
    "Gnuplot2D",
    "Function3D",
    "Data3D",
    "Gnuplot3D",
    "PreparedGraph",
    "prepare_graph",
    "function_graph",
    "data_graph",
    "expression_graph",
    # Pipeline pieces
    "normalize_options",
    "encode_options",
    "PlotCommand",
    "synthesize",
    "position_namer",
    "UniqueNamer",
    "GnuplotRunner",
    "run_command",
    "PlotterConfig",
    # Errors
    "PlotError",
    "InvalidColorError",
    "InvalidTitleError",
    "InvalidAxisOptionError",
    "InvalidGraphError",
    "MixedDimensionError",
    "EngineNotFoundError",
]
