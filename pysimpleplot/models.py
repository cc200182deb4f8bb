from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Iterable, Sequence, Tuple, Union

from .exceptions import InvalidAxisOptionError, InvalidColorError, InvalidTitleError
from .utils import format_number


def _check_literal(text: str, what: str) -> str:
    """Reject text that cannot sit inside a gnuplot double-quoted string.

    Quotes would end the literal early and line breaks would end the command,
    so both are refused instead of producing a malformed script.
    """
    if not isinstance(text, str):
        raise InvalidTitleError(f"{what} must be a string, got {type(text).__name__}")
    for bad in ('"', "\n", "\r"):
        if bad in text:
            raise InvalidTitleError(f"{what} may not contain {bad!r}: {text!r}")
    return text


def _quote(text: str) -> str:
    """Wrap text in a gnuplot double-quoted string; backslashes are escapes there."""
    escaped = text.replace("\\", "\\\\")
    return f'"{escaped}"'


# ==============================================================================
# Terminals
# ==============================================================================

@dataclass(frozen=True)
class Aqua:
    """Output on macOS (Aqua terminal)."""

    def to_gnuplot(self) -> Tuple[str, ...]:
        return ("set term aqua",)


@dataclass(frozen=True)
class Windows:
    """Output for MS Windows."""

    def to_gnuplot(self) -> Tuple[str, ...]:
        return ("set term windows",)


@dataclass(frozen=True)
class X11:
    """Output to the X Window System. The window persists after gnuplot exits."""

    def to_gnuplot(self) -> Tuple[str, ...]:
        return ("set term x11 persist",)


@dataclass(frozen=True)
class _FileTerminal:
    """Terminal writing into ``path``; subclasses only pick the driver."""

    path: str
    term: ClassVar[str] = ""

    def __post_init__(self) -> None:
        path = str(self.path) if self.path is not None else ""
        if not path:
            raise InvalidTitleError(f"{type(self).__name__} needs a non-empty output path")
        object.__setattr__(self, "path", _check_literal(path, "output path"))

    def to_gnuplot(self) -> Tuple[str, ...]:
        return (f"set term {self.term}", f"set output {_quote(self.path)}")


@dataclass(frozen=True)
class PS(_FileTerminal):
    """Postscript file."""

    term: ClassVar[str] = "postscript"


@dataclass(frozen=True)
class EPS(_FileTerminal):
    """Encapsulated Postscript file."""

    term: ClassVar[str] = "postscript eps"


@dataclass(frozen=True)
class PNG(_FileTerminal):
    """Portable Network Graphic file."""

    term: ClassVar[str] = "png"


@dataclass(frozen=True)
class PDF(_FileTerminal):
    term: ClassVar[str] = "pdf enhanced"


@dataclass(frozen=True)
class SVG(_FileTerminal):
    """Scalable Vector Graphic file, with dynamic sizing."""

    term: ClassVar[str] = "svg dynamic"


@dataclass(frozen=True)
class GIF(_FileTerminal):
    term: ClassVar[str] = "gif"


@dataclass(frozen=True)
class JPEG(_FileTerminal):
    term: ClassVar[str] = "jpeg"


@dataclass(frozen=True)
class Latex(_FileTerminal):
    """LaTeX picture environment."""

    term: ClassVar[str] = "latex"


Terminal = Union[Aqua, Windows, X11, PS, EPS, PNG, PDF, SVG, GIF, JPEG, Latex]


# ==============================================================================
# Colors and styles
# ==============================================================================

class NamedColor(Enum):
    """The gnuplot palette colors available by name."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    MAGENTA = "magenta"
    CYAN = "cyan"
    DARK_RED = "dark-red"
    DARK_BLUE = "dark-blue"
    DARK_GREEN = "dark-green"
    DARK_YELLOW = "dark-yellow"
    DARK_ORANGE = "dark-orange"
    DARK_MAGENTA = "dark-magenta"
    DARK_CYAN = "dark-cyan"
    LIGHT_RED = "light-red"
    LIGHT_BLUE = "light-blue"
    LIGHT_GREEN = "light-green"
    LIGHT_MAGENTA = "light-magenta"
    VIOLET = "violet"
    WHITE = "white"
    BROWN = "brown"
    GREY = "grey"
    DARK_GREY = "dark-grey"
    BLACK = "black"

    def to_gnuplot(self) -> str:
        return self.value


def _check_channel(name: str, value: Any) -> int:
    # bool is an Integral too, but True/False as a channel is always a mistake
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidColorError(f"RGB channel {name} must be an integer, got {value!r}")
    if not 0 <= int(value) <= 255:
        raise InvalidColorError(f"RGB channel {name} must be in [0, 255], got {value}")
    return int(value)


@dataclass(frozen=True)
class RGB:
    """A custom color; channels are 0-255."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _check_channel(name, getattr(self, name)))

    def to_gnuplot(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


Color = Union[NamedColor, RGB]


class Style(Enum):
    """How the points of a graph are drawn."""

    LINES = "lines"  # points interconnected by lines
    POINTS = "points"  # little cross symbols
    DOTS = "dots"  # pixel-sized dots

    def to_gnuplot(self) -> str:
        return f"with {self.value}"


# ==============================================================================
# Per-graph options
# ==============================================================================

@dataclass(frozen=True)
class Title:
    """Legend entry for a graph."""

    text: str
    kind: ClassVar[str] = "title"

    def __post_init__(self) -> None:
        _check_literal(self.text, "title")

    def to_gnuplot(self) -> str:
        return f"title {_quote(self.text)}"


@dataclass(frozen=True)
class StyleOption:
    style: Style
    kind: ClassVar[str] = "style"

    def __post_init__(self) -> None:
        if not isinstance(self.style, Style):
            raise TypeError(f"Expected Style, got {type(self.style).__name__}")

    def to_gnuplot(self) -> str:
        return self.style.to_gnuplot()


@dataclass(frozen=True)
class ColorOption:
    """Line color of a graph, or the color of its points/dots."""

    color: Color
    kind: ClassVar[str] = "color"

    def __post_init__(self) -> None:
        if not isinstance(self.color, (NamedColor, RGB)):
            raise TypeError(f"Expected NamedColor or RGB, got {type(self.color).__name__}")

    def to_gnuplot(self) -> str:
        return f"lc rgb {_quote(self.color.to_gnuplot())}"


Option = Union[Title, StyleOption, ColorOption]


# ==============================================================================
# Axis options (sampling domain of Python functions)
# ==============================================================================

@dataclass(frozen=True)
class _AxisRange:
    lo: float
    hi: float
    axis: ClassVar[str] = "x"
    kind: ClassVar[str] = "range"

    def __post_init__(self) -> None:
        if not float(self.lo) < float(self.hi):
            raise InvalidAxisOptionError(
                f"{type(self).__name__} needs lo < hi, got ({self.lo}, {self.hi})"
            )


@dataclass(frozen=True)
class _AxisPoints:
    points: Tuple[float, ...]
    axis: ClassVar[str] = "x"
    kind: ClassVar[str] = "points"

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if not points:
            raise InvalidAxisOptionError(f"{type(self).__name__} needs at least one point")
        object.__setattr__(self, "points", points)


@dataclass(frozen=True)
class _AxisStep:
    step: float
    axis: ClassVar[str] = "x"
    kind: ClassVar[str] = "step"

    def __post_init__(self) -> None:
        if not float(self.step) > 0.0:
            raise InvalidAxisOptionError(f"{type(self).__name__} needs a positive step, got {self.step}")


@dataclass(frozen=True)
class Range(_AxisRange):
    """Sample x over [lo, hi]."""


@dataclass(frozen=True)
class For(_AxisPoints):
    """Sample x exactly at ``points``."""


@dataclass(frozen=True)
class Step(_AxisStep):
    """Sample x every ``step``."""


@dataclass(frozen=True)
class RangeX(_AxisRange):
    pass


@dataclass(frozen=True)
class RangeY(_AxisRange):
    axis: ClassVar[str] = "y"


@dataclass(frozen=True)
class ForX(_AxisPoints):
    pass


@dataclass(frozen=True)
class ForY(_AxisPoints):
    axis: ClassVar[str] = "y"


@dataclass(frozen=True)
class StepX(_AxisStep):
    pass


@dataclass(frozen=True)
class StepY(_AxisStep):
    axis: ClassVar[str] = "y"


Option2D = Union[Range, For, Step]
Option3D = Union[RangeX, RangeY, ForX, ForY, StepX, StepY]
AxisOption = Union[Option2D, Option3D]


# ==============================================================================
# Datasets
# ==============================================================================

def encode_row(row: Sequence[Any], number_format: Callable[[Any], str] = format_number) -> str:
    """One dataset line: every coordinate prefixed by a single space."""
    return "".join(" " + number_format(v) for v in row)


def encode_rows(
    rows: Iterable[Sequence[Any]],
    number_format: Callable[[Any], str] = format_number,
) -> str:
    """Dataset file content: one line per row, each line newline-terminated."""
    return "".join(encode_row(row, number_format) + "\n" for row in rows)
