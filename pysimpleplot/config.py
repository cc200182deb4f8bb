"""Runtime configuration for plot calls.

Frozen dataclass in the same spirit as the style models: build one, pass it
to ``plot()``, never mutate it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional

from .models import _check_literal
from .utils import format_number

GNUPLOT_ENV_VAR = "PYSIMPLEPLOT_GNUPLOT"
DATA_DIR_ENV_VAR = "PYSIMPLEPLOT_DATA_DIR"
DEFAULT_GNUPLOT = "gnuplot"


def _default_gnuplot_path() -> str:
    return os.environ.get(GNUPLOT_ENV_VAR) or DEFAULT_GNUPLOT


@dataclass(frozen=True)
class PlotterConfig:
    """Settings shared by the graph preparer, synthesizer and runner.

    gnuplot_path: executable to run (``$PYSIMPLEPLOT_GNUPLOT`` or ``gnuplot``)
    data_dir: directory the dataset files are written to; it is prefixed onto
        each file name in the command, and gnuplot itself runs in the caller's
        working directory
    sample_start / sample_stop / sample_step: default sampling domain for
        Python functions, on every axis
    number_format: coordinate-to-text function used for dataset rows
    unique_filenames: name data files from a process-wide counter instead of
        the graph position, for callers sharing ``data_dir`` across processes
    timeout: seconds to wait for gnuplot, ``None`` waits forever
    """

    gnuplot_path: str = ""
    data_dir: str = "."
    sample_start: float = -5.0
    sample_stop: float = 5.0
    sample_step: float = 0.05
    number_format: Callable[[Any], str] = format_number
    unique_filenames: bool = False
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.gnuplot_path:
            object.__setattr__(self, "gnuplot_path", _default_gnuplot_path())
        _check_literal(os.fspath(self.data_dir), "data_dir")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "PlotterConfig":
        """Build a config from environment variables plus keyword overrides."""
        env = os.environ if environ is None else environ
        values: dict = {"gnuplot_path": env.get(GNUPLOT_ENV_VAR) or DEFAULT_GNUPLOT}
        if env.get(DATA_DIR_ENV_VAR):
            values["data_dir"] = env[DATA_DIR_ENV_VAR]
        values.update(overrides)
        return cls(**values)

    def with_options(self, **changes: Any) -> "PlotterConfig":
        return replace(self, **changes)
