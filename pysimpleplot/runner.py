"""Runs a synthesized command through the gnuplot executable.

Dataset files are written first, then ``gnuplot -e <command>`` is started
once. A non-zero exit status is a normal ``False`` result; failures to write
a file or to start gnuplot at all propagate to the caller.
"""

from __future__ import annotations

import logging
import subprocess
import threading
from pathlib import Path
from typing import Optional

from .command import PlotCommand
from .config import PlotterConfig
from .exceptions import EngineNotFoundError

logger = logging.getLogger(__name__)

# Serializes write+invoke so two threads never overwrite each other's
# plot<N>.dat before gnuplot has read it.
_RUN_LOCK = threading.Lock()


def write_data_files(command: PlotCommand) -> None:
    """Write every ``(filename, content)`` pair of ``command``; OSError propagates."""
    for filename, content in command.files:
        path = Path(filename)
        if path.parent != Path("."):
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {len(content)} bytes to {path}")


class GnuplotRunner:
    """Executes ``PlotCommand`` objects with the configured gnuplot binary."""

    def __init__(self, config: Optional[PlotterConfig] = None) -> None:
        self.config = config or PlotterConfig()

    def argv(self, command: PlotCommand) -> list[str]:
        return [self.config.gnuplot_path, "-e", command.text]

    def run(self, command: PlotCommand) -> bool:
        """Write the data files, run gnuplot and report whether it exited with 0.

        Raises:
            OSError: If a data file cannot be written (gnuplot is not started).
            EngineNotFoundError: If the gnuplot executable cannot be started.
            subprocess.TimeoutExpired: If ``config.timeout`` elapses.
        """
        with _RUN_LOCK:
            write_data_files(command)
            logger.debug(f"Running {self.config.gnuplot_path} -e {command.text!r}")
            try:
                result = subprocess.run(self.argv(command), timeout=self.config.timeout)
            except (FileNotFoundError, PermissionError) as e:
                raise EngineNotFoundError(
                    f"Cannot start gnuplot at '{self.config.gnuplot_path}': {e}. "
                    f"Install gnuplot or set PYSIMPLEPLOT_GNUPLOT."
                ) from e

        if result.returncode != 0:
            logger.warning(f"gnuplot exited with status {result.returncode}")
            return False
        return True


def run_command(command: PlotCommand, config: Optional[PlotterConfig] = None) -> bool:
    """Shortcut for ``GnuplotRunner(config).run(command)``."""
    return GnuplotRunner(config).run(command)
