"""Pytest fixtures shared by the pysimpleplot tests.

No real gnuplot is needed: ``fake_gnuplot`` replaces ``subprocess.run`` inside
the runner module with a recorder that returns a configurable exit status,
and ``workdir`` moves each test into its own temporary directory so the
``plot<N>.dat`` files land somewhere disposable.
"""

import subprocess
from pathlib import Path
from typing import List

import pytest

from pysimpleplot import runner


class FakeGnuplot:
    """Records every argv passed to subprocess.run and answers with ``returncode``."""

    def __init__(self):
        self.calls: List[List[str]] = []
        self.kwargs: List[dict] = []
        self.returncode = 0
        self.raise_on_start = None
        self.seen_files = []

    def __call__(self, argv, **kwargs):
        if self.raise_on_start is not None:
            raise self.raise_on_start
        self.calls.append(list(argv))
        self.kwargs.append(kwargs)
        # files present when gnuplot starts
        self.seen_files.append(sorted(p.name for p in Path.cwd().iterdir()))
        return subprocess.CompletedProcess(argv, self.returncode)

    @property
    def last_command(self) -> str:
        return self.calls[-1][2]


@pytest.fixture
def fake_gnuplot(monkeypatch):
    fake = FakeGnuplot()
    monkeypatch.setattr(runner.subprocess, "run", fake)
    return fake


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path
