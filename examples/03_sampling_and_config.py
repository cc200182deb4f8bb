#!/usr/bin/env python3
"""Sampling and Configuration Example

Demonstrates:
- Axis options controlling where Python functions are sampled
- 3D functions (splot)
- PlotterConfig: gnuplot location, data directory, unique data file names
"""

import math

from pysimpleplot import (
    PDF,
    Function2D,
    Function3D,
    PlotterConfig,
    Range,
    RangeX,
    RangeY,
    Step,
    StepX,
    StepY,
    Title,
    plot,
)


def main():
    """Run the sampling example."""
    config = PlotterConfig.from_env(
        data_dir="plot-data",
        unique_filenames=True,
        number_format=lambda v: f"{v:.6g}",
    )

    wave = Function2D(
        lambda x: math.sin(5 * x) / (1 + x * x),
        options=[Title("damped wave")],
        axis_options=[Range(-2 * math.pi, 2 * math.pi), Step(0.01)],
    )
    plot(PDF("wave.pdf"), wave, config)

    saddle = Function3D(
        lambda x, y: x * x - y * y,
        options=[Title("saddle")],
        axis_options=[RangeX(-1, 1), RangeY(-1, 1), StepX(0.1), StepY(0.1)],
    )
    plot(PDF("saddle.pdf"), saddle, config)


if __name__ == "__main__":
    main()
