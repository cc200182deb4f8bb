#!/usr/bin/env python3
"""Quick Start Example

This example shows the most basic usage of pysimpleplot:
- Plotting a Python function in an X11 window
- Plotting a list of (x, y) pairs into a PNG file
- Passing a raw gnuplot expression
"""

import math
import sys

from pysimpleplot import PNG, X11, plot


def main():
    """Run the quick start example."""
    # A bare callable is sampled on [-5, 5] and drawn with lines
    ok = plot(X11(), lambda x: math.sin(x) * math.cos(x))

    # A list of pairs becomes one dataset (written to plot1.dat)
    squares = [(x, x * x) for x in range(-10, 11)]
    ok = plot(PNG("squares.png"), squares) and ok

    # A string is handed to gnuplot untouched, as a 3D surface
    ok = plot(X11(), "x*y") and ok

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
