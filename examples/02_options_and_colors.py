#!/usr/bin/env python3
"""Options and Colors Example

Demonstrates:
- Titles, styles and colors on several graphs in one plot
- Conflicting options (the first of each kind wins)
- Custom RGB colors
- Mixing gnuplot expressions with Python data
"""

import logging
import math

from pysimpleplot import (
    RGB,
    SVG,
    ColorOption,
    Data2D,
    Function2D,
    Gnuplot2D,
    NamedColor,
    Style,
    StyleOption,
    Title,
    build_command,
    plot,
)


def main():
    """Run the options example."""
    logging.basicConfig(level=logging.DEBUG)

    graphs = [
        Function2D(
            math.sin,
            options=[Title("sine"), ColorOption(NamedColor.DARK_MAGENTA)],
        ),
        Gnuplot2D(
            "2**cos(x)",
            options=[ColorOption(NamedColor.BLUE), Title("2**cos(x)")],
        ),
        Data2D(
            [(x / 2.0, math.exp(-abs(x) / 4.0)) for x in range(-10, 11)],
            options=[
                StyleOption(Style.POINTS),
                StyleOption(Style.DOTS),  # dropped: the first style wins
                ColorOption(RGB(255, 0, 128)),
                Title("samples"),
            ],
        ),
    ]

    # Inspect the command without running gnuplot
    print(build_command(SVG("options.svg"), graphs).text)

    print("gnuplot succeeded:", plot(SVG("options.svg"), graphs))


if __name__ == "__main__":
    main()
