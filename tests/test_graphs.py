"""Tests for graph construction and prepare_graph in graphs.py."""

import logging
import math

import numpy as np
import pytest

from pysimpleplot.config import PlotterConfig
from pysimpleplot.exceptions import InvalidAxisOptionError, InvalidGraphError
from pysimpleplot.graphs import (
    Data2D,
    Data3D,
    Function2D,
    Function3D,
    Gnuplot2D,
    Gnuplot3D,
    PreparedGraph,
    data_graph,
    expression_graph,
    function_graph,
    prepare_graph,
)
from pysimpleplot.models import (
    ColorOption,
    For,
    ForY,
    NamedColor,
    Range,
    RangeX,
    Step,
    StepY,
    Style,
    StyleOption,
    Title,
)


def _rows(prepared: PreparedGraph):
    return [line.split() for line in prepared.source.splitlines()]


class TestGraphConstruction:
    """Tests for graph dataclasses and factory functions."""

    def test_options_frozen_to_tuples(self):
        """Test that lists given to a graph are stored as tuples."""
        g = Data2D([[1, 2]], options=[Title("t")])
        assert g.rows == ((1, 2),)
        assert g.options == (Title("t"),)

    def test_dimensions(self):
        """Test the dimension class attribute."""
        assert Function2D(math.sin).dimension == 2
        assert Gnuplot3D("x*y").dimension == 3

    def test_row_width_checked(self):
        """Test that rows of the wrong width are refused with their index."""
        with pytest.raises(InvalidGraphError, match="row 1"):
            Data2D([(1, 2), (1, 2, 3)])
        with pytest.raises(InvalidGraphError):
            Data3D([(1, 2)])

    def test_function_must_be_callable(self):
        """Test that Function2D refuses a non-callable."""
        with pytest.raises(InvalidGraphError):
            Function2D("sin(x)")

    def test_expression_must_be_non_empty(self):
        """Test that a blank expression is refused."""
        with pytest.raises(InvalidGraphError):
            Gnuplot2D("   ")

    def test_2d_graph_rejects_y_axis_option(self):
        """Test that a 2D graph refuses a y-axis option."""
        with pytest.raises(InvalidAxisOptionError):
            Function2D(math.sin, axis_options=[StepY(0.1)])

    def test_axis_option_type_checked(self):
        """Test that a rendering option is refused among axis options."""
        with pytest.raises(TypeError):
            Function2D(math.sin, axis_options=[Title("t")])

    def test_rendering_option_type_checked(self):
        """Test that a bare Style or string is refused where an option is expected."""
        with pytest.raises(InvalidGraphError, match="Style"):
            Data2D([(0, 0)], options=[Style.LINES])
        with pytest.raises(TypeError):
            Gnuplot2D("x", options=["title \"x\""])
        with pytest.raises(TypeError):
            Function2D(math.sin, options=[Range(0, 1)])

    def test_factories(self):
        """Test that the factories pick the graph class from dimension and row width."""
        assert isinstance(function_graph(math.sin), Function2D)
        assert isinstance(function_graph(lambda x, y: x, dimension=3), Function3D)
        assert isinstance(data_graph([(1, 2)]), Data2D)
        assert isinstance(data_graph([(1, 2, 3)]), Data3D)
        assert isinstance(expression_graph("x*y"), Gnuplot3D)
        assert isinstance(expression_graph("x", dimension=2), Gnuplot2D)

    def test_factory_errors(self):
        """Test factory errors for empty data, wide rows and unknown dimensions."""
        with pytest.raises(InvalidGraphError):
            data_graph([])
        with pytest.raises(InvalidGraphError):
            data_graph([(1, 2, 3, 4)])
        with pytest.raises(InvalidGraphError):
            function_graph(math.sin, dimension=4)


class TestPrepareExpression:
    """Tests for gnuplot expression graphs."""

    def test_inline_and_unmodified(self):
        """Test that the expression is passed through inline."""
        prepared = prepare_graph(Gnuplot2D("2**cos(x)", options=[ColorOption(NamedColor.BLUE)]))
        assert prepared == PreparedGraph('lc rgb "blue"', "2**cos(x)", inline=True)

    def test_no_options(self):
        """Test that no options give an empty options text."""
        assert prepare_graph(Gnuplot3D("x*y")).options_text == ""


class TestPrepareData:
    """Tests for literal dataset graphs."""

    def test_file_backed(self):
        """Test that data graphs are file-backed with the row encoding."""
        prepared = prepare_graph(Data2D([(1, 2), (3, 4)], options=[Title("Sample Data")]))
        assert prepared.inline is False
        assert prepared.source == " 1 2\n 3 4\n"
        assert prepared.options_text == 'title "Sample Data"'

    def test_style_not_forced(self):
        """Test that data graphs keep the caller's style."""
        prepared = prepare_graph(Data2D([(0, 0)], options=[StyleOption(Style.POINTS)]))
        assert prepared.options_text == "with points"

    def test_triples(self):
        """Test the encoding of 3D rows."""
        assert prepare_graph(Data3D([(1, 2, 3), (4, 5, 6)])).source == " 1 2 3\n 4 5 6\n"

    def test_numpy_rows(self):
        """Test that numpy arrays are accepted as rows."""
        prepared = prepare_graph(Data2D(np.array([[0.5, 1.5]])))
        assert prepared.source == " 0.5 1.5\n"

    def test_custom_number_format(self):
        """Test that config.number_format formats every coordinate."""
        config = PlotterConfig(number_format=lambda v: f"{v:g}")
        assert prepare_graph(Data2D([(1.0, 2.5)]), config).source == " 1 2.5\n"

    def test_axis_options_ignored(self, caplog):
        """Test that axis options on data are ignored with a debug log."""
        with caplog.at_level(logging.DEBUG, logger="pysimpleplot.graphs"):
            prepared = prepare_graph(Data2D([(1, 2)], axis_options=[Range(0, 1)]))
        assert prepared.source == " 1 2\n"
        assert "ignored" in caplog.text


class TestPrepareFunction2D:
    """Tests for sampled 2D functions."""

    def test_default_grid(self):
        """Test the default 201-point grid over [-5, 5]."""
        prepared = prepare_graph(Function2D(lambda x: x * 2))
        rows = _rows(prepared)
        assert len(rows) == 201
        assert rows[0] == ["-5.0", "-10.0"]
        assert rows[-1] == ["5.0", "10.0"]
        assert prepared.inline is False

    def test_forces_lines(self):
        """Test that 2D functions are drawn with lines."""
        assert prepare_graph(Function2D(math.sin)).options_text == "with lines"

    def test_forces_lines_over_caller_style(self):
        """Test that the caller's style loses to the forced lines style."""
        prepared = prepare_graph(
            Function2D(math.sin, options=[StyleOption(Style.POINTS), Title("sine")])
        )
        assert prepared.options_text == 'with lines title "sine"'

    def test_range_and_step(self):
        """Test that Range and Step set the sampling domain."""
        prepared = prepare_graph(Function2D(lambda x: 0, axis_options=[Range(0, 1), Step(0.5)]))
        assert _rows(prepared) == [["0.0", "0"], ["0.5", "0"], ["1.0", "0"]]

    def test_explicit_points_override_range(self):
        """Test that For points win over Range."""
        prepared = prepare_graph(
            Function2D(lambda x: x, axis_options=[Range(0, 1), For([3, 4])])
        )
        assert _rows(prepared) == [["3.0", "3.0"], ["4.0", "4.0"]]

    def test_first_axis_option_of_a_kind_wins(self):
        """Test that the first Range wins when two are given."""
        prepared = prepare_graph(
            Function2D(lambda x: 1, axis_options=[Range(0, 1), Range(10, 20), Step(1)])
        )
        assert _rows(prepared) == [["0.0", "1"], ["1.0", "1"]]

    def test_config_domain(self):
        """Test that the config supplies the default domain."""
        config = PlotterConfig(sample_start=0, sample_stop=2, sample_step=1)
        prepared = prepare_graph(Function2D(lambda x: x), config)
        assert len(_rows(prepared)) == 3

    def test_pole_becomes_nan(self, caplog):
        """Test that a ZeroDivisionError at one sample yields a nan row, not a failure."""
        with caplog.at_level(logging.DEBUG, logger="pysimpleplot.graphs"):
            prepared = prepare_graph(Function2D(lambda x: 1 / x))
        rows = _rows(prepared)
        assert len(rows) == 201
        assert rows[100] == ["0.0", "nan"]
        assert rows[0] == ["-5.0", "-0.2"]
        assert "ZeroDivisionError" in caplog.text

    def test_domain_error_becomes_nan(self):
        """Test that math.log outside its domain yields nan for those points only."""
        prepared = prepare_graph(Function2D(math.log, axis_options=[For([-1, 0, 1])]))
        assert _rows(prepared) == [["-1.0", "nan"], ["0.0", "nan"], ["1.0", "0.0"]]

    def test_other_errors_propagate(self):
        """Test that errors other than arithmetic and domain errors are not hidden."""
        with pytest.raises(AttributeError):
            prepare_graph(Function2D(lambda x: x.missing))


class TestPrepareFunction3D:
    """Tests for sampled 3D functions."""

    def test_default_grid_size(self):
        """Test the 201 x 201 default grid."""
        prepared = prepare_graph(Function3D(lambda x, y: x * y))
        assert len(prepared.source.splitlines()) == 201 * 201

    def test_no_forced_style(self):
        """Test that 3D functions keep the caller's style."""
        prepared = prepare_graph(Function3D(lambda x, y: 0, options=[StyleOption(Style.DOTS)]))
        assert prepared.options_text == "with dots"
        assert prepare_graph(Function3D(lambda x, y: 0)).options_text == ""

    def test_x_outer_loop(self):
        """Test that x is the outer loop of the sample grid."""
        prepared = prepare_graph(
            Function3D(lambda x, y: x + y, axis_options=[For([0, 1]), ForY([10, 20])])
        )
        assert _rows(prepared) == [
            ["0.0", "10.0", "10.0"],
            ["0.0", "20.0", "20.0"],
            ["1.0", "10.0", "11.0"],
            ["1.0", "20.0", "21.0"],
        ]

    def test_independent_axes(self):
        """Test that x and y axis options apply independently."""
        prepared = prepare_graph(
            Function3D(lambda x, y: 0, axis_options=[RangeX(0, 1), StepY(5)])
        )
        rows = _rows(prepared)
        xs = sorted({r[0] for r in rows})
        ys = sorted({r[1] for r in rows}, key=float)
        assert len(xs) == 21
        assert ys == ["-5.0", "0.0", "5.0"]

    def test_undefined_points_become_nan(self):
        """Test that a division by zero in a 3D function leaves a nan z value."""
        prepared = prepare_graph(
            Function3D(lambda x, y: x / y, axis_options=[For([1]), ForY([0, 2])])
        )
        assert _rows(prepared) == [["1.0", "0.0", "nan"], ["1.0", "2.0", "0.5"]]


class TestPrepareErrors:
    """Tests for prepare_graph argument checking."""

    def test_not_a_graph(self):
        """Test that a non-graph argument is refused."""
        with pytest.raises(InvalidGraphError):
            prepare_graph("x*y")
