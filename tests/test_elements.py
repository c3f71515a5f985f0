"""
Tests for the plot elements: ranges, rebinning, projections, styles,
shapes, legends and text boxes.
"""

import numpy as np
import pytest

import fake_root
from phc_plotter.base_options import base_plot_style, make_text_box
from phc_plotter.legend import Legend, LegendEntry
from phc_plotter.plot_input import PlotInput
from phc_plotter.plot_range import PlotRange
from phc_plotter.plot_types import Axis
from phc_plotter.projection import Projection
from phc_plotter.rebin import Rebin
from phc_plotter.shape import PlotShape, Shape
from phc_plotter.style import LabelStyle, PlotStyle, Style, TitleStyle
from phc_plotter.text_box import TextBox


# ============================================================================
# Ranges
# ============================================================================

class TestPlotRange:
    def test_apply_all_axes(self):
        plot_range = PlotRange((0.1, 2.0), (-1.0, 1.0), (1e-5, 10.0))
        hist = fake_root.make_th2d("h", np.ones((2, 2)))
        axes = (hist.GetXaxis(), hist.GetYaxis(), hist.GetZaxis())
        for axis, taxis in zip(Axis, axes):
            plot_range.apply(axis, taxis)
            assert taxis.range_user == plot_range.get(axis)

    def test_set_and_get(self):
        plot_range = PlotRange()
        plot_range.set(Axis.Y, [0.5, 1.5])
        assert plot_range.get(Axis.Y) == (0.5, 1.5)
        assert plot_range.as_tuple() == ((0.0, 1.0), (0.5, 1.5), (0.0, 1.0))


# ============================================================================
# Rebinning and projections
# ============================================================================

class TestRebin:
    def test_merge_matches_sum_of_clone(self):
        values = np.arange(1.0, 13.0)
        hist = fake_root.make_th1d("h", values)
        original = hist.Clone("original")

        Rebin(Axis.X, 3, True).apply(hist)

        assert hist.GetNbinsX() == 4
        for ibin in range(1, 5):
            expected = sum(original.GetBinContent(j) for j in range((ibin - 1) * 3 + 1, ibin * 3 + 1))
            assert hist.GetBinContent(ibin) == pytest.approx(expected)
        # the clone is untouched
        assert original.GetNbinsX() == 12

    def test_two_dimensional_axis_choice(self):
        hist = fake_root.make_th2d("h", np.ones((4, 6)))
        Rebin(Axis.Y, 2, True).apply(hist)
        assert hist.GetNbinsX() == 4
        assert hist.GetNbinsY() == 3
        assert hist.GetBinContent(1, 1) == pytest.approx(2.0)

    def test_count_must_be_positive(self):
        with pytest.raises(ValueError):
            Rebin(Axis.X, 0, True)


class TestProjection:
    def test_integrates_orthogonal_range(self):
        contents = np.array([[1.0, 2.0, 3.0],
                             [4.0, 5.0, 6.0]])
        hist = fake_root.make_th2d("h2", contents)

        proj = Projection(Axis.X, (1.0, 2.5)).apply(hist)
        # y bins 2 and 3 summed for each x bin
        assert proj.GetName() == "h2_projx"
        assert proj.GetBinContent(1) == pytest.approx(5.0)
        assert proj.GetBinContent(2) == pytest.approx(11.0)

        proj_y = Projection(Axis.Y, (0.0, 0.5), rename="hProjY").apply(hist)
        assert proj_y.GetName() == "hProjY"
        assert [proj_y.GetBinContent(i) for i in (1, 2, 3)] == pytest.approx([1.0, 2.0, 3.0])

    def test_style_and_rebin(self):
        hist = fake_root.make_th2d("h2", np.ones((4, 2)))
        projection = Projection(Axis.X, (0.0, 2.0), style=PlotStyle(899, 24),
                                rebin=Rebin(Axis.X, 2, True))
        proj = projection.apply(hist, base_plot_style())
        assert proj.GetNbinsX() == 2
        assert proj.GetMarkerStyle() == 24
        assert proj.GetLineColor() == 899

    def test_validation(self):
        with pytest.raises(ValueError):
            Projection(Axis.Z)
        with pytest.raises(ValueError):
            Projection(Axis.X, (2.0, 1.0))


# ============================================================================
# Styles
# ============================================================================

class TestStyle:
    def test_apply_to_plottable(self):
        style = Style(PlotStyle(859, 25, 0, 1, 2),
                      labels=LabelStyle(1, 42, 0.03),
                      titles=[TitleStyle(1, 1, 42, 0.04, 1.0),
                              TitleStyle(1, 1, 42, 0.04, 1.2),
                              TitleStyle(1, 1, 42, 0.04, 1.2)])
        hist = fake_root.make_th1d("h", [1.0])
        style.apply_to_plottable(hist)

        assert hist.GetMarkerColor() == 859
        assert hist.GetMarkerStyle() == 25
        assert hist.GetLineWidth() == 2
        assert hist.GetXaxis().GetTitleOffset() == 1.0
        assert hist.GetYaxis().GetTitleOffset() == 1.2
        assert hist.GetYaxis().GetLabelSize() == 0.03
        assert hist.GetXaxis().centered

    def test_per_axis_styles_need_three(self):
        with pytest.raises(ValueError):
            Style(titles=[TitleStyle(), TitleStyle()])

    def test_copy_is_independent(self):
        style = base_plot_style()
        copy = style.copy()
        copy.set_plot_style(PlotStyle(2, 20))
        copy.set_title_style(TitleStyle(size=0.08), Axis.X)
        assert style.plot.color == 1
        assert style.titles[Axis.X].size == 0.04


# ============================================================================
# Shapes, legends and text boxes
# ============================================================================

class TestShapes:
    def test_line_box_ellipse(self):
        shape = Shape((0.0, 2.0), (1.0, 3.0))
        line = shape.make_tline()
        assert line.coords == (0.0, 1.0, 2.0, 3.0)
        assert shape.make_tbox().coords == (0.0, 1.0, 2.0, 3.0)

        ellipse = shape.make_tellipse()
        assert ellipse.center == (1.0, 2.0)
        assert ellipse.radii == (1.0, 1.0)

    def test_ellipse_extent(self):
        shape = Shape.ellipse((1.0, 1.0), (0.5, 0.25))
        assert shape.x_range == pytest.approx((0.5, 1.5))
        assert shape.center == (1.0, 1.0)

    def test_plot_shape_line_over_range(self):
        unity = PlotShape(Shape((0.0, 10.0), (1.0, 1.0)), PlotStyle(923, 1, 0, 9, 2))
        line = unity.make_line((0.5, 2.5))
        assert line.coords == (0.5, 1.0, 2.5, 1.0)
        assert line.GetLineStyle() == 9
        assert line.GetLineWidth() == 2
        # the shape itself keeps its own range
        assert unity.shape.x_range == (0.0, 10.0)


def test_legend_entries_in_order():
    first = fake_root.make_th1d("a", [1.0])
    second = fake_root.make_th1d("b", [1.0])
    legend = Legend([0.3, 0.1, 0.5, 0.2], [LegendEntry(first, "A")], "header")
    legend.add_entry(LegendEntry(second, "B", "L"))

    tlegend = legend.make_legend()
    assert tlegend.header == "header"
    assert [(obj, label, opt) for obj, label, opt in tlegend.entries] == [
        (first, "A", "PF"), (second, "B", "L")]


def test_text_box_lines():
    box = TextBox(["line one"], [0.1, 0.1, 0.3, 0.2])
    box.add_text("line two")
    pave = box.make_tpavetext()
    assert pave.lines == ["line one", "line two"]
    assert pave.option == "NDC NB"


def test_species_text_box():
    pp = make_text_box(0)
    pau = make_text_box(1)
    assert pp.text == ["#bf{#it{PHENIX}} Run-15", "p+p collisions"]
    assert pau.text[-1] == "p+Au collisions"
    assert pp.vertices[3] == pytest.approx(0.1 + 2 * 0.05)


def test_plot_input_output_name():
    assert PlotInput("f.root", "hObject").output_name == "hObject"
    assert PlotInput("f.root", "hObject", "hRenamed").output_name == "hRenamed"
