#!/usr/bin/env python3
"""
Style - colors, markers, lines, fills and text attributes.

This module handles:
- Per-series plot attributes (color, marker, fill, line style and width)
- Text attributes for legends and text boxes
- Per-axis label and title attributes
- Applying all of the above to histograms, graphs, lines and text boxes
"""

import copy
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .plot_types import Axis


@dataclass
class PlotStyle:
    color: int = 1
    marker: int = 1
    fill: int = 0
    line: int = 1
    width: int = 1


@dataclass
class TextStyle:
    color: int = 1
    font: int = 42
    align: int = 12
    spacing: float = 0.05


@dataclass
class LabelStyle:
    color: int = 1
    font: int = 42
    size: float = 0.04
    offset: float = 0.005


@dataclass
class TitleStyle:
    color: int = 1
    center: int = 0
    font: int = 42
    size: float = 0.04
    offset: float = 1.0


def _per_axis(value, factory) -> list:
    if value is None:
        return [factory() for _ in Axis]
    if isinstance(value, (list, tuple)):
        if len(value) != len(Axis):
            raise ValueError(f"expected one style per axis, got {len(value)}")
        return [copy.copy(v) for v in value]
    return [copy.copy(value) for _ in Axis]


class Style:
    """Bundle of plot, text, label and title attributes."""

    def __init__(self, plot: PlotStyle = None, text: TextStyle = None,
                 labels: Union[LabelStyle, Sequence[LabelStyle]] = None,
                 titles: Union[TitleStyle, Sequence[TitleStyle]] = None):
        """
        Args:
            plot: Marker/line/fill attributes
            text: Text attributes for legends and text boxes
            labels: One label style for all axes, or one per axis (x, y, z)
            titles: One title style for all axes, or one per axis (x, y, z)
        """
        self.plot = copy.copy(plot) if plot is not None else PlotStyle()
        self.text = copy.copy(text) if text is not None else TextStyle()
        self.labels: List[LabelStyle] = _per_axis(labels, LabelStyle)
        self.titles: List[TitleStyle] = _per_axis(titles, TitleStyle)

    def copy(self) -> 'Style':
        return copy.deepcopy(self)

    def set_plot_style(self, plot: PlotStyle) -> None:
        self.plot = copy.copy(plot)

    def set_text_style(self, text: TextStyle) -> None:
        self.text = copy.copy(text)

    def set_label_style(self, label: LabelStyle, axis: Axis) -> None:
        self.labels[Axis(axis)] = copy.copy(label)

    def set_title_style(self, title: TitleStyle, axis: Axis) -> None:
        self.titles[Axis(axis)] = copy.copy(title)

    def set_label_styles(self, labels: Union[LabelStyle, Sequence[LabelStyle]]) -> None:
        self.labels = _per_axis(labels, LabelStyle)

    def set_title_styles(self, titles: Union[TitleStyle, Sequence[TitleStyle]]) -> None:
        self.titles = _per_axis(titles, TitleStyle)

    def _apply_plot_attributes(self, obj) -> None:
        obj.SetFillColor(self.plot.color)
        obj.SetFillStyle(self.plot.fill)
        obj.SetLineColor(self.plot.color)
        obj.SetLineStyle(self.plot.line)
        obj.SetLineWidth(self.plot.width)
        obj.SetMarkerColor(self.plot.color)
        obj.SetMarkerStyle(self.plot.marker)

    def _apply_axis(self, axis: Axis, taxis) -> None:
        title = self.titles[axis]
        label = self.labels[axis]
        taxis.SetTitleColor(title.color)
        taxis.CenterTitle(bool(title.center))
        taxis.SetTitleFont(title.font)
        taxis.SetTitleSize(title.size)
        taxis.SetTitleOffset(title.offset)
        taxis.SetLabelColor(label.color)
        taxis.SetLabelFont(label.font)
        taxis.SetLabelSize(label.size)
        taxis.SetLabelOffset(label.offset)

    def apply_to_plottable(self, obj) -> None:
        """
        Style a histogram, graph or function along with its axes.

        Args:
            obj: TH1/TH2/TGraph/TF1-like object
        """
        self._apply_plot_attributes(obj)
        self._apply_axis(Axis.X, obj.GetXaxis())
        self._apply_axis(Axis.Y, obj.GetYaxis())
        if hasattr(obj, 'GetZaxis') and obj.GetZaxis():
            self._apply_axis(Axis.Z, obj.GetZaxis())

    def apply_to_line(self, line) -> None:
        """Style a TLine, TBox or TEllipse."""
        line.SetLineColor(self.plot.color)
        line.SetLineStyle(self.plot.line)
        line.SetLineWidth(self.plot.width)
        if hasattr(line, 'SetFillStyle'):
            line.SetFillColor(self.plot.color)
            line.SetFillStyle(self.plot.fill)

    def apply_to_text_box(self, box) -> None:
        """Style a TPaveText or TLegend."""
        box.SetFillColor(self.plot.color)
        box.SetFillStyle(self.plot.fill)
        box.SetLineColor(self.plot.color)
        box.SetLineStyle(self.plot.line)
        box.SetTextColor(self.text.color)
        box.SetTextFont(self.text.font)
        box.SetTextAlign(self.text.align)
