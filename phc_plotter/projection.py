#!/usr/bin/env python3
"""
Projection - reduce a 2D histogram to 1D.
"""

from dataclasses import dataclass, field
from typing import Optional

from .plot_types import Axis, Interval
from .rebin import Rebin
from .style import PlotStyle, Style


@dataclass
class Projection:
    """
    Project a 2D histogram onto one axis.

    Bins of the orthogonal axis between FindBin(range[0]) and
    FindBin(range[1]) are summed into the result.
    """
    axis: Axis = Axis.X
    range: Interval = (0.0, 1.0)
    rename: str = ""
    legend: str = ""
    draw: str = ""
    style: PlotStyle = field(default_factory=PlotStyle)
    rebin: Rebin = field(default_factory=Rebin)

    def __post_init__(self):
        self.axis = Axis(self.axis)
        if self.axis == Axis.Z:
            raise ValueError("a 2D histogram can only be projected onto x or y")
        if self.range[0] > self.range[1]:
            raise ValueError(f"projection range {self.range} is not ordered")

    def apply(self, hist, base_style: Optional[Style] = None):
        """
        Make the projected histogram.

        Args:
            hist: 2D histogram
            base_style: Style whose plot attributes are replaced by this
                        projection's before being applied

        Returns:
            The 1D projection, named by rename (or "<name>_proj<axis>")
        """
        name = self.rename or f"{hist.GetName()}_proj{self.axis.name.lower()}"
        if self.axis == Axis.X:
            other = hist.GetYaxis()
            first, last = other.FindBin(self.range[0]), other.FindBin(self.range[1])
            proj = hist.ProjectionX(name, first, last)
        else:
            other = hist.GetXaxis()
            first, last = other.FindBin(self.range[0]), other.FindBin(self.range[1])
            proj = hist.ProjectionY(name, first, last)

        if self.rebin.rebin:
            self.rebin.apply(proj)

        style = base_style.copy() if base_style is not None else Style()
        style.set_plot_style(self.style)
        style.apply_to_plottable(proj)
        return proj
