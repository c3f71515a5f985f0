#!/usr/bin/env python3
"""
Rebin - merge neighbouring bins of a histogram along one axis.
"""

from dataclasses import dataclass

from .plot_types import Axis


@dataclass
class Rebin:
    """Axis, number of bins to merge, and whether rebinning is on."""
    axis: Axis = Axis.X
    num: int = 2
    rebin: bool = False

    def __post_init__(self):
        self.axis = Axis(self.axis)
        if self.num < 1:
            raise ValueError(f"rebin count must be >= 1, got {self.num}")

    def apply(self, hist) -> None:
        """
        Rebin a 1D, 2D or 3D histogram in place.

        1D histograms are always merged along x; the axis only matters
        for 2D and 3D histograms.

        Args:
            hist: Histogram to rebin
        """
        dimension = hist.GetDimension()
        if dimension == 1:
            hist.Rebin(self.num)
        elif dimension == 2:
            if self.axis == Axis.Y:
                hist.RebinY(self.num)
            else:
                hist.RebinX(self.num)
        else:
            if self.axis == Axis.Z:
                hist.RebinZ(self.num)
            elif self.axis == Axis.Y:
                hist.RebinY(self.num)
            else:
                hist.RebinX(self.num)
