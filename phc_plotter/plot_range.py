#!/usr/bin/env python3
"""
PlotRange - per-axis display or integration windows.
"""

from dataclasses import dataclass
from typing import Tuple

from .plot_types import Axis, Interval


@dataclass
class PlotRange:
    """Closed intervals for the x, y and z axes."""
    x: Interval = (0.0, 1.0)
    y: Interval = (0.0, 1.0)
    z: Interval = (0.0, 1.0)

    def get(self, axis: Axis) -> Interval:
        """Return the interval for an axis."""
        return (self.x, self.y, self.z)[Axis(axis)]

    def set(self, axis: Axis, interval: Interval) -> None:
        """Replace the interval for an axis."""
        axis = Axis(axis)
        if axis == Axis.X:
            self.x = tuple(interval)
        elif axis == Axis.Y:
            self.y = tuple(interval)
        else:
            self.z = tuple(interval)

    def apply(self, axis: Axis, taxis) -> None:
        """
        Restrict a histogram axis to the stored interval.

        Args:
            axis: Which stored interval to use
            taxis: TAxis to modify
        """
        low, high = self.get(axis)
        taxis.SetRangeUser(low, high)

    def as_tuple(self) -> Tuple[Interval, Interval, Interval]:
        return self.x, self.y, self.z
