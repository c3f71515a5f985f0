#!/usr/bin/env python3
"""
Shapes drawn alongside histograms: lines, boxes and ellipses.
"""

import copy
import math
from dataclasses import dataclass, field
from typing import Optional

from .plot_types import Interval
from .root_backend import get_root
from .style import PlotStyle, Style

DEFAULT_PHI_RANGE = (0.0, 360.0)


class Shape:
    """Geometry of a line, box or ellipse in user coordinates."""

    def __init__(self, x_range: Interval = (0.0, 1.0), y_range: Interval = (0.0, 1.0)):
        """
        Define a line (or box) from (x0, y0) to (x1, y1).

        The circumscribed ellipse is kept as well so the same shape
        can be drawn as any of the three primitives.
        """
        x_radius = 0.5 * abs(x_range[1] - x_range[0])
        y_radius = 0.5 * abs(y_range[1] - y_range[0])
        self.x_range = tuple(x_range)
        self.y_range = tuple(y_range)
        self.center = (x_range[0] + x_radius, y_range[0] + y_radius)
        self.radii = (x_radius, y_radius)
        self.phi_range = DEFAULT_PHI_RANGE
        self.theta = 0.0

    @classmethod
    def ellipse(cls, center, radii, phi_range: Interval = DEFAULT_PHI_RANGE,
                theta: float = 0.0) -> 'Shape':
        """
        Define an ellipse; the x/y ranges become its bounding extent.

        Args:
            center: (x, y) of the center
            radii: (r1, r2)
            phi_range: Start and stop angle in degrees
            theta: Rotation in degrees
        """
        th_rad = math.radians(theta)
        th_inv = math.pi - th_rad
        x_max = max(radii[0] * math.cos(th_rad), radii[1] * math.cos(th_inv))
        y_max = max(radii[0] * math.sin(th_rad), radii[1] * math.sin(th_inv))

        shape = cls()
        shape.x_range = (center[0] - x_max, center[0] + x_max)
        shape.y_range = (center[1] - y_max, center[1] + y_max)
        shape.center = tuple(center)
        shape.radii = tuple(radii)
        shape.phi_range = tuple(phi_range)
        shape.theta = theta
        return shape

    def make_tline(self):
        return get_root().TLine(self.x_range[0], self.y_range[0],
                                self.x_range[1], self.y_range[1])

    def make_tbox(self):
        return get_root().TBox(self.x_range[0], self.y_range[0],
                               self.x_range[1], self.y_range[1])

    def make_tellipse(self):
        return get_root().TEllipse(self.center[0], self.center[1],
                                   self.radii[0], self.radii[1],
                                   self.phi_range[0], self.phi_range[1],
                                   self.theta)


@dataclass
class PlotShape:
    """A shape plus how and where a routine should draw it."""
    shape: Shape = field(default_factory=Shape)
    style: PlotStyle = field(default_factory=PlotStyle)
    pad: str = ""
    legend: str = ""

    def make_line(self, x_range: Optional[Interval] = None):
        """
        Build and style a TLine for this shape.

        Args:
            x_range: Draw over this x-range instead of the shape's own
        """
        shape = self.shape
        if x_range is not None:
            shape = copy.copy(self.shape)
            shape.x_range = tuple(x_range)
        line = shape.make_tline()
        Style(plot=self.style).apply_to_line(line)
        return line
