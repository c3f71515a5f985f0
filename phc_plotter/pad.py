#!/usr/bin/env python3
"""
Pad - a rectangular sub-region of a canvas.
"""

from dataclasses import dataclass, field

from .pad_options import PadOptions
from .plot_types import Margin, Margins, Vertices, check_margins, check_vertices
from .root_backend import get_root


@dataclass
class Pad:
    """Name, title, normalized vertices, margins and options of a pad."""
    name: str = ""
    title: str = ""
    vertices: Vertices = field(default_factory=lambda: [0.0, 0.0, 1.0, 1.0])
    margins: Margins = field(default_factory=lambda: [0.02, 0.02, 0.15, 0.15])
    opts: PadOptions = field(default_factory=PadOptions)

    def __post_init__(self):
        self.vertices = [float(v) for v in self.vertices]
        self.margins = [float(m) for m in self.margins]
        check_vertices(self.vertices)
        check_margins(self.margins)

    @property
    def width(self) -> float:
        return abs(self.vertices[2] - self.vertices[0])

    @property
    def height(self) -> float:
        return abs(self.vertices[3] - self.vertices[1])

    def make_tpad(self):
        """
        Create the drawable pad.

        Returns:
            TPad with margins and options applied
        """
        x0, y0, x1, y1 = self.vertices
        tpad = get_root().TPad(self.name, self.title, x0, y0, x1, y1)
        tpad.SetTopMargin(self.margins[Margin.TOP])
        tpad.SetRightMargin(self.margins[Margin.RIGHT])
        tpad.SetBottomMargin(self.margins[Margin.BOTTOM])
        tpad.SetLeftMargin(self.margins[Margin.LEFT])
        self.opts.apply(tpad)
        return tpad
