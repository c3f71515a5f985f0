#!/usr/bin/env python3
"""
TextBox - a block of annotation text.
"""

from dataclasses import dataclass, field

from .plot_types import TextList, Vertices
from .root_backend import get_root


@dataclass
class TextBox:
    text: TextList = field(default_factory=list)
    vertices: Vertices = field(default_factory=lambda: [0.1, 0.1, 0.3, 0.3])
    option: str = "NDC NB"

    def add_text(self, line: str) -> None:
        self.text.append(line)

    def make_tpavetext(self):
        x0, y0, x1, y1 = self.vertices
        pave = get_root().TPaveText(x0, y0, x1, y1, self.option)
        for line in self.text:
            pave.AddText(line)
        return pave
