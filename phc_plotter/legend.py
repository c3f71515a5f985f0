#!/usr/bin/env python3
"""
Legend definitions.
"""

from dataclasses import dataclass, field
from typing import Any, List

from .plot_types import Vertices
from .root_backend import get_root


@dataclass
class LegendEntry:
    object: Any = None
    label: str = ""
    option: str = "PF"


@dataclass
class Legend:
    vertices: Vertices = field(default_factory=lambda: [0.3, 0.1, 0.5, 0.3])
    entries: List[LegendEntry] = field(default_factory=list)
    header: str = ""

    def add_entry(self, entry: LegendEntry) -> None:
        self.entries.append(entry)

    def make_legend(self):
        """Create a TLegend holding every entry in order."""
        x0, y0, x1, y1 = self.vertices
        legend = get_root().TLegend(x0, y0, x1, y1, self.header)
        for entry in self.entries:
            legend.AddEntry(entry.object, entry.label, entry.option)
        return legend
