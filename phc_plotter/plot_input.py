#!/usr/bin/env python3
"""
PlotInput - everything needed to fetch and draw one series.
"""

from dataclasses import dataclass, field

from .rebin import Rebin
from .style import PlotStyle


@dataclass
class PlotInput:
    """
    One plotted series.

    Attributes:
        file: Path of the file holding the object
        object: Name of the object in the file
        rename: Name given to the retrieved copy (and used when writing)
        legend: Legend text
        draw: Draw option
        style: Marker/line/fill attributes
        rebin: Optional rebinning
    """
    file: str = ""
    object: str = ""
    rename: str = ""
    legend: str = ""
    draw: str = ""
    style: PlotStyle = field(default_factory=PlotStyle)
    rebin: Rebin = field(default_factory=Rebin)

    @property
    def output_name(self) -> str:
        return self.rename or self.object
