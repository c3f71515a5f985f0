#!/usr/bin/env python3
"""
PlotOptions - figure-wide options shared by every series of a routine.
"""

from dataclasses import dataclass, field

from .canvas import Canvas
from .plot_range import PlotRange


@dataclass
class PlotOptions:
    """
    Attributes:
        header: Legend header (empty for none)
        ratio_pad: Label of the pad holding ratios
        spectra_pad: Label of the pad holding spectra
        correct_pad: Label of the pad holding correction factors
        canvas: Layout of the figure
        plot_range: Axis ranges to display
        norm_range: Range used for integral normalization
        norm_to: Value the integral is normalized to
        do_norm: Whether to normalize at all
    """
    header: str = ""
    ratio_pad: str = ""
    spectra_pad: str = ""
    correct_pad: str = ""
    canvas: Canvas = field(default_factory=Canvas)
    plot_range: PlotRange = field(default_factory=PlotRange)
    norm_range: PlotRange = field(default_factory=PlotRange)
    norm_to: float = 1.0
    do_norm: bool = True
