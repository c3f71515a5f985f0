"""
phc_plotter - comparison figures for the PHENIX energy-correlator analysis.

Histograms are read from ROOT files, normalized, divided or corrected,
laid out on multi-pad canvases and written back to a ROOT file.
"""

from .canvas import Canvas
from .canvas_manager import CanvasManager, CanvasState
from .errors import (
    CanvasStateError, ConfigurationError, InputMissing, OutOfRangeIndex, PlotterError,
    UnknownRoutine
)
from .legend import Legend, LegendEntry
from .pad import Pad
from .pad_options import PadOptions
from .plot_input import PlotInput
from .plot_maker import PlotMaker
from .plot_options import PlotOptions
from .plot_range import PlotRange
from .plot_types import Axis, Margin, RangeOpt
from .projection import Projection
from .rebin import Rebin
from .root_backend import get_root, reset_backend, use_backend
from .shape import PlotShape, Shape
from .style import LabelStyle, PlotStyle, Style, TextStyle, TitleStyle
from .text_box import TextBox

__version__ = "0.1.0"

__all__ = [
    'Axis',
    'Canvas',
    'CanvasManager',
    'CanvasState',
    'CanvasStateError',
    'ConfigurationError',
    'InputMissing',
    'LabelStyle',
    'Legend',
    'LegendEntry',
    'Margin',
    'OutOfRangeIndex',
    'Pad',
    'PadOptions',
    'PlotInput',
    'PlotMaker',
    'PlotOptions',
    'PlotRange',
    'PlotShape',
    'PlotStyle',
    'PlotterError',
    'Projection',
    'RangeOpt',
    'Rebin',
    'Shape',
    'Style',
    'TextBox',
    'TextStyle',
    'TitleStyle',
    'UnknownRoutine',
    'get_root',
    'reset_backend',
    'use_backend',
]
