"""
Plotting routines: each one is configured with inputs and options,
then plotted into an output file.
"""

from .base_routine import BaseRoutine
from .correct_spectra_1d import CorrectSpectra1D
from .correct_spectra_2d import CorrectSpectra2D
from .ratios_1d import PlotRatios1D
from .spectra_1d import PlotSpectra1D
from .spectra_2d import PlotSpectra2D
from .vs_baseline_1d import PlotVsBaseline1D

__all__ = [
    'BaseRoutine',
    'CorrectSpectra1D',
    'CorrectSpectra2D',
    'PlotRatios1D',
    'PlotSpectra1D',
    'PlotSpectra2D',
    'PlotVsBaseline1D',
]
