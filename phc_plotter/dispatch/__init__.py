"""
Dispatch layer: input naming databases, plot indices and output wirings.
"""

from .base_output import BaseOutput
from .correct_spectra import CorrectSpectra
from .file_input import FileInput, Level, Species
from .hist_input import CFJet, Charge, HistInput, PtJet, Spin
from .naming import Input
from .output import Output, OutputRoutine
from .plot_index import PlotIndex, PlotIndexRange
from .pp_vs_pau import PPVsPAu
from .reco_vs_data import RecoVsData
from .sim_vs_data import SimVsData
from .spin_ratios import SpinRatios
from .vs_pt_jet import VsPtJet

__all__ = [
    'BaseOutput',
    'CFJet',
    'Charge',
    'CorrectSpectra',
    'FileInput',
    'HistInput',
    'Input',
    'Level',
    'Output',
    'OutputRoutine',
    'PPVsPAu',
    'PlotIndex',
    'PlotIndexRange',
    'PtJet',
    'RecoVsData',
    'SimVsData',
    'Species',
    'Spin',
    'SpinRatios',
    'VsPtJet',
]
