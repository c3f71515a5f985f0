#!/usr/bin/env python3
"""
PlotMaker - one instance of every plotting routine sharing base styles.
"""

from typing import Optional

from .routines import (
    CorrectSpectra1D, CorrectSpectra2D, PlotRatios1D, PlotSpectra1D, PlotSpectra2D,
    PlotVsBaseline1D
)
from .style import Style
from .text_box import TextBox


class PlotMaker:
    def __init__(self, plot_style: Optional[Style] = None, text_style: Optional[Style] = None,
                 text_box: Optional[TextBox] = None, verbose: bool = True):
        """
        Args:
            plot_style: Base style for histograms
            text_style: Style for legends and text boxes
            text_box: Annotation drawn on every figure
            verbose: Print progress from the routines
        """
        args = (plot_style, text_style, text_box, verbose)
        self.spectra_1d = PlotSpectra1D(*args)
        self.spectra_2d = PlotSpectra2D(*args)
        self.ratios_1d = PlotRatios1D(*args)
        self.vs_baseline_1d = PlotVsBaseline1D(*args)
        self.correct_spectra_1d = CorrectSpectra1D(*args)
        self.correct_spectra_2d = CorrectSpectra2D(*args)

    @property
    def routines(self) -> list:
        return [self.spectra_1d, self.spectra_2d, self.ratios_1d,
                self.vs_baseline_1d, self.correct_spectra_1d, self.correct_spectra_2d]

    def set_text_box(self, text_box: TextBox) -> None:
        """Swap the annotation of every routine (e.g. when the species changes)."""
        for routine in self.routines:
            routine.text_box = text_box
