#!/usr/bin/env python3
"""
CorrectSpectra - data corrected by truth/reco in each jet pt bin.
"""

from typing import Dict

from ..plot_types import RangeOpt
from ..style import PlotStyle
from .base_output import BaseOutput
from .file_input import Level
from .hist_input import PtJet

PT_BINS = (PtJet.PT5, PtJet.PT10, PtJet.PT15)

# (data, reco, truth) per pt bin
COLORS = {PtJet.PT5: (799, 797, 809), PtJet.PT10: (899, 909, 907), PtJet.PT15: (889, 879, 877)}
MARKERS = {PtJet.PT5: (22, 22, 26), PtJet.PT10: (20, 24, 24), PtJet.PT15: (23, 23, 32)}


class CorrectSpectra(BaseOutput):
    name = "CorrectSpectra"

    def _series(self, variable: str, level: Level, styled: bool = True, draw: str = "",
                base: str = "Correct1D"):
        tag = self.input.make_species_tag(base, self.index.species) + "_"
        return [
            self.make_series(variable, self.index.replace(pt=pt, level=level), tag, draw=draw,
                             style=PlotStyle(COLORS[pt][level], MARKERS[pt][level])
                             if styled else None)
            for pt in PT_BINS
        ]

    def make_plot_1d(self, variable: str, opt: RangeOpt, ofile) -> Dict:
        routine = self.maker.correct_spectra_1d
        routine.configure(self._series(variable, Level.DATA),
                          self._series(variable, Level.RECO),
                          self._series(variable, Level.TRUE),
                          self.input.make_canvas_name("cCorrect" + variable, self.index), opt)
        return routine.plot(ofile)

    def make_plot_2d(self, variable: str, ofile) -> Dict:
        # one column per pt bin: corrected, factor, corrected / truth
        series = [self._series(variable, level, styled=False, draw="colz", base="Correct2D")
                  for level in (Level.DATA, Level.RECO, Level.TRUE)]

        routine = self.maker.correct_spectra_2d
        routine.configure(*series, self.input.make_canvas_name("cCorrect" + variable, self.index))
        return routine.plot(ofile)
