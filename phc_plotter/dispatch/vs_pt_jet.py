#!/usr/bin/env python3
"""
VsPtJet - one distribution per jet pt bin, overlaid.
"""

from typing import Dict

from ..plot_types import RangeOpt
from ..style import PlotStyle
from .base_output import BaseOutput
from .hist_input import PtJet

PT_BINS = (PtJet.PT5, PtJet.PT10, PtJet.PT15)
COLORS = {PtJet.PT5: 799, PtJet.PT10: 899, PtJet.PT15: 879}
MARKERS = {PtJet.PT5: 26, PtJet.PT10: 24, PtJet.PT15: 32}


class VsPtJet(BaseOutput):
    name = "VsPtJet"

    def _tag(self) -> str:
        return self.input.make_species_tag("VsPtJet", self.index.species) + "_"

    def make_plot_1d(self, variable: str, opt: RangeOpt, ofile) -> Dict:
        tag = self._tag()
        inputs = [
            self.make_series(variable, self.index.replace(pt=pt), tag,
                             style=PlotStyle(COLORS[pt], MARKERS[pt]))
            for pt in PT_BINS
        ]

        routine = self.maker.spectra_1d
        routine.configure(inputs, self.input.make_canvas_name("cVsPtJet" + variable, self.index),
                          opt)
        return routine.plot(ofile)

    def make_plot_2d(self, variable: str, ofile) -> Dict:
        tag = self._tag()
        inputs = [self.make_series(variable, self.index.replace(pt=pt), tag, draw="colz")
                  for pt in PT_BINS]

        routine = self.maker.spectra_2d
        routine.configure(inputs, self.input.make_canvas_name("cVsPtJet" + variable, self.index),
                          ncolumn=len(inputs))
        return routine.plot(ofile)
