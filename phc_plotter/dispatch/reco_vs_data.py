#!/usr/bin/env python3
"""
RecoVsData - reconstructed simulation over data.
"""

from typing import Dict

from ..plot_types import RangeOpt
from ..style import PlotStyle
from .base_output import BaseOutput
from .file_input import Level

DATA_STYLE = (923, 20)
RECO_STYLE = (899, 24)


class RecoVsData(BaseOutput):
    name = "RecoVsData"

    def _inputs(self, variable: str, **kwargs):
        tag = self.input.make_species_tag("DataVsReco", self.index.species) + "_"
        data = self.make_series(variable, self.index.replace(level=Level.DATA), tag, **kwargs)
        reco = self.make_series(variable, self.index.replace(level=Level.RECO), tag, **kwargs)
        return data, reco

    def make_plot_1d(self, variable: str, opt: RangeOpt, ofile) -> Dict:
        data, reco = self._inputs(variable)
        data.style = PlotStyle(*DATA_STYLE)
        reco.style = PlotStyle(*RECO_STYLE)

        routine = self.maker.ratios_1d
        routine.configure([data], [reco],
                          self.input.make_canvas_name("cDataVsReco" + variable, self.index), opt)
        return routine.plot(ofile)

    def make_plot_2d(self, variable: str, ofile) -> Dict:
        data, reco = self._inputs(variable, draw="colz")

        routine = self.maker.spectra_2d
        routine.configure([data, reco],
                          self.input.make_canvas_name("cDataVsReco" + variable, self.index))
        return routine.plot(ofile)
