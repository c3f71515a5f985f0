#!/usr/bin/env python3
"""
SimVsData - data and reconstructed simulation compared to truth.
"""

from typing import Dict

from ..plot_types import Axis, RangeOpt
from ..rebin import Rebin
from ..style import PlotStyle
from .base_output import BaseOutput
from .file_input import Level

# color and marker per level: data, reco, truth
COLORS = {Level.DATA: 899, Level.RECO: 859, Level.TRUE: 923}
MARKERS = {Level.DATA: 24, Level.RECO: 25, Level.TRUE: 29}


class SimVsData(BaseOutput):
    name = "SimVsData"

    def _names(self, variable: str):
        tag = self.input.make_species_tag("DataVsSim", self.index.species) + "_"
        canvas = self.input.make_canvas_name("cDataVsSim" + variable, self.index)
        return tag, canvas

    def make_plot_1d(self, variable: str, opt: RangeOpt, ofile, nrebin: int = 1) -> Dict:
        """
        Truth is the baseline; data and reco are compared to it.

        Args:
            nrebin: Merge this many x bins of every input when > 1
        """
        tag, canvas = self._names(variable)
        series = {}
        for level in Level:
            series[level] = self.make_series(
                variable, self.index.replace(level=level), tag,
                style=PlotStyle(COLORS[level], MARKERS[level]),
                rebin=Rebin(Axis.X, max(1, nrebin), nrebin > 1)
            )

        routine = self.maker.vs_baseline_1d
        routine.configure(series[Level.TRUE], [series[Level.DATA], series[Level.RECO]],
                          canvas, opt)
        return routine.plot(ofile)

    def make_plot_2d(self, variable: str, ofile) -> Dict:
        tag, canvas = self._names(variable)
        inputs = [self.make_series(variable, self.index.replace(level=level), tag, draw="colz")
                  for level in Level]

        routine = self.maker.spectra_2d
        routine.configure(inputs, canvas, ncolumn=len(inputs))
        return routine.plot(ofile)
