#!/usr/bin/env python3
"""
PPVsPAu - p+Au over p+p in each jet pt bin.
"""

from typing import Dict, List, Tuple

from ..plot_input import PlotInput
from ..plot_types import RangeOpt
from ..style import PlotStyle
from .base_output import BaseOutput
from .file_input import Species
from .hist_input import PtJet

PT_BINS = (PtJet.PT5, PtJet.PT10, PtJet.PT15)

# (p+p, p+Au) per pt bin
COLORS = {PtJet.PT5: (809, 799), PtJet.PT10: (899, 909), PtJet.PT15: (889, 879)}
MARKERS = {PtJet.PT5: (22, 26), PtJet.PT10: (20, 24), PtJet.PT15: (23, 32)}

TAG = "PPVsPAu_"


class PPVsPAu(BaseOutput):
    name = "PPVsPAu"

    def _pairs(self, variable: str, styled: bool = True,
               draw: str = "") -> List[Tuple[PlotInput, PlotInput]]:
        pairs = []
        for pt in PT_BINS:
            pair = []
            for ispe, (species, suffix) in enumerate(((Species.PP, "PP_"), (Species.PAU, "PAu_"))):
                index = self.index.replace(pt=pt, species=species)
                style = PlotStyle(COLORS[pt][ispe], MARKERS[pt][ispe]) if styled else None
                pair.append(self.make_series(variable, index, TAG, draw=draw, style=style,
                                             rename_tag=TAG + suffix))
            pairs.append(tuple(pair))
        return pairs

    def make_plot_1d(self, variable: str, opt: RangeOpt, ofile) -> Dict:
        pairs = self._pairs(variable)

        routine = self.maker.ratios_1d
        routine.configure([pp for pp, _ in pairs], [pau for _, pau in pairs],
                          self.input.make_canvas_name("cPPVsPAu" + variable, self.index), opt)
        return routine.plot(ofile)

    def make_plot_2d(self, variable: str, ofile) -> Dict:
        # one row per pt bin: p+p on the left, p+Au on the right
        inputs = [series for pair in self._pairs(variable, styled=False, draw="colz")
                  for series in pair]

        routine = self.maker.spectra_2d
        routine.configure(inputs, self.input.make_canvas_name("cPPVsPAu" + variable, self.index),
                          ncolumn=2)
        return routine.plot(ofile)
