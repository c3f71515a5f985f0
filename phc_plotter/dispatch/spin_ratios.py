#!/usr/bin/env python3
"""
SpinRatios - opposite blue/yellow polarizations divided at each level.
"""

from typing import Dict, List, Tuple

from ..plot_input import PlotInput
from ..plot_types import RangeOpt
from ..style import PlotStyle
from .base_output import BaseOutput
from .file_input import Level
from .hist_input import Spin

# (numerator, denominator, canvas tag)
SPIN_PAIRS = (
    (Spin.BD, Spin.YU, "BDDivYU"),
    (Spin.BU, Spin.YD, "BUDivYD"),
)

# (numerator, denominator) per level
COLORS = {Level.DATA: (898, 899), Level.RECO: (858, 859), Level.TRUE: (921, 923)}
MARKERS = {Level.DATA: (24, 20), Level.RECO: (25, 21), Level.TRUE: (30, 29)}


class SpinRatios(BaseOutput):
    name = "SpinRatios"

    def _tag(self) -> str:
        return self.input.make_species_tag("SpinRatio", self.index.species) + "_"

    def _series(self, variable: str, spins: Tuple[Spin, Spin], styled: bool = True,
                draw: str = "") -> Tuple[List[PlotInput], List[PlotInput]]:
        tag = self._tag()
        numerators, denominators = [], []
        for level in Level:
            for iside, (spin, series) in enumerate(((spins[0], numerators),
                                                    (spins[1], denominators))):
                style = PlotStyle(COLORS[level][iside], MARKERS[level][iside]) if styled else None
                index = self.index.replace(level=level, spin=spin)
                series.append(self.make_series(variable, index, tag, draw=draw, style=style))
        return numerators, denominators

    def make_plot_1d(self, variable: str, opt: RangeOpt, ofile) -> List[Dict]:
        """One figure per spin pair; returns the result of each."""
        results = []
        for numer, denom, label in SPIN_PAIRS:
            numerators, denominators = self._series(variable, (numer, denom))
            canvas = self.input.make_canvas_name("cSpinRatio" + label + variable, self.index)

            routine = self.maker.ratios_1d
            routine.configure(denominators, numerators, canvas, opt)
            results.append(routine.plot(ofile))
        return results

    def make_plot_2d(self, variable: str, ofile) -> List[Dict]:
        results = []
        for numer, denom, label in SPIN_PAIRS:
            numerators, denominators = self._series(variable, (numer, denom), styled=False,
                                                    draw="colz")
            inputs = [series for pair in zip(numerators, denominators) for series in pair]
            canvas = self.input.make_canvas_name("cSpinRatio" + label + variable, self.index)

            routine = self.maker.spectra_2d
            routine.configure(inputs, canvas, ncolumn=2)
            results.append(routine.plot(ofile))
        return results
