#!/usr/bin/env python3
"""
PlotRatios1D - pairs of 1D spectra and their ratios.

The spectra go on the upper pad, the numerator/denominator ratios on the
lower pad together with a line at unity.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..canvas_manager import CanvasManager, CanvasState
from ..errors import ConfigurationError
from ..layouts import default_norm_range, default_plot_range, default_unity, make_ratio_canvas
from ..pad_options import PadOptions
from ..plot_input import PlotInput
from ..plot_options import PlotOptions
from ..plot_types import Axis, RangeOpt
from ..plotting_tools import close_files, divide_hist_1d, get_draw_range
from ..shape import PlotShape
from .base_routine import BaseRoutine


@dataclass
class Ratios1DParams:
    denominators: List[PlotInput] = field(default_factory=list)
    numerators: List[PlotInput] = field(default_factory=list)
    unity: PlotShape = field(default_factory=PlotShape)
    options: PlotOptions = field(default_factory=PlotOptions)


class PlotRatios1D(BaseRoutine):
    name = "ratios 1D"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.params = Ratios1DParams()

    def configure(self, denominators: Sequence[PlotInput], numerators: Sequence[PlotInput],
                  canvas_name: str = "cSpectraRatio1D",
                  range_opt: RangeOpt = RangeOpt.SIDE) -> None:
        """
        Args:
            denominators: One denominator per ratio
            numerators: One numerator per ratio, same order as denominators
            canvas_name: Name of the figure
            range_opt: Default ranges to use
        """
        ratio_opts = PadOptions()
        spectra_opts = PadOptions()
        if RangeOpt(range_opt) == RangeOpt.SIDE:
            ratio_opts.logx = 1
            spectra_opts.logx = 1
            spectra_opts.logy = 1

        options = PlotOptions()
        options.canvas = make_ratio_canvas(canvas_name, "pSpectra", "pRatio",
                                           upper_opts=spectra_opts, lower_opts=ratio_opts)
        options.plot_range = default_plot_range(range_opt)
        options.norm_range = default_norm_range(range_opt)
        options.ratio_pad = "ratio"
        options.spectra_pad = "spectra"
        self.params = Ratios1DParams(list(denominators), list(numerators),
                                     default_unity(range_opt), options)

    def plot(self, ofile) -> Dict:
        """
        Divide each numerator by its denominator and draw everything.

        Raises:
            ConfigurationError: if the numbers of numerators and denominators differ
        """
        params = self.params
        options = params.options
        if len(params.denominators) != len(params.numerators):
            raise ConfigurationError(
                f"number of denominators ({len(params.denominators)}) and numerators "
                f"({len(params.numerators)}) should be the same")

        self.announce_start("spectra ratio plotting")

        files = {}
        manager = CanvasManager(options.canvas)
        try:
            dhists = self.load_inputs(params.denominators, files, options, "denom")
            nhists = self.load_inputs(params.numerators, files, options, "numer")

            rhists = []
            for dhist, nhist in zip(dhists, nhists):
                ratio = divide_hist_1d(nhist, dhist)
                ratio.SetName(f"{dhist.GetName()}_Ratio")
                rhists.append(ratio)
            self.log("    Calculated ratios.")

            entries = []
            for idx, (dhist, nhist) in enumerate(zip(dhists, nhists)):
                entries.append((dhist, params.denominators[idx].legend))
                entries.append((nhist, params.numerators[idx].legend))
            legend = self.make_legend(entries, options.header)
            text = self.make_text()
            unity = None
            if rhists:
                unity = params.unity.make_line(
                    get_draw_range(options.plot_range.x, rhists[0].GetXaxis()))
            self.log("    Created legend and text box.")

            den_styles = self.generate_styles(params.denominators)
            num_styles = self.generate_styles(params.numerators)
            for idx in range(len(rhists)):
                den_styles[idx].apply_to_plottable(dhists[idx])
                num_styles[idx].apply_to_plottable(nhists[idx])
                num_styles[idx].apply_to_plottable(rhists[idx])
                for hist in (dhists[idx], nhists[idx]):
                    options.plot_range.apply(Axis.X, hist.GetXaxis())
                    options.plot_range.apply(Axis.Y, hist.GetYaxis())
                options.plot_range.apply(Axis.X, rhists[idx].GetXaxis())
            self.log("    Set styles.")

            manager.make_plot()
            for ratio in rhists:
                manager.scale_axis_text(options.spectra_pad, options.ratio_pad,
                                        Axis.X, ratio.GetXaxis())
                manager.scale_axis_text(options.spectra_pad, options.ratio_pad,
                                        Axis.Y, ratio.GetYaxis())

            manager.draw()
            manager.get_tpad(options.ratio_pad).cd()
            self.draw_all(rhists, [i.draw for i in params.numerators])
            if unity is not None:
                unity.Draw()
            manager.get_tpad(options.spectra_pad).cd()
            spectra = []
            draws = []
            for idx in range(len(dhists)):
                spectra.extend([dhists[idx], nhists[idx]])
                draws.extend([params.denominators[idx].draw, params.numerators[idx].draw])
            self.draw_all(spectra, draws)
            legend.Draw()
            text.Draw()
            self.log("    Made plot.")

            written = []
            for idx in range(len(dhists)):
                written.extend([dhists[idx], nhists[idx], rhists[idx]])
            self.write_all(ofile, written)
            manager.write()
            manager.close()
            self.log("    Saved output.")
        finally:
            if manager.state != CanvasState.CLOSED:
                manager.close()
            close_files(files.values())

        self.announce_end("spectra ratio plotting")
        return self.result(manager, written, {
            'ratios': rhists,
            'legend': legend,
            'unity': unity,
        })
