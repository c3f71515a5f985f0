#!/usr/bin/env python3
"""
PlotVsBaseline1D - several 1D spectra compared to one baseline.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..canvas_manager import CanvasManager, CanvasState
from ..layouts import default_norm_range, default_plot_range, default_unity, make_ratio_canvas
from ..pad_options import PadOptions
from ..plot_input import PlotInput
from ..plot_options import PlotOptions
from ..plot_types import Axis, RangeOpt
from ..plotting_tools import close_files, divide_hist_1d, get_draw_range
from ..shape import PlotShape
from .base_routine import BaseRoutine


@dataclass
class VsBaseline1DParams:
    denominator: PlotInput = field(default_factory=PlotInput)
    numerators: List[PlotInput] = field(default_factory=list)
    unity: PlotShape = field(default_factory=PlotShape)
    options: PlotOptions = field(default_factory=PlotOptions)


class PlotVsBaseline1D(BaseRoutine):
    name = "spectra vs. baseline"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.params = VsBaseline1DParams()

    def configure(self, baseline: PlotInput, comparisons: Sequence[PlotInput],
                  canvas_name: str = "cSpectraVsBaseline",
                  range_opt: RangeOpt = RangeOpt.SIDE) -> None:
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
        self.params = VsBaseline1DParams(baseline, list(comparisons),
                                         default_unity(range_opt), options)

    def plot(self, ofile) -> Dict:
        """
        Draw the baseline and comparisons on the upper pad, and each of
        them divided by the baseline on the lower pad.
        """
        params = self.params
        options = params.options
        self.announce_start("spectra vs. baseline plotting")

        files = {}
        manager = CanvasManager(options.canvas)
        try:
            dhist = self.load_inputs([params.denominator], files, options, "denom")[0]
            nhists = self.load_inputs(params.numerators, files, options, "numer")

            base_ratio = divide_hist_1d(dhist, dhist)
            base_ratio.SetName(f"{dhist.GetName()}_Ratio")
            rhists = []
            for nhist in nhists:
                ratio = divide_hist_1d(nhist, dhist)
                ratio.SetName(f"{nhist.GetName()}_Ratio")
                rhists.append(ratio)
            self.log("    Calculated ratios.")

            entries = [(dhist, params.denominator.legend)]
            entries.extend((h, i.legend) for h, i in zip(nhists, params.numerators))
            legend = self.make_legend(entries, options.header)
            text = self.make_text()
            unity = params.unity.make_line(
                get_draw_range(options.plot_range.x, base_ratio.GetXaxis()))
            self.log("    Created legend and text box.")

            den_style = self.generate_styles([params.denominator])[0]
            den_style.apply_to_plottable(dhist)
            den_style.apply_to_plottable(base_ratio)
            options.plot_range.apply(Axis.X, dhist.GetXaxis())
            options.plot_range.apply(Axis.Y, dhist.GetYaxis())
            options.plot_range.apply(Axis.X, base_ratio.GetXaxis())

            for nhist, ratio, style in zip(nhists, rhists, self.generate_styles(params.numerators)):
                style.apply_to_plottable(nhist)
                style.apply_to_plottable(ratio)
                options.plot_range.apply(Axis.X, nhist.GetXaxis())
                options.plot_range.apply(Axis.Y, nhist.GetYaxis())
                options.plot_range.apply(Axis.X, ratio.GetXaxis())
            self.log("    Set styles.")

            all_ratios = [base_ratio] + rhists
            manager.make_plot()
            for ratio in all_ratios:
                manager.scale_axis_text(options.spectra_pad, options.ratio_pad,
                                        Axis.X, ratio.GetXaxis())
                manager.scale_axis_text(options.spectra_pad, options.ratio_pad,
                                        Axis.Y, ratio.GetYaxis())

            draws = [params.denominator.draw] + [i.draw for i in params.numerators]
            manager.draw()
            manager.get_tpad(options.ratio_pad).cd()
            self.draw_all(all_ratios, draws)
            unity.Draw()
            manager.get_tpad(options.spectra_pad).cd()
            self.draw_all([dhist] + nhists, draws)
            legend.Draw()
            text.Draw()
            self.log("    Made plot.")

            written = [dhist, base_ratio]
            for nhist, ratio in zip(nhists, rhists):
                written.extend([nhist, ratio])
            self.write_all(ofile, written)
            manager.write()
            manager.close()
            self.log("    Saved output.")
        finally:
            if manager.state != CanvasState.CLOSED:
                manager.close()
            close_files(files.values())

        self.announce_end("spectra vs. baseline plotting")
        return self.result(manager, written, {
            'ratios': all_ratios,
            'legend': legend,
            'unity': unity,
        })
