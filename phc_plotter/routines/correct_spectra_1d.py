#!/usr/bin/env python3
"""
CorrectSpectra1D - bin-by-bin correction of 1D spectra.

For each data spectrum the correction factor truth / reco is computed from
the matching simulated spectra and multiplied in. The figure shows the
corrected spectra with the simulated ones (top), the corrected / truth
ratios (middle) and the correction factors (bottom).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..canvas_manager import CanvasManager, CanvasState
from ..errors import ConfigurationError
from ..layouts import default_norm_range, default_plot_range, default_unity, make_correction_canvas
from ..pad_options import PadOptions
from ..plot_input import PlotInput
from ..plot_options import PlotOptions
from ..plot_types import Axis, RangeOpt
from ..plotting_tools import close_files, divide_hist_1d, get_draw_range, multiply_hist_1d
from ..shape import PlotShape
from .base_routine import BaseRoutine


@dataclass
class CorrectSpectra1DParams:
    data: List[PlotInput] = field(default_factory=list)
    recon: List[PlotInput] = field(default_factory=list)
    truth: List[PlotInput] = field(default_factory=list)
    unity: PlotShape = field(default_factory=PlotShape)
    options: PlotOptions = field(default_factory=PlotOptions)


class CorrectSpectra1D(BaseRoutine):
    name = "1D spectra correction"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.params = CorrectSpectra1DParams()

    def configure(self, data: Sequence[PlotInput], recon: Sequence[PlotInput],
                  truth: Sequence[PlotInput], canvas_name: str = "cCorrectSpectra1D",
                  range_opt: RangeOpt = RangeOpt.SIDE) -> None:
        """
        Args:
            data: Spectra to correct
            recon: Reconstructed-level simulation, one per data spectrum
            truth: Generator-level simulation, one per data spectrum
            canvas_name: Name of the figure
            range_opt: Default ranges to use
        """
        ratio_opts = PadOptions()
        correct_opts = PadOptions()
        spectra_opts = PadOptions()
        if RangeOpt(range_opt) == RangeOpt.SIDE:
            ratio_opts.logx = 1
            correct_opts.logx = 1
            spectra_opts.logx = 1
            spectra_opts.logy = 1

        options = PlotOptions()
        options.canvas = make_correction_canvas(canvas_name, "pCorrect", "pRatio", "pSpectra",
                                                spectra_opts=spectra_opts,
                                                correct_opts=correct_opts,
                                                ratio_opts=ratio_opts)
        options.plot_range = default_plot_range(range_opt)
        options.norm_range = default_norm_range(range_opt)
        options.correct_pad = "correct"
        options.ratio_pad = "ratio"
        options.spectra_pad = "spectra"
        self.params = CorrectSpectra1DParams(list(data), list(recon), list(truth),
                                             default_unity(range_opt), options)

    def plot(self, ofile) -> Dict:
        """
        Correct each data spectrum and draw the result.

        Raises:
            ConfigurationError: if the data, reco and truth lists differ in length
        """
        params = self.params
        options = params.options
        if len(params.recon) != len(params.truth):
            raise ConfigurationError(
                f"number of reconstructed ({len(params.recon)}) and truth "
                f"({len(params.truth)}) inputs should be the same")
        if len(params.data) != len(params.recon):
            raise ConfigurationError(
                f"number of data ({len(params.data)}) and reconstructed "
                f"({len(params.recon)}) inputs should be the same")

        self.announce_start("1D spectra correction")

        files = {}
        manager = CanvasManager(options.canvas)
        try:
            dhists = self.load_inputs(params.data, files, options, "data", normalize=False)
            rhists = self.load_inputs(params.recon, files, options, "recon")
            thists = self.load_inputs(params.truth, files, options, "truth")

            chists = []
            for plot_input, rhist, thist in zip(params.data, rhists, thists):
                factor = divide_hist_1d(thist, rhist)
                factor.SetName(f"{plot_input.output_name}_CorrectionFactor")
                chists.append(factor)
            self.log("    Calculated correction factors.")

            corrected = []
            for plot_input, dhist, factor in zip(params.data, dhists, chists):
                hist = multiply_hist_1d(dhist, factor)
                hist.SetName(f"{plot_input.output_name}_Corrected")
                if options.do_norm:
                    self.normalize(hist, options)
                corrected.append(hist)
            self.log("    Applied correction factors.")

            fhists = []
            for plot_input, hist, thist in zip(params.data, corrected, thists):
                fraction = divide_hist_1d(hist, thist)
                fraction.SetName(f"{plot_input.output_name}_CorrectOverTruth")
                fhists.append(fraction)
            self.log("    Calculated corrected / truth ratios.")

            entries = []
            for idx in range(len(corrected)):
                entries.append((corrected[idx], params.data[idx].legend))
                entries.append((rhists[idx], params.recon[idx].legend))
                entries.append((thists[idx], params.truth[idx].legend))
            legend = self.make_legend(entries, options.header)
            text = self.make_text()
            unity = None
            if fhists:
                unity = params.unity.make_line(
                    get_draw_range(options.plot_range.x, fhists[0].GetXaxis()))
            self.log("    Created legend and text box.")

            dat_styles = self.generate_styles(params.data)
            rec_styles = self.generate_styles(params.recon)
            tru_styles = self.generate_styles(params.truth)
            for idx in range(len(corrected)):
                dat_styles[idx].apply_to_plottable(corrected[idx])
                rec_styles[idx].apply_to_plottable(rhists[idx])
                tru_styles[idx].apply_to_plottable(thists[idx])
                for hist in (corrected[idx], rhists[idx], thists[idx]):
                    options.plot_range.apply(Axis.X, hist.GetXaxis())
                    options.plot_range.apply(Axis.Y, hist.GetYaxis())

                dat_styles[idx].apply_to_plottable(chists[idx])
                options.plot_range.apply(Axis.X, chists[idx].GetXaxis())
                tru_styles[idx].apply_to_plottable(fhists[idx])
                options.plot_range.apply(Axis.X, fhists[idx].GetXaxis())
            self.log("    Set styles.")

            manager.make_plot()
            for factor, fraction in zip(chists, fhists):
                for axis in (Axis.X, Axis.Y):
                    manager.scale_axis_text(options.spectra_pad, options.correct_pad, axis,
                                            factor.GetXaxis() if axis == Axis.X else factor.GetYaxis())
                    manager.scale_axis_text(options.spectra_pad, options.ratio_pad, axis,
                                            fraction.GetXaxis() if axis == Axis.X else fraction.GetYaxis())

            data_draws = [i.draw for i in params.data]
            manager.draw()
            manager.get_tpad(options.correct_pad).cd()
            self.draw_all(chists, data_draws)
            manager.get_tpad(options.ratio_pad).cd()
            self.draw_all(fhists, [i.draw for i in params.truth])
            if unity is not None:
                unity.Draw()
            manager.get_tpad(options.spectra_pad).cd()
            spectra = []
            draws = []
            for idx in range(len(corrected)):
                spectra.extend([corrected[idx], rhists[idx], thists[idx]])
                draws.extend([params.data[idx].draw, params.recon[idx].draw,
                              params.truth[idx].draw])
            self.draw_all(spectra, draws)
            legend.Draw()
            text.Draw()
            self.log("    Made plot.")

            written = []
            for idx in range(len(corrected)):
                written.extend([corrected[idx], rhists[idx], thists[idx], chists[idx], fhists[idx]])
            self.write_all(ofile, written)
            manager.write()
            manager.close()
            self.log("    Saved output.")
        finally:
            if manager.state != CanvasState.CLOSED:
                manager.close()
            close_files(files.values())

        self.announce_end("1D spectra correction")
        return self.result(manager, written, {
            'corrected': corrected,
            'corrections': chists,
            'ratios': fhists,
            'legend': legend,
            'unity': unity,
        })
