#!/usr/bin/env python3
"""
CorrectSpectra2D - bin-by-bin correction of 2D spectra.

Each data spectrum is multiplied by the factor truth / reco computed from
the matching simulated spectra. The grid has one column per data spectrum:
corrected spectra in the top row, correction factors in the middle row and
corrected / truth ratios in the bottom row, all drawn with colz.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..canvas_manager import CanvasManager, CanvasState
from ..errors import ConfigurationError
from ..layouts import default_plot_range, make_grid_canvas
from ..pad_options import PadOptions
from ..plot_input import PlotInput
from ..plot_options import PlotOptions
from ..plot_range import PlotRange
from ..plot_types import Axis, RangeOpt
from ..plotting_tools import close_files, divide_hist_2d, multiply_hist_2d
from .base_routine import BaseRoutine

ROWS = 3


@dataclass
class CorrectSpectra2DParams:
    data: List[PlotInput] = field(default_factory=list)
    recon: List[PlotInput] = field(default_factory=list)
    truth: List[PlotInput] = field(default_factory=list)
    options: PlotOptions = field(default_factory=PlotOptions)


class CorrectSpectra2D(BaseRoutine):
    name = "2D spectra correction"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.params = CorrectSpectra2DParams()

    def configure(self, data: Sequence[PlotInput], recon: Sequence[PlotInput],
                  truth: Sequence[PlotInput], canvas_name: str = "cCorrectSpectra2D") -> None:
        """
        Args:
            data: 2D spectra to correct
            recon: Reconstructed-level simulation, one per data spectrum
            truth: Generator-level simulation, one per data spectrum
            canvas_name: Name of the figure
        """
        opts = PadOptions()
        opts.logx = 1
        opts.logz = 1
        ncolumn = max(len(data), 1)
        canvas = make_grid_canvas(canvas_name, "pPad", ROWS * len(data), ncolumn,
                                  [0.15, 0.15, 0.15, 0.15], opts)

        plot_range = PlotRange(
            default_plot_range(RangeOpt.SIDE).x,
            default_plot_range(RangeOpt.ANGLE).y,
            default_plot_range(RangeOpt.SIDE).z
        )
        options = PlotOptions()
        options.canvas = canvas
        options.plot_range = plot_range
        options.norm_range = PlotRange(*plot_range.as_tuple())
        self.params = CorrectSpectra2DParams(list(data), list(recon), list(truth), options)

    def plot(self, ofile) -> Dict:
        """
        Correct each data spectrum and draw the result.

        Raises:
            ConfigurationError: if the input lists differ in length or the
                grid has fewer than three pads per data spectrum
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
        if len(options.canvas.pads) < ROWS * len(params.data):
            raise ConfigurationError(
                f"more histograms ({ROWS * len(params.data)}) than pads "
                f"({len(options.canvas.pads)}) in {options.canvas.name}")

        self.announce_start("2D spectra correction")

        files = {}
        manager = CanvasManager(options.canvas)
        try:
            dhists = self.load_inputs(params.data, files, options, "data", normalize=False,
                                      two_d=True)
            rhists = self.load_inputs(params.recon, files, options, "recon", two_d=True)
            thists = self.load_inputs(params.truth, files, options, "truth", two_d=True)

            chists = []
            for plot_input, rhist, thist in zip(params.data, rhists, thists):
                factor = divide_hist_2d(thist, rhist)
                factor.SetName(f"{plot_input.output_name}_CorrectionFactor")
                factor.SetTitle("Correction Factors")
                chists.append(factor)
            self.log("    Calculated correction factors.")

            corrected = []
            for plot_input, dhist, factor in zip(params.data, dhists, chists):
                hist = multiply_hist_2d(dhist, factor)
                hist.SetName(f"{plot_input.output_name}_Corrected")
                hist.SetTitle(plot_input.legend)
                if options.do_norm:
                    self.normalize(hist, options, two_d=True)
                corrected.append(hist)
            self.log("    Applied correction factors.")

            fhists = []
            for plot_input, hist, thist in zip(params.data, corrected, thists):
                fraction = divide_hist_2d(hist, thist)
                fraction.SetName(f"{plot_input.output_name}_CorrectOverTruth")
                fraction.SetTitle("Corrected / Truth")
                fhists.append(fraction)
            self.log("    Calculated corrected / truth ratios.")

            text = self.make_text()
            self.log("    Created text box.")

            dat_styles = self.generate_styles(params.data)
            tru_styles = self.generate_styles(params.truth)
            for idx in range(len(corrected)):
                for style, hist in ((dat_styles[idx], corrected[idx]),
                                    (dat_styles[idx], chists[idx]),
                                    (tru_styles[idx], fhists[idx])):
                    style.apply_to_plottable(hist)
                    options.plot_range.apply(Axis.X, hist.GetXaxis())
                    options.plot_range.apply(Axis.Y, hist.GetYaxis())
            self.log("    Set styles.")

            manager.make_plot()
            manager.draw()
            ncorr = len(corrected)
            for idx in range(ncorr):
                for row, hist in enumerate((corrected[idx], chists[idx], fhists[idx])):
                    manager.get_tpad(idx + row * ncorr).cd()
                    hist.Draw("colz")
            if manager.get_tpads():
                manager.get_tpads()[-1].cd()
            else:
                manager.get_tcanvas().cd()
            text.Draw()
            self.log("    Made plot.")

            written = []
            for idx in range(ncorr):
                written.extend([corrected[idx], rhists[idx], thists[idx], chists[idx], fhists[idx]])
            self.write_all(ofile, written)
            manager.write()
            manager.close()
            self.log("    Saved output.")
        finally:
            if manager.state != CanvasState.CLOSED:
                manager.close()
            close_files(files.values())

        self.announce_end("2D spectra correction")
        return self.result(manager, written, {
            'corrected': corrected,
            'corrections': chists,
            'ratios': fhists,
        })
