#!/usr/bin/env python3
"""
PlotSpectra1D - overlay several 1D spectra on one pad.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..canvas_manager import CanvasManager, CanvasState
from ..layouts import default_norm_range, default_plot_range, make_single_canvas
from ..pad_options import PadOptions
from ..plot_input import PlotInput
from ..plot_options import PlotOptions
from ..plot_types import Axis, RangeOpt
from ..plotting_tools import close_files
from .base_routine import BaseRoutine


@dataclass
class Spectra1DParams:
    inputs: List[PlotInput] = field(default_factory=list)
    options: PlotOptions = field(default_factory=PlotOptions)


class PlotSpectra1D(BaseRoutine):
    name = "spectra 1D"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.params = Spectra1DParams()

    def configure(self, inputs: Sequence[PlotInput], canvas_name: str = "cSpectra1D",
                  range_opt: RangeOpt = RangeOpt.SIDE) -> None:
        """
        Set up a single-pad figure for the given inputs.

        Side distributions get log x and y axes.
        """
        opts = PadOptions()
        if RangeOpt(range_opt) == RangeOpt.SIDE:
            opts.logx = 1
            opts.logy = 1

        options = PlotOptions()
        options.canvas = make_single_canvas(canvas_name, opts)
        options.plot_range = default_plot_range(range_opt)
        options.norm_range = default_norm_range(range_opt)
        self.params = Spectra1DParams(list(inputs), options)

    def plot(self, ofile) -> Dict:
        """
        Draw the spectra and write them, and the canvas, to ofile.

        Args:
            ofile: Open output file (left open)

        Returns:
            Dictionary with the canvas name and the written histograms
        """
        inputs = self.params.inputs
        options = self.params.options
        self.announce_start("spectra plotting")

        files = {}
        manager = CanvasManager(options.canvas)
        try:
            hists = self.load_inputs(inputs, files, options)

            legend = self.make_legend([(h, i.legend) for h, i in zip(hists, inputs)],
                                      options.header)
            text = self.make_text()
            self.log("    Created legend and text box.")

            for hist, style in zip(hists, self.generate_styles(inputs)):
                style.apply_to_plottable(hist)
                options.plot_range.apply(Axis.X, hist.GetXaxis())
                options.plot_range.apply(Axis.Y, hist.GetYaxis())
            self.log("    Set styles.")

            manager.make_plot()
            manager.draw()
            if options.spectra_pad and options.canvas.pads:
                manager.get_tpad(options.spectra_pad).cd()
            else:
                manager.get_tcanvas().cd()
            self.draw_all(hists, [i.draw for i in inputs])
            legend.Draw()
            text.Draw()
            self.log("    Made plot.")

            self.write_all(ofile, hists)
            manager.write()
            manager.close()
            self.log("    Saved output.")
        finally:
            if manager.state != CanvasState.CLOSED:
                manager.close()
            close_files(files.values())

        self.announce_end("spectra plotting")
        return self.result(manager, hists, {'legend': legend})
