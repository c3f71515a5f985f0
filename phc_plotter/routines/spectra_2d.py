#!/usr/bin/env python3
"""
PlotSpectra2D - one 2D spectrum per pad of a grid.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..canvas_manager import CanvasManager, CanvasState
from ..errors import ConfigurationError
from ..layouts import default_plot_range, make_grid_canvas
from ..pad_options import PadOptions
from ..plot_input import PlotInput
from ..plot_options import PlotOptions
from ..plot_range import PlotRange
from ..plot_types import Axis, RangeOpt
from ..plotting_tools import close_files
from .base_routine import BaseRoutine

PadRef = Union[int, str]


@dataclass
class Spectra2DParams:
    inputs: List[PlotInput] = field(default_factory=list)
    options: PlotOptions = field(default_factory=PlotOptions)
    # (big, small) pads whose area ratio rescales the axis text of the small pad
    scale_pads: Optional[Tuple[PadRef, PadRef]] = None


class PlotSpectra2D(BaseRoutine):
    name = "2D spectra"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.params = Spectra2DParams()

    def configure(self, inputs: Sequence[PlotInput], canvas_name: str = "cSpectra2D",
                  ncolumn: int = 2,
                  scale_pads: Optional[Tuple[PadRef, PadRef]] = None) -> None:
        """
        Lay the inputs out on a grid with log x and log z pads.

        The x and z ranges come from the side defaults, the y range from the
        angle defaults; the same window is used for normalization.
        """
        opts = PadOptions()
        opts.logx = 1
        opts.logz = 1
        canvas = make_grid_canvas(canvas_name, "pPad", len(inputs), ncolumn,
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
        self.params = Spectra2DParams(list(inputs), options, scale_pads)

    def plot(self, ofile) -> Dict:
        inputs = self.params.inputs
        options = self.params.options
        if len(inputs) > len(options.canvas.pads):
            raise ConfigurationError(
                f"more histograms ({len(inputs)}) than pads ({len(options.canvas.pads)}) "
                f"in {options.canvas.name}")

        self.announce_start("2D spectra plotting")

        files = {}
        manager = CanvasManager(options.canvas)
        try:
            hists = self.load_inputs(inputs, files, options, two_d=True)
            for hist, plot_input in zip(hists, inputs):
                hist.SetTitle(plot_input.legend)

            text = self.make_text()
            self.log("    Created text box.")

            for hist, style in zip(hists, self.generate_styles(inputs)):
                style.apply_to_plottable(hist)
                options.plot_range.apply(Axis.X, hist.GetXaxis())
                options.plot_range.apply(Axis.Y, hist.GetYaxis())
                options.plot_range.apply(Axis.Z, hist.GetZaxis())
            self.log("    Set styles.")

            manager.make_plot()
            if self.params.scale_pads is not None:
                big, small = self.params.scale_pads
                small_index = manager.definition.get_label_index().get(small, small)
                if isinstance(small_index, int) and small_index < len(hists):
                    for axis in (Axis.X, Axis.Y):
                        taxis = (hists[small_index].GetXaxis() if axis == Axis.X
                                 else hists[small_index].GetYaxis())
                        manager.scale_axis_text(big, small, axis, taxis)

            manager.draw()
            for ihist, (hist, plot_input) in enumerate(zip(hists, inputs)):
                manager.get_tpad(ihist).cd()
                hist.Draw(plot_input.draw or "colz")
            if manager.get_tpads():
                manager.get_tpads()[-1].cd()
            else:
                manager.get_tcanvas().cd()
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

        self.announce_end("2D spectra plotting")
        return self.result(manager, hists)
