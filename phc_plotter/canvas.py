#!/usr/bin/env python3
"""
Canvas - layout definition of a figure.

This class handles:
- Canvas name, title, dimensions, options and margins
- The ordered list of pads and their labels
- Creating the drawable canvas and pads
- Rescaling axis text between pads of different sizes
"""

from typing import Dict, List, Optional

from .pad import Pad
from .pad_options import PadOptions
from .plot_types import Axis, Dimensions, LabelList, Margin, Margins, check_margins
from .root_backend import get_root


class Canvas:
    def __init__(self, name: str = "", title: str = "", dims: Dimensions = (750, 750),
                 opts: Optional[PadOptions] = None, margins: Optional[Margins] = None):
        """
        Args:
            name: Canvas name (also the name it is written under)
            title: Canvas title
            dims: (width, height) in pixels
            opts: Options applied to the canvas itself
            margins: [top, right, bottom, left]; only used when there are no pads
        """
        if dims[0] <= 0 or dims[1] <= 0:
            raise ValueError(f"canvas dimensions must be positive, got {dims}")
        self.name = name
        self.title = title
        self.dims = (int(dims[0]), int(dims[1]))
        self.opts = opts if opts is not None else PadOptions()
        self.margins = list(margins) if margins is not None else [0.02, 0.02, 0.15, 0.15]
        check_margins(self.margins)
        self.pads: List[Pad] = []
        self.labels: LabelList = []

    def add_pad(self, pad: Pad, label: str = "") -> None:
        """
        Append a pad.

        Args:
            pad: Pad definition
            label: Label used to look the pad up; defaults to its index
        """
        if not label:
            label = str(len(self.pads))
        if label in self.labels:
            print(f"Warning: pad label '{label}' already used in canvas '{self.name}', "
                  f"the last pad with this label wins")
        self.pads.append(pad)
        self.labels.append(label)

    def get_pad(self, index: int) -> Pad:
        return self.pads[index]

    def get_label_index(self) -> Dict[str, int]:
        """Map pad labels to pad indices (last wins for duplicates)."""
        index = {}
        for ipad, label in enumerate(self.labels):
            index[label] = ipad
        return index

    def make_tcanvas(self):
        """
        Create the drawable canvas.

        Canvas-level margins are applied only when the canvas has no pads.
        """
        width, height = self.dims
        tcanvas = get_root().TCanvas(self.name, self.title, width, height)
        if not self.pads:
            tcanvas.SetTopMargin(self.margins[Margin.TOP])
            tcanvas.SetRightMargin(self.margins[Margin.RIGHT])
            tcanvas.SetBottomMargin(self.margins[Margin.BOTTOM])
            tcanvas.SetLeftMargin(self.margins[Margin.LEFT])
        self.opts.apply(tcanvas)
        return tcanvas

    def make_tpads(self) -> list:
        return [pad.make_tpad() for pad in self.pads]

    def get_scale(self, ibig: int, ismall: int) -> float:
        """Ratio of the area of pad ibig to the area of pad ismall."""
        big = self.pads[ibig]
        small = self.pads[ismall]
        return (big.width / small.width) * (big.height / small.height)

    def do_axis_text_scaling(self, ibig: int, ismall: int, axis: Axis, taxis) -> None:
        """
        Rescale axis text drawn in a small pad so it matches a big pad.

        Title and label sizes are multiplied by the area ratio. For the y-axis
        the offsets are divided by it to keep the same distance from the axis.

        Args:
            ibig: Index of the reference pad
            ismall: Index of the pad the axis is drawn in
            axis: Which axis taxis is
            taxis: TAxis to modify
        """
        scale = self.get_scale(ibig, ismall)
        taxis.SetTitleSize(taxis.GetTitleSize() * scale)
        taxis.SetLabelSize(taxis.GetLabelSize() * scale)
        if Axis(axis) == Axis.Y:
            taxis.SetTitleOffset(taxis.GetTitleOffset() / scale)
            taxis.SetLabelOffset(taxis.GetLabelOffset() / scale)
