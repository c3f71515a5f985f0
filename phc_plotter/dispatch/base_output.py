#!/usr/bin/env python3
"""
BaseOutput - common part of the output wirings.

A wiring turns the current PlotIndex into sibling indices (fixing the
level, species or pt it compares across), builds one PlotInput per
sibling and hands them to a plotting routine of the PlotMaker.
"""

from typing import Dict, Optional

from ..plot_input import PlotInput
from ..plot_maker import PlotMaker
from ..plot_types import RangeOpt
from ..rebin import Rebin
from ..style import PlotStyle
from .naming import Input
from .plot_index import PlotIndex


class BaseOutput:
    name = "output"

    def __init__(self, index: Optional[PlotIndex] = None, maker: Optional[PlotMaker] = None,
                 input: Optional[Input] = None):
        self.index = index if index is not None else PlotIndex()
        self.maker = maker if maker is not None else PlotMaker()
        self.input = input if input is not None else Input()

    def set_index(self, index: PlotIndex) -> None:
        self.index = index

    def set_maker(self, maker: PlotMaker) -> None:
        self.maker = maker

    def set_input(self, input: Input) -> None:
        self.input = input

    def make_series(self, variable: str, index: PlotIndex, tag: str, draw: str = "",
                    style: Optional[PlotStyle] = None, rebin: Optional[Rebin] = None,
                    rename_tag: Optional[str] = None) -> PlotInput:
        """
        PlotInput for one sibling index.

        Args:
            variable: Variable part of the histogram name
            index: Sibling index selecting the file and histogram
            tag: Prefix of the renamed copy
            draw: Draw option
            style: Marker/line attributes
            rebin: Optional rebinning
            rename_tag: Overrides tag for the renamed copy only
        """
        return PlotInput(
            self.input.get_file(index),
            self.input.make_hist_name(variable, index),
            self.input.make_hist_name(variable, index, tag if rename_tag is None else rename_tag),
            self.input.make_legend(index),
            draw,
            style if style is not None else PlotStyle(),
            rebin if rebin is not None else Rebin()
        )

    def make_plot_1d(self, variable: str, opt: RangeOpt, ofile) -> Dict:
        raise NotImplementedError(f"{self.name} has no 1D plot")

    def make_plot_2d(self, variable: str, ofile) -> Dict:
        raise NotImplementedError(f"{self.name} has no 2D plot")
