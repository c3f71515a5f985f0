#!/usr/bin/env python3
"""
PadOptions - flags applied to a canvas or pad when it is realized.
"""

from dataclasses import dataclass


@dataclass
class PadOptions:
    """Log scales, ticks, grids and border settings of a drawable surface."""
    logx: int = 0
    logy: int = 0
    tickx: int = 1
    ticky: int = 1
    gridx: int = 0
    gridy: int = 0
    bmode: int = 0
    bsize: int = 2
    frame: int = 0
    logz: int = 0

    def apply(self, pad) -> None:
        """
        Apply the options to a TPad or TCanvas.

        Args:
            pad: Realized pad or canvas
        """
        pad.SetLogx(self.logx)
        pad.SetLogy(self.logy)
        pad.SetLogz(self.logz)
        pad.SetTicks(self.tickx, self.ticky)
        pad.SetGrid(self.gridx, self.gridy)
        pad.SetBorderMode(self.bmode)
        pad.SetBorderSize(self.bsize)
        pad.SetFrameBorderMode(self.frame)
