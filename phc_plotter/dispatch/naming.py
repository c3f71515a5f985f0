#!/usr/bin/env python3
"""
Input - composes file paths, histogram names, legends and canvas names.

All names are pure functions of the FileInput/HistInput databases and a
PlotIndex. A field of the index that is None contributes nothing.
"""

from typing import Optional

from .file_input import FileInput, Species
from .hist_input import BLUE_SPINS, HistInput
from .plot_index import PlotIndex


class Input:
    def __init__(self, files: Optional[FileInput] = None, hists: Optional[HistInput] = None):
        self.files = files if files is not None else FileInput()
        self.hists = hists if hists is not None else HistInput()

    def set_files(self, files: FileInput) -> None:
        self.files = files

    def set_hists(self, hists: HistInput) -> None:
        self.hists = hists

    @staticmethod
    def is_pau(index: PlotIndex) -> bool:
        return index.species == Species.PAU

    @staticmethod
    def is_blue_polarization(index: PlotIndex) -> bool:
        return index.spin in BLUE_SPINS

    def get_file(self, index: PlotIndex) -> str:
        return self.files.get_file(index)

    def make_species_tag(self, base: str, species) -> str:
        if species is None:
            return base
        return base + self.files.get_species_tag(species)

    def make_hist_name(self, variable: str, index: PlotIndex, tag: str = "") -> str:
        """
        Name of a histogram in the input files.

        "h" + tag + level + variable + "Stat_" + pt + cf + spin, where a
        missing field drops its token. Charge is not part of the name.
        """
        name = "h" + tag
        if index.level is not None:
            name += self.files.get_level_tag(index.level)
        name += variable + "Stat_"
        if index.pt is not None:
            name += self.hists.get_pt_tag(index.pt)
        if index.cf is not None:
            name += self.hists.get_cf_tag(index.cf)
        if index.spin is not None:
            name += self.hists.get_spin_tag(index.spin)
        return name

    def make_legend(self, index: PlotIndex) -> str:
        legend = ""
        if index.species is not None:
            legend += self.files.get_species_legend(index.species) + " "
        if index.level is not None:
            legend += self.files.get_level_legend(index.level) + " "
        if index.spin is not None:
            legend += self.hists.get_spin_legend(index.spin) + ", "
        if index.pt is not None:
            legend += self.hists.get_pt_legend(index.pt)
        if index.chrg is not None:
            legend += ", " + self.hists.get_charge_legend(index.chrg)
        if index.cf is not None:
            legend += ", " + self.hists.get_cf_legend(index.cf)
        return legend

    def make_canvas_name(self, base: str, index: PlotIndex) -> str:
        name = base
        if index.species is not None:
            name += "_" + self.files.get_species_tag(index.species)
        if index.level is not None:
            name += self.files.get_level_tag(index.level)
        name += "_"
        if index.pt is not None:
            name += self.hists.get_pt_tag(index.pt)
        if index.chrg is not None:
            name += self.hists.get_charge_tag(index.chrg)
        if index.cf is not None:
            name += self.hists.get_cf_tag(index.cf)
        if index.spin is not None:
            name += self.hists.get_spin_tag(index.spin)
        return name
