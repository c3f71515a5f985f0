#!/usr/bin/env python3
"""
FileInput - input files and the species/level naming strings.
"""

import copy
from enum import IntEnum
from typing import List, Optional, Sequence

from ..errors import OutOfRangeIndex


class Species(IntEnum):
    PP = 0
    PAU = 1


class Level(IntEnum):
    DATA = 0
    RECO = 1
    TRUE = 2


DEFAULT_FILES = [
    [
        "./input/ppRun15_datFullStats_testOptimizing_r03all.d26m3y2025.root",
        "./input/ppRun15_simHalfStats_testOptimizing_r03all.d26m3y2025.root",
        "./input/ppRun15_simHalfStats_testOptimizing_r03all.d26m3y2025.root",
    ],
    [
        "./input/Jan2025/paRun15_dataWithJetCharge_r03all_084.d27m1y2025.root",
        "./input/Jan2025/paRun15_simWithJetCharge_r03all_084.d27m1y2025.root",
        "./input/Jan2025/paRun15_simWithJetCharge_r03all_084.d27m1y2025.root",
    ],
]

DEFAULT_SPECIES_TAGS = ["PP", "PAu"]
DEFAULT_SPECIES_LEGENDS = ["#bf{[p+p]}", "#bf{[p+Au]}"]
DEFAULT_LEVEL_TAGS = ["DataJet", "RecoJet", "TrueJet"]
DEFAULT_LEVEL_LEGENDS = ["#bf{[Data]}", "#bf{[Reco.]}", "#bf{[Truth]}"]


def lookup(values: Sequence, index: Optional[int], field: str):
    """Return values[index], raising OutOfRangeIndex for a missing or bad index."""
    if index is None or not 0 <= int(index) < len(values):
        raise OutOfRangeIndex(field, -1 if index is None else int(index), len(values))
    return values[int(index)]


class FileInput:
    """
    Files indexed by species and level, plus species and level tags/legends.

    files[species][level] is the path holding histograms of that species
    at that level.
    """

    def __init__(self, files: Optional[List[List[str]]] = None):
        self.files = copy.deepcopy(files if files is not None else DEFAULT_FILES)
        self.species_tags = list(DEFAULT_SPECIES_TAGS)
        self.species_legends = list(DEFAULT_SPECIES_LEGENDS)
        self.level_tags = list(DEFAULT_LEVEL_TAGS)
        self.level_legends = list(DEFAULT_LEVEL_LEGENDS)

    def set_files(self, files: List[List[str]]) -> None:
        self.files = copy.deepcopy(files)

    def set_file(self, species: int, level: int, path: str) -> None:
        lookup(self.files, species, 'species')
        lookup(self.files[species], level, 'level')
        self.files[species][level] = path

    def set_species_tags(self, tags: List[str]) -> None:
        self.species_tags = _sized(tags, len(Species), 'species tags')

    def set_species_legends(self, legends: List[str]) -> None:
        self.species_legends = _sized(legends, len(Species), 'species legends')

    def set_level_tags(self, tags: List[str]) -> None:
        self.level_tags = _sized(tags, len(Level), 'level tags')

    def set_level_legends(self, legends: List[str]) -> None:
        self.level_legends = _sized(legends, len(Level), 'level legends')

    def get_species_tag(self, species: int) -> str:
        return lookup(self.species_tags, species, 'species')

    def get_species_legend(self, species: int) -> str:
        return lookup(self.species_legends, species, 'species')

    def get_level_tag(self, level: int) -> str:
        return lookup(self.level_tags, level, 'level')

    def get_level_legend(self, level: int) -> str:
        return lookup(self.level_legends, level, 'level')

    def get_species_files(self, index) -> List[str]:
        """All files of the species of a plot index."""
        return list(lookup(self.files, index.species, 'species'))

    def get_file(self, index) -> str:
        """File of the species and level of a plot index."""
        return lookup(self.get_species_files(index), index.level, 'level')

    def all_files(self) -> List[str]:
        """Every distinct file path, in species/level order."""
        paths = []
        for species_files in self.files:
            for path in species_files:
                if path not in paths:
                    paths.append(path)
        return paths


def _sized(values: List[str], expected: int, field: str) -> List[str]:
    """Copy of values, which must hold one string per enum member."""
    if len(values) != expected:
        raise ValueError(f"{field} need {expected} entries, got {len(values)}")
    return list(values)
