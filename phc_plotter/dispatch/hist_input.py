#!/usr/bin/env python3
"""
HistInput - tags and legends of the histogram buckets.
"""

from enum import IntEnum
from typing import List

from .file_input import lookup


class PtJet(IntEnum):
    PT5 = 0
    PT10 = 1
    PT15 = 2
    PT_INT = 3


class CFJet(IntEnum):
    CF_LOW = 0
    CF_HIGH = 1
    CF_INT = 2


class Charge(IntEnum):
    NEG = 0
    POS = 1
    CH_INT = 2


class Spin(IntEnum):
    BU = 0
    BD = 1
    YU = 2
    YD = 3
    BUYU = 4
    BUYD = 5
    BDYU = 6
    BDYD = 7
    SP_INT = 8


BLUE_SPINS = (Spin.BU, Spin.BD, Spin.SP_INT)

DEFAULT_PT_TAGS = ["pt0", "pt1", "pt2", "ptINT"]
DEFAULT_PT_LEGENDS = [
    "p_{T}^{jet} #in (5, 10) GeV/c",
    "p_{T}^{jet} #in (10, 15) GeV/c",
    "p_{T}^{jet} #in (15, 20) GeV/c",
    "p_{T}^{jet} > 5 GeV/c",
]
DEFAULT_CF_TAGS = ["cf0", "cf1", "cfINT"]
DEFAULT_CF_LEGENDS = ["jet CF #in (0, 0.5)", "jet CF #in (0.5, 1)", "jet CF integrated"]
DEFAULT_CHARGE_TAGS = ["ch0", "ch1", "chINT"]
DEFAULT_CHARGE_LEGENDS = ["jet charge < 0", "jet charge > 0", "jet charge integrated"]
DEFAULT_SPIN_TAGS = ["spBU", "spBD", "spYU", "spYD", "spBUYU", "spBUYD", "spBDYU", "spBDYD", "spINT"]
DEFAULT_SPIN_LEGENDS = [
    "B#uparrow",
    "B#downarrow",
    "Y#uparrow",
    "Y#downarrow",
    "B#uparrowY#uparrow",
    "B#uparrowY#downarrow",
    "B#downarrowY#uparrow",
    "B#downarrowY#downarrow",
    "Integrated",
]


class HistInput:
    def __init__(self):
        self.pt_tags = list(DEFAULT_PT_TAGS)
        self.pt_legends = list(DEFAULT_PT_LEGENDS)
        self.cf_tags = list(DEFAULT_CF_TAGS)
        self.cf_legends = list(DEFAULT_CF_LEGENDS)
        self.charge_tags = list(DEFAULT_CHARGE_TAGS)
        self.charge_legends = list(DEFAULT_CHARGE_LEGENDS)
        self.spin_tags = list(DEFAULT_SPIN_TAGS)
        self.spin_legends = list(DEFAULT_SPIN_LEGENDS)

    def set_pt_strings(self, tags: List[str], legends: List[str]) -> None:
        self.pt_tags, self.pt_legends = _checked(tags, legends, 'pt')

    def set_cf_strings(self, tags: List[str], legends: List[str]) -> None:
        self.cf_tags, self.cf_legends = _checked(tags, legends, 'cf')

    def set_charge_strings(self, tags: List[str], legends: List[str]) -> None:
        self.charge_tags, self.charge_legends = _checked(tags, legends, 'charge')

    def set_spin_strings(self, tags: List[str], legends: List[str]) -> None:
        self.spin_tags, self.spin_legends = _checked(tags, legends, 'spin')

    def get_pt_tag(self, pt: int) -> str:
        return lookup(self.pt_tags, pt, 'pt')

    def get_pt_legend(self, pt: int) -> str:
        return lookup(self.pt_legends, pt, 'pt')

    def get_cf_tag(self, cf: int) -> str:
        return lookup(self.cf_tags, cf, 'cf')

    def get_cf_legend(self, cf: int) -> str:
        return lookup(self.cf_legends, cf, 'cf')

    def get_charge_tag(self, chrg: int) -> str:
        return lookup(self.charge_tags, chrg, 'chrg')

    def get_charge_legend(self, chrg: int) -> str:
        return lookup(self.charge_legends, chrg, 'chrg')

    def get_spin_tag(self, spin: int) -> str:
        return lookup(self.spin_tags, spin, 'spin')

    def get_spin_legend(self, spin: int) -> str:
        return lookup(self.spin_legends, spin, 'spin')


def _checked(tags: List[str], legends: List[str], field: str):
    if not tags:
        raise ValueError(f"{field} tags must not be empty")
    if len(tags) != len(legends):
        raise ValueError(f"{field} tags and legends differ in length")
    return list(tags), list(legends)
