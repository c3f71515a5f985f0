#!/usr/bin/env python3
"""
Output - registry of the output wirings.

This class handles:
- The closed set of routines (OutputRoutine) and their wirings
- Propagating the current PlotIndex, PlotMaker and Input to every wiring
- Lookup by routine or by name
"""

from enum import Enum
from typing import Dict, Iterator, Optional, Union

from ..errors import UnknownRoutine
from ..plot_maker import PlotMaker
from .base_output import BaseOutput
from .correct_spectra import CorrectSpectra
from .naming import Input
from .plot_index import PlotIndex
from .pp_vs_pau import PPVsPAu
from .reco_vs_data import RecoVsData
from .sim_vs_data import SimVsData
from .spin_ratios import SpinRatios
from .vs_pt_jet import VsPtJet


class OutputRoutine(Enum):
    VS_PT_JET = "VsPtJet"
    SPIN_RATIOS = "SpinRatios"
    SIM_VS_DATA = "SimVsData"
    RECO_VS_DATA = "RecoVsData"
    PP_VS_PAU = "PPVsPAu"
    CORRECT_SPECTRA = "CorrectSpectra"

    @classmethod
    def parse(cls, name: Union['OutputRoutine', str]) -> 'OutputRoutine':
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownRoutine(str(name)) from None


WIRINGS = {
    OutputRoutine.VS_PT_JET: VsPtJet,
    OutputRoutine.SPIN_RATIOS: SpinRatios,
    OutputRoutine.SIM_VS_DATA: SimVsData,
    OutputRoutine.RECO_VS_DATA: RecoVsData,
    OutputRoutine.PP_VS_PAU: PPVsPAu,
    OutputRoutine.CORRECT_SPECTRA: CorrectSpectra,
}


class Output:
    def __init__(self, index: Optional[PlotIndex] = None, maker: Optional[PlotMaker] = None,
                 input: Optional[Input] = None):
        """
        The registry starts uninitialized; when index, maker and input are
        all given the wirings are created right away.
        """
        self.index = index if index is not None else PlotIndex()
        self.maker = maker
        self.input = input
        self._wirings: Dict[OutputRoutine, BaseOutput] = {}
        if index is not None and maker is not None and input is not None:
            self.init()

    @property
    def is_init(self) -> bool:
        return bool(self._wirings)

    def set_index(self, index: PlotIndex) -> None:
        self.update_index(index)

    def set_maker(self, maker: PlotMaker) -> None:
        self.maker = maker
        for wiring in self._wirings.values():
            wiring.set_maker(maker)

    def set_input(self, input: Input) -> None:
        self.input = input
        for wiring in self._wirings.values():
            wiring.set_input(input)

    def init(self) -> None:
        """Create one wiring per routine, if not already done."""
        if self.is_init:
            return
        if self.maker is None:
            self.maker = PlotMaker()
        if self.input is None:
            self.input = Input()
        self._wirings = {
            routine: wiring(self.index, self.maker, self.input)
            for routine, wiring in WIRINGS.items()
        }

    def update_index(self, index: PlotIndex) -> None:
        """Set a new base index on every wiring."""
        self.index = index
        for wiring in self._wirings.values():
            wiring.set_index(index)

    def clear(self) -> None:
        self._wirings = {}

    def get(self, name: Union[OutputRoutine, str]) -> BaseOutput:
        routine = OutputRoutine.parse(name)
        if routine not in self._wirings:
            raise UnknownRoutine(routine.value)
        return self._wirings[routine]

    def __getitem__(self, name: Union[OutputRoutine, str]) -> BaseOutput:
        return self.get(name)

    def __contains__(self, name) -> bool:
        try:
            self.get(name)
        except UnknownRoutine:
            return False
        return True

    def __iter__(self) -> Iterator[OutputRoutine]:
        return iter(self._wirings)

    def __len__(self) -> int:
        return len(self._wirings)
