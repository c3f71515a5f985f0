#!/usr/bin/env python3
"""
Plot indices and ranges of them.

A PlotIndex picks one bucket along each of six axes (level, species,
pt, cf, charge, spin). A field left as None means "not selected": the
bucket's token is dropped from names and legends.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..errors import OutOfRangeIndex
from .file_input import Level, Species
from .hist_input import CFJet, Charge, PtJet, Spin

FIELDS = ('level', 'species', 'pt', 'cf', 'chrg', 'spin')

ENUMS = {
    'level': Level,
    'species': Species,
    'pt': PtJet,
    'cf': CFJet,
    'chrg': Charge,
    'spin': Spin,
}


def to_enum(name: str, value):
    """Convert an int (or enum) to the field's enum; -1 and None give None."""
    if value is None:
        return None
    enum = ENUMS[name]
    ivalue = int(value)
    if ivalue == -1:
        return None
    if not 0 <= ivalue < len(enum):
        raise OutOfRangeIndex(name, ivalue, len(enum))
    return enum(ivalue)


@dataclass(frozen=True)
class PlotIndex:
    level: Optional[Level] = None
    species: Optional[Species] = None
    pt: Optional[PtJet] = None
    cf: Optional[CFJet] = None
    chrg: Optional[Charge] = None
    spin: Optional[Spin] = None

    def __post_init__(self):
        for name in FIELDS:
            object.__setattr__(self, name, to_enum(name, getattr(self, name)))

    @classmethod
    def from_ints(cls, level=-1, species=-1, pt=-1, cf=-1, chrg=-1, spin=-1) -> 'PlotIndex':
        return cls(level, species, pt, cf, chrg, spin)

    def replace(self, **changes) -> 'PlotIndex':
        """Copy of this index with some fields changed."""
        return dataclasses.replace(self, **changes)

    def as_ints(self) -> Tuple[int, ...]:
        return tuple(-1 if getattr(self, name) is None else int(getattr(self, name))
                     for name in FIELDS)


def _clamp(value: int, top: int) -> int:
    return max(0, min(int(value), top))


@dataclass
class PlotIndexRange:
    """
    Inclusive (start, stop) ranges along each axis of a PlotIndex.

    A range of (-1, -1) leaves the field unselected. Setting a range
    clamps both ends to the valid values of the field.
    """
    level: Tuple[int, int] = (-1, -1)
    species: Tuple[int, int] = (-1, -1)
    pt: Tuple[int, int] = (-1, -1)
    cf: Tuple[int, int] = (-1, -1)
    chrg: Tuple[int, int] = (-1, -1)
    spin: Tuple[int, int] = (-1, -1)
    indices: List[PlotIndex] = field(default_factory=list, compare=False)

    def _set_range(self, name: str, start: int, stop: int) -> None:
        top = len(ENUMS[name]) - 1
        setattr(self, name, (_clamp(start, top), _clamp(stop, top)))

    def set_level_range(self, start: int, stop: int) -> None:
        self._set_range('level', start, stop)

    def set_species_range(self, start: int, stop: int) -> None:
        self._set_range('species', start, stop)

    def set_pt_range(self, start: int, stop: int) -> None:
        self._set_range('pt', start, stop)

    def set_cf_range(self, start: int, stop: int) -> None:
        self._set_range('cf', start, stop)

    def set_charge_range(self, start: int, stop: int) -> None:
        self._set_range('chrg', start, stop)

    def set_spin_range(self, start: int, stop: int) -> None:
        self._set_range('spin', start, stop)

    def do_all_levels(self) -> None:
        self._set_range('level', 0, len(Level) - 1)

    def do_all_species(self) -> None:
        self._set_range('species', 0, len(Species) - 1)

    def do_all_pt(self) -> None:
        self._set_range('pt', 0, len(PtJet) - 1)

    def do_all_cf(self) -> None:
        self._set_range('cf', 0, len(CFJet) - 1)

    def do_all_charges(self) -> None:
        self._set_range('chrg', 0, len(Charge) - 1)

    def do_all_spins(self) -> None:
        self._set_range('spin', 0, len(Spin) - 1)

    def _values(self, name: str) -> range:
        start, stop = getattr(self, name)
        return range(start, stop + 1)

    def count(self) -> int:
        """Number of indices the current ranges produce."""
        total = 1
        for name in FIELDS:
            start, stop = getattr(self, name)
            total *= max(0, stop - start + 1)
        return total

    def materialize(self) -> List[PlotIndex]:
        """Fill and return the cartesian product, spin varying fastest."""
        self.indices = [
            PlotIndex.from_ints(level, species, pt, cf, chrg, spin)
            for level in self._values('level')
            for species in self._values('species')
            for pt in self._values('pt')
            for cf in self._values('cf')
            for chrg in self._values('chrg')
            for spin in self._values('spin')
        ]
        return self.indices

    def __iter__(self) -> Iterator[PlotIndex]:
        return iter(self.indices)

    def __len__(self) -> int:
        return len(self.indices)
