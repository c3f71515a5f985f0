#!/usr/bin/env python3
"""
Input inventory - checks that every histogram a run needs is present.

This class handles:
- Expanding base plot indices into the sibling indices the wirings read
- Composing the file and histogram names of each sibling
- Opening each distinct file once with uproot and recording what is missing
"""

import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Sequence, Set

import uproot

from .dispatch.naming import Input
from .dispatch.plot_index import PlotIndex


def sibling_indices(index: PlotIndex, choices: Mapping[str, Sequence]) -> List[PlotIndex]:
    """
    Fill the unselected fields of an index with every listed choice.

    Args:
        index: Base index
        choices: Field name -> values to use when that field is None

    Returns:
        All combinations, or just the index itself if nothing is expanded
    """
    names = [name for name in choices if getattr(index, name) is None]
    if not names:
        return [index]
    return [index.replace(**dict(zip(names, values)))
            for values in itertools.product(*(choices[name] for name in names))]


def collect_requests(input: Input, indices: Iterable[PlotIndex],
                     variables: Iterable[str]) -> Dict[str, Set[str]]:
    """Histogram names needed from each file for the given indices and variables."""
    variables = list(variables)
    requests: Dict[str, Set[str]] = {}
    for index in indices:
        path = input.get_file(index)
        for variable in variables:
            requests.setdefault(path, set()).add(input.make_hist_name(variable, index))
    return requests


@dataclass
class InventoryReport:
    files_checked: int = 0
    objects_checked: int = 0
    missing_files: List[str] = field(default_factory=list)
    missing_objects: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.missing_files and not self.missing_objects

    @property
    def n_missing_objects(self) -> int:
        return sum(len(names) for names in self.missing_objects.values())

    def print_summary(self) -> None:
        print("\n" + "=" * 80)
        print("INPUT INVENTORY")
        print("=" * 80)
        print(f"    • Files checked: {self.files_checked}")
        print(f"    • Histograms checked: {self.objects_checked}")
        print(f"    • Missing files: {len(self.missing_files)}")
        print(f"    • Missing histograms: {self.n_missing_objects}")
        for path in self.missing_files:
            print(f"      ✗ {path}")
        for path, names in self.missing_objects.items():
            print(f"      ✗ {path}:")
            for name in names:
                print(f"          {name}")
        print("=" * 80)


def check_inputs(requests: Mapping[str, Iterable[str]]) -> InventoryReport:
    """
    Open each requested file and look up the requested names.

    Args:
        requests: File path -> histogram names expected in it

    Returns:
        InventoryReport listing files that could not be opened and names
        that were not found
    """
    report = InventoryReport()
    for path, names in requests.items():
        names = sorted(set(names))
        report.files_checked += 1
        try:
            with uproot.open(path) as tfile:
                keys = set(tfile.keys(cycle=False))
        except (OSError, ValueError):
            report.missing_files.append(path)
            continue

        report.objects_checked += len(names)
        missing = [name for name in names if name not in keys]
        if missing:
            report.missing_objects[path] = missing
    return report
