#!/usr/bin/env python3
"""
Command-line driver for the PHENIX energy-correlator figures.

This class handles:
- Building the naming database (optionally from a JSON file list)
- Looping over species, levels, jet pt, charge and spin for each plot type
- Writing each figure into one output file per variable family
- Optional up-front check of the input files with uproot
"""

import argparse
import json
import os
import sys
from typing import Dict, List, Optional, Sequence

from tqdm import tqdm

from .base_options import base_plot_style, base_text_style, make_text_box
from .dispatch import (
    FileInput, Input, Level, Output, OutputRoutine, PlotIndex, PlotIndexRange, PtJet, Species,
    Spin
)
from .errors import ConfigurationError, PlotterError
from .input_inventory import check_inputs, collect_requests, sibling_indices
from .plot_maker import PlotMaker
from .plot_types import RangeOpt
from .plotting_tools import close_files, open_file

FAMILIES = ("EEC", "Collins", "BoerMulders")

# (variable, range option, family) drawn for every species
VARIABLES_1D = [
    ("EEC", RangeOpt.SIDE, "EEC"),
    ("CollinsBlue", RangeOpt.ANGLE, "Collins"),
    ("BoerMuldersBlue", RangeOpt.ANGLE, "BoerMulders"),
]
# yellow beam is only polarized in p+p
PP_VARIABLES_1D = [
    ("CollinsYell", RangeOpt.ANGLE, "Collins"),
    ("BoerMuldersYell", RangeOpt.ANGLE, "BoerMulders"),
]
VARIABLES_2D = [
    ("CollinsBlueVsR", "Collins"),
    ("BoerMuldersBlueVsR", "BoerMulders"),
]
PP_VARIABLES_2D = [
    ("CollinsYellVsR", "Collins"),
    ("BoerMuldersYellVsR", "BoerMulders"),
]

OUTPUT_PREFIXES = {
    OutputRoutine.SIM_VS_DATA: "simVsData",
    OutputRoutine.RECO_VS_DATA: "recoVsData",
    OutputRoutine.VS_PT_JET: "vsPtJet",
    OutputRoutine.PP_VS_PAU: "ppVsPAu",
    OutputRoutine.SPIN_RATIOS: "spinRatios",
    OutputRoutine.CORRECT_SPECTRA: "corrected",
}

PT_BINS = [PtJet.PT5, PtJet.PT10, PtJet.PT15]

# fields each wiring fills in itself, used to list the histograms it reads
SIBLINGS = {
    OutputRoutine.SIM_VS_DATA: {'level': list(Level)},
    OutputRoutine.RECO_VS_DATA: {'level': [Level.DATA, Level.RECO]},
    OutputRoutine.VS_PT_JET: {'pt': PT_BINS},
    OutputRoutine.PP_VS_PAU: {'species': list(Species), 'pt': PT_BINS},
    OutputRoutine.SPIN_RATIOS: {'level': list(Level),
                                'spin': [Spin.BD, Spin.YU, Spin.BU, Spin.YD]},
    OutputRoutine.CORRECT_SPECTRA: {'level': list(Level), 'pt': PT_BINS},
}


def make_index_range(routine: OutputRoutine) -> PlotIndexRange:
    """Fields each plot type loops over; the rest are left to the wiring."""
    index_range = PlotIndexRange()
    if routine in (OutputRoutine.SIM_VS_DATA, OutputRoutine.RECO_VS_DATA):
        index_range.do_all_species()
        index_range.do_all_pt()
        index_range.do_all_charges()
        index_range.do_all_spins()
    elif routine == OutputRoutine.VS_PT_JET:
        index_range.do_all_species()
        index_range.do_all_levels()
        index_range.do_all_charges()
        index_range.do_all_spins()
    elif routine == OutputRoutine.PP_VS_PAU:
        index_range.do_all_levels()
        index_range.do_all_charges()
        index_range.do_all_spins()
    elif routine == OutputRoutine.SPIN_RATIOS:
        index_range.set_species_range(Species.PP, Species.PP)
        index_range.do_all_pt()
        index_range.do_all_charges()
    elif routine == OutputRoutine.CORRECT_SPECTRA:
        index_range.do_all_species()
        index_range.do_all_charges()
        index_range.do_all_spins()
    index_range.materialize()
    return index_range


def keep_index(input: Input, routine: OutputRoutine, index: PlotIndex) -> bool:
    """Only blue polarizations exist when p+Au is involved."""
    if routine == OutputRoutine.SPIN_RATIOS:
        return not input.is_pau(index)
    if index.spin is None:
        return True
    involves_pau = index.species is None or input.is_pau(index)
    return not involves_pau or input.is_blue_polarization(index)


def variables_for(index: PlotIndex, with_2d: bool = True):
    """1D and 2D variables to draw for an index."""
    vars_1d = list(VARIABLES_1D)
    vars_2d = list(VARIABLES_2D) if with_2d else []
    if index.species == Species.PP:
        vars_1d += PP_VARIABLES_1D
        if with_2d:
            vars_2d += PP_VARIABLES_2D
    return vars_1d, vars_2d


def load_file_input(path: str) -> FileInput:
    """
    Read input files from JSON.

    Accepts either {"<species tag>": [data, reco, truth], ...} or a list
    of such lists in species order.
    """
    with open(path, "r") as handle:
        config = json.load(handle)

    file_input = FileInput()
    if isinstance(config, dict):
        files = []
        for tag in file_input.species_tags:
            if tag not in config:
                raise ConfigurationError(f"no files given for species '{tag}' in {path}")
            files.append(list(config[tag]))
    elif isinstance(config, list):
        files = [list(species_files) for species_files in config]
    else:
        raise ConfigurationError(f"cannot read a file list from {path}")

    for species_files in files:
        if len(species_files) != len(Level):
            raise ConfigurationError(
                f"expected {len(Level)} files (data, reco, truth) per species, "
                f"got {len(species_files)}")
    file_input.set_files(files)
    return file_input


class PlotterRun:
    def __init__(self, input: Optional[Input] = None, output_dir: str = ".",
                 do_2d: bool = True, verbose: bool = True):
        """
        Args:
            input: Naming database; defaults to the built-in file list
            output_dir: Directory for the output files
            do_2d: Draw the 2D figures as well
            verbose: Print progress from the routines
        """
        self.input = input if input is not None else Input()
        self.output_dir = output_dir
        self.do_2d = do_2d
        self.verbose = verbose

        self.maker = PlotMaker(base_plot_style(), base_text_style(), make_text_box(), verbose)
        self.output = Output(maker=self.maker, input=self.input)
        self.output.init()

        self.summary = {
            'plot_types': 0,
            'indices': 0,
            'figures': 0,
            'output_files': [],
        }

    def output_path(self, routine: OutputRoutine, family: str) -> str:
        return os.path.join(self.output_dir, f"{OUTPUT_PREFIXES[routine]}{family}.root")

    def indices(self, routine: OutputRoutine) -> List[PlotIndex]:
        return [index for index in make_index_range(routine)
                if keep_index(self.input, routine, index)]

    def check_inputs(self, routines: Sequence[OutputRoutine]):
        """Inventory of every histogram the given plot types would read."""
        requests: Dict[str, set] = {}
        for routine in routines:
            for index in self.indices(routine):
                vars_1d, vars_2d = variables_for(index, self.do_2d)
                variables = [var for var, _, _ in vars_1d] + [var for var, _ in vars_2d]
                siblings = sibling_indices(index, SIBLINGS[routine])
                for path, names in collect_requests(self.input, siblings, variables).items():
                    requests.setdefault(path, set()).update(names)
        return check_inputs(requests)

    def _count(self, result) -> int:
        return len(result) if isinstance(result, list) else 1

    def run(self, routine: OutputRoutine) -> Dict:
        """
        Make every figure of one plot type.

        Returns:
            {'success': True, 'figures': n, 'files': [paths]}
        """
        os.makedirs(self.output_dir, exist_ok=True)
        paths = {family: self.output_path(routine, family) for family in FAMILIES}
        ofiles = {}
        nfigures = 0
        try:
            for family, path in paths.items():
                ofiles[family] = open_file(path, "recreate")
            print(f"    Opened output files for {routine.value}")

            wiring = self.output[routine]
            indices = self.indices(routine)
            with tqdm(total=len(indices), desc=routine.value, unit="index",
                      disable=not self.verbose) as pbar:
                for index in indices:
                    species = index.species if index.species is not None else Species.PP
                    self.maker.set_text_box(make_text_box(int(species)))
                    self.output.update_index(index)

                    vars_1d, vars_2d = variables_for(index, self.do_2d)
                    for variable, opt, family in vars_1d:
                        nfigures += self._count(
                            wiring.make_plot_1d(variable, opt, ofiles[family]))
                    for variable, family in vars_2d:
                        nfigures += self._count(wiring.make_plot_2d(variable, ofiles[family]))
                    pbar.update(1)
        finally:
            close_files(ofiles.values())

        self.summary['plot_types'] += 1
        self.summary['indices'] += len(indices)
        self.summary['figures'] += nfigures
        self.summary['output_files'].extend(paths.values())
        return {'success': True, 'figures': nfigures, 'files': list(paths.values())}

    def print_summary(self) -> None:
        print("\n" + "=" * 80)
        print("PHENIX ENC PLOTTING SUMMARY")
        print("=" * 80)
        print(f"    • Plot types: {self.summary['plot_types']}")
        print(f"    • Plot indices: {self.summary['indices']}")
        print(f"    • Figures written: {self.summary['figures']}")
        print(f"    • Output files: {len(self.summary['output_files'])}")
        for path in self.summary['output_files']:
            print(f"      {path}")
        print("=" * 80)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Make PHENIX energy-correlator comparison figures')
    parser.add_argument('--plots', type=str, nargs='+',
                        default=[OutputRoutine.SIM_VS_DATA.value],
                        choices=[routine.value for routine in OutputRoutine],
                        help='Plot types to make (default: SimVsData)')
    parser.add_argument('--output-dir', type=str, default='.',
                        help='Directory for the output ROOT files (default: .)')
    parser.add_argument('--files', type=str,
                        help='JSON file with the data/reco/truth files of each species')
    parser.add_argument('--no-2d', action='store_true',
                        help='Skip the 2D figures')
    parser.add_argument('--check-inputs', action='store_true',
                        help='Check that every input histogram exists before plotting')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the summary')
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    print("\n  Beginning PHENIX ENC plotting routines...")
    try:
        file_input = load_file_input(args.files) if args.files else FileInput()
        run = PlotterRun(Input(file_input), args.output_dir,
                         do_2d=not args.no_2d, verbose=not args.quiet)
        routines = [OutputRoutine.parse(name) for name in args.plots]

        if args.check_inputs:
            report = run.check_inputs(routines)
            report.print_summary()
            if not report.ok:
                print("❌ FAILED: inputs are missing")
                return 1

        for routine in routines:
            print(f"    Beginning {routine.value} plots.")
            run.run(routine)
            print(f"    Completed {routine.value} plots.")
    except (PlotterError, OSError, ValueError) as exc:
        print(f"❌ FAILED: {exc}")
        return 1

    run.print_summary()
    print("✅ SUCCESS: finished PHENIX ENC plotting routines!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
