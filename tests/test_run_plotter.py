"""
Tests for the command-line driver.
"""

import json
import os

import pytest

import fake_root
from phc_plotter.dispatch import (
    FileInput, Input, Level, OutputRoutine, PlotIndex, PtJet, Species, Spin
)
from phc_plotter.errors import ConfigurationError
from phc_plotter.run_plotter import (
    PlotterRun, keep_index, load_file_input, main, make_index_range, parse_args, variables_for
)

MEMORY_CONFIG = {
    "PP": ["mem/pp_data.root", "mem/pp_sim.root", "mem/pp_sim.root"],
    "PAu": ["mem/pau_data.root", "mem/pau_sim.root", "mem/pau_sim.root"],
}


def write_json(tmp_path, config, name="files.json"):
    path = tmp_path / name
    path.write_text(json.dumps(config))
    return str(path)


def store_pp_vs_pau_inputs(names):
    """Every histogram the PPVsPAu plots read without 2D figures."""
    for level in Level:
        for spin in (Spin.BU, Spin.BD, Spin.SP_INT):
            for species in Species:
                for pt in (PtJet.PT5, PtJet.PT10, PtJet.PT15):
                    index = PlotIndex(level, species, pt, spin=spin)
                    for variable in ("EEC", "CollinsBlue", "BoerMuldersBlue"):
                        name = names.make_hist_name(variable, index)
                        fake_root.put(names.get_file(index),
                                      fake_root.make_th1d(name, [1.0, 2.0, 3.0, 4.0]))


# ============================================================================
# Arguments and configuration
# ============================================================================

def test_parse_args_defaults():
    args = parse_args([])
    assert args.plots == ["SimVsData"]
    assert args.output_dir == "."
    assert args.files is None
    assert not args.no_2d
    assert not args.check_inputs


def test_parse_args_rejects_unknown_plot():
    with pytest.raises(SystemExit):
        parse_args(["--plots", "Everything"])


def test_load_file_input_from_dict(tmp_path):
    file_input = load_file_input(write_json(tmp_path, MEMORY_CONFIG))
    assert file_input.files[1][0] == "mem/pau_data.root"


def test_load_file_input_from_list(tmp_path):
    config = [MEMORY_CONFIG["PP"], MEMORY_CONFIG["PAu"]]
    file_input = load_file_input(write_json(tmp_path, config))
    assert file_input.files == config


@pytest.mark.parametrize("config", [
    {"PP": MEMORY_CONFIG["PP"]},
    [["only_one.root"]],
    "not a list",
])
def test_load_file_input_errors(tmp_path, config):
    with pytest.raises(ConfigurationError):
        load_file_input(write_json(tmp_path, config))


# ============================================================================
# Index selection
# ============================================================================

@pytest.mark.parametrize("routine, count", [
    (OutputRoutine.SIM_VS_DATA, 2 * 4 * 3 * 9),
    (OutputRoutine.VS_PT_JET, 2 * 3 * 3 * 9),
    (OutputRoutine.PP_VS_PAU, 3 * 3 * 9),
    (OutputRoutine.SPIN_RATIOS, 4 * 3),
    (OutputRoutine.CORRECT_SPECTRA, 2 * 3 * 9),
])
def test_index_range_sizes(routine, count):
    assert len(make_index_range(routine)) == count


def test_spin_ratios_only_pp():
    assert all(index.species == Species.PP
               for index in make_index_range(OutputRoutine.SPIN_RATIOS))


def test_keep_index_blue_only_with_pau():
    names = Input()
    pau_yellow = PlotIndex(species=Species.PAU, spin=Spin.YU)
    assert not keep_index(names, OutputRoutine.SIM_VS_DATA, pau_yellow)
    assert keep_index(names, OutputRoutine.SIM_VS_DATA, pau_yellow.replace(spin=Spin.BD))
    assert keep_index(names, OutputRoutine.SIM_VS_DATA, pau_yellow.replace(species=Species.PP))
    # both species appear in the same PPVsPAu figure
    assert not keep_index(names, OutputRoutine.PP_VS_PAU, PlotIndex(spin=Spin.YD))
    assert not keep_index(names, OutputRoutine.SPIN_RATIOS, PlotIndex(species=Species.PAU))


def test_yellow_variables_only_for_pp():
    vars_1d, vars_2d = variables_for(PlotIndex(species=Species.PP))
    assert "CollinsYell" in [var for var, _, _ in vars_1d]
    assert "BoerMuldersYellVsR" in [var for var, _ in vars_2d]

    vars_1d, vars_2d = variables_for(PlotIndex(species=Species.PAU), with_2d=False)
    assert "CollinsYell" not in [var for var, _, _ in vars_1d]
    assert vars_2d == []


# ============================================================================
# Runs
# ============================================================================

def test_run_pp_vs_pau(tmp_path):
    names = Input(FileInput([MEMORY_CONFIG["PP"], MEMORY_CONFIG["PAu"]]))
    store_pp_vs_pau_inputs(names)

    run = PlotterRun(names, str(tmp_path), do_2d=False, verbose=False)
    result = run.run(OutputRoutine.PP_VS_PAU)

    # 3 levels x 3 charges x 3 blue spins, 3 variables each
    assert result['success']
    assert result['figures'] == 27 * 3
    eec_path = os.path.join(str(tmp_path), "ppVsPAuEEC.root")
    assert eec_path in result['files']
    assert "cPPVsPAuEECDataJet_ch0spBU" in fake_root.FILES[eec_path]
    assert run.summary['indices'] == 27


def test_main_end_to_end(tmp_path, capsys):
    names = Input(FileInput([MEMORY_CONFIG["PP"], MEMORY_CONFIG["PAu"]]))
    store_pp_vs_pau_inputs(names)
    files = write_json(tmp_path, MEMORY_CONFIG)

    status = main(["--plots", "PPVsPAu", "--no-2d", "--quiet", "--files", files,
                   "--output-dir", str(tmp_path / "out")])

    out = capsys.readouterr().out
    assert status == 0
    assert "Figures written: 81" in out
    assert "✅ SUCCESS" in out
    collins = os.path.join(str(tmp_path / "out"), "ppVsPAuCollins.root")
    assert "cPPVsPAuCollinsBlueTrueJet_chINTspINT" in fake_root.FILES[collins]


def test_main_fails_on_missing_histograms(tmp_path, capsys):
    files = write_json(tmp_path, MEMORY_CONFIG)
    status = main(["--plots", "VsPtJet", "--no-2d", "--quiet", "--files", files,
                   "--output-dir", str(tmp_path)])
    assert status == 1
    assert "❌ FAILED" in capsys.readouterr().out


def test_main_fails_on_bad_file_list(tmp_path, capsys):
    files = write_json(tmp_path, {"PP": ["a.root"], "PAu": ["b.root"]})
    assert main(["--files", files, "--output-dir", str(tmp_path)]) == 1
    assert "expected 3 files" in capsys.readouterr().out


def test_main_check_inputs_reports_missing(tmp_path, capsys):
    files = write_json(tmp_path, MEMORY_CONFIG)
    status = main(["--plots", "SpinRatios", "--check-inputs", "--quiet", "--files", files,
                   "--output-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert status == 1
    assert "INPUT INVENTORY" in out
    assert "inputs are missing" in out
