"""
Tests for the input inventory, reading real ROOT files written with uproot.
"""

import numpy as np
import pytest
import uproot

from phc_plotter.dispatch import FileInput, Input, Level, PlotIndex, PtJet, Species
from phc_plotter.input_inventory import (
    InventoryReport, check_inputs, collect_requests, sibling_indices
)


@pytest.fixture()
def root_file(tmp_path):
    path = tmp_path / "spectra.root"
    values = np.random.default_rng(7).uniform(0.0, 3.0, 100)
    with uproot.recreate(path) as tfile:
        tfile["hDataJetEECStat_pt0"] = np.histogram(values, bins=10, range=(0.0, 3.0))
        tfile["hDataJetEECStat_pt1"] = np.histogram(values, bins=10, range=(0.0, 3.0))
    return str(path)


# ============================================================================
# Requests
# ============================================================================

def test_sibling_indices_fill_unset_fields():
    index = PlotIndex(species=Species.PP)
    siblings = sibling_indices(index, {'level': [Level.DATA, Level.TRUE],
                                       'pt': [PtJet.PT5, PtJet.PT10]})
    assert len(siblings) == 4
    assert PlotIndex(Level.TRUE, Species.PP, PtJet.PT10) in siblings
    assert all(s.species == Species.PP for s in siblings)


def test_sibling_indices_keep_set_fields():
    index = PlotIndex(level=Level.RECO, species=Species.PAU)
    assert sibling_indices(index, {'level': list(Level)}) == [index]


def test_collect_requests_groups_by_file():
    names = Input(FileInput([["pp_data", "pp_sim", "pp_sim"], ["pa_data", "pa_sim", "pa_sim"]]))
    indices = [PlotIndex(level, Species.PP, PtJet.PT5) for level in Level]
    requests = collect_requests(names, indices, ["EEC", "CollinsBlue"])

    assert set(requests) == {"pp_data", "pp_sim"}
    assert requests["pp_data"] == {"hDataJetEECStat_pt0", "hDataJetCollinsBlueStat_pt0"}
    assert len(requests["pp_sim"]) == 4


# ============================================================================
# Checks
# ============================================================================

def test_everything_present(root_file):
    report = check_inputs({root_file: ["hDataJetEECStat_pt0", "hDataJetEECStat_pt1"]})
    assert report.ok
    assert report.files_checked == 1
    assert report.objects_checked == 2


def test_missing_object(root_file):
    report = check_inputs({root_file: ["hDataJetEECStat_pt0", "hDataJetEECStat_pt2"]})
    assert not report.ok
    assert report.missing_objects == {root_file: ["hDataJetEECStat_pt2"]}
    assert report.n_missing_objects == 1


def test_missing_file(tmp_path, root_file):
    absent = str(tmp_path / "absent.root")
    report = check_inputs({absent: ["hAnything"], root_file: ["hDataJetEECStat_pt1"]})
    assert report.missing_files == [absent]
    assert report.files_checked == 2
    assert report.objects_checked == 1


def test_summary_lists_what_is_missing(capsys):
    report = InventoryReport(files_checked=2, objects_checked=3,
                             missing_files=["gone.root"],
                             missing_objects={"here.root": ["hLost"]})
    report.print_summary()
    out = capsys.readouterr().out
    assert "INPUT INVENTORY" in out
    assert "gone.root" in out
    assert "hLost" in out
