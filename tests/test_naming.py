"""
Tests for plot indices and the naming database.
"""

import pytest

from phc_plotter.dispatch import (
    CFJet, Charge, FileInput, HistInput, Input, Level, PlotIndex, PlotIndexRange, PtJet,
    Species, Spin
)
from phc_plotter.errors import OutOfRangeIndex

FULL_INDEX = PlotIndex(Level.RECO, Species.PAU, PtJet.PT10, CFJet.CF_HIGH, Charge.POS, Spin.BD)


# ============================================================================
# Plot indices
# ============================================================================

class TestPlotIndex:
    def test_minus_one_means_absent(self):
        index = PlotIndex.from_ints(level=0, species=-1, pt=2)
        assert index.level == Level.DATA
        assert index.species is None
        assert index.pt == PtJet.PT15
        assert index.as_ints() == (0, -1, 2, -1, -1, -1)

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeIndex) as excinfo:
            PlotIndex.from_ints(spin=9)
        assert excinfo.value.field == 'spin'
        assert excinfo.value.size == len(Spin)

    def test_replace_keeps_other_fields(self):
        changed = FULL_INDEX.replace(pt=PtJet.PT5, level=None)
        assert changed.pt == PtJet.PT5
        assert changed.level is None
        assert changed.spin == Spin.BD
        assert FULL_INDEX.pt == PtJet.PT10

    def test_hashable(self):
        assert len({FULL_INDEX, FULL_INDEX.replace(), PlotIndex()}) == 2


class TestPlotIndexRange:
    def test_unset_fields_count_once(self):
        index_range = PlotIndexRange()
        assert index_range.count() == 1
        assert index_range.materialize() == [PlotIndex()]

    def test_count_matches_materialized(self):
        index_range = PlotIndexRange()
        index_range.do_all_levels()
        index_range.do_all_charges()
        index_range.do_all_spins()
        assert index_range.count() == 3 * 3 * 9
        assert len(index_range.materialize()) == index_range.count()
        assert len(index_range) == index_range.count()

    def test_spin_varies_fastest(self):
        index_range = PlotIndexRange()
        index_range.set_level_range(0, 1)
        index_range.set_spin_range(0, 1)
        indices = index_range.materialize()
        assert [(i.level, i.spin) for i in indices] == [
            (Level.DATA, Spin.BU), (Level.DATA, Spin.BD),
            (Level.RECO, Spin.BU), (Level.RECO, Spin.BD),
        ]

    def test_ranges_are_clamped(self):
        index_range = PlotIndexRange()
        index_range.set_pt_range(-4, 10)
        index_range.set_species_range(1, 7)
        assert index_range.pt == (0, len(PtJet) - 1)
        assert index_range.species == (1, 1)
        assert index_range.count() == len(PtJet)

    def test_iteration_follows_materialize(self):
        index_range = PlotIndexRange()
        index_range.do_all_species()
        assert list(index_range) == []
        index_range.materialize()
        assert [i.species for i in index_range] == [Species.PP, Species.PAU]


# ============================================================================
# Names and legends
# ============================================================================

class TestNames:
    def test_hist_name(self):
        names = Input()
        assert names.make_hist_name("EEC", FULL_INDEX) == "hRecoJetEECStat_pt1cf1spBD"
        assert names.make_hist_name("EEC", FULL_INDEX, "Tag") == "hTagRecoJetEECStat_pt1cf1spBD"

    def test_hist_name_ignores_charge(self):
        names = Input()
        assert (names.make_hist_name("EEC", FULL_INDEX)
                == names.make_hist_name("EEC", FULL_INDEX.replace(chrg=Charge.NEG)))

    def test_absent_fields_drop_tokens(self):
        names = Input()
        index = PlotIndex(pt=PtJet.PT5)
        assert names.make_hist_name("CollinsBlue", index) == "hCollinsBlueStat_pt0"
        assert names.make_canvas_name("cBase", index) == "cBase_pt0"
        assert names.make_legend(index) == "p_{T}^{jet} #in (5, 10) GeV/c"

    def test_legend(self):
        assert Input().make_legend(FULL_INDEX) == (
            "#bf{[p+Au]} #bf{[Reco.]} B#downarrow, p_{T}^{jet} #in (10, 15) GeV/c"
            ", jet charge > 0, jet CF #in (0.5, 1)")

    def test_canvas_name(self):
        assert Input().make_canvas_name("cTest", FULL_INDEX) == "cTest_PAuRecoJet_pt1ch1cf1spBD"

    def test_species_tag(self):
        names = Input()
        assert names.make_species_tag("DataVsSim", Species.PP) == "DataVsSimPP"
        assert names.make_species_tag("DataVsSim", None) == "DataVsSim"

    def test_names_are_stable(self):
        names = Input()
        assert names.make_hist_name("EEC", FULL_INDEX) == names.make_hist_name("EEC", FULL_INDEX)
        assert names.make_legend(FULL_INDEX) == names.make_legend(FULL_INDEX)

    def test_polarization_queries(self):
        assert Input.is_pau(FULL_INDEX)
        assert not Input.is_pau(FULL_INDEX.replace(species=Species.PP))
        assert Input.is_blue_polarization(FULL_INDEX)
        assert Input.is_blue_polarization(FULL_INDEX.replace(spin=Spin.SP_INT))
        assert not Input.is_blue_polarization(FULL_INDEX.replace(spin=Spin.YU))


# ============================================================================
# Databases
# ============================================================================

class TestFileInput:
    def test_file_lookup(self):
        files = FileInput([["pp_d", "pp_r", "pp_t"], ["pa_d", "pa_r", "pa_t"]])
        names = Input(files)
        assert names.get_file(FULL_INDEX) == "pa_r"
        assert files.get_species_files(FULL_INDEX) == ["pa_d", "pa_r", "pa_t"]

    def test_file_needs_species_and_level(self):
        names = Input(FileInput([["d", "r", "t"]]))
        with pytest.raises(OutOfRangeIndex):
            names.get_file(PlotIndex(level=Level.DATA))
        with pytest.raises(OutOfRangeIndex):
            names.get_file(PlotIndex(species=Species.PAU, level=Level.DATA))

    def test_setters(self):
        files = FileInput([["d", "r", "t"], ["d", "r", "t"]])
        files.set_file(1, 2, "new_truth")
        files.set_species_tags(["pp", "pAu"])
        files.set_level_legends(["D", "R", "T"])
        assert files.files[1][2] == "new_truth"
        assert files.get_species_tag(1) == "pAu"
        assert files.get_level_legend(0) == "D"
        with pytest.raises(OutOfRangeIndex):
            files.set_file(2, 0, "nowhere")

    @pytest.mark.parametrize("setter, values", [
        ("set_species_tags", []),
        ("set_species_tags", ["pp"]),
        ("set_species_legends", ["p+p", "p+Au", "Au+Au"]),
        ("set_level_tags", []),
        ("set_level_legends", ["D", "R"]),
    ])
    def test_tag_lists_match_enums(self, setter, values):
        files = FileInput()
        with pytest.raises(ValueError):
            getattr(files, setter)(values)
        assert files.species_tags == ["PP", "PAu"]
        assert len(files.level_legends) == 3

    def test_all_files_unique(self):
        files = FileInput([["a", "b", "b"], ["c", "b", "d"]])
        assert files.all_files() == ["a", "b", "c", "d"]

    def test_files_are_copied(self):
        given = [["d", "r", "t"]]
        files = FileInput(given)
        given[0][0] = "changed"
        assert files.files[0][0] == "d"


class TestHistInput:
    def test_set_strings(self):
        hists = HistInput()
        hists.set_pt_strings(["a", "b"], ["A", "B"])
        assert hists.get_pt_tag(1) == "b"
        assert hists.get_pt_legend(0) == "A"
        with pytest.raises(OutOfRangeIndex):
            hists.get_pt_tag(2)

    def test_mismatched_strings(self):
        hists = HistInput()
        with pytest.raises(ValueError):
            hists.set_spin_strings(["a"], ["A", "B"])
        with pytest.raises(ValueError):
            hists.set_cf_strings([], [])
