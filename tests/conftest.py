"""
Shared fixtures: an in-memory histogram backend and a naming database
whose files live in that backend.
"""

from pathlib import Path
import sys

import pytest

TESTS_DIR = Path(__file__).parent.resolve()
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

import fake_root  # noqa: E402

from phc_plotter import layouts  # noqa: E402
from phc_plotter.dispatch import FileInput, Input  # noqa: E402
from phc_plotter.root_backend import reset_backend, use_backend  # noqa: E402

MEMORY_FILES = [
    ["mem/pp_data.root", "mem/pp_sim.root", "mem/pp_sim.root"],
    ["mem/pau_data.root", "mem/pau_sim.root", "mem/pau_sim.root"],
]


# ============================================================================
# Backend
# ============================================================================

@pytest.fixture(autouse=True)
def fake_backend():
    """Route every histogram/drawing call to the in-memory backend."""
    fake_root.reset()
    use_backend(fake_root)
    yield fake_root
    reset_backend()
    layouts.reset_layout_config()
    fake_root.reset()


@pytest.fixture()
def ofile(fake_backend):
    """Open in-memory output file."""
    tfile = fake_backend.TFile.Open("mem/output.root", "recreate")
    yield tfile
    tfile.Close()


# ============================================================================
# Naming database
# ============================================================================

@pytest.fixture()
def input_db():
    """Input database whose files resolve to in-memory files."""
    return Input(FileInput(MEMORY_FILES))


@pytest.fixture()
def store_hists(fake_backend, input_db):
    """
    Put histograms named after plot indices into the in-memory files.

    Usage: store_hists(variable, indices, contents) stores one 1D
    histogram per index, all with the given bin contents.
    """
    def _store(variable, indices, contents, make=None):
        make = make or fake_backend.make_th1d
        for index in indices:
            name = input_db.make_hist_name(variable, index)
            fake_backend.put(input_db.get_file(index), make(name, contents))
    return _store
