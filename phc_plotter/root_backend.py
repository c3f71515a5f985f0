#!/usr/bin/env python3
"""
Histogram and drawing backend selection.

Every histogram, pad, canvas, legend and file object used by the plotter is
created through the module returned by get_root(). By default that is PyROOT,
imported on first use with batch mode enabled and title/stat boxes disabled.
Any object exposing the same class names can be installed with use_backend().
"""

from typing import Any, Optional

_backend: Optional[Any] = None


def _load_pyroot() -> Any:
    """Import PyROOT and apply the global batch/style settings."""
    import ROOT

    # Enable batch mode and disable title/stat boxes
    ROOT.gROOT.SetBatch(True)
    ROOT.gStyle.SetOptTitle(0)
    ROOT.gStyle.SetOptStat(0)
    return ROOT


def use_backend(module: Any) -> None:
    """
    Install a histogram/drawing backend.

    Args:
        module: Object exposing TH1D, TH2D, TCanvas, TPad, TLegend,
                TPaveText, TLine, TBox, TEllipse and TFile
    """
    global _backend
    _backend = module


def reset_backend() -> None:
    """Forget the installed backend; the next get_root() loads PyROOT."""
    global _backend
    _backend = None


def get_root() -> Any:
    """Return the active backend, loading PyROOT if none is installed."""
    global _backend
    if _backend is None:
        _backend = _load_pyroot()
    return _backend
