#!/usr/bin/env python3
"""
Histogram helpers used by every plotting routine.

This module handles:
- Normalizing 1D and 2D histograms by their integral over a window
- Dividing and multiplying 1D and 2D histograms, falling back to a bin-by-bin
  nearest-center calculation when the binnings are incompatible
- Opening input files and retrieving objects, failing loudly when missing
- Sizing legends and text boxes from their number of lines
"""

from typing import Iterable, Optional, Tuple

import numpy as np

from .errors import InputMissing
from .plot_types import Interval
from .root_backend import get_root

MIN_DOUBLE = -np.finfo(np.float64).max
MAX_DOUBLE = np.finfo(np.float64).max


def normalize_by_integral(hist, norm: float = 1.0, start: float = MIN_DOUBLE,
                          stop: float = MAX_DOUBLE) -> bool:
    """
    Scale a 1D histogram so its integral over [start, stop] equals norm.

    Args:
        hist: Histogram to scale in place
        norm: Target integral
        start: Low edge of the integration window
        stop: High edge of the integration window

    Returns:
        True if the histogram was scaled, False if the integral was not positive
    """
    istart = hist.FindBin(start)
    istop = hist.FindBin(stop)
    integral = hist.Integral(istart, istop)
    if integral > 0.0:
        hist.Scale(norm / integral)
        return True
    return False


def normalize_by_integral_2d(hist, norm: float = 1.0,
                             x_start: float = MIN_DOUBLE, x_stop: float = MAX_DOUBLE,
                             y_start: float = MIN_DOUBLE, y_stop: float = MAX_DOUBLE) -> bool:
    """2D version of normalize_by_integral over an x and a y window."""
    ix_start = hist.GetXaxis().FindBin(x_start)
    ix_stop = hist.GetXaxis().FindBin(x_stop)
    iy_start = hist.GetYaxis().FindBin(y_start)
    iy_stop = hist.GetYaxis().FindBin(y_stop)
    integral = hist.Integral(ix_start, ix_stop, iy_start, iy_stop)
    if integral > 0.0:
        hist.Scale(norm / integral)
        return True
    return False


def _ratio_error(val_num: float, err_num: float, val_den: float, err_den: float) -> Tuple[float, float]:
    ratio = val_num / val_den
    rel_num = err_num / val_num if val_num != 0.0 else 0.0
    rel_den = err_den / val_den
    return ratio, abs(ratio) * np.hypot(rel_num, rel_den)


def _empty_like(hist, name: str):
    result = hist.Clone(name)
    result.SetDirectory(0)
    result.Reset("ICE")
    return result


def _scaled_copy(hist, weight: float):
    copy = hist.Clone(f"{hist.GetName()}_scaled")
    copy.SetDirectory(0)
    copy.Scale(weight)
    return copy


def divide_hist_1d(numer, denom, w_num: float = 1.0, w_den: float = 1.0):
    """
    Divide two 1D histograms.

    The result has the binning of denom. Bins whose denominator is not
    positive are left empty (zero content and error).

    Args:
        numer: Numerator histogram
        denom: Denominator histogram
        w_num: Weight applied to the numerator
        w_den: Weight applied to the denominator

    Returns:
        New histogram holding numer / denom
    """
    ratio = _empty_like(denom, f"{numer.GetName()}_Div_{denom.GetName()}")

    if ratio.Divide(numer, denom, w_num, w_den):
        for ibin in range(1, ratio.GetNbinsX() + 1):
            if denom.GetBinContent(ibin) <= 0.0:
                ratio.SetBinContent(ibin, 0.0)
                ratio.SetBinError(ibin, 0.0)
        return ratio

    # binnings differ: match numerator bins to denominator bin centers
    ratio.Reset("ICE")
    num = _scaled_copy(numer, w_num)
    den = _scaled_copy(denom, w_den)
    for iden in range(1, den.GetNbinsX() + 1):
        inum = num.FindBin(den.GetBinCenter(iden))
        val_den = den.GetBinContent(iden)
        if val_den <= 0.0:
            continue
        value, error = _ratio_error(num.GetBinContent(inum), num.GetBinError(inum),
                                    val_den, den.GetBinError(iden))
        ratio.SetBinContent(iden, value)
        ratio.SetBinError(iden, error)
    return ratio


def divide_hist_2d(numer, denom, w_num: float = 1.0, w_den: float = 1.0):
    """2D version of divide_hist_1d; bins are matched on (x, y) centers."""
    ratio = _empty_like(denom, f"{numer.GetName()}_Div_{denom.GetName()}")
    nx = ratio.GetNbinsX()
    ny = ratio.GetNbinsY()

    if ratio.Divide(numer, denom, w_num, w_den):
        for ix in range(1, nx + 1):
            for iy in range(1, ny + 1):
                if denom.GetBinContent(ix, iy) <= 0.0:
                    ratio.SetBinContent(ix, iy, 0.0)
                    ratio.SetBinError(ix, iy, 0.0)
        return ratio

    ratio.Reset("ICE")
    num = _scaled_copy(numer, w_num)
    den = _scaled_copy(denom, w_den)
    for ix in range(1, nx + 1):
        inx = num.GetXaxis().FindBin(den.GetXaxis().GetBinCenter(ix))
        for iy in range(1, ny + 1):
            iny = num.GetYaxis().FindBin(den.GetYaxis().GetBinCenter(iy))
            val_den = den.GetBinContent(ix, iy)
            if val_den <= 0.0:
                continue
            value, error = _ratio_error(num.GetBinContent(inx, iny), num.GetBinError(inx, iny),
                                        val_den, den.GetBinError(ix, iy))
            ratio.SetBinContent(ix, iy, value)
            ratio.SetBinError(ix, iy, error)
    return ratio


def multiply_hist_1d(hist, factor):
    """
    Multiply a 1D histogram bin-by-bin by another.

    The result has the binning of hist; factor bins are matched by the
    bin centers of hist when the binnings differ.

    Returns:
        New histogram holding hist * factor
    """
    product = _empty_like(hist, f"{hist.GetName()}_Times_{factor.GetName()}")
    if product.Multiply(hist, factor, 1.0, 1.0):
        return product

    product.Reset("ICE")
    for ibin in range(1, hist.GetNbinsX() + 1):
        ifac = factor.FindBin(hist.GetBinCenter(ibin))
        val_a, err_a = hist.GetBinContent(ibin), hist.GetBinError(ibin)
        val_b, err_b = factor.GetBinContent(ifac), factor.GetBinError(ifac)
        product.SetBinContent(ibin, val_a * val_b)
        product.SetBinError(ibin, np.hypot(err_a * val_b, err_b * val_a))
    return product


def multiply_hist_2d(hist, factor):
    """2D version of multiply_hist_1d; factor bins are matched on (x, y) centers."""
    product = _empty_like(hist, f"{hist.GetName()}_Times_{factor.GetName()}")
    if product.Multiply(hist, factor, 1.0, 1.0):
        return product

    product.Reset("ICE")
    for ix in range(1, hist.GetNbinsX() + 1):
        ifx = factor.GetXaxis().FindBin(hist.GetXaxis().GetBinCenter(ix))
        for iy in range(1, hist.GetNbinsY() + 1):
            ify = factor.GetYaxis().FindBin(hist.GetYaxis().GetBinCenter(iy))
            val_a, err_a = hist.GetBinContent(ix, iy), hist.GetBinError(ix, iy)
            val_b, err_b = factor.GetBinContent(ifx, ify), factor.GetBinError(ifx, ify)
            product.SetBinContent(ix, iy, val_a * val_b)
            product.SetBinError(ix, iy, np.hypot(err_a * val_b, err_b * val_a))
    return product


def get_height(nlines: int, spacing: float, offset: float = 0.0) -> float:
    """Height of a legend or text box with nlines lines."""
    return nlines * spacing + offset


def get_draw_range(plot_range: Interval, taxis) -> Interval:
    """Clip a plotting interval to the extent of an axis."""
    return (max(plot_range[0], taxis.GetXmin()), min(plot_range[1], taxis.GetXmax()))


def open_file(path: str, mode: str = "read"):
    """
    Open a file through the histogram library.

    Raises:
        InputMissing: if the file cannot be opened or entered
    """
    tfile = get_root().TFile.Open(path, mode)
    if not tfile or tfile.IsZombie():
        raise InputMissing(path)
    if not tfile.cd():
        tfile.Close()
        raise InputMissing(path)
    return tfile


def grab_object(name: str, tfile):
    """
    Retrieve an object from an open file.

    Raises:
        InputMissing: if the file holds no object with that name
    """
    obj = tfile.Get(name)
    if not obj:
        raise InputMissing(name, tfile.GetName())
    return obj


def fetch_histogram(tfile, name: str, rename: Optional[str] = None):
    """Retrieve a histogram and return a copy detached from its file."""
    hist = grab_object(name, tfile).Clone(rename or name)
    hist.SetDirectory(0)
    return hist


def close_files(files: Iterable) -> None:
    for tfile in files:
        if tfile:
            tfile.Close()
