#!/usr/bin/env python3
"""
Default layouts and ranges used by the plotting routines.

This module handles:
- The layout configuration (canvas sizes, pad heights, default ranges)
- Default plot and normalization ranges for side and angle distributions
- The unity reference line drawn on ratio pads
- Builders for ratio, grid and correction canvases
"""

import copy
from typing import Dict, Optional

from .canvas import Canvas
from .pad import Pad
from .pad_options import PadOptions
from .plot_range import PlotRange
from .plot_types import Margins, RangeOpt
from .shape import PlotShape, Shape
from .style import PlotStyle

DEFAULTS = {
    'small': 750,
    'medium': 1150,
    'big': 1500,
    'unity_style': PlotStyle(923, 1, 0, 9, 2),
    'side_range': PlotRange((0.003, 3.0), (0.00003, 0.7), (0.00003, 33.0)),
    'angle_range': PlotRange((0.0, 6.30), (-0.007, 0.07), (0.00003, 33.0)),
    'ratio_height': 0.35,
    'correct_height': 0.25,
    'correct_ratio_height': 0.4375,
    'grid_dim': 375,
    'upper_margins': [0.02, 0.02, 0.005, 0.15],
    'middle_margins': [0.005, 0.02, 0.005, 0.15],
    'lower_margins': [0.005, 0.02, 0.25, 0.15],
    'single_margins': [0.02, 0.02, 0.15, 0.15],
}

_layout_config = copy.deepcopy(DEFAULTS)


def get_layout_config() -> Dict:
    """Return a copy of the current layout configuration."""
    return copy.deepcopy(_layout_config)


def set_layout_config(**kwargs) -> None:
    """
    Update the layout configuration.

    Args:
        **kwargs: Keys of DEFAULTS and their new values

    Raises:
        KeyError: for keys that are not part of the configuration
    """
    for key, value in kwargs.items():
        if key not in _layout_config:
            raise KeyError(f"unknown layout option '{key}'")
        _layout_config[key] = value


def reset_layout_config() -> None:
    _layout_config.clear()
    _layout_config.update(copy.deepcopy(DEFAULTS))


def default_plot_range(opt: RangeOpt = RangeOpt.SIDE) -> PlotRange:
    """Default axis ranges for side (EEC-like) or angle distributions."""
    if RangeOpt(opt) == RangeOpt.SIDE:
        return copy.deepcopy(_layout_config['side_range'])
    return copy.deepcopy(_layout_config['angle_range'])


def default_norm_range(opt: RangeOpt = RangeOpt.SIDE) -> PlotRange:
    """Normalization window: the x-range of the default plot range."""
    return PlotRange(default_plot_range(opt).x)


def default_unity(opt: RangeOpt = RangeOpt.SIDE) -> PlotShape:
    """A line at y = 1 across the default x-range."""
    return PlotShape(
        shape=Shape(default_plot_range(opt).x, (1.0, 1.0)),
        style=copy.copy(_layout_config['unity_style'])
    )


def get_row_number(ncell: int, ncol: int) -> int:
    """Number of rows needed to lay out ncell cells in ncol columns."""
    return min(ncell // ncol + 1, ncell // ncol + ncell % ncol)


def make_ratio_canvas(canvas_name: str, upper_name: str, lower_name: str,
                      lower_height: Optional[float] = None,
                      upper_opts: Optional[PadOptions] = None,
                      lower_opts: Optional[PadOptions] = None) -> Canvas:
    """
    Two stacked pads: spectra on top, ratios below.

    Pads are labelled "spectra" and "ratio".
    """
    if lower_height is None:
        lower_height = _layout_config['ratio_height']
    width = _layout_config['small']
    canvas = Canvas(canvas_name, "", (width, int(1.5 * width)))

    upper = Pad(upper_name, "", [0.0, lower_height, 1.0, 1.0],
                list(_layout_config['upper_margins']), upper_opts or PadOptions())
    lower = Pad(lower_name, "", [0.0, 0.0, 1.0, lower_height],
                list(_layout_config['lower_margins']), lower_opts or PadOptions())
    canvas.add_pad(upper, "spectra")
    canvas.add_pad(lower, "ratio")
    return canvas


def make_correction_canvas(canvas_name: str, correct_name: str, ratio_name: str,
                           spectra_name: str, correct_height: Optional[float] = None,
                           ratio_height: Optional[float] = None,
                           spectra_opts: Optional[PadOptions] = None,
                           correct_opts: Optional[PadOptions] = None,
                           ratio_opts: Optional[PadOptions] = None) -> Canvas:
    """
    Three stacked pads: spectra on top, ratios in the middle and
    correction factors at the bottom.

    Args:
        correct_height: Top edge of the correction pad
        ratio_height: Top edge of the ratio pad

    Pads are labelled "spectra", "ratio" and "correct".
    """
    if correct_height is None:
        correct_height = _layout_config['correct_height']
    if ratio_height is None:
        ratio_height = _layout_config['correct_ratio_height']
    width = _layout_config['small']
    canvas = Canvas(canvas_name, "", (width, _layout_config['big']))

    spectra = Pad(spectra_name, "", [0.0, ratio_height, 1.0, 1.0],
                  list(_layout_config['upper_margins']), spectra_opts or PadOptions())
    ratio = Pad(ratio_name, "", [0.0, correct_height, 1.0, ratio_height],
                list(_layout_config['middle_margins']), ratio_opts or PadOptions())
    correct = Pad(correct_name, "", [0.0, 0.0, 1.0, correct_height],
                  list(_layout_config['lower_margins']), correct_opts or PadOptions())
    canvas.add_pad(spectra, "spectra")
    canvas.add_pad(ratio, "ratio")
    canvas.add_pad(correct, "correct")
    return canvas


def make_grid_canvas(canvas_name: str, pad_name: str, npad: int, ncol: int,
                     margins: Optional[Margins] = None,
                     opts: Optional[PadOptions] = None,
                     dim: Optional[int] = None) -> Canvas:
    """
    A grid of equally sized pads filled row by row from the top left.

    Pads are named pad_name + index and labelled by index.

    Args:
        npad: Number of pads
        ncol: Number of columns
        margins: Margins of every pad
        opts: Options of every pad
        dim: Size in pixels of one grid cell
    """
    if ncol < 1:
        raise ValueError(f"grid needs at least one column, got {ncol}")
    if dim is None:
        dim = _layout_config['grid_dim']
    if margins is None:
        margins = _layout_config['single_margins']
    nrow = get_row_number(npad, ncol)
    canvas = Canvas(canvas_name, "", (ncol * dim, max(nrow, 1) * dim))

    for ipad in range(npad):
        row, col = divmod(ipad, ncol)
        vertices = [
            col / ncol,
            1.0 - (row + 1) / nrow,
            (col + 1) / ncol,
            1.0 - row / nrow
        ]
        canvas.add_pad(Pad(f"{pad_name}{ipad}", "", vertices, list(margins),
                           copy.copy(opts) if opts is not None else PadOptions()))
    return canvas


def make_single_canvas(canvas_name: str, opts: Optional[PadOptions] = None) -> Canvas:
    """A square canvas without pads."""
    width = _layout_config['small']
    return Canvas(canvas_name, "", (width, width), opts or PadOptions(),
                  list(_layout_config['single_margins']))
