#!/usr/bin/env python3
"""
Primitive types shared by the layout and plotting modules.

Axis and Margin are defined here and only here; everything else imports them.
"""

from enum import IntEnum
from typing import List, Tuple

# (low, high)
Interval = Tuple[float, float]

# (width, height) in pixels
Dimensions = Tuple[int, int]

# (x0, y0, x1, y1) in normalized coordinates
Vertices = List[float]

# [top, right, bottom, left]
Margins = List[float]

LabelList = List[str]
TextList = List[str]


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


class Margin(IntEnum):
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


class RangeOpt(IntEnum):
    """Which family of default axis ranges to use."""
    SIDE = 0
    ANGLE = 1


def check_vertices(vertices: Vertices) -> None:
    """Raise ValueError unless vertices describe a region inside [0, 1]^2."""
    if len(vertices) != 4:
        raise ValueError(f"expected 4 vertices, got {len(vertices)}")
    x0, y0, x1, y1 = vertices
    if not (0.0 <= x0 < x1 <= 1.0 and 0.0 <= y0 < y1 <= 1.0):
        raise ValueError(f"vertices {list(vertices)} are not an ordered region of [0, 1]")


def check_margins(margins: Margins) -> None:
    """Raise ValueError unless margins are in [0, 1] and opposite pairs sum below 1."""
    if len(margins) != 4:
        raise ValueError(f"expected 4 margins, got {len(margins)}")
    if any(m < 0.0 or m > 1.0 for m in margins):
        raise ValueError(f"margins {list(margins)} must lie in [0, 1]")
    if margins[Margin.TOP] + margins[Margin.BOTTOM] >= 1.0:
        raise ValueError("top + bottom margins must be less than 1")
    if margins[Margin.LEFT] + margins[Margin.RIGHT] >= 1.0:
        raise ValueError("left + right margins must be less than 1")
