#!/usr/bin/env python3
"""
Styles and annotations shared by all plotting routines.
"""

from .plotting_tools import get_height
from .style import LabelStyle, PlotStyle, Style, TextStyle, TitleStyle
from .text_box import TextBox

SPECIES_TEXT = {
    0: "p+p collisions",
    1: "p+Au collisions",
}


def base_plot_style() -> Style:
    """Text, label and title attributes for histograms and graphs."""
    titles = [
        TitleStyle(1, 1, 42, 0.04, 1.0),
        TitleStyle(1, 1, 42, 0.04, 1.2),
        TitleStyle(1, 1, 42, 0.04, 1.2),
    ]
    return Style(
        text=TextStyle(1, 42),
        labels=LabelStyle(1, 42, 0.03),
        titles=titles
    )


def base_text_style() -> Style:
    """Fill, line and text attributes for legends and text boxes."""
    return Style(
        plot=PlotStyle(0, 1, 0, 0, 1),
        text=TextStyle(1, 42, 12, 0.05)
    )


def make_text_box(species: int = 0) -> TextBox:
    """
    Experiment/collision-system annotation.

    Args:
        species: 0 for p+p, 1 for p+Au
    """
    lines = ["#bf{#it{PHENIX}} Run-15"]
    if species in SPECIES_TEXT:
        lines.append(SPECIES_TEXT[species])
    else:
        print(f"Warning: unknown species {species}, leaving collision system out")

    height = get_height(len(lines), base_text_style().text.spacing)
    return TextBox(lines, [0.1, 0.1, 0.3, 0.1 + height])
