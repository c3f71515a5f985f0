#!/usr/bin/env python3
"""
BaseRoutine - pieces shared by every plotting routine.

A routine is configured once with its inputs and options, then plotted into
an output file. Every routine follows the same steps: open sources, fetch and
copy histograms, rebin, normalize, style, place them in pads, attach legend
and text box, draw, write, close.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..base_options import base_plot_style, base_text_style
from ..legend import Legend, LegendEntry
from ..plot_input import PlotInput
from ..plot_options import PlotOptions
from ..plotting_tools import (
    fetch_histogram, get_height, normalize_by_integral, normalize_by_integral_2d, open_file
)
from ..style import Style
from ..text_box import TextBox

LEGEND_X0 = 0.3
LEGEND_Y0 = 0.1
LEGEND_X1 = 0.5


def same(option: str) -> str:
    """Draw option for overlaying on an already drawn object."""
    return f"{option} same" if option else "same"


class BaseRoutine:
    name = "routine"

    def __init__(self, plot_style: Optional[Style] = None, text_style: Optional[Style] = None,
                 text_box: Optional[TextBox] = None, verbose: bool = True):
        """
        Args:
            plot_style: Base style for histograms; each input's plot style is layered on top
            text_style: Style for legends and text boxes
            text_box: Annotation drawn on every figure
            verbose: Print progress while plotting
        """
        self.base_plot_style = plot_style if plot_style is not None else base_plot_style()
        self.base_text_style = text_style if text_style is not None else base_text_style()
        self.text_box = text_box if text_box is not None else TextBox()
        self.verbose = verbose

    def log(self, message: str) -> None:
        if self.verbose:
            print(message)

    def announce_start(self, what: str) -> None:
        self.log("\n -------------------------------- \n"
                 f"  Beginning {what}!\n"
                 "    Opening inputs:")

    def announce_end(self, what: str) -> None:
        self.log(f"  Finished {what}!\n"
                 " -------------------------------- \n")

    def generate_styles(self, inputs: Sequence[PlotInput]) -> List[Style]:
        """One copy of the base plot style per input, with the input's plot style applied."""
        styles = []
        for plot_input in inputs:
            style = self.base_plot_style.copy()
            style.set_plot_style(plot_input.style)
            styles.append(style)
        return styles

    def load_inputs(self, inputs: Sequence[PlotInput], files: Dict[str, object],
                    options: PlotOptions, role: str = "", normalize: bool = True,
                    two_d: bool = False) -> list:
        """
        Open, fetch, rename, rebin and (optionally) normalize each input.

        Args:
            inputs: Series to load
            files: Already opened files by path; newly opened files are added
            options: Supplies the normalization window and target
            role: Tag printed next to each input (e.g. "denom")
            normalize: Normalize if options.do_norm is set
            two_d: Inputs are 2D histograms

        Returns:
            Detached copies of the histograms, in input order
        """
        tag = f" ({role})" if role else ""
        hists = []
        for plot_input in inputs:
            if plot_input.file not in files:
                files[plot_input.file] = open_file(plot_input.file, "read")
            hist = fetch_histogram(files[plot_input.file], plot_input.object,
                                   plot_input.output_name)
            hist.SetName(plot_input.output_name)
            self.log(f"      File{tag} = {plot_input.file}\n"
                     f"      Hist{tag} = {plot_input.object}")

            if plot_input.rebin.rebin:
                plot_input.rebin.apply(hist)
                self.log(f"    Rebinned {hist.GetName()}")

            if normalize and options.do_norm:
                self.normalize(hist, options, two_d)
            hists.append(hist)
        return hists

    def normalize(self, hist, options: PlotOptions, two_d: bool = False) -> None:
        if two_d:
            done = normalize_by_integral_2d(hist, options.norm_to,
                                            options.norm_range.x[0], options.norm_range.x[1],
                                            options.norm_range.y[0], options.norm_range.y[1])
        else:
            done = normalize_by_integral(hist, options.norm_to,
                                         options.norm_range.x[0], options.norm_range.x[1])
        if done:
            self.log(f"    Normalized {hist.GetName()}")
        else:
            self.log(f"    Left {hist.GetName()} unnormalized (empty normalization range)")

    def make_legend(self, entries: List[Tuple[object, str]], header: str = ""):
        """
        Build and style a legend in the lower left of the spectra pad.

        Args:
            entries: (object, label) pairs in drawing order
            header: Optional header line
        """
        nlines = len(entries) + (1 if header else 0)
        height = get_height(nlines, self.base_text_style.text.spacing)
        definition = Legend(
            [LEGEND_X0, LEGEND_Y0, LEGEND_X1, LEGEND_Y0 + height],
            [LegendEntry(obj, label, "PF") for obj, label in entries],
            header
        )
        legend = definition.make_legend()
        self.base_text_style.apply_to_text_box(legend)
        return legend

    def make_text(self):
        text = self.text_box.make_tpavetext()
        self.base_text_style.apply_to_text_box(text)
        return text

    @staticmethod
    def draw_all(hists: Sequence, options: Sequence[str]) -> None:
        """Draw the first histogram with its option and overlay the rest."""
        for ihist, (hist, option) in enumerate(zip(hists, options)):
            hist.Draw(option if ihist == 0 else same(option))

    @staticmethod
    def write_all(ofile, hists: Sequence) -> None:
        ofile.cd()
        for hist in hists:
            hist.Write()

    @staticmethod
    def result(manager, hists: Sequence, extras: Optional[Dict] = None) -> Dict:
        result = {
            'success': True,
            'canvas': manager.definition.name,
            'histograms': {hist.GetName(): hist for hist in hists},
        }
        if extras:
            result.update(extras)
        return result
