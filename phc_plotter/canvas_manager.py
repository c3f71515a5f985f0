#!/usr/bin/env python3
"""
CanvasManager - owns the drawable canvas and pads built from a Canvas.

Lifecycle: unconfigured -> built (make_plot) -> drawn (draw) -> closed (close).
Writing is only possible once drawn, and nothing is possible once closed.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from .canvas import Canvas
from .errors import CanvasStateError
from .plot_types import Axis


class CanvasState(Enum):
    UNCONFIGURED = 'unconfigured'
    BUILT = 'built'
    DRAWN = 'drawn'
    CLOSED = 'closed'


class CanvasManager:
    def __init__(self, definition: Optional[Canvas] = None):
        self._definition = definition
        self._tcanvas = None
        self._tpads: List = []
        self._label_to_index: Dict[str, int] = {}
        self.state = CanvasState.UNCONFIGURED

    def _require(self, *states: CanvasState) -> None:
        if self.state not in states:
            allowed = ", ".join(s.value for s in states)
            raise CanvasStateError(f"canvas manager is {self.state.value}, expected {allowed}")

    def _resolve(self, pad: Union[int, str]) -> int:
        if isinstance(pad, str):
            if pad not in self._label_to_index:
                raise KeyError(f"no pad labelled '{pad}' in canvas '{self._definition.name}'")
            return self._label_to_index[pad]
        return pad

    @property
    def definition(self) -> Optional[Canvas]:
        return self._definition

    def set_definition(self, definition: Canvas) -> None:
        """Replace the layout; any realized drawables are dropped."""
        self._require(CanvasState.UNCONFIGURED, CanvasState.BUILT, CanvasState.DRAWN)
        self._definition = definition
        self._tcanvas = None
        self._tpads = []
        self._label_to_index = {}
        self.state = CanvasState.UNCONFIGURED

    def make_plot(self) -> None:
        """Create the canvas, its pads and the label-to-pad index."""
        self._require(CanvasState.UNCONFIGURED)
        if self._definition is None:
            raise CanvasStateError("no canvas definition to build")
        self._tcanvas = self._definition.make_tcanvas()
        self._tpads = self._definition.make_tpads()
        self._label_to_index = self._definition.get_label_index()
        self.state = CanvasState.BUILT

    def scale_axis_text(self, big: Union[int, str], small: Union[int, str],
                        axis: Axis, taxis) -> None:
        """
        Rescale axis text of an object drawn in pad `small` to match pad `big`.

        Args:
            big: Index or label of the reference pad
            small: Index or label of the pad the axis is drawn in
            axis: Which axis taxis is
            taxis: TAxis to modify
        """
        self._require(CanvasState.BUILT, CanvasState.DRAWN)
        self._definition.do_axis_text_scaling(self._resolve(big), self._resolve(small),
                                              axis, taxis)

    def draw(self) -> None:
        """Draw the pads onto the canvas; repeated calls do nothing."""
        self._require(CanvasState.BUILT, CanvasState.DRAWN)
        if self.state == CanvasState.DRAWN:
            return
        self._tcanvas.cd()
        for tpad in self._tpads:
            tpad.Draw()
        self.state = CanvasState.DRAWN

    def write(self) -> None:
        self._require(CanvasState.DRAWN)
        self._tcanvas.Write()

    def close(self) -> None:
        self._require(CanvasState.UNCONFIGURED, CanvasState.BUILT, CanvasState.DRAWN)
        if self._tcanvas is not None:
            self._tcanvas.Close()
        self.state = CanvasState.CLOSED

    def get_tcanvas(self):
        self._require(CanvasState.BUILT, CanvasState.DRAWN)
        return self._tcanvas

    def get_tpads(self) -> list:
        self._require(CanvasState.BUILT, CanvasState.DRAWN)
        return list(self._tpads)

    def get_tpad(self, pad: Union[int, str]):
        """Return a realized pad by index or label."""
        self._require(CanvasState.BUILT, CanvasState.DRAWN)
        return self._tpads[self._resolve(pad)]
