#!/usr/bin/env python3
"""
Exceptions raised by the plotter.

Normalization over an empty range and division of histograms with
incompatible binning are recovered where they happen and never surface here.
"""


class PlotterError(Exception):
    """Base class for plotter errors."""


class InputMissing(PlotterError):
    """A file could not be opened or an object could not be retrieved."""

    def __init__(self, resource: str, file_path: str = ""):
        self.resource = resource
        self.file_path = file_path
        if file_path:
            message = f"could not retrieve '{resource}' from '{file_path}'"
        else:
            message = f"could not open '{resource}'"
        super().__init__(message)


class UnknownRoutine(PlotterError, KeyError):
    """Lookup of an output routine that is not registered."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"unknown output routine '{name}'")

    def __str__(self):
        return self.args[0]


class OutOfRangeIndex(PlotterError, IndexError):
    """A plot index field addresses a bucket outside the naming database."""

    def __init__(self, field: str, value: int, size: int):
        self.field = field
        self.value = value
        self.size = size
        super().__init__(f"{field} index {value} out of range [0, {size})")


class CanvasStateError(PlotterError):
    """A canvas manager operation was called in the wrong state."""


class ConfigurationError(PlotterError):
    """A routine was configured with inconsistent inputs."""
