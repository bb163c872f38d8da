from __future__ import annotations
from pathlib import Path


class PlotAreaError(ValueError):
    """Base class for image-level failures that make an area estimate impossible."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.message = message
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)

    def __reduce__(self):
        # Keep instances picklable across worker processes.
        return self.__class__, (self.message, self.path)


class EmptyRegionError(PlotAreaError):
    """No region-marker pixels were found, so no crop bounds can be computed."""


class InsufficientRowsError(PlotAreaError):
    """Fewer than three rows yielded a boundary extent."""

    def __init__(self, rows: int, path: Path | str | None = None):
        self.rows = rows
        super().__init__(f"Only {rows} row(s) produced a boundary extent, need at least 3", path)

    def __reduce__(self):
        return self.__class__, (self.rows, self.path)
