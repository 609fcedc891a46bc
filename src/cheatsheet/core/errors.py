"""Error types raised by the overlay controller."""

from __future__ import annotations


class CheatsheetError(RuntimeError):
    """Base class for failures the overlay cannot recover from."""


class DisplayUnavailableError(CheatsheetError):
    """No default display: there is no graphical session to draw on."""


class SurfaceUnavailableError(CheatsheetError):
    """The toplevel surface could not be created, realized or layered."""


class OverlayStateError(CheatsheetError):
    """An overlay step was requested out of order."""


class SurfaceNotRealizedError(OverlayStateError):
    """Layer-shell properties were set on a surface that is not realized."""
