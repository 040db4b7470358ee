from __future__ import annotations


class HanoiError(ValueError):
    """Base class for structural errors raised by the game state."""


class InvalidStack(HanoiError):
    """A stack index is out of range, or a move was requested from an empty stack."""


class ZeroPieces(HanoiError):
    """A game was requested with no pieces."""


class InvalidLayout(HanoiError):
    """A restored layout breaks the stacking rules."""
