from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Stack = int
PieceHeight = int


class Colour(Enum):
    BLACK = "black"
    WHITE = "white"


def colour(num: int) -> Colour:
    """Derives a piece's colour from its number: even pieces are black, odd are white."""
    return Colour.BLACK if num % 2 == 0 else Colour.WHITE


@dataclass
class PieceState:
    """Mutable position of one piece: the stack it sits on and its height (0 = bottom)."""
    stack: Stack
    height: PieceHeight


@dataclass
class Piece:
    """Snapshot of a piece, holding a copy of its position. Lower numbers are physically larger."""
    num: int
    state: PieceState

    def colour(self) -> Colour:
        return colour(self.num)
