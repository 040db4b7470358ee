from __future__ import annotations

from typing import List, Optional

from .interact import Interaction
from .pieces import Colour, Piece
from .state import GameState

FILL = {Colour.BLACK: "#", Colour.WHITE: "="}


def _piece_cell(piece: Optional[Piece], width: int, num_pieces: int) -> str:
    if piece is None:
        return "|".center(width)
    # piece 0 is the widest; every piece is at least one character wide
    size = 2 * (num_pieces - piece.num) - 1
    return (FILL[piece.colour()] * size).center(width)


def render_text(game: GameState, interaction: Optional[Interaction] = None) -> str:
    """Generates a human-readable dump of the stacks, optionally with the hand above them."""
    n = game.num_pieces()
    width = 2 * n + 1
    held = interaction.held_piece() if interaction is not None else None
    columns = []
    for s in range(game.num_stacks()):
        occupants = game.stack_pieces(s)
        if held is not None and occupants and occupants[-1].num == held.num:
            occupants = occupants[:-1]
        columns.append(occupants)

    lines: List[str] = []
    if interaction is not None:
        hand = []
        marks = []
        for s in range(game.num_stacks()):
            at_hand = s == interaction.hand_column
            hand.append(_piece_cell(held, width, n) if at_hand and held is not None else " " * width)
            marks.append("v".center(width) if at_hand else " " * width)
        lines.append(" ".join(hand).rstrip())
        lines.append(" ".join(marks).rstrip())
    for level in range(n - 1, -1, -1):
        row = []
        for occupants in columns:
            piece = occupants[level] if level < len(occupants) else None
            row.append(_piece_cell(piece, width, n))
        lines.append(" ".join(row).rstrip())
    lines.append(" ".join("-" * width for _ in columns))
    lines.append(" ".join(str(s).center(width) for s in range(game.num_stacks())).rstrip())
    return "\n".join(lines)
