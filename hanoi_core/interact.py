from __future__ import annotations

from enum import Enum
from typing import Optional

from .pieces import Piece, Stack
from .state import GameState


class ActionResult(Enum):
    GRABBED = "grabbed"
    NOTHING = "nothing"    # tried to grab from an empty stack
    PLACED = "placed"
    REJECTED = "rejected"  # larger piece over a smaller one; still held


class Interaction:
    """A hand hovering over one stack that can grab the top piece and drop it elsewhere."""

    def __init__(self, game: GameState, hand_column: Stack = 0, grabbed: Optional[Stack] = None) -> None:
        if not game.valid_stack(hand_column):
            raise ValueError(f"hand column {hand_column} is not a stack")
        self.game = game
        self.hand_column = hand_column
        self.grabbed = grabbed

    def left(self) -> None:
        if self.hand_column > 0:
            self.hand_column -= 1

    def right(self) -> None:
        if self.hand_column + 1 < self.game.num_stacks():
            self.hand_column += 1

    def held_piece(self) -> Optional[Piece]:
        if self.grabbed is None:
            return None
        return self.game.stack_top(self.grabbed)

    def action(self) -> ActionResult:
        """Grabs the piece under the hand, or drops the held piece onto the hand column."""
        if self.grabbed is None:
            if self.game.stack_top(self.hand_column) is None:
                return ActionResult.NOTHING
            self.grabbed = self.hand_column
            return ActionResult.GRABBED
        if self.game.try_move(self.grabbed, self.hand_column):
            self.grabbed = None
            return ActionResult.PLACED
        return ActionResult.REJECTED
