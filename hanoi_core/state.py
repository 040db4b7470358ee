from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidLayout, InvalidStack, ZeroPieces
from .pieces import Piece, PieceState, Stack

logger = logging.getLogger(__name__)


class GameState:
    """Authoritative positions of every piece.

    All pieces start on ``start_stack``, piece 0 (the largest) at the bottom.
    The state is changed only through :meth:`try_move`.
    """

    def __init__(self, start_stack: Stack, num_stacks: int, num_pieces: int) -> None:
        if start_stack < 0 or start_stack >= num_stacks:
            raise InvalidStack(f"start stack {start_stack} is not below {num_stacks}")
        if num_pieces <= 0:
            raise ZeroPieces("a game needs at least one piece")
        self._start_stack = start_stack
        self._num_stacks = num_stacks
        self._pieces: List[PieceState] = [PieceState(stack=start_stack, height=i) for i in range(num_pieces)]

    @classmethod
    def restore(
        cls,
        start_stack: Stack,
        num_stacks: int,
        placements: Sequence[Tuple[Stack, int]],
    ) -> 'GameState':
        """Builds a state from ``(stack, height)`` pairs indexed by piece number.

        The layout must be one that legal moves could reach: heights on each
        stack are dense from 0, and larger pieces never sit above smaller ones.
        """
        state = cls(start_stack, num_stacks, len(placements))
        by_stack: Dict[Stack, List[Tuple[int, int]]] = {}
        for num, (stack, height) in enumerate(placements):
            if not state.valid_stack(stack):
                raise InvalidLayout(f"piece {num} is on unknown stack {stack}")
            by_stack.setdefault(stack, []).append((height, num))
        for stack, occupants in by_stack.items():
            occupants.sort()
            heights = [h for h, _ in occupants]
            if heights != list(range(len(occupants))):
                raise InvalidLayout(f"stack {stack} has heights {heights}, expected 0..{len(occupants) - 1}")
            nums = [n for _, n in occupants]
            if nums != sorted(nums):
                raise InvalidLayout(f"stack {stack} has a larger piece above a smaller one")
        for num, (stack, height) in enumerate(placements):
            state._pieces[num] = PieceState(stack=stack, height=height)
        return state

    @property
    def start_stack(self) -> Stack:
        return self._start_stack

    def num_pieces(self) -> int:
        return len(self._pieces)

    def num_stacks(self) -> int:
        return self._num_stacks

    def valid_stack(self, s: Stack) -> bool:
        return 0 <= s < self._num_stacks

    def get_piece(self, num: int) -> Piece:
        """Returns a snapshot of piece ``num``; raises IndexError if there is no such piece."""
        if num < 0 or num >= len(self._pieces):
            raise IndexError(f"piece {num} out of range (0..{len(self._pieces) - 1})")
        ps = self._pieces[num]
        return Piece(num=num, state=PieceState(stack=ps.stack, height=ps.height))

    def pieces_iter(self) -> Iterator[Piece]:
        """Iterates over all pieces in ascending number order."""
        for num in range(len(self._pieces)):
            yield self.get_piece(num)

    def __iter__(self) -> Iterator[Piece]:
        return self.pieces_iter()

    def stack_top(self, stack: Stack) -> Optional[Piece]:
        """Returns the highest piece on ``stack``, or None when it is empty."""
        highest: Optional[int] = None
        for num, ps in enumerate(self._pieces):
            if ps.stack != stack:
                continue
            if highest is None or ps.height > self._pieces[highest].height:
                highest = num
        return None if highest is None else self.get_piece(highest)

    def stack_pieces(self, stack: Stack) -> List[Piece]:
        """Returns the pieces on ``stack`` from bottom to top."""
        found = [p for p in self.pieces_iter() if p.state.stack == stack]
        return sorted(found, key=lambda p: p.state.height)

    def try_move(self, from_stack: Stack, to_stack: Stack) -> bool:
        """Moves the top piece of ``from_stack`` onto ``to_stack``.

        Returns False, leaving the state untouched, when the move would put a
        larger piece on a smaller one. Raises InvalidStack for an unknown stack
        index or an empty source stack.
        """
        if not self.valid_stack(from_stack) or not self.valid_stack(to_stack):
            raise InvalidStack(f"cannot move {from_stack} -> {to_stack} with {self._num_stacks} stacks")
        piece = self.stack_top(from_stack)
        if piece is None:
            raise InvalidStack(f"stack {from_stack} is empty")
        if from_stack == to_stack:
            return True
        dest = self.stack_top(to_stack)
        if dest is None:
            height = 0
        elif piece.num > dest.num:
            height = dest.state.height + 1
        else:
            logger.debug("rejected piece %d onto piece %d (stack %d)", piece.num, dest.num, to_stack)
            return False
        moving = self._pieces[piece.num]
        moving.stack = to_stack
        moving.height = height
        logger.debug("moved piece %d: stack %d -> %d at height %d", piece.num, from_stack, to_stack, height)
        if self.complete():
            logger.info("all %d pieces moved to stack %d", len(self._pieces), to_stack)
        return True

    def complete(self) -> bool:
        """True once every piece shares one stack other than the start stack."""
        target = self._pieces[0].stack
        if target == self._start_stack:
            return False
        return all(ps.stack == target for ps in self._pieces)

    def __repr__(self) -> str:
        placed = ", ".join(f"{n}:{ps.stack}/{ps.height}" for n, ps in enumerate(self._pieces))
        return f"GameState(start_stack={self._start_stack}, num_stacks={self._num_stacks}, pieces=[{placed}])"
