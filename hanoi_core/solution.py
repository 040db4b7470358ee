from __future__ import annotations

from typing import Iterator, List, Tuple

from .errors import InvalidStack
from .pieces import Stack
from .state import GameState

Move = Tuple[Stack, Stack]


def classic_solution(num_pieces: int, source: Stack, target: Stack, spare: Stack) -> Iterator[Move]:
    """Yields the 2**n - 1 moves that carry ``num_pieces`` pieces from ``source`` to ``target``."""
    if num_pieces <= 0:
        return
    yield from classic_solution(num_pieces - 1, source, spare, target)
    yield (source, target)
    yield from classic_solution(num_pieces - 1, spare, target, source)


def solve(game: GameState, target: Stack) -> List[Move]:
    """Returns the classic solution for a freshly constructed game, ending on ``target``."""
    if not game.valid_stack(target):
        raise InvalidStack(f"target stack {target} is not below {game.num_stacks()}")
    if game.num_stacks() < 3:
        raise ValueError("the classic solution needs at least 3 stacks")
    if target == game.start_stack:
        raise ValueError("target must differ from the start stack")
    spare = min(s for s in range(game.num_stacks()) if s not in (game.start_stack, target))
    return list(classic_solution(game.num_pieces(), game.start_stack, target, spare))
