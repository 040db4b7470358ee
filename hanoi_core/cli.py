from __future__ import annotations

import argparse
import logging
from typing import NamedTuple, Optional

from . import config
from .errors import HanoiError
from .interact import ActionResult, Interaction
from .render import render_text
from .solution import solve
from .state import GameState

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

HELP = "Commands: a = hand left, d = hand right, space/g = grab or drop, 'F T' = move F to T, q = quit"

ACTION_MESSAGES = {
    ActionResult.GRABBED: "Grabbed.",
    ActionResult.NOTHING: "Nothing to grab there.",
    ActionResult.PLACED: "Placed.",
    ActionResult.REJECTED: "A larger piece cannot go on a smaller one.",
}


class Outcome(NamedTuple):
    quit: bool
    message: Optional[str] = None
    moved: bool = False


def handle_command(interaction: Interaction, text: str) -> Outcome:
    """Applies one line of input. ``moved`` is set only when a piece changed stacks."""
    cmd = text.strip().lower()
    if cmd in ('q', 'quit', 'exit'):
        return Outcome(True)
    if cmd in ('a', 'left'):
        interaction.left()
        return Outcome(False)
    if cmd in ('d', 'right'):
        interaction.right()
        return Outcome(False)
    if cmd in ('', 'g', 'grab'):
        source = interaction.grabbed
        result = interaction.action()
        moved = result is ActionResult.PLACED and source != interaction.hand_column
        return Outcome(False, ACTION_MESSAGES[result], moved)
    sep = ',' if ',' in cmd else ' '
    try:
        f_s, t_s = [t for t in cmd.split(sep) if t != '']
        from_stack, to_stack = int(f_s), int(t_s)
    except ValueError:
        return Outcome(False, 'Could not parse. ' + HELP)
    if interaction.grabbed is not None:
        return Outcome(False, 'Drop the held piece first.')
    try:
        moved = interaction.game.try_move(from_stack, to_stack)
    except HanoiError as e:
        return Outcome(False, f'Invalid move: {e}')
    if not moved:
        return Outcome(False, ACTION_MESSAGES[ActionResult.REJECTED])
    return Outcome(False, 'Moved.', from_stack != to_stack)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description='Tower of Hanoi with any number of stacks')
    parser.add_argument('--start', type=int, default=config.DEFAULT_START_STACK, help='Stack all pieces start on')
    parser.add_argument('--stacks', type=int, default=config.DEFAULT_STACKS, help='Number of stacks')
    parser.add_argument('--pieces', type=int, default=config.DEFAULT_PIECES, help='Number of pieces')
    parser.add_argument('--solve', type=int, default=None, metavar='TARGET', help='Print and play the classic solution onto TARGET')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=config.LOG_LEVEL, help='Logging level')
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f'unknown log level {args.log_level!r}')
    logging.basicConfig(level=args.log_level)

    try:
        game = GameState(args.start, args.stacks, args.pieces)
    except HanoiError as e:
        parser.error(str(e))

    if args.solve is not None:
        try:
            moves = solve(game, args.solve)
        except ValueError as e:
            parser.error(str(e))
        for from_stack, to_stack in moves:
            game.try_move(from_stack, to_stack)
            print(f'{from_stack} -> {to_stack}')
        print(render_text(game))
        print(f'Solved in {len(moves)} moves.' if game.complete() else 'Not solved.')
        return 0

    interaction = Interaction(game, hand_column=args.start)
    print(HELP)
    print(render_text(game, interaction))
    moves = 0
    while True:
        try:
            text = input('> ')
        except EOFError:
            break
        done, message, moved = handle_command(interaction, text)
        if done:
            break
        if moved:
            moves += 1
        print(render_text(game, interaction))
        if message:
            print(message)
        if game.complete():
            print(f'Complete in {moves} moves!')
            break
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
