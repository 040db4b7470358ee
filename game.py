from __future__ import annotations

# Facade module that re-exports the Hanoi core for the Flask app and tests.
# Single-responsibility modules live under hanoi_core/*.

from hanoi_core.errors import HanoiError, InvalidLayout, InvalidStack, ZeroPieces
from hanoi_core.pieces import Colour, Piece, PieceState, colour
from hanoi_core.state import GameState
from hanoi_core.interact import ActionResult, Interaction
from hanoi_core.render import render_text
from hanoi_core.solution import classic_solution, solve

__all__ = [
    'HanoiError',
    'InvalidLayout',
    'InvalidStack',
    'ZeroPieces',
    'Colour',
    'Piece',
    'PieceState',
    'colour',
    'GameState',
    'ActionResult',
    'Interaction',
    'render_text',
    'classic_solution',
    'solve',
]


def main() -> None:
    # CLI driver delegated to hanoi_core.cli
    from hanoi_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
