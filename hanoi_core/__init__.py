"""
Hanoi core Python package.

This package contains the rule engine for a Tower-of-Hanoi variant with any
number of stacks and pieces, plus thin helpers built on top of it.
Modules:
- pieces.py: Colour, PieceState, Piece
- state.py: GameState (move validation and completion)
- errors.py: HanoiError and its subclasses
- interact.py, render.py, solution.py, cli.py: front-end helpers
"""
