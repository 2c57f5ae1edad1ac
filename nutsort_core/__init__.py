"""
NutSort core Python package.

Pure-logic engine for the nut-and-bolt sorting puzzle, kept free of any host
(Flask, CLI) concerns so it can be tested directly.
Modules:
- nut.py: Colour, palette, Nut
- bolt.py: Bolt plus the can_move/move rules
- board.py: Board (bolts, move count, undo history, selection overlay)
- state.py: Selection overlay and InteractionResult
- moves.py: legal moves, click state machine, undo
- deal.py: board generation from an injected random source
- config.py: GameConfig defaults, validation and env overrides
- hashkey.py: canonical state keys
- scoring.py: star rating collaborator
- solver.py: memoized branch-and-bound search
"""
