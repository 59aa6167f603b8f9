"""
Fenster core Python package.

Pure game logic for the Fenster card-guessing party game, kept apart from the
Flask app and the terminal client so it can be tested on its own.
Modules:
- cards.py: Card, values, suits, rank ordering
- deck.py: Deck and Fisher-Yates shuffle
- topology.py: static board graph (edges, axis lines, roles)
- board.py: Cell and Board
- cluster.py: face-up flood fill
- rules.py: guess token alphabets and evaluation
- turns.py: TurnController
- engine.py: FensterGame (the stateful rules engine)
"""
