"""
Gamey core Python package: rules engine for the connection game Y.

Modules:
- coords.py: Coordinates and the index <-> (x, y, z) mapping
- topology.py: BoardTopology contract and side bits
- triangular.py: TriangularTopology
- engine.py: GameEngine (union-find connectivity)
- game.py: GameY state machine, movements and status
- yen.py: YEN exchange record and persistence
- render.py, bots.py, cli.py: text board, move strategies, command line
"""
