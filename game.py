from __future__ import annotations

# Facade module that re-exports the gamey core.
# The Flask app and tests import from here; the logic lives under gamey_core/*.

from gamey_core.coords import Coordinates, iter_coords, total_cells
from gamey_core.topology import (
    ALL_SIDES,
    SIDE_A,
    SIDE_B,
    SIDE_C,
    BoardTopology,
    CellIndex,
    RegionMask,
)
from gamey_core.triangular import TriangularTopology, cell_regions, neighbor_coords
from gamey_core.engine import DisjointSet, GameEngine
from gamey_core.game import (
    FIRST_PLAYER,
    Action,
    Finished,
    GameAction,
    GameStatus,
    GameY,
    Movement,
    Ongoing,
    Placement,
    PlayerId,
    other_player,
)
from gamey_core.errors import (
    DecodeError,
    GameOverError,
    GameYError,
    InvalidLayoutCharError,
    InvalidLayoutRowCountError,
    InvalidLayoutRowLengthError,
    OccupiedError,
    OutOfBoundsError,
    PersistenceIOError,
    WrongTurnError,
)
from gamey_core.yen import YEN, decode, dump, encode, load, load_from_file, save_to_file
from gamey_core.render import RenderOptions, render
from gamey_core.bots import RandomBot, YBot, YBotRegistry, default_registry


def main() -> None:
    # CLI driver delegated to gamey_core.cli
    from gamey_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
