from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Union

from .coords import Coordinates, total_cells
from .engine import GameEngine
from .errors import GameOverError, OccupiedError, OutOfBoundsError, WrongTurnError
from .triangular import TriangularTopology

logger = logging.getLogger(__name__)

PlayerId = int  # 0 moves first, 1 second
FIRST_PLAYER: PlayerId = 0


def other_player(player: PlayerId) -> PlayerId:
    return 1 if player == 0 else 0


class GameAction(Enum):
    RESIGN = "resign"
    SWAP = "swap"


@dataclass(frozen=True)
class Placement:
    player: PlayerId
    coords: Coordinates


@dataclass(frozen=True)
class Action:
    player: PlayerId
    action: GameAction


Movement = Union[Placement, Action]


@dataclass(frozen=True)
class Ongoing:
    next_player: PlayerId


@dataclass(frozen=True)
class Finished:
    winner: PlayerId


GameStatus = Union[Ongoing, Finished]


class GameY:
    """A game of Y: a triangular board, whose turn it is, and what has been played.

    All moves go through `add_move`, which validates before mutating. The
    instance is not thread safe; a shared game must be serialized by its owner.
    """

    def __init__(self, board_size: int):
        if board_size < 1:
            raise ValueError(f'Board size must be at least 1, got {board_size}')
        self._board_size = board_size
        self._engine: GameEngine[TriangularTopology] = GameEngine(TriangularTopology(board_size))
        self._status: GameStatus = Ongoing(next_player=FIRST_PLAYER)
        self._history: List[Movement] = []
        self._available: Set[int] = set(range(total_cells(board_size)))

    # ---------- Accessors ----------

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def board_size(self) -> int:
        return self._board_size

    @property
    def history(self) -> List[Movement]:
        return list(self._history)

    def total_cells(self) -> int:
        return total_cells(self._board_size)

    def available_cells(self) -> List[int]:
        """Free cell indices in ascending order."""
        return sorted(self._available)

    def check_game_over(self) -> bool:
        return isinstance(self._status, Finished)

    def next_player(self) -> Optional[PlayerId]:
        if isinstance(self._status, Ongoing):
            return self._status.next_player
        return None

    def winner(self) -> Optional[PlayerId]:
        if isinstance(self._status, Finished):
            return self._status.winner
        return None

    def owner_at(self, coords: Coordinates) -> Optional[PlayerId]:
        return self._engine.owner(self._index_of(coords))

    def owner_at_index(self, index: int) -> Optional[PlayerId]:
        return self._engine.owner(index)

    def coords_of(self, index: int) -> Coordinates:
        if not 0 <= index < self.total_cells():
            raise OutOfBoundsError(index, self._board_size)
        return Coordinates.from_index(index, self._board_size)

    # ---------- Moves ----------

    def check_player_turn(self, movement: Movement) -> None:
        """Raises WrongTurnError if the game is ongoing and it is not the mover's turn."""
        if isinstance(self._status, Ongoing) and movement.player != self._status.next_player:
            raise WrongTurnError(expected=self._status.next_player, found=movement.player)

    def add_move(self, movement: Movement) -> None:
        """Validates and applies a move, updating status and history.

        Rejects any move once the game is finished, and moves played out of turn.
        """
        if isinstance(self._status, Finished):
            raise GameOverError(self._status.winner)
        self.check_player_turn(movement)
        if isinstance(movement, Placement):
            self._handle_placement(movement.player, movement.coords)
        else:
            self._handle_action(movement.player, movement.action)
        self._history.append(movement)

    def replay_placement(self, player: PlayerId, coords: Coordinates) -> None:
        """Applies a placement ignoring turn order and game over, as when rebuilding
        a position from a layout. Occupancy is still enforced."""
        if isinstance(self._status, Finished):
            logger.debug("Game already over; placement at %s only fills the board", coords)
        self._handle_placement(player, coords)
        self._history.append(Placement(player, coords))

    def set_next_player(self, player: PlayerId) -> None:
        """Overrides whose turn it is in an ongoing game (used when loading positions)."""
        if isinstance(self._status, Ongoing):
            self._status = Ongoing(next_player=player)

    def _index_of(self, coords: Coordinates) -> int:
        if not coords.fits(self._board_size):
            raise OutOfBoundsError(coords, self._board_size)
        return coords.to_index(self._board_size)

    def _handle_placement(self, player: PlayerId, coords: Coordinates) -> None:
        idx = self._index_of(coords)
        if not self._engine.is_free(idx):
            raise OccupiedError(coords, player)
        won = self._engine.make_move(idx, player)
        self._available.discard(idx)
        self._update_status_after_placement(player, won)

    def _update_status_after_placement(self, player: PlayerId, won: bool) -> None:
        if isinstance(self._status, Finished):
            return
        if won:
            logger.debug("Player %s wins the game", player)
            self._status = Finished(winner=player)
        else:
            self._status = Ongoing(next_player=other_player(player))

    def _handle_action(self, player: PlayerId, action: GameAction) -> None:
        if action is GameAction.RESIGN:
            self._status = Finished(winner=other_player(player))
        elif action is GameAction.SWAP:
            self._status = Ongoing(next_player=other_player(player))

    def __repr__(self) -> str:
        return f"GameY(board_size={self._board_size}, status={self._status})"
