"""
YEN: the JSON exchange record for a Y position.

    {"size": 3, "turn": 0, "players": ["B", "R"], "layout": "B/.R/..B"}

The layout lists rows from the single-cell corner (x = size-1) down to the
x = 0 side, separated by '/'. Row r holds r+1 cells ordered by increasing y.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import IO, Any, Dict, List, Tuple, Union

from .coords import Coordinates
from .errors import (
    DecodeError,
    InvalidLayoutCharError,
    InvalidLayoutRowCountError,
    InvalidLayoutRowLengthError,
    PersistenceIOError,
)
from .game import Finished, GameY, other_player

EMPTY = '.'
ROW_SEPARATOR = '/'
DEFAULT_PLAYERS: Tuple[str, str] = ('B', 'R')


@dataclass(frozen=True)
class YEN:
    size: int
    turn: int
    players: Tuple[str, str]
    layout: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "turn": self.turn,
            "players": list(self.players),
            "layout": self.layout,
        }

    @classmethod
    def from_dict(cls, obj: Any) -> 'YEN':
        if not isinstance(obj, dict):
            raise DecodeError("YEN record must be a JSON object")
        missing = [k for k in ("size", "turn", "players", "layout") if k not in obj]
        if missing:
            raise DecodeError("YEN record is missing fields", {"missing": missing})
        size, turn, players, layout = obj["size"], obj["turn"], obj["players"], obj["layout"]
        if not _is_int(size) or size < 1:
            raise DecodeError("size must be a positive integer", {"size": size})
        if not _is_int(turn):
            raise DecodeError("turn must be an integer", {"turn": turn})
        if not isinstance(layout, str):
            raise DecodeError("layout must be a string")
        if (
            not isinstance(players, list)
            or len(players) != 2
            or not all(isinstance(p, str) and len(p) == 1 for p in players)
            or players[0] == players[1]
            or EMPTY in players
            or ROW_SEPARATOR in players
        ):
            raise DecodeError(
                "players must be two distinct single characters other than '.' and '/'",
                {"players": players},
            )
        return cls(size=size, turn=turn, players=(players[0], players[1]), layout=layout)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> 'YEN':
        try:
            obj = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Invalid JSON: {e}") from e
        return cls.from_dict(obj)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


# ---------- Game <-> YEN ----------

def encode(game: GameY, players: Tuple[str, str] = DEFAULT_PLAYERS) -> YEN:
    """Snapshot of a game. The turn is the next player, or the loser once finished."""
    status = game.status
    turn = other_player(status.winner) if isinstance(status, Finished) else status.next_player
    size = game.board_size
    rows: List[str] = []
    for row in range(size):
        start = row * (row + 1) // 2
        cells: List[str] = []
        for idx in range(start, start + row + 1):
            owner = game.owner_at_index(idx)
            cells.append(EMPTY if owner is None else players[owner])
        rows.append(''.join(cells))
    return YEN(size=size, turn=turn, players=players, layout=ROW_SEPARATOR.join(rows))


def decode(yen: YEN) -> GameY:
    """Rebuilds a game by replaying the layout's pieces in row order.

    The layout is fully validated before any board is built.
    """
    rows = yen.layout.split(ROW_SEPARATOR)
    if len(rows) != yen.size:
        raise InvalidLayoutRowCountError(expected=yen.size, found=len(rows))
    for row, line in enumerate(rows):
        if len(line) != row + 1:
            raise InvalidLayoutRowLengthError(expected=row + 1, found=len(line), line=row)
    symbols = {yen.players[0]: 0, yen.players[1]: 1}
    pieces: List[Tuple[int, Coordinates]] = []
    for row, line in enumerate(rows):
        x = yen.size - 1 - row
        for col, ch in enumerate(line):
            if ch == EMPTY:
                continue
            if ch not in symbols:
                raise InvalidLayoutCharError(ch, row, col)
            pieces.append((symbols[ch], Coordinates(x, col, yen.size - 1 - x - col)))

    game = GameY(yen.size)
    for player, coords in pieces:
        game.replay_placement(player, coords)
    if not game.check_game_over():
        if yen.turn not in (0, 1):
            raise DecodeError("turn must be 0 or 1", {"turn": yen.turn})
        game.set_next_player(yen.turn)
    return game


# ---------- Persistence ----------

def dump(source: Union[GameY, YEN], stream: IO[bytes]) -> None:
    """Writes a game (or a YEN record) as UTF-8 JSON to a binary stream."""
    yen = encode(source) if isinstance(source, GameY) else source
    try:
        stream.write(yen.to_json().encode('utf-8'))
    except OSError as e:
        raise PersistenceIOError("Failed to write YEN", error=str(e)) from e


def load(stream: IO[bytes]) -> GameY:
    try:
        data = stream.read()
    except OSError as e:
        raise PersistenceIOError("Failed to read YEN", error=str(e)) from e
    return decode(YEN.from_json(data))


def save_to_file(game: GameY, path: Union[str, os.PathLike]) -> None:
    try:
        with open(path, 'wb') as f:
            dump(game, f)
    except OSError as e:
        raise PersistenceIOError(f"Failed to write file: {path}", path=str(path), error=str(e)) from e


def load_from_file(path: Union[str, os.PathLike]) -> GameY:
    try:
        with open(path, 'rb') as f:
            return load(f)
    except OSError as e:
        raise PersistenceIOError(f"Failed to read file: {path}", path=str(path), error=str(e)) from e
