"""
Error hierarchy for the Y game.

Every error raised by the rules, the exchange format and persistence
derives from GameYError, so callers (the Flask app, the CLI) can catch one
type and report `to_dict()`. All of them are raised before any state is
modified.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class GameYError(Exception):
    """Base class. `code` is machine readable, `context` holds the details."""
    code: str = "GAMEY_ERROR"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "context": self.context}


# ---------- Rules ----------

class OutOfBoundsError(GameYError):
    code = "OUT_OF_BOUNDS"

    def __init__(self, cell: Any, size: Optional[int] = None):
        ctx: Dict[str, Any] = {"cell": str(cell)}
        if size is not None:
            ctx["size"] = size
        super().__init__(f"Cell {cell} is outside the board", ctx)
        self.cell = cell


class OccupiedError(GameYError):
    code = "OCCUPIED"

    def __init__(self, cell: Any, player: Optional[int] = None):
        ctx: Dict[str, Any] = {"cell": str(cell)}
        if player is not None:
            ctx["player"] = player
        super().__init__(f"Cell {cell} is already occupied", ctx)
        self.cell = cell
        self.player = player


class WrongTurnError(GameYError):
    code = "WRONG_TURN"

    def __init__(self, expected: int, found: int):
        super().__init__(
            f"It is player {expected}'s turn, not player {found}'s",
            {"expected": expected, "found": found},
        )
        self.expected = expected
        self.found = found


class GameOverError(GameYError):
    code = "GAME_OVER"

    def __init__(self, winner: int):
        super().__init__(f"Game already won by player {winner}", {"winner": winner})
        self.winner = winner


# ---------- Exchange format ----------

class InvalidLayoutRowCountError(GameYError):
    code = "INVALID_LAYOUT_ROW_COUNT"

    def __init__(self, expected: int, found: int):
        super().__init__(
            f"Layout has {found} rows, expected {expected}",
            {"expected": expected, "found": found},
        )
        self.expected = expected
        self.found = found


class InvalidLayoutRowLengthError(GameYError):
    code = "INVALID_LAYOUT_ROW_LENGTH"

    def __init__(self, expected: int, found: int, line: int):
        super().__init__(
            f"Layout row {line} has {found} cells, expected {expected}",
            {"expected": expected, "found": found, "line": line},
        )
        self.expected = expected
        self.found = found
        self.line = line


class InvalidLayoutCharError(GameYError):
    code = "INVALID_LAYOUT_CHAR"

    def __init__(self, char: str, row: int, col: int):
        super().__init__(
            f"Invalid character {char!r} in layout at row {row}, column {col}",
            {"char": char, "row": row, "col": col},
        )
        self.char = char
        self.row = row
        self.col = col


class DecodeError(GameYError):
    """Malformed exchange record (bad JSON, missing or ill-typed fields)."""
    code = "DECODE_ERROR"


# ---------- Persistence ----------

class PersistenceIOError(GameYError):
    code = "IO_ERROR"

    def __init__(self, message: str, path: Optional[str] = None, error: Optional[str] = None):
        ctx: Dict[str, Any] = {}
        if path is not None:
            ctx["path"] = path
        if error is not None:
            ctx["error"] = error
        super().__init__(message, ctx)
