from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import List, Optional

from .coords import Coordinates, iter_coords
from .game import GameY

_COLORS = {0: "\x1b[34m", 1: "\x1b[31m"}  # blue, red
_RESET = "\x1b[0m"


@dataclass(frozen=True)
class RenderOptions:
    show_3d_coords: bool = False
    show_idx: bool = False
    show_colors: bool = False

    def indent_multiplier(self) -> int:
        if self.show_3d_coords and self.show_idx:
            return 8
        if self.show_3d_coords or self.show_idx:
            return 4
        return 2


def _format_cell(game: GameY, coords: Coordinates, options: RenderOptions, width: int) -> str:
    idx = coords.to_index(game.board_size)
    owner: Optional[int] = game.owner_at_index(idx)
    symbol = "." if owner is None else str(owner)
    if options.show_3d_coords:
        symbol += f"({coords.x:0{width}},{coords.y:0{width}},{coords.z:0{width}})"
    if options.show_idx:
        symbol += f"({idx}) "
    if options.show_colors and owner in _COLORS:
        symbol = f"{_COLORS[owner]}{symbol}{_RESET}"
    return symbol


def render(game: GameY, options: Optional[RenderOptions] = None) -> str:
    """Draws the board as a triangle, corner row first."""
    opts = options or RenderOptions()
    size = game.board_size
    width = len(str(size))
    mult = opts.indent_multiplier()
    lines: List[str] = [f"--- Game of Y (Size {size}) ---"]
    for x, row in groupby(iter_coords(size), key=lambda c: c.x):
        cells = [_format_cell(game, coords, opts, width) + "   " for coords in row]
        lines.append(" " * (x * mult) + "".join(cells))
        if opts.show_idx or opts.show_3d_coords:
            lines.append("")
    return "\n".join(lines) + "\n"
