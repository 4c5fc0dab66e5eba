"""
Board topology contract.

The connectivity engine only ever talks to a board through this protocol,
so a new board shape needs a new topology class and nothing else.
"""
from __future__ import annotations

from typing import Protocol, Sequence

CellIndex = int
RegionMask = int

SIDE_A: RegionMask = 1 << 0  # x == 0
SIDE_B: RegionMask = 1 << 1  # y == 0
SIDE_C: RegionMask = 1 << 2  # z == 0
ALL_SIDES: RegionMask = SIDE_A | SIDE_B | SIDE_C


class BoardTopology(Protocol):
    """What any board shape must provide to the engine."""

    def total_cells(self) -> int:
        ...

    def neighbors_of(self, cell: CellIndex) -> Sequence[CellIndex]:
        """Adjacent cells, in no particular order."""
        ...

    def regions_of(self, cell: CellIndex) -> RegionMask:
        ...

    def winning_mask(self) -> RegionMask:
        """Regions a single connected group has to touch to win."""
        ...
