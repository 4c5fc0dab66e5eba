from __future__ import annotations

from typing import List, Tuple

from .coords import Coordinates, total_cells
from .topology import ALL_SIDES, SIDE_A, SIDE_B, SIDE_C, CellIndex, RegionMask


def cell_regions(coords: Coordinates) -> RegionMask:
    """Bitmask of the sides a cell lies on."""
    mask = 0
    if coords.touches_side_a():
        mask |= SIDE_A
    if coords.touches_side_b():
        mask |= SIDE_B
    if coords.touches_side_c():
        mask |= SIDE_C
    return mask


def neighbor_coords(coords: Coordinates) -> List[Coordinates]:
    """Moves one unit from one axis to another, keeping every axis non-negative."""
    x, y, z = coords.x, coords.y, coords.z
    out: List[Coordinates] = []
    if x > 0:
        out.append(Coordinates(x - 1, y + 1, z))
        out.append(Coordinates(x - 1, y, z + 1))
    if y > 0:
        out.append(Coordinates(x + 1, y - 1, z))
        out.append(Coordinates(x, y - 1, z + 1))
    if z > 0:
        out.append(Coordinates(x + 1, y, z - 1))
        out.append(Coordinates(x, y + 1, z - 1))
    return out


class TriangularTopology:
    """Regular triangular board. Adjacency and side masks are computed once, up front."""

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f'Board size must be at least 1, got {size}')
        self.size = size
        n = total_cells(size)
        adjacency: List[Tuple[CellIndex, ...]] = []
        regions: List[RegionMask] = []
        for idx in range(n):
            coords = Coordinates.from_index(idx, size)
            regions.append(cell_regions(coords))
            adjacency.append(tuple(c.to_index(size) for c in neighbor_coords(coords)))
        self._adjacency: Tuple[Tuple[CellIndex, ...], ...] = tuple(adjacency)
        self._regions: Tuple[RegionMask, ...] = tuple(regions)

    def total_cells(self) -> int:
        return len(self._regions)

    def neighbors_of(self, cell: CellIndex) -> Tuple[CellIndex, ...]:
        return self._adjacency[cell]

    def regions_of(self, cell: CellIndex) -> RegionMask:
        return self._regions[cell]

    def winning_mask(self) -> RegionMask:
        return ALL_SIDES

    def __repr__(self) -> str:
        return f"TriangularTopology(size={self.size})"
