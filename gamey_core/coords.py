from __future__ import annotations

from dataclasses import dataclass
from math import isqrt
from typing import Dict, Iterator


def total_cells(size: int) -> int:
    """Number of cells on a triangular board with `size` cells per side."""
    return size * (size + 1) // 2


@dataclass(frozen=True)
class Coordinates:
    """Barycentric address of a cell. On a board of size N, x + y + z == N - 1."""
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0 or self.z < 0:
            raise ValueError(f'Coordinates must be non-negative: {self}')

    def fits(self, size: int) -> bool:
        """True if these coordinates address a cell of a board of the given size."""
        return self.x + self.y + self.z == size - 1

    def to_index(self, size: int) -> int:
        """Rows run from x = size-1 down to 0; within a row cells go by increasing y."""
        if not self.fits(size):
            raise ValueError(f'{self} does not lie on a board of size {size}')
        row = size - 1 - self.x
        return total_cells(row) + self.y

    @classmethod
    def from_index(cls, index: int, size: int) -> 'Coordinates':
        if not 0 <= index < total_cells(size):
            raise ValueError(f'Index {index} outside board of size {size}')
        # Largest row r with r*(r+1)/2 <= index
        row = (isqrt(8 * index + 1) - 1) // 2
        y = index - total_cells(row)
        x = size - 1 - row
        return cls(x, y, row - y)

    def touches_side_a(self) -> bool:
        return self.x == 0

    def touches_side_b(self) -> bool:
        return self.y == 0

    def touches_side_c(self) -> bool:
        return self.z == 0

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "z": self.z}

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"


def iter_coords(size: int) -> Iterator[Coordinates]:
    """Iterates over every cell of the board in index order."""
    for row in range(size):
        x = size - 1 - row
        for y in range(row + 1):
            yield Coordinates(x, y, row - y)
