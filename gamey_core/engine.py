"""
Shape-agnostic connectivity engine.

Tracks who owns each cell and keeps an incremental union-find forest over
the placed pieces. Each root carries the OR of the side masks of every
piece in its group, so a win is detected as soon as a merge yields a root
touching every region in the topology's winning mask.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from .errors import OccupiedError, OutOfBoundsError
from .topology import BoardTopology, CellIndex, RegionMask

T = TypeVar("T", bound=BoardTopology)


@dataclass
class DisjointSet:
    """One union-find node per placed piece. Roots point to themselves."""
    parent: int
    regions_touched: RegionMask


class GameEngine(Generic[T]):
    def __init__(self, topology: T):
        self.topology = topology
        n = topology.total_cells()
        # Owner of each cell, None when free
        self.state: List[Optional[int]] = [None] * n
        # Append-only arena of nodes; handles are list positions
        self.sets: List[DisjointSet] = []
        # Node handle of each occupied cell
        self.cell_set_map: List[Optional[int]] = [None] * n

    def owner(self, cell: CellIndex) -> Optional[int]:
        return self.state[cell]

    def is_free(self, cell: CellIndex) -> bool:
        return self.state[cell] is None

    def make_move(self, cell: CellIndex, player: int) -> bool:
        """Places a piece for `player` and returns True if it wins.

        Raises OutOfBoundsError or OccupiedError without touching any state.
        """
        if not 0 <= cell < self.topology.total_cells():
            raise OutOfBoundsError(cell)
        if self.state[cell] is not None:
            raise OccupiedError(cell, player)

        self.state[cell] = player
        node = len(self.sets)
        self.sets.append(DisjointSet(parent=node, regions_touched=self.topology.regions_of(cell)))
        self.cell_set_map[cell] = node

        won = False
        merged_any = False
        for neighbor in self.topology.neighbors_of(cell):
            if self.state[neighbor] != player:
                continue
            other = self.cell_set_map[neighbor]
            assert other is not None, f"occupied cell {neighbor} has no set"
            merged_any = True
            # Keep merging after a win so the forest stays complete
            if self._union(node, other):
                won = True

        if not merged_any:
            won = self._is_winning(self.sets[node].regions_touched)
        return won

    def _is_winning(self, mask: RegionMask) -> bool:
        target = self.topology.winning_mask()
        return (mask & target) == target

    def _find(self, i: int) -> int:
        root = i
        while self.sets[root].parent != root:
            root = self.sets[root].parent
        # Point every node on the path straight at the root
        while i != root:
            nxt = self.sets[i].parent
            self.sets[i].parent = root
            i = nxt
        return root

    def _union(self, i: int, j: int) -> bool:
        """Merges the groups of i and j into i's root; True if the result wins."""
        root_i = self._find(i)
        root_j = self._find(j)
        if root_i != root_j:
            self.sets[root_j].parent = root_i
            self.sets[root_i].regions_touched |= self.sets[root_j].regions_touched
        return self._is_winning(self.sets[root_i].regions_touched)
