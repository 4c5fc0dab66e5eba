import unittest

from game import (
    ALL_SIDES,
    SIDE_A,
    SIDE_B,
    SIDE_C,
    Coordinates,
    TriangularTopology,
)


def _neighbor_coords(topo, coords):
    idx = coords.to_index(topo.size)
    return {Coordinates.from_index(n, topo.size) for n in topo.neighbors_of(idx)}


class TestTriangularTopology(unittest.TestCase):
    def test_given_any_board_when_listing_neighbors_then_adjacency_is_symmetric(self):
        for size in range(1, 9):
            topo = TriangularTopology(size)
            for a in range(topo.total_cells()):
                for b in topo.neighbors_of(a):
                    self.assertIn(a, topo.neighbors_of(b), f"size={size} {a}->{b}")

    def test_given_cells_when_counting_neighbors_then_corner_edge_interior_counts(self):
        for size in range(2, 9):
            topo = TriangularTopology(size)
            for idx in range(topo.total_cells()):
                c = Coordinates.from_index(idx, size)
                zeros = [c.x, c.y, c.z].count(0)
                expected = {2: 2, 1: 4, 0: 6}[zeros]
                self.assertEqual(len(topo.neighbors_of(idx)), expected, f"size={size} {c}")

    def test_given_size_five_when_querying_known_cells_then_expected_neighbors(self):
        topo = TriangularTopology(5)
        self.assertEqual(
            _neighbor_coords(topo, Coordinates(2, 1, 1)),
            {
                Coordinates(1, 2, 1),
                Coordinates(1, 1, 2),
                Coordinates(3, 0, 1),
                Coordinates(2, 0, 2),
                Coordinates(3, 1, 0),
                Coordinates(2, 2, 0),
            },
        )
        self.assertEqual(
            _neighbor_coords(topo, Coordinates(4, 0, 0)),
            {Coordinates(3, 1, 0), Coordinates(3, 0, 1)},
        )
        self.assertEqual(
            _neighbor_coords(topo, Coordinates(0, 2, 2)),
            {
                Coordinates(1, 1, 2),
                Coordinates(0, 1, 3),
                Coordinates(1, 2, 1),
                Coordinates(0, 3, 1),
            },
        )

    def test_given_cells_when_reading_regions_then_mask_matches_sides(self):
        for size in range(1, 8):
            topo = TriangularTopology(size)
            for idx in range(topo.total_cells()):
                c = Coordinates.from_index(idx, size)
                mask = topo.regions_of(idx)
                self.assertEqual(bool(mask & SIDE_A), c.x == 0)
                self.assertEqual(bool(mask & SIDE_B), c.y == 0)
                self.assertEqual(bool(mask & SIDE_C), c.z == 0)

    def test_given_topology_when_asking_winning_mask_then_all_three_sides(self):
        topo = TriangularTopology(4)
        self.assertEqual(topo.winning_mask(), ALL_SIDES)
        self.assertEqual(ALL_SIDES, 0b111)
        self.assertEqual(topo.total_cells(), 10)

    def test_given_single_cell_board_when_built_then_cell_touches_all_sides(self):
        topo = TriangularTopology(1)
        self.assertEqual(topo.total_cells(), 1)
        self.assertEqual(topo.neighbors_of(0), ())
        self.assertEqual(topo.regions_of(0), ALL_SIDES)

    def test_given_non_positive_size_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            TriangularTopology(0)


if __name__ == '__main__':
    unittest.main()
