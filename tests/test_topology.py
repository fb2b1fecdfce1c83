import unittest

from catan_mapgen.domain.board import BoardShape
from catan_mapgen.domain.shapes import CLASSIC_SPEC, EXPANSION_SPEC, shape_spec
from catan_mapgen.domain.topology import (
    CLASSIC_GRAPH,
    EXPANSION_GRAPH,
    AXIAL_DIRECTIONS,
    build_graph,
    graph_for,
    neighbors,
)

# Edge-neighbor table of the 19-tile board, rows of 3,4,5,4,3.
CLASSIC_NEIGHBORS = [
    [1, 3, 4],
    [0, 2, 4, 5],
    [1, 5, 6],
    [0, 4, 7, 8],
    [0, 1, 3, 5, 8, 9],
    [1, 2, 4, 6, 9, 10],
    [2, 5, 10, 11],
    [3, 8, 12],
    [3, 4, 7, 9, 12, 13],
    [4, 5, 8, 10, 13, 14],
    [5, 6, 9, 11, 14, 15],
    [6, 10, 15],
    [7, 8, 13, 16],
    [8, 9, 12, 14, 16, 17],
    [9, 10, 13, 15, 17, 18],
    [10, 11, 14, 18],
    [12, 13, 17],
    [13, 14, 16, 18],
    [14, 15, 17],
]


class AdjacencyGraphTests(unittest.TestCase):
    def test_classic_graph_matches_reference_table(self) -> None:
        self.assertEqual(len(CLASSIC_GRAPH), 19)
        for tile_index, expected in enumerate(CLASSIC_NEIGHBORS):
            self.assertEqual(sorted(CLASSIC_GRAPH.neighbors(tile_index)), expected, msg=f"tile {tile_index}")

    def test_expansion_graph_columns(self) -> None:
        self.assertEqual(len(EXPANSION_GRAPH), 30)
        self.assertEqual(sorted(EXPANSION_GRAPH.neighbors(0)), [1, 3, 4])
        self.assertEqual(sorted(EXPANSION_GRAPH.neighbors(4)), [0, 1, 3, 5, 8, 9])
        self.assertEqual(sorted(EXPANSION_GRAPH.neighbors(12)), [7, 13, 18])
        self.assertEqual(sorted(EXPANSION_GRAPH.neighbors(14)), [8, 9, 13, 15, 19, 20])
        self.assertEqual(sorted(EXPANSION_GRAPH.neighbors(29)), [25, 26, 28])

    def test_graphs_are_symmetric_and_irreflexive(self) -> None:
        for graph in (CLASSIC_GRAPH, EXPANSION_GRAPH):
            for tile_index in range(len(graph)):
                self.assertNotIn(tile_index, graph.neighbors(tile_index))
                for neighbor in graph.neighbors(tile_index):
                    self.assertIn(tile_index, graph.neighbors(neighbor))

    def test_edge_counts(self) -> None:
        self.assertEqual(len(list(CLASSIC_GRAPH.edges())), 42)
        self.assertEqual(len(list(EXPANSION_GRAPH.edges())), 71)
        for first, second in EXPANSION_GRAPH.edges():
            self.assertLess(first, second)

    def test_neighbors_selects_graph_by_shape(self) -> None:
        self.assertIs(graph_for(BoardShape.CLASSIC), CLASSIC_GRAPH)
        self.assertIs(graph_for("expansion"), EXPANSION_GRAPH)
        self.assertEqual(neighbors(BoardShape.CLASSIC, 4), CLASSIC_GRAPH.neighbors(4))
        self.assertNotEqual(neighbors(BoardShape.CLASSIC, 7), neighbors(BoardShape.EXPANSION, 7))

    def test_out_of_range_tile_raises(self) -> None:
        with self.assertRaises(IndexError):
            neighbors(BoardShape.CLASSIC, 19)
        with self.assertRaises(IndexError):
            neighbors(BoardShape.EXPANSION, -1)

    def test_are_adjacent(self) -> None:
        self.assertTrue(CLASSIC_GRAPH.are_adjacent(9, 14))
        self.assertFalse(CLASSIC_GRAPH.are_adjacent(0, 18))

    def test_build_graph_ignores_missing_coordinates(self) -> None:
        graph = build_graph([(0, 0), (1, 0), (5, 5)], AXIAL_DIRECTIONS)
        self.assertEqual(graph.neighbors(0), frozenset({1}))
        self.assertEqual(graph.neighbors(2), frozenset())


class ShapeSpecTests(unittest.TestCase):
    def test_rings_partition_every_tile(self) -> None:
        for spec in (CLASSIC_SPEC, EXPANSION_SPEC):
            tiles = [tile for ring in spec.rings for tile in ring]
            self.assertEqual(sorted(tiles), list(range(spec.tile_count)))

    def test_rings_are_closed_walks(self) -> None:
        for spec in (CLASSIC_SPEC, EXPANSION_SPEC):
            for ring in spec.rings:
                if len(ring) == 1:
                    continue
                for first, second in zip(ring, ring[1:] + ring[:1]):
                    self.assertTrue(spec.graph.are_adjacent(first, second), msg=f"{first}-{second}")

    def test_chit_sequence_fills_non_desert_tiles(self) -> None:
        for spec in (CLASSIC_SPEC, EXPANSION_SPEC):
            self.assertEqual(sum(spec.terrain_counts.values()), spec.tile_count)
            self.assertEqual(len(spec.chit_sequence), spec.tile_count - spec.desert_count)
            self.assertNotIn(7, spec.chit_sequence)

    def test_shape_spec_lookup(self) -> None:
        self.assertIs(shape_spec(BoardShape.CLASSIC), CLASSIC_SPEC)
        self.assertIs(shape_spec("expansion"), EXPANSION_SPEC)
        with self.assertRaises(ValueError):
            shape_spec("hexagonal")


if __name__ == "__main__":
    unittest.main()
