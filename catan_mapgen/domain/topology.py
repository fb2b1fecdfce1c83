from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Sequence, Tuple

from .board import BoardShape

Coord = Tuple[int, int]

CLASSIC_RADIUS = 2
EXPANSION_COLUMN_SIZES = (3, 4, 5, 6, 5, 4, 3)

# Axial (q, r) directions for the pointy-top classic hexagon.
AXIAL_DIRECTIONS: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (-1, 1))
# (column, doubled row) directions for the flat-top expansion columns.
DOUBLED_COLUMN_DIRECTIONS: Tuple[Coord, ...] = ((0, 2), (0, -2), (1, 1), (1, -1), (-1, 1), (-1, -1))


@dataclass(frozen=True)
class AdjacencyGraph:
    """Edge-neighbor table for one board shape, indexed by tile."""

    adjacency: Tuple[FrozenSet[int], ...]

    def __len__(self) -> int:
        return len(self.adjacency)

    def neighbors(self, tile_index: int) -> FrozenSet[int]:
        if not 0 <= tile_index < len(self.adjacency):
            raise IndexError(f"Tile index {tile_index} outside 0..{len(self.adjacency) - 1}.")
        return self.adjacency[tile_index]

    def are_adjacent(self, first: int, second: int) -> bool:
        return second in self.neighbors(first)

    def edges(self) -> Iterator[Tuple[int, int]]:
        for tile_index, adjacent in enumerate(self.adjacency):
            for neighbor in sorted(adjacent):
                if neighbor > tile_index:
                    yield (tile_index, neighbor)


def build_graph(coords: Sequence[Coord], directions: Sequence[Coord]) -> AdjacencyGraph:
    index_by_coord: Dict[Coord, int] = {coord: index for index, coord in enumerate(coords)}
    adjacency: List[FrozenSet[int]] = []
    for x, y in coords:
        adjacent = set()
        for dx, dy in directions:
            neighbor = index_by_coord.get((x + dx, y + dy))
            if neighbor is not None:
                adjacent.add(neighbor)
        adjacency.append(frozenset(adjacent))
    return AdjacencyGraph(adjacency=tuple(adjacency))


def classic_coords(radius: int = CLASSIC_RADIUS) -> List[Coord]:
    coords: List[Coord] = []
    for q in range(-radius, radius + 1):
        r_min = max(-radius, -q - radius)
        r_max = min(radius, -q + radius)
        for r in range(r_min, r_max + 1):
            coords.append((q, r))
    coords.sort(key=lambda item: (item[1], item[0]))
    return coords


def expansion_coords(column_sizes: Sequence[int] = EXPANSION_COLUMN_SIZES) -> List[Coord]:
    tallest = max(column_sizes)
    coords: List[Coord] = []
    for column, size in enumerate(column_sizes):
        top = tallest - size
        for row in range(size):
            coords.append((column, top + 2 * row))
    return coords


CLASSIC_GRAPH = build_graph(classic_coords(), AXIAL_DIRECTIONS)
EXPANSION_GRAPH = build_graph(expansion_coords(), DOUBLED_COLUMN_DIRECTIONS)

_GRAPHS: Dict[BoardShape, AdjacencyGraph] = {
    BoardShape.CLASSIC: CLASSIC_GRAPH,
    BoardShape.EXPANSION: EXPANSION_GRAPH,
}


def graph_for(shape: BoardShape) -> AdjacencyGraph:
    return _GRAPHS[BoardShape(shape)]


def neighbors(shape: BoardShape, tile_index: int) -> FrozenSet[int]:
    return graph_for(shape).neighbors(tile_index)
