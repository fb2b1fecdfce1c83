from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .board import BoardShape, Terrain
from .topology import CLASSIC_GRAPH, EXPANSION_GRAPH, AdjacencyGraph


@dataclass(frozen=True)
class ShapeSpec:
    """Static tables for one board shape."""

    shape: BoardShape
    graph: AdjacencyGraph
    terrain_counts: Dict[Terrain, int]
    chit_sequence: Tuple[int, ...]
    # Clockwise rings walked outside-in by the spiral placement.
    rings: Tuple[Tuple[int, ...], ...]

    @property
    def tile_count(self) -> int:
        return len(self.graph)

    @property
    def desert_count(self) -> int:
        return self.terrain_counts[Terrain.DESERT]


CLASSIC_TERRAIN_COUNTS: Dict[Terrain, int] = {
    Terrain.GRAIN: 4,
    Terrain.WOOD: 4,
    Terrain.SHEEP: 4,
    Terrain.BRICK: 3,
    Terrain.ORE: 3,
    Terrain.DESERT: 1,
}

EXPANSION_TERRAIN_COUNTS: Dict[Terrain, int] = {
    Terrain.GRAIN: 6,
    Terrain.WOOD: 6,
    Terrain.SHEEP: 6,
    Terrain.BRICK: 5,
    Terrain.ORE: 5,
    Terrain.DESERT: 2,
}

# Rulebook A-R order.
CLASSIC_CHIT_SEQUENCE = (5, 2, 6, 3, 8, 10, 9, 12, 11, 4, 8, 10, 9, 4, 5, 6, 3, 11)
# Rulebook A-Zb order for the 5-6 player extension.
EXPANSION_CHIT_SEQUENCE = (
    2, 5, 4, 6, 3, 9, 8, 11, 11, 10, 6, 3, 8, 4,
    8, 10, 11, 12, 10, 5, 4, 9, 5, 9, 12, 3, 2, 6,
)

CLASSIC_RINGS = (
    (0, 1, 2, 6, 11, 15, 18, 17, 16, 12, 7, 3),
    (4, 5, 10, 14, 13, 8),
    (9,),
)
EXPANSION_RINGS = (
    (0, 3, 7, 12, 18, 23, 27, 28, 29, 26, 22, 17, 11, 6, 2, 1),
    (4, 8, 13, 19, 24, 25, 21, 16, 10, 5),
    (9, 14, 20, 15),
)

CLASSIC_SPEC = ShapeSpec(
    shape=BoardShape.CLASSIC,
    graph=CLASSIC_GRAPH,
    terrain_counts=CLASSIC_TERRAIN_COUNTS,
    chit_sequence=CLASSIC_CHIT_SEQUENCE,
    rings=CLASSIC_RINGS,
)

EXPANSION_SPEC = ShapeSpec(
    shape=BoardShape.EXPANSION,
    graph=EXPANSION_GRAPH,
    terrain_counts=EXPANSION_TERRAIN_COUNTS,
    chit_sequence=EXPANSION_CHIT_SEQUENCE,
    rings=EXPANSION_RINGS,
)

_SPECS: Dict[BoardShape, ShapeSpec] = {
    BoardShape.CLASSIC: CLASSIC_SPEC,
    BoardShape.EXPANSION: EXPANSION_SPEC,
}


def shape_spec(shape: BoardShape) -> ShapeSpec:
    return _SPECS[BoardShape(shape)]
