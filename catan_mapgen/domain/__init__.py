"""Board shapes, adjacency tables and the board model."""

from .board import (
    CHIT_VALUES,
    EXTREME_NUMBERS,
    HOT_NUMBERS,
    RESOURCE_TERRAINS,
    Board,
    BoardShape,
    Chit,
    RuleConfig,
    Terrain,
)
from .shapes import CLASSIC_SPEC, EXPANSION_SPEC, ShapeSpec, shape_spec
from .topology import CLASSIC_GRAPH, EXPANSION_GRAPH, AdjacencyGraph, graph_for, neighbors

__all__ = [
    "CHIT_VALUES",
    "EXTREME_NUMBERS",
    "HOT_NUMBERS",
    "RESOURCE_TERRAINS",
    "Board",
    "BoardShape",
    "Chit",
    "RuleConfig",
    "Terrain",
    "CLASSIC_SPEC",
    "EXPANSION_SPEC",
    "ShapeSpec",
    "shape_spec",
    "CLASSIC_GRAPH",
    "EXPANSION_GRAPH",
    "AdjacencyGraph",
    "graph_for",
    "neighbors",
]
