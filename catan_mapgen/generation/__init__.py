"""Terrain and number generation for both board shapes."""

from .builder import BoardBuilder, build_board, build_classic_board, build_expansion_board
from .errors import BoardValidationError, GenerationError, HotNumberPlacementError, RepairExhaustedError
from .numbers import generate_valid_numbers, place_ring_numbers, place_smart_numbers, spiral_path
from .repair import RepairEngine
from .terrain import (
    build_pool,
    cluster_limit,
    generate_valid_terrains,
    max_cluster_size,
    passes_cluster_rule,
    repair_terrain_clusters,
)
from .types import GenerationLimits, GenerationResult, GenerationTrace, PlacementStrategy
from .validation import (
    Violation,
    ViolationKind,
    find_violations,
    is_valid_numbers,
    validate_board,
    validate_standard_counts,
)

__all__ = [
    "BoardBuilder",
    "build_board",
    "build_classic_board",
    "build_expansion_board",
    "BoardValidationError",
    "GenerationError",
    "HotNumberPlacementError",
    "RepairExhaustedError",
    "generate_valid_numbers",
    "place_ring_numbers",
    "place_smart_numbers",
    "spiral_path",
    "RepairEngine",
    "build_pool",
    "cluster_limit",
    "generate_valid_terrains",
    "max_cluster_size",
    "passes_cluster_rule",
    "repair_terrain_clusters",
    "GenerationLimits",
    "GenerationResult",
    "GenerationTrace",
    "PlacementStrategy",
    "Violation",
    "ViolationKind",
    "find_violations",
    "is_valid_numbers",
    "validate_board",
    "validate_standard_counts",
]
