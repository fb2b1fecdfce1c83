from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from catan_mapgen.domain.board import (
    EXTREME_NUMBERS,
    HOT_NUMBERS,
    Board,
    BoardShape,
    Chit,
    RuleConfig,
    Terrain,
)
from catan_mapgen.domain.shapes import shape_spec
from catan_mapgen.domain.topology import AdjacencyGraph, graph_for

from .terrain import passes_cluster_rule


class ViolationKind(str, Enum):
    SIX_SIX = "6-6"
    EIGHT_EIGHT = "8-8"
    SIX_EIGHT = "6-8"
    SAME_NUMBER = "same-number"
    EXTREME_PAIR = "2-12"


@dataclass(frozen=True, order=True)
class Violation:
    first: int
    second: int
    kind: ViolationKind


def pair_violation(a: Chit, b: Chit, rules: RuleConfig) -> Optional[ViolationKind]:
    """Classify one adjacent pair of chits, or return None if it is allowed."""
    if a is None or b is None:
        return None
    if a == b:
        if a == 6:
            return ViolationKind.SIX_SIX
        if a == 8:
            return ViolationKind.EIGHT_EIGHT
        if not rules.same_number_can_touch:
            return ViolationKind.SAME_NUMBER
        return None
    if a in HOT_NUMBERS and b in HOT_NUMBERS:
        return None if rules.hot_numbers_can_touch else ViolationKind.SIX_EIGHT
    if a in EXTREME_NUMBERS and b in EXTREME_NUMBERS:
        return None if rules.extreme_pair_can_touch else ViolationKind.EXTREME_PAIR
    return None


def violations_in_graph(
    numbers: Sequence[Chit],
    graph: AdjacencyGraph,
    rules: RuleConfig,
) -> List[Violation]:
    if len(numbers) != len(graph):
        raise ValueError(f"Expected {len(graph)} numbers, received {len(numbers)}.")
    found = []
    for first, second in graph.edges():
        kind = pair_violation(numbers[first], numbers[second], rules)
        if kind is not None:
            found.append(Violation(first=first, second=second, kind=kind))
    return found


def graph_numbers_are_valid(numbers: Sequence[Chit], graph: AdjacencyGraph, rules: RuleConfig) -> bool:
    if len(numbers) != len(graph):
        raise ValueError(f"Expected {len(graph)} numbers, received {len(numbers)}.")
    for first, second in graph.edges():
        if pair_violation(numbers[first], numbers[second], rules) is not None:
            return False
    return True


def find_violations(numbers: Sequence[Chit], shape: BoardShape, rules: RuleConfig) -> List[Violation]:
    return violations_in_graph(numbers, graph_for(shape), rules)


def is_valid_numbers(numbers: Sequence[Chit], shape: BoardShape, rules: RuleConfig) -> bool:
    return graph_numbers_are_valid(numbers, graph_for(shape), rules)


def validate_standard_counts(board: Board) -> bool:
    spec = shape_spec(board.shape)
    for terrain, number in zip(board.terrains, board.numbers):
        if (terrain is Terrain.DESERT) != (number is None):
            return False

    terrain_counts = {terrain: 0 for terrain in Terrain}
    terrain_counts.update(Counter(board.terrains))
    expected_terrains = {terrain: spec.terrain_counts.get(terrain, 0) for terrain in Terrain}
    if terrain_counts != expected_terrains:
        return False

    numbers = [number for number in board.numbers if number is not None]
    return sorted(numbers) == sorted(spec.chit_sequence)


def validate_board(board: Board, rules: RuleConfig) -> bool:
    return is_valid_numbers(board.numbers, board.shape, rules) and passes_cluster_rule(
        board.terrains, board.shape, rules
    )
