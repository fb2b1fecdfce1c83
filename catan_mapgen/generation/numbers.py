from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Set, TypeVar

from catan_mapgen.domain.board import HOT_NUMBERS, BoardShape, Chit, RuleConfig
from catan_mapgen.domain.shapes import ShapeSpec, shape_spec

from .errors import HotNumberPlacementError
from .repair import RepairEngine
from .types import GenerationLimits, GenerationTrace, PlacementStrategy
from .validation import graph_numbers_are_valid

logger = logging.getLogger(__name__)

T = TypeVar("T")


def rotate(items: Sequence[T], k: int) -> List[T]:
    if not items:
        return []
    k %= len(items)
    return list(items[k:]) + list(items[:k])


def spiral_path(spec: ShapeSpec, rng: Optional[random.Random] = None) -> List[int]:
    """Outside-in walk over the shape's rings.

    Without `rng` the canonical clockwise walk is returned. With `rng` the
    direction is flipped at random and every ring gets its own random
    starting tile.
    """
    if rng is None:
        return [tile for ring in spec.rings for tile in ring]

    clockwise = rng.random() < 0.5
    path: List[int] = []
    for ring in spec.rings:
        walked = rotate(ring, rng.randrange(len(ring)))
        if not clockwise:
            walked.reverse()
        path.extend(walked)
    return path


def place_along_path(
    path: Sequence[int],
    chits: Sequence[int],
    desert_indices: Sequence[int],
    tile_count: int,
) -> List[Chit]:
    deserts = set(desert_indices)
    numbers: List[Chit] = [None] * tile_count
    strip = iter(chits)
    for tile in path:
        if tile in deserts:
            continue
        numbers[tile] = next(strip)
    return numbers


def place_ring_numbers(spec: ShapeSpec, desert_indices: Sequence[int], rng: random.Random) -> List[Chit]:
    strip = rotate(spec.chit_sequence, rng.randrange(len(spec.chit_sequence)))
    return place_along_path(spiral_path(spec, rng), strip, desert_indices, spec.tile_count)


def place_smart_numbers(spec: ShapeSpec, desert_indices: Sequence[int], rng: random.Random) -> List[Chit]:
    """Place every 6, then every 8, on tiles touching no earlier 6 or 8.

    The remaining chits fill the leftover tiles in shuffled order. Raises
    HotNumberPlacementError when a 6 or an 8 has nowhere legal to go.
    """
    graph = spec.graph
    deserts = set(desert_indices)
    numbers: List[Chit] = [None] * spec.tile_count
    available = [tile for tile in range(spec.tile_count) if tile not in deserts]
    hot_tiles: Set[int] = set()

    for hot_number in (6, 8):
        for _ in range(spec.chit_sequence.count(hot_number)):
            legal = [tile for tile in available if not (graph.neighbors(tile) & hot_tiles)]
            if not legal:
                raise HotNumberPlacementError(
                    f"No tile left for a {hot_number} that avoids touching another 6 or 8 "
                    f"on the {spec.shape.value} board."
                )
            tile = rng.choice(legal)
            numbers[tile] = hot_number
            hot_tiles.add(tile)
            available.remove(tile)

    remaining = [chit for chit in spec.chit_sequence if chit not in HOT_NUMBERS]
    rng.shuffle(remaining)
    for tile, chit in zip(available, remaining):
        numbers[tile] = chit
    return numbers


def select_strategy(rules: RuleConfig) -> PlacementStrategy:
    return PlacementStrategy.RING if rules.hot_numbers_can_touch else PlacementStrategy.SMART


def generate_valid_numbers(
    shape: BoardShape,
    desert_indices: Sequence[int],
    rules: RuleConfig,
    rng: random.Random,
    *,
    limits: Optional[GenerationLimits] = None,
    trace: Optional[GenerationTrace] = None,
) -> List[Chit]:
    spec = shape_spec(shape)
    limits = limits or GenerationLimits()
    trace = trace if trace is not None else GenerationTrace()
    _check_deserts(spec, desert_indices)

    strategy = select_strategy(rules)
    trace.strategy = strategy
    if strategy is PlacementStrategy.RING:
        return _generate_ring(spec, desert_indices, rules, rng, limits, trace)
    return _generate_smart(spec, desert_indices, rules, rng, limits, trace)


def _generate_ring(
    spec: ShapeSpec,
    desert_indices: Sequence[int],
    rules: RuleConfig,
    rng: random.Random,
    limits: GenerationLimits,
    trace: GenerationTrace,
) -> List[Chit]:
    for attempt in range(1, limits.ring_attempts + 1):
        trace.number_attempts = attempt
        numbers = place_ring_numbers(spec, desert_indices, rng)
        if graph_numbers_are_valid(numbers, spec.graph, rules):
            logger.debug("Ring placement accepted on attempt %d.", attempt)
            return numbers

    trace.rotation_sweep_used = True
    canonical_path = spiral_path(spec)
    for rotation in range(len(spec.chit_sequence)):
        numbers = place_along_path(
            canonical_path,
            rotate(spec.chit_sequence, rotation),
            desert_indices,
            spec.tile_count,
        )
        if graph_numbers_are_valid(numbers, spec.graph, rules):
            logger.debug("Canonical path accepted with chit rotation %d.", rotation)
            return numbers

    logger.warning("Ring placement exhausted, falling back to repair.")
    return _repair(spec, place_ring_numbers(spec, desert_indices, rng), rules, rng, limits, trace)


def _generate_smart(
    spec: ShapeSpec,
    desert_indices: Sequence[int],
    rules: RuleConfig,
    rng: random.Random,
    limits: GenerationLimits,
    trace: GenerationTrace,
) -> List[Chit]:
    last_draw: List[Chit] = []
    for attempt in range(1, limits.smart_attempts + 1):
        trace.number_attempts = attempt
        try:
            numbers = place_smart_numbers(spec, desert_indices, rng)
        except HotNumberPlacementError:
            if attempt == limits.smart_attempts and not last_draw:
                logger.error("Every smart placement draw ran out of room for the 6s and 8s.")
                raise
            continue
        last_draw = numbers
        if graph_numbers_are_valid(numbers, spec.graph, rules):
            logger.debug("Smart placement accepted on attempt %d.", attempt)
            return numbers

    logger.warning("Smart placement exhausted, falling back to repair.")
    return _repair(spec, last_draw, rules, rng, limits, trace)


def _repair(
    spec: ShapeSpec,
    numbers: Sequence[Chit],
    rules: RuleConfig,
    rng: random.Random,
    limits: GenerationLimits,
    trace: GenerationTrace,
) -> List[Chit]:
    trace.repair_used = True
    engine = RepairEngine(
        spec.shape,
        rules,
        rng,
        max_restarts=limits.repair_restarts,
        max_swap_attempts=limits.repair_swap_attempts,
    )
    try:
        return engine.repair(numbers)
    finally:
        trace.repair_restarts = engine.restarts
        trace.repair_swaps = engine.swaps


def _check_deserts(spec: ShapeSpec, desert_indices: Sequence[int]) -> None:
    deserts = set(desert_indices)
    if len(deserts) != spec.desert_count or len(deserts) != len(desert_indices):
        raise ValueError(
            f"Expected {spec.desert_count} distinct desert tiles on the {spec.shape.value} board, "
            f"received {list(desert_indices)}."
        )
    if any(not 0 <= tile < spec.tile_count for tile in deserts):
        raise ValueError(f"Desert tile outside 0..{spec.tile_count - 1}: {list(desert_indices)}.")
