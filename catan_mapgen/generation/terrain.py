from __future__ import annotations

import logging
import random
from collections import deque
from typing import List, Optional, Sequence

from catan_mapgen.domain.board import RESOURCE_TERRAINS, BoardShape, RuleConfig, Terrain
from catan_mapgen.domain.shapes import shape_spec
from catan_mapgen.domain.topology import AdjacencyGraph

from .types import GenerationLimits, GenerationTrace

logger = logging.getLogger(__name__)


def build_pool(shape: BoardShape) -> List[Terrain]:
    pool: List[Terrain] = []
    for terrain, count in shape_spec(shape).terrain_counts.items():
        pool.extend([terrain] * count)
    return pool


def cluster_limit(shape: BoardShape, rules: RuleConfig) -> int:
    """Largest same-terrain region allowed on `shape`.

    The expansion board always caps regions at two tiles; the classic board
    caps them at two, or at one when same resources may not touch at all.
    """
    if BoardShape(shape) is BoardShape.EXPANSION:
        return 2
    return 2 if rules.same_resource_can_touch else 1


def terrain_clusters(terrains: Sequence[Terrain], graph: AdjacencyGraph, terrain: Terrain) -> List[List[int]]:
    seen = [False] * len(graph)
    clusters = []
    for start in range(len(graph)):
        if seen[start] or terrains[start] is not terrain:
            continue
        seen[start] = True
        cluster = []
        queue: deque[int] = deque([start])
        while queue:
            current = queue.popleft()
            cluster.append(current)
            for neighbor in graph.neighbors(current):
                if not seen[neighbor] and terrains[neighbor] is terrain:
                    seen[neighbor] = True
                    queue.append(neighbor)
        clusters.append(cluster)
    return clusters


def max_cluster_size(
    terrains: Sequence[Terrain],
    shape: BoardShape,
    terrain: Terrain,
    *,
    stop_above: Optional[int] = None,
) -> int:
    graph = shape_spec(shape).graph
    _check_length(terrains, graph)
    best = 0
    for cluster in terrain_clusters(terrains, graph, terrain):
        best = max(best, len(cluster))
        if stop_above is not None and best > stop_above:
            break
    return best


def passes_cluster_rule(terrains: Sequence[Terrain], shape: BoardShape, rules: RuleConfig) -> bool:
    limit = cluster_limit(shape, rules)
    for terrain in RESOURCE_TERRAINS:
        if max_cluster_size(terrains, shape, terrain, stop_above=limit) > limit:
            return False
    return True


def cluster_excess(terrains: Sequence[Terrain], graph: AdjacencyGraph, limit: int) -> int:
    """Total number of tiles by which regions overshoot `limit`."""
    excess = 0
    for terrain in RESOURCE_TERRAINS:
        for cluster in terrain_clusters(terrains, graph, terrain):
            if len(cluster) > limit:
                excess += len(cluster) - limit
    return excess


def _oversized_tiles(terrains: Sequence[Terrain], graph: AdjacencyGraph, limit: int) -> List[int]:
    tiles = []
    for terrain in RESOURCE_TERRAINS:
        for cluster in terrain_clusters(terrains, graph, terrain):
            if len(cluster) > limit:
                tiles.extend(cluster)
    return sorted(tiles)


def repair_terrain_clusters(
    terrains: Sequence[Terrain],
    shape: BoardShape,
    rules: RuleConfig,
    rng: random.Random,
    *,
    restarts: int = 50,
    steps: int = 200,
) -> Optional[List[Terrain]]:
    """Swap tiles until no region is oversized; None if the budget runs out.

    Each step picks a tile inside an oversized region and applies the swap
    that lowers the total excess the most, allowing sideways moves. A restart
    reshuffles the layout once a step finds no non-worsening swap.
    """
    graph = shape_spec(shape).graph
    _check_length(terrains, graph)
    limit = cluster_limit(shape, rules)
    candidate = list(terrains)

    for restart in range(restarts):
        if restart > 0:
            rng.shuffle(candidate)
        excess = cluster_excess(candidate, graph, limit)
        for _ in range(steps):
            if excess == 0:
                logger.debug("Terrain repair converged after %d restart(s).", restart)
                return candidate
            tile = rng.choice(_oversized_tiles(candidate, graph, limit))
            best_score = excess + 1
            best_swaps: List[int] = []
            for other in range(len(candidate)):
                if candidate[other] is candidate[tile]:
                    continue
                candidate[tile], candidate[other] = candidate[other], candidate[tile]
                score = cluster_excess(candidate, graph, limit)
                candidate[tile], candidate[other] = candidate[other], candidate[tile]
                if score < best_score:
                    best_score = score
                    best_swaps = [other]
                elif score == best_score:
                    best_swaps.append(other)
            if best_score > excess or not best_swaps:
                break
            other = rng.choice(best_swaps)
            candidate[tile], candidate[other] = candidate[other], candidate[tile]
            excess = best_score
        if excess == 0:
            return candidate
    return None


def generate_valid_terrains(
    shape: BoardShape,
    rules: RuleConfig,
    rng: random.Random,
    *,
    limits: Optional[GenerationLimits] = None,
    trace: Optional[GenerationTrace] = None,
) -> List[Terrain]:
    limits = limits or GenerationLimits()
    trace = trace if trace is not None else GenerationTrace()
    pool = build_pool(shape)

    for attempt in range(1, limits.terrain_attempts + 1):
        rng.shuffle(pool)
        trace.terrain_attempts = attempt
        if passes_cluster_rule(pool, shape, rules):
            trace.terrain_compliant = True
            logger.debug("Terrain layout accepted on attempt %d.", attempt)
            return list(pool)

    if limits.terrain_repair_restarts > 0:
        logger.debug("No compliant shuffle in %d attempts, repairing terrain clusters.", limits.terrain_attempts)
        repaired = repair_terrain_clusters(
            pool,
            shape,
            rules,
            rng,
            restarts=limits.terrain_repair_restarts,
            steps=limits.terrain_repair_steps,
        )
        if repaired is not None:
            trace.terrain_repaired = True
            trace.terrain_compliant = True
            return repaired

    logger.warning(
        "Returning a %s terrain layout that breaks the cluster limit of %d.",
        BoardShape(shape).value,
        cluster_limit(shape, rules),
    )
    trace.terrain_compliant = False
    return list(pool)


def _check_length(terrains: Sequence[Terrain], graph: AdjacencyGraph) -> None:
    if len(terrains) != len(graph):
        raise ValueError(f"Expected {len(graph)} terrains, received {len(terrains)}.")
