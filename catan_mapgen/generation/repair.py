from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Set

from catan_mapgen.domain.board import HOT_NUMBERS, BoardShape, Chit, RuleConfig
from catan_mapgen.domain.topology import graph_for

from .errors import RepairExhaustedError
from .validation import Violation, violations_in_graph

logger = logging.getLogger(__name__)


class RepairEngine:
    """Local search that swaps chits until no adjacency rule is broken.

    A swap is kept only when the set of violations after it is a strict
    subset of the set before it. When no swap helps within
    `max_swap_attempts` tries, the non-desert chits are reshuffled and the
    scan starts over, up to `max_restarts` times.
    """

    def __init__(
        self,
        shape: BoardShape,
        rules: RuleConfig,
        rng: random.Random,
        *,
        max_restarts: int = 50,
        max_swap_attempts: int = 400,
    ) -> None:
        self._graph = graph_for(shape)
        self._rules = rules
        self._rng = rng
        self._max_restarts = max(1, int(max_restarts))
        self._max_swap_attempts = max(1, int(max_swap_attempts))
        self.restarts = 0
        self.swaps = 0

    def repair(self, numbers: Sequence[Chit]) -> List[Chit]:
        candidate = list(numbers)
        if len(candidate) != len(self._graph):
            raise ValueError(f"Expected {len(self._graph)} numbers, received {len(candidate)}.")
        slots = [index for index, value in enumerate(candidate) if value is not None]
        self.restarts = 0
        self.swaps = 0

        for restart in range(self._max_restarts):
            if restart > 0:
                self.restarts = restart
                values = [candidate[index] for index in slots]
                self._rng.shuffle(values)
                for index, value in zip(slots, values):
                    candidate[index] = value
            if self._resolve(candidate, slots):
                logger.debug("Repair succeeded after %d restart(s), %d swap(s).", self.restarts, self.swaps)
                return candidate

        logger.error("Number repair gave up after %d restarts.", self._max_restarts)
        raise RepairExhaustedError(
            f"Could not repair number adjacency after {self._max_restarts} restarts."
        )

    def _resolve(self, candidate: List[Chit], slots: Sequence[int]) -> bool:
        violations = set(violations_in_graph(candidate, self._graph, self._rules))
        while violations:
            remaining = self._apply_improving_swap(candidate, slots, violations)
            if remaining is None:
                return False
            violations = remaining
        return True

    def _apply_improving_swap(
        self,
        candidate: List[Chit],
        slots: Sequence[int],
        violations: Set[Violation],
    ) -> Optional[Set[Violation]]:
        attempts = 0
        for violation in sorted(violations):
            for tile in (violation.first, violation.second):
                partners = [
                    slot
                    for slot in slots
                    if slot != tile
                    and candidate[slot] not in HOT_NUMBERS
                    and candidate[slot] != candidate[tile]
                ]
                self._rng.shuffle(partners)
                for partner in partners:
                    if attempts >= self._max_swap_attempts:
                        return None
                    attempts += 1
                    candidate[tile], candidate[partner] = candidate[partner], candidate[tile]
                    after = set(violations_in_graph(candidate, self._graph, self._rules))
                    if after < violations:
                        self.swaps += 1
                        return after
                    candidate[tile], candidate[partner] = candidate[partner], candidate[tile]
        return None
