from __future__ import annotations

import logging
import random
from typing import Optional

from catan_mapgen.domain.board import Board, BoardShape, RuleConfig, Terrain

from .errors import BoardValidationError
from .numbers import generate_valid_numbers
from .terrain import generate_valid_terrains
from .types import GenerationLimits, GenerationResult, GenerationTrace
from .validation import find_violations, validate_standard_counts

logger = logging.getLogger(__name__)


class BoardBuilder:
    """Builds fully validated boards for either shape.

    Pass `seed` for reproducible output, or `rng` to share a generator the
    caller already owns. Each `build` call starts from scratch.
    """

    def __init__(
        self,
        rules: Optional[RuleConfig] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        limits: Optional[GenerationLimits] = None,
    ) -> None:
        self.rules = rules or RuleConfig()
        self.limits = limits or GenerationLimits()
        self._rng = rng if rng is not None else random.Random(seed)

    def build(self, shape: BoardShape) -> GenerationResult:
        shape = BoardShape(shape)
        trace = GenerationTrace(shape=shape)
        logger.debug("Generating %s board with %s.", shape.value, self.rules)

        terrains = generate_valid_terrains(shape, self.rules, self._rng, limits=self.limits, trace=trace)
        desert_indices = [index for index, terrain in enumerate(terrains) if terrain is Terrain.DESERT]
        numbers = generate_valid_numbers(
            shape,
            desert_indices,
            self.rules,
            self._rng,
            limits=self.limits,
            trace=trace,
        )

        board = Board.from_sequences(shape, terrains, numbers)
        self._final_check(board)
        return GenerationResult(board=board, trace=trace)

    def build_classic(self) -> GenerationResult:
        return self.build(BoardShape.CLASSIC)

    def build_expansion(self) -> GenerationResult:
        return self.build(BoardShape.EXPANSION)

    def _final_check(self, board: Board) -> None:
        violations = find_violations(board.numbers, board.shape, self.rules)
        if violations:
            logger.error("Final check found number violations: %s", violations)
            raise BoardValidationError(
                f"{board.shape.value.capitalize()} board failed final validation: "
                + ", ".join(f"{v.kind.value} at tiles {v.first}/{v.second}" for v in violations)
            )
        if not validate_standard_counts(board):
            logger.error("Final check found wrong terrain or chit counts.")
            raise BoardValidationError(
                f"{board.shape.value.capitalize()} board failed final validation: wrong terrain or chit counts."
            )


def build_board(
    shape: BoardShape,
    rules: Optional[RuleConfig] = None,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    limits: Optional[GenerationLimits] = None,
) -> Board:
    return BoardBuilder(rules, seed=seed, rng=rng, limits=limits).build(shape).board


def build_classic_board(
    rules: Optional[RuleConfig] = None,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    limits: Optional[GenerationLimits] = None,
) -> Board:
    return build_board(BoardShape.CLASSIC, rules, seed=seed, rng=rng, limits=limits)


def build_expansion_board(
    rules: Optional[RuleConfig] = None,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    limits: Optional[GenerationLimits] = None,
) -> Board:
    return build_board(BoardShape.EXPANSION, rules, seed=seed, rng=rng, limits=limits)
