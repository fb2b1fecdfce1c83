from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional

from catan_mapgen.domain.board import Board, BoardShape


class PlacementStrategy(str, Enum):
    RING = "ring"
    SMART = "smart"


@dataclass(frozen=True)
class GenerationLimits:
    terrain_attempts: int = 2_000
    terrain_repair_restarts: int = 50  # 0 = no terrain repair
    terrain_repair_steps: int = 200
    ring_attempts: int = 2_000
    smart_attempts: int = 500
    repair_restarts: int = 50
    repair_swap_attempts: int = 400

    def __post_init__(self) -> None:
        for field_ in fields(self):
            value = getattr(self, field_.name)
            minimum = 0 if field_.name == "terrain_repair_restarts" else 1
            if value < minimum:
                raise ValueError(f"{field_.name} must be >= {minimum}, received {value}.")


@dataclass
class GenerationTrace:
    """What the builder did to reach the returned board."""

    shape: Optional[BoardShape] = None
    terrain_attempts: int = 0
    terrain_repaired: bool = False
    terrain_compliant: bool = False
    strategy: Optional[PlacementStrategy] = None
    number_attempts: int = 0
    rotation_sweep_used: bool = False
    repair_used: bool = False
    repair_restarts: int = 0
    repair_swaps: int = 0

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["shape"] = self.shape.value if self.shape is not None else None
        payload["strategy"] = self.strategy.value if self.strategy is not None else None
        return payload


@dataclass
class GenerationResult:
    board: Board
    trace: GenerationTrace
