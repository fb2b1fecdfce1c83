from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

Chit = Optional[int]

CHIT_VALUES = (2, 3, 4, 5, 6, 8, 9, 10, 11, 12)
HOT_NUMBERS = frozenset({6, 8})
EXTREME_NUMBERS = frozenset({2, 12})


class Terrain(str, Enum):
    GRAIN = "grain"
    WOOD = "wood"
    SHEEP = "sheep"
    ORE = "ore"
    BRICK = "brick"
    DESERT = "desert"


RESOURCE_TERRAINS: Tuple[Terrain, ...] = tuple(
    terrain for terrain in Terrain if terrain is not Terrain.DESERT
)


class BoardShape(str, Enum):
    CLASSIC = "classic"
    EXPANSION = "expansion"

    @property
    def tile_count(self) -> int:
        return 19 if self is BoardShape.CLASSIC else 30


# camelCase toggle names from older saved rule configs.
_LEGACY_RULE_KEYS = {
    "sixEightCanTouch": "hot_numbers_can_touch",
    "twoTwelveCanTouch": "extreme_pair_can_touch",
    "sameNumbersCanTouch": "same_number_can_touch",
    "sameResourceCanTouch": "same_resource_can_touch",
}


@dataclass(frozen=True)
class RuleConfig:
    hot_numbers_can_touch: bool = False
    extreme_pair_can_touch: bool = True
    same_number_can_touch: bool = True
    same_resource_can_touch: bool = True  # classic only

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RuleConfig":
        known = {field_.name for field_ in fields(cls)}
        values: Dict[str, bool] = {}
        for key, value in payload.items():
            name = _LEGACY_RULE_KEYS.get(key, key)
            if name not in known:
                continue
            if not isinstance(value, bool):
                raise ValueError(f"Rule {key!r} must be true or false, received {value!r}.")
            values[name] = value
        return cls(**values)


@dataclass(frozen=True)
class Board:
    shape: BoardShape
    terrains: Tuple[Terrain, ...]
    numbers: Tuple[Chit, ...]

    def __post_init__(self) -> None:
        expected = self.shape.tile_count
        if len(self.terrains) != expected:
            raise ValueError(f"Expected {expected} terrains, received {len(self.terrains)}.")
        if len(self.numbers) != expected:
            raise ValueError(f"Expected {expected} numbers, received {len(self.numbers)}.")
        for number in self.numbers:
            if number is not None and number not in CHIT_VALUES:
                raise ValueError(f"Unknown number chit {number!r}.")

    @classmethod
    def from_sequences(
        cls,
        shape: BoardShape,
        terrains: Sequence[Terrain],
        numbers: Sequence[Chit],
    ) -> "Board":
        return cls(shape=shape, terrains=tuple(terrains), numbers=tuple(numbers))

    @property
    def desert_indices(self) -> Tuple[int, ...]:
        return tuple(index for index, terrain in enumerate(self.terrains) if terrain is Terrain.DESERT)

    def tiles_with_number(self, number: int) -> Tuple[int, ...]:
        return tuple(index for index, value in enumerate(self.numbers) if value == number)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shape": self.shape.value,
            "terrains": [terrain.value for terrain in self.terrains],
            "numbers": list(self.numbers),
        }
