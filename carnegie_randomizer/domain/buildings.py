from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

MIN_VALUE = 1
MAX_VALUE = 32
BASE_MAX_VALUE = 16
COPIES_PER_VALUE = 2
ROW_COUNT = 4
ROW_CAPACITY = 8
BOARD_SLOTS = ROW_COUNT * ROW_CAPACITY


class TileSet(str, Enum):
    BASE = "base"
    BOTH = "both"
    EXPANSION = "expansion"


@dataclass(frozen=True, order=True)
class BuildingToken:
    """One physical department tile; the two copies of a value compare equal."""

    value: int

    def __post_init__(self) -> None:
        if not MIN_VALUE <= self.value <= MAX_VALUE:
            raise ValueError(f"Building value must be in [{MIN_VALUE}, {MAX_VALUE}], got {self.value}.")

    @property
    def row(self) -> int:
        return ((self.value - 1) >> 2) & 3

    @property
    def is_accent(self) -> bool:
        shifted = self.value - 1 if self.value <= BASE_MAX_VALUE else self.value
        return shifted & 3 == 3

    @property
    def is_expansion(self) -> bool:
        return self.value > BASE_MAX_VALUE

    def in_tile_set(self, tile_set: TileSet) -> bool:
        if tile_set is TileSet.BASE:
            return not self.is_expansion
        if tile_set is TileSet.EXPANSION:
            return self.is_expansion
        return True


def build_token_set() -> List[BuildingToken]:
    """All 64 tokens, two per value, in value order."""
    tokens: List[BuildingToken] = []
    for value in range(MIN_VALUE, MAX_VALUE + 1):
        tokens.extend([BuildingToken(value)] * COPIES_PER_VALUE)
    return tokens


def accent_values() -> List[int]:
    return [value for value in range(MIN_VALUE, MAX_VALUE + 1) if BuildingToken(value).is_accent]


def canonical_form(shuffled: Iterable[BuildingToken]) -> str:
    """Sorted, zero-padded values of the first 32 tokens of a shuffled set."""
    head = sorted(list(shuffled)[:BOARD_SLOTS])
    return ",".join(f"{token.value:02d}" for token in head)
