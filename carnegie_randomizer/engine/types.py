from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from carnegie_randomizer.domain.buildings import ROW_COUNT, BuildingToken, TileSet
from carnegie_randomizer.domain.cities import DONATION_COLUMNS, DONATION_ROWS, City


class SetupConfigError(ValueError):
    """Raised when a seed or option value falls outside the supported set."""


class Players(str, Enum):
    ALL = "all"
    FOUR = "4"
    THREE = "3"
    TWO = "2"


class TypeLimit(int, Enum):
    FOUR = 4
    FIVE = 5
    SIX = 6
    ALL = 8


class Permanent(str, Enum):
    ZERO = "0"
    ZERO_PLUS = "0+"
    ONE = "1"
    ONE_PLUS = "1+"
    TWO = "2"

    @property
    def bounds(self) -> Tuple[int, int]:
        return _PERMANENT_BOUNDS[self]

    @property
    def min(self) -> int:
        return self.bounds[0]

    @property
    def max(self) -> int:
        return self.bounds[1]


_PERMANENT_BOUNDS: Dict[Permanent, Tuple[int, int]] = {
    Permanent.ZERO: (0, 0),
    Permanent.ZERO_PLUS: (0, 2),
    Permanent.ONE: (1, 1),
    Permanent.ONE_PLUS: (1, 2),
    Permanent.TWO: (2, 2),
}


def _coerce(enum_cls, value, label: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(str(member.value) for member in enum_cls)
        raise SetupConfigError(f"Unsupported {label} {value!r}; expected one of: {choices}.") from None


@dataclass(frozen=True)
class PlacementOptions:
    tile_set: TileSet = TileSet.BASE
    type_limit: TypeLimit = TypeLimit.FOUR
    permanent: Permanent = Permanent.ONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "tile_set", _coerce(TileSet, self.tile_set, "tile set"))
        object.__setattr__(self, "type_limit", _coerce(TypeLimit, self.type_limit, "type limit"))
        object.__setattr__(self, "permanent", _coerce(Permanent, self.permanent, "permanent setting"))

    @property
    def accent_min(self) -> int:
        return self.permanent.min

    @property
    def accent_max(self) -> int:
        return self.permanent.max


@dataclass(frozen=True)
class SetupConfig:
    players: Players = Players.FOUR
    placement: PlacementOptions = field(default_factory=PlacementOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "players", _coerce(Players, self.players, "player count"))
        if not isinstance(self.placement, PlacementOptions):
            raise SetupConfigError("placement must be a PlacementOptions instance.")

    @classmethod
    def from_choices(
        cls,
        *,
        players: str = Players.FOUR.value,
        tiles: str = TileSet.BASE.value,
        limit: str | int = TypeLimit.FOUR.value,
        permanent: str = Permanent.ONE.value,
    ) -> "SetupConfig":
        """Resolve the textual labels used by the command line."""
        try:
            limit_value = int(limit)
        except (TypeError, ValueError):
            raise SetupConfigError(f"Unsupported type limit {limit!r}.") from None
        return cls(
            players=str(players).strip().lower(),
            placement=PlacementOptions(
                tile_set=str(tiles).strip().lower(),
                type_limit=limit_value,
                permanent=str(permanent).strip(),
            ),
        )


@dataclass
class RowAssignment:
    """Per row: building value -> insertion indices of its placed copies."""

    rows: List[Dict[int, List[int]]] = field(default_factory=lambda: [{} for _ in range(ROW_COUNT)])

    def row_slots(self, row: int) -> int:
        return sum(len(indices) for indices in self.rows[row].values())

    def row_types(self, row: int) -> int:
        return len(self.rows[row])

    def row_accent_types(self, row: int) -> int:
        return sum(1 for value in self.rows[row] if BuildingToken(value).is_accent)

    def sorted_row(self, row: int) -> List[Tuple[int, List[int]]]:
        return sorted(self.rows[row].items())

    def insertion_order(self) -> List[int]:
        """Building values in the order they were placed."""
        placed = [(index, value) for row in self.rows for value, indices in row.items() for index in indices]
        return [value for _, value in sorted(placed)]

    @property
    def placed_count(self) -> int:
        return sum(self.row_slots(row) for row in range(len(self.rows)))


@dataclass
class DonationResult:
    grid: List[List[bool]] = field(
        default_factory=lambda: [[False] * DONATION_COLUMNS for _ in range(DONATION_ROWS)]
    )
    cities: Dict[City, int] = field(default_factory=dict)

    @property
    def blocked_cells(self) -> List[Tuple[int, int]]:
        """(row, column) pairs of blocked donations, row-major."""
        return [
            (row_index, col_index)
            for row_index, row in enumerate(self.grid)
            for col_index, blocked in enumerate(row)
            if blocked
        ]

    @property
    def consumed(self) -> int:
        return len(self.blocked_cells) + sum(self.cities.values())

    def is_empty(self) -> bool:
        return self.consumed == 0
