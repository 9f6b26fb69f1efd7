from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from carnegie_randomizer.domain.buildings import BuildingToken

from .types import Players, RowAssignment

# An insertion index is hidden when its low bits cover the whole threshold.
VISIBILITY_THRESHOLDS: Dict[Players, int] = {
    Players.TWO: 1,
    Players.THREE: 3,
    Players.FOUR: 7,
    Players.ALL: 32,
}


def visibility_threshold(players: Players) -> int:
    return VISIBILITY_THRESHOLDS[Players(players)]


def visible(insertion_index: int, players: Players) -> bool:
    threshold = visibility_threshold(players)
    return (insertion_index & threshold) != threshold


@dataclass(frozen=True)
class RowCell:
    value: int
    accent: bool
    visible_copies: int

    @property
    def stack(self) -> str:
        if self.visible_copies == 0:
            return "none"
        return "half" if self.visible_copies == 1 else "full"


def row_cells(assignment: RowAssignment, players: Players) -> List[List[RowCell]]:
    """Display cells per row, in value order, with hidden copies removed."""
    rows: List[List[RowCell]] = []
    for row_index in range(len(assignment.rows)):
        cells = []
        for value, indices in assignment.sorted_row(row_index):
            cells.append(
                RowCell(
                    value=value,
                    accent=BuildingToken(value).is_accent,
                    visible_copies=sum(1 for index in indices if visible(index, players)),
                )
            )
        rows.append(cells)
    return rows
