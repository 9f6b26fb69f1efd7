from __future__ import annotations

import logging
from typing import Iterable

from carnegie_randomizer.domain.buildings import BOARD_SLOTS, ROW_CAPACITY, BuildingToken

from .types import PlacementOptions, RowAssignment

logger = logging.getLogger(__name__)


def place_buildings(tokens: Iterable[BuildingToken], options: PlacementOptions) -> RowAssignment:
    """Greedily assign shuffled tokens to the four rows in a single pass.

    Every accepted copy receives the next insertion index. Copies that would
    break a row constraint are dropped, and the pass ends once all 32 slots
    have been handed out.

    Room for the per-row accent minimums is held back globally:
    ``accent_missing`` counts accent values still owed across all rows, and
    while ``count`` sits at ``BOARD_SLOTS - accent_missing`` only a missing
    accent value may be placed. Within a row, non-accent placements keep
    ``accent_min`` slots and types free for the accents still to come.
    """
    limit = int(options.type_limit)
    accent_min = options.accent_min
    accent_max = options.accent_max

    assignment = RowAssignment()
    count = 0
    accent_missing = accent_min * len(assignment.rows)

    for token in tokens:
        if not token.in_tile_set(options.tile_set):
            continue

        row_index = token.row
        row = assignment.rows[row_index]
        row_types = assignment.row_types(row_index)
        row_slots = assignment.row_slots(row_index)
        row_accents = assignment.row_accent_types(row_index)

        if row_slots >= ROW_CAPACITY:
            continue

        # Accent types are subtracted from the slot count, not accent copies.
        reserved_slots = row_slots - row_accents + accent_min >= ROW_CAPACITY
        tail_reserved = count == BOARD_SLOTS - accent_missing

        placed = row.get(token.value)
        if placed is not None:
            if tail_reserved or reserved_slots:
                logger.debug("Rejected second copy of %02d in row %d at %d", token.value, row_index, count)
                continue
            placed.append(count)
        else:
            if row_types >= limit:
                continue
            if token.is_accent:
                if row_accents >= accent_max:
                    continue
                if row_accents < accent_min and accent_missing > 0:
                    accent_missing -= 1
            else:
                if tail_reserved:
                    continue
                if row_types - row_accents + accent_min >= limit:
                    continue
                if reserved_slots:
                    continue
            row[token.value] = [count]

        count += 1
        if count == BOARD_SLOTS:
            break

    if count < BOARD_SLOTS:
        logger.debug("Layout under-filled: %d of %d slots placed", count, BOARD_SLOTS)
    return assignment
