from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from carnegie_randomizer.domain.buildings import BuildingToken, build_token_set, canonical_form
from carnegie_randomizer.domain.cities import CardEntry, build_card_deck
from carnegie_randomizer.domain.rng import shuffle

from .donations import donation_budget, restrict_donations
from .placement import place_buildings
from .seeding import BUILDING_SALT, CARD_SALT, check_seed
from .types import DonationResult, RowAssignment, SetupConfig
from .visibility import RowCell, row_cells

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSetup:
    seed: int
    config: SetupConfig
    building_order: Tuple[BuildingToken, ...]
    card_order: Tuple[CardEntry, ...]
    buildings: RowAssignment
    donations: DonationResult

    @property
    def donation_budget(self) -> int:
        return donation_budget(self.config.players)

    def building_cells(self) -> List[List[RowCell]]:
        return row_cells(self.buildings, self.config.players)

    def canonical_buildings(self) -> str:
        return canonical_form(self.building_order)


def shuffled_buildings(seed: int) -> List[BuildingToken]:
    return shuffle(seed, BUILDING_SALT, build_token_set())


def shuffled_cards(seed: int) -> List[CardEntry]:
    return shuffle(seed, CARD_SALT, build_card_deck())


def generate_setup(seed: int, config: SetupConfig | None = None) -> GameSetup:
    """Derive the full game setup for ``seed``; equal inputs give equal setups."""
    resolved = config if config is not None else SetupConfig()
    seed = check_seed(seed)

    building_order = shuffled_buildings(seed)
    card_order = shuffled_cards(seed)
    buildings = place_buildings(building_order, resolved.placement)
    donations = restrict_donations(card_order, donation_budget(resolved.players))
    logger.debug(
        "Seed %d: %d buildings placed, %d donation disks used",
        seed,
        buildings.placed_count,
        donations.consumed,
    )

    return GameSetup(
        seed=seed,
        config=resolved,
        building_order=tuple(building_order),
        card_order=tuple(card_order),
        buildings=buildings,
        donations=donations,
    )
