"""Building placement, visibility and donation restriction."""

from .donations import DONATION_BUDGETS, donation_budget, restrict_donations
from .placement import place_buildings
from .randomizer import GameSetup, generate_setup, shuffled_buildings, shuffled_cards
from .seeding import BUILDING_SALT, CARD_SALT, format_seed, parse_seed, random_seed
from .types import (
    DonationResult,
    PlacementOptions,
    Permanent,
    Players,
    RowAssignment,
    SetupConfig,
    SetupConfigError,
    TypeLimit,
)
from .visibility import VISIBILITY_THRESHOLDS, RowCell, row_cells, visible

__all__ = [
    "DONATION_BUDGETS",
    "donation_budget",
    "restrict_donations",
    "place_buildings",
    "GameSetup",
    "generate_setup",
    "shuffled_buildings",
    "shuffled_cards",
    "BUILDING_SALT",
    "CARD_SALT",
    "format_seed",
    "parse_seed",
    "random_seed",
    "DonationResult",
    "PlacementOptions",
    "Permanent",
    "Players",
    "RowAssignment",
    "SetupConfig",
    "SetupConfigError",
    "TypeLimit",
    "VISIBILITY_THRESHOLDS",
    "RowCell",
    "row_cells",
    "visible",
]
