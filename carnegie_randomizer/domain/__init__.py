"""Game data and the seeded shuffle."""

from .buildings import BuildingToken, TileSet, build_token_set, canonical_form
from .cities import CARD_CITIES, CardEntry, City, Region, build_card_deck
from .rng import Pcg64Mcg, shuffle

__all__ = [
    "BuildingToken",
    "TileSet",
    "build_token_set",
    "canonical_form",
    "CARD_CITIES",
    "CardEntry",
    "City",
    "Region",
    "build_card_deck",
    "Pcg64Mcg",
    "shuffle",
]
