from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

CARD_COUNT = 20
DONATION_ROWS = 5
DONATION_COLUMNS = 4


class Region(str, Enum):
    WEST = "west"
    MIDWEST = "midwest"
    EAST = "east"
    SOUTH = "south"


class City(str, Enum):
    # West
    BOISE = "Boise"
    DENVER = "Denver"
    LOS_ANGELES = "Los Angeles"
    PORTLAND = "Portland"
    RENO = "Reno"
    SALT_LAKE_CITY = "Salt Lake City"
    SAN_FRANCISCO = "San Francisco"
    SANTA_FE = "Santa Fe"
    # Midwest
    CHICAGO = "Chicago"
    CINCINNATI = "Cincinnati"
    DULUTH = "Duluth"
    FARGO = "Fargo"
    KANSAS_CITY = "Kansas City"
    OMAHA = "Omaha"
    ST_LOUIS = "St Louis"
    ST_PAUL = "St Paul"
    # East
    ALBANY = "Albany"
    BOSTON = "Boston"
    NEW_YORK = "New York"
    PITTSBURGH = "Pittsburgh"
    WASHINGTON = "Washington"
    # South
    ATLANTA = "Atlanta"
    CHARLESTON = "Charleston"
    DALLAS = "Dallas"
    HOUSTON = "Houston"
    MEMPHIS = "Memphis"
    NEW_ORLEANS = "New Orleans"
    SAN_ANTONIO = "San Antonio"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def spaces(self) -> int:
        return CITY_SPACES[self]

    @property
    def region(self) -> Region:
        return CITY_REGIONS[self]

    @property
    def order(self) -> int:
        return _CITY_ORDER[self]


_CITY_ORDER: Dict[City, int] = {city: index for index, city in enumerate(City)}

_LARGE = {City.NEW_YORK, City.CHICAGO, City.NEW_ORLEANS, City.SAN_FRANCISCO}
_MEDIUM = {
    City.ALBANY,
    City.BOSTON,
    City.PITTSBURGH,
    City.WASHINGTON,
    City.KANSAS_CITY,
    City.ST_LOUIS,
    City.ATLANTA,
    City.HOUSTON,
    City.DENVER,
    City.LOS_ANGELES,
}

CITY_SPACES: Dict[City, int] = {
    city: 5 if city in _LARGE else 3 if city in _MEDIUM else 1 for city in City
}

_REGION_MEMBERS: Dict[Region, Tuple[City, ...]] = {
    Region.WEST: (
        City.BOISE,
        City.DENVER,
        City.LOS_ANGELES,
        City.PORTLAND,
        City.RENO,
        City.SALT_LAKE_CITY,
        City.SAN_FRANCISCO,
        City.SANTA_FE,
    ),
    Region.MIDWEST: (
        City.CHICAGO,
        City.CINCINNATI,
        City.DULUTH,
        City.FARGO,
        City.KANSAS_CITY,
        City.OMAHA,
        City.ST_LOUIS,
        City.ST_PAUL,
    ),
    Region.EAST: (City.ALBANY, City.BOSTON, City.NEW_YORK, City.PITTSBURGH, City.WASHINGTON),
    Region.SOUTH: (
        City.ATLANTA,
        City.CHARLESTON,
        City.DALLAS,
        City.HOUSTON,
        City.MEMPHIS,
        City.NEW_ORLEANS,
        City.SAN_ANTONIO,
    ),
}

CITY_REGIONS: Dict[City, Region] = {
    city: region for region, members in _REGION_MEMBERS.items() for city in members
}

# Card index -> cities printed on it, in printed order.
CARD_CITIES: Tuple[Tuple[City, ...], ...] = (
    (City.SALT_LAKE_CITY, City.RENO),
    (City.ST_LOUIS, City.CHICAGO),
    (City.BOSTON, City.WASHINGTON),
    (City.NEW_ORLEANS, City.HOUSTON),
    (City.SAN_FRANCISCO, City.LOS_ANGELES),
    (City.CINCINNATI, City.DULUTH, City.ST_LOUIS, City.KANSAS_CITY),
    (City.ALBANY, City.NEW_YORK, City.WASHINGTON, City.PITTSBURGH),
    (City.NEW_ORLEANS, City.ATLANTA),
    (City.BOSTON, City.NEW_YORK),
    (City.CHICAGO, City.OMAHA),
    (City.FARGO, City.ST_PAUL),
    (City.PITTSBURGH, City.NEW_YORK),
    (City.SAN_ANTONIO, City.MEMPHIS, City.DALLAS),
    (City.PORTLAND, City.BOISE, City.DENVER, City.LOS_ANGELES),
    (City.NEW_YORK, City.CHICAGO, City.NEW_ORLEANS, City.SAN_FRANCISCO),
    (City.PITTSBURGH, City.BOSTON, City.ALBANY),
    (City.SAN_FRANCISCO, City.SANTA_FE),
    (City.NEW_ORLEANS, City.ATLANTA, City.HOUSTON, City.CHARLESTON),
    (City.SAN_FRANCISCO, City.DENVER),
    (City.KANSAS_CITY, City.CHICAGO),
)


@dataclass(frozen=True, order=True)
class CardEntry:
    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < CARD_COUNT:
            raise ValueError(f"Card index must be in [0, {CARD_COUNT}), got {self.index}.")

    @property
    def cities(self) -> Tuple[City, ...]:
        return CARD_CITIES[self.index]

    @property
    def donation_cell(self) -> Tuple[int, int]:
        """(row, column) of the donation grid covered by this card."""
        return self.index % DONATION_ROWS, self.index // DONATION_ROWS


def build_card_deck() -> list[CardEntry]:
    return [CardEntry(index) for index in range(CARD_COUNT)]
