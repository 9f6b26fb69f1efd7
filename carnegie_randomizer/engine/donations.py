from __future__ import annotations

import logging
from typing import Dict, Iterable

from carnegie_randomizer.domain.cities import CardEntry, City

from .types import DonationResult, Players

logger = logging.getLogger(__name__)

# Disks placed on donations and cities before a short-handed game starts.
DONATION_BUDGETS: Dict[Players, int] = {
    Players.ALL: 0,
    Players.FOUR: 0,
    Players.THREE: 9,
    Players.TWO: 18,
}


def donation_budget(players: Players) -> int:
    return DONATION_BUDGETS[Players(players)]


def restrict_donations(cards: Iterable[CardEntry], budget: int) -> DonationResult:
    """Spend ``budget`` disks on donation cells and city spaces, card by card."""
    result = DonationResult()
    if budget <= 0:
        return result

    consumed: Dict[City, int] = {}
    remaining = budget
    for card in cards:
        row, col = card.donation_cell
        if not result.grid[row][col]:
            result.grid[row][col] = True
            remaining -= 1
            if remaining == 0:
                break
        for city in card.cities:
            used = consumed.get(city, 0)
            if used >= city.spaces:
                continue
            consumed[city] = used + 1
            remaining -= 1
            if remaining == 0:
                break
        if remaining == 0:
            break

    if remaining > 0:
        logger.debug("Card deck exhausted with %d of %d disks unspent", remaining, budget)
    result.cities = {city: consumed[city] for city in sorted(consumed, key=lambda item: item.order)}
    return result
