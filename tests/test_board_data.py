import unittest
from collections import Counter

from carnegie_randomizer.domain.buildings import (
    BuildingToken,
    TileSet,
    accent_values,
    build_token_set,
    canonical_form,
)
from carnegie_randomizer.domain.cities import CARD_CITIES, CardEntry, City, Region, build_card_deck


class BuildingTokenTests(unittest.TestCase):
    def test_rows_follow_value_blocks(self) -> None:
        expected = {1: 0, 4: 0, 5: 1, 8: 1, 9: 2, 13: 3, 16: 3, 17: 0, 20: 0, 21: 1, 29: 3, 32: 3}
        for value, row in expected.items():
            self.assertEqual(BuildingToken(value).row, row, msg=f"value {value}")

    def test_accent_values(self) -> None:
        self.assertEqual(accent_values(), [4, 8, 12, 16, 19, 23, 27, 31])

    def test_each_row_has_one_base_and_one_expansion_accent(self) -> None:
        for row in range(4):
            accents = [value for value in accent_values() if BuildingToken(value).row == row]
            self.assertEqual(len(accents), 2)
            self.assertEqual(sum(1 for value in accents if value <= 16), 1)

    def test_tile_set_membership(self) -> None:
        base, expansion = BuildingToken(16), BuildingToken(17)
        self.assertTrue(base.in_tile_set(TileSet.BASE))
        self.assertFalse(base.in_tile_set(TileSet.EXPANSION))
        self.assertTrue(expansion.in_tile_set(TileSet.EXPANSION))
        self.assertFalse(expansion.in_tile_set(TileSet.BASE))
        self.assertTrue(base.in_tile_set(TileSet.BOTH))
        self.assertTrue(expansion.in_tile_set(TileSet.BOTH))

    def test_out_of_range_value_is_rejected(self) -> None:
        for value in (0, 33):
            with self.assertRaises(ValueError):
                BuildingToken(value)

    def test_token_set_has_two_copies_per_value(self) -> None:
        tokens = build_token_set()
        self.assertEqual(len(tokens), 64)
        self.assertEqual(set(Counter(token.value for token in tokens).values()), {2})
        self.assertEqual(tokens, sorted(tokens))

    def test_canonical_form_sorts_first_thirty_two(self) -> None:
        shuffled = list(reversed(build_token_set()))
        expected = ",".join(f"{value:02d},{value:02d}" for value in range(17, 33))
        self.assertEqual(canonical_form(shuffled), expected)

    def test_canonical_form_zero_pads(self) -> None:
        self.assertEqual(canonical_form([BuildingToken(9), BuildingToken(3), BuildingToken(12)]), "03,09,12")


class CityTableTests(unittest.TestCase):
    def test_twenty_eight_cities(self) -> None:
        self.assertEqual(len(City), 28)

    def test_space_distribution(self) -> None:
        spaces = Counter(city.spaces for city in City)
        self.assertEqual(spaces, Counter({5: 4, 3: 10, 1: 14}))
        self.assertEqual(City.NEW_YORK.spaces, 5)
        self.assertEqual(City.DENVER.spaces, 3)
        self.assertEqual(City.BOISE.spaces, 1)

    def test_region_sizes(self) -> None:
        regions = Counter(city.region for city in City)
        self.assertEqual(
            regions,
            Counter({Region.WEST: 8, Region.MIDWEST: 8, Region.EAST: 5, Region.SOUTH: 7}),
        )
        self.assertIs(City.SAN_ANTONIO.region, Region.SOUTH)

    def test_declaration_order(self) -> None:
        self.assertEqual(City.BOISE.order, 0)
        self.assertEqual(City.SAN_ANTONIO.order, 27)
        self.assertLess(City.SANTA_FE.order, City.CHICAGO.order)

    def test_card_table_shape(self) -> None:
        self.assertEqual(len(CARD_CITIES), 20)
        for cities in CARD_CITIES:
            self.assertGreaterEqual(len(cities), 2)
            self.assertLessEqual(len(cities), 4)
        self.assertEqual(
            CardEntry(13).cities,
            (City.PORTLAND, City.BOISE, City.DENVER, City.LOS_ANGELES),
        )

    def test_donation_cells_cover_the_grid_once(self) -> None:
        cells = [card.donation_cell for card in build_card_deck()]
        self.assertEqual(len(set(cells)), 20)
        self.assertEqual(CardEntry(7).donation_cell, (2, 1))
        self.assertEqual(CardEntry(19).donation_cell, (4, 3))

    def test_card_index_is_validated(self) -> None:
        with self.assertRaises(ValueError):
            CardEntry(20)


if __name__ == "__main__":
    unittest.main()
