import unittest

from carnegie_randomizer.engine.types import Players, RowAssignment
from carnegie_randomizer.engine.visibility import VISIBILITY_THRESHOLDS, RowCell, row_cells, visible


class VisibilityMaskTests(unittest.TestCase):
    def test_predicate_matches_literal_thresholds(self) -> None:
        thresholds = {Players.TWO: 1, Players.THREE: 3, Players.FOUR: 7, Players.ALL: 32}
        self.assertEqual(VISIBILITY_THRESHOLDS, thresholds)
        for players, threshold in thresholds.items():
            for index in range(32):
                self.assertEqual(visible(index, players), (index & threshold) != threshold)

    def test_index_seven(self) -> None:
        self.assertFalse(visible(7, Players.THREE))
        self.assertFalse(visible(7, Players.FOUR))
        self.assertTrue(visible(7, Players.ALL))
        self.assertFalse(visible(7, Players.TWO))

    def test_hidden_share_per_tier(self) -> None:
        hidden = {players: sum(1 for index in range(32) if not visible(index, players)) for players in Players}
        self.assertEqual(hidden, {Players.ALL: 0, Players.FOUR: 4, Players.THREE: 8, Players.TWO: 16})

    def test_accepts_raw_player_labels(self) -> None:
        self.assertTrue(visible(6, "4"))
        self.assertFalse(visible(1, "2"))


class RowCellTests(unittest.TestCase):
    def test_cells_count_visible_copies_in_value_order(self) -> None:
        assignment = RowAssignment()
        assignment.rows[0] = {4: [6, 7], 1: [0, 1]}
        assignment.rows[2] = {11: [15]}

        cells = row_cells(assignment, Players.FOUR)

        self.assertEqual(cells[0], [RowCell(1, False, 2), RowCell(4, True, 1)])
        self.assertEqual(cells[1], [])
        self.assertEqual(cells[2], [RowCell(11, False, 0)])
        self.assertEqual(cells[0][0].stack, "full")
        self.assertEqual(cells[0][1].stack, "half")
        self.assertEqual(cells[2][0].stack, "none")

    def test_all_players_shows_every_copy(self) -> None:
        assignment = RowAssignment()
        assignment.rows[3] = {13: [3, 7], 16: [15, 31]}
        cells = row_cells(assignment, Players.ALL)
        self.assertEqual([cell.visible_copies for cell in cells[3]], [2, 2])


if __name__ == "__main__":
    unittest.main()
