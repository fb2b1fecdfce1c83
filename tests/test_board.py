import unittest

from catan_mapgen.domain.board import Board, BoardShape, RuleConfig, Terrain


class BoardModelTests(unittest.TestCase):
    def test_board_rejects_wrong_lengths(self) -> None:
        with self.assertRaises(ValueError):
            Board.from_sequences(BoardShape.CLASSIC, [Terrain.WOOD] * 18, [3] * 19)
        with self.assertRaises(ValueError):
            Board.from_sequences(BoardShape.EXPANSION, [Terrain.WOOD] * 30, [3] * 19)

    def test_board_is_immutable(self) -> None:
        board = Board.from_sequences(BoardShape.CLASSIC, [Terrain.WOOD] * 18 + [Terrain.DESERT], [3] * 18 + [None])
        self.assertIsInstance(board.terrains, tuple)
        with self.assertRaises(AttributeError):
            board.numbers = ()  # type: ignore[misc]

    def test_board_helpers_and_dict(self) -> None:
        terrains = [Terrain.DESERT] + [Terrain.ORE] * 28 + [Terrain.DESERT]
        numbers = [None] + [6] + [5] * 27 + [None]
        board = Board.from_sequences(BoardShape.EXPANSION, terrains, numbers)

        self.assertEqual(board.desert_indices, (0, 29))
        self.assertEqual(board.tiles_with_number(6), (1,))
        payload = board.to_dict()
        self.assertEqual(payload["shape"], "expansion")
        self.assertEqual(payload["terrains"][0], "desert")
        self.assertIsNone(payload["numbers"][29])

    def test_board_rejects_unknown_chits(self) -> None:
        terrains = [Terrain.WOOD] * 18 + [Terrain.DESERT]
        with self.assertRaises(ValueError):
            Board.from_sequences(BoardShape.CLASSIC, terrains, [7] + [3] * 17 + [None])
        with self.assertRaises(ValueError):
            Board.from_sequences(BoardShape.CLASSIC, terrains, [13] + [3] * 17 + [None])

    def test_shape_tile_counts(self) -> None:
        self.assertEqual(BoardShape.CLASSIC.tile_count, 19)
        self.assertEqual(BoardShape.EXPANSION.tile_count, 30)


class RuleConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        rules = RuleConfig()
        self.assertFalse(rules.hot_numbers_can_touch)
        self.assertTrue(rules.extreme_pair_can_touch)
        self.assertTrue(rules.same_number_can_touch)
        self.assertTrue(rules.same_resource_can_touch)

    def test_round_trip_through_dict(self) -> None:
        rules = RuleConfig(hot_numbers_can_touch=True, same_resource_can_touch=False)
        self.assertEqual(RuleConfig.from_dict(rules.to_dict()), rules)

    def test_from_dict_accepts_legacy_toggle_names(self) -> None:
        rules = RuleConfig.from_dict(
            {
                "sixEightCanTouch": True,
                "twoTwelveCanTouch": False,
                "sameNumbersCanTouch": False,
                "sameResourceCanTouch": False,
                "imageStyle": "king-dice",
            }
        )
        self.assertEqual(
            rules,
            RuleConfig(
                hot_numbers_can_touch=True,
                extreme_pair_can_touch=False,
                same_number_can_touch=False,
                same_resource_can_touch=False,
            ),
        )


    def test_from_dict_rejects_non_boolean_values(self) -> None:
        with self.assertRaises(ValueError):
            RuleConfig.from_dict({"sixEightCanTouch": "false"})
        with self.assertRaises(ValueError):
            RuleConfig.from_dict({"same_resource_can_touch": 0})
        self.assertEqual(RuleConfig.from_dict({"imageStyle": "king-dice"}), RuleConfig())


if __name__ == "__main__":
    unittest.main()
