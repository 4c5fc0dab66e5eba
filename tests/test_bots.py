import unittest

from game import (
    Coordinates,
    GameY,
    Placement,
    RandomBot,
    YBotRegistry,
    default_registry,
)


class FixedBot:
    name = "fixed"

    def choose_move(self, game):
        return Coordinates(game.board_size - 1, 0, 0)


class TestBots(unittest.TestCase):
    def test_given_seed_when_choosing_then_free_and_deterministic(self):
        game = GameY(5)
        game.add_move(Placement(0, Coordinates(4, 0, 0)))
        a = RandomBot(seed=42).choose_move(game)
        b = RandomBot(seed=42).choose_move(game)
        self.assertEqual(a, b)
        self.assertTrue(a.fits(5))
        self.assertIsNone(game.owner_at(a))

    def test_given_full_board_when_choosing_then_no_move(self):
        game = GameY(1)
        game.add_move(Placement(0, Coordinates(0, 0, 0)))
        self.assertIsNone(RandomBot().choose_move(game))

    def test_given_many_choices_when_choosing_then_never_touches_game(self):
        game = GameY(4)
        bot = RandomBot(seed=3)
        for _ in range(20):
            self.assertIsNotNone(bot.choose_move(game))
        self.assertEqual(len(game.available_cells()), 10)
        self.assertEqual(game.history, [])

    def test_given_registry_when_adding_bots_then_found_by_name(self):
        reg = YBotRegistry().with_bot(FixedBot()).with_bot(RandomBot())
        self.assertEqual(reg.names(), ["fixed", "random_bot"])
        self.assertIsInstance(reg.find("random_bot"), RandomBot)
        self.assertIsNone(reg.find("missing"))
        self.assertEqual(reg.find("fixed").choose_move(GameY(3)), Coordinates(2, 0, 0))
        self.assertEqual(default_registry().names(), ["random_bot"])


if __name__ == '__main__':
    unittest.main()
