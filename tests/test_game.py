import unittest

from game import (
    Action,
    Coordinates,
    Finished,
    GameAction,
    GameOverError,
    GameY,
    OccupiedError,
    Ongoing,
    OutOfBoundsError,
    Placement,
    WrongTurnError,
    other_player,
)

SCENARIO = [
    Placement(0, Coordinates(0, 2, 0)),
    Placement(1, Coordinates(2, 0, 0)),
    Placement(0, Coordinates(0, 1, 1)),
    Placement(1, Coordinates(1, 1, 0)),
    Placement(0, Coordinates(0, 0, 2)),
]


def _snapshot(game):
    return (
        game.status,
        game.history,
        game.available_cells(),
        [game.owner_at_index(i) for i in range(game.total_cells())],
    )


class TestGameY(unittest.TestCase):
    def test_given_players_when_asking_other_then_swapped(self):
        self.assertEqual(other_player(0), 1)
        self.assertEqual(other_player(1), 0)

    def test_given_new_game_when_created_then_ongoing_with_first_player(self):
        game = GameY(7)
        self.assertEqual(game.board_size, 7)
        self.assertEqual(game.total_cells(), 28)
        self.assertEqual(game.history, [])
        self.assertEqual(game.status, Ongoing(next_player=0))
        self.assertEqual(game.next_player(), 0)
        self.assertEqual(game.available_cells(), list(range(28)))
        self.assertFalse(game.check_game_over())
        self.assertIsNone(game.winner())

    def test_given_size_three_scenario_when_playing_then_finished_exactly_after_fifth_move(self):
        game = GameY(3)
        for i, mv in enumerate(SCENARIO[:-1]):
            game.add_move(mv)
            self.assertEqual(game.status, Ongoing(next_player=other_player(mv.player)), f"move {i}")
        game.add_move(SCENARIO[-1])
        self.assertEqual(game.status, Finished(winner=0))
        self.assertTrue(game.check_game_over())
        self.assertIsNone(game.next_player())
        self.assertEqual(game.history, SCENARIO)
        self.assertEqual(game.available_cells(), [1])

    def test_given_size_one_when_first_player_places_then_wins_immediately(self):
        game = GameY(1)
        game.add_move(Placement(0, Coordinates(0, 0, 0)))
        self.assertEqual(game.status, Finished(winner=0))
        self.assertEqual(game.available_cells(), [])

    def test_given_occupied_cell_when_placing_then_error_and_state_unchanged(self):
        game = GameY(3)
        game.add_move(Placement(0, Coordinates(1, 0, 1)))
        before = _snapshot(game)
        with self.assertRaises(OccupiedError) as ctx:
            game.add_move(Placement(1, Coordinates(1, 0, 1)))
        self.assertEqual(ctx.exception.player, 1)
        self.assertEqual(_snapshot(game), before)
        with self.assertRaises(OccupiedError):
            game.add_move(Placement(1, Coordinates(1, 0, 1)))
        self.assertEqual(_snapshot(game), before)

    def test_given_coordinates_off_board_when_placing_then_out_of_bounds(self):
        game = GameY(3)
        before = _snapshot(game)
        with self.assertRaises(OutOfBoundsError):
            game.add_move(Placement(0, Coordinates(3, 0, 0)))
        with self.assertRaises(OutOfBoundsError):
            game.coords_of(6)
        self.assertEqual(_snapshot(game), before)

    def test_given_wrong_player_when_moving_then_wrong_turn_and_state_unchanged(self):
        game = GameY(3)
        before = _snapshot(game)
        with self.assertRaises(WrongTurnError) as ctx:
            game.add_move(Placement(1, Coordinates(2, 0, 0)))
        self.assertEqual((ctx.exception.expected, ctx.exception.found), (0, 1))
        self.assertEqual(_snapshot(game), before)

    def test_given_ongoing_game_when_checking_turn_separately_then_only_next_player_passes(self):
        game = GameY(3)
        game.check_player_turn(Placement(0, Coordinates(2, 0, 0)))
        with self.assertRaises(WrongTurnError):
            game.check_player_turn(Action(1, GameAction.SWAP))

    def test_given_finished_game_when_moving_then_game_over_error(self):
        game = GameY(1)
        game.add_move(Placement(0, Coordinates(0, 0, 0)))
        # Turn checking has nothing to enforce once finished
        game.check_player_turn(Placement(1, Coordinates(0, 0, 0)))
        with self.assertRaises(GameOverError) as ctx:
            game.add_move(Action(1, GameAction.RESIGN))
        self.assertEqual(ctx.exception.winner, 0)
        self.assertEqual(len(game.history), 1)

    def test_given_resign_when_applied_then_other_player_wins(self):
        game = GameY(4)
        game.add_move(Action(0, GameAction.RESIGN))
        self.assertEqual(game.status, Finished(winner=1))
        self.assertEqual(game.history, [Action(0, GameAction.RESIGN)])

    def test_given_swap_when_applied_then_turn_passes_without_board_change(self):
        game = GameY(4)
        game.add_move(Placement(0, Coordinates(1, 1, 1)))
        game.add_move(Action(1, GameAction.SWAP))
        self.assertEqual(game.status, Ongoing(next_player=0))
        self.assertEqual(len(game.available_cells()), 9)
        self.assertEqual(game.owner_at(Coordinates(1, 1, 1)), 0)

    def test_given_many_moves_when_checking_free_cells_then_exactly_unowned_cells(self):
        game = GameY(6)
        player = 0
        for idx in [0, 20, 7, 13, 4, 18, 9, 11]:
            game.add_move(Placement(player, game.coords_of(idx)))
            player = other_player(player)
            free = [i for i in range(game.total_cells()) if game.owner_at_index(i) is None]
            self.assertEqual(game.available_cells(), free)

    def test_given_history_when_returned_then_caller_cannot_mutate_game(self):
        game = GameY(3)
        game.add_move(SCENARIO[0])
        hist = game.history
        hist.clear()
        self.assertEqual(len(game.history), 1)

    def test_given_invalid_size_when_creating_then_value_error(self):
        with self.assertRaises(ValueError):
            GameY(0)


if __name__ == '__main__':
    unittest.main()
