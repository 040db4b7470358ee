import random
import unittest

from game import (
    Colour,
    GameState,
    InvalidLayout,
    InvalidStack,
    ZeroPieces,
    colour,
)


def positions(state):
    return [(p.num, p.state.stack, p.state.height) for p in state.pieces_iter()]


def assert_stacks_well_formed(tc, state):
    for s in range(state.num_stacks()):
        on_stack = [p for p in state.pieces_iter() if p.state.stack == s]
        heights = sorted(p.state.height for p in on_stack)
        tc.assertEqual(heights, list(range(len(on_stack))), f"stack {s} heights not dense")
        by_height = sorted(on_stack, key=lambda p: p.state.height)
        nums = [p.num for p in by_height]
        tc.assertEqual(nums, sorted(nums), f"stack {s} has a larger piece above a smaller one")


class TestConstruction(unittest.TestCase):
    def test_given_start_beyond_stacks_when_constructing_then_invalid_stack(self):
        for s in range(3, 6):
            with self.assertRaises(InvalidStack):
                GameState(s, 3, 4)
        with self.assertRaises(InvalidStack):
            GameState(-1, 3, 4)

    def test_given_zero_pieces_when_constructing_then_zero_pieces(self):
        with self.assertRaises(ZeroPieces):
            GameState(0, 3, 0)

    def test_given_invalid_start_and_zero_pieces_when_constructing_then_stack_checked_first(self):
        with self.assertRaises(InvalidStack):
            GameState(3, 3, 0)

    def test_given_valid_args_when_constructing_then_all_pieces_on_start_in_order(self):
        state = GameState(1, 4, 5)
        self.assertEqual(state.num_pieces(), 5)
        self.assertEqual(state.num_stacks(), 4)
        self.assertEqual(state.start_stack, 1)
        self.assertEqual(positions(state), [(i, 1, i) for i in range(5)])
        self.assertFalse(state.complete())

    def test_given_errors_when_raised_then_they_are_value_errors(self):
        with self.assertRaises(ValueError):
            GameState(0, 0, 1)


class TestInspection(unittest.TestCase):
    def test_given_fresh_state_when_querying_tops_then_smallest_piece_or_none(self):
        state = GameState(0, 3, 4)
        top = state.stack_top(0)
        self.assertIsNotNone(top)
        self.assertEqual(top.num, 3)
        self.assertEqual(top.state.height, 3)
        self.assertIsNone(state.stack_top(1))
        self.assertIsNone(state.stack_top(7))

    def test_given_stack_indices_when_validating_then_range_respected(self):
        state = GameState(0, 3, 1)
        self.assertTrue(state.valid_stack(0))
        self.assertTrue(state.valid_stack(2))
        self.assertFalse(state.valid_stack(3))
        self.assertFalse(state.valid_stack(-1))

    def test_given_piece_numbers_when_getting_piece_then_snapshot_or_index_error(self):
        state = GameState(0, 3, 2)
        p = state.get_piece(1)
        self.assertEqual((p.num, p.state.stack, p.state.height), (1, 0, 1))
        with self.assertRaises(IndexError):
            state.get_piece(2)
        # Mutating a snapshot leaves the game untouched
        p.state.stack = 2
        p.num = 0
        self.assertEqual(state.get_piece(1).state.stack, 0)
        self.assertEqual(state.stack_top(0).num, 1)

    def test_given_same_piece_when_snapshotting_twice_then_equal_but_independent(self):
        state = GameState(0, 3, 2)
        a = state.get_piece(1)
        b = state.get_piece(1)
        self.assertEqual(a, b)
        self.assertIsNot(a.state, b.state)
        state.try_move(0, 1)
        # snapshots are not live views
        self.assertEqual((a.state.stack, a.state.height), (0, 1))
        self.assertNotEqual(state.get_piece(1), a)

    def test_given_pieces_when_iterating_then_ascending_and_restartable(self):
        state = GameState(0, 3, 3)
        self.assertEqual([p.num for p in state.pieces_iter()], [0, 1, 2])
        self.assertEqual([p.num for p in state.pieces_iter()], [0, 1, 2])
        self.assertEqual([p.num for p in state], [0, 1, 2])

    def test_given_piece_numbers_when_deriving_colour_then_alternates(self):
        state = GameState(0, 3, 4)
        self.assertEqual([p.colour() for p in state], [Colour.BLACK, Colour.WHITE, Colour.BLACK, Colour.WHITE])
        self.assertEqual(colour(10), Colour.BLACK)
        self.assertEqual(colour(7), Colour.WHITE)

    def test_given_stack_when_listing_pieces_then_bottom_to_top(self):
        state = GameState(0, 3, 3)
        self.assertEqual([p.num for p in state.stack_pieces(0)], [0, 1, 2])
        self.assertEqual(state.stack_pieces(1), [])


class TestMoves(unittest.TestCase):
    def test_given_out_of_range_stack_when_moving_then_invalid_stack(self):
        state = GameState(0, 3, 2)
        with self.assertRaises(InvalidStack):
            state.try_move(state.num_stacks(), 0)
        with self.assertRaises(InvalidStack):
            state.try_move(0, 3)
        self.assertEqual(positions(state), [(0, 0, 0), (1, 0, 1)])

    def test_given_empty_source_when_moving_then_invalid_stack(self):
        state = GameState(0, 3, 2)
        with self.assertRaises(InvalidStack):
            state.try_move(1, 0)
        with self.assertRaises(InvalidStack):
            state.try_move(1, 1)

    def test_given_same_stack_when_moving_then_true_and_unchanged(self):
        state = GameState(0, 3, 3)
        state.try_move(0, 1)
        before = positions(state)
        self.assertTrue(state.try_move(0, 0))
        self.assertTrue(state.try_move(1, 1))
        self.assertEqual(positions(state), before)

    def test_given_larger_piece_over_smaller_when_moving_then_false_and_unchanged(self):
        state = GameState(0, 3, 3)
        self.assertTrue(state.try_move(0, 1))  # piece 2 -> stack 1
        before = positions(state)
        self.assertFalse(state.try_move(0, 1))  # piece 1 onto piece 2
        self.assertEqual(positions(state), before)

    def test_given_smaller_piece_over_larger_when_moving_then_stacked_at_next_height(self):
        state = GameState(0, 3, 3)
        state.try_move(0, 2)  # piece 2
        state.try_move(0, 1)  # piece 1
        self.assertTrue(state.try_move(2, 1))  # piece 2 onto piece 1
        p2 = state.get_piece(2)
        self.assertEqual((p2.state.stack, p2.state.height), (1, 1))

    def test_given_random_play_when_moving_then_stacks_stay_well_formed(self):
        rng = random.Random(1234)
        for n_stacks, n_pieces in [(3, 4), (4, 6), (5, 3)]:
            state = GameState(0, n_stacks, n_pieces)
            for _ in range(300):
                f = rng.randrange(n_stacks)
                t = rng.randrange(n_stacks)
                if state.stack_top(f) is None:
                    with self.assertRaises(InvalidStack):
                        state.try_move(f, t)
                    continue
                before = positions(state)
                dest = state.stack_top(t)
                moved = state.try_move(f, t)
                if not moved:
                    self.assertIsNotNone(dest)
                    self.assertEqual(positions(state), before)
                elif f != t and dest is not None:
                    self.assertGreater(state.stack_top(t).num, dest.num)
                assert_stacks_well_formed(self, state)


class TestCompletion(unittest.TestCase):
    def test_given_classic_three_piece_solution_when_played_then_complete_only_at_end(self):
        state = GameState(0, 3, 3)
        moves = [(0, 2), (0, 1), (2, 1), (0, 2), (1, 0), (1, 2), (0, 2)]
        for f, t in moves:
            self.assertFalse(state.complete())
            self.assertTrue(state.try_move(f, t))
        self.assertTrue(state.complete())
        self.assertEqual(positions(state), [(0, 2, 0), (1, 2, 1), (2, 2, 2)])

    def test_given_all_pieces_on_start_when_checking_then_not_complete(self):
        state = GameState(1, 3, 1)
        self.assertFalse(state.complete())
        state.try_move(1, 0)
        self.assertTrue(state.complete())
        state.try_move(0, 1)
        self.assertFalse(state.complete())


class TestRestore(unittest.TestCase):
    def test_given_reachable_layout_when_restoring_then_positions_match(self):
        state = GameState.restore(0, 3, [(2, 0), (1, 0), (2, 1)])
        self.assertEqual(positions(state), [(0, 2, 0), (1, 1, 0), (2, 2, 1)])
        self.assertEqual(state.stack_top(2).num, 2)

    def test_given_gap_in_heights_when_restoring_then_invalid_layout(self):
        with self.assertRaises(InvalidLayout):
            GameState.restore(0, 3, [(0, 0), (0, 2)])

    def test_given_larger_on_smaller_when_restoring_then_invalid_layout(self):
        with self.assertRaises(InvalidLayout):
            GameState.restore(0, 3, [(0, 1), (0, 0)])

    def test_given_unknown_stack_when_restoring_then_invalid_layout(self):
        with self.assertRaises(InvalidLayout):
            GameState.restore(0, 3, [(5, 0)])

    def test_given_no_placements_when_restoring_then_zero_pieces(self):
        with self.assertRaises(ZeroPieces):
            GameState.restore(0, 3, [])


if __name__ == "__main__":
    unittest.main()
