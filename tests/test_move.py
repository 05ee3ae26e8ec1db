from unittest import TestCase, main

import numpy as np

from game2048.core import Direction, from_canonical, legal_directions, move, reverse_rows, to_canonical, transpose


def _board(*rows):
    """Pad the given rows with empty rows up to a 4x4 board."""
    rows = list(rows) + [[0, 0, 0, 0]] * (4 - len(rows))
    return np.array(rows, dtype=np.int64)


class TestOrientation(TestCase):
    def test_helpers_return_new_arrays(self):
        """
        Test if transpose and reverse_rows never alias their input.
        """
        board = _board([2, 4, 0, 0])
        transposed = transpose(board)
        reversed_rows = reverse_rows(board)
        transposed[0, 0] = 1024
        reversed_rows[0, 0] = 1024
        self.assertEqual(board[0, 0], 2)
        self.assertEqual(board[0, 3], 0)

    def test_round_trip(self):
        """
        Test if restoring a canonical board gives the original board back, for every direction.
        """
        generator = np.random.default_rng(7)
        for _ in range(20):
            board = generator.choice([0, 2, 4, 8, 16], size=(4, 4))
            for direction in Direction:
                restored = from_canonical(to_canonical(board, direction), direction)
                np.testing.assert_array_equal(restored, board)

    def test_unknown_direction(self):
        """
        Test if an unknown direction is rejected.
        """
        with self.assertRaises(ValueError):
            move(_board([2, 2, 0, 0]), "sideways")


class TestMove(TestCase):
    def test_left(self):
        """
        Test if [2, 0, 2, 4] moved left gives [4, 4, 0, 0] with 4 points.
        """
        board, score = move(_board([2, 0, 2, 4]), Direction.LEFT)
        np.testing.assert_array_equal(board, _board([4, 4, 0, 0]))
        self.assertEqual(score, 4)

    def test_left_four_equal(self):
        """
        Test if [2, 2, 2, 2] moved left gives [4, 4, 0, 0] with 8 points.
        """
        board, score = move(_board([2, 2, 2, 2]), "left")
        np.testing.assert_array_equal(board, _board([4, 4, 0, 0]))
        self.assertEqual(score, 8)

    def test_right(self):
        """
        Test if the pair closest to the right edge merges first.
        """
        board, score = move(_board([2, 2, 2, 0]), Direction.RIGHT)
        np.testing.assert_array_equal(board, _board([0, 0, 2, 4]))
        self.assertEqual(score, 4)

    def test_up(self):
        """
        Test if columns collapse towards the top.
        """
        board = np.array([[0, 2, 0, 0], [2, 0, 0, 0], [2, 2, 0, 0], [4, 0, 0, 8]])
        expected = np.array([[4, 4, 0, 8], [4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        updated, score = move(board, Direction.UP)
        np.testing.assert_array_equal(updated, expected)
        self.assertEqual(score, 8)

    def test_down(self):
        """
        Test if columns collapse towards the bottom, the lowest pair merging first.
        """
        board = np.array([[2, 0, 0, 0], [2, 4, 0, 0], [2, 4, 0, 0], [0, 8, 0, 0]])
        expected = np.array([[0, 0, 0, 0], [0, 0, 0, 0], [2, 8, 0, 0], [4, 8, 0, 0]])
        updated, score = move(board, Direction.DOWN)
        np.testing.assert_array_equal(updated, expected)
        self.assertEqual(score, 12)

    def test_no_op(self):
        """
        Test if a packed row without pairs is left unchanged.
        """
        board = _board([2, 4, 8, 16])
        updated, score = move(board, Direction.LEFT)
        np.testing.assert_array_equal(updated, board)
        self.assertEqual(score, 0)

    def test_input_not_modified(self):
        """
        Test if the move leaves its input untouched.
        """
        board = _board([2, 2, 0, 0], [0, 4, 0, 4])
        original = board.copy()
        for direction in Direction:
            move(board, direction)
        np.testing.assert_array_equal(board, original)

    def test_score_matches_merges(self):
        """
        Test if the score is non-negative, keeps the tile total, and is zero exactly when no merge happened.
        """
        generator = np.random.default_rng(3)
        for _ in range(50):
            board = generator.choice([0, 2, 4, 8], size=(4, 4))
            for direction in Direction:
                updated, score = move(board, direction)
                self.assertGreaterEqual(score, 0)
                self.assertEqual(updated.sum(), board.sum())
                merges = np.count_nonzero(board) - np.count_nonzero(updated)
                self.assertEqual(score == 0, merges == 0)

    def test_malformed_board(self):
        """
        Test if a malformed board is rejected.
        """
        with self.assertRaises(ValueError):
            move(np.zeros((4, 3), dtype=np.int64), Direction.LEFT)


class TestLegalDirections(TestCase):
    def test_legal_directions(self):
        """
        Test if directions which don't change the board are excluded.
        """
        board = _board([2, 0, 0, 0], [2, 0, 0, 0])
        self.assertEqual(legal_directions(board), [Direction.UP, Direction.DOWN, Direction.RIGHT])

    def test_legal_directions_nested_list(self):
        """
        Test if a board given as nested lists is accepted.
        """
        board = [[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
        self.assertEqual(legal_directions(board), [Direction.DOWN, Direction.LEFT])

    def test_legal_directions_match_move(self):
        """
        Test if a direction is legal exactly when its move changes the board.
        """
        generator = np.random.default_rng(11)
        for _ in range(50):
            board = generator.choice([0, 2, 4, 8, 16], size=(4, 4))
            legal = legal_directions(board)
            for direction in Direction:
                updated, _ = move(board, direction)
                self.assertEqual(direction in legal, not np.array_equal(updated, board))


if __name__ == '__main__':
    main()
