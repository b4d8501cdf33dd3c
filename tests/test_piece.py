import unittest

from blockfall_board import new_board
from blockfall_piece import SHAPES, Piece, rotate, try_rotate, kick_offsets


class RotateTests(unittest.TestCase):
    def test_four_turns_is_identity(self):
        for kind, shape in SHAPES.items():
            for direction in (1, -1):
                m = shape
                for _ in range(4):
                    m = rotate(m, direction)
                self.assertEqual(m, shape, kind)

    def test_clockwise(self):
        self.assertEqual(rotate(SHAPES["T"], 1), [[0, 1, 0], [0, 1, 1], [0, 1, 0]])
        self.assertEqual(rotate(SHAPES["I"], 1), [[0, 0, 1, 0]] * 4)

    def test_counter_clockwise(self):
        self.assertEqual(rotate(SHAPES["T"], -1), [[0, 1, 0], [1, 1, 0], [0, 1, 0]])
        self.assertEqual(rotate(SHAPES["L"], -1), [[1, 1, 0], [0, 1, 0], [0, 1, 0]])

    def test_opposite_turns_cancel(self):
        for shape in SHAPES.values():
            self.assertEqual(rotate(rotate(shape, 1), -1), shape)

    def test_does_not_touch_input(self):
        rotate(SHAPES["S"], 1)
        self.assertEqual(SHAPES["S"], [[0, 1, 1], [1, 1, 0], [0, 0, 0]])

    def test_zero_direction(self):
        with self.assertRaises(ValueError):
            rotate(SHAPES["T"], 0)


class SpawnTests(unittest.TestCase):
    def test_centered_above_top(self):
        self.assertEqual((Piece.spawn("I").x, Piece.spawn("I").y), (3, -1))
        self.assertEqual(Piece.spawn("O").x, 4)
        self.assertEqual(Piece.spawn("T").x, 3)

    def test_spawn_copies_shape(self):
        p = Piece.spawn("J")
        p.shape[0][0] = 0
        self.assertEqual(SHAPES["J"][0][0], 1)

    def test_unknown_kind(self):
        with self.assertRaises(KeyError):
            Piece.spawn("X")


class KickTests(unittest.TestCase):
    def test_offsets(self):
        self.assertEqual(list(kick_offsets(2)), [1])
        self.assertEqual(list(kick_offsets(3)), [1, -1])
        self.assertEqual(list(kick_offsets(4)), [1, -1, 2])

    def test_free_rotation_keeps_x(self):
        board = new_board(10, 20)
        t = try_rotate(board, Piece("T", [r[:] for r in SHAPES["T"]], 4, 5), 1)
        self.assertEqual((t.x, t.y), (4, 5))

    def test_kick_off_right_wall(self):
        board = new_board(10, 20)
        vertical = Piece("I", [[0, 0, 1, 0] for _ in range(4)], 7, 5)
        t = try_rotate(board, vertical, 1)
        self.assertIsNotNone(t)
        self.assertEqual(t.x, 6)
        self.assertEqual(t.shape[2], [1, 1, 1, 1])
        self.assertEqual(vertical.x, 7)

    def test_kick_off_left_wall(self):
        board = new_board(10, 20)
        # T pointing right with its stem column on the wall
        right = Piece("T", [[0, 1, 0], [0, 1, 1], [0, 1, 0]], -1, 5)
        t = try_rotate(board, right, 1)
        self.assertEqual(t.x, 0)

    def test_rejected_without_vertical_room(self):
        board = new_board(3, 3)
        flat = Piece("T", [r[:] for r in SHAPES["T"]], 0, 1)
        self.assertIsNone(try_rotate(board, flat, 1))
        self.assertEqual(flat.shape, SHAPES["T"])
