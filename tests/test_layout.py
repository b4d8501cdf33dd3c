import unittest

from blockfall_layout import PREVIEW_CELLS, compute_dims


class LayoutTests(unittest.TestCase):
    def test_board_and_panel(self):
        d = compute_dims(10, 20)
        self.assertEqual((d.board_w, d.board_h), (300, 600))
        self.assertEqual(d.panel_x, d.board_x + d.board_w + d.margin)
        self.assertEqual(d.total_w, d.panel_x + d.panel_w + d.margin)

    def test_previews_stack_without_overlap(self):
        d = compute_dims(10, 20)
        self.assertEqual(d.preview_size, d.preview_cell * PREVIEW_CELLS)
        nx, ny, nw, nh = d.preview_frame(d.next_pos)
        hx, hy, hw, hh = d.preview_frame(d.hold_pos)
        self.assertLess(ny + nh, hy)
        self.assertLess(hy + hh, d.controls_y)
        self.assertGreater(ny, d.lines_y)

    def test_panel_fits_short_boards(self):
        d = compute_dims(6, 8)
        self.assertGreaterEqual(d.total_h, d.controls_y)

    def test_cell_origin(self):
        d = compute_dims(10, 20)
        self.assertEqual(d.cell_origin(0, 0), (d.board_x, d.board_y))
        self.assertEqual(d.cell_origin(2, 3, 1), (d.board_x + 2*d.cell + 1, d.board_y + 3*d.cell + 1))
