
"""Window geometry: board area, side panel, HUD rows and the next/hold preview slots."""
from dataclasses import dataclass
from typing import Tuple
from blockfall_config import CONFIG

PREVIEW_CELLS = 4   # previews are a 4x4 grid, enough for the I piece
HUD_LINE = 24

Rect = Tuple[int, int, int, int]

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview_cell: int
    text_x: int
    score_y: int
    level_y: int
    lines_y: int
    next_pos: Tuple[int, int]
    hold_pos: Tuple[int, int]
    controls_y: int

    @property
    def preview_size(self) -> int:
        return self.preview_cell * PREVIEW_CELLS

    def preview_frame(self, pos: Tuple[int, int], pad: int = 6) -> Rect:
        x, y = pos
        return (x - pad, y - pad, self.preview_size + 2*pad, self.preview_size + 2*pad)

    def cell_origin(self, bx: int, by: int, inset: int = 0) -> Tuple[int, int]:
        return (self.board_x + bx*self.cell + inset, self.board_y + by*self.cell + inset)

def compute_dims(cols: int = None, rows: int = None) -> Dims:
    cols = CONFIG["COLS"] if cols is None else cols
    rows = CONFIG["ROWS"] if rows is None else rows
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 200

    board_w, board_h = cols * cell, rows * cell
    board_x = board_y = margin
    panel_x, panel_y = board_x + board_w + margin, margin

    # panel column: title, three stat rows, then labelled next/hold previews and the legend
    text_x = panel_x + 12
    score_y = panel_y + 44
    preview_cell = max(12, int(cell * 0.75))
    preview = preview_cell * PREVIEW_CELLS
    next_pos = (text_x, score_y + 3*HUD_LINE + 34)
    hold_pos = (text_x, next_pos[1] + preview + 2*HUD_LINE)
    controls_y = hold_pos[1] + preview + HUD_LINE

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=margin + board_w + margin + panel_w + margin,
        total_h=max(margin + board_h + margin, controls_y + 8*20),
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview_cell=preview_cell, text_x=text_x,
        score_y=score_y, level_y=score_y + HUD_LINE, lines_y=score_y + 2*HUD_LINE,
        next_pos=next_pos, hold_pos=hold_pos, controls_y=controls_y,
    )
