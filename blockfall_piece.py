
"""Piece model, shapes, rotation with horizontal kicks"""
from dataclasses import dataclass
from typing import List, Optional
from blockfall_config import CONFIG

COLS, ROWS = CONFIG["COLS"], CONFIG["ROWS"]

Matrix = List[List[int]]

SHAPES = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
}

def rotate_cw(m: Matrix) -> Matrix: return [list(r)[::-1] for r in zip(*m)]
def rotate_ccw(m: Matrix) -> Matrix: return [list(r) for r in zip(*m)][::-1]

def rotate(m: Matrix, direction: int) -> Matrix:
    """Transpose, then mirror the rows (cw) or flip their order (ccw)."""
    if direction > 0: return rotate_cw(m)
    if direction < 0: return rotate_ccw(m)
    raise ValueError("rotation direction must be non-zero")

@dataclass
class Piece:
    t: str
    shape: Matrix
    x: int
    y: int

    @staticmethod
    def spawn(t: str, cols: int = COLS) -> "Piece":
        s = [r[:] for r in SHAPES[t]]
        return Piece(t, s, spawn_x(s, cols), -1)

    def copy(self) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.x, self.y)

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.x + dx, self.y + dy)

    @property
    def width(self) -> int:
        return len(self.shape[0])

def spawn_x(shape: Matrix, cols: int = COLS) -> int:
    return (cols - len(shape[0])) // 2

def kick_offsets(width: int):
    # cumulative shifts x+1, x-1, x+2, x-2, ... while the step stays below the width
    x, step = 0, 1
    while abs(step) < width:
        x += step
        yield x
        step = -(step + (1 if step > 0 else -1))

# rotation

def try_rotate(board, piece: Piece, direction: int) -> Optional[Piece]:
    from blockfall_board import collide
    test = Piece(piece.t, rotate(piece.shape, direction), piece.x, piece.y)
    if not collide(board, test): return test
    for dx in kick_offsets(test.width):
        test.x = piece.x + dx
        if not collide(board, test): return test
    return None
