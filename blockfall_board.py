
"""Board helpers: collide, merge, clear_lines, ghost"""
from typing import Optional, List
from blockfall_piece import Piece, COLS, ROWS

Board = List[List[Optional[str]]]

def new_board(cols: int = COLS, rows: int = ROWS) -> Board:
    return [[None] * cols for _ in range(rows)]

def collide(board: Board, piece: Piece) -> bool:
    rows, cols = len(board), len(board[0])
    for y,row in enumerate(piece.shape):
        for x,v in enumerate(row):
            if not v: continue
            bx,by = piece.x+x, piece.y+y
            if bx<0 or bx>=cols or by>=rows: return True
            if by>=0 and board[by][bx]: return True
    return False

def merge(board:Board, piece:Piece):
    for y,r in enumerate(piece.shape):
        for x,v in enumerate(r):
            if v:
                by = piece.y+y
                if by>=0: board[by][piece.x+x]=piece.t

def clear_lines(board:Board)->int:
    """Drop full rows in place and refill from the top; returns the count."""
    cols = len(board[0])
    kept = [row for row in board if not all(row)]
    c = len(board) - len(kept)
    if c:
        board[:] = [[None]*cols for _ in range(c)] + kept
    return c

def ghost_y(board:Board,piece:Piece)->int:
    t=piece.copy()
    while not collide(board,t): t.y+=1
    return t.y-1
