
"""Game state machine: spawn, fall, lock, clear, hold, game over.

A single ``GameState`` owns the board, the bag, the active/next/held pieces
and the score counters. Input is funnelled through ``dispatch`` (immediate) or
``queue`` (applied on the next ``advance``), and ``advance`` is the only
per-frame mutator. Presentation reads ``snapshot()`` and never touches the
state directly.
"""
from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional, Tuple

from blockfall_bag import PieceBag
from blockfall_board import Board, new_board, collide, merge, clear_lines, ghost_y
from blockfall_piece import Piece, SHAPES, COLS, ROWS, try_rotate, spawn_x
from blockfall_scoring import Stats

log = logging.getLogger(__name__)


class GameStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Action(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    HARD_DROP = "hard_drop"
    HOLD = "hold"
    START = "start"


Shape = Tuple[Tuple[int, ...], ...]


def _frozen(m) -> Shape:
    return tuple(tuple(r) for r in m)


@dataclass(frozen=True)
class PieceView:
    t: str
    shape: Shape
    x: int
    y: int


@dataclass(frozen=True)
class GameSnapshot:
    board: Tuple[Tuple[Optional[str], ...], ...]
    current: PieceView
    ghost_y: int
    next: str
    next_shape: Shape
    held: Optional[str]
    held_shape: Optional[Shape]
    can_hold: bool
    score: int
    level: int
    lines: int
    drop_interval: int
    status: GameStatus

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER


class GameState:
    def __init__(self, seed: Optional[int] = None, cols: int = COLS, rows: int = ROWS):
        self.cols, self.rows = cols, rows
        self.bag = PieceBag(seed, cols)
        self.pending: Deque[Action] = deque()
        self.status = GameStatus.IDLE
        self._handlers = {
            Action.MOVE_LEFT: self.move_left,
            Action.MOVE_RIGHT: self.move_right,
            Action.SOFT_DROP: self.soft_drop,
            Action.ROTATE_CW: self.rotate_cw,
            Action.ROTATE_CCW: self.rotate_ccw,
            Action.HARD_DROP: self.hard_drop,
            Action.HOLD: self.hold,
        }
        self.reset()

    # ---------- lifecycle ----------
    def reset(self):
        self.board: Board = new_board(self.cols, self.rows)
        self.stats = Stats()
        self.held: Optional[str] = None
        self.can_hold = True
        self.bag.reset()
        self.current: Piece = self.bag.next_piece()
        self.next: Piece = self.bag.next_piece()
        self.drop_counter = 0.0

    def start(self):
        self.reset()
        self.status = GameStatus.RUNNING
        log.info("game started")

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    # ---------- input ----------
    def dispatch(self, action: Action):
        if action is Action.START:
            self.start()
            return
        handler = self._handlers.get(action)
        if handler is None or not self.running:
            return
        handler()

    def queue(self, action: Action):
        self.pending.append(action)

    def advance(self, dt_ms: float):
        """Apply queued input, then run at most one gravity step."""
        while self.pending:
            self.dispatch(self.pending.popleft())
        if not self.running:
            return
        self.drop_counter += dt_ms
        if self.drop_counter >= self.stats.drop_interval:
            self.soft_drop()

    # ---------- movement ----------
    def move(self, direction: int):
        t = self.current.moved(dx=direction)
        if not collide(self.board, t): self.current = t

    def move_left(self): self.move(-1)
    def move_right(self): self.move(1)

    def rotate(self, direction: int):
        t = try_rotate(self.board, self.current, direction)
        if t: self.current = t

    def rotate_cw(self): self.rotate(1)
    def rotate_ccw(self): self.rotate(-1)

    def soft_drop(self):
        t = self.current.moved(dy=1)
        if collide(self.board, t):
            self.lock_piece()
        else:
            self.current = t
        self.drop_counter = 0.0

    def hard_drop(self):
        self.current.y = ghost_y(self.board, self.current)
        self.lock_piece()

    # ---------- lock / hold ----------
    def lock_piece(self) -> int:
        merge(self.board, self.current)
        cleared = clear_lines(self.board)
        self.stats.apply_clear(cleared)
        log.debug("locked %s at x=%d y=%d, cleared %d",
                  self.current.t, self.current.x, self.current.y, cleared)
        self.current = self.next
        self.next = self.bag.next_piece()
        self.can_hold = True
        if collide(self.board, self.current):
            self.status = GameStatus.GAME_OVER
            log.info("game over: score=%d lines=%d level=%d",
                     self.stats.score, self.stats.lines, self.stats.level)
        return cleared

    def hold(self):
        if not self.can_hold: return
        if self.held is not None:
            kind, self.held = self.held, self.current.t
            self.current = Piece.spawn(kind, self.cols)
        else:
            self.held = self.current.t
            self.current = self.next
            self.next = self.bag.next_piece()
        self.current.x = spawn_x(self.current.shape, self.cols)
        self.current.y = -1
        self.can_hold = False
        log.debug("held %s, now playing %s", self.held, self.current.t)

    # ---------- presentation ----------
    def ghost(self) -> Piece:
        g = self.current.copy()
        g.y = ghost_y(self.board, g)
        return g

    def snapshot(self) -> GameSnapshot:
        c = self.current
        return GameSnapshot(
            board=tuple(tuple(r) for r in self.board),
            current=PieceView(c.t, _frozen(c.shape), c.x, c.y),
            ghost_y=ghost_y(self.board, c),
            next=self.next.t,
            next_shape=_frozen(self.next.shape),
            held=self.held,
            held_shape=_frozen(SHAPES[self.held]) if self.held else None,
            can_hold=self.can_hold,
            score=self.stats.score,
            level=self.stats.level,
            lines=self.stats.lines,
            drop_interval=self.stats.drop_interval,
            status=self.status,
        )
