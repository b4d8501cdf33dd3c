
"""
Rendering for the blockfall front end.

The core never draws. A Renderer receives a read-only GameSnapshot each frame
and paints it onto a pygame surface.

RenderAssets keeps the tricks that make that cheap:
- Pre-render block cell Surfaces per color (solid + ghost outline) and blit them.
- Pre-render static background (grid + panel + preview frames) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the grid changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from blockfall_layout import Dims, HUD_LINE, PREVIEW_CELLS
from blockfall_game import GameSnapshot, Shape

# Colors per piece kind
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (91,192,235),
    "O": (249,199,79),
    "T": (181,23,158),
    "S": (67,170,139),
    "Z": (249,65,68),
    "J": (39,125,161),
    "L": (243,114,44),
}

TEXT = (200,210,240)
DIM = (165,175,215)


class Renderer:
    """Draws a snapshot; implementations must not keep references into game state."""
    def draw(self, screen: pygame.Surface, snap: GameSnapshot):
        raise NotImplementedError


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_type: str = ""
    held: Optional[str] = None
    can_hold: bool = True
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None
    hold_s: Optional[pygame.Surface] = None
    labels: Optional[list] = None
    controls: Optional[list] = None


class RenderAssets(Renderer):
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, cols: int, rows: int):
        self.dims = dims
        self.font = font
        self.cols, self.rows = cols, rows
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        # Board surface cache (only locked blocks)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_key = None

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.total_h - 2*d.margin)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        for pos in (d.next_pos, d.hold_pos):
            frame = pygame.Rect(d.preview_frame(pos))
            pygame.draw.rect(self.bg, (15,18,40), frame)
            pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[t] = g

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board):
        """Rebuilds the "locked blocks" surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, t in enumerate(row):
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x*c + 1, y*c + 1))
        self._board_key = board

    # ---------- Per-cell helpers for moving/ghost piece ----------
    def draw_cell(self, screen: pygame.Surface, t: str, bx: int, by: int):
        screen.blit(self.cell_surf[t], self.dims.cell_origin(bx, by, 1))

    def draw_ghost_cell(self, screen: pygame.Surface, t: str, bx: int, by: int):
        screen.blit(self.ghost_surf[t], self.dims.cell_origin(bx, by, 4))

    def _preview(self, t: str, shape: Shape, dimmed: bool = False) -> pygame.Surface:
        pv = self.dims.preview_cell
        s = pygame.Surface((self.dims.preview_size, self.dims.preview_size), pygame.SRCALPHA)
        offx = (PREVIEW_CELLS - len(shape[0])) // 2
        offy = (PREVIEW_CELLS - len(shape)) // 2
        col = COLORS[t]
        if dimmed:
            col = tuple(v // 3 for v in col)
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    block = pygame.Surface((pv-2, pv-2))
                    block.fill(col)
                    s.blit(block, ((x + offx)*pv + 1, (y + offy)*pv + 1))
        return s

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: GameSnapshot):
        screen.blit(self.bg, (0,0))
        if snap.board != self._board_key:
            self.rebuild_board_surface(snap.board)
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        p = snap.current
        for r, row in enumerate(p.shape):
            for c, v in enumerate(row):
                if v and snap.ghost_y + r >= 0:
                    self.draw_ghost_cell(screen, p.t, p.x + c, snap.ghost_y + r)
        for r, row in enumerate(p.shape):
            for c, v in enumerate(row):
                if v and p.y + r >= 0:
                    self.draw_cell(screen, p.t, p.x + c, p.y + r)
        self.draw_panel_hud(screen, snap)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: GameSnapshot):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Blockfall", True, (197,202,233))
            self.hud.labels = [f.render("Next:", True, TEXT), f.render("Hold:", True, TEXT)]
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        if snap.next != self.hud.next_type:
            self.hud.next_type = snap.next
            self.hud.next_s = self._preview(snap.next, snap.next_shape)
        if (snap.held, snap.can_hold) != (self.hud.held, self.hud.can_hold):
            self.hud.held, self.hud.can_hold = snap.held, snap.can_hold
            self.hud.hold_s = (self._preview(snap.held, snap.held_shape, not snap.can_hold)
                               if snap.held else None)
        screen.blit(self.hud.title, (d.text_x, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.text_x, d.score_y))
        screen.blit(self.hud.level_s, (d.text_x, d.level_y))
        screen.blit(self.hud.lines_s, (d.text_x, d.lines_y))
        screen.blit(self.hud.labels[0], (d.text_x, d.next_pos[1] - HUD_LINE))
        screen.blit(self.hud.labels[1], (d.text_x, d.hold_pos[1] - HUD_LINE))
        screen.blit(self.hud.next_s, d.next_pos)
        if self.hud.hold_s:
            screen.blit(self.hud.hold_s, d.hold_pos)
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, DIM),
                f.render("↓ Soft drop", True, DIM),
                f.render("↑ Rot CW  Z Rot CCW", True, DIM),
                f.render("Space Hard drop", True, DIM),
                f.render("Shift Hold", True, DIM),
                f.render("Enter Start", True, DIM),
            ]
        y = d.controls_y
        for surf in self.hud.controls:
            screen.blit(surf, (d.text_x, y)); y += 20
