
"""
Rendering helpers for the Tetris project.

- Pre-render block cell Surfaces per color (normal + ghost outline) and blit them.
- Pre-render static background (grid + panel frames) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple
from tetris_layout import Dims

# Indexed by cell-id; 0 is empty
COLORS: List[Optional[Tuple[int,int,int]]] = [
    None,
    (255,13,114),
    (13,194,255),
    (13,255,114),
    (245,56,255),
    (255,142,13),
    (255,225,56),
    (56,119,255),
]

@dataclass
class HudCache:
    score: int = -1
    high_score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    labels: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, cols: int, rows: int):
        self.dims = dims
        self.font = font
        self.cols = cols
        self.rows = rows
        self._make_static()
        self.cell_surf = self._make_cells(dims.cell)
        self.pv_surf = self._make_cells(dims.pv_cell)
        self.ghost_surf = self._make_ghosts(dims.cell)
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((0,0,0))
        grid_col = (30,30,40)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (17,17,17), panel_rect)
        pygame.draw.rect(self.bg, (50,50,70), panel_rect, 1)
        # Hold box holds one piece, next box three stacked
        self.hold_xy = (d.panel_x + d.margin, d.panel_y + 40)
        self.next_xy = (d.panel_x + d.margin, d.panel_y + 230)
        for (x, y), h in ((self.hold_xy, 5), (self.next_xy, 10)):
            frame = pygame.Rect(x, y, d.pv_cell*6, d.pv_cell*h)
            pygame.draw.rect(self.bg, (10,10,20), frame)
            pygame.draw.rect(self.bg, (55,55,80), frame, 1)

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self, c: int) -> Dict[int, pygame.Surface]:
        out = {}
        for v, col in enumerate(COLORS):
            if col is None: continue
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            out[v] = s
        return out

    def _make_ghosts(self, c: int) -> Dict[int, pygame.Surface]:
        out = {}
        for v, col in enumerate(COLORS):
            if col is None: continue
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            out[v] = g
        return out

    # ---------- Board, piece, ghost ----------
    def draw_board(self, screen: pygame.Surface, board: List[List[int]]):
        d = self.dims
        for y, row in enumerate(board):
            for x, v in enumerate(row):
                if v:
                    screen.blit(self.cell_surf[v], (d.board_x + x*d.cell + 1, d.board_y + y*d.cell + 1))

    def draw_piece(self, screen: pygame.Surface, piece, ghost: bool = False):
        d = self.dims
        sprites, pad = (self.ghost_surf, 4) if ghost else (self.cell_surf, 1)
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if v and piece.y + r >= 0:
                    screen.blit(sprites[v], (d.board_x + (piece.x+c)*d.cell + pad,
                                             d.board_y + (piece.y+r)*d.cell + pad))

    def draw_preview(self, screen: pygame.Surface, shape: Sequence[Sequence[int]], x: int, y: int):
        c = self.dims.pv_cell
        for r, row in enumerate(shape):
            for col, v in enumerate(row):
                if v:
                    screen.blit(self.pv_surf[v], (x + col*c + 1, y + r*c + 1))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, high_score: int, hold, upcoming):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Hold", True, (200,200,220))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (230,230,240))
        if high_score != self.hud.high_score:
            self.hud.high_score = high_score
            self.hud.high_s = f.render(f"Best: {high_score}", True, (170,170,200))
        if not self.hud.labels:
            self.hud.labels = [f.render("Next", True, (200,200,220))]
        x = d.panel_x + d.margin
        screen.blit(self.hud.title, (x, d.panel_y + 16))
        if hold is not None:
            self.draw_preview(screen, hold.shape, self.hold_xy[0] + d.pv_cell, self.hold_xy[1] + d.pv_cell // 2)
        screen.blit(self.hud.score_s, (x, d.panel_y + 160))
        screen.blit(self.hud.high_s, (x, d.panel_y + 184))
        screen.blit(self.hud.labels[0], (x, d.panel_y + 206))
        for i, shape in enumerate(upcoming):
            self.draw_preview(screen, shape, self.next_xy[0] + d.pv_cell, self.next_xy[1] + d.pv_cell // 2 + i*3*d.pv_cell)

    def draw_session(self, screen: pygame.Surface, session):
        screen.blit(self.bg, (0,0))
        self.draw_board(screen, session.board)
        if session.current is not None:
            self.draw_piece(screen, session.ghost(), ghost=True)
            self.draw_piece(screen, session.current)
        self.draw_panel_hud(screen, session.score, session.high_score, session.hold_piece, session.preview())
