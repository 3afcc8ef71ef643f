"""
Pygame presentation adapter. Reads a Snapshot each frame and draws it.

Caching:
- Static background (grid + panel frame + preview frame) built once per Dims.
- One cell Surface per color, created on first use.
- HUD text surfaces re-rendered only when their values change.
- Locked blocks live on a board Surface rebuilt only when the grid changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from tetris_game import Snapshot, Status
from tetris_layout import Dims
from tetris_piece import Piece

Grid = Tuple[Tuple[Optional[str], ...], ...]

BG = (10, 13, 34)
GRID_LINE = (40, 50, 90)
PANEL = (21, 25, 53)
PANEL_EDGE = (50, 60, 100)
TEXT = (200, 210, 240)
TEXT_DIM = (165, 175, 215)
CELL_EDGE = (34, 34, 34)

CONTROLS = (
    "←/→ Move",
    "↓ Soft drop",
    "↑ Rotate",
    "Space Hard drop",
    "P Pause",
    "Enter Start • R Restart",
    "M Music • Esc Quit",
)


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_piece: Optional[Piece] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.cell_surf: Dict[Tuple[str, int], pygame.Surface] = {}
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_grid: Optional[Grid] = None
        self._make_static()

    # ---------- Static background ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(d.cols + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, GRID_LINE, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, GRID_LINE, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, PANEL, panel_rect)
        pygame.draw.rect(self.bg, PANEL_EDGE, panel_rect, 1)
        frame = pygame.Rect(d.preview_x - 6, d.preview_y - 6, d.preview_cell * 4 + 12, d.preview_cell * 4 + 12)
        pygame.draw.rect(self.bg, (15, 18, 40), frame)
        pygame.draw.rect(self.bg, (55, 65, 110), frame, 1)

        title = self.font.render("Tetris", True, (197, 202, 233))
        self.bg.blit(title, (d.panel_x + 12, d.panel_y + 12))
        self.bg.blit(self.font.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 126))
        y = d.preview_y + d.preview_cell * 4 + 24
        self.bg.blit(self.font.render("Controls:", True, TEXT), (d.panel_x + 12, y))
        for line in CONTROLS:
            y += 20
            self.bg.blit(self.font.render(line, True, TEXT_DIM), (d.panel_x + 12, y))

    def _cell(self, color: str, size: int) -> pygame.Surface:
        key = (color, size)
        s = self.cell_surf.get(key)
        if s is None:
            s = pygame.Surface((size, size))
            s.fill(pygame.Color(color))
            pygame.draw.rect(s, CELL_EDGE, (0, 0, size, size), 1)
            self.cell_surf[key] = s
        return s

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid: Grid):
        """Rebuilds the locked-blocks surface from the grid."""
        self.board_surface.fill((0, 0, 0, 0))
        c = self.dims.cell
        for y, row in enumerate(grid):
            for x, color in enumerate(row):
                if color:
                    self.board_surface.blit(self._cell(color, c), (x * c, y * c))
        self._board_grid = grid

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        screen.blit(self.bg, (0, 0))
        if snap.grid != self._board_grid:
            self.rebuild_board_surface(snap.grid)
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        if snap.current is not None and snap.status is not Status.READY:
            self.draw_piece(screen, snap.current)
        self.draw_panel_hud(screen, snap)

        if snap.status is Status.READY:
            self.draw_banner(screen, ["Press Enter to start"])
        elif snap.paused:
            self.draw_banner(screen, ["PAUSED", "P to resume"])
        elif snap.game_over:
            self.draw_banner(screen, ["GAME OVER", f"Score: {snap.score}", "R to restart"])

    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        d = self.dims
        surf = self._cell(piece.color, d.cell)
        for x, y in piece.cells():
            if y >= 0:
                screen.blit(surf, (d.board_x + x * d.cell, d.board_y + y * d.cell))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        if snap.next != self.hud.next_piece:
            self.hud.next_piece = snap.next
            self.hud.preview = self._preview(snap.next)
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        if self.hud.preview is not None:
            screen.blit(self.hud.preview, (d.preview_x, d.preview_y))

    def _preview(self, piece: Optional[Piece]) -> Optional[pygame.Surface]:
        if piece is None:
            return None
        pc = self.dims.preview_cell
        s = pygame.Surface((pc * 4, pc * 4), pygame.SRCALPHA)
        n = len(piece.mask)
        off = (4 - n) * pc // 2
        block = self._cell(piece.color, pc)
        for r, row in enumerate(piece.mask):
            for c, v in enumerate(row):
                if v:
                    s.blit(block, (off + c * pc, off + r * pc))
        return s

    def draw_banner(self, screen: pygame.Surface, lines: List[str]):
        d = self.dims
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        screen.blit(shade, (d.board_x, d.board_y))
        cx = d.board_x + d.board_w // 2
        cy = d.board_y + d.board_h // 2 - 24 * (len(lines) - 1)
        for i, text in enumerate(lines):
            font = self.big_font if i == 0 else self.font
            msg = font.render(text, True, (255, 220, 220))
            screen.blit(msg, msg.get_rect(center=(cx, cy + i * 40)))
