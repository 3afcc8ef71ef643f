# tetris_layout.py
from dataclasses import dataclass
from typing import Any, Mapping

from tetris_config import CONFIG


@dataclass
class Dims:
    cols: int
    rows: int
    cell: int
    margin: int
    board_x: int
    board_y: int
    board_w: int
    board_h: int
    panel_x: int
    panel_y: int
    panel_w: int
    preview_cell: int
    preview_x: int
    preview_y: int
    total_w: int
    total_h: int


def compute_dims(config: Mapping[str, Any] = CONFIG) -> Dims:
    """Board on the left, info panel on the right; the next-piece box fits a 4x4 mask."""
    cols, rows = config["COLS"], config["ROWS"]
    cell = int(config["CELL_SIZE"])
    margin = 16

    board_w, board_h = cols * cell, rows * cell
    panel_x = margin + board_w + margin
    preview_cell = max(12, cell * 2 // 3)
    panel_w = max(180, preview_cell * 4 + 24)

    return Dims(
        cols=cols, rows=rows, cell=cell, margin=margin,
        board_x=margin, board_y=margin, board_w=board_w, board_h=board_h,
        panel_x=panel_x, panel_y=margin, panel_w=panel_w,
        preview_cell=preview_cell,
        preview_x=panel_x + 12,
        preview_y=margin + 150,
        total_w=panel_x + panel_w + margin,
        total_h=margin + board_h + margin,
    )
