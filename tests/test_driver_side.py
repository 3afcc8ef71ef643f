# tests/test_driver_side.py
from __future__ import annotations

import logging

import pygame
import pytest
from rich.logging import RichHandler

from tetris_config import CONFIG, drop_interval_ms, level_for_lines
from tetris_game import Command
from tetris_input import command_for_key
from tetris_layout import compute_dims
from tetris_log import setup_logger


@pytest.mark.parametrize(
    "key,command",
    [
        (pygame.K_LEFT, Command.MOVE_LEFT),
        (pygame.K_RIGHT, Command.MOVE_RIGHT),
        (pygame.K_DOWN, Command.SOFT_DROP),
        (pygame.K_UP, Command.ROTATE),
        (pygame.K_SPACE, Command.HARD_DROP),
        (pygame.K_p, Command.PAUSE_TOGGLE),
        (pygame.K_RETURN, Command.START),
        (pygame.K_r, Command.RESTART),
    ],
)
def test_reference_key_bindings(key: int, command: Command) -> None:
    assert command_for_key(key) is command


def test_unbound_key_maps_to_nothing() -> None:
    assert command_for_key(pygame.K_a) is None


@pytest.mark.parametrize("level,interval", [(1, 1000), (2, 900), (9, 200), (10, 100), (11, 100), (30, 100)])
def test_drop_interval_steps_down_to_floor(level: int, interval: int) -> None:
    assert drop_interval_ms(level) == interval


@pytest.mark.parametrize("lines,level", [(0, 1), (9, 1), (10, 2), (19, 2), (110, 12)])
def test_level_for_lines(lines: int, level: int) -> None:
    assert level_for_lines(lines) == level


def test_layout_fits_board_and_panel() -> None:
    d = compute_dims(dict(CONFIG, CELL_SIZE=20))
    assert (d.board_w, d.board_h) == (200, 400)
    assert d.panel_x == d.board_x + d.board_w + d.margin
    assert d.total_w == d.panel_x + d.panel_w + d.margin
    assert d.preview_cell * 4 + 12 <= d.panel_w


def test_setup_logger_uses_rich_handler() -> None:
    logger = setup_logger(name="tetris-test", level="debug")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert setup_logger(name="tetris-test", level="bogus").level == logging.INFO
