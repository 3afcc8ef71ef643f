"""Game engine: spawning, gravity, movement, rotation with wall kicks, locking, scoring

The engine performs no I/O and never schedules itself. A driver calls
tick(now) once per frame with a millisecond timestamp and forwards player
input as Command values through dispatch().
"""
from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Mapping, Optional, Tuple

from tetris_board import Board, Cell, is_valid
from tetris_config import CONFIG, drop_interval_ms, level_for_lines
from tetris_piece import Piece
from tetris_shapes import pick_random

log = logging.getLogger("tetris.game")

# Horizontal offsets tried after an in-place rotation fails. No vertical kicks.
WALL_KICKS: Tuple[int, ...] = (-1, 1, -2, 2)


class Status(Enum):
    READY = auto()
    RUNNING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class Command(Enum):
    START = auto()
    RESTART = auto()
    PAUSE_TOGGLE = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    ROTATE = auto()
    HARD_DROP = auto()


@dataclass
class GameState:
    board: Board
    current: Optional[Piece] = None
    next: Optional[Piece] = None
    score: int = 0
    level: int = 1
    lines: int = 0
    drop_interval: int = 1000
    status: Status = Status.READY
    last_drop: float = 0.0

    @property
    def paused(self) -> bool:
        return self.status is Status.PAUSED

    @property
    def game_over(self) -> bool:
        return self.status is Status.GAME_OVER


@dataclass(frozen=True)
class LockResult:
    rows_cleared: int
    line_points: int
    drop_distance: int
    game_over: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer."""
    grid: Tuple[Tuple[Cell, ...], ...]
    current: Optional[Piece]
    next: Optional[Piece]
    score: int
    level: int
    lines: int
    drop_interval: int
    status: Status

    @property
    def paused(self) -> bool:
        return self.status is Status.PAUSED

    @property
    def game_over(self) -> bool:
        return self.status is Status.GAME_OVER


class Game:
    def __init__(self, config: Mapping[str, Any] = CONFIG, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.get("SEED"))
        self.state = GameState(
            board=Board(config["COLS"], config["ROWS"]),
            drop_interval=drop_interval_ms(1, config),
        )
        self.last_lock: Optional[LockResult] = None
        # One mutual-exclusion boundary per game; re-entrant since hard_drop reuses move.
        self._mutex = threading.RLock()

    # ---------- lifecycle ----------
    def start(self, now: float = 0.0) -> bool:
        with self._mutex:
            if self.state.status not in (Status.READY, Status.GAME_OVER):
                log.debug("start ignored while %s", self.state.status.name)
                return False
            self._new_game(now)
            return True

    def restart(self, now: float = 0.0) -> bool:
        with self._mutex:
            self._new_game(now)
            return True

    def _new_game(self, now: float):
        s = self.state
        s.board.reset()
        s.score = 0
        s.level = 1
        s.lines = 0
        s.drop_interval = drop_interval_ms(1, self.config)
        s.current = self._spawn()
        s.next = self._spawn()
        s.status = Status.RUNNING
        s.last_drop = now
        self.last_lock = None
        log.info("game started: current=%s next=%s", s.current.kind, s.next.kind)

    def pause(self) -> bool:
        with self._mutex:
            if self.state.status is not Status.RUNNING:
                return False
            self.state.status = Status.PAUSED
            log.debug("paused")
            return True

    def resume(self) -> bool:
        with self._mutex:
            if self.state.status is not Status.PAUSED:
                return False
            self.state.status = Status.RUNNING
            log.debug("resumed")
            return True

    def toggle_pause(self) -> bool:
        with self._mutex:
            if self.state.paused:
                return self.resume()
            return self.pause()

    # ---------- gravity ----------
    def tick(self, now: float):
        with self._mutex:
            s = self.state
            if s.status is not Status.RUNNING:
                return
            if now - s.last_drop < s.drop_interval:
                return
            s.last_drop = now
            if not self.move(0, 1):
                self._lock_current(drop_distance=0)

    # ---------- player actions ----------
    def move(self, dx: int, dy: int) -> bool:
        with self._mutex:
            s = self.state
            if not self._has_active_piece():
                return False
            p = s.current
            if not is_valid(s.board, p.x + dx, p.y + dy, p.mask):
                return False
            s.current = p.moved(dx, dy)
            return True

    def rotate(self) -> bool:
        with self._mutex:
            s = self.state
            if not self._has_active_piece():
                return False
            for dx in (0,) + WALL_KICKS:
                candidate = s.current.rotated(dx)
                if is_valid(s.board, candidate.x, candidate.y, candidate.mask):
                    s.current = candidate
                    return True
            return False

    def hard_drop(self) -> bool:
        with self._mutex:
            if not self._has_active_piece():
                return False
            distance = 0
            while self.move(0, 1):
                distance += 1
            self._lock_current(drop_distance=distance)
            return True

    def dispatch(self, command: Command, now: float = 0.0) -> bool:
        """Apply a symbolic command with the reference input gating.

        START/RESTART always reach the engine. Everything else is dropped
        after game over, and only PAUSE_TOGGLE gets through while paused.
        """
        if not isinstance(command, Command):
            raise TypeError(f"expected Command, got {command!r}")
        with self._mutex:
            if command is Command.START:
                return self.start(now)
            if command is Command.RESTART:
                return self.restart(now)
            if self.state.status in (Status.READY, Status.GAME_OVER):
                return False
            if command is Command.PAUSE_TOGGLE:
                return self.toggle_pause()
            if self.state.paused:
                return False
            if command is Command.MOVE_LEFT:
                return self.move(-1, 0)
            if command is Command.MOVE_RIGHT:
                return self.move(1, 0)
            if command is Command.SOFT_DROP:
                return self.move(0, 1)
            if command is Command.ROTATE:
                return self.rotate()
            return self.hard_drop()

    # ---------- read side ----------
    def snapshot(self) -> Snapshot:
        with self._mutex:
            s = self.state
            return Snapshot(
                grid=s.board.snapshot(),
                current=s.current,
                next=s.next,
                score=s.score,
                level=s.level,
                lines=s.lines,
                drop_interval=s.drop_interval,
                status=s.status,
            )

    # ---------- internals ----------
    def _spawn(self) -> Piece:
        return Piece.spawn(pick_random(self.rng), self.state.board.cols)

    def _has_active_piece(self) -> bool:
        s = self.state
        if s.current is None or s.status in (Status.READY, Status.GAME_OVER):
            log.debug("action ignored while %s", s.status.name)
            return False
        return True

    def _lock_current(self, drop_distance: int) -> LockResult:
        s = self.state
        board = s.board
        piece = s.current
        for x, y in piece.cells():
            if y >= 0:
                board.set(x, y, piece.color)
        log.debug("locked %s at (%d, %d)", piece.kind, piece.x, piece.y)

        cleared, points = self._clear_lines()
        s.score += drop_distance * self.config["HARD_DROP_POINTS_PER_ROW"]

        s.current = s.next
        s.next = self._spawn()
        if not is_valid(board, s.current.x, s.current.y, s.current.mask):
            s.status = Status.GAME_OVER
            log.info("game over: score=%d level=%d lines=%d", s.score, s.level, s.lines)

        self.last_lock = LockResult(
            rows_cleared=cleared,
            line_points=points,
            drop_distance=drop_distance,
            game_over=s.game_over,
        )
        return self.last_lock

    def _clear_lines(self) -> Tuple[int, int]:
        s = self.state
        rows = s.board.full_rows()
        if not rows:
            return 0, 0
        n = len(rows)
        points = self.config["LINE_SCORES"][n] * s.level
        s.score += points
        s.lines += n
        new_level = level_for_lines(s.lines, self.config)
        if new_level > s.level:
            s.level = new_level
            s.drop_interval = drop_interval_ms(new_level, self.config)
            log.info("level %d, drop interval %d ms", s.level, s.drop_interval)
        s.board.clear_rows(rows)
        log.debug("cleared %d row(s) for %d points", n, points)
        return n, points
