"""Gameplay and presentation tunables"""
from typing import Any, Mapping

CONFIG = {
    # Board
    "COLS": 10,
    "ROWS": 20,
    # Gravity (ms between automatic drops)
    "INITIAL_DROP_MS": 1000,
    "MIN_DROP_MS": 100,
    "DROP_STEP_MS": 100,
    # Scoring & level progression
    "LINES_PER_LEVEL": 10,
    "LINE_SCORES": {1: 40, 2: 100, 3: 300, 4: 1200},
    "HARD_DROP_POINTS_PER_ROW": 1,
    # Presentation
    "CELL_SIZE": 30,
    "TARGET_FPS": 60,
    "MUSIC_PATH": None,
    # Runtime
    "SEED": None,
    "LOG_LEVEL": "info",
}


def drop_interval_ms(level: int, config: Mapping[str, Any] = CONFIG) -> int:
    step = (level - 1) * config["DROP_STEP_MS"]
    return max(config["MIN_DROP_MS"], config["INITIAL_DROP_MS"] - step)


def level_for_lines(lines: int, config: Mapping[str, Any] = CONFIG) -> int:
    return lines // config["LINES_PER_LEVEL"] + 1
