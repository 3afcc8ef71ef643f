# tests/conftest.py
from __future__ import annotations

import random
from typing import Iterable

import pytest

from tetris_config import CONFIG
from tetris_game import Game


class ScriptedRng(random.Random):
    """choice() walks a fixed list of kind names, repeating the last one."""

    def __init__(self, names: Iterable[str]) -> None:
        super().__init__(0)
        self.names = list(names)

    def choice(self, seq):  # type: ignore[override]
        name = self.names.pop(0) if len(self.names) > 1 else self.names[0]
        return next(k for k in seq if k.name == name)


def make_game(*names: str) -> Game:
    return Game(CONFIG, rng=ScriptedRng(names or ("O",)))


@pytest.fixture
def o_game() -> Game:
    game = make_game("O")
    game.start(now=0)
    return game


@pytest.fixture
def game_factory():
    return make_game
