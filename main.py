import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import Game, Status
from tetris_input import command_for_key
from tetris_layout import compute_dims
from tetris_log import setup_logger
from tetris_render import RenderAssets

log = logging.getLogger("tetris.main")


class Music:
    """Background track; silently off when no file is configured or it fails to load."""
    def __init__(self, path):
        self.loaded = False
        self.enabled = True
        self.started = False
        self.playing = False
        if not path:
            return
        try:
            pygame.mixer.init()
            pygame.mixer.music.load(path)
            self.loaded = True
        except pygame.error as e:
            log.warning("music disabled: %s", e)

    def play(self):
        if self.loaded and self.enabled and not self.playing:
            if self.started:
                pygame.mixer.music.unpause()
            else:
                pygame.mixer.music.play(-1)
                self.started = True
            self.playing = True

    def pause(self):
        if self.loaded and self.playing:
            pygame.mixer.music.pause()
            self.playing = False

    def toggle(self):
        self.enabled = not self.enabled
        log.info("music %s", "on" if self.enabled else "off")
        if not self.enabled:
            self.pause()

    def follow(self, status):
        if status is Status.RUNNING:
            self.play()
        else:
            self.pause()


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Classic falling-block puzzle game")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="piece randomizer seed")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"], help="cell size in pixels")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"], help="debug, info, warning, ...")
    p.add_argument("--music", default=CONFIG["MUSIC_PATH"], help="background music file")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = dict(CONFIG, SEED=args.seed, CELL_SIZE=args.cell_size,
                  LOG_LEVEL=args.log_level, MUSIC_PATH=args.music)
    setup_logger(name="tetris", level=config["LOG_LEVEL"])

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims(config)
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    game = Game(config)
    music = Music(config["MUSIC_PATH"])

    while True:
        clock.tick(config["TARGET_FPS"])
        now = pygame.time.get_ticks()

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type != pygame.KEYDOWN:
                continue
            if e.key == pygame.K_ESCAPE:
                pygame.quit(); sys.exit()
            if e.key == pygame.K_m:
                music.toggle(); continue
            cmd = command_for_key(e.key)
            if cmd is not None:
                game.dispatch(cmd, now)

        game.tick(now)
        snap = game.snapshot()
        music.follow(snap.status)

        render.draw(screen, snap)
        pygame.display.flip()


if __name__ == '__main__':
    main()
