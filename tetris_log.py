"""Logger setup for the driver (rich console output)"""
import logging

from rich.logging import RichHandler


def setup_logger(*, name: str = "tetris", level: str = "info") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    handler = RichHandler(show_time=True, show_level=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
