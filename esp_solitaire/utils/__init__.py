"""Console helpers."""

from .logger import GameDisplay, render_board, setup_logging

__all__ = [
    "GameDisplay",
    "render_board",
    "setup_logging",
]
