"""ESP Solitaire: a console card game with a fixed 26-card deal."""

__version__ = "0.1.0"
