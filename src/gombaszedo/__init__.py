"""Gombaszedő — collect the mushrooms in order, moving like a chess piece."""

__version__ = "0.1.0"
