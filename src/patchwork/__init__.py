"""Patchwork: the two-player quilting board game, playable in a terminal."""

__version__ = "0.1.0"
