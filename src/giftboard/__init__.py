"""Livestream gift-driven board game engine."""

__version__ = "0.1.0"
