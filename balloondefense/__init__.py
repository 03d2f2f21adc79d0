"""Tile-based balloon tower defense game with XML level files, built on pygame."""

__version__ = "0.1.0"