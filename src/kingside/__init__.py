"""Headless chess board-state engine: squares, pieces, positions, move application."""

__version__ = "0.1.0"
