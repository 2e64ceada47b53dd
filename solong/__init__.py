"""Tile-map validation, XPM image reading and text helpers for a small puzzle game."""

__version__ = "0.1.0"