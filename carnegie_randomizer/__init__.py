"""Seeded setup randomizer for the Carnegie board game."""

__version__ = "0.3.0"
