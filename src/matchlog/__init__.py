"""Matchlog: personal game match history with daily win ratios."""

__version__ = "0.1.0"
