"""Sprocket Sports API: teams and player rosters for the club mobile app."""

__version__ = "0.1.0"
