"""
ORM models for the club domain: teams and their players.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .team import (  # noqa: F401
    Player,
    Team,
)
