"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for teams and players. They share
the AsyncSession handed to them by a UnitOfWork, which owns commit/rollback.
"""

from .players import PlayerRepository  # noqa: F401
from .teams import TeamRepository  # noqa: F401
from .unit_of_work import UnitOfWork  # noqa: F401
