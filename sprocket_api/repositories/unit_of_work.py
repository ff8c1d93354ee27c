from __future__ import annotations

import logging
from typing import Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession

from .players import PlayerRepository
from .teams import TeamRepository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Groups the repositories that share one AsyncSession and owns its transaction.

    Usage:
        async with UnitOfWork(session) as uow:
            team = await uow.teams.get_team(team_id)
            ...
            await uow.commit()

    Leaving the block because of an exception rolls back anything not yet committed.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.teams = TeamRepository(session)
        self.players = PlayerRepository(session)

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb,
    ) -> None:
        if exc_type is not None:
            logger.debug("Rolling back unit of work after %s", exc_type.__name__)
            await self.rollback()

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
