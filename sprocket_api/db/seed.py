"""
Database seeding utilities for sample club data.

Seeds (only when the teams table is empty):
- Sprocket Sports U10 Soccer team with a starting roster
- Sprocket Sports U12 Basketball team with a starting roster

Usage:
  python -m sprocket_api.db.run_migrations upgrade head
  python -m sprocket_api.db.seed
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from sprocket_api.db.session import get_async_session
from sprocket_api.repositories.unit_of_work import UnitOfWork
from sprocket_api.schemas.teams import PlayerCreate, TeamCreate
from sprocket_api.services.teams import TeamService

logger = logging.getLogger(__name__)


SAMPLE_TEAMS: List[TeamCreate] = [
    TeamCreate(
        name="Sprocket Strikers",
        description="Recreational soccer for under-10s.",
        sport="Soccer",
        age_group="U10",
        players=[
            PlayerCreate(name="Ava Martinez", birthdate=date(2016, 3, 14), position="Forward"),
            PlayerCreate(name="Liam Chen", birthdate=date(2016, 7, 2), position="Goalkeeper"),
            PlayerCreate(name="Noah Patel", birthdate=date(2016, 11, 21), position="Defender"),
        ],
    ),
    TeamCreate(
        name="Sprocket Sparks",
        description="Competitive basketball for under-12s.",
        sport="Basketball",
        age_group="U12",
        players=[
            PlayerCreate(name="Mia Johnson", birthdate=date(2014, 1, 9), position="Guard"),
            PlayerCreate(name="Ethan Brooks", birthdate=date(2014, 5, 30), position="Center"),
        ],
    ),
]


# PUBLIC_INTERFACE
async def seed_session(session: AsyncSession) -> int:
    """
    Insert the sample teams through the service layer if no teams exist.

    Returns:
        Number of teams created (0 when data was already present).
    """
    async with UnitOfWork(session) as uow:
        if await uow.teams.count_teams() > 0:
            logger.info("Teams already present; skipping seed")
            return 0
        service = TeamService(uow)
        for payload in SAMPLE_TEAMS:
            await service.create_team(payload)
    return len(SAMPLE_TEAMS)


# PUBLIC_INTERFACE
async def seed_all() -> None:
    """Seed the configured database with sample teams."""
    async for session in get_async_session():
        created = await seed_session(session)
        logger.info("Seeded %d teams", created)


if __name__ == "__main__":
    asyncio.run(seed_all())
