from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from sprocket_api.db.models.team import Team
from .base import BaseRepository


class TeamRepository(BaseRepository):
    """Repository for club teams."""

    async def list_teams(
        self,
        *,
        search: Optional[str] = None,
        sport: Optional[str] = None,
        age_group: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Team]:
        # players are loaded so that player_count is available on each row
        stmt = select(Team).options(selectinload(Team.players))
        if search:
            stmt = stmt.where(Team.name.icontains(search, autoescape=True))
        if sport:
            stmt = stmt.where(func.lower(Team.sport) == sport.lower())
        if age_group:
            stmt = stmt.where(func.lower(Team.age_group) == age_group.lower())
        stmt = stmt.order_by(Team.name, Team.id).offset(offset).limit(limit)
        res = await self.scalars(stmt)
        return list(res)

    async def count_teams(self) -> int:
        res = await self.execute(select(func.count()).select_from(Team))
        return int(res.scalar_one())

    async def get_team(self, team_id: UUID, *, with_players: bool = False) -> Optional[Team]:
        stmt = select(Team).where(Team.id == team_id)
        if with_players:
            stmt = stmt.options(selectinload(Team.players)).execution_options(populate_existing=True)
        return await self.scalar_one_or_none(stmt)

    async def add_team(self, team: Team) -> Team:
        await self.add(team)
        await self.flush()
        return team

    async def delete_team(self, team: Team) -> None:
        """Delete a team; its players go with it via the delete-orphan cascade."""
        await self.delete(team)
        await self.flush()
