from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select

from sprocket_api.db.models.team import Player
from .base import BaseRepository


class PlayerRepository(BaseRepository):
    """Repository for team players."""

    async def list_players(
        self,
        *,
        team_id: Optional[UUID] = None,
        position: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Player]:
        stmt = select(Player)
        if team_id:
            stmt = stmt.where(Player.team_id == team_id)
        if position:
            stmt = stmt.where(func.lower(Player.position) == position.lower())
        stmt = stmt.order_by(Player.name, Player.id).offset(offset).limit(limit)
        res = await self.scalars(stmt)
        return list(res)

    async def get_player(self, player_id: UUID) -> Optional[Player]:
        stmt = select(Player).where(Player.id == player_id)
        return await self.scalar_one_or_none(stmt)

    async def add_player(self, player: Player) -> Player:
        await self.add(player)
        await self.flush()
        return player

    async def delete_player(self, player: Player) -> None:
        await self.delete(player)
        await self.flush()
