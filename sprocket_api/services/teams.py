from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select

from sprocket_api.db.models.team import Player, Team
from sprocket_api.schemas.teams import (
    PlayerCreate,
    PlayerUpdate,
    RosterRow,
    TeamCreate,
    TeamUpdate,
)
from sprocket_api.services.base import BaseService

logger = logging.getLogger(__name__)


class TeamNotFoundError(LookupError):
    """Raised when an operation references a team that does not exist."""

    def __init__(self, team_id: UUID) -> None:
        super().__init__(f"Team {team_id} not found")
        self.team_id = team_id


class TeamService(BaseService):
    """
    Domain service for teams and their rosters.

    Lookups return None when the requested resource does not exist; routes turn
    that into a 404. Every mutation is committed through the unit of work.
    """

    # PUBLIC_INTERFACE
    async def list_teams(
        self,
        *,
        search: Optional[str] = None,
        sport: Optional[str] = None,
        age_group: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Team]:
        """List teams ordered by name, optionally filtered."""
        return await self.uow.teams.list_teams(
            search=search, sport=sport, age_group=age_group, limit=limit, offset=offset
        )

    # PUBLIC_INTERFACE
    async def get_team(self, team_id: UUID) -> Optional[Team]:
        """Return a team with its roster loaded, or None."""
        return await self.uow.teams.get_team(team_id, with_players=True)

    # PUBLIC_INTERFACE
    async def create_team(self, payload: TeamCreate) -> Team:
        """
        Create a team together with any players included in the payload.

        Parameters:
            payload: TeamCreate request
        Returns:
            The created Team with its roster loaded
        """
        team = Team(
            name=payload.name,
            description=payload.description,
            sport=payload.sport,
            age_group=payload.age_group,
            players=[Player(**p.model_dump()) for p in payload.players],
        )
        await self.uow.teams.add_team(team)
        await self.uow.commit()
        logger.info("Created team %s (%s) with %d players", team.id, team.name, len(payload.players))
        return await self.get_team(team.id)  # type: ignore[return-value]

    # PUBLIC_INTERFACE
    async def update_team(self, team_id: UUID, payload: TeamUpdate) -> Optional[Team]:
        """Apply the fields present in payload to the team."""
        team = await self.get_team(team_id)
        if team is None:
            return None
        changes = payload.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(team, field, value)
        await self.uow.commit()
        logger.info("Updated team %s fields=%s", team_id, sorted(changes))
        return team

    # PUBLIC_INTERFACE
    async def delete_team(self, team_id: UUID) -> bool:
        """Delete a team and its players. Returns False when the team does not exist."""
        # roster must be loaded for the ORM cascade to remove players
        team = await self.get_team(team_id)
        if team is None:
            return False
        await self.uow.teams.delete_team(team)
        await self.uow.commit()
        logger.info("Deleted team %s", team_id)
        return True

    # PUBLIC_INTERFACE
    async def list_team_players(
        self, team_id: UUID, *, limit: int = 100, offset: int = 0
    ) -> Optional[List[Player]]:
        """Return the team's players, or None when the team does not exist."""
        if await self.uow.teams.get_team(team_id) is None:
            return None
        return await self.uow.players.list_players(team_id=team_id, limit=limit, offset=offset)

    # PUBLIC_INTERFACE
    async def list_players(
        self,
        *,
        team_id: Optional[UUID] = None,
        position: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Player]:
        """List players across all teams."""
        return await self.uow.players.list_players(
            team_id=team_id, position=position, limit=limit, offset=offset
        )

    # PUBLIC_INTERFACE
    async def add_player(self, team_id: UUID, payload: PlayerCreate) -> Optional[Player]:
        """Add a player to a team. Returns None when the team does not exist."""
        if await self.uow.teams.get_team(team_id) is None:
            return None
        player = Player(team_id=team_id, **payload.model_dump())
        await self.uow.players.add_player(player)
        await self.uow.commit()
        logger.info("Added player %s (%s) to team %s", player.id, player.name, team_id)
        return player

    # PUBLIC_INTERFACE
    async def get_player(self, player_id: UUID) -> Optional[Player]:
        """Return a player, or None."""
        return await self.uow.players.get_player(player_id)

    # PUBLIC_INTERFACE
    async def update_player(self, player_id: UUID, payload: PlayerUpdate) -> Optional[Player]:
        """
        Apply the fields present in payload to the player.

        Returns None when the player does not exist.
        Raises:
            TeamNotFoundError: when team_id names a team that does not exist.
        """
        player = await self.uow.players.get_player(player_id)
        if player is None:
            return None
        changes = payload.model_dump(exclude_unset=True)
        target_team = changes.get("team_id")
        if target_team is not None and target_team != player.team_id:
            if await self.uow.teams.get_team(target_team) is None:
                raise TeamNotFoundError(target_team)
        for field, value in changes.items():
            setattr(player, field, value)
        await self.uow.commit()
        logger.info("Updated player %s fields=%s", player_id, sorted(changes))
        return player

    # PUBLIC_INTERFACE
    async def delete_player(self, player_id: UUID) -> bool:
        """Delete a player. Returns False when the player does not exist."""
        player = await self.uow.players.get_player(player_id)
        if player is None:
            return False
        await self.uow.players.delete_player(player)
        await self.uow.commit()
        logger.info("Deleted player %s", player_id)
        return True

    # PUBLIC_INTERFACE
    async def roster_rows(self, team_id: Optional[UUID] = None) -> Optional[List[RosterRow]]:
        """
        Flatten rosters into one row per player for exports.

        Teams without players are omitted. Returns None when team_id is given
        and does not exist.
        """
        if team_id is not None and await self.uow.teams.get_team(team_id) is None:
            return None
        stmt = (
            select(
                Team.name,
                Team.sport,
                Team.age_group,
                Player.name,
                Player.position,
                Player.birthdate,
            )
            .join(Player, Player.team_id == Team.id)
            .order_by(Team.name, Player.name)
        )
        if team_id is not None:
            stmt = stmt.where(Team.id == team_id)
        res = await self.session.execute(stmt)
        return [
            RosterRow(
                team=team_name,
                sport=sport,
                age_group=age_group,
                player=player_name,
                position=position,
                birthdate=birthdate,
            )
            for team_name, sport, age_group, player_name, position, birthdate in res.all()
        ]
