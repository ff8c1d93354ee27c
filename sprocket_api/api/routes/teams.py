from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from sprocket_api.core.deps import get_team_service, require_writer
from sprocket_api.schemas.teams import (
    PlayerCreate,
    PlayerRead,
    TeamCreate,
    TeamDetail,
    TeamRead,
    TeamUpdate,
)
from sprocket_api.services.teams import TeamService

router = APIRouter(prefix="/teams", tags=["Teams"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TeamRead],
    summary="List teams",
    description="List club teams ordered by name.",
)
async def list_teams(
    service: TeamService = Depends(get_team_service),
    search: str | None = Query(None, description="Filter by team name (substring, case-insensitive)"),
    sport: str | None = Query(None, description="Filter by sport"),
    age_group: str | None = Query(None, description="Filter by age group"),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
) -> List[TeamRead]:
    teams = await service.list_teams(
        search=search, sport=sport, age_group=age_group, limit=limit, offset=offset
    )
    return [TeamRead.model_validate(t) for t in teams]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TeamDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Create team",
    description="Create a team, optionally with an initial roster of players.",
    dependencies=[Depends(require_writer)],
)
async def create_team(
    payload: TeamCreate,
    service: TeamService = Depends(get_team_service),
) -> TeamDetail:
    created = await service.create_team(payload)
    return TeamDetail.model_validate(created)


# PUBLIC_INTERFACE
@router.get(
    "/{team_id}",
    response_model=TeamDetail,
    summary="Get team",
    description="Get a team by id, including its players.",
)
async def get_team(
    team_id: UUID = Path(...),
    service: TeamService = Depends(get_team_service),
) -> TeamDetail:
    team = await service.get_team(team_id)
    if team is None:
        raise _not_found()
    return TeamDetail.model_validate(team)


# PUBLIC_INTERFACE
@router.patch(
    "/{team_id}",
    response_model=TeamDetail,
    summary="Update team",
    description="Partially update a team. Only fields present in the body change.",
    dependencies=[Depends(require_writer)],
)
async def update_team(
    payload: TeamUpdate,
    team_id: UUID = Path(...),
    service: TeamService = Depends(get_team_service),
) -> TeamDetail:
    team = await service.update_team(team_id, payload)
    if team is None:
        raise _not_found()
    return TeamDetail.model_validate(team)


# PUBLIC_INTERFACE
@router.delete(
    "/{team_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete team",
    description="Delete a team and all of its players.",
    dependencies=[Depends(require_writer)],
)
async def delete_team(
    team_id: UUID = Path(...),
    service: TeamService = Depends(get_team_service),
) -> Response:
    if not await service.delete_team(team_id):
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.get(
    "/{team_id}/players",
    response_model=List[PlayerRead],
    summary="List team players",
    description="List the players on a team ordered by name.",
)
async def list_team_players(
    team_id: UUID = Path(...),
    service: TeamService = Depends(get_team_service),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
) -> List[PlayerRead]:
    players = await service.list_team_players(team_id, limit=limit, offset=offset)
    if players is None:
        raise _not_found()
    return [PlayerRead.model_validate(p) for p in players]


# PUBLIC_INTERFACE
@router.post(
    "/{team_id}/players",
    response_model=PlayerRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add player",
    description="Add a player to a team roster.",
    dependencies=[Depends(require_writer)],
)
async def add_player(
    payload: PlayerCreate,
    team_id: UUID = Path(...),
    service: TeamService = Depends(get_team_service),
) -> PlayerRead:
    player = await service.add_player(team_id, payload)
    if player is None:
        raise _not_found()
    return PlayerRead.model_validate(player)
