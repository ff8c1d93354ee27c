from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from sprocket_api.core.deps import get_team_service, require_writer
from sprocket_api.schemas.teams import PlayerRead, PlayerUpdate
from sprocket_api.services.teams import TeamNotFoundError, TeamService

router = APIRouter(prefix="/players", tags=["Players"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[PlayerRead],
    summary="List players",
    description="List players across all teams ordered by name.",
)
async def list_players(
    service: TeamService = Depends(get_team_service),
    team_id: UUID | None = Query(None, description="Filter by team id"),
    position: str | None = Query(None, description="Filter by position"),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
) -> List[PlayerRead]:
    players = await service.list_players(
        team_id=team_id, position=position, limit=limit, offset=offset
    )
    return [PlayerRead.model_validate(p) for p in players]


# PUBLIC_INTERFACE
@router.get(
    "/{player_id}",
    response_model=PlayerRead,
    summary="Get player",
)
async def get_player(
    player_id: UUID = Path(...),
    service: TeamService = Depends(get_team_service),
) -> PlayerRead:
    player = await service.get_player(player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return PlayerRead.model_validate(player)


# PUBLIC_INTERFACE
@router.patch(
    "/{player_id}",
    response_model=PlayerRead,
    summary="Update player",
    description="Partially update a player. Setting team_id moves the player to that team.",
    dependencies=[Depends(require_writer)],
)
async def update_player(
    payload: PlayerUpdate,
    player_id: UUID = Path(...),
    service: TeamService = Depends(get_team_service),
) -> PlayerRead:
    try:
        player = await service.update_player(player_id, payload)
    except TeamNotFoundError:
        raise HTTPException(status_code=404, detail="Team not found")
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return PlayerRead.model_validate(player)


# PUBLIC_INTERFACE
@router.delete(
    "/{player_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete player",
    dependencies=[Depends(require_writer)],
)
async def delete_player(
    player_id: UUID = Path(...),
    service: TeamService = Depends(get_team_service),
) -> Response:
    if not await service.delete_player(player_id):
        raise HTTPException(status_code=404, detail="Player not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
