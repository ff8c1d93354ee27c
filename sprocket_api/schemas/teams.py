from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _strip_required_name(v):
    if v is None:
        raise ValueError("name must not be null")
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
    return v


class PlayerCreate(BaseModel):
    """Create player payload."""
    name: str = Field(..., min_length=1, description="Player full name")
    birthdate: Optional[date] = Field(None, description="Date of birth (YYYY-MM-DD)")
    position: Optional[str] = Field(None, description="Playing position (e.g. Goalkeeper)")

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return _strip_required_name(v)


class PlayerUpdate(BaseModel):
    """Partial player update; team_id moves the player to another team."""
    name: Optional[str] = Field(None, min_length=1)
    birthdate: Optional[date] = Field(None)
    position: Optional[str] = Field(None)
    team_id: Optional[UUID] = Field(None, description="Target team id")

    @field_validator("name", "team_id", mode="before")
    @classmethod
    def check_not_null(cls, v, info):
        # Only reached when the field was sent; an explicit null is not allowed.
        if v is None:
            raise ValueError(f"{info.field_name} must not be null")
        if info.field_name == "name":
            return _strip_required_name(v)
        return v


class PlayerRead(BaseModel):
    """Player read model."""
    id: UUID = Field(..., description="Player ID")
    team_id: UUID = Field(..., description="Team ID")
    name: str = Field(..., description="Player name")
    birthdate: Optional[date] = Field(None)
    position: Optional[str] = Field(None)
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")

    model_config = ConfigDict(from_attributes=True)


class TeamCreate(BaseModel):
    """Create team payload, optionally with an initial roster."""
    name: str = Field(..., min_length=1, description="Team name")
    description: Optional[str] = Field(None)
    sport: Optional[str] = Field(None, description="Sport (e.g. Soccer)")
    age_group: Optional[str] = Field(None, description="Age group (e.g. U12)")
    players: List[PlayerCreate] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return _strip_required_name(v)


class TeamUpdate(BaseModel):
    """Partial team update. Players are managed through the player endpoints."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None)
    sport: Optional[str] = Field(None)
    age_group: Optional[str] = Field(None)

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return _strip_required_name(v)


class TeamRead(BaseModel):
    """Team read model (flat, used in listings)."""
    id: UUID = Field(..., description="Team ID")
    name: str = Field(..., description="Team name")
    description: Optional[str] = Field(None)
    sport: Optional[str] = Field(None)
    age_group: Optional[str] = Field(None)
    player_count: int = Field(0, description="Number of players on the roster")
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")

    model_config = ConfigDict(from_attributes=True)


class TeamDetail(TeamRead):
    """Team read model including the roster."""
    players: List[PlayerRead] = Field(default_factory=list)


class RosterRow(BaseModel):
    """Flat team/player row used by roster exports."""
    team: str
    sport: Optional[str] = None
    age_group: Optional[str] = None
    player: str
    position: Optional[str] = None
    birthdate: Optional[date] = None
