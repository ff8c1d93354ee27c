from __future__ import annotations

import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import Date, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sprocket_api.db.base import Base, TimestampMixin, UUIDPkMixin


class Team(UUIDPkMixin, TimestampMixin, Base):
    """Club team (e.g. U12 Soccer Sprockets)."""
    __tablename__ = "teams"
    __mapper_args__ = {"eager_defaults": True}

    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    sport: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    age_group: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # U8/U10/U12/...

    players: Mapped[List[Player]] = relationship(
        back_populates="team",
        cascade="all, delete-orphan",
        order_by="Player.name",
    )

    @property
    def player_count(self) -> int:
        # Only valid when players were loaded with the team.
        return len(self.players)


class Player(UUIDPkMixin, TimestampMixin, Base):
    """Player on a team roster."""
    __tablename__ = "players"
    __mapper_args__ = {"eager_defaults": True}

    team_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    birthdate: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    position: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    team: Mapped[Team] = relationship(back_populates="players")
