"""
Public Pydantic schemas (DTOs) used by FastAPI routes, services, and tests.

Team and player DTOs live in .teams; shared envelopes and responses in .common.
"""

from .common import ErrorResponse, MessageResponse  # noqa: F401
from .teams import (  # noqa: F401
    PlayerCreate,
    PlayerRead,
    PlayerUpdate,
    TeamCreate,
    TeamDetail,
    TeamRead,
    TeamUpdate,
)
