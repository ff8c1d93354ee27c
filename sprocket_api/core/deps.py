from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from sprocket_api.core.security import decode_token
from sprocket_api.core.settings import get_app_settings
from sprocket_api.db.session import get_async_session
from sprocket_api.repositories.unit_of_work import UnitOfWork
from sprocket_api.services.teams import TeamService

logger = logging.getLogger(__name__)

# auto_error is off so that reads (and writes while auth is disabled) work without a header
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)


# PUBLIC_INTERFACE
async def get_team_service(
    session: AsyncSession = Depends(get_async_session),
) -> AsyncGenerator[TeamService, None]:
    """
    Yield a TeamService bound to a request-scoped unit of work.

    The unit of work rolls back if the route raises.
    """
    async with UnitOfWork(session) as uow:
        yield TeamService(uow)


# PUBLIC_INTERFACE
async def require_writer(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    """
    Guard mutating endpoints with a bearer token when AUTH_ENABLED is set.

    Returns:
        The token subject, or None when auth is disabled.
    Raises:
        HTTPException: 401 when the token is missing or invalid.
    """
    settings = get_app_settings()
    if not settings.AUTH_ENABLED:
        return None
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = decode_token(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    subject = payload.get("sub")
    if not subject:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return subject
