from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from sprocket_api.core.security import authenticate_admin, create_access_token
from sprocket_api.schemas.common import Token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


# PUBLIC_INTERFACE
@router.post(
    "/token",
    response_model=Token,
    summary="Issue access token",
    description="Exchange the club admin username/password (OAuth2 password form) for a bearer token.",
)
async def issue_token(form: OAuth2PasswordRequestForm = Depends()) -> Token:
    if not authenticate_admin(form.username, form.password):
        logger.warning("Rejected token request for user %s", form.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_access_token(form.username), token_type="bearer")
