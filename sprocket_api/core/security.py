from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from sprocket_api.core.settings import get_app_settings

# pbkdf2 keeps hashing in pure Python (no native bcrypt build needed in the image)
_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


# PUBLIC_INTERFACE
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored passlib hash."""
    return _pwd_context.verify(plain_password, hashed_password)


# PUBLIC_INTERFACE
def get_password_hash(password: str) -> str:
    """Hash a password for storage in ADMIN_PASSWORD_HASH."""
    return _pwd_context.hash(password)


# PUBLIC_INTERFACE
def create_access_token(
    subject: str,
    expires_minutes: Optional[int] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> str:
    """Create a signed access token for the given subject (username)."""
    settings = get_app_settings()
    now = datetime.now(tz=timezone.utc)
    expire = now + timedelta(minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload: Dict[str, Any] = {"sub": subject, "exp": expire, "iat": now, "type": "access"}
    if extra:
        payload.update(extra)
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


# PUBLIC_INTERFACE
def decode_token(token: str) -> Dict[str, Any]:
    """Decode and validate a JWT; raises JWTError if invalid/expired."""
    settings = get_app_settings()
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])


# PUBLIC_INTERFACE
def get_token_subject(token: str) -> Optional[str]:
    """Return 'sub' from a token or None when token is invalid."""
    try:
        payload = decode_token(token)
        return payload.get("sub")
    except JWTError:
        return None


# PUBLIC_INTERFACE
def authenticate_admin(username: str, password: str) -> bool:
    """Check credentials against the configured club admin account."""
    settings = get_app_settings()
    if not settings.ADMIN_PASSWORD_HASH:
        return False
    if username != settings.ADMIN_USERNAME:
        return False
    return verify_password(password, settings.ADMIN_PASSWORD_HASH)
