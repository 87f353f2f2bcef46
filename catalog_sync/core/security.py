from typing import Optional

import bcrypt
from fastapi import Header, HTTPException, Request, status

from catalog_sync.core.config import settings
from catalog_sync.core.logging import get_logger

logger = get_logger(__name__)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # malformed hash in configuration
        logger.error("auth.password_hash_invalid")
        return False


def verify_credentials(username: str, password: str) -> bool:
    if username != settings.AUTH_USER:
        return False
    return verify_password(password, settings.AUTH_PASSWORD_HASH)


async def _body_credentials(request: Request):
    try:
        body = await request.json()
    except ValueError:
        return None, None
    if not isinstance(body, dict):
        return None, None
    return body.get("username"), body.get("password")


async def require_credentials(
    request: Request,
    username: Optional[str] = Header(None),
    password: Optional[str] = Header(None),
) -> str:
    """Dependency guarding the bulk routes; headers win over body fields."""
    if not username or not password:
        body_username, body_password = await _body_credentials(request)
        username = username or body_username
        password = password or body_password

    if not username or not password:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication headers",
        )

    if not isinstance(username, str) or not isinstance(password, str) or not verify_credentials(username, password):
        logger.warning("auth.invalid_credentials", username=str(username))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    return username
