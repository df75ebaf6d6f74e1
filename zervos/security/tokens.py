"""Bearer token issue/verify (JWT) and the FastAPI auth dependency."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import HTTPException, Request
from jose import JWTError, jwt

from ..config import settings

_BEARER_RE = re.compile(r"^Bearer (.+)$")


def issue_token(user_id: int, email: str, *, expires_in: timedelta | None = None) -> str:
    expires_in = expires_in or timedelta(days=settings.jwt_expires_days)
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any] | None:
    """Return the token claims, or None when the signature or expiry is bad."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def require_user(request: Request) -> dict[str, Any]:
    """FastAPI dependency: authenticated caller's claims, else 401."""
    match = _BEARER_RE.match(request.headers.get("authorization", ""))
    if not match:
        raise HTTPException(status_code=401, detail="Missing token")
    claims = decode_token(match.group(1))
    if claims is None:
        raise HTTPException(status_code=401, detail="Invalid token")
    return claims
