"""Account signup and login."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import User
from ..security.passwords import hash_password, needs_rehash, verify_password
from ..security.tokens import issue_token

logger = logging.getLogger(__name__)


class UserExistsError(Exception):
    pass


def _normalize(email: str) -> str:
    return email.strip().lower()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == _normalize(email)))
    return result.scalar_one_or_none()


async def signup(db: AsyncSession, email: str, password: str, name: str | None = None) -> User:
    if await get_user_by_email(db, email):
        raise UserExistsError(email)
    user = User(email=_normalize(email), name=name, password_hash=hash_password(password))
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("Created user %s", user.email)
    return user


async def login(db: AsyncSession, email: str, password: str) -> tuple[User, str] | None:
    """Verify credentials and issue a token. Returns None on bad credentials."""
    user = await get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        return None

    token = issue_token(user.id, user.email)
    # Token storage is best-effort; the caller still gets a valid token.
    try:
        if needs_rehash(user.password_hash):
            user.password_hash = hash_password(password)
        user.session_token = token
        await db.commit()
    except SQLAlchemyError:
        logger.warning("Could not store session token for %s", user.email, exc_info=True)
        await db.rollback()
        await db.refresh(user)
    return user, token
