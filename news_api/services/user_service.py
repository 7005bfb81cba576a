"""
User service: read-only access to the users table.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import NotFound
from news_api.models import User


def _user_to_dict(user: User) -> dict:
    return {
        "username": user.username,
        "name": user.name,
        "avatar_url": user.avatar_url,
    }


async def get_users(db: AsyncSession) -> list[dict]:
    """Return all users ordered by username."""
    result = await db.execute(select(User).order_by(User.username))
    return [_user_to_dict(u) for u in result.scalars().all()]


async def get_user(db: AsyncSession, username: str) -> dict:
    """Return the user identified by *username*, or raise ``NotFound``."""
    user = await db.get(User, username)
    if user is None:
        raise NotFound("not found")
    return _user_to_dict(user)
