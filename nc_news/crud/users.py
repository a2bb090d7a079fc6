import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.crud.query import apply_page
from nc_news.exceptions import NotFound
from nc_news.models.user import User

logger = logging.getLogger(__name__)


async def select_users(
    session: AsyncSession, limit: int = 10, page: int = 1
) -> list[User]:
    stmt = apply_page(select(User).order_by(User.username.asc()), limit, page)
    result = await session.scalars(stmt)
    return list(result.all())


async def select_user_by_username(session: AsyncSession, username: str) -> User:
    user = await session.scalar(select(User).where(User.username == username))
    if user is None:
        logger.warning("User %s does not exist", username)
        raise NotFound("User does not exist")
    return user
