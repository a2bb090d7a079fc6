from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.crud.query import apply_page
from nc_news.models.topic import Topic


async def select_topics(
    session: AsyncSession, limit: int = 10, page: int = 1
) -> list[Topic]:
    stmt = apply_page(select(Topic).order_by(Topic.slug.asc()), limit, page)
    result = await session.scalars(stmt)
    return list(result.all())
