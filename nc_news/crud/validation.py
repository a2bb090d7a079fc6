"""
목록 조회 전에 필터 값이 실제로 존재하는지 확인하는 함수와
응답의 `total_*` 값을 위한 count 쿼리.

"필터에 맞는 결과가 없음"(200, 빈 목록)과 "존재하지 않는 대상으로 필터링"(404)을
구분하기 위해 사용함
"""

import logging
from typing import Optional

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.exceptions import NotFound
from nc_news.models.article import Article
from nc_news.models.comment import Comment
from nc_news.models.topic import Topic
from nc_news.models.user import User

logger = logging.getLogger(__name__)


async def author_exists(session: AsyncSession, username: str) -> bool:
    return bool(
        await session.scalar(select(exists().where(User.username == username)))
    )


async def topic_exists(session: AsyncSession, slug: str) -> bool:
    return bool(await session.scalar(select(exists().where(Topic.slug == slug))))


async def article_exists(session: AsyncSession, article_id: int) -> bool:
    return bool(
        await session.scalar(select(exists().where(Article.article_id == article_id)))
    )


async def check_author_exists(session: AsyncSession, username: str) -> None:
    if not await author_exists(session, username):
        logger.warning("Author %s does not exist", username)
        raise NotFound("Author Does not Exist")


async def check_topic_exists(session: AsyncSession, slug: str) -> None:
    if not await topic_exists(session, slug):
        logger.warning("Topic %s does not exist", slug)
        raise NotFound("Topic Does not Exist")


async def check_article_exists(session: AsyncSession, article_id: int) -> None:
    if not await article_exists(session, article_id):
        logger.warning("Article %s not found", article_id)
        raise NotFound("Article Not Found")


async def count_topics(session: AsyncSession) -> int:
    return await session.scalar(select(func.count()).select_from(Topic))


async def count_users(session: AsyncSession) -> int:
    return await session.scalar(select(func.count()).select_from(User))


async def count_articles(
    session: AsyncSession,
    author: Optional[str] = None,
    topic: Optional[str] = None,
) -> int:
    stmt = select(func.count()).select_from(Article)
    if author is not None:
        stmt = stmt.where(Article.author == author)
    if topic is not None:
        stmt = stmt.where(Article.topic == topic)
    return await session.scalar(stmt)


async def count_comments(
    session: AsyncSession, article_id: Optional[int] = None
) -> int:
    stmt = select(func.count()).select_from(Comment)
    if article_id is not None:
        stmt = stmt.where(Comment.article_id == article_id)
    return await session.scalar(stmt)
