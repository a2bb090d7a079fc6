import logging
from typing import Optional

from sqlalchemy import RowMapping, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.crud.query import SortOrder, apply_page, apply_sort
from nc_news.exceptions import NotFound
from nc_news.models.article import Article
from nc_news.models.comment import Comment

logger = logging.getLogger(__name__)

comment_count = func.count(Comment.comment_id).label("comment_count")

SORT_COLUMNS = {
    "article_id": Article.article_id,
    "title": Article.title,
    "topic": Article.topic,
    "author": Article.author,
    "votes": Article.votes,
    "created_at": Article.created_at,
    "comment_count": comment_count,
}

_SUMMARY_COLUMNS = (
    Article.author,
    Article.title,
    Article.article_id,
    Article.topic,
    Article.created_at,
    Article.votes,
)


def _with_comment_count(*columns):
    """게시글 컬럼에 댓글 수(comment_count)를 붙인 SELECT"""
    return (
        select(*columns, comment_count)
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .group_by(Article.article_id)
    )


async def select_article_by_id(session: AsyncSession, article_id: int) -> RowMapping:
    stmt = _with_comment_count(*_SUMMARY_COLUMNS, Article.body).where(
        Article.article_id == article_id
    )
    article = (await session.execute(stmt)).mappings().first()
    if article is None:
        logger.warning("Article %s not found", article_id)
        raise NotFound("Article Not Found")
    return article


async def select_articles(
    session: AsyncSession,
    sort_by: str = "created_at",
    order: SortOrder = "desc",
    limit: int = 10,
    page: int = 1,
    author: Optional[str] = None,
    topic: Optional[str] = None,
) -> list[RowMapping]:
    stmt = _with_comment_count(*_SUMMARY_COLUMNS)
    if author is not None:
        stmt = stmt.where(Article.author == author)
    if topic is not None:
        stmt = stmt.where(Article.topic == topic)

    stmt = apply_sort(stmt, SORT_COLUMNS, sort_by, order)
    stmt = apply_page(stmt, limit, page)
    result = await session.execute(stmt)
    return list(result.mappings().all())


async def increment_article_votes(
    session: AsyncSession, article_id: int, inc_votes: int
) -> RowMapping:
    """
    `votes = votes + inc_votes` 단일 UPDATE 후 갱신된 게시글을 반환
    """
    result = await session.execute(
        update(Article)
        .where(Article.article_id == article_id)
        .values(votes=Article.votes + inc_votes)
    )
    updated = result.rowcount
    await session.commit()
    if updated == 0:
        logger.warning("Article %s not found", article_id)
        raise NotFound("Article Not Found")
    return await select_article_by_id(session, article_id)
