import logging

from sqlalchemy import RowMapping, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.crud.query import SortOrder, apply_page, apply_sort
from nc_news.crud.validation import count_comments
from nc_news.exceptions import NotFound
from nc_news.models.comment import Comment

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "comment_id": Comment.comment_id,
    "author": Comment.author,
    "article_id": Comment.article_id,
    "votes": Comment.votes,
    "created_at": Comment.created_at,
    "body": Comment.body,
}


async def insert_comment(
    session: AsyncSession, author: str, body: str, article_id: int
) -> Comment:
    comment = Comment(author=author, body=body, article_id=article_id)
    session.add(comment)
    await session.commit()
    # server_default로 채워지는 created_at까지 다시 읽어옴
    await session.refresh(comment)
    logger.info("Comment %s created on article %s", comment.comment_id, article_id)
    return comment


async def select_comments(
    session: AsyncSession,
    article_id: int,
    sort_by: str = "created_at",
    order: SortOrder = "desc",
    limit: int = 10,
    page: int = 1,
) -> tuple[list[RowMapping], int]:
    """
    게시글의 댓글 목록과 전체 댓글 수(모든 게시글 합계)를 반환.
    페이지가 범위를 벗어나면 빈 목록. 게시글 존재 여부는 호출하는 쪽에서 확인함
    """
    stmt = select(
        Comment.comment_id,
        Comment.votes,
        Comment.created_at,
        Comment.author,
        Comment.body,
    ).where(Comment.article_id == article_id)
    stmt = apply_sort(stmt, SORT_COLUMNS, sort_by, order)
    stmt = apply_page(stmt, limit, page)

    comments = list((await session.execute(stmt)).mappings().all())
    total = await count_comments(session)
    return comments, total


async def select_comment_by_id(session: AsyncSession, comment_id: int) -> Comment:
    comment = await session.scalar(
        select(Comment)
        .where(Comment.comment_id == comment_id)
        .execution_options(populate_existing=True)
    )
    if comment is None:
        logger.warning("Comment %s not found", comment_id)
        raise NotFound("Comment Not Found")
    return comment


async def increment_comment_votes(
    session: AsyncSession, comment_id: int, inc_votes: int
) -> Comment:
    """
    `votes = votes + inc_votes` 단일 UPDATE 후 갱신된 댓글을 반환
    """
    result = await session.execute(
        update(Comment)
        .where(Comment.comment_id == comment_id)
        .values(votes=Comment.votes + inc_votes)
        .execution_options(synchronize_session=False)
    )
    updated = result.rowcount
    await session.commit()
    if updated == 0:
        logger.warning("Comment %s not found", comment_id)
        raise NotFound("Comment Not Found")
    return await select_comment_by_id(session, comment_id)


async def delete_comment(session: AsyncSession, comment_id: int) -> int:
    result = await session.execute(
        delete(Comment)
        .where(Comment.comment_id == comment_id)
        .execution_options(synchronize_session=False)
    )
    deleted = result.rowcount
    await session.commit()
    if deleted == 0:
        logger.warning("Comment %s not found", comment_id)
        raise NotFound("Comment Not Found")
    logger.info("Comment %s deleted", comment_id)
    return deleted
