from datetime import datetime

from fastapi import APIRouter, Body, Depends, Path, Response
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.crud.comments import (
    delete_comment,
    increment_comment_votes,
    insert_comment,
    select_comments,
)
from nc_news.crud.validation import check_article_exists, check_author_exists
from nc_news.dependencies.database import get_session
from nc_news.dependencies.listing import (
    MAX_INT,
    Pagination,
    Sorting,
    get_pagination,
    get_sorting,
)

router = APIRouter(prefix="/api", tags=["Comments"])


class WriteCommentRequest(BaseModel):
    username: str = Field(min_length=1)
    body: str = Field(min_length=1)


class CommentVotesRequest(BaseModel):
    # 게시글과 달리 댓글은 inc_votes가 필수
    inc_votes: int = Field(strict=True, ge=-MAX_INT, le=MAX_INT)


class CommentInArticle(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comment_id: int
    votes: int
    created_at: datetime
    author: str
    body: str


class CommentResponse(CommentInArticle):
    article_id: int


class CommentListResponse(BaseModel):
    comments: list[CommentInArticle]
    total_comments: int


class CommentEnvelope(BaseModel):
    comment: CommentResponse


@router.get("/articles/{article_id}/comments", response_model=CommentListResponse)
async def get_comments(
    article_id: int = Path(le=MAX_INT),
    sorting: Sorting = Depends(get_sorting),
    pagination: Pagination = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
) -> CommentListResponse:
    # 게시글이 없으면 404, 게시글은 있는데 페이지가 비어 있으면 빈 목록
    await check_article_exists(session, article_id)
    comments, total = await select_comments(
        session,
        article_id,
        sort_by=sorting.sort_by,
        order=sorting.order,
        limit=pagination.limit,
        page=pagination.page,
    )
    return CommentListResponse(
        comments=[CommentInArticle.model_validate(dict(c)) for c in comments],
        total_comments=total,
    )


@router.post(
    "/articles/{article_id}/comments",
    response_model=CommentEnvelope,
    status_code=201,
)
async def post_comment(
    article_id: int = Path(le=MAX_INT),
    body: WriteCommentRequest = Body(),
    session: AsyncSession = Depends(get_session),
) -> CommentEnvelope:
    await check_article_exists(session, article_id)
    await check_author_exists(session, body.username)

    comment = await insert_comment(
        session, author=body.username, body=body.body, article_id=article_id
    )
    return CommentEnvelope(comment=CommentResponse.model_validate(comment))


@router.patch("/comments/{comment_id}", response_model=CommentEnvelope)
async def patch_comment(
    comment_id: int = Path(le=MAX_INT),
    body: CommentVotesRequest = Body(),
    session: AsyncSession = Depends(get_session),
) -> CommentEnvelope:
    comment = await increment_comment_votes(session, comment_id, body.inc_votes)
    return CommentEnvelope(comment=CommentResponse.model_validate(comment))


@router.delete("/comments/{comment_id}", status_code=204)
async def remove_comment(
    comment_id: int = Path(le=MAX_INT),
    session: AsyncSession = Depends(get_session),
) -> Response:
    await delete_comment(session, comment_id)
    return Response(status_code=204)
