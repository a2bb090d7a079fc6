from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.crud.articles import (
    increment_article_votes,
    select_article_by_id,
    select_articles,
)
from nc_news.crud.validation import (
    check_author_exists,
    check_topic_exists,
    count_articles,
)
from nc_news.dependencies.database import get_session
from nc_news.dependencies.listing import (
    MAX_INT,
    Pagination,
    Sorting,
    get_pagination,
    get_sorting,
)

router = APIRouter(prefix="/api/articles", tags=["Articles"])


class ArticleVotesRequest(BaseModel):
    # 게시글은 inc_votes가 없으면 변경 없이 현재 상태를 반환
    inc_votes: int = Field(default=0, strict=True, ge=-MAX_INT, le=MAX_INT)


class ArticleSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    article_id: int
    title: str
    topic: str
    author: str
    votes: int
    created_at: datetime
    comment_count: int


class ArticleResponse(ArticleSummary):
    body: str


class ArticleListResponse(BaseModel):
    articles: list[ArticleSummary]
    total_articles: int


class ArticleDetailResponse(BaseModel):
    article: ArticleResponse
    total_articles: int


class ArticleUpdateResponse(BaseModel):
    article: ArticleResponse


@router.get("", response_model=ArticleListResponse)
async def get_articles(
    author: Optional[str] = Query(default=None),
    topic: Optional[str] = Query(default=None),
    sorting: Sorting = Depends(get_sorting),
    pagination: Pagination = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
) -> ArticleListResponse:
    # 필터 대상이 없으면 빈 목록이 아니라 404
    if author is not None:
        await check_author_exists(session, author)
    if topic is not None:
        await check_topic_exists(session, topic)

    articles = await select_articles(
        session,
        sort_by=sorting.sort_by,
        order=sorting.order,
        limit=pagination.limit,
        page=pagination.page,
        author=author,
        topic=topic,
    )
    return ArticleListResponse(
        articles=[ArticleSummary.model_validate(dict(a)) for a in articles],
        total_articles=await count_articles(session, author=author, topic=topic),
    )


@router.get("/{article_id}", response_model=ArticleDetailResponse)
async def get_article(
    article_id: int = Path(le=MAX_INT),
    session: AsyncSession = Depends(get_session),
) -> ArticleDetailResponse:
    article = await select_article_by_id(session, article_id)
    return ArticleDetailResponse(
        article=ArticleResponse.model_validate(dict(article)),
        total_articles=await count_articles(session),
    )


@router.patch("/{article_id}", response_model=ArticleUpdateResponse)
async def patch_article(
    article_id: int = Path(le=MAX_INT),
    body: Optional[ArticleVotesRequest] = None,
    session: AsyncSession = Depends(get_session),
) -> ArticleUpdateResponse:
    if body is None or body.inc_votes == 0:
        article = await select_article_by_id(session, article_id)
    else:
        article = await increment_article_votes(session, article_id, body.inc_votes)
    return ArticleUpdateResponse(article=ArticleResponse.model_validate(dict(article)))
