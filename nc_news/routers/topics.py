from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.crud.topics import select_topics
from nc_news.crud.validation import count_topics
from nc_news.dependencies.database import get_session
from nc_news.dependencies.listing import Pagination, get_pagination

router = APIRouter(prefix="/api/topics", tags=["Topics"])


class TopicResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    slug: str
    description: str


class TopicListResponse(BaseModel):
    topics: list[TopicResponse]
    total_topics: int


@router.get("", response_model=TopicListResponse)
async def get_topics(
    pagination: Pagination = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
) -> TopicListResponse:
    topics = await select_topics(session, pagination.limit, pagination.page)
    return TopicListResponse(
        topics=[TopicResponse.model_validate(t) for t in topics],
        total_topics=await count_topics(session),
    )
