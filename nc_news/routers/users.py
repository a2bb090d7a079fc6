from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.crud.users import select_user_by_username, select_users
from nc_news.crud.validation import count_users
from nc_news.dependencies.database import get_session
from nc_news.dependencies.listing import Pagination, get_pagination

router = APIRouter(prefix="/api/users", tags=["Users"])


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    username: str
    avatar_url: str
    name: str


class UserListResponse(BaseModel):
    users: list[UserResponse]
    total_users: int


class UserDetailResponse(BaseModel):
    user: UserResponse
    total_users: int


@router.get("", response_model=UserListResponse)
async def get_users(
    pagination: Pagination = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
) -> UserListResponse:
    users = await select_users(session, pagination.limit, pagination.page)
    return UserListResponse(
        users=[UserResponse.model_validate(u) for u in users],
        total_users=await count_users(session),
    )


@router.get("/{username}", response_model=UserDetailResponse)
async def get_user(
    username: str,
    session: AsyncSession = Depends(get_session),
) -> UserDetailResponse:
    user = await select_user_by_username(session, username)
    return UserDetailResponse(
        user=UserResponse.model_validate(user),
        total_users=await count_users(session),
    )
