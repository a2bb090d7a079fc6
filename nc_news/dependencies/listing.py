"""
목록 API 공통 query string.
`?limit=10&p=1` 페이지네이션, `?sortBy=created_at&orderBy=desc` 정렬
"""

from dataclasses import dataclass
from typing import Literal

from fastapi import Query

DEFAULT_LIMIT = 10
# MySQL INT 상한. id, 페이지 값이 이를 넘으면 DB 드라이버까지 가지 않고 400
MAX_INT = 2**31 - 1


@dataclass
class Pagination:
    limit: int
    page: int


@dataclass
class Sorting:
    sort_by: str
    order: Literal["asc", "desc"]


def get_pagination(
    limit: int = Query(
        default=DEFAULT_LIMIT, ge=1, le=MAX_INT, description="페이지당 개수"
    ),
    p: int = Query(default=1, ge=1, le=MAX_INT, description="페이지 번호(1부터 시작)"),
) -> Pagination:
    return Pagination(limit=limit, page=p)


def get_sorting(
    sort_by: str = Query(default="created_at", alias="sortBy"),
    order: Literal["asc", "desc"] = Query(default="desc", alias="orderBy"),
) -> Sorting:
    return Sorting(sort_by=sort_by, order=order)
