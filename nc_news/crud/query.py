"""
목록 조회 쿼리에 공통으로 붙는 정렬/페이지네이션 helper
"""

from typing import Literal, Mapping

from sqlalchemy import Select
from sqlalchemy.sql import ColumnElement

from nc_news.exceptions import BadRequest

SortOrder = Literal["asc", "desc"]


def page_offset(limit: int, page: int) -> int:
    return (page - 1) * limit


def apply_sort(
    stmt: Select,
    columns: Mapping[str, ColumnElement],
    sort_by: str,
    order: SortOrder,
) -> Select:
    """
    `sort_by`는 `columns`에 있는 이름만 허용. 없는 컬럼이면 BadRequest
    """
    column = columns.get(sort_by)
    if column is None:
        raise BadRequest()
    if order == "asc":
        return stmt.order_by(column.asc())
    if order == "desc":
        return stmt.order_by(column.desc())
    raise BadRequest()


def apply_page(stmt: Select, limit: int, page: int) -> Select:
    return stmt.limit(limit).offset(page_offset(limit, page))
