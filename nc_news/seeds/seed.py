"""
테이블을 DROP + CREATE 한 뒤 데이터셋을 넣습니다.

    python -m nc_news.seeds.seed   # 또는 nc-news-seed

참조 관계 때문에 topics -> users -> articles -> comments 순서로 insert
"""

import asyncio
import logging
from types import ModuleType

from sqlalchemy import insert

from nc_news.config.config import get_settings
from nc_news.dependencies.database import Base, Database
from nc_news.models.article import Article
from nc_news.models.comment import Comment
from nc_news.models.topic import Topic
from nc_news.models.user import User
from nc_news.seeds import test_data

logger = logging.getLogger(__name__)


async def seed_database(database: Database, data: ModuleType = test_data) -> None:
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with database.session() as session:
        for model, rows in (
            (Topic, data.topics),
            (User, data.users),
            (Article, data.articles),
            (Comment, data.comments),
        ):
            # 한 행씩 insert해야 목록 순서대로 id가 매겨짐
            for row in rows:
                await session.execute(insert(model).values(**row))
            logger.info("Seeded %d rows into %s", len(rows), model.__tablename__)
        await session.commit()


async def _seed() -> None:
    database = Database(get_settings().database)
    try:
        await seed_database(database)
    finally:
        await database.shutdown()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    asyncio.run(_seed())


if __name__ == "__main__":
    main()
