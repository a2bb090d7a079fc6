import logging
import sys
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from nc_news.config.config import DatabaseConfig

logger = logging.getLogger(__name__)

Base = declarative_base()


def _column_errors(table_name: str, table, inspector) -> list[str]:
    errors = []
    db_columns = {col["name"]: col for col in inspector.get_columns(table_name)}
    model_columns = {col.name: col for col in table.columns}

    for col_name in model_columns.keys() - db_columns.keys():
        errors.append(f"[{table_name}] column '{col_name}' missing from the database")
    for col_name in db_columns.keys() - model_columns.keys():
        errors.append(f"[{table_name}] column '{col_name}' missing from the model")

    for col_name in model_columns.keys() & db_columns.keys():
        model_nullable = model_columns[col_name].nullable
        db_nullable = db_columns[col_name]["nullable"]
        if model_nullable != db_nullable:
            errors.append(
                f"[{table_name}.{col_name}] nullable mismatch: "
                f"model={model_nullable}, database={db_nullable}"
            )
    return errors


def _foreign_key_errors(table_name: str, table, inspector) -> list[str]:
    """
    author -> users.username, article_id -> articles.article_id 같은 참조가
    DB에도 걸려 있는지 확인
    """
    model_refs = {
        (fk.parent.name, fk.column.table.name, fk.column.name)
        for fk in table.foreign_keys
    }
    db_refs = {
        (constrained, fk["referred_table"], referred)
        for fk in inspector.get_foreign_keys(table_name)
        for constrained, referred in zip(
            fk["constrained_columns"], fk["referred_columns"]
        )
    }
    return [
        f"[{table_name}.{column}] foreign key to {ref_table}.{ref_column} "
        f"missing from the database"
        for column, ref_table, ref_column in sorted(model_refs - db_refs)
    ]


def _validate_schema(sync_conn) -> list[str]:
    """
    모델 메타데이터와 실제 DB 스키마(컬럼, nullable, 외래키)를 비교하여
    불일치 항목을 반환합니다. 아직 없는 테이블은 create_all이 만들기 때문에 건너뜀
    """
    inspector = sa_inspect(sync_conn)
    existing_tables = set(inspector.get_table_names())

    errors = []
    for table_name, table in Base.metadata.tables.items():
        if table_name not in existing_tables:
            continue
        errors.extend(_column_errors(table_name, table, inspector))
        errors.extend(_foreign_key_errors(table_name, table, inspector))
    return errors


class Database:
    """
    engine과 session factory를 소유하는 데이터 접근 컨텍스트.
    앱마다 하나씩 만들어 `app.state.database`에 둡니다(전역 engine 없음).
    """

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self.engine = create_async_engine(config.dsn(), **config.engine_options())
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def startup(self) -> None:
        """서버 시작 시 스키마 검증 및 테이블 초기화를 수행합니다."""
        # 모든 모델을 import하여 Base.metadata에 등록
        import nc_news.models.article  # noqa: F401
        import nc_news.models.comment  # noqa: F401
        import nc_news.models.topic  # noqa: F401
        import nc_news.models.user  # noqa: F401

        async with self.engine.begin() as conn:
            errors = await conn.run_sync(_validate_schema)
            if errors:
                logger.error("Database schema does not match the model definitions:")
                for error in errors:
                    logger.error("  - %s", error)
                logger.error("Shutting down. Check the database schema.")
                sys.exit(1)

            # 존재하지 않는 테이블만 생성
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables initialised")

    async def shutdown(self) -> None:
        """서버 종료 시 connection pool을 반환합니다."""
        await self.engine.dispose()


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    `session: AsyncSession = Depends(get_session)`로 사용
    앱의 Database가 가진 connection pool 중 하나를 할당 받아 사용
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
