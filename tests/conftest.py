from typing import AsyncGenerator

import httpx
import pytest
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.config.config import DatabaseConfig, Settings
from nc_news.main import create_app
from nc_news.seeds.seed import seed_database


@pytest.fixture
async def app(tmp_path) -> AsyncGenerator[FastAPI, None]:
    """
    테스트마다 새 SQLite 파일 DB로 앱을 띄우고 테스트 데이터셋을 넣습니다.
    실제 MySQL 없이 실행됩니다.
    """
    settings = Settings(
        database=DatabaseConfig(url=f"sqlite+aiosqlite:///{tmp_path / 'nc_news.db'}")
    )
    app = create_app(settings)
    async with LifespanManager(app):
        await seed_database(app.state.database)
        yield app


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def session(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    """API를 거치지 않고 crud 함수를 직접 호출할 때 사용하는 세션"""
    async with app.state.database.session() as session:
        yield session
