import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import DataError, IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from nc_news.config.config import Settings, get_settings
from nc_news.dependencies.database import Database
from nc_news.exception_handler import (
    api_exception_handler,
    data_error_handler,
    http_exception_handler,
    integrity_error_handler,
    validation_exception_handler,
)
from nc_news.exceptions import ApiError
from nc_news.routers import api, articles, comments, topics, users

# logger 전역 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    database = Database(app.state.settings.database)
    await database.startup()
    app.state.database = database

    yield

    # shutdown
    await database.shutdown()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    설정을 받아 앱을 생성. 테스트는 별도 Settings(ex - SQLite)를 넘겨 격리된 앱을 만듦
    """
    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    app = FastAPI(title="NC News", lifespan=lifespan)
    app.state.settings = settings

    app.add_exception_handler(ApiError, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DataError, data_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api.router)
    app.include_router(topics.router)
    app.include_router(users.router)
    app.include_router(articles.router)
    app.include_router(comments.router)

    @app.get(
        "/health",
        tags=["Health Check"],
        summary="Health Check용 API. 서버가 정상적으로 동작하는지 확인할 수 있습니다.",
    )
    async def health_check() -> str:
        return "ok"

    return app


app = create_app()


def run() -> None:
    port = int(os.getenv("PORT", 9090))
    logger.info("Starting NC News on port %s", port)
    uvicorn.run("nc_news.main:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    run()
