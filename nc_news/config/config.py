from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseModel):
    driver: str = "mysql+asyncmy"
    host: str = "localhost"
    user: str = "root"
    passwd: str = ""
    port: int = 3306
    db: str = "nc_news"
    # 지정하면 위 항목으로 조합한 DSN 대신 사용 (ex - sqlite+aiosqlite:///./nc_news.db)
    url: Optional[str] = None

    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 0
    pool_timeout: int = 600

    def dsn(self) -> str:
        if self.url:
            return self.url
        return "{driver}://{user}:{passwd}@{host}:{port}/{db}?charset=utf8mb4".format(
            driver=self.driver,
            user=self.user,
            passwd=self.passwd,
            host=self.host,
            port=self.port,
            db=self.db,
        )

    def engine_options(self) -> dict[str, Any]:
        """
        create_async_engine에 넘길 옵션. SQLite는 connection pool 크기 옵션을 받지 않음
        """
        options: dict[str, Any] = {"echo": self.echo}
        if self.dsn().startswith("sqlite"):
            return options
        options.update(
            pool_size=self.pool_size,
            max_overflow=self.max_overflow,
            pool_pre_ping=True,
            pool_timeout=self.pool_timeout,
        )
        return options


class Settings(BaseSettings):
    """
    기본 Configuration
    """

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file="nc_news/config/.env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache
def get_settings():
    return Settings()
