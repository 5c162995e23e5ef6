from functools import lru_cache
import os
from typing import Any
from urllib.parse import urlsplit

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AppConfig(BaseModel):
    TESTING: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_LEVEL_FILE: str = "WARNING"
    LOG_FILE: str | None = None

    model_config = ConfigDict(extra="ignore")


class RequestConfig(BaseModel):
    APP_URL: str = "http://localhost"

    TEST_USER_AGENT: str = "testclient"
    TEST_REMOTE_ADDR: str = "127.0.0.1"
    TEST_REMOTE_PORT: int = Field(50000, gt=0)
    TEST_SERVER_PROTOCOL: str = "HTTP/1.1"

    TEST_ACCEPT: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    TEST_ACCEPT_LANGUAGE: str = "en-us,en;q=0.5"
    TEST_ACCEPT_CHARSET: str = "ISO-8859-1,utf-8;q=0.7,*;q=0.7"

    model_config = ConfigDict(extra="ignore")

    @field_validator("APP_URL", mode="before")
    @classmethod
    def parse_app_url(cls, v: Any) -> str:
        value = str(v).strip()
        parts = urlsplit(value)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ValueError(f"APP_URL must be an absolute http(s) URL, got {v!r}")
        return value.rstrip("/")

    @property
    def host(self) -> str:
        return urlsplit(self.APP_URL).hostname or "localhost"


class Config(BaseModel):
    app: AppConfig
    request: RequestConfig

    model_config = ConfigDict(extra="ignore")


@lru_cache
def get_settings() -> Config:
    """
    Cached settings factory. Override in tests via monkeypatching and ``cache_clear()``.
    """
    env_filename = ".env.test" if os.getenv("TESTING") == "true" else ".env"
    env_file_values = dotenv_values(env_filename)
    merged_env: dict[str, Any] = {
        k: v
        for k, v in {**env_file_values, **dict(os.environ)}.items()
        if v is not None
    }

    return Config(
        app=AppConfig(**merged_env),
        request=RequestConfig(**merged_env),
    )


config = get_settings()
