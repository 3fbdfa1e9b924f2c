import functools
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

# Levels known to both loguru and uvicorn
LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Config(BaseSettings):
    GREETING: str = "Hello World!\n"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: LogLevel = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@functools.lru_cache
def get_config() -> Config:
    return Config()
