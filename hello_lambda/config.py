import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Handler settings loaded from environment."""

    # Service
    service_name: str = "hello-world"
    stage: str = "dev"

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
