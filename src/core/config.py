"""Application settings, read from environment variables (prefix CHECKERS_)"""

import logging
import os

from pydantic import BaseModel, field_validator

ENV_PREFIX = "CHECKERS_"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    log_level: str = "INFO"
    player_one_label: str = "Player one"
    player_two_label: str = "Player two"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_settings() -> Settings:
    """Pick up every CHECKERS_<FIELD> variable that is set; the rest keeps its default."""
    overrides = {
        name: os.environ[f"{ENV_PREFIX}{name.upper()}"]
        for name in Settings.model_fields
        if f"{ENV_PREFIX}{name.upper()}" in os.environ
    }
    return Settings(**overrides)


def configure_logging(settings: Settings) -> None:
    """Meant to be called once by whatever hosts the engine. Importing the engine never touches logging config."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
