"""Configuration settings for evaldash."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

METRICS_FILENAME = "metrics.jsonl"
DASHBOARD_FILENAME = "dashboard.html"


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or overrides.

    One data directory holds both the metric log and the rendered dashboard.
    """

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, populate_by_name=True
    )

    data_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "data",
        validation_alias="EVAL_DATA_DIR",
    )
    log_level: str = Field(default="WARNING", validation_alias="EVAL_LOG_LEVEL")
    evaluator_module: str = Field(
        default="proactivity_evaluator", validation_alias="EVAL_EVALUATOR_MODULE"
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def metrics_file(self) -> Path:
        return self.data_dir / METRICS_FILENAME

    @property
    def dashboard_file(self) -> Path:
        return self.data_dir / DASHBOARD_FILENAME


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the ``evaldash`` logger once.

    No handler is added when the root logger is already configured by the
    host application.

    Returns:
        The package logger.
    """
    logger = logging.getLogger("evaldash")
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
