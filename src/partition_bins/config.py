"""Settings for partition bins, loaded from YAML.

Example ``settings.yaml``::

    log_level: DEBUG
    row_columns:
      Partition: id
      Cost: cost
      Sites: sites
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _default_row_columns() -> dict[str, str]:
    return {"partition": "id", "cost": "cost", "sites": "sites"}


class BinSettings(BaseModel):
    """Tuneable parameters for rendering and monitoring bins."""

    log_level: str = "INFO"
    row_columns: dict[str, str] = Field(default_factory=_default_row_columns)
    telegram_chat_id: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(path: Path | str | None = None) -> BinSettings:
    """
    Load settings from a YAML file.

    Args:
        path: YAML file to read; None returns the defaults

    Returns:
        Validated BinSettings

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document is not a mapping
    """
    if path is None:
        return BinSettings()

    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)

    if data is None:
        return BinSettings()
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return BinSettings(**data)


def configure_logging(settings: BinSettings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
