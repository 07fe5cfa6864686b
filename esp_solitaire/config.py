"""Configuration management."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from esp_solitaire.logging.game_logger import GameLogConfig


class DisplayConfig(BaseModel):
    """Console display configuration."""

    prompt: str = "esp> "
    board_rows: int = Field(default=16, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class Config(BaseModel):
    """Root configuration."""

    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
