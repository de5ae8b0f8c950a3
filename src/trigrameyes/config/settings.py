"""Configuration management for trigrameyes.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/trigrameyes.yaml")


class GridConfig(BaseModel):
    tile_width: int = Field(default=18, gt=0, description="Trigram tile width in pixels")
    tile_height: int = Field(default=14, gt=0, description="Trigram tile height in pixels")
    left_padding: int = Field(default=3, ge=0, description="Pixels left of column 0")
    slot0_upper: float = Field(default=0.37, description="Ratios below this are slot 0")
    slot2_lower: float = Field(default=0.51, description="Ratios above this are slot 2")

    @model_validator(mode="after")
    def _check_thresholds(self) -> GridConfig:
        if not 0.0 < self.slot0_upper < self.slot2_lower < 1.0:
            raise ValueError(
                "slot thresholds must satisfy 0 < slot0_upper < slot2_lower < 1"
            )
        return self


class DecodeConfig(BaseModel):
    method: str | None = Field(default="unique_triangles")
    alphabet_path: str | None = Field(default=None)


class OutputConfig(BaseModel):
    print_grid: bool = Field(default=False)
    json_indent: int | None = Field(default=None, ge=0)
    annotate_dir: str | None = Field(default=None)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for the trigrameyes system.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "TRIGRAMEYES_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    grid: GridConfig = Field(default_factory=GridConfig)
    decode: DecodeConfig = Field(default_factory=DecodeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; environment must win over them
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)
