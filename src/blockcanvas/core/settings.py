"""Centralized configuration using Pydantic Settings (v2).

`load_settings()` returns a cached `Settings` instance read from:
- Real environment variables (highest precedence)
- `.env` / `.env.local` files in the working directory
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    log_level : LogLevelName
        Level applied by `get_logger()`; maps from `LOG_LEVEL`.
    strict_tiling : bool
        When true, `blockcanvas check` fails on composite blocks whose leaves
        do not tile them. Maps from `BLOCKCANVAS_STRICT_TILING`.
    """

    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    strict_tiling: bool = Field(default=True, alias="BLOCKCANVAS_STRICT_TILING")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests can force a rebuild via `load_settings.cache_clear()` after
    mutating `os.environ`.
    """
    return Settings()


def get_logger(name: str = "blockcanvas") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger


__all__ = ["LogLevelName", "Settings", "get_logger", "load_settings"]
