"""Configuration settings loaded from environment variables."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    """Snapshot testing settings loaded from environment variables."""

    # Store
    snapfile: str = Field(
        default="tests/.snapfile",
        description="Path of the snapshot file, relative to the working directory",
    )

    # Rendering
    color: Literal["auto", "always", "never"] = Field(
        default="auto",
        description="Colorize failure reports: auto (terminal only), always, never",
    )
    width: int = Field(
        default=80,
        ge=20,
        description="Line width used when pretty-printing produced values",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = {"extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance loaded from environment."""
    return Settings(
        snapfile=os.getenv("SNAPTEST_SNAPFILE", "tests/.snapfile"),
        color=os.getenv("SNAPTEST_COLOR", "auto"),  # type: ignore[arg-type]
        width=int(os.getenv("SNAPTEST_WIDTH", "80")),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
    )
