from __future__ import annotations

import logging
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WriterAppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GMW_", extra="ignore")

    # choose process impl
    runner_impl: Literal["subprocess", "dryrun"] = "subprocess"

    # None keeps the blocking behaviour: a hung gmetric stalls the batch
    timeout_s: float | None = None

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level
