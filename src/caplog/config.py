"""Settings controlling where and at what threshold logs are captured."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from caplog.models import Level

ENV_LEVEL = "CAPLOG_LEVEL"
ENV_LOGGER = "CAPLOG_LOGGER"


class CaptureSettings(BaseModel):
    """Resolved capture settings.

    Settings only take effect the first time the recorder is installed in a
    process; later registrations reuse the existing recorder.
    """

    model_config = ConfigDict(frozen=True)

    level: Level = Field(default=Level.TRACE)
    # An empty name attaches the recorder to the root logger.
    logger_name: str = Field(default="")

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> object:
        if isinstance(value, Level):
            return value
        if isinstance(value, (str, int)):
            return Level.parse(value)
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        raw_level = env.get(ENV_LEVEL, "").strip()
        if raw_level:
            try:
                values["level"] = Level.parse(raw_level)
            except ValueError as e:
                raise ValueError(f"Invalid {ENV_LEVEL} value: {e}") from e

        raw_logger = env.get(ENV_LOGGER)
        if raw_logger is not None:
            values["logger_name"] = raw_logger.strip()

        return cls(**values)
