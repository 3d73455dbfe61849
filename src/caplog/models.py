import logging
from enum import IntEnum
from typing import Self

from pydantic import BaseModel, ConfigDict

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class Level(IntEnum):
    """Severity of a captured record, ordered the same way as stdlib levels."""

    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_levelno(cls, levelno: int) -> Self:
        """Map a stdlib level number onto the closest severity at or below it.

        CRITICAL has no counterpart of its own and is reported as ERROR.
        """
        for level in sorted(cls, reverse=True):
            if levelno >= level:
                return level
        return cls.TRACE

    @classmethod
    def parse(cls, value: str | int) -> Self:
        if isinstance(value, int):
            return cls.from_levelno(value)

        name = value.strip().upper()
        if name.isdigit():
            return cls.from_levelno(int(name))

        aliases = {
            "WARNING": cls.WARN,
            "ERR": cls.ERROR,
            "CRITICAL": cls.ERROR,
            "FATAL": cls.ERROR,
        }
        if name in aliases:
            return aliases[name]
        try:
            return cls[name]
        except KeyError:
            allowed = ", ".join(level.name.lower() for level in cls)
            raise ValueError(
                f"Unknown log level {value!r}. Use one of: {allowed}."
            ) from None


class LogEntry(BaseModel):
    """A single captured log record."""

    model_config = ConfigDict(frozen=True)

    level: Level
    message: str
    target: str | None = None

