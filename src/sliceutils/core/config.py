import logging
import os
from typing import Mapping, Optional
from pydantic import BaseModel, field_validator

__all__ = ["DEFAULT_LOG_FORMAT", "Settings", "normalize_level"]

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def normalize_level(value: str | int) -> str:
    """Map a log level name or number to its canonical stdlib name.

    Every name known to :mod:`logging` is accepted case-insensitively,
    including aliases such as ``WARN`` and ``FATAL``, as are the numeric
    values of those levels (``"10"`` becomes ``"DEBUG"``).

    Raises:
        ValueError: If ``value`` names no stdlib level.
    """
    levels = logging.getLevelNamesMapping()
    level = str(value).strip().upper()
    if level.isdigit() and int(level) in levels.values():
        return logging.getLevelName(int(level))
    if level in levels:
        return logging.getLevelName(levels[level])
    raise ValueError(
        f"LOG_LEVEL must be one of {', '.join(sorted(levels))} or their numeric values. "
        f"Found '{value}'."
    )


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = DEFAULT_LOG_FORMAT

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_level(cls, value: str | int) -> str:
        return normalize_level(value)

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.LOG_LEVEL]

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ

        values = {}
        level = environ.get("SLICEUTILS_LOG_LEVEL") or environ.get("LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level
        log_format = environ.get("SLICEUTILS_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        return cls(**values)
