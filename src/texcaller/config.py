"""Configuration models, enums and constants for texcaller."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

MIN_RUNS = 2
DEFAULT_MAX_RUNS = 5

SOURCE_STEM = "texput"
WORKSPACE_PREFIX = "texcaller-temp-"

LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


class SourceFormat(str, Enum):
    TEX = "TeX"
    LATEX = "LaTeX"


class DestinationFormat(str, Enum):
    DVI = "DVI"
    PDF = "PDF"

    @property
    def extension(self) -> str:
        return f".{self.value.lower()}"


COMPILERS: dict[tuple[SourceFormat, DestinationFormat], str] = {
    (SourceFormat.TEX, DestinationFormat.DVI): "tex",
    (SourceFormat.TEX, DestinationFormat.PDF): "pdftex",
    (SourceFormat.LATEX, DestinationFormat.DVI): "latex",
    (SourceFormat.LATEX, DestinationFormat.PDF): "pdflatex",
}


class Settings(BaseModel):
    """Runtime settings sourced from environment variables."""

    model_config = ConfigDict(frozen=True)

    temp_root: Path | None = None
    workspace_prefix: str = WORKSPACE_PREFIX
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper() or "WARNING"
        if level not in LOG_LEVELS:
            expected = ", ".join(sorted(LOG_LEVELS))
            raise ValueError(f"Unknown log level '{value}', expected one of {expected}")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        # An empty TMPDIR counts as unset.
        tmpdir = os.getenv("TMPDIR")
        return cls(
            temp_root=Path(tmpdir) if tmpdir else None,
            log_level=os.getenv("TEXCALLER_LOG_LEVEL", "WARNING"),
        )
