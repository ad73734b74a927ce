"""Domain models used by texcaller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from texcaller.compiler import compiler_for
from texcaller.config import MIN_RUNS, SOURCE_STEM, DestinationFormat
from texcaller.errors import ArgumentError, ConversionError


class ConversionRequest(BaseModel):
    """Source bytes plus the requested formats and run ceiling.

    Formats are kept as plain strings so that an unsupported pair is
    reported through ``validate_arguments`` instead of failing construction.
    """

    model_config = ConfigDict(frozen=True)

    source: bytes
    source_format: str
    destination_format: str
    max_runs: int

    @field_validator("source_format", "destination_format", mode="before")
    @classmethod
    def unwrap_enum(cls, value: object) -> object:
        if isinstance(value, Enum):
            return value.value
        return value

    @property
    def command(self) -> str:
        return compiler_for(self.source_format, self.destination_format)

    def validate_arguments(self) -> str:
        """Check the format pair, then the run ceiling; return the compiler."""

        command = self.command
        if self.max_runs < MIN_RUNS:
            raise ArgumentError(
                f"Argument max_runs is {self.max_runs}, but must be >= {MIN_RUNS}."
            )
        return command


@dataclass(frozen=True)
class Workspace:
    """A private temporary directory and the canonical files inside it."""

    directory: Path
    source_path: Path
    aux_path: Path
    log_path: Path
    destination_path: Path

    @classmethod
    def at(cls, directory: Path, destination_format: DestinationFormat) -> "Workspace":
        return cls(
            directory=directory,
            source_path=directory / f"{SOURCE_STEM}.tex",
            aux_path=directory / f"{SOURCE_STEM}.aux",
            log_path=directory / f"{SOURCE_STEM}.log",
            destination_path=directory / f"{SOURCE_STEM}{destination_format.extension}",
        )


class ConversionResult(BaseModel):
    """Final outcome returned by convert."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    destination: bytes | None = None
    info: str
    runs: int = 0
    error: ConversionError | None = None

    @property
    def succeeded(self) -> bool:
        return self.destination is not None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
