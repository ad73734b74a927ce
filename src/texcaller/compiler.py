"""Run TeX engines inside a conversion workspace."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from texcaller.config import COMPILERS, SOURCE_STEM, DestinationFormat, SourceFormat
from texcaller.errors import ArgumentError, ProcessError, SpawnError
from texcaller.logger import _log_debug

COMPILER_FLAGS = (
    "-interaction=batchmode",
    "-halt-on-error",
    "-no-shell-escape",
    "-file-line-error",
)


def compiler_for(source_format: str, destination_format: str) -> str:
    """Return the engine that turns source_format into destination_format."""

    try:
        pair = (SourceFormat(source_format), DestinationFormat(destination_format))
    except ValueError:
        pair = None
    if pair not in COMPILERS:
        raise ArgumentError(
            f'Unable to convert from "{source_format}" to "{destination_format}".'
        )
    return COMPILERS[pair]


@dataclass(frozen=True)
class CompilerInvocation:
    """Child process configuration: fixed flags, workspace cwd, detached streams."""

    command: str
    cwd: Path
    argv: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "argv", (self.command, *COMPILER_FLAGS, f"{SOURCE_STEM}.tex"))

    def run_kwargs(self) -> dict:
        return {
            "cwd": self.cwd,
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
            "check": False,
        }


@dataclass(frozen=True)
class RunOutcome:
    """How one compiler run terminated."""

    command: str
    run: int
    returncode: int

    @property
    def signal(self) -> int | None:
        # subprocess reports death by signal N as returncode -N
        return -self.returncode if self.returncode < 0 else None

    @property
    def exit_status(self) -> int | None:
        return self.returncode if self.returncode >= 0 else None

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def raise_for_status(self) -> None:
        if self.signal is not None:
            raise ProcessError(
                f'Command "{self.command}" was terminated by signal {self.signal}.',
                command=self.command,
                signal=self.signal,
            )
        if self.returncode != 0:
            raise ProcessError(
                f'Command "{self.command}" terminated with exit status {self.returncode}.',
                command=self.command,
                exit_status=self.returncode,
            )


def run_compiler(command: str, work_dir: Path, run: int = 1) -> RunOutcome:
    """Run command once in work_dir and wait for it without a timeout."""

    invocation = CompilerInvocation(command=command, cwd=work_dir)
    _log_debug(f"Run {run}: {' '.join(invocation.argv)}")
    try:
        process = subprocess.run(list(invocation.argv), **invocation.run_kwargs())
    except OSError as exc:
        raise SpawnError(f'Unable to execute command "{command}": {exc.strerror or exc}.') from exc
    return RunOutcome(command=command, run=run, returncode=process.returncode)
