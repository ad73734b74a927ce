"""Conversion driver: run the engine until its auxiliary file stabilizes."""

from __future__ import annotations

from texcaller.compiler import run_compiler
from texcaller.config import DEFAULT_MAX_RUNS, DestinationFormat, Settings, SourceFormat
from texcaller.errors import (
    ArgumentError,
    CleanupError,
    ConversionError,
    ConvergenceTimeout,
    FileTransferError,
    WorkspaceError,
)
from texcaller.files import read_file, read_optional_file, write_file
from texcaller.logger import (
    _log_warning,
    log_conversion_result,
    log_conversion_start,
    log_run_result,
)
from texcaller.models import ConversionRequest, ConversionResult, Workspace
from texcaller.workspace import workspace


class ConvergenceLoop:
    """Repeatedly compile inside one workspace until the aux file stops changing.

    A missing aux file counts as empty, so a document that never writes one
    converges after the first run.
    """

    def __init__(self, current: Workspace, request: ConversionRequest, command: str) -> None:
        self.workspace = current
        self.request = request
        self.command = command
        self.runs = 0

    def run(self) -> bytes:
        write_file(self.workspace.source_path, self.request.source)

        previous_aux = b""
        for run in range(1, self.request.max_runs + 1):
            outcome = run_compiler(self.command, self.workspace.directory, run=run)
            self.runs = run
            if not outcome.succeeded:
                log_run_result(outcome, None)
                outcome.raise_for_status()

            aux = read_optional_file(self.workspace.aux_path)
            log_run_result(outcome, None if aux is None else len(aux))
            current_aux = aux or b""
            if current_aux == previous_aux:
                return read_file(self.workspace.destination_path)
            previous_aux = current_aux

        raise ConvergenceTimeout(
            f"Output didn't stabilize after {self.request.max_runs} runs.",
            max_runs=self.request.max_runs,
        )


def _append_log(message: str, current: Workspace) -> str:
    """Append the engine's log transcript to message, separated by a blank line."""

    try:
        log = read_optional_file(current.log_path)
    except FileTransferError as exc:
        _log_warning(f"Compiler log unavailable: {exc.detail}")
        return message
    if not log:
        return message

    transcript = log.decode("utf-8", errors="replace")
    return f"{message}\n\n{transcript}" if message else transcript


def _convert_in(current: Workspace, request: ConversionRequest, command: str) -> ConversionResult:
    loop = ConvergenceLoop(current, request, command)
    destination: bytes | None = None
    error: ConversionError | None = None

    try:
        destination = loop.run()
        message = (
            f"Generated {request.destination_format} ({len(destination)} bytes)"
            f" from {request.source_format} ({len(request.source)} bytes)"
            f" after {loop.runs} runs."
        )
    except ConversionError as exc:
        error = exc
        message = exc.detail

    return ConversionResult(
        destination=destination,
        info=_append_log(message, current),
        runs=loop.runs,
        error=error,
    )


def convert(
    source: bytes | str,
    source_format: SourceFormat | str,
    destination_format: DestinationFormat | str,
    max_runs: int = DEFAULT_MAX_RUNS,
    *,
    settings: Settings | None = None,
) -> ConversionResult:
    """Convert TeX or LaTeX source into a DVI or PDF document.

    Never raises for conversion failures: the outcome, including the typed
    error and the engine's log, is returned as a ConversionResult.
    """

    if isinstance(source, str):
        source = source.encode("utf-8")
    request = ConversionRequest(
        source=source,
        source_format=source_format,
        destination_format=destination_format,
        max_runs=max_runs,
    )

    try:
        command = request.validate_arguments()
    except ArgumentError as exc:
        rejected = ConversionResult(info=exc.detail, error=exc)
        log_conversion_result(rejected)
        return rejected

    result: ConversionResult | None = None
    try:
        with workspace(DestinationFormat(request.destination_format), settings) as current:
            log_conversion_start(command, len(request.source), request.max_runs, current.directory)
            result = _convert_in(current, request, command)
    except WorkspaceError as exc:
        result = ConversionResult(info=exc.detail, error=exc)
    except CleanupError as exc:
        # Teardown failure replaces the result and drops the destination.
        result = ConversionResult(info=exc.detail, runs=result.runs if result else 0, error=exc)

    log_conversion_result(result)
    return result
