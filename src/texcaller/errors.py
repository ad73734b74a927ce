"""Error hierarchy for conversions.

Every failure is raised at its origin with a human-readable detail and ends
up, unchanged, in ``ConversionResult.error`` and ``ConversionResult.info``.
"""

from __future__ import annotations


class ConversionError(RuntimeError):
    """Base class for every failure reported by a conversion."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ArgumentError(ConversionError):
    """Raised for an unsupported format pair or a too small run ceiling."""


class ResourceError(ConversionError):
    """Raised when a filesystem or process resource cannot be used."""


class WorkspaceError(ResourceError):
    """Raised when the temporary workspace cannot be created."""


class FileTransferError(ResourceError):
    """Raised when a workspace file cannot be read or written."""


class SpawnError(ResourceError):
    """Raised when the compiler process cannot be executed at all."""


class ProcessError(ConversionError):
    """Raised when a compiler run exits non-zero or is killed by a signal."""

    def __init__(
        self,
        detail: str,
        *,
        command: str,
        exit_status: int | None = None,
        signal: int | None = None,
    ) -> None:
        super().__init__(detail)
        self.command = command
        self.exit_status = exit_status
        self.signal = signal


class ConvergenceTimeout(ConversionError):
    """Raised when the auxiliary file never stabilizes within the run ceiling."""

    def __init__(self, detail: str, *, max_runs: int) -> None:
        super().__init__(detail)
        self.max_runs = max_runs


class CleanupError(ConversionError):
    """Raised when the temporary workspace cannot be removed completely."""
