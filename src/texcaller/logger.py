"""
Conversion logger.

Thin wrappers around loguru that prefix every message with [texcaller].
The library disables its own records on import; the CLI turns them back on
through setup_logger().
"""

from __future__ import annotations

import sys

from loguru import logger

CONTEXT_PREFIX = "[texcaller]"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}

logger.disable("texcaller")


def setup_logger(level: str = "WARNING") -> None:
    """Enable texcaller records and send them to stderr at the given level."""

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )
    logger.enable("texcaller")


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_conversion_start(command: str, source_size: int, max_runs: int, directory) -> None:
    _log_info(f"Converting {source_size} bytes with {command} (at most {max_runs} runs)")
    _log_debug(f"  Workspace: {directory}")


def log_run_result(outcome, aux_size: int | None) -> None:
    """Log one compiler run and the auxiliary snapshot taken after it."""

    if outcome.succeeded:
        aux = "no aux file" if aux_size is None else f"aux {aux_size} bytes"
        _log_debug(f"Run {outcome.run}: {outcome.command} exited cleanly, {aux}")
    elif outcome.signal is not None:
        _log_error(f"Run {outcome.run}: {outcome.command} killed by signal {outcome.signal}")
    else:
        _log_error(f"Run {outcome.run}: {outcome.command} exited with status {outcome.exit_status}")


def log_conversion_result(result) -> None:
    """Log the final ConversionResult; the compiler transcript goes to DEBUG raw."""

    summary, _, transcript = result.info.partition("\n\n")
    if result.succeeded:
        _log_info(summary)
        return

    _log_error(f"Conversion failed: {summary}")
    # raw=True keeps loguru from prefixing every transcript line
    if transcript:
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nCOMPILER LOG:\n{'=' * 80}\n{transcript}\n")
