from __future__ import annotations

import sys
import time
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

# Library code logs under this name; sinks only see it after setup_logging()
PACKAGE_NAME = "mdi_icons"


def _should_log_resource(record) -> bool:
    """Filter per-resource open/miss logs - only show in TRACE mode."""
    tags = record["extra"].get("tags", [])

    if "resource" in tags:
        return record["level"].no <= logger.level("TRACE").no

    return True


def _combined_filter(record) -> bool:
    """Combined filter for all log suppression rules."""
    return _should_log_resource(record)


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    log_dir: Path | None = None,
) -> Logger:
    """
    Setup console logging and an optional rotating file log.

    Logging Tiers:
    - ERROR: Missing or unreadable icons reported by the CLI
    - INFO: Command results, verification summaries
    - DEBUG: Icon lookups, parsed path lengths
    - TRACE: Every resource open/miss

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging (very verbose)
        log_dir: Directory for icons.log (no file sink when omitted)
    """
    logger.remove()
    logger.configure(extra={"job_id": "-", "tags": [], "source": "APP"})
    logger.enable(PACKAGE_NAME)

    if trace:
        level = "TRACE"
    elif debug:
        level = "DEBUG"
    else:
        level = "INFO"

    # SINK 1: Console (stderr) - User-facing, filtered
    logger.add(
        sys.stderr,
        level=level,
        backtrace=False,
        diagnose=False,
        filter=_combined_filter,
        colorize=True,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[source]: <10}</cyan> | "
            "{message}"
        ),
    )

    # SINK 2: File log - same threshold, unfiltered when tracing
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "icons.log",
            level=level,
            rotation="1 MB",
            retention="7 days",
            backtrace=trace,
            diagnose=False,
            filter=None if trace else _combined_filter,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{extra[source]: <10} | "
                "{extra[job_id]: <15} | "
                "{message}"
            ),
        )

    return logger


def get_logger(
    *,
    job_id: str | None = None,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        job_id: Job identifier for tracking operations
        tags: Tags for filtering (e.g., ["icons"])
        source: Source component (e.g., "icons", "cli")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if job_id is not None:
        extras["job_id"] = job_id
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


@contextmanager
def operation_context(operation: str, **details):
    """
    Context manager for tracking operations with automatic timing.

    Logs operation start, completion, and failure with duration tracking.
    Exceptions are re-raised.

    Example:
        with operation_context("check", icons=32) as log:
            log.debug("Resolving icons")
    """
    job_id = f"{operation}-{uuid.uuid4().hex[:8]}"

    with logger.contextualize(job_id=job_id, operation=operation, **details):
        start_time = time.time()
        log = logger.bind(source=operation, job_id=job_id, tags=[operation])

        log.info(f"{operation.capitalize()} started")

        try:
            yield log
            duration = time.time() - start_time
            log.success(
                f"{operation.capitalize()} completed", duration_seconds=round(duration, 3)
            )
        except Exception as e:
            duration = time.time() - start_time
            log.error(
                f"{operation.capitalize()} failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_seconds=round(duration, 3),
            )
            raise


class LoggerFactory:
    """
    Factory for creating component loggers with automatic context.
    """

    @staticmethod
    def for_icons() -> Logger:
        """Logger for icon lookup and parsing."""
        return logger.bind(source="icons", tags=["icons"])

    @staticmethod
    def for_resources() -> Logger:
        """Logger for resource provider access."""
        return logger.bind(source="resources", tags=["icons", "resource"])

    @staticmethod
    def for_cli() -> Logger:
        """Logger for command line operations."""
        return logger.bind(source="cli", tags=["cli"])


# Silent until an application opts in via setup_logging()
logger.disable(PACKAGE_NAME)
