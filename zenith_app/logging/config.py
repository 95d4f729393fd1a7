"""
Structured logging for the Zenith wellness application.

Routines, trackers and suggestion flows all log through structlog; the
bound helpers below tag each record with the subsystem that produced it.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.validation import LOG_LEVELS


def configure_logging(level: str = "INFO", format_json: bool = False) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL
        format_json: Emit JSON lines instead of console output

    Raises:
        ValueError: If the level is not recognised
    """
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(LOG_LEVELS)}")
    log_level = getattr(logging, name)

    logging.basicConfig(stream=sys.stdout, format="%(message)s")
    # basicConfig is a no-op once handlers exist, so reconfiguring only moves the level
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    return structlog.get_logger(name)


def get_sequence_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for guided sequence timer events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for sequence transitions
    """
    return get_logger(name).bind(
        subsystem="sequence_timer",
        audit_trail=True
    )


def get_suggestion_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound for AI suggestion requests."""
    return get_logger(name).bind(subsystem="suggestions")


def log_sequence_transition(
    logger: FilteringBoundLogger,
    sequence: str,
    from_phase: str,
    to_phase: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a sequence phase change with standardized format.

    Args:
        logger: Structlog logger instance
        sequence: Name of the sequence instance (e.g. "stretch")
        from_phase: Phase before the transition
        to_phase: Phase after the transition
        trigger: Command or tick that caused the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        sequence=sequence,
        from_phase=from_phase,
        to_phase=to_phase,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if from_phase == to_phase:
        bound_logger.debug("Sequence updated")
    else:
        bound_logger.info("Sequence transition")
