"""
Centralized logging configuration for the SatSignal service.

All SatSignal components log through structlog. Console output is meant for
an operator watching the poller; JSON output (serialized with orjson) is meant
for log shipping.
"""
import logging
import sys
from typing import Any, Optional

import orjson
import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer(serializer=_orjson_dumps))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _orjson_dumps(obj: Any, **kwargs: Any) -> str:
    return orjson.dumps(obj, **kwargs).decode()


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_engine_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for recommendation engine output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for recommendation audit lines
    """
    return get_logger(name).bind(
        subsystem="engine",
        audit_trail=True
    )


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for application state changes.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for view transitions and profile commands
    """
    return get_logger(name).bind(
        subsystem="app_state",
        audit_trail=True
    )


def log_recommendation(
    logger: FilteringBoundLogger,
    profile_id: Optional[str],
    final_buy: float,
    total_mult: float,
    capped: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a computed recommendation with standardized format.

    Args:
        logger: Structlog logger instance
        profile_id: ID of the profile the recommendation was computed for
        final_buy: Clamped buy amount for today
        total_mult: Product of the five multipliers
        capped: Whether the reserve policy capped the raw suggestion
        context: Additional context data
    """
    bound_logger = logger.bind(
        profile_id=profile_id,
        final_buy=round(final_buy, 2),
        total_mult=round(total_mult, 4),
        capped_by_reserve=capped,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Recommendation computed")


def log_state_transition(
    logger: FilteringBoundLogger,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a view transition with standardized format.

    Args:
        logger: Structlog logger instance
        from_state: Current view
        to_state: Target view
        trigger: Action that triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")
