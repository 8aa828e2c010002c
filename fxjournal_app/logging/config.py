"""
Centralized logging configuration for the trading journal.

This module provides standardized logging configuration using structlog
for all components. The journal service and the store log through loggers
obtained here; the calculator core does not log at all.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor

from ..config.defaults import LoggingParams
from ..config.validation import LOG_LEVELS


def build_processors(
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    colors: bool = False,
) -> list[Processor]:
    """
    Assemble the structlog processor chain.

    Journal records carry logger name and level, an optional UTC timestamp
    and call site, then any extra processors, and end with the renderer.
    """
    chain: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        chain.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        chain.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.FUNC_NAME]
        ))

    chain.extend(extra_processors or [])

    renderer = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if format_json
        else structlog.dev.ConsoleRenderer(colors=colors)
    )
    chain.append(renderer)
    return chain


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Route journal logging through structlog on top of stdlib logging.

    Args:
        level: Logging level name, case-insensitive
        format_json: Render one JSON object per line instead of console text
        include_timestamp: Stamp records with UTC ISO time
        include_caller: Add module and function of the call site
        extra_processors: Processors run just before rendering
        stream: Output stream, stdout by default

    Raises:
        ValueError: If the level name is unknown
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")

    stream = stream or sys.stdout
    # Replace handlers left by an earlier call so the level and stream apply
    logging.basicConfig(level=level_name, stream=stream, format="%(message)s", force=True)

    structlog.configure(
        processors=build_processors(
            format_json=format_json,
            include_timestamp=include_timestamp,
            include_caller=include_caller,
            extra_processors=extra_processors,
            colors=stream.isatty(),
        ),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_params(params: LoggingParams, **kwargs: Any) -> None:
    """Configure logging from the `logging` section of the loaded settings."""
    configure_logging(level=params.level, format_json=params.format_json, **kwargs)


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_journal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for journal mutations.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying the journal subsystem context
    """
    return get_logger(name).bind(subsystem="journal")


def log_trade_event(
    logger: FilteringBoundLogger,
    action: str,
    strategy_id: Optional[str],
    trade_id: Optional[str],
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a trade mutation with standardized format.

    Args:
        logger: Structlog logger instance
        action: What happened to the trade (added, updated, deleted)
        strategy_id: Strategy owning the trade
        trade_id: ID of the affected trade
        context: Additional context data
    """
    bound_logger = logger.bind(
        action=action,
        strategy_id=strategy_id,
        trade_id=trade_id,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Trade event")
