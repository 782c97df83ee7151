"""
Centralized logging configuration for the Eenheden accrual engine.

All components log through structlog bound loggers obtained here so that
registry changes and tier movements share one structured format. The
`logging:` section of settings.yaml is applied through
`configure_from_params`.
"""
import logging
import sys
from dataclasses import asdict
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor

from ..config.defaults import LoggingParams


def build_processors(
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> list[Processor]:
    """Processor chain ending in a JSON or plain console renderer."""
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog and the stdlib root logger.

    The root level is set even when handlers already exist, so a repeated
    call changes the effective level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON lines; otherwise plain console text
        include_timestamp: Include a UTC ISO timestamp
        include_caller: Include filename and line number
        extra_processors: Additional processors inserted before rendering
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(stream=sys.stdout, format="%(message)s")
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=build_processors(
            format_json=format_json,
            include_timestamp=include_timestamp,
            include_caller=include_caller,
            extra_processors=extra_processors,
        ),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_params(params: LoggingParams, include_caller: bool = False) -> None:
    """Apply a loaded `logging` configuration section."""
    configure_logging(include_caller=include_caller, **asdict(params))


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_registry_logger(name: str) -> FilteringBoundLogger:
    """Logger bound to the client registry subsystem."""
    return get_logger(name).bind(subsystem="registry")


def get_accrual_logger(name: str) -> FilteringBoundLogger:
    """Logger bound to the unit conversion and tier subsystem."""
    return get_logger(name).bind(subsystem="accrual")


def log_registry_change(
    logger: FilteringBoundLogger,
    action: str,
    client_id: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a client registry mutation with standardized format.

    Args:
        logger: Structlog logger instance
        action: Mutation name (add_client, delete_contract, ...)
        client_id: Client the mutation applies to
        context: Additional context data
    """
    bound_logger = logger.bind(
        action=action,
        client_id=client_id,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Registry change")


def log_tier_change(
    logger: FilteringBoundLogger,
    from_tier: str,
    to_tier: str,
    total_units: Any,
    trigger: str
) -> None:
    """
    Log a movement of the portfolio between FT tiers.

    Args:
        logger: Structlog logger instance
        from_tier: Tier before the triggering mutation
        to_tier: Tier after the triggering mutation
        total_units: Portfolio units after the mutation
        trigger: What caused the movement
    """
    logger.bind(
        from_tier=from_tier,
        to_tier=to_tier,
        total_units=str(total_units),
        trigger=trigger,
    ).info("Tier change")
