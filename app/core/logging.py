"""Structured logging for the translation service.

Translation events carry lookup options, which hold caller-supplied
interpolation values. Those values are redacted before rendering so user
data does not leak into logs; only the option names are kept.
"""

import logging
import inspect
import sys
from typing import Any, Optional

import structlog
from structlog.stdlib import BoundLogger
from infrastructure.configuration import settings

# Option keys that steer resolution and are safe to log verbatim
VISIBLE_OPTION_KEYS = frozenset({"count", "scope", "default"})

REDACTED = "***"


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def redact_interpolation_values(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Mask interpolation variables found in an ``options`` log field."""
    options = event_dict.get("options")
    if isinstance(options, dict):
        event_dict["options"] = {
            key: (value if key in VISIBLE_OPTION_KEYS else REDACTED)
            for key, value in options.items()
        }
    return event_dict


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly large string values.

    Translation branches can be large; this keeps a namespace lookup from
    flooding the log.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the application.

    Args:
        log_level: Optional override for settings.LOG_LEVEL.
        is_production: Optional override for settings.is_production. Controls
            JSON vs console output.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Processors are still required so bound loggers work; nothing is
        # emitted because the root logger level is above CRITICAL
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    level = log_level or settings.LOG_LEVEL
    production = settings.is_production if is_production is None else is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_interpolation_values,
        truncate_large_values(),
    ]

    if production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context."""
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger
    frame = current_frame.f_back
    module = inspect.getmodule(frame)

    if module:
        module_name = module.__name__
        return logger.bind(
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return logger.bind(component="unknown")
