"""
Centralized Logging Configuration.

All modules must use this logging setup. Do not create standalone loggers.
Configuration comes from <config_dir>/settings/logging.yaml, validated
against LoggingSchema by AppConfig before any handler is built.

Console records are written to stderr so that stdout only carries command
results (URLs, listings) and stays safe to pipe.

Structured fields in every JSON log record:
    timestamp   - ISO 8601 UTC timestamp
    level       - Log level (debug, info, warning, error, critical)
    logger      - Module path (e.g., owo.api.client)
    event       - Log message
    func_name   - Function that emitted the log
    lineno      - Line number in source file
    source      - Origin context, set explicitly (cli, api, internal)

Usage:
    from owo.core.logging import get_logger, setup_logging

    setup_logging()
    setup_logging(level="DEBUG", format_type="console")

    logger = get_logger(__name__)
    log_with_source(logger, "api", "debug", "API request", path="/objects")
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from owo.core.config import get_app_config
from owo.core.config_schema import FileHandlerSchema

VALID_SOURCES = frozenset({
    "cli",
    "api",
    "internal",
})
"""
Recognized log source values.
Source is always set explicitly by the caller. Never guessed from logger names.
"""

_SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
    structlog.processors.CallsiteParameterAdder(
        parameters=[
            structlog.processors.CallsiteParameter.FUNC_NAME,
            structlog.processors.CallsiteParameter.LINENO,
        ],
    ),
]


def _formatter(renderer: Processor) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def _stderr_handler(format_type: str) -> logging.Handler:
    """Human-readable records on a terminal, JSON lines otherwise."""
    if format_type == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    else:
        renderer = structlog.processors.JSONRenderer()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(renderer))
    return handler


def _jsonl_file_handler(file_config: FileHandlerSchema) -> logging.Handler:
    """Rotating JSONL file at the configured path (~ expanded)."""
    log_path = Path(file_config.path).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=file_config.max_bytes,
        backupCount=file_config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structured logging for the client.

    Parameters passed to this function override the YAML configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Overrides config.
        format_type: Output format ('json' or 'console'). Overrides config.
        enable_console: Whether to enable stderr output. Overrides config.
        enable_file_logging: Whether to write to the JSONL file. Overrides config.

    Raises:
        FileNotFoundError: If a settings file is missing
        ValueError: If a settings file fails validation, or level is unknown
    """
    config = get_app_config().logging
    handlers_config = config.handlers

    level_name = (level or config.level).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    if enable_console is None:
        enable_console = handlers_config.console.enabled
    if enable_file_logging is None:
        enable_file_logging = handlers_config.file.enabled

    structlog.configure(
        processors=_SHARED_PROCESSORS + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        root_logger.addHandler(_stderr_handler(format_type or config.format))
    if enable_file_logging:
        root_logger.addHandler(_jsonl_file_handler(handlers_config.file))

    # httpx logs every request at INFO; our own request logging covers it.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message with an explicit source.

    Args:
        logger: The logger instance
        source: Log source, one of VALID_SOURCES
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **kwargs: Additional context fields

    Raises:
        ValueError: If source is not in VALID_SOURCES
        AttributeError: If level is not a valid log level

    Example:
        log_with_source(logger, "api", "debug", "API response", status_code=200)
    """
    if source not in VALID_SOURCES:
        raise ValueError(
            f"Invalid log source '{source}'. Must be one of: {sorted(VALID_SOURCES)}"
        )
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)
