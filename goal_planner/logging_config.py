"""
Logging configuration for the Minecraft goal planner using structlog
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import structlog
from structlog.processors import (
    TimeStamper,
    add_log_level,
    dict_tracebacks,
)
from structlog.stdlib import (
    BoundLogger,
    LoggerFactory,
    add_logger_name,
    filter_by_level,
)

QUIET_LIBRARY_LOGGERS = ("urllib3", "httpx", "grpc", "opentelemetry", "websockets")

GOOGLE_LOGGERS = (
    "google_adk",
    "google.adk",
    "google_genai",
    "google.genai",
    "google.cloud",
    "google.api_core",
    "google.auth",
)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: str = "logs",
    console_output: bool = True,
    json_format: bool = False,
    google_log_level: str = "WARNING",
) -> None:
    """
    Configure structlog for both console and file output

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional specific log file name. If None, generates timestamp-based name
        log_dir: Directory for log files (default: "logs")
        console_output: Whether to output to console (default: True)
        json_format: Whether to use JSON format for console logs
        google_log_level: Logging level for Google ADK and other Google libraries (default: WARNING)
    """
    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)

    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = f"goal_planner_{timestamp}.log"

    full_log_path = log_path / log_file
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console goes to stderr so --json output on stdout stays machine readable
    console_handler = None
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    file_handler = logging.FileHandler(full_log_path, encoding="utf-8")
    file_handler.setLevel(level)
    root_logger.addHandler(file_handler)

    shared_processors = [
        add_log_level,
        add_logger_name,
        TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        dict_tracebacks,
    ]

    if json_format:
        console_renderer = structlog.processors.JSONRenderer()
    else:
        console_renderer = structlog.dev.ConsoleRenderer(colors=True, pad_event=30)

    structlog.configure(
        processors=[
            filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    if console_handler is not None:
        console_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=console_renderer,
                foreign_pre_chain=shared_processors,
            )
        )

    # File output is always JSON for easier parsing
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared_processors,
        )
    )

    google_level = getattr(logging, google_log_level.upper())
    for name in GOOGLE_LOGGERS:
        logging.getLogger(name).setLevel(google_level)

    for name in QUIET_LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger: BoundLogger = structlog.get_logger(__name__)
    logger.debug(
        "Logging initialized",
        log_level=log_level,
        log_file=str(full_log_path),
        console_output=console_output,
        json_format=json_format,
        google_log_level=logging.getLevelName(google_level),
    )


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured structlog logger

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog BoundLogger
    """
    return structlog.get_logger(name)
