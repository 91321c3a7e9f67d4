import logging
import sys
from typing import Optional
from pathlib import Path
import structlog


def setup_pre_logging() -> None:
    """Console logging to stderr until the config is loaded"""
    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        level=logging.INFO,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        cache_logger_on_first_use=False,
    )


def setup_logging(log_file_path: Optional[str] = None, level: str = "INFO") -> None:
    """Reconfigure the logger; with a log file, records also go there as JSON"""
    log_level = logging.getLevelName(str(level).upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    log_handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    processors = [
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer(colors=False),
    ]

    if log_file_path:
        log_path = Path(log_file_path).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
        processors = [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=log_handlers,
        level=log_level,
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=False,
    )
