"""
Centralized logging configuration for Manicurista Pro.

This module provides structured logging with:
- JSON formatting for production
- Console formatting for development
- Request/response logging
- Optional log rotation

Usage:
    from manicurista.core.logging_config import setup_logging, get_logger

    # In main.py
    setup_logging(app, log_level="INFO")

    # In any module
    logger = get_logger(__name__)
    logger.info("Appointment created", extra={"context": {"appointment_id": 123}})
"""

import json
import logging
import logging.handlers
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from flask import Flask, g, request


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.
    Outputs logs as JSON with timestamp, level, message, and extra context.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "context"):
            log_data["context"] = getattr(record, "context", {})

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """
    Human-readable console formatter with colors for development.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy so other handlers see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(colored.levelname, self.RESET)
        colored.levelname = f"{color}{colored.levelname:8}{self.RESET}"
        return super().format(colored)


def _resolve_level(log_level: Union[int, str]) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def setup_logging(
    app: Optional[Flask] = None,
    log_level: Union[int, str] = "INFO",
    log_to_file: bool = False,
    use_json_format: bool = False,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure logging for the Flask application.

    Args:
        app: Flask application instance (required for request/response hooks)
        log_level: Logging level (int like logging.INFO or string "INFO")
        log_to_file: Write logs to rotating files under log_dir
        use_json_format: Use JSON format instead of console format
        log_dir: Directory for log files (defaults to ./logs)
    """
    level = _resolve_level(log_level)
    log_dir = log_dir or Path.cwd() / "logs"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    if use_json_format:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            ConsoleFormatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    root_logger.addHandler(console_handler)

    if log_to_file:
        _add_file_handlers(root_logger, log_dir, level)

    if app is not None:
        _register_request_hooks(app)

    # Suppress noisy third-party loggers
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    app_logger = logging.getLogger("manicurista")
    app_logger.setLevel(level)
    app_logger.info(
        f"Logging configured: level={level}, log_to_file={log_to_file}, "
        f"json_format={use_json_format}"
    )


def _add_file_handlers(root_logger: logging.Logger, log_dir: Path, level: int) -> None:
    """Attach rotating app and error log files; fall back to console-only on failure."""
    file_formatter = JSONFormatter()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            log_dir / "manicurista_errors.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(file_formatter)
        root_logger.addHandler(error_handler)
    except OSError as e:
        root_logger.warning(
            f"Failed to create log files: {e}. Falling back to console-only logging.",
            extra={"context": {"component": "logging_setup", "log_dir": str(log_dir)}},
        )


def _register_request_hooks(app: Flask) -> None:
    @app.before_request
    def log_request():
        g.request_start_time = time.time()
        g.request_id = f"{time.time()}-{id(request)}"
        logging.getLogger("flask.request").info(
            f"{request.method} {request.path}",
            extra={
                "context": {
                    "request_id": g.request_id,
                    "method": request.method,
                    "path": request.path,
                    "remote_addr": request.remote_addr,
                }
            },
        )

    @app.after_request
    def log_response(response):
        if hasattr(g, "request_start_time"):
            duration_ms = (time.time() - g.request_start_time) * 1000
            logging.getLogger("flask.response").info(
                f"{request.method} {request.path} {response.status_code} in {duration_ms:.2f}ms",
                extra={
                    "context": {
                        "request_id": g.get("request_id"),
                        "method": request.method,
                        "path": request.path,
                        "status_code": response.status_code,
                        "duration_ms": round(duration_ms, 2),
                    }
                },
            )
        return response


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Example:
        logger = get_logger(__name__)
        logger.info("Prices updated", extra={"context": {"services": 4}})
    """
    return logging.getLogger(name)


def log_performance(func_name: str, duration_ms: float, **kwargs) -> None:
    """
    Log performance metrics for a function or operation.

    Args:
        func_name: Name of the function or operation
        duration_ms: Execution duration in milliseconds
        **kwargs: Additional context (record_count, window, etc.)
    """
    perf_logger = get_logger("manicurista.performance")
    context = {"function": func_name, "duration_ms": round(duration_ms, 2)}
    context.update(kwargs)
    perf_logger.info(
        f"{func_name} completed in {duration_ms:.2f}ms",
        extra={"context": context},
    )
