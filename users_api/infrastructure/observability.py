"""Structured Logging — JSON formatter, setup, and the component logger adapter.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (user_id, error_code, template, template_args, ...) surfaced when present
    - JSON format in production, human-readable in development
    - StdLoggerAdapter emits exactly one record per call — callers count on it

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
    - StdLoggerAdapter keeps the raw template and its arguments as extras so log
      aggregation can group by template while the message stays human-readable
"""

import logging
import json
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in (
            "user_id", "error_code", "path", "duration_ms",
            "template", "template_args",
        ):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


class StdLoggerAdapter:
    """LoggerAdapter over stdlib logging, named after the emitting component.

    Templates use positional placeholders ("User {0} retrieved in {1}ms").
    """

    def __init__(self, component: type | str):
        if isinstance(component, type):
            component = f"{component.__module__}.{component.__qualname__}"
        self._logger = logging.getLogger(component)

    @property
    def name(self) -> str:
        return self._logger.name

    def log_information(self, template: str, *args: object) -> None:
        self._logger.info(
            template.format(*args), extra=_template_extra(template, args),
        )

    def log_error(
        self, error: BaseException, template: str, *args: object,
    ) -> None:
        self._logger.error(
            template.format(*args),
            exc_info=(type(error), error, error.__traceback__),
            extra=_template_extra(template, args),
        )


def _template_extra(template: str, args: tuple) -> dict:
    return {"template": template, "template_args": [str(a) for a in args]}
