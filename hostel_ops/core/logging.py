"""
Logging Configuration and Utilities

Structured logging for the service: stdlib logging with a JSON formatter,
structlog configured on top of it, and request context propagation.
"""

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger

from hostel_ops.config import settings

# Context variables for request tracking
request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

SENSITIVE_KEYS = ('password', 'token', 'secret', 'authorization', 'cookie')


class RequestContextFilter(logging.Filter):
    """Attach request context to every stdlib log record"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id.get()
        return True


class RequestContextProcessor:
    """Add request context to structlog event dicts"""

    def __call__(self, logger, method_name, event_dict):
        req_id = request_id.get()
        if req_id:
            event_dict['request_id'] = req_id

        event_dict['service'] = 'hostel-ops'
        event_dict['environment'] = settings.ENVIRONMENT
        return event_dict


class SanitizeProcessor:
    """Mask sensitive values before they reach a handler"""

    def __call__(self, logger, method_name, event_dict):
        for key in list(event_dict.keys()):
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                event_dict[key] = '[REDACTED]'
        return event_dict


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter for structured logging"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        if record.exc_info and 'exception' not in log_record:
            log_record['exception'] = self.formatException(record.exc_info)


def _build_formatter() -> logging.Formatter:
    if settings.LOG_FORMAT == "json":
        return CustomJsonFormatter('%(message)s %(request_id)s')
    return logging.Formatter(
        '%(asctime)s %(levelname)-8s [%(name)s] [req=%(request_id)s] %(message)s'
    )


def configure_standard_logging() -> None:
    """Configure the root stdlib logger"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(RequestContextFilter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL.upper())

    # Quiet down chatty libraries
    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DATABASE_ECHO else logging.WARNING
    )
    logging.getLogger('passlib').setLevel(logging.ERROR)


def configure_structured_logging() -> None:
    """Configure structlog to render through stdlib handlers"""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            RequestContextProcessor(),
            SanitizeProcessor(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def setup_logging() -> None:
    """Configure stdlib and structlog logging once at startup"""
    configure_standard_logging()
    configure_structured_logging()


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger bound to ``name``.

    Keyword arguments passed to the log methods end up as structured
    fields on the JSON record.
    """
    return structlog.get_logger(name or 'hostel_ops')


def bind_request_context(**values: Any) -> Dict[str, Any]:
    """Set request-scoped context values, returning the previous tokens"""
    tokens = {}
    if 'request_id' in values:
        tokens['request_id'] = request_id.set(values['request_id'])
    return tokens


def reset_request_context(tokens: Dict[str, Any]) -> None:
    if 'request_id' in tokens:
        request_id.reset(tokens['request_id'])
