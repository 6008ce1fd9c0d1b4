'''
Structured logging for formguard.

Log lines are JSON objects rendered by orjson, stamped with an ISO 8601
UTC timestamp and the emitting module, and carry any fields bound with
bind_context(), such as the id of the form being validated. Host
applications call configure_logging() once at startup.
'''

import logging
from typing import Any, BinaryIO

import orjson
import structlog

__all__ = ['bind_context', 'clear_context', 'configure_logging', 'get_logger']


def configure_logging(log_level: str = 'INFO', file: BinaryIO | None = None) -> None:

    '''
    Route formguard loggers to JSON lines on stdout or the given file.

    Loggers are not cached, so module-level loggers created before this
    call follow the latest configuration.

    Args:
        log_level (str): Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            unknown names fall back to INFO
        file (BinaryIO | None): Binary sink, defaults to stdout
    '''

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso', utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(serializer=orjson.dumps),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.BytesLoggerFactory(file=file),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:

    '''
    Return a lazy structlog logger that tags its lines with name.

    Args:
        name (str | None): Emitting module, rendered as the logger field

    Returns:
        Any: Bound logger proxy
    '''

    if name is None:
        return structlog.get_logger()

    return structlog.get_logger(logger=name)


def bind_context(**fields: Any) -> None:

    '''
    Bind fields that appear on every subsequent log line in this context.

    Args:
        **fields (Any): Key/value pairs to bind, e.g. form_id
    '''

    structlog.contextvars.bind_contextvars(**fields)


def clear_context() -> None:

    '''Remove all fields bound with bind_context.'''

    structlog.contextvars.clear_contextvars()
