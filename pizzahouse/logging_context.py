"""Correlation ID logging context for tracing document generation.

Every record passing through a handler that carries ``RequestIdFilter``
gets a ``request_id`` attribute, so all lines emitted while building one
contract or receipt share the same tag in the log output.

Usage:
    from pizzahouse.logging_context import request_scope

    with request_scope("ABCDEF12"):
        logger.info("Rendering contract")  # ... [ABCDEF12] Rendering contract
    # back to NO_REQUEST_ID here
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator

DEFAULT_REQUEST_ID = "NO_REQUEST_ID"
LOG_FORMAT = "%(asctime)s [%(name)s] [%(request_id)s] %(levelname)s: %(message)s"

_request_id: ContextVar[str] = ContextVar("request_id", default=DEFAULT_REQUEST_ID)


def set_request_id(request_id: str) -> Token:
    """Set the correlation ID; pass the returned token to ``reset_request_id``."""
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


def get_request_id() -> str:
    """Retrieve the current correlation ID."""
    return _request_id.get()


@contextmanager
def request_scope(request_id: str) -> Iterator[str]:
    """Tag every record logged inside the block, then restore the previous ID."""
    token = set_request_id(request_id)
    try:
        yield request_id
    finally:
        reset_request_id(token)


class RequestIdFilter(logging.Filter):
    """Injects request_id into every log record.

    Attach it to handlers rather than loggers: handler filters also see
    records propagated from child loggers.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()  # type: ignore[attr-defined]
        return True


def build_handler() -> logging.Handler:
    """Stream handler whose format includes the request ID."""
    handler = logging.StreamHandler()
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler
