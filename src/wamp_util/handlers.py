"""Error dispatch to caller-supplied handlers."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Unhandled exception raised:"


def handle_error(
    handler: Callable[[Any, str | None], Any] | None,
    error: Any,
    message: str | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Route an error to a handler, or log it when there is none.

    If handler is callable it is invoked as ``handler(error, message)`` and
    whatever it raises propagates to the caller. Otherwise the error is logged
    at ERROR level, prefixed by message. With no logging configured the record
    lands on standard error through the last-resort handler.

    Args:
        handler: Error callback, or None
        error: Error value, usually an exception instance
        message: Context message passed to the handler or used as log prefix
        log: Logger for the fallback record (default: this module's logger)

    Examples:
        >>> seen = []
        >>> handle_error(lambda err, msg: seen.append((err, msg)), "boom", "ctx")
        >>> seen
        [('boom', 'ctx')]
    """
    if callable(handler):
        handler(error, message)
        return

    if log is None:
        log = logger
    exc_info = error if isinstance(error, BaseException) else None
    log.error("%s %s", message or DEFAULT_MESSAGE, error, exc_info=exc_info)
