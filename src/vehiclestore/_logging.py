"""Call logging for the vehicle repository and service layers.

Calls are written to ``<log_dir>/calls.log`` once :func:`configure_logging`
has named a directory. Until then the ``vehiclestore.calls`` logger has no
handler of its own and records propagate to whatever the host application
configured for the root logger.
"""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "vehiclestore.calls"
LOG_FILENAME = "calls.log"

_log_dir: str | None = None
_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def configure_logging(log_dir: str) -> None:
    """Point the call log at *log_dir*, replacing any handler already open."""
    global _log_dir, _logger
    with _logger_lock:
        _log_dir = os.path.abspath(log_dir)
        if _logger is not None:
            for handler in _logger.handlers[:]:
                handler.close()
                _logger.removeHandler(handler)
        _logger = None


def _get_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)

        if _log_dir is None:
            logger.propagate = True
        else:
            os.makedirs(_log_dir, exist_ok=True)
            logger.propagate = False
            handler = logging.FileHandler(
                os.path.join(_log_dir, LOG_FILENAME), encoding="utf-8",
            )
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)

        _logger = logger

    return _logger


def _format_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is self
    parts = [repr(a) for a in args[1:]]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


def _result_size(result: Any) -> int:
    if result is None:
        return 0
    if isinstance(result, (list, dict)):
        return len(result)
    return 1


# Each formatter receives (name, arg_str, result_or_exc, elapsed) and returns
# the logger.info / logger.error arguments.
_Formatter = Callable[[str, str, Any, float], tuple[Any, ...]]


def _call_logger(call_fmt: str, ok: _Formatter, fail: _Formatter) -> Callable[[F], F]:
    """Build a decorator writing a call line, then an OK or FAIL line."""

    def decorator(fn: F) -> F:
        name = fn.__qualname__

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = _get_logger()
            arg_str = _format_args(args, kwargs)
            logger.info(call_fmt, name, arg_str)

            start = time.monotonic()
            try:
                result = fn(*args, **kwargs)
            except Exception as exc:
                logger.error(*fail(name, arg_str, exc, time.monotonic() - start))
                raise
            logger.info(*ok(name, arg_str, result, time.monotonic() - start))
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


log_repository_call = _call_logger(
    "CALL: %s(%s)",
    ok=lambda name, arg_str, result, elapsed: (
        "OK: %s(%s) -> %d items (%.3fs)", name, arg_str, _result_size(result), elapsed,
    ),
    fail=lambda name, arg_str, exc, elapsed: (
        "FAIL: %s(%s) -> %s: %s (%.3fs)", name, arg_str, type(exc).__name__, exc, elapsed,
    ),
)
"""Log store calls with the number of records returned."""

log_service_call = _call_logger(
    "SERVICE CALL: %s(%s)",
    ok=lambda name, arg_str, result, elapsed: ("SERVICE OK: %s -> %.3fs", name, elapsed),
    fail=lambda name, arg_str, exc, elapsed: (
        "SERVICE FAIL: %s -> %s: %s (%.3fs)", name, type(exc).__name__, exc, elapsed,
    ),
)
"""Log facade calls with their duration."""
