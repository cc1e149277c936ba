# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import functools
import inspect
import logging
import os
from typing import Any, Awaitable, Callable, TypeVar

import pythonjsonlogger.json
from rich.logging import RichHandler

T = TypeVar("T")


def is_coroutine(function: Callable[..., Any]) -> bool:
    return inspect.iscoroutinefunction(function)


def ensure_async(function: Callable[..., T]) -> Callable[..., Awaitable[T]]:
    if is_coroutine(function):
        return function  # type: ignore

    if not callable(function):
        raise TypeError(f"{function} is not callable")

    @functools.wraps(function)
    async def async_wrapper(*args, **kwargs) -> T:
        result = function(*args, **kwargs)
        if inspect.isawaitable(result):
            return await result
        return result

    return async_wrapper


JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    console_log_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Route the "cliroute" logger's records for an embedding application.

    The library only emits records; call this from your entry point. Handlers
    installed by an earlier call are replaced, and the root logger is untouched.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for JSON lines
            on stderr. Defaults to `CLIROUTE_LOG_MODE`, then "cli".
        log_filename (str | None): When given, every record down to DEBUG is
            also appended to this file as JSON.
        console_log_level (int): Level of the console handler.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    mode = mode or os.getenv("CLIROUTE_LOG_MODE") or "cli"

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=True, show_path=False, markup=False
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    console_handler.setLevel(console_log_level)

    logger = logging.getLogger("cliroute")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)
    logger.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        logger.addHandler(file_handler)

    logger.debug("Logging initialized in '%s' mode.", mode)
    return logger
