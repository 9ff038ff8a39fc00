from __future__ import annotations

import logging
import sys
import threading
from types import TracebackType
from typing import Callable

_FATAL_KEY = "is_fatal_crash"

ExceptHook = Callable[[type[BaseException], BaseException, TracebackType | None], None]


def fatal_exception_handler(
    logger: logging.LoggerAdapter,
    on_fatal: Callable[[BaseException], None] | None = None,
) -> ExceptHook:
    """Handler que deja el error en crash_fatal.log y avisa opcionalmente a la UI."""

    def _handler(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            if sys.__excepthook__:
                sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.critical(
            "unhandled_exception",
            exc_info=(exc_type, exc_value, exc_traceback),
            extra={_FATAL_KEY: True, "error_type": exc_type.__name__},
        )
        if on_fatal is not None:
            on_fatal(exc_value)

    return _handler


def install_global_exception_hook(
    logger: logging.LoggerAdapter,
    on_fatal: Callable[[BaseException], None] | None = None,
) -> None:
    handler = fatal_exception_handler(logger, on_fatal)
    sys.excepthook = handler

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        if args.exc_value is None:
            return
        handler(args.exc_type, args.exc_value, args.exc_traceback)

    threading.excepthook = _thread_hook
