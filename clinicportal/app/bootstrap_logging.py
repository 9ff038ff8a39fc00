from __future__ import annotations

import contextvars
import json
import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from clinicportal.app.common.log_redaction import redact_text, redact_value

_RUN_ID: contextvars.ContextVar[str] = contextvars.ContextVar("run_id", default="-")
_USER: contextvars.ContextVar[str | None] = contextvars.ContextVar("user", default=None)
_REQUEST_ID: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="-")
_SOFT_KEY = "is_soft_crash"
_FATAL_KEY = "is_fatal_crash"
_RESERVED_EXTRA = {"run_id", "request_id", "user", _SOFT_KEY, _FATAL_KEY}


class _ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID.get()
        record.user = _USER.get() or "-"
        record.request_id = _REQUEST_ID.get()
        return True


class _SoftCrashFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return bool(getattr(record, _SOFT_KEY, False))


class _FatalCrashFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return bool(getattr(record, _FATAL_KEY, False) or record.levelno >= logging.CRITICAL)


class _ExcludeCrashFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return not bool(getattr(record, _SOFT_KEY, False) or getattr(record, _FATAL_KEY, False))


class _StructuredFormatter(logging.Formatter):
    """Una línea por evento: JSON o pares clave=valor, con los extras del evento."""

    def __init__(self, *, json_mode: bool) -> None:
        super().__init__()
        self._json_mode = json_mode

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "event": redact_text(record.getMessage()),
            "run_id": getattr(record, "run_id", "-"),
            "request_id": getattr(record, "request_id", "-"),
            "user": getattr(record, "user", "-"),
        }
        context = getattr(record, "context", None)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["traceback"] = redact_text(self.formatException(record.exc_info))
        if self._json_mode:
            return json.dumps(payload, ensure_ascii=False, default=str)
        return " ".join(f"{key}={value}" for key, value in payload.items())


class ContextLoggerAdapter(logging.LoggerAdapter):
    """Agrupa los extras del llamador bajo `context` y los redacta antes de emitir."""

    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        flags = {key: extra.pop(key) for key in (_SOFT_KEY, _FATAL_KEY) if key in extra}
        context = extra.pop("context", {})
        if isinstance(context, dict):
            context = {**context, **{k: v for k, v in extra.items() if k not in _RESERVED_EXTRA}}
        kwargs["extra"] = {"context": redact_value(context), **flags}
        return redact_value(msg), kwargs


def configure_logging(app_name: str, log_dir: Path, level: str = "INFO", json: bool = True) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = _StructuredFormatter(json_mode=json)
    context_filter = _ContextFilter()

    console = logging.StreamHandler(stream=sys.__stderr__)
    console.addFilter(_ExcludeCrashFilter())

    app_file = RotatingFileHandler(log_dir / "app.log", maxBytes=2_000_000, backupCount=5, encoding="utf-8")
    app_file.addFilter(_ExcludeCrashFilter())

    soft_file = RotatingFileHandler(log_dir / "crash_soft.log", maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    soft_file.addFilter(_SoftCrashFilter())

    fatal_file = RotatingFileHandler(log_dir / "crash_fatal.log", maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    fatal_file.addFilter(_FatalCrashFilter())

    for handler in (console, app_file, soft_file, fatal_file):
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)

    # httpx registra cada petición en INFO; el cliente ya deja su propia traza.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.captureWarnings(True)
    get_logger(__name__).info("logging_configured", extra={"app_name": app_name, "log_dir": str(log_dir)})


def get_logger(name: str) -> logging.LoggerAdapter:
    return ContextLoggerAdapter(logging.getLogger(name), {})


def set_run_context(run_id: str, user: str | None = None) -> None:
    _RUN_ID.set(run_id)
    _USER.set(user)
    _REQUEST_ID.set(run_id)


def set_user(user: str | None) -> None:
    _USER.set(user)


@contextmanager
def request_context(request_id: str | None = None) -> Iterator[str]:
    """Asigna un request_id a todos los logs emitidos dentro del bloque."""
    value = request_id or uuid.uuid4().hex[:12]
    token = _REQUEST_ID.set(value)
    try:
        yield value
    finally:
        _REQUEST_ID.reset(token)


def get_contexto_log() -> tuple[str, str]:
    return _RUN_ID.get(), _REQUEST_ID.get()


def log_soft_exception(logger: logging.LoggerAdapter, exc: Exception, context: dict[str, Any]) -> None:
    logger.error(
        "soft_exception",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={_SOFT_KEY: True, "context": context},
    )
    logger.error(
        "soft_exception_operational",
        extra={"context": {**context, "error_type": type(exc).__name__}},
    )
