from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

_REDACTED = "***"

_EMAIL_RE = re.compile(r"(?P<user>[A-Za-z0-9._%+-]+)@(?P<domain>[A-Za-z0-9.-]+\.[A-Za-z]{2,})")
_DOCUMENT_RE = re.compile(r"\b\d{7,8}[A-Za-z]?\b")
_PHONE_RE = re.compile(r"(?<!\w)(?:\+?\d[\d\s().-]{7,}\d)")
_BEARER_RE = re.compile(r"(?i)\b(bearer|token)\s+[A-Za-z0-9._~+/-]+=*")

_SENSITIVE_KEY_PARTS = (
    "password",
    "token",
    "phone",
    "telefono",
    "teléfono",
    "email",
    "mail",
    "address",
    "direccion",
    "firstname",
    "lastname",
    "fullname",
    "first_name",
    "last_name",
    "nombre",
    "apellidos",
    "patient_name",
    "assurance",
    "allergy",
    "alergias",
)


def redact_text(value: str) -> str:
    redacted = _BEARER_RE.sub(lambda match: f"{match.group(1)} {_REDACTED}", value)
    redacted = _EMAIL_RE.sub(lambda _: _REDACTED, redacted)
    redacted = _DOCUMENT_RE.sub(_REDACTED, redacted)
    redacted = _PHONE_RE.sub(_REDACTED, redacted)
    return redacted


def redact_value(value: Any, *, key: str | None = None) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        if key and _is_sensitive_key(key):
            return _REDACTED
        return redact_text(value)
    if isinstance(value, Mapping):
        return {k: redact_value(v, key=str(k)) for k, v in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return [redact_value(item, key=key) for item in value]
    return value


def _is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(part in lowered for part in _SENSITIVE_KEY_PARTS)
