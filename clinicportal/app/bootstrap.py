# bootstrap.py
"""
Bootstrap de la aplicación ClinicPortal.

Responsabilidades:
- Resolver la configuración desde variables de entorno
- Dejar traza en logs de cada valor y de dónde sale (env o default)

Este archivo es infraestructura pura.
No contiene lógica de dominio ni de aplicación.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from clinicportal.app.bootstrap_logging import get_logger
from clinicportal.app.i18n import IDIOMAS_SOPORTADOS

LOGGER = get_logger(__name__)

ENV_API_URL = "CLINICPORTAL_API_URL"
ENV_API_TIMEOUT = "CLINICPORTAL_API_TIMEOUT"
ENV_LANG = "CLINICPORTAL_LANG"
ENV_LOG_DIR = "CLINICPORTAL_LOG_DIR"

DEFAULT_API_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LANG = "es"
DEFAULT_LOG_DIR = "./logs"


@dataclass(frozen=True, slots=True)
class AppConfig:
    api_url: str
    api_timeout: float
    language: str
    log_dir: Path


def _leer(env: Mapping[str, str], nombre: str) -> Optional[str]:
    valor = env.get(nombre)
    if valor is None:
        return None
    valor = valor.strip()
    return valor or None


def resolve_api_url(env: Mapping[str, str], *, emit_log: bool = True) -> str:
    configurado = _leer(env, ENV_API_URL)
    if configurado and configurado.startswith(("http://", "https://")):
        resolved, source = configurado.rstrip("/"), "env"
    else:
        if configurado:
            LOGGER.warning("api_url_invalid", extra={"valor": configurado})
        resolved, source = DEFAULT_API_URL, "default"
    if emit_log:
        LOGGER.info("api_url_resolved url=%s source=%s", resolved, source)
    return resolved


def resolve_timeout(env: Mapping[str, str]) -> float:
    configurado = _leer(env, ENV_API_TIMEOUT)
    if configurado is None:
        return DEFAULT_TIMEOUT
    try:
        valor = float(configurado)
    except ValueError:
        valor = -1.0
    if valor <= 0:
        LOGGER.warning("api_timeout_invalid", extra={"valor": configurado})
        return DEFAULT_TIMEOUT
    return valor


def resolve_language(env: Mapping[str, str]) -> str:
    configurado = (_leer(env, ENV_LANG) or DEFAULT_LANG).lower()
    if configurado not in IDIOMAS_SOPORTADOS:
        LOGGER.warning("language_invalid", extra={"valor": configurado})
        return DEFAULT_LANG
    return configurado


def resolve_log_dir(env: Mapping[str, str]) -> Path:
    return Path(_leer(env, ENV_LOG_DIR) or DEFAULT_LOG_DIR).expanduser()


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Lee la configuración completa. Los valores no válidos caen a su default."""
    fuente = os.environ if env is None else env
    return AppConfig(
        api_url=resolve_api_url(fuente),
        api_timeout=resolve_timeout(fuente),
        language=resolve_language(fuente),
        log_dir=resolve_log_dir(fuente),
    )
