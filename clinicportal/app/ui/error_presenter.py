from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QMessageBox, QWidget

from clinicportal.app.bootstrap_logging import get_logger
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.infrastructure.api.errores import ApiError, ApiHttpError, ApiTransportError

LOGGER = get_logger("clinicportal.ui")


def _normalize_context(context: Optional[str]) -> Optional[str]:
    if not context:
        return None
    return context.strip() or None


def _con_contexto(mensaje: str, context: Optional[str]) -> str:
    return f"{mensaje}\n{context}" if context else mensaje


def present_error(parent: QWidget, exc: Exception, context: str | None = None) -> None:
    context_text = _normalize_context(context)

    if isinstance(exc, ValidationError):
        QMessageBox.warning(parent, "Validación", str(exc))
        return

    if isinstance(exc, ApiTransportError):
        LOGGER.warning("ui_api_unreachable", extra=exc.contexto())
        QMessageBox.warning(
            parent,
            "Conexión",
            _con_contexto("No se pudo contactar con el servidor. Comprueba la URL de la API y la red.", context_text),
        )
        return

    if isinstance(exc, ApiHttpError):
        LOGGER.warning("ui_api_http_error", extra=exc.contexto())
        QMessageBox.warning(parent, "Servidor", _con_contexto(f"El servidor respondió {exc.status_code}.", context_text))
        return

    if isinstance(exc, ApiError):
        LOGGER.warning("ui_api_error", extra=exc.contexto())
        QMessageBox.warning(parent, "Servidor", _con_contexto("Respuesta inesperada del servidor.", context_text))
        return

    LOGGER.error("ui_unexpected_error", exc_info=exc)
    QMessageBox.critical(
        parent,
        "Error",
        "Ha ocurrido un error inesperado. Revisa los datos o consulta el log.",
    )
