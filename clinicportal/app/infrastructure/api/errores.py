"""Errores del acceso HTTP al backend."""

from __future__ import annotations

from typing import Any, Optional


class ApiError(Exception):
    """Base de todos los fallos de una llamada a la API."""

    def __init__(self, mensaje: str, *, metodo: Optional[str] = None, ruta: Optional[str] = None) -> None:
        super().__init__(mensaje)
        self.metodo = metodo
        self.ruta = ruta

    def contexto(self) -> dict[str, Any]:
        return {"metodo": self.metodo, "ruta": self.ruta, "error_type": type(self).__name__}


class ApiTransportError(ApiError):
    """No hubo respuesta: conexión rechazada, DNS, timeout..."""


class ApiHttpError(ApiError):
    """El backend respondió con un estado fuera de 2xx."""

    def __init__(
        self,
        status_code: int,
        payload: Any = None,
        *,
        metodo: Optional[str] = None,
        ruta: Optional[str] = None,
    ) -> None:
        super().__init__(f"HTTP error! status: {status_code}", metodo=metodo, ruta=ruta)
        self.status_code = status_code
        self.payload = payload

    @property
    def no_encontrado(self) -> bool:
        return self.status_code == 404

    def contexto(self) -> dict[str, Any]:
        return {**super().contexto(), "status": self.status_code}


class ApiJsonError(ApiError):
    """Cuerpo que no es JSON o JSON con una forma inesperada."""
