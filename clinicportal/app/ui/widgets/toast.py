"""Notificaciones toast independientes de Qt.

Los controladores emiten aquí; la ventana principal se suscribe y pinta.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

ToastListener = Callable[[dict[str, Any]], None]


class GestorToasts:
    """Gestor de notificaciones toast independiente de Qt para facilitar tests."""

    def __init__(self, *, max_historial: int = 200) -> None:
        self._notificaciones: list[dict[str, Any]] = []
        self._listeners: list[ToastListener] = []
        self._max_historial = max_historial

    @property
    def notificaciones(self) -> list[dict[str, Any]]:
        """Expone notificaciones emitidas para inspección en tests."""
        return self._notificaciones

    def subscribe(self, listener: ToastListener) -> None:
        self._listeners.append(listener)

    def ultima(self) -> dict[str, Any] | None:
        return self._notificaciones[-1] if self._notificaciones else None

    def _emitir(
        self,
        tipo: str,
        message: str,
        *,
        title: str | None = None,
        action_label: str | None = None,
        action_callback: Callable[[], None] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        payload = {
            "tipo": tipo,
            "message": message,
            "title": title,
            "action_label": action_label,
            "action_callback": action_callback,
            "meta": kwargs,
        }
        self._notificaciones.append(payload)
        del self._notificaciones[: -self._max_historial]
        for listener in list(self._listeners):
            listener(payload)
        return payload

    def success(
        self,
        message: str,
        *,
        title: str | None = None,
        action_label: str | None = None,
        action_callback: Callable[[], None] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        return self._emitir(
            "success",
            message,
            title=title,
            action_label=action_label,
            action_callback=action_callback,
            **kwargs,
        )

    def error(
        self,
        message: str,
        *,
        title: str | None = None,
        action_label: str | None = None,
        action_callback: Callable[[], None] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        return self._emitir(
            "error",
            message,
            title=title,
            action_label=action_label,
            action_callback=action_callback,
            **kwargs,
        )


__all__ = ["GestorToasts", "ToastListener"]
