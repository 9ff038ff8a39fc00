# controllers/base_controller.py
"""
Envoltorio común de las operaciones contra la API.

Cada controlador de recurso mantiene `items`, `loading` y `error`, y toda
operación sigue el mismo ciclo:

1. loading = True (las cargas de listado además limpian `error`).
2. Llamada al repositorio.
3. Éxito: se actualiza el estado local y, si procede, toast de éxito.
4. ApiError: log con contexto, `error` para las operaciones que lo llevan,
   toast de error si la operación es visible y valor neutro de retorno.
5. loading = False siempre.

Los errores de programación no se capturan: llegan al hook global.
"""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

from clinicportal.app.bootstrap_logging import get_logger
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.errores import ApiError
from clinicportal.app.ui.widgets.toast import GestorToasts

LOGGER = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class ControladorRecurso(Generic[T]):
    def __init__(self, toasts: GestorToasts, i18n: I18nManager) -> None:
        self._toasts = toasts
        self._i18n = i18n
        self.items: List[T] = []
        self.loading = False
        self.error: Optional[str] = None
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> None:
        """Avisa a la vista de cualquier cambio de estado."""
        self._listeners.append(callback)

    def _notificar(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _set_loading(self, valor: bool) -> None:
        self.loading = valor
        self._notificar()

    def _ejecutar(
        self,
        operacion: str,
        llamada: Callable[[], R],
        *,
        por_defecto: R,
        error_key: Optional[str] = None,
        exito_key: Optional[str] = None,
        registra_error: bool = False,
        limpia_error: bool = False,
        con_loading: bool = True,
    ) -> R:
        if con_loading:
            self._set_loading(True)
        if limpia_error:
            self.error = None
        try:
            resultado = llamada()
        except ApiError as exc:
            LOGGER.error(
                "api_operation_failed",
                extra={"operacion": operacion, "error": str(exc), **exc.contexto()},
            )
            mensaje = self._i18n.t(error_key) if error_key else None
            if registra_error and mensaje:
                self.error = mensaje
            if mensaje:
                self._toasts.error(mensaje, operacion=operacion)
            return por_defecto
        finally:
            if con_loading:
                self.loading = False
            self._notificar()
        if exito_key:
            self._toasts.success(self._i18n.t(exito_key), operacion=operacion)
        return resultado

    def _cargar_lista(self, operacion: str, llamada: Callable[[], List[T]], error_key: str) -> List[T]:
        def _reemplazar() -> List[T]:
            items = llamada()
            self.items = items
            return items

        return self._ejecutar(
            operacion,
            _reemplazar,
            por_defecto=[],
            error_key=error_key,
            registra_error=True,
            limpia_error=True,
        )

    def _crear_y_anadir(self, operacion: str, llamada: Callable[[], T], exito_key: str, error_key: str, **kwargs) -> Optional[T]:
        def _anadir() -> T:
            nuevo = llamada()
            self.items = [*self.items, nuevo]
            return nuevo

        return self._ejecutar(
            operacion,
            _anadir,
            por_defecto=None,
            exito_key=exito_key,
            error_key=error_key,
            **kwargs,
        )
