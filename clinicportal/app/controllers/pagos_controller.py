from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from clinicportal.app.controllers.base_controller import ControladorRecurso
from clinicportal.app.domain.enums import EstadoPago
from clinicportal.app.domain.modelos import DatosPago, Pago
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.repos_pagos import PagosRepository
from clinicportal.app.ui.widgets.toast import GestorToasts

Reloj = Callable[[], datetime]


def _ahora_utc() -> datetime:
    return datetime.now(timezone.utc)


class PagosController(ControladorRecurso[Pago]):
    """Pagos de consultas. Las acciones de estado casan por `id`, no por `payment_id`."""

    def __init__(
        self,
        repo: PagosRepository,
        toasts: GestorToasts,
        i18n: I18nManager,
        *,
        reloj: Reloj = _ahora_utc,
    ) -> None:
        super().__init__(toasts, i18n)
        self._repo = repo
        self._reloj = reloj

    def cargar(self) -> List[Pago]:
        return self._cargar_lista("pagos_cargar", self._repo.list_all, "pagos.error.cargar")

    def crear(self, datos: DatosPago) -> Optional[Pago]:
        datos.validar()
        return self._crear_y_anadir(
            "pagos_crear",
            lambda: self._repo.create(datos),
            "pagos.exito.crear",
            "pagos.error.crear",
            registra_error=True,
            limpia_error=True,
        )

    def estadisticas(self) -> Optional[Any]:
        return self._ejecutar("pagos_estadisticas", self._repo.stats, por_defecto=None, error_key="pagos.error.estadisticas")

    def ingresos_diarios(self) -> Optional[Any]:
        return self._ejecutar(
            "pagos_ingresos_diarios",
            self._repo.daily_revenue,
            por_defecto=None,
            error_key="pagos.error.ingresos_diarios",
        )

    def por_metodo(self) -> Optional[Any]:
        return self._ejecutar("pagos_por_metodo", self._repo.by_method, por_defecto=None, error_key="pagos.error.por_metodo")

    def marcar_pagado(self, pago_id: Any) -> bool:
        return self._cambiar_estado(
            "pagos_marcar_pagado", pago_id, self._repo.mark_paid, EstadoPago.COMPLETED,
            "pagos.exito.marcar_pagado", "pagos.error.actualizar", sella_pago=True,
        )

    def reembolsar(self, pago_id: Any) -> bool:
        return self._cambiar_estado(
            "pagos_reembolsar", pago_id, self._repo.refund, EstadoPago.REFUNDED,
            "pagos.exito.reembolsar", "pagos.error.reembolsar",
        )

    def marcar_fallido(self, pago_id: Any) -> bool:
        return self._cambiar_estado(
            "pagos_marcar_fallido", pago_id, self._repo.mark_failed, EstadoPago.FAILED,
            "pagos.exito.marcar_fallido", "pagos.error.actualizar",
        )

    def _cambiar_estado(
        self,
        operacion: str,
        pago_id: Any,
        accion: Callable[[Any], None],
        estado: EstadoPago,
        exito_key: str,
        error_key: str,
        *,
        sella_pago: bool = False,
    ) -> bool:
        def _aplicar() -> bool:
            accion(pago_id)
            cambios: dict[str, Any] = {"estado": estado.value}
            if sella_pago:
                cambios["pagado_en"] = self._reloj()
            self.items = [replace(p, **cambios) if str(p.id) == str(pago_id) else p for p in self.items]
            return True

        return self._ejecutar(operacion, _aplicar, por_defecto=False, exito_key=exito_key, error_key=error_key)
