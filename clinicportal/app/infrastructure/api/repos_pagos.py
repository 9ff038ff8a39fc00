from __future__ import annotations

from typing import Any, List

from clinicportal.app.domain.modelos import DatosPago, Pago
from clinicportal.app.infrastructure.api.mapeo import pago_a_api, pago_desde_api
from clinicportal.app.infrastructure.api.repos_base import RepositorioApiBase


class PagosRepository(RepositorioApiBase):
    RECURSO = "payments"

    def list_all(self) -> List[Pago]:
        return self._listar(pago_desde_api)

    def create(self, datos: DatosPago) -> Pago:
        return self._crear(pago_desde_api, pago_a_api(datos))

    def stats(self) -> Any:
        return self._json("stats")

    def daily_revenue(self) -> Any:
        return self._json("daily_revenue")

    def by_method(self) -> Any:
        return self._json("by_method")

    def mark_paid(self, pago_id: Any) -> None:
        self._accion(pago_id, "mark_paid")

    def refund(self, pago_id: Any) -> None:
        self._accion(pago_id, "refund")

    def mark_failed(self, pago_id: Any) -> None:
        self._accion(pago_id, "mark_failed")
