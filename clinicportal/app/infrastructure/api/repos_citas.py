from __future__ import annotations

from typing import List

from clinicportal.app.domain.modelos import Cita, DatosCita
from clinicportal.app.infrastructure.api.mapeo import cita_a_api, cita_desde_api
from clinicportal.app.infrastructure.api.repos_base import RepositorioApiBase


class CitasRepository(RepositorioApiBase):
    """Acceso a /appointments/ y sus acciones de estado."""

    RECURSO = "appointments"

    def list_all(self) -> List[Cita]:
        return self._listar(cita_desde_api)

    def today(self) -> List[Cita]:
        return self._listar(cita_desde_api, "today")

    def upcoming(self) -> List[Cita]:
        return self._listar(cita_desde_api, "upcoming")

    def create(self, datos: DatosCita) -> Cita:
        return self._crear(cita_desde_api, cita_a_api(datos))

    def complete(self, cita_id: str) -> None:
        self._accion(cita_id, "complete")

    def cancel(self, cita_id: str) -> None:
        self._accion(cita_id, "cancel")

    def no_show(self, cita_id: str) -> None:
        self._accion(cita_id, "no_show")
