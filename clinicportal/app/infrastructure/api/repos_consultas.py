from __future__ import annotations

from typing import Any, List

from clinicportal.app.domain.modelos import Consulta, DatosConsulta
from clinicportal.app.infrastructure.api.mapeo import consulta_a_api, consulta_desde_api
from clinicportal.app.infrastructure.api.repos_base import RepositorioApiBase


class ConsultasRepository(RepositorioApiBase):
    RECURSO = "consultations"

    def list_all(self) -> List[Consulta]:
        return self._listar(consulta_desde_api)

    def today(self) -> List[Consulta]:
        return self._listar(consulta_desde_api, "today")

    def upcoming(self) -> List[Consulta]:
        return self._listar(consulta_desde_api, "upcoming")

    def create(self, datos: DatosConsulta) -> Consulta:
        return self._crear(consulta_desde_api, consulta_a_api(datos))

    def stats(self) -> Any:
        return self._json("stats")
