from __future__ import annotations

from typing import Any, Dict, List

from clinicportal.app.domain.modelos import DatosMedico, Medico
from clinicportal.app.infrastructure.api.mapeo import (
    medico_a_api,
    medico_desde_api,
    medicos_por_especialidad_desde_api,
)
from clinicportal.app.infrastructure.api.repos_base import RepositorioApiBase


class MedicosRepository(RepositorioApiBase):
    RECURSO = "doctors"

    def list_all(self) -> List[Medico]:
        return self._listar(medico_desde_api)

    def create(self, datos: DatosMedico) -> Medico:
        return self._crear(medico_desde_api, medico_a_api(datos))

    def by_specialty(self) -> Dict[str, List[Medico]]:
        return medicos_por_especialidad_desde_api(self._json("by_specialty"))

    def stats(self) -> Any:
        return self._json("stats")
