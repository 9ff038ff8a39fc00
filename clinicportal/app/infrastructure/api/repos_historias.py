from __future__ import annotations

from typing import List

from clinicportal.app.domain.modelos import HistoriaClinica
from clinicportal.app.infrastructure.api.mapeo import historia_desde_api
from clinicportal.app.infrastructure.api.repos_base import RepositorioApiBase


class HistoriasClinicasRepository(RepositorioApiBase):
    RECURSO = "medical-records"

    def list_all(self) -> List[HistoriaClinica]:
        return self._listar(historia_desde_api)

    def get_by_id(self, historia_id: str) -> HistoriaClinica:
        return self._obtener(historia_desde_api, historia_id)
