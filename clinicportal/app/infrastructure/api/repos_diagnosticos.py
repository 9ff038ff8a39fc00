from __future__ import annotations

from typing import List

from clinicportal.app.domain.modelos import DatosDiagnostico, Diagnostico
from clinicportal.app.infrastructure.api.mapeo import diagnostico_a_api, diagnostico_desde_api
from clinicportal.app.infrastructure.api.repos_base import RepositorioApiBase


class DiagnosticosRepository(RepositorioApiBase):
    RECURSO = "diagnostics"

    def list_all(self) -> List[Diagnostico]:
        return self._listar(diagnostico_desde_api)

    def list_with_icd(self) -> List[Diagnostico]:
        return self._listar(diagnostico_desde_api, "with_icd")

    def create(self, datos: DatosDiagnostico) -> Diagnostico:
        return self._crear(diagnostico_desde_api, diagnostico_a_api(datos))
