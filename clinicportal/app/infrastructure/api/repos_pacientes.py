from __future__ import annotations

from typing import Any, List

from clinicportal.app.domain.modelos import DatosPaciente, HistoriaClinica, Paciente
from clinicportal.app.infrastructure.api.mapeo import (
    historia_desde_api,
    paciente_a_api,
    paciente_desde_api,
    paciente_parcial_a_api,
)
from clinicportal.app.infrastructure.api.repos_base import RepositorioApiBase


class PacientesRepository(RepositorioApiBase):
    """Acceso a /patients/."""

    RECURSO = "patients"

    def list_all(self) -> List[Paciente]:
        return self._listar(paciente_desde_api)

    def search(self, texto: str) -> List[Paciente]:
        return self._listar(paciente_desde_api, params={"search": texto})

    def get_by_id(self, paciente_id: str) -> Paciente:
        return self._obtener(paciente_desde_api, paciente_id)

    def create(self, datos: DatosPaciente) -> Paciente:
        return self._crear(paciente_desde_api, paciente_a_api(datos))

    def update(self, paciente_id: str, datos: DatosPaciente) -> Paciente:
        data = self._cliente.put(self._ruta(paciente_id), paciente_parcial_a_api(datos))
        return paciente_desde_api(data)

    def delete(self, paciente_id: str) -> None:
        self._cliente.delete(self._ruta(paciente_id))

    def stats(self) -> Any:
        return self._json("stats")

    def medical_record(self, paciente_id: str) -> HistoriaClinica:
        return self._obtener(historia_desde_api, paciente_id, "medical_record")
