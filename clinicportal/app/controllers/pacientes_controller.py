from __future__ import annotations

from datetime import date
from typing import Any, List, Optional

from clinicportal.app.application.pacientes.filtros import calcular_edad
from clinicportal.app.controllers.base_controller import ControladorRecurso
from clinicportal.app.domain.modelos import DatosPaciente, HistoriaClinica, Paciente
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.repos_pacientes import PacientesRepository
from clinicportal.app.ui.widgets.toast import GestorToasts

MIN_CARACTERES_BUSQUEDA = 2


class PacientesController(ControladorRecurso[Paciente]):
    def __init__(self, repo: PacientesRepository, toasts: GestorToasts, i18n: I18nManager) -> None:
        super().__init__(toasts, i18n)
        self._repo = repo

    def cargar(self) -> List[Paciente]:
        return self._cargar_lista("pacientes_cargar", self._repo.list_all, "pacientes.error.cargar")

    def buscar(self, texto: str) -> List[Paciente]:
        """Búsqueda en servidor; por debajo de 2 caracteres no se consulta."""
        if not texto or len(texto) < MIN_CARACTERES_BUSQUEDA:
            return []
        return self._ejecutar(
            "pacientes_buscar",
            lambda: self._repo.search(texto),
            por_defecto=[],
            error_key="pacientes.error.buscar",
        )

    def obtener(self, paciente_id: str) -> Optional[Paciente]:
        return self._ejecutar(
            "pacientes_obtener",
            lambda: self._repo.get_by_id(paciente_id),
            por_defecto=None,
            error_key="pacientes.error.obtener",
        )

    def crear(self, datos: DatosPaciente) -> Optional[Paciente]:
        datos.validar()
        return self._crear_y_anadir(
            "pacientes_crear",
            lambda: self._repo.create(datos),
            "pacientes.exito.crear",
            "pacientes.error.crear",
        )

    def actualizar(self, paciente_id: str, datos: DatosPaciente) -> Optional[Paciente]:
        def _actualizar() -> Paciente:
            actualizado = self._repo.update(paciente_id, datos)
            self.items = [actualizado if p.paciente_id == paciente_id else p for p in self.items]
            return actualizado

        return self._ejecutar(
            "pacientes_actualizar",
            _actualizar,
            por_defecto=None,
            exito_key="pacientes.exito.actualizar",
            error_key="pacientes.error.actualizar",
        )

    def eliminar(self, paciente_id: str) -> bool:
        def _eliminar() -> bool:
            self._repo.delete(paciente_id)
            self.items = [p for p in self.items if p.paciente_id != paciente_id]
            return True

        return self._ejecutar(
            "pacientes_eliminar",
            _eliminar,
            por_defecto=False,
            exito_key="pacientes.exito.eliminar",
            error_key="pacientes.error.eliminar",
        )

    def estadisticas(self) -> Optional[Any]:
        return self._ejecutar("pacientes_estadisticas", self._repo.stats, por_defecto=None, con_loading=False)

    def historia_clinica(self, paciente_id: str) -> Optional[HistoriaClinica]:
        return self._ejecutar(
            "pacientes_historia_clinica",
            lambda: self._repo.medical_record(paciente_id),
            por_defecto=None,
            con_loading=False,
        )

    @staticmethod
    def calcular_edad(fecha_nacimiento: date, hoy: Optional[date] = None) -> int:
        return calcular_edad(fecha_nacimiento, hoy)
