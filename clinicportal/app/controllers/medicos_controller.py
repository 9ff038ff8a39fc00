from __future__ import annotations

from typing import Any, Dict, List, Optional

from clinicportal.app.controllers.base_controller import ControladorRecurso
from clinicportal.app.domain.modelos import DatosMedico, Medico
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.repos_medicos import MedicosRepository
from clinicportal.app.ui.widgets.toast import GestorToasts


class MedicosController(ControladorRecurso[Medico]):
    def __init__(self, repo: MedicosRepository, toasts: GestorToasts, i18n: I18nManager) -> None:
        super().__init__(toasts, i18n)
        self._repo = repo

    def cargar(self) -> List[Medico]:
        return self._cargar_lista("medicos_cargar", self._repo.list_all, "medicos.error.cargar")

    def crear(self, datos: DatosMedico) -> Optional[Medico]:
        datos.validar()
        return self._crear_y_anadir(
            "medicos_crear",
            lambda: self._repo.create(datos),
            "medicos.exito.crear",
            "medicos.error.crear",
        )

    def por_especialidad(self) -> Dict[str, List[Medico]]:
        return self._ejecutar(
            "medicos_por_especialidad",
            self._repo.by_specialty,
            por_defecto={},
            error_key="medicos.error.por_especialidad",
        )

    def estadisticas(self) -> Optional[Any]:
        return self._ejecutar(
            "medicos_estadisticas",
            self._repo.stats,
            por_defecto=None,
            error_key="medicos.error.estadisticas",
        )
