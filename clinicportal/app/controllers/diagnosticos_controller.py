from __future__ import annotations

from typing import List, Optional

from clinicportal.app.controllers.base_controller import ControladorRecurso
from clinicportal.app.domain.modelos import DatosDiagnostico, Diagnostico
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.repos_diagnosticos import DiagnosticosRepository
from clinicportal.app.ui.widgets.toast import GestorToasts


class DiagnosticosController(ControladorRecurso[Diagnostico]):
    def __init__(self, repo: DiagnosticosRepository, toasts: GestorToasts, i18n: I18nManager) -> None:
        super().__init__(toasts, i18n)
        self._repo = repo

    def cargar(self) -> List[Diagnostico]:
        return self._cargar_lista("diagnosticos_cargar", self._repo.list_all, "diagnosticos.error.cargar")

    def crear(self, datos: DatosDiagnostico) -> Optional[Diagnostico]:
        datos.validar()
        return self._crear_y_anadir(
            "diagnosticos_crear",
            lambda: self._repo.create(datos),
            "diagnosticos.exito.crear",
            "diagnosticos.error.crear",
        )

    def con_cie(self) -> List[Diagnostico]:
        return self._ejecutar(
            "diagnosticos_con_cie",
            self._repo.list_with_icd,
            por_defecto=[],
            error_key="diagnosticos.error.con_cie",
        )
