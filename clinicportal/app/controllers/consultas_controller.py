from __future__ import annotations

from typing import Any, List, Optional

from clinicportal.app.controllers.base_controller import ControladorRecurso
from clinicportal.app.domain.modelos import Consulta, DatosConsulta
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.repos_consultas import ConsultasRepository
from clinicportal.app.ui.widgets.toast import GestorToasts


class ConsultasController(ControladorRecurso[Consulta]):
    def __init__(self, repo: ConsultasRepository, toasts: GestorToasts, i18n: I18nManager) -> None:
        super().__init__(toasts, i18n)
        self._repo = repo

    def cargar(self) -> List[Consulta]:
        return self._cargar_lista("consultas_cargar", self._repo.list_all, "consultas.error.cargar")

    def crear(self, datos: DatosConsulta) -> Optional[Consulta]:
        datos.validar()
        return self._crear_y_anadir(
            "consultas_crear",
            lambda: self._repo.create(datos),
            "consultas.exito.crear",
            "consultas.error.crear",
        )

    def hoy(self) -> List[Consulta]:
        return self._ejecutar("consultas_hoy", self._repo.today, por_defecto=[], error_key="consultas.error.hoy")

    def proximas(self) -> List[Consulta]:
        return self._ejecutar(
            "consultas_proximas",
            self._repo.upcoming,
            por_defecto=[],
            error_key="consultas.error.proximas",
        )

    def estadisticas(self) -> Optional[Any]:
        return self._ejecutar(
            "consultas_estadisticas",
            self._repo.stats,
            por_defecto=None,
            error_key="consultas.error.estadisticas",
        )
