from __future__ import annotations

from typing import Any, Dict, List, Optional

from clinicportal.app.controllers.base_controller import ControladorRecurso
from clinicportal.app.domain.modelos import Consulta, DatosConsulta, HistoriaClinica
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.errores import ApiHttpError
from clinicportal.app.infrastructure.api.repos_consultas import ConsultasRepository
from clinicportal.app.infrastructure.api.repos_historias import HistoriasClinicasRepository
from clinicportal.app.infrastructure.api.repos_pacientes import PacientesRepository
from clinicportal.app.ui.widgets.toast import GestorToasts


class HistoriasClinicasController(ControladorRecurso[HistoriaClinica]):
    """Historias clínicas cacheadas por paciente, más las consultas que las alimentan."""

    def __init__(
        self,
        repo: HistoriasClinicasRepository,
        pacientes_repo: PacientesRepository,
        consultas_repo: ConsultasRepository,
        toasts: GestorToasts,
        i18n: I18nManager,
    ) -> None:
        super().__init__(toasts, i18n)
        self._repo = repo
        self._pacientes_repo = pacientes_repo
        self._consultas_repo = consultas_repo
        self.historias: Dict[str, HistoriaClinica] = {}

    def cargar_todas(self) -> List[HistoriaClinica]:
        return self._ejecutar(
            "historias_cargar",
            self._repo.list_all,
            por_defecto=[],
            error_key="historias.error.cargar",
            registra_error=True,
            limpia_error=True,
        )

    def obtener(self, historia_id: str) -> Optional[HistoriaClinica]:
        def _obtener() -> HistoriaClinica:
            historia = self._repo.get_by_id(historia_id)
            self._cachear(historia.paciente_id or historia_id, historia)
            return historia

        return self._ejecutar(
            "historias_obtener",
            _obtener,
            por_defecto=None,
            error_key="historias.error.obtener",
            registra_error=True,
            limpia_error=True,
        )

    def de_paciente(self, paciente_id: str) -> Optional[HistoriaClinica]:
        """Historia del paciente; un 404 significa que aún no tiene y devuelve None."""

        def _obtener() -> Optional[HistoriaClinica]:
            try:
                historia = self._pacientes_repo.medical_record(paciente_id)
            except ApiHttpError as exc:
                if exc.no_encontrado:
                    return None
                raise
            self._cachear(paciente_id, historia)
            return historia

        return self._ejecutar(
            "historias_de_paciente",
            _obtener,
            por_defecto=None,
            error_key="historias.error.de_paciente",
            registra_error=True,
            limpia_error=True,
        )

    def consultas(self) -> List[Consulta]:
        return self._ejecutar(
            "historias_consultas",
            self._consultas_repo.list_all,
            por_defecto=[],
            error_key="consultas.error.cargar",
        )

    def crear_consulta(self, datos: DatosConsulta) -> Optional[Consulta]:
        datos.validar()
        return self._ejecutar(
            "historias_crear_consulta",
            lambda: self._consultas_repo.create(datos),
            por_defecto=None,
            exito_key="consultas.exito.crear",
            error_key="consultas.error.crear",
        )

    def consultas_hoy(self) -> List[Consulta]:
        return self._ejecutar("historias_consultas_hoy", self._consultas_repo.today, por_defecto=[], con_loading=False)

    def consultas_proximas(self) -> List[Consulta]:
        return self._ejecutar(
            "historias_consultas_proximas", self._consultas_repo.upcoming, por_defecto=[], con_loading=False
        )

    def estadisticas_consultas(self) -> Optional[Any]:
        return self._ejecutar(
            "historias_estadisticas_consultas", self._consultas_repo.stats, por_defecto=None, con_loading=False
        )

    def _cachear(self, paciente_id: str, historia: HistoriaClinica) -> None:
        self.historias = {**self.historias, paciente_id: historia}
