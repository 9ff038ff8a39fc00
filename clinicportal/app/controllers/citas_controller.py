from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Optional

from clinicportal.app.controllers.base_controller import ControladorRecurso
from clinicportal.app.domain.enums import EstadoCita
from clinicportal.app.domain.modelos import Cita, DatosCita
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.repos_citas import CitasRepository
from clinicportal.app.ui.widgets.toast import GestorToasts


class CitasController(ControladorRecurso[Cita]):
    """Citas y sus transiciones de estado (completar, cancelar, ausencia)."""

    def __init__(self, repo: CitasRepository, toasts: GestorToasts, i18n: I18nManager) -> None:
        super().__init__(toasts, i18n)
        self._repo = repo

    def cargar(self) -> List[Cita]:
        return self._cargar_lista("citas_cargar", self._repo.list_all, "citas.error.cargar")

    def crear(self, datos: DatosCita) -> Optional[Cita]:
        datos.validar()
        return self._crear_y_anadir(
            "citas_crear",
            lambda: self._repo.create(datos),
            "citas.exito.crear",
            "citas.error.crear",
        )

    def hoy(self) -> List[Cita]:
        return self._ejecutar("citas_hoy", self._repo.today, por_defecto=[], error_key="citas.error.hoy")

    def proximas(self) -> List[Cita]:
        return self._ejecutar("citas_proximas", self._repo.upcoming, por_defecto=[], error_key="citas.error.proximas")

    def completar(self, cita_id: str) -> bool:
        return self._cambiar_estado(
            "citas_completar", cita_id, self._repo.complete, EstadoCita.COMPLETED,
            "citas.exito.completar", "citas.error.actualizar",
        )

    def cancelar(self, cita_id: str) -> bool:
        return self._cambiar_estado(
            "citas_cancelar", cita_id, self._repo.cancel, EstadoCita.CANCELLED,
            "citas.exito.cancelar", "citas.error.cancelar",
        )

    def marcar_ausente(self, cita_id: str) -> bool:
        return self._cambiar_estado(
            "citas_marcar_ausente", cita_id, self._repo.no_show, EstadoCita.NO_SHOW,
            "citas.exito.ausente", "citas.error.actualizar",
        )

    def _cambiar_estado(
        self,
        operacion: str,
        cita_id: str,
        accion: Callable[[str], None],
        estado: EstadoCita,
        exito_key: str,
        error_key: str,
    ) -> bool:
        def _aplicar() -> bool:
            accion(cita_id)
            self.items = [
                replace(c, estado=estado.value) if c.cita_id == cita_id else c
                for c in self.items
            ]
            return True

        return self._ejecutar(operacion, _aplicar, por_defecto=False, exito_key=exito_key, error_key=error_key)
