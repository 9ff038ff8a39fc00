from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Optional

from clinicportal.app.controllers.base_controller import ControladorRecurso
from clinicportal.app.domain.modelos import DatosRecetaItem, Receta, RecetaItem
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.repos_recetas import RecetasRepository
from clinicportal.app.ui.widgets.toast import GestorToasts


class RecetasController(ControladorRecurso[Receta]):
    def __init__(self, repo: RecetasRepository, toasts: GestorToasts, i18n: I18nManager) -> None:
        super().__init__(toasts, i18n)
        self._repo = repo

    def cargar(self) -> List[Receta]:
        return self._cargar_lista("recetas_cargar", self._repo.list_all, "recetas.error.cargar")

    def crear(self, consulta_id: str, notas: str = "") -> Optional[Receta]:
        return self._crear_y_anadir(
            "recetas_crear",
            lambda: self._repo.create(consulta_id, notas),
            "recetas.exito.crear",
            "recetas.error.crear",
            registra_error=True,
            limpia_error=True,
        )

    def agregar_item(self, receta_id: str, datos: DatosRecetaItem) -> Optional[RecetaItem]:
        datos.validar()

        def _agregar() -> RecetaItem:
            item = self._repo.add_item(receta_id, datos)
            self.items = [
                replace(r, items=[*r.items, item]) if r.receta_id == receta_id else r
                for r in self.items
            ]
            return item

        return self._ejecutar(
            "recetas_agregar_item",
            _agregar,
            por_defecto=None,
            exito_key="recetas.exito.agregar_item",
            error_key="recetas.error.agregar_item",
        )

    def medicamentos_populares(self) -> Optional[Any]:
        return self._ejecutar(
            "recetas_medicamentos_populares",
            self._repo.popular_medications,
            por_defecto=None,
            error_key="recetas.error.populares",
        )
