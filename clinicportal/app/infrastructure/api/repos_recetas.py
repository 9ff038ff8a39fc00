from __future__ import annotations

from typing import Any, List

from clinicportal.app.domain.modelos import DatosRecetaItem, Receta, RecetaItem
from clinicportal.app.infrastructure.api.cliente_http import ruta
from clinicportal.app.infrastructure.api.mapeo import (
    receta_a_api,
    receta_desde_api,
    receta_item_a_api,
    receta_item_desde_api,
)
from clinicportal.app.infrastructure.api.repos_base import RepositorioApiBase

_RECURSO_ITEMS = "prescription-items"


class RecetasRepository(RepositorioApiBase):
    """Recetas (/prescriptions/) y sus líneas (/prescription-items/)."""

    RECURSO = "prescriptions"

    def list_all(self) -> List[Receta]:
        return self._listar(receta_desde_api)

    def create(self, consulta_id: str, notas: str) -> Receta:
        return self._crear(receta_desde_api, receta_a_api(consulta_id, notas))

    def add_item(self, receta_id: str, datos: DatosRecetaItem) -> RecetaItem:
        data = self._cliente.post(ruta(_RECURSO_ITEMS), receta_item_a_api(receta_id, datos))
        return receta_item_desde_api(data)

    def popular_medications(self) -> Any:
        return self._cliente.get(ruta(_RECURSO_ITEMS, "popular_medications"))
