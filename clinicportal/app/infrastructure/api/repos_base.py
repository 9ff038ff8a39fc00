from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, TypeVar

from clinicportal.app.infrastructure.api.cliente_http import ClienteApi, ruta
from clinicportal.app.infrastructure.api.mapeo import mapear_lista

T = TypeVar("T")


class RepositorioApiBase:
    """Operaciones comunes sobre un recurso REST `/<recurso>/`."""

    RECURSO = ""

    def __init__(self, cliente: ClienteApi) -> None:
        self._cliente = cliente

    def _ruta(self, *partes: Any) -> str:
        return ruta(self.RECURSO, *partes)

    def _listar(
        self,
        mapper: Callable[[Any], T],
        *partes: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[T]:
        return mapear_lista(self._cliente.get(self._ruta(*partes), params=params), mapper)

    def _obtener(self, mapper: Callable[[Any], T], *partes: Any) -> T:
        return mapper(self._cliente.get(self._ruta(*partes)))

    def _crear(self, mapper: Callable[[Any], T], body: Mapping[str, Any]) -> T:
        return mapper(self._cliente.post(self._ruta(), body))

    def _accion(self, identificador: Any, accion: str) -> None:
        self._cliente.post(self._ruta(identificador, accion), leer_json=False)

    def _json(self, *partes: Any) -> Any:
        return self._cliente.get(self._ruta(*partes))
