from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from clinicportal.app.domain.modelos import Consulta, Medico, Paciente, Pago, Receta

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class FiltrosRecetas:
    texto: str = ""
    desde: Optional[datetime] = None
    hasta: Optional[datetime] = None

    @property
    def con_rango(self) -> bool:
        return self.desde is not None and self.hasta is not None


def _comparable(valor: datetime, referencia: datetime) -> datetime:
    """Alinea naive/aware para poder comparar."""
    if (valor.tzinfo is None) == (referencia.tzinfo is None):
        return valor
    if valor.tzinfo is None:
        return valor.astimezone()
    return valor.astimezone().replace(tzinfo=None)


def filtrar_recetas(recetas: Iterable[Receta], filtros: FiltrosRecetas) -> List[Receta]:
    """Texto sobre prescription_id; el rango de fechas es estricto en ambos extremos."""
    texto = filtros.texto.lower()
    resultado = []
    for receta in recetas:
        if texto and texto not in receta.receta_id.lower():
            continue
        if filtros.con_rango:
            creada = receta.creado_en
            if creada is None:
                continue
            if not (_comparable(creada, filtros.desde) > filtros.desde and _comparable(creada, filtros.hasta) < filtros.hasta):
                continue
        resultado.append(receta)
    return resultado


def _buscar(items: Sequence[T], atributo: str, valor: Optional[str]) -> Optional[T]:
    if not valor:
        return None
    return next((item for item in items if getattr(item, atributo) == valor), None)


def consulta_de_receta(receta: Receta, consultas: Sequence[Consulta]) -> Optional[Consulta]:
    return _buscar(consultas, "consulta_id", receta.consulta_id)


def paciente_por_id(paciente_id: Optional[str], pacientes: Sequence[Paciente]) -> Optional[Paciente]:
    return _buscar(pacientes, "paciente_id", paciente_id)


def medico_por_id(medico_id: Optional[str], medicos: Sequence[Medico]) -> Optional[Medico]:
    return _buscar(medicos, "medico_id", medico_id)


def pagos_de_receta(receta: Receta, pagos: Iterable[Pago]) -> List[Pago]:
    return [p for p in pagos if receta.consulta_id and p.consulta_id == receta.consulta_id]


_CLAVES_NOMBRE = ("name", "medication", "medication_name")
_CLAVES_CONTADOR = ("count", "total", "prescriptions", "times_prescribed")


def filas_populares(data: Any) -> List[Tuple[str, int]]:
    """Normaliza la respuesta de popular_medications a pares (medicamento, veces)."""
    if isinstance(data, Mapping):
        if "results" in data:
            return filas_populares(data["results"])
        return [(str(nombre), _a_entero(veces)) for nombre, veces in data.items()]
    filas = []
    for fila in data or []:
        if not isinstance(fila, Mapping):
            filas.append((str(fila), 0))
            continue
        nombre = next((fila[k] for k in _CLAVES_NOMBRE if fila.get(k)), "")
        veces = next((fila[k] for k in _CLAVES_CONTADOR if k in fila), 0)
        filas.append((str(nombre), _a_entero(veces)))
    return filas


def _a_entero(valor: Any) -> int:
    try:
        return int(valor)
    except (TypeError, ValueError):
        return 0
