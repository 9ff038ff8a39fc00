from __future__ import annotations

from typing import Iterable, List

from clinicportal.app.common.search_utils import contains_text
from clinicportal.app.domain.modelos import Diagnostico

MAX_SIN_FILTRO = 10


def filtrar_diagnosticos(diagnosticos: Iterable[Diagnostico], texto: str) -> List[Diagnostico]:
    """Con más de un carácter filtra por nombre o descripción; si no, los 10 primeros."""
    lista = list(diagnosticos)
    if len(texto) > 1:
        return [d for d in lista if contains_text(texto, d.nombre, d.descripcion)]
    return lista[:MAX_SIN_FILTRO]
