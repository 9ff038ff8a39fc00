from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any


def a_decimal(valor: Any) -> Decimal:
    """Importes del backend (str, int o float) a Decimal; vacío o inválido -> 0."""
    if valor in (None, ""):
        return Decimal("0")
    try:
        return Decimal(str(valor))
    except InvalidOperation:
        return Decimal("0")
