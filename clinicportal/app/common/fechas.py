from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def dia_local(valor: Optional[datetime]) -> Optional[date]:
    """Día de calendario en la zona local; los datetimes naive se toman tal cual."""
    if valor is None:
        return None
    if valor.tzinfo is not None:
        return valor.astimezone().date()
    return valor.date()


def ahora_ms(instante: Optional[datetime] = None) -> int:
    return int((instante or datetime.now()).timestamp() * 1000)
