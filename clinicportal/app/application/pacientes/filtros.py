from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, List, Optional

from clinicportal.app.common.search_utils import contains_text
from clinicportal.app.domain.enums import EstadoPago
from clinicportal.app.domain.modelos import Paciente, Pago


def filtrar_pacientes(pacientes: Iterable[Paciente], texto: str) -> List[Paciente]:
    """Filtro local del listado: subcadena sin distinguir mayúsculas."""
    if not texto:
        return list(pacientes)
    return [
        p
        for p in pacientes
        if contains_text(texto, p.nombre_completo, p.nombre, p.apellidos, p.telefono, p.email, p.num_seguro)
    ]


def calcular_edad(fecha_nacimiento: date, hoy: Optional[date] = None) -> int:
    """Años cumplidos; resta uno si el cumpleaños de este año no ha llegado."""
    referencia = hoy or date.today()
    edad = referencia.year - fecha_nacimiento.year
    if (referencia.month, referencia.day) < (fecha_nacimiento.month, fecha_nacimiento.day):
        edad -= 1
    return edad


@dataclass(frozen=True, slots=True)
class BalancePaciente:
    total_pagado: Decimal
    total_pendiente: Decimal
    saldo: Decimal
    ultimo_pago: Optional[datetime]
    pagos: tuple[Pago, ...] = ()


def pagos_de_paciente(paciente: Paciente, pagos: Iterable[Pago]) -> List[Pago]:
    """Los pagos no llevan id de paciente: se casan por nombre completo."""
    if not paciente.nombre_completo:
        return []
    return [p for p in pagos if p.paciente_nombre and p.paciente_nombre == paciente.nombre_completo]


def balance_paciente(paciente: Paciente, pagos: Iterable[Pago]) -> BalancePaciente:
    propios = pagos_de_paciente(paciente, pagos)
    pagado = sum((p.importe for p in propios if p.estado == EstadoPago.COMPLETED.value), Decimal("0"))
    pendiente = sum((p.importe for p in propios if p.estado == EstadoPago.PENDING.value), Decimal("0"))
    fechas_pago = [p.pagado_en for p in propios if p.estado == EstadoPago.COMPLETED.value and p.pagado_en]
    return BalancePaciente(
        total_pagado=pagado,
        total_pendiente=pendiente,
        saldo=pendiente,
        # paid_at puede venir naive del servidor y aware del marcado local
        ultimo_pago=max(fechas_pago, key=lambda d: d.timestamp()) if fechas_pago else None,
        pagos=tuple(propios),
    )
