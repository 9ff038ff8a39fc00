from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from clinicportal.app.common.fechas import dia_local
from clinicportal.app.domain.enums import EstadoCita, EstadoPago
from clinicportal.app.domain.modelos import Cita, Paciente, Pago

FILTROS_PAGO = ("", "paid", "unpaid", "pending", "failed")


@dataclass(frozen=True, slots=True)
class EstadoPagoCita:
    pagado: bool = False
    importe: Decimal = Decimal("0")
    metodo: Optional[str] = None
    fecha_pago: Optional[datetime] = None
    estado: Optional[str] = None


SIN_PAGO = EstadoPagoCita()


def estados_pago_por_consulta(pagos: Iterable[Pago]) -> Dict[str, EstadoPagoCita]:
    """Último pago visto por id de consulta."""
    resultado: Dict[str, EstadoPagoCita] = {}
    for pago in pagos:
        if not pago.consulta_id:
            continue
        resultado[pago.consulta_id] = EstadoPagoCita(
            pagado=pago.estado == EstadoPago.COMPLETED.value,
            importe=pago.importe,
            metodo=pago.metodo,
            fecha_pago=pago.pagado_en,
            estado=pago.estado,
        )
    return resultado


def estado_pago(cita: Cita, estados: Dict[str, EstadoPagoCita]) -> EstadoPagoCita:
    return estados.get(cita.cita_id, SIN_PAGO)


@dataclass(frozen=True, slots=True)
class FiltrosCitas:
    fecha: date
    texto: str = ""
    estado: str = ""
    pago: str = ""


def _nombre_paciente(cita: Cita, pacientes: Dict[str, Paciente]) -> str:
    paciente = pacientes.get(cita.paciente or "")
    if paciente is not None:
        return paciente.nombre_visible()
    return cita.paciente_nombre or ""


def _coincide_pago(filtro: str, estado: EstadoPagoCita) -> bool:
    if not filtro:
        return True
    if filtro == "paid":
        return estado.pagado
    if filtro == "unpaid":
        return not estado.pagado and not estado.estado
    if filtro == "pending":
        return estado.estado == EstadoPago.PENDING.value
    if filtro == "failed":
        return estado.estado == EstadoPago.FAILED.value
    return False


def filtrar_citas(
    citas: Iterable[Cita],
    filtros: FiltrosCitas,
    *,
    pacientes: Iterable[Paciente] = (),
    estados_pago: Optional[Dict[str, EstadoPagoCita]] = None,
) -> List[Cita]:
    por_id = {p.paciente_id: p for p in pacientes}
    estados = estados_pago or {}
    texto = filtros.texto.lower()
    return [
        cita
        for cita in citas
        if dia_local(cita.fecha_hora) == filtros.fecha
        and texto in _nombre_paciente(cita, por_id).lower()
        and (not filtros.estado or cita.estado == filtros.estado)
        and _coincide_pago(filtros.pago, estado_pago(cita, estados))
    ]


@dataclass(frozen=True, slots=True)
class ContadoresDia:
    total: int = 0
    completadas: int = 0
    programadas: int = 0
    canceladas: int = 0
    pagadas: int = 0
    sin_pagar: int = 0


def contadores_dia(citas_hoy: Iterable[Cita], estados_pago: Dict[str, EstadoPagoCita]) -> ContadoresDia:
    citas = list(citas_hoy)
    pagadas = [c for c in citas if estado_pago(c, estados_pago).pagado]
    return ContadoresDia(
        total=len(citas),
        completadas=sum(1 for c in citas if c.estado == EstadoCita.COMPLETED.value),
        programadas=sum(1 for c in citas if c.estado == EstadoCita.SCHEDULED.value),
        canceladas=sum(1 for c in citas if c.estado == EstadoCita.CANCELLED.value),
        pagadas=len(pagadas),
        sin_pagar=sum(
            1 for c in citas if c.estado == EstadoCita.COMPLETED.value and not estado_pago(c, estados_pago).pagado
        ),
    )
