# application/consultas/pagos.py
"""
Vista financiera de las consultas.

- Una consulta está pagada si existe un pago COMPLETED que referencia su id.
- Las estadísticas se calculan en cliente sobre el listado de pagos ya cargado.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, List, Optional

from clinicportal.app.common.fechas import ahora_ms, dia_local
from clinicportal.app.domain.enums import EstadoPago, MetodoPago
from clinicportal.app.domain.modelos import Consulta, DatosPago, Pago

TARIFA_CONSULTA = Decimal("25000")
MONEDA = "XAF"
FILTROS_CONSULTA = ("all", "paid", "unpaid")


def _completados(pagos: Iterable[Pago]) -> List[Pago]:
    return [p for p in pagos if p.estado == EstadoPago.COMPLETED.value]


def consulta_pagada(consulta_id: str, pagos: Iterable[Pago]) -> bool:
    return any(p.consulta_id == consulta_id for p in _completados(pagos))


def importe_pagado(consulta_id: str, pagos: Iterable[Pago]) -> Decimal:
    for pago in _completados(pagos):
        if pago.consulta_id == consulta_id:
            return pago.importe
    return Decimal("0")


def filtrar_consultas_por_pago(consultas: Iterable[Consulta], pagos: Iterable[Pago], filtro: str) -> List[Consulta]:
    pagos = list(pagos)
    lista = list(consultas)
    if filtro == "paid":
        return [c for c in lista if consulta_pagada(c.consulta_id, pagos)]
    if filtro == "unpaid":
        return [c for c in lista if not consulta_pagada(c.consulta_id, pagos)]
    return lista


@dataclass(frozen=True, slots=True)
class EstadisticasFinancieras:
    ingresos_hoy: Decimal = Decimal("0")
    pagos_hoy: int = 0
    sin_pagar: int = 0
    ingresos_totales: Decimal = Decimal("0")


def estadisticas_financieras(
    pagos: Iterable[Pago],
    consultas_visibles: Iterable[Consulta],
    hoy: Optional[date] = None,
) -> EstadisticasFinancieras:
    """`consultas_visibles` es el listado ya filtrado que ve el usuario.

    Los ingresos de hoy se cuentan por día de calendario local (`dia_local`),
    no por la fecha UTC del ISO: un pago a las 00:30 hora local entra en el
    día local aunque en UTC siga siendo la víspera.
    """
    referencia = hoy or date.today()
    completados = _completados(pagos)
    de_hoy = [p for p in completados if dia_local(p.creado_en) == referencia]
    return EstadisticasFinancieras(
        ingresos_hoy=sum((p.importe for p in de_hoy), Decimal("0")),
        pagos_hoy=len(de_hoy),
        sin_pagar=sum(1 for c in consultas_visibles if not consulta_pagada(c.consulta_id, completados)),
        ingresos_totales=sum((p.importe for p in completados), Decimal("0")),
    )


def generar_referencia(prefijo: str = "CONS", instante: Optional[datetime] = None) -> str:
    """Prefijo + últimos 6 dígitos del timestamp en milisegundos."""
    return f"{prefijo}-{str(ahora_ms(instante))[-6:]}"


def datos_pago_por_defecto(consulta_id: str, *, prefijo: str = "CONS", instante: Optional[datetime] = None) -> DatosPago:
    return DatosPago(
        consulta=consulta_id,
        importe=TARIFA_CONSULTA,
        metodo=MetodoPago.CASH.value,
        estado=EstadoPago.COMPLETED.value,
        referencia=generar_referencia(prefijo, instante),
    )


def formatear_importe(importe: Decimal) -> str:
    entero = int(importe.quantize(Decimal("1")))
    return f"{entero:,}".replace(",", " ") + f" {MONEDA}"
