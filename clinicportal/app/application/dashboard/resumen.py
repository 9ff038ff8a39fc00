# application/dashboard/resumen.py
"""
Resumen del panel principal.

Agrega cinco lecturas independientes (estadísticas de pacientes, de
consultas y de pagos, consultas de hoy y próximas citas). Cada controlador
ya degrada a None/[] ante fallo, así que el resumen siempre se construye.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence

from clinicportal.app.common.numeros import a_decimal
from clinicportal.app.bootstrap_logging import get_logger
from clinicportal.app.domain.modelos import Cita, Consulta

if TYPE_CHECKING:
    from clinicportal.app.controllers.citas_controller import CitasController
    from clinicportal.app.controllers.consultas_controller import ConsultasController
    from clinicportal.app.controllers.pacientes_controller import PacientesController
    from clinicportal.app.controllers.pagos_controller import PagosController

LOGGER = get_logger(__name__)

MAX_FILAS = 5

_TERMINADO = {"completed", "terminé", "termine"}
_EN_CURSO = {"in_progress", "en_cours", "en cours"}


def etiqueta_estado_consulta(estado: Optional[str]) -> str:
    """Clave i18n del estado de una consulta; lo desconocido queda 'en espera'."""
    normalizado = (estado or "").lower()
    if normalizado in _TERMINADO:
        return "dashboard.estado.terminada"
    if normalizado in _EN_CURSO:
        return "dashboard.estado.en_curso"
    return "dashboard.estado.en_espera"


@dataclass(frozen=True, slots=True)
class FilaConsultaHoy:
    consulta_id: str
    paciente: Optional[str]
    hora: Optional[datetime]
    estado_key: str
    diagnostico: Optional[str]


@dataclass(frozen=True, slots=True)
class FilaProximaCita:
    cita_id: str
    paciente: Optional[str]
    fecha_hora: Optional[datetime]
    motivo: Optional[str]


@dataclass(frozen=True, slots=True)
class ResumenDashboard:
    total_pacientes: int = 0
    total_consultas: int = 0
    consultas_hoy: int = 0
    citas_programadas: int = 0
    ingresos: Decimal = Decimal("0")
    consultas_recientes: List[FilaConsultaHoy] = field(default_factory=list)
    proximas_citas: List[FilaProximaCita] = field(default_factory=list)


def _entero(stats: Any, clave: str) -> int:
    if not isinstance(stats, Mapping):
        return 0
    try:
        return int(stats.get(clave) or 0)
    except (TypeError, ValueError):
        return 0


def construir_resumen(
    *,
    stats_pacientes: Any,
    stats_pagos: Any,
    stats_consultas: Any = None,
    consultas_hoy: Sequence[Consulta],
    proximas_citas: Sequence[Cita],
) -> ResumenDashboard:
    ingresos = stats_pagos.get("total_revenue") if isinstance(stats_pagos, Mapping) else None
    return ResumenDashboard(
        total_pacientes=_entero(stats_pacientes, "total_patients"),
        total_consultas=_entero(stats_consultas, "total_consultations"),
        consultas_hoy=len(consultas_hoy),
        citas_programadas=len(proximas_citas),
        ingresos=a_decimal(ingresos),
        consultas_recientes=[
            FilaConsultaHoy(
                consulta_id=c.consulta_id,
                paciente=c.paciente_nombre,
                hora=c.fecha,
                estado_key=etiqueta_estado_consulta(c.estado),
                diagnostico=c.diagnostico_nombre or c.motivo,
            )
            for c in consultas_hoy[:MAX_FILAS]
        ],
        proximas_citas=[
            FilaProximaCita(cita_id=c.cita_id, paciente=c.paciente_nombre, fecha_hora=c.fecha_hora, motivo=c.notas)
            for c in proximas_citas[:MAX_FILAS]
        ],
    )


def cargar_resumen(
    pacientes: "PacientesController",
    consultas: "ConsultasController",
    citas: "CitasController",
    pagos: "PagosController",
) -> ResumenDashboard:
    """Lanza las cinco lecturas y arma el resumen."""
    stats_pacientes = pacientes.estadisticas()
    stats_consultas = consultas.estadisticas()
    consultas_hoy = consultas.hoy()
    proximas = citas.proximas()
    stats_pagos = pagos.estadisticas()
    resumen = construir_resumen(
        stats_pacientes=stats_pacientes,
        stats_pagos=stats_pagos,
        stats_consultas=stats_consultas,
        consultas_hoy=consultas_hoy,
        proximas_citas=proximas,
    )
    LOGGER.info(
        "dashboard_loaded",
        extra={"consultas_hoy": resumen.consultas_hoy, "citas_programadas": resumen.citas_programadas},
    )
    return resumen
