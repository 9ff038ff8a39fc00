from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from clinicportal.app.application.dashboard.resumen import MAX_FILAS, construir_resumen, etiqueta_estado_consulta
from clinicportal.app.application.recetas.filtros import (
    FiltrosRecetas,
    consulta_de_receta,
    filas_populares,
    filtrar_recetas,
    pagos_de_receta,
)
from clinicportal.app.domain.modelos import Cita, Consulta, Pago, Receta


def _recetas() -> list[Receta]:
    return [
        Receta(receta_id="RX-001", consulta_id="CONS-001", creado_en=datetime(2026, 3, 1, 10, 0)),
        Receta(receta_id="RX-002", consulta_id="CONS-002", creado_en=datetime(2026, 3, 5, 10, 0)),
        Receta(receta_id="RX-103", consulta_id=None, creado_en=None),
    ]


def test_filtrar_recetas_por_texto() -> None:
    assert [r.receta_id for r in filtrar_recetas(_recetas(), FiltrosRecetas(texto="rx-00"))] == ["RX-001", "RX-002"]


def test_filtrar_recetas_por_rango_estricto() -> None:
    filtros = FiltrosRecetas(desde=datetime(2026, 3, 1, 10, 0), hasta=datetime(2026, 3, 6, 0, 0))

    assert [r.receta_id for r in filtrar_recetas(_recetas(), filtros)] == ["RX-002"]


def test_consulta_y_pagos_de_una_receta() -> None:
    receta = _recetas()[0]
    consultas = [Consulta(consulta_id="CONS-001"), Consulta(consulta_id="CONS-002")]
    pagos = [Pago(id=1, consulta_id="CONS-001"), Pago(id=2, consulta_id="CONS-002")]

    assert consulta_de_receta(receta, consultas) is consultas[0]
    assert [p.id for p in pagos_de_receta(receta, pagos)] == [1]
    assert pagos_de_receta(_recetas()[2], pagos) == []


def test_filas_populares_admite_varias_formas() -> None:
    assert filas_populares({"Paracetamol": 12, "Amoxicilina": "7"}) == [("Paracetamol", 12), ("Amoxicilina", 7)]
    assert filas_populares([{"name": "Paracetamol", "count": 12}]) == [("Paracetamol", 12)]
    assert filas_populares({"results": [{"medication": "Ibuprofeno", "times_prescribed": 3}]}) == [("Ibuprofeno", 3)]
    assert filas_populares(["Quinina"]) == [("Quinina", 0)]
    assert filas_populares(None) == []


def test_etiqueta_estado_consulta() -> None:
    assert etiqueta_estado_consulta("COMPLETED") == "dashboard.estado.terminada"
    assert etiqueta_estado_consulta("en_cours") == "dashboard.estado.en_curso"
    assert etiqueta_estado_consulta(None) == "dashboard.estado.en_espera"


def test_construir_resumen_limita_filas_y_tolera_fallos() -> None:
    consultas = [Consulta(consulta_id=f"CONS-{i}", estado="COMPLETED", motivo="Fiebre") for i in range(7)]
    citas = [Cita(cita_id=f"APT-{i}", notas="Control") for i in range(3)]

    resumen = construir_resumen(
        stats_pacientes={"total_patients": "42"},
        stats_pagos={"total_revenue": "125000.50"},
        consultas_hoy=consultas,
        proximas_citas=citas,
    )

    assert resumen.total_pacientes == 42
    assert resumen.ingresos == Decimal("125000.50")
    assert resumen.consultas_hoy == 7
    assert len(resumen.consultas_recientes) == MAX_FILAS
    assert resumen.consultas_recientes[0].diagnostico == "Fiebre"
    assert resumen.citas_programadas == 3

    vacio = construir_resumen(stats_pacientes=None, stats_pagos=None, consultas_hoy=[], proximas_citas=[])
    assert vacio.total_pacientes == 0
    assert vacio.ingresos == Decimal("0")
    assert vacio.total_consultas == 0


def test_construir_resumen_expone_el_total_de_consultas() -> None:
    resumen = construir_resumen(
        stats_pacientes=None,
        stats_pagos=None,
        stats_consultas={"total_consultations": 128},
        consultas_hoy=[],
        proximas_citas=[],
    )

    assert resumen.total_consultas == 128
