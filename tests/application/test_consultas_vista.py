from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

from clinicportal.app.application.consultas.diagnosticos import MAX_SIN_FILTRO, filtrar_diagnosticos
from clinicportal.app.application.consultas.pagos import (
    TARIFA_CONSULTA,
    consulta_pagada,
    datos_pago_por_defecto,
    estadisticas_financieras,
    filtrar_consultas_por_pago,
    formatear_importe,
    generar_referencia,
    importe_pagado,
)
from clinicportal.app.domain.modelos import Consulta, Diagnostico, Pago

HOY = date(2026, 3, 2)


def _pagos() -> list[Pago]:
    return [
        Pago(
            id=1,
            consulta_id="CONS-001",
            importe=Decimal("25000"),
            estado="COMPLETED",
            creado_en=datetime(2026, 3, 2, 11, 0),
        ),
        Pago(
            id=2,
            consulta_id="CONS-002",
            importe=Decimal("15000"),
            estado="COMPLETED",
            creado_en=datetime(2026, 2, 27, 11, 0),
        ),
        Pago(id=3, consulta_id="CONS-003", importe=Decimal("25000"), estado="PENDING", creado_en=datetime(2026, 3, 2, 12, 0)),
    ]


def _consultas() -> list[Consulta]:
    return [Consulta(consulta_id=f"CONS-00{i}") for i in range(1, 5)]


def test_consulta_pagada_solo_con_pago_completado() -> None:
    pagos = _pagos()

    assert consulta_pagada("CONS-001", pagos)
    assert not consulta_pagada("CONS-003", pagos)
    assert importe_pagado("CONS-002", pagos) == Decimal("15000")
    assert importe_pagado("CONS-003", pagos) == Decimal("0")


def test_filtrar_consultas_por_estado_de_pago() -> None:
    def _ids(filtro: str) -> list[str]:
        return [c.consulta_id for c in filtrar_consultas_por_pago(_consultas(), _pagos(), filtro)]

    assert _ids("all") == ["CONS-001", "CONS-002", "CONS-003", "CONS-004"]
    assert _ids("paid") == ["CONS-001", "CONS-002"]
    assert _ids("unpaid") == ["CONS-003", "CONS-004"]


def test_estadisticas_financieras(assert_expected_actual) -> None:
    stats = estadisticas_financieras(_pagos(), _consultas()[:3], hoy=HOY)

    assert_expected_actual(
        (Decimal("25000"), 1, 1, Decimal("40000")),
        (stats.ingresos_hoy, stats.pagos_hoy, stats.sin_pagar, stats.ingresos_totales),
        message="estadísticas financieras",
    )


def test_ingresos_de_hoy_por_dia_de_calendario_local() -> None:
    medianoche_y_media = datetime(2026, 3, 2, 0, 30).astimezone()
    pagos = [Pago(id=1, importe=Decimal("25000"), estado="COMPLETED", creado_en=medianoche_y_media)]

    stats = estadisticas_financieras(pagos, [], hoy=HOY)

    assert stats.ingresos_hoy == Decimal("25000")
    assert stats.pagos_hoy == 1


def test_referencia_usa_los_ultimos_seis_digitos_del_timestamp() -> None:
    instante = datetime(2026, 3, 2, 9, 30, 0, 123000, tzinfo=timezone.utc)
    ms = int(instante.timestamp() * 1000)

    assert generar_referencia(instante=instante) == f"CONS-{str(ms)[-6:]}"
    assert generar_referencia("PAY", instante).startswith("PAY-")


def test_datos_pago_por_defecto() -> None:
    datos = datos_pago_por_defecto("10")

    assert datos.consulta == "10"
    assert datos.importe == TARIFA_CONSULTA
    assert datos.metodo == "cash"
    assert datos.estado == "COMPLETED"
    assert datos.referencia.startswith("CONS-")


def test_formatear_importe_en_francos_cfa() -> None:
    assert formatear_importe(Decimal("25000")) == "25 000 XAF"
    assert formatear_importe(Decimal("1234567.6")) == "1 234 568 XAF"


def test_filtrar_diagnosticos() -> None:
    diagnosticos = [Diagnostico(diagnostico_id=f"D{i}", nombre=f"Diag {i}") for i in range(15)]
    diagnosticos.append(Diagnostico(diagnostico_id="MAL", nombre="Paludismo", descripcion="Malaria por P. falciparum"))

    assert len(filtrar_diagnosticos(diagnosticos, "")) == MAX_SIN_FILTRO
    assert len(filtrar_diagnosticos(diagnosticos, "m")) == MAX_SIN_FILTRO
    assert [d.diagnostico_id for d in filtrar_diagnosticos(diagnosticos, "MALARIA")] == ["MAL"]
