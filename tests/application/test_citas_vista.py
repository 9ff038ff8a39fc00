from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from clinicportal.app.application.citas.filtros import (
    SIN_PAGO,
    FiltrosCitas,
    contadores_dia,
    estado_pago,
    estados_pago_por_consulta,
    filtrar_citas,
)
from clinicportal.app.domain.modelos import Cita, Paciente, Pago

DIA = date(2026, 3, 2)


def _cita(cita_id: str, hora: int, estado: str = "SCHEDULED", *, dia: date = DIA, paciente: str = "PAT-001") -> Cita:
    return Cita(
        cita_id=cita_id,
        fecha_hora=datetime(dia.year, dia.month, dia.day, hora, 0),
        paciente=paciente,
        estado=estado,
    )


def _pagos() -> list[Pago]:
    return [
        Pago(id=1, consulta_id="APT-001", importe=Decimal("25000"), estado="COMPLETED", metodo="cash"),
        Pago(id=2, consulta_id="APT-002", importe=Decimal("25000"), estado="PENDING"),
        Pago(id=3, consulta_id="APT-003", importe=Decimal("25000"), estado="FAILED"),
    ]


def test_estado_pago_toma_el_ultimo_pago_de_cada_consulta() -> None:
    pagos = [
        Pago(id=1, consulta_id="APT-001", estado="FAILED"),
        Pago(id=2, consulta_id="APT-001", estado="COMPLETED", importe=Decimal("25000")),
        Pago(id=3, consulta_id=None, estado="COMPLETED"),
    ]

    estados = estados_pago_por_consulta(pagos)

    assert list(estados) == ["APT-001"]
    assert estados["APT-001"].pagado
    assert estado_pago(_cita("APT-404", 9), estados) is SIN_PAGO


def test_filtrar_citas_por_dia_texto_estado_y_pago() -> None:
    pacientes = [
        Paciente(paciente_id="PAT-001", nombre="Awa", apellidos="Mbarga", nombre_completo="Mbarga"),
        Paciente(paciente_id="PAT-002", nombre="Jean", apellidos="Fouda", nombre_completo="Fouda"),
    ]
    citas = [
        _cita("APT-001", 9, "COMPLETED"),
        _cita("APT-002", 10),
        _cita("APT-003", 11, paciente="PAT-002"),
        _cita("APT-004", 12),
        _cita("APT-005", 9, dia=date(2026, 3, 3)),
    ]
    estados = estados_pago_por_consulta(_pagos())

    def _ids(**kwargs) -> list[str]:
        filtros = FiltrosCitas(fecha=DIA, **kwargs)
        return [c.cita_id for c in filtrar_citas(citas, filtros, pacientes=pacientes, estados_pago=estados)]

    assert _ids() == ["APT-001", "APT-002", "APT-003", "APT-004"]
    assert _ids(texto="fouda") == ["APT-003"]
    assert _ids(estado="COMPLETED") == ["APT-001"]
    assert _ids(pago="paid") == ["APT-001"]
    assert _ids(pago="unpaid") == ["APT-004"]
    assert _ids(pago="pending") == ["APT-002"]
    assert _ids(pago="failed") == ["APT-003"]


def test_filtrar_citas_usa_nombre_de_la_cita_si_no_hay_paciente_cargado() -> None:
    cita = Cita(cita_id="APT-009", fecha_hora=datetime(2026, 3, 2, 9, 0), paciente="PAT-777", paciente_nombre="Nkono")

    assert filtrar_citas([cita], FiltrosCitas(fecha=DIA, texto="nko")) == [cita]


def test_contadores_del_dia(assert_expected_actual) -> None:
    citas = [
        _cita("APT-001", 9, "COMPLETED"),
        _cita("APT-002", 10, "COMPLETED"),
        _cita("APT-003", 11),
        _cita("APT-004", 12, "CANCELLED"),
    ]

    contadores = contadores_dia(citas, estados_pago_por_consulta(_pagos()))

    assert_expected_actual(
        (4, 2, 1, 1, 1, 1),
        (
            contadores.total,
            contadores.completadas,
            contadores.programadas,
            contadores.canceladas,
            contadores.pagadas,
            contadores.sin_pagar,
        ),
        message="contadores del día",
    )
