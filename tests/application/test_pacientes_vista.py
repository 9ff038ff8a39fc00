from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from clinicportal.app.application.pacientes.busqueda import MAX_SUGERENCIAS, BusquedaPacientes
from clinicportal.app.application.pacientes.filtros import balance_paciente, filtrar_pacientes
from clinicportal.app.domain.modelos import Paciente, Pago


def _paciente(paciente_id: str, nombre: str, apellidos: str, **kwargs) -> Paciente:
    return Paciente(paciente_id=paciente_id, nombre=nombre, apellidos=apellidos, nombre_completo=apellidos, **kwargs)


def test_filtrar_pacientes_sin_distinguir_mayusculas() -> None:
    pacientes = [
        _paciente("PAT-001", "Awa", "Mbarga", telefono="699001122"),
        _paciente("PAT-002", "Jean", "Fouda", email="jean@example.com"),
    ]

    assert [p.paciente_id for p in filtrar_pacientes(pacientes, "MBAR")] == ["PAT-001"]
    assert [p.paciente_id for p in filtrar_pacientes(pacientes, "example")] == ["PAT-002"]
    assert [p.paciente_id for p in filtrar_pacientes(pacientes, "6990")] == ["PAT-001"]
    assert len(filtrar_pacientes(pacientes, "")) == 2


def test_balance_paciente_casa_pagos_por_nombre_completo() -> None:
    paciente = _paciente("PAT-001", "Awa", "Mbarga")
    primero = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
    segundo = datetime(2026, 3, 5, 9, 0, tzinfo=timezone.utc)
    pagos = [
        Pago(id=1, paciente_nombre="Mbarga", importe=Decimal("25000"), estado="COMPLETED", pagado_en=primero),
        Pago(id=2, paciente_nombre="Mbarga", importe=Decimal("10000"), estado="COMPLETED", pagado_en=segundo),
        Pago(id=3, paciente_nombre="Mbarga", importe=Decimal("5000"), estado="PENDING"),
        Pago(id=4, paciente_nombre="Fouda", importe=Decimal("99000"), estado="COMPLETED", pagado_en=segundo),
    ]

    balance = balance_paciente(paciente, pagos)

    assert balance.total_pagado == Decimal("35000")
    assert balance.total_pendiente == Decimal("5000")
    assert balance.saldo == Decimal("5000")
    assert balance.ultimo_pago == segundo
    assert [p.id for p in balance.pagos] == [1, 2, 3]


def test_balance_sin_nombre_completo_no_casa_nada() -> None:
    paciente = Paciente(paciente_id="PAT-009", nombre="Sin", apellidos="Apellido")

    balance = balance_paciente(paciente, [Pago(id=1, paciente_nombre="", importe=Decimal("1"), estado="COMPLETED")])

    assert balance.total_pagado == Decimal("0")
    assert balance.ultimo_pago is None


def test_balance_compara_fechas_de_pago_naive_y_aware() -> None:
    paciente = _paciente("PAT-001", "Awa", "Mbarga")
    naive = datetime(2026, 3, 1, 10, 0)
    aware = datetime(2026, 3, 3, 8, 0, tzinfo=timezone.utc)
    pagos = [
        Pago(id=1, paciente_nombre="Mbarga", importe=Decimal("10000"), estado="COMPLETED", pagado_en=naive),
        Pago(id=2, paciente_nombre="Mbarga", importe=Decimal("15000"), estado="COMPLETED", pagado_en=aware),
    ]

    assert balance_paciente(paciente, pagos).ultimo_pago == aware
    assert balance_paciente(paciente, list(reversed(pagos))).ultimo_pago == aware


def test_busqueda_usa_el_texto_vigente_al_vencer_la_espera() -> None:
    consultas: list[str] = []

    def _buscar(texto: str) -> list[Paciente]:
        consultas.append(texto)
        return [_paciente(f"PAT-{i:03d}", "Awa", "Mbarga") for i in range(15)]

    busqueda = BusquedaPacientes(buscar=_buscar)
    busqueda.escribir("a")
    busqueda.escribir("aw")
    busqueda.escribir("awa")

    sugerencias = busqueda.vencer_espera()

    assert consultas == ["awa"]
    assert len(sugerencias) == MAX_SUGERENCIAS
    assert busqueda.visible


def test_busqueda_corta_oculta_sugerencias_sin_consultar() -> None:
    consultas: list[str] = []
    busqueda = BusquedaPacientes(buscar=lambda texto: consultas.append(texto) or [])

    busqueda.escribir("a")

    assert busqueda.vencer_espera() == []
    assert not busqueda.visible
    assert consultas == []


def test_seleccionar_sugerencia_rellena_texto_y_cierra_lista() -> None:
    paciente = _paciente("PAT-001", "Awa", "Mbarga")
    busqueda = BusquedaPacientes(buscar=lambda texto: [paciente])
    busqueda.escribir("mb")
    busqueda.vencer_espera()

    busqueda.seleccionar(paciente)

    assert busqueda.seleccionado is paciente
    assert busqueda.texto == "Mbarga Awa"
    assert not busqueda.visible

    busqueda.escribir("otro")
    assert busqueda.seleccionado is None
