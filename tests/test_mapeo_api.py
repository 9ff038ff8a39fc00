from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from clinicportal.app.domain.modelos import (
    DatosCita,
    DatosConsulta,
    DatosDiagnostico,
    DatosPaciente,
    DatosPago,
    DatosRegistro,
)
from clinicportal.app.infrastructure.api.errores import ApiJsonError
from clinicportal.app.infrastructure.api.mapeo import (
    cita_a_api,
    consulta_a_api,
    diagnostico_a_api,
    extraer_resultados,
    fecha_hora_a_iso,
    historia_desde_api,
    mapear_lista,
    paciente_desde_api,
    paciente_parcial_a_api,
    pago_a_api,
    pago_desde_api,
    parse_fecha_hora,
    registro_a_api,
    sesion_desde_api,
)
from conftest import consulta_json, paciente_json, pago_json


def test_extraer_resultados_acepta_lista_o_paginado() -> None:
    assert extraer_resultados([{"a": 1}]) == [{"a": 1}]
    assert extraer_resultados({"count": 1, "results": [{"a": 1}]}) == [{"a": 1}]


def test_extraer_resultados_rechaza_objeto_sin_results() -> None:
    with pytest.raises(ApiJsonError):
        extraer_resultados({"detail": "x"})


def test_paciente_desde_api_traduce_campos_y_guarda_desconocidos(assert_expected_actual) -> None:
    paciente = paciente_desde_api(paciente_json(height="172.5", created_by="admin"))

    assert_expected_actual(
        ("PAT-001", "Awa", "Mbarga", date(1990, 4, 12), 172.5, "ASS-77"),
        (
            paciente.paciente_id,
            paciente.nombre,
            paciente.apellidos,
            paciente.fecha_nacimiento,
            paciente.altura,
            paciente.num_seguro,
        ),
        message="campos mapeados del paciente",
    )
    assert paciente.extra == {"created_by": "admin"}
    assert paciente.nombre_visible() == "Mbarga Awa"
    assert paciente.iniciales() == "AM"


def test_mapear_objeto_no_dict_lanza_api_json_error() -> None:
    with pytest.raises(ApiJsonError):
        mapear_lista(["no es un objeto"], paciente_desde_api)


def test_parse_fecha_hora_admite_z_fecha_sola_e_invalidas() -> None:
    assert parse_fecha_hora("2026-03-02T09:30:00Z") == datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)
    assert parse_fecha_hora("2026-03-02") == datetime(2026, 3, 2)
    assert parse_fecha_hora("mañana") is None
    assert parse_fecha_hora(None) is None


def test_fecha_hora_a_iso_en_utc_con_milisegundos() -> None:
    instante = datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)

    assert fecha_hora_a_iso(instante) == "2026-03-02T09:30:00.000Z"


def test_pago_desde_api_convierte_importe_a_decimal() -> None:
    pago = pago_desde_api(pago_json(amount="12500.50"))

    assert pago.importe == Decimal("12500.50")
    assert pago.completado


def test_pago_con_importe_invalido_queda_a_cero() -> None:
    assert pago_desde_api(pago_json(amount="n/a")).importe == Decimal("0")


def test_historia_desde_api_mapea_consultas_anidadas() -> None:
    historia = historia_desde_api(
        {
            "medical_record_id": "MR-1",
            "patient_id": "PAT-001",
            "consultation_count": "2",
            "recent_consultations": [consulta_json()],
        }
    )

    assert historia.num_consultas == 2
    assert [c.consulta_id for c in historia.consultas_recientes] == ["CONS-001"]


def test_paciente_parcial_solo_envia_campos_informados() -> None:
    datos = DatosPaciente(nombre="Awa", apellidos="", genero="F", telefono="")

    assert paciente_parcial_a_api(datos) == {"firstname": "Awa", "gender": "F"}


def test_consulta_a_api_diagnostico_vacio_viaja_como_null() -> None:
    datos = DatosConsulta(
        paciente="PAT-001",
        medico="DOC-001",
        fecha=datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc),
        motivo="Fiebre",
        observacion="Estable",
    )

    body = consulta_a_api(datos)

    assert body["diagnostic"] is None
    assert body["consultation_date"] == "2026-03-02T09:30:00.000Z"
    assert body["status"] == "COMPLETED"


def test_cita_a_api_notas_por_defecto_vacias() -> None:
    datos = DatosCita(paciente="PAT-001", medico="DOC-001", fecha_hora=datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc))

    body = cita_a_api(datos)

    assert body["notes"] == ""
    assert body["status"] == "SCHEDULED"
    assert body["appointment_time"] == "2026-03-02T10:00:00.000Z"


def test_diagnostico_a_api_codigo_cie_por_defecto_vacio() -> None:
    assert diagnostico_a_api(DatosDiagnostico(nombre="Malaria"))["icd_code"] == ""


def test_pago_a_api_envia_importe_como_texto() -> None:
    body = pago_a_api(DatosPago(consulta="10", importe=Decimal("25000"), referencia="CONS-000001"))

    assert body == {
        "consultation": "10",
        "amount": "25000",
        "payment_method": "cash",
        "status": "COMPLETED",
        "reference_number": "CONS-000001",
    }


def test_registro_a_api_usa_first_y_last_name() -> None:
    body = registro_a_api(DatosRegistro("awa", "secreto", "awa@example.com", "Awa", "Mbarga"))

    assert body["first_name"] == "Awa"
    assert body["last_name"] == "Mbarga"


def test_sesion_desde_api_sin_usuario_no_esta_autenticada() -> None:
    assert not sesion_desde_api({"authenticated": True, "user": None}).autenticado
    sesion = sesion_desde_api({"authenticated": True, "user": {"id": 1, "username": "awa"}})
    assert sesion.autenticado
    assert sesion.usuario.username == "awa"
