from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from clinicportal.app.domain.modelos import Credenciales, DatosCita, DatosPaciente, DatosRecetaItem
from clinicportal.app.infrastructure.api.auth_gateway import AuthGateway
from clinicportal.app.infrastructure.api.errores import ApiHttpError
from clinicportal.app.infrastructure.api.repos_citas import CitasRepository
from clinicportal.app.infrastructure.api.repos_consultas import ConsultasRepository
from clinicportal.app.infrastructure.api.repos_medicos import MedicosRepository
from clinicportal.app.infrastructure.api.repos_pacientes import PacientesRepository
from clinicportal.app.infrastructure.api.repos_pagos import PagosRepository
from clinicportal.app.infrastructure.api.repos_recetas import RecetasRepository
from conftest import cita_json, consulta_json, paciente_json, pago_json


def test_pacientes_search_usa_parametro_search(cliente, servidor) -> None:
    servidor.on("GET", "patients/", json={"results": [paciente_json()]})

    pacientes = PacientesRepository(cliente).search("awa")

    assert [p.paciente_id for p in pacientes] == ["PAT-001"]
    assert servidor.ultima().url.params["search"] == "awa"


def test_pacientes_update_es_put_con_campos_informados(cliente, servidor) -> None:
    servidor.on("PUT", "patients/PAT-001/", json=paciente_json(phone="677000000"))

    paciente = PacientesRepository(cliente).update("PAT-001", DatosPaciente(nombre="Awa", genero="", telefono="677000000"))

    request = servidor.ultima()
    assert request.method == "PUT"
    assert json.loads(request.content) == {"firstname": "Awa", "phone": "677000000"}
    assert paciente.telefono == "677000000"


def test_pacientes_delete_y_historia_clinica(cliente, servidor) -> None:
    servidor.on("DELETE", "patients/PAT-001/", status=204)
    servidor.on("GET", "patients/PAT-001/medical_record/", json={"medical_record_id": "MR-1", "patient_id": "PAT-001"})
    repo = PacientesRepository(cliente)

    repo.delete("PAT-001")
    historia = repo.medical_record("PAT-001")

    assert historia.historia_id == "MR-1"
    assert servidor.rutas_pedidas() == [
        ("DELETE", "/api/patients/PAT-001/"),
        ("GET", "/api/patients/PAT-001/medical_record/"),
    ]


def test_historia_inexistente_propaga_404(cliente, servidor) -> None:
    with pytest.raises(ApiHttpError) as info:
        PacientesRepository(cliente).medical_record("PAT-404")

    assert info.value.no_encontrado


def test_citas_acciones_de_estado_son_post_sin_cuerpo(cliente, servidor) -> None:
    for accion in ("complete", "cancel", "no_show"):
        servidor.on("POST", f"appointments/APT-001/{accion}/", content=b"")
    repo = CitasRepository(cliente)

    repo.complete("APT-001")
    repo.cancel("APT-001")
    repo.no_show("APT-001")

    assert servidor.rutas_pedidas() == [
        ("POST", "/api/appointments/APT-001/complete/"),
        ("POST", "/api/appointments/APT-001/cancel/"),
        ("POST", "/api/appointments/APT-001/no_show/"),
    ]
    assert all(not p.content for p in servidor.peticiones)


def test_citas_create_envia_fecha_en_utc(cliente, servidor) -> None:
    servidor.on("POST", "appointments/", status=201, json=cita_json())

    cita = CitasRepository(cliente).create(
        DatosCita(paciente="PAT-001", medico="DOC-001", fecha_hora=datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc))
    )

    body = json.loads(servidor.ultima().content)
    assert body["appointment_time"] == "2026-03-02T10:00:00.000Z"
    assert cita.cita_id == "APT-001"


def test_consultas_today_y_upcoming(cliente, servidor) -> None:
    servidor.on("GET", "consultations/today/", json=[consulta_json()])
    servidor.on("GET", "consultations/upcoming/", json={"results": []})
    repo = ConsultasRepository(cliente)

    assert len(repo.today()) == 1
    assert repo.upcoming() == []


def test_pagos_acciones_y_estadisticas(cliente, servidor) -> None:
    servidor.on("GET", "payments/", json=[pago_json()])
    servidor.on("POST", "payments/30/refund/", content=b"")
    servidor.on("GET", "payments/stats/", json={"total_revenue": "25000.00"})
    repo = PagosRepository(cliente)

    pagos = repo.list_all()
    repo.refund(pagos[0].id)

    assert repo.stats() == {"total_revenue": "25000.00"}
    assert ("POST", "/api/payments/30/refund/") in servidor.rutas_pedidas()


def test_medicos_por_especialidad(cliente, servidor) -> None:
    servidor.on(
        "GET",
        "doctors/by_specialty/",
        json={"Pediatría": [{"doctor_id": "DOC-001", "firstname": "Samuel", "lastname": "Eto"}]},
    )

    grupos = MedicosRepository(cliente).by_specialty()

    assert list(grupos) == ["Pediatría"]
    assert grupos["Pediatría"][0].medico_id == "DOC-001"


def test_recetas_add_item_va_a_prescription_items(cliente, servidor) -> None:
    servidor.on("POST", "prescription-items/", status=201, json={"id": 5, "name": "Paracetamol", "dosage": "500mg"})

    item = RecetasRepository(cliente).add_item("RX-1", DatosRecetaItem(nombre="Paracetamol", dosis="500mg"))

    assert item.nombre == "Paracetamol"
    body = json.loads(servidor.ultima().content)
    assert body["prescription"] == "RX-1"
    assert body["dosage"] == "500mg"


def test_auth_login_devuelve_usuario_de_la_respuesta(cliente, servidor) -> None:
    servidor.on("POST", "auth/login/", json={"user": {"id": 1, "username": "awa", "is_staff": True}})
    servidor.on("POST", "auth/logout/", content=b"")
    auth = AuthGateway(cliente)

    usuario = auth.login(Credenciales("awa", "secreto"))
    auth.logout()

    assert usuario is not None
    assert usuario.username == "awa"
    assert usuario.es_staff
    assert json.loads(servidor.peticiones[0].content) == {"username": "awa", "password": "secreto"}


def test_auth_current_user_sin_sesion(cliente, servidor) -> None:
    servidor.on("GET", "auth/user/", json={"authenticated": False, "user": None})

    assert not AuthGateway(cliente).current_user().autenticado
