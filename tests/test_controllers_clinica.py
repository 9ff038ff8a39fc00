from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from clinicportal.app.application.pacientes.filtros import balance_paciente
from clinicportal.app.controllers.pagos_controller import PagosController
from clinicportal.app.domain.enums import EstadoCita, EstadoPago
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import Credenciales, DatosConsulta, DatosPago, DatosRecetaItem, Paciente
from clinicportal.app.infrastructure.api.repos_pagos import PagosRepository
from conftest import cita_json, consulta_json, pago_json


def test_completar_cita_actualiza_estado_local(container, servidor) -> None:
    servidor.on("GET", "appointments/", json=[cita_json(), cita_json(appointment_id="APT-002")])
    servidor.on("POST", "appointments/APT-001/complete/", content=b"")
    container.citas.cargar()

    assert container.citas.completar("APT-001") is True

    estados = {c.cita_id: c.estado for c in container.citas.items}
    assert estados == {"APT-001": EstadoCita.COMPLETED.value, "APT-002": EstadoCita.SCHEDULED.value}
    assert container.toasts.ultima()["tipo"] == "success"


def test_cancelar_cita_con_fallo_no_toca_el_estado(container, servidor) -> None:
    servidor.on("GET", "appointments/", json=[cita_json()])
    container.citas.cargar()

    assert container.citas.cancelar("APT-001") is False

    assert container.citas.items[0].estado == EstadoCita.SCHEDULED.value
    assert container.toasts.ultima()["message"] == container.i18n.t("citas.error.cancelar")


def test_marcar_pagado_sella_fecha_con_el_reloj(cliente, servidor, toasts, i18n) -> None:
    instante = datetime(2026, 3, 3, 8, 0, tzinfo=timezone.utc)
    servidor.on("GET", "payments/", json=[pago_json(status="PENDING", paid_at=None)])
    servidor.on("POST", "payments/30/mark_paid/", content=b"")
    pagos = PagosController(PagosRepository(cliente), toasts, i18n, reloj=lambda: instante)
    pagos.cargar()

    assert pagos.marcar_pagado(30) is True

    pago = pagos.items[0]
    assert pago.estado == EstadoPago.COMPLETED.value
    assert pago.pagado_en == instante


def test_reembolsar_casa_por_id_como_texto(container, servidor) -> None:
    servidor.on("GET", "payments/", json=[pago_json(), pago_json(id=31, payment_id="PAY-002")])
    servidor.on("POST", "payments/30/refund/", content=b"")
    container.pagos.cargar()

    container.pagos.reembolsar("30")

    assert [p.estado for p in container.pagos.items] == [EstadoPago.REFUNDED.value, EstadoPago.COMPLETED.value]


def test_crear_pago_con_importe_no_positivo_falla_antes_de_la_api(container, servidor) -> None:
    with pytest.raises(ValidationError):
        container.pagos.crear(DatosPago(consulta="10", importe=Decimal("0")))

    assert servidor.peticiones == []


def test_estadisticas_de_pagos_fallidas_devuelven_none(container, servidor) -> None:
    assert container.pagos.estadisticas() is None
    assert container.toasts.ultima()["tipo"] == "error"


def test_historia_inexistente_devuelve_none_sin_error(container, servidor) -> None:
    assert container.historias.de_paciente("PAT-404") is None

    assert container.historias.error is None
    assert container.toasts.notificaciones == []


def test_historia_del_paciente_queda_cacheada(container, servidor) -> None:
    servidor.on(
        "GET",
        "patients/PAT-001/medical_record/",
        json={"medical_record_id": "MR-1", "patient_id": "PAT-001", "recent_consultations": [consulta_json()]},
    )

    historia = container.historias.de_paciente("PAT-001")

    assert historia is not None
    assert container.historias.historias["PAT-001"] is historia


def test_historia_con_error_de_servidor_registra_error(container, servidor) -> None:
    servidor.on("GET", "patients/PAT-001/medical_record/", status=500, json={"detail": "boom"})

    assert container.historias.de_paciente("PAT-001") is None

    assert container.historias.error == container.i18n.t("historias.error.de_paciente")


def test_agregar_item_a_receta_existente(container, servidor) -> None:
    servidor.on("GET", "prescriptions/", json=[{"id": 1, "prescription_id": "RX-1", "consultation_id": "CONS-001"}])
    servidor.on("POST", "prescription-items/", status=201, json={"id": 9, "name": "Amoxicilina"})
    container.recetas.cargar()

    item = container.recetas.agregar_item("RX-1", DatosRecetaItem(nombre="Amoxicilina"))

    assert item is not None
    assert [i.nombre for i in container.recetas.items[0].items] == ["Amoxicilina"]


def test_login_y_logout_actualizan_la_sesion(container, servidor) -> None:
    servidor.on("POST", "auth/login/", json={"user": {"id": 1, "username": "awa"}})
    servidor.on("POST", "auth/logout/", content=b"")

    assert container.auth.iniciar_sesion(Credenciales("awa", "secreto")) is True
    assert container.auth.autenticado
    assert container.auth.sesion.usuario.username == "awa"

    assert container.auth.cerrar_sesion() is True
    assert not container.auth.autenticado


def test_login_rechazado_deja_error_y_sesion_anonima(container, servidor) -> None:
    servidor.on("POST", "auth/login/", status=400, json={"detail": "Credenciales no válidas"})

    assert container.auth.iniciar_sesion(Credenciales("awa", "mala")) is False

    assert not container.auth.autenticado
    assert container.auth.error == container.i18n.t("auth.error.login")


def test_usuario_actual_con_fallo_deja_sesion_anonima(container, servidor) -> None:
    servidor.on("GET", "auth/user/", status=403, json={"detail": "No autenticado"})

    assert container.auth.usuario_actual() is None
    assert not container.auth.autenticado


def test_historias_cargar_todas_y_consultas_derivadas(container, servidor) -> None:
    servidor.on("GET", "medical-records/", json={"results": [{"medical_record_id": "MR-1", "patient_id": "PAT-001"}]})
    servidor.on("GET", "consultations/stats/", json={"total": 3})

    historias = container.historias.cargar_todas()

    assert [h.historia_id for h in historias] == ["MR-1"]
    assert container.historias.estadisticas_consultas() == {"total": 3}
    assert container.historias.consultas_hoy() == []
    assert container.toasts.notificaciones == []


def test_historias_crear_consulta(container, servidor) -> None:
    servidor.on("POST", "consultations/", status=201, json=consulta_json())
    datos = DatosConsulta(
        paciente="PAT-001",
        medico="DOC-001",
        fecha=datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc),
        motivo="Fiebre",
        observacion="Paciente estable",
    )

    consulta = container.historias.crear_consulta(datos)

    assert consulta is not None
    assert consulta.consulta_id == "CONS-001"
    assert container.toasts.ultima()["tipo"] == "success"


def test_pacientes_historia_clinica_sin_toast_en_fallo(container, servidor) -> None:
    assert container.pacientes.historia_clinica("PAT-404") is None
    assert container.toasts.notificaciones == []


def test_balance_tras_marcar_pagado_mezcla_fechas_naive_y_aware(cliente, servidor, toasts, i18n) -> None:
    instante = datetime(2026, 3, 3, 8, 0, tzinfo=timezone.utc)
    servidor.on(
        "GET",
        "payments/",
        json=[
            pago_json(paid_at="2026-03-01T10:00:00"),
            pago_json(id=31, payment_id="PAY-002", status="PENDING", paid_at=None),
        ],
    )
    servidor.on("POST", "payments/31/mark_paid/", content=b"")
    pagos = PagosController(PagosRepository(cliente), toasts, i18n, reloj=lambda: instante)
    pagos.cargar()
    assert pagos.marcar_pagado(31) is True

    balance = balance_paciente(Paciente(paciente_id="PAT-001", nombre_completo="Mbarga"), pagos.items)

    assert balance.ultimo_pago == instante
    assert balance.total_pagado == Decimal("50000.00")


def test_medicos_por_especialidad_agrupa(container, servidor) -> None:
    servidor.on(
        "GET",
        "doctors/by_specialty/",
        json={"Cardiología": [{"doctor_id": "DOC-001", "fullname": "Eto"}], "Pediatría": []},
    )

    grupos = container.medicos.por_especialidad()

    assert list(grupos) == ["Cardiología", "Pediatría"]
    assert grupos["Cardiología"][0].medico_id == "DOC-001"
    assert grupos["Pediatría"] == []


def test_medicos_por_especialidad_con_fallo_devuelve_dict_vacio(container, servidor) -> None:
    servidor.on("GET", "doctors/by_specialty/", status=500, json={"detail": "boom"})

    assert container.medicos.por_especialidad() == {}

    assert container.toasts.ultima()["tipo"] == "error"
    assert container.toasts.ultima()["message"] == container.i18n.t("medicos.error.por_especialidad")


def test_diagnosticos_con_cie_usa_su_ruta(container, servidor) -> None:
    servidor.on("GET", "diagnostics/with_icd/", json=[{"diagnostic_id": "DIA-001", "name": "Malaria", "icd_code": "B54"}])

    diagnosticos = container.diagnosticos.con_cie()

    assert servidor.rutas_pedidas() == [("GET", "/api/diagnostics/with_icd/")]
    assert [(d.diagnostico_id, d.codigo_cie) for d in diagnosticos] == [("DIA-001", "B54")]
    assert container.diagnosticos.items == []


def test_diagnosticos_con_cie_con_fallo_devuelve_lista_vacia(container, servidor) -> None:
    assert container.diagnosticos.con_cie() == []
    assert container.toasts.ultima()["message"] == container.i18n.t("diagnosticos.error.con_cie")


def test_consultas_crear_anade_al_listado(container, servidor) -> None:
    servidor.on("GET", "consultations/", json=[consulta_json()])
    servidor.on("POST", "consultations/", status=201, json=consulta_json(id=11, consultation_id="CONS-002"))
    container.consultas.cargar()
    datos = DatosConsulta(paciente="PAT-001", medico="DOC-001", observacion="Control")

    nueva = container.consultas.crear(datos)

    assert nueva is not None
    assert [c.consulta_id for c in container.consultas.items] == ["CONS-001", "CONS-002"]
    assert container.toasts.ultima()["tipo"] == "success"


def test_consultas_cargar_con_cuerpo_no_json_deja_error(container, servidor) -> None:
    servidor.on("GET", "consultations/", content=b"<html>tunnel</html>")

    assert container.consultas.cargar() == []

    assert container.consultas.error == container.i18n.t("consultas.error.cargar")
    assert container.consultas.loading is False
    assert container.toasts.ultima()["tipo"] == "error"


def test_consultas_cargar_con_forma_inesperada_deja_error(container, servidor) -> None:
    servidor.on("GET", "consultations/", json={"detail": "sin resultados"})

    assert container.consultas.cargar() == []

    assert container.consultas.error == container.i18n.t("consultas.error.cargar")
    assert container.toasts.ultima()["message"] == container.i18n.t("consultas.error.cargar")


def test_medicos_por_especialidad_con_lista_en_vez_de_objeto(container, servidor) -> None:
    servidor.on("GET", "doctors/by_specialty/", json=[{"doctor_id": "DOC-001"}])

    assert container.medicos.por_especialidad() == {}
    assert container.toasts.ultima()["tipo"] == "error"
