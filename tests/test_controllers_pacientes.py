from __future__ import annotations

from datetime import date

import pytest

from clinicportal.app.controllers.pacientes_controller import PacientesController
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import DatosPaciente
from conftest import paciente_json


def test_cargar_reemplaza_items_y_avisa_a_suscriptores(container, servidor) -> None:
    servidor.on("GET", "patients/", json={"results": [paciente_json(), paciente_json(patient_id="PAT-002")]})
    avisos: list[bool] = []
    container.pacientes.subscribe(lambda: avisos.append(container.pacientes.loading))

    pacientes = container.pacientes.cargar()

    assert [p.paciente_id for p in pacientes] == ["PAT-001", "PAT-002"]
    assert container.pacientes.items == pacientes
    assert container.pacientes.error is None
    assert avisos[0] is True
    assert avisos[-1] is False


def test_fallo_al_cargar_registra_error_y_toast(container, servidor) -> None:
    servidor.on("GET", "patients/", status=500, json={"detail": "boom"})

    assert container.pacientes.cargar() == []

    assert container.pacientes.error == container.i18n.t("pacientes.error.cargar")
    assert container.pacientes.loading is False
    toast = container.toasts.ultima()
    assert toast["tipo"] == "error"
    assert toast["meta"]["operacion"] == "pacientes_cargar"


def test_crear_invalido_no_llega_a_la_api(container, servidor) -> None:
    with pytest.raises(ValidationError):
        container.pacientes.crear(DatosPaciente(nombre="", apellidos="Mbarga"))

    assert servidor.peticiones == []


def test_crear_anade_al_listado_y_avisa_exito(container, servidor) -> None:
    servidor.on("POST", "patients/", status=201, json=paciente_json())

    creado = container.pacientes.crear(
        DatosPaciente(nombre="Awa", apellidos="Mbarga", genero="F", fecha_nacimiento=date(1990, 4, 12))
    )

    assert creado is not None
    assert container.pacientes.items == [creado]
    assert container.toasts.ultima()["tipo"] == "success"


def test_busqueda_corta_no_consulta_al_servidor(container, servidor) -> None:
    assert container.pacientes.buscar("a") == []
    assert container.pacientes.buscar("") == []
    assert servidor.peticiones == []


def test_busqueda_en_servidor(container, servidor) -> None:
    servidor.on("GET", "patients/", json=[paciente_json()])

    encontrados = container.pacientes.buscar("aw")

    assert [p.paciente_id for p in encontrados] == ["PAT-001"]
    assert servidor.ultima().url.params["search"] == "aw"


def test_eliminar_quita_el_paciente_local(container, servidor) -> None:
    servidor.on("GET", "patients/", json=[paciente_json(), paciente_json(patient_id="PAT-002")])
    servidor.on("DELETE", "patients/PAT-001/", status=204)
    container.pacientes.cargar()

    assert container.pacientes.eliminar("PAT-001") is True

    assert [p.paciente_id for p in container.pacientes.items] == ["PAT-002"]


def test_eliminar_con_fallo_mantiene_el_listado(container, servidor) -> None:
    servidor.on("GET", "patients/", json=[paciente_json()])
    servidor.on("DELETE", "patients/PAT-001/", status=403, json={"detail": "Prohibido"})
    container.pacientes.cargar()

    assert container.pacientes.eliminar("PAT-001") is False

    assert len(container.pacientes.items) == 1
    assert container.toasts.ultima()["tipo"] == "error"


def test_actualizar_sustituye_el_paciente(container, servidor) -> None:
    servidor.on("GET", "patients/", json=[paciente_json()])
    servidor.on("PUT", "patients/PAT-001/", json=paciente_json(phone="677000000"))
    container.pacientes.cargar()

    container.pacientes.actualizar("PAT-001", DatosPaciente(telefono="677000000"))

    assert container.pacientes.items[0].telefono == "677000000"


def test_estadisticas_fallidas_devuelven_none_sin_toast(container, servidor) -> None:
    assert container.pacientes.estadisticas() is None
    assert container.toasts.notificaciones == []


def test_calcular_edad_respeta_cumpleanos() -> None:
    assert PacientesController.calcular_edad(date(1990, 4, 12), date(2026, 4, 11)) == 35
    assert PacientesController.calcular_edad(date(1990, 4, 12), date(2026, 4, 12)) == 36
