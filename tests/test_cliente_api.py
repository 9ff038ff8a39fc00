from __future__ import annotations

import json

import httpx
import pytest

from clinicportal.app.infrastructure.api.cliente_http import CABECERAS_POR_DEFECTO, ruta
from clinicportal.app.infrastructure.api.errores import ApiHttpError, ApiJsonError, ApiTransportError


def test_ruta_une_segmentos_con_barra_final() -> None:
    assert ruta("patients") == "patients/"
    assert ruta("patients", 3, "medical_record") == "patients/3/medical_record/"
    assert ruta("/auth/", "login") == "auth/login/"


def test_get_envia_cabeceras_de_tunel_y_json(cliente, servidor) -> None:
    servidor.on("GET", "patients/", json=[])

    cliente.get("patients/")

    request = servidor.ultima()
    for clave, valor in CABECERAS_POR_DEFECTO.items():
        assert request.headers[clave] == valor
    assert str(request.url) == "http://clinica.test/api/patients/"


def test_get_pasa_parametros_de_consulta(cliente, servidor) -> None:
    servidor.on("GET", "patients/", json={"results": []})

    cliente.get("patients/", params={"search": "awa"})

    assert servidor.ultima().url.params["search"] == "awa"


def test_post_serializa_el_cuerpo_como_json(cliente, servidor) -> None:
    servidor.on("POST", "diagnostics/", status=201, json={"id": 1})

    data = cliente.post("diagnostics/", {"name": "Malaria"})

    assert data == {"id": 1}
    assert json.loads(servidor.ultima().content) == {"name": "Malaria"}


def test_estado_no_2xx_lanza_api_http_error_con_payload(cliente, servidor) -> None:
    servidor.on("POST", "patients/", status=400, json={"firstname": ["Obligatorio"]})

    with pytest.raises(ApiHttpError) as info:
        cliente.post("patients/", {})

    assert info.value.status_code == 400
    assert info.value.payload == {"firstname": ["Obligatorio"]}
    assert str(info.value) == "HTTP error! status: 400"
    assert info.value.contexto()["status"] == 400
    assert not info.value.no_encontrado


def test_404_se_marca_como_no_encontrado(cliente, servidor) -> None:
    with pytest.raises(ApiHttpError) as info:
        cliente.get("patients/PAT-404/medical_record/")

    assert info.value.no_encontrado


def test_accion_sin_leer_json_ignora_el_cuerpo(cliente, servidor) -> None:
    servidor.on("POST", "payments/30/refund/", content=b"<html>ok</html>")

    assert cliente.post("payments/30/refund/", leer_json=False) is None


def test_respuesta_vacia_devuelve_none(cliente, servidor) -> None:
    servidor.on("DELETE", "patients/PAT-001/", status=204)

    assert cliente.delete("patients/PAT-001/") is None


def test_cuerpo_no_json_lanza_api_json_error(cliente, servidor) -> None:
    servidor.on("GET", "patients/stats/", content=b"no soy json")

    with pytest.raises(ApiJsonError):
        cliente.get("patients/stats/")


def test_fallo_de_red_se_traduce_a_api_transport_error(cliente, servidor) -> None:
    servidor.fallo_transporte = lambda request: httpx.ConnectError("conexión rechazada", request=request)

    with pytest.raises(ApiTransportError) as info:
        cliente.get("patients/")

    assert info.value.metodo == "GET"
    assert info.value.ruta == "patients/"
