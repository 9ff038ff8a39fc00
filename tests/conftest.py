from __future__ import annotations

import difflib
import pprint
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from clinicportal.app.bootstrap import AppConfig
from clinicportal.app.container import AppContainer, build_container
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.cliente_http import ClienteApi
from clinicportal.app.ui.widgets.toast import GestorToasts


BASE_URL = "http://clinica.test/api"

Respuesta = Tuple[int, Any, Optional[bytes]]


class ServidorFalso:
    """Backend en memoria para httpx.MockTransport: respuestas por (método, ruta)."""

    def __init__(self) -> None:
        self.rutas: Dict[Tuple[str, str], Respuesta] = {}
        self.peticiones: List[httpx.Request] = []
        self.fallo_transporte: Optional[Callable[[httpx.Request], Exception]] = None

    def on(
        self,
        metodo: str,
        ruta: str,
        *,
        status: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
    ) -> None:
        self.rutas[(metodo.upper(), "/api/" + ruta.lstrip("/"))] = (status, json, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.peticiones.append(request)
        if self.fallo_transporte is not None:
            raise self.fallo_transporte(request)
        respuesta = self.rutas.get((request.method, request.url.path))
        if respuesta is None:
            return httpx.Response(404, json={"detail": "Not found."})
        status, payload, content = respuesta
        if content is not None:
            return httpx.Response(status, content=content)
        if payload is None:
            return httpx.Response(status)
        return httpx.Response(status, json=payload)

    def ultima(self) -> httpx.Request:
        return self.peticiones[-1]

    def rutas_pedidas(self) -> List[Tuple[str, str]]:
        return [(p.method, p.url.path) for p in self.peticiones]


@pytest.fixture()
def servidor() -> ServidorFalso:
    return ServidorFalso()


@pytest.fixture()
def cliente(servidor: ServidorFalso):
    api = ClienteApi(BASE_URL, timeout=5.0, transport=httpx.MockTransport(servidor.handler))
    yield api
    api.close()


@pytest.fixture()
def toasts() -> GestorToasts:
    return GestorToasts()


@pytest.fixture()
def i18n() -> I18nManager:
    return I18nManager("es")


@pytest.fixture()
def container(servidor: ServidorFalso, tmp_path: Path):
    config = AppConfig(api_url=BASE_URL, api_timeout=5.0, language="es", log_dir=tmp_path / "logs")
    app_container: AppContainer = build_container(config, transport=httpx.MockTransport(servidor.handler))
    yield app_container
    app_container.close()


@pytest.fixture()
def assert_expected_actual():
    def _assert(expected: Any, actual: Any, *, message: str) -> None:
        expected_str = pprint.pformat(expected, width=120)
        actual_str = pprint.pformat(actual, width=120)
        diff = "\n".join(
            difflib.unified_diff(
                expected_str.splitlines(),
                actual_str.splitlines(),
                fromfile="expected",
                tofile="actual",
                lineterm="",
            )
        )
        assert expected == actual, (
            f"{message}\nExpected:\n{expected_str}\nActual:\n{actual_str}\nDiff:\n{diff}"
        )

    return _assert


def paciente_json(**overrides: Any) -> Dict[str, Any]:
    data = {
        "id": 1,
        "patient_id": "PAT-001",
        "firstname": "Awa",
        "lastname": "Mbarga",
        "fullname": "Mbarga",
        "gender": "F",
        "birth_date": "1990-04-12",
        "phone": "699001122",
        "email": "awa@example.com",
        "assurance_number": "ASS-77",
    }
    data.update(overrides)
    return data


def consulta_json(**overrides: Any) -> Dict[str, Any]:
    data = {
        "id": 10,
        "consultation_id": "CONS-001",
        "consultation_date": "2026-03-02T09:30:00Z",
        "patient": "PAT-001",
        "doctor": "DOC-001",
        "patient_name": "Awa Mbarga",
        "doctor_name": "Dr. Eto",
        "chief_complaint": "Fiebre",
        "observation": "Paciente estable",
        "status": "COMPLETED",
    }
    data.update(overrides)
    return data


def cita_json(**overrides: Any) -> Dict[str, Any]:
    data = {
        "id": 20,
        "appointment_id": "APT-001",
        "appointment_time": "2026-03-02T10:00:00",
        "patient": "PAT-001",
        "doctor": "DOC-001",
        "patient_name": "Awa Mbarga",
        "doctor_name": "Dr. Eto",
        "status": "SCHEDULED",
    }
    data.update(overrides)
    return data


def pago_json(**overrides: Any) -> Dict[str, Any]:
    data = {
        "id": 30,
        "payment_id": "PAY-001",
        "consultation": "10",
        "consultation_id": "CONS-001",
        "patient_name": "Mbarga",
        "amount": "25000.00",
        "payment_method": "cash",
        "status": "COMPLETED",
        "reference_number": "CONS-123456",
        "paid_at": "2026-03-02T11:00:00Z",
        "created_at": "2026-03-02T11:00:00Z",
    }
    data.update(overrides)
    return data
