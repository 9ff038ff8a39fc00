from __future__ import annotations

import json
from pathlib import Path

from clinicportal.app.bootstrap_logging import (
    configure_logging,
    get_contexto_log,
    get_logger,
    log_soft_exception,
    request_context,
    set_run_context,
    set_user,
)
from clinicportal.app.crash_handler import fatal_exception_handler


def test_configure_logging_crea_log_operativo(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-test")
    logger = get_logger("tests.logging")

    logger.info("hello operational")

    content = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "hello operational" in content
    assert "run_id=run-test" in content
    assert "logging_configured" in content


def test_modo_json_emite_una_linea_por_evento_con_contexto(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=True)
    set_run_context("run-json")
    set_user("awa")
    logger = get_logger("tests.logging")

    logger.info("api_request", extra={"metodo": "GET", "ruta": "patients/", "status": 200})

    lineas = (tmp_path / "app.log").read_text(encoding="utf-8").splitlines()
    evento = json.loads(lineas[-1])
    assert evento["event"] == "api_request"
    assert evento["run_id"] == "run-json"
    assert evento["user"] == "awa"
    assert evento["context"] == {"metodo": "GET", "ruta": "patients/", "status": 200}
    set_user(None)


def test_request_context_aisla_el_request_id() -> None:
    set_run_context("run-ctx")

    with request_context("req-1") as request_id:
        assert get_contexto_log() == ("run-ctx", "req-1")

    assert request_id == "req-1"
    assert get_contexto_log() == ("run-ctx", "run-ctx")


def test_log_soft_exception_escribe_fichero_soft(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-soft")
    logger = get_logger("tests.logging")

    try:
        raise ValueError("esperable")
    except ValueError as exc:
        log_soft_exception(logger, exc, {"step": "validation"})

    content = (tmp_path / "crash_soft.log").read_text(encoding="utf-8")
    assert "soft_exception" in content
    assert "ValueError: esperable" in content
    assert "soft_exception_operational" in (tmp_path / "app.log").read_text(encoding="utf-8")


def test_fatal_hook_escribe_fichero_fatal(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-fatal")
    logger = get_logger("tests.logging")
    avisos: list[BaseException] = []
    handler = fatal_exception_handler(logger, on_fatal=avisos.append)

    try:
        raise RuntimeError("fatal")
    except RuntimeError as exc:
        handler(type(exc), exc, exc.__traceback__)

    content = (tmp_path / "crash_fatal.log").read_text(encoding="utf-8")
    assert "unhandled_exception" in content
    assert "RuntimeError: fatal" in content
    assert [type(e) for e in avisos] == [RuntimeError]


def test_logging_redacta_datos_personales_del_mensaje(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-redact")
    logger = get_logger("tests.logging")

    logger.info("Paciente email awa@example.com seguro 12345678 teléfono +237 699 00 11 22")

    content = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "awa@example.com" not in content
    assert "12345678" not in content
    assert "+237 699 00 11 22" not in content
    assert "***" in content


def test_logging_redacta_extras_sensibles(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=True)
    set_run_context("run-extra")
    logger = get_logger("tests.logging")

    logger.warning("api_operation_failed", extra={"firstname": "Awa", "operacion": "pacientes_crear"})

    evento = json.loads((tmp_path / "app.log").read_text(encoding="utf-8").splitlines()[-1])
    assert evento["context"] == {"firstname": "***", "operacion": "pacientes_crear"}
