from __future__ import annotations

from pathlib import Path

from clinicportal.app.bootstrap import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    load_config,
    resolve_api_url,
)


def test_config_por_defecto_sin_entorno() -> None:
    config = load_config({})

    assert config.api_url == DEFAULT_API_URL
    assert config.api_timeout == DEFAULT_TIMEOUT
    assert config.language == "es"
    assert config.log_dir == Path("./logs")


def test_config_desde_entorno() -> None:
    config = load_config(
        {
            "CLINICPORTAL_API_URL": "https://clinica.example.org/api/",
            "CLINICPORTAL_API_TIMEOUT": "3.5",
            "CLINICPORTAL_LANG": "FR",
            "CLINICPORTAL_LOG_DIR": "/tmp/clinicportal-logs",
        }
    )

    assert config.api_url == "https://clinica.example.org/api"
    assert config.api_timeout == 3.5
    assert config.language == "fr"
    assert config.log_dir == Path("/tmp/clinicportal-logs")


def test_valores_no_validos_caen_al_default() -> None:
    config = load_config(
        {
            "CLINICPORTAL_API_URL": "ftp://clinica",
            "CLINICPORTAL_API_TIMEOUT": "-2",
            "CLINICPORTAL_LANG": "de",
        }
    )

    assert config.api_url == DEFAULT_API_URL
    assert config.api_timeout == DEFAULT_TIMEOUT
    assert config.language == "es"


def test_timeout_no_numerico_cae_al_default() -> None:
    assert load_config({"CLINICPORTAL_API_TIMEOUT": "rápido"}).api_timeout == DEFAULT_TIMEOUT


def test_resolve_api_url_ignora_espacios() -> None:
    assert resolve_api_url({"CLINICPORTAL_API_URL": "  http://x.test/api/ "}, emit_log=False) == "http://x.test/api"
