from __future__ import annotations

from clinicportal.app.i18n import IDIOMAS_SOPORTADOS, I18nManager
from clinicportal.app.i18n_catalog import _TRANSLATIONS


def test_todos_los_idiomas_tienen_las_mismas_claves(assert_expected_actual) -> None:
    claves_es = set(_TRANSLATIONS["es"])

    for idioma in IDIOMAS_SOPORTADOS:
        faltan = sorted(claves_es - set(_TRANSLATIONS[idioma]))
        sobran = sorted(set(_TRANSLATIONS[idioma]) - claves_es)
        assert_expected_actual(([], []), (faltan, sobran), message=f"claves descuadradas en {idioma}")


def test_idioma_desconocido_cae_a_espanol() -> None:
    assert I18nManager("de").language == "es"


def test_clave_desconocida_devuelve_la_propia_clave() -> None:
    assert I18nManager("en").t("no.existe") == "no.existe"


def test_cambiar_idioma_avisa_a_suscriptores() -> None:
    i18n = I18nManager("es")
    avisos: list[str] = []
    i18n.subscribe(lambda: avisos.append(i18n.language))

    i18n.set_language("en")
    i18n.set_language("en")
    i18n.set_language("xx")

    assert avisos == ["en"]
    assert i18n.t("pacientes.error.cargar") != I18nManager("es").t("pacientes.error.cargar")
