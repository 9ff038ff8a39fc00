from __future__ import annotations

from typing import Callable

from clinicportal.app.i18n_catalog import _TRANSLATIONS
from clinicportal.app.i18n_toasts_catalog import TRADUCCIONES_TOASTS

for idioma, traducciones in TRADUCCIONES_TOASTS.items():
    _TRANSLATIONS.setdefault(idioma, {}).update(traducciones)

IDIOMAS_SOPORTADOS = ("es", "en", "fr")


class I18nManager:
    def __init__(self, language: str = "es") -> None:
        self._language = language if language in _TRANSLATIONS else "es"
        self._listeners: list[Callable[[], None]] = []

    @property
    def language(self) -> str:
        return self._language

    def set_language(self, language: str) -> None:
        if language not in _TRANSLATIONS or language == self._language:
            return
        self._language = language
        for listener in list(self._listeners):
            listener()

    def t(self, key: str, **params: object) -> str:
        """Texto traducido; cae a español y después a la propia clave."""
        texto = _TRANSLATIONS.get(self._language, {}).get(key) or _TRANSLATIONS["es"].get(key, key)
        return texto.format(**params) if params else texto

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)
