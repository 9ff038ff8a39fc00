from __future__ import annotations

from typing import Optional

from clinicportal.app.bootstrap_logging import get_logger, set_user
from clinicportal.app.controllers.base_controller import ControladorRecurso
from clinicportal.app.domain.modelos import Credenciales, DatosRegistro, EstadoSesion
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.auth_gateway import AuthGateway
from clinicportal.app.ui.widgets.toast import GestorToasts

LOGGER = get_logger(__name__)

_ANONIMO = EstadoSesion(autenticado=False, usuario=None)


class AuthController(ControladorRecurso[None]):
    """Sesión de usuario contra /auth/."""

    def __init__(self, gateway: AuthGateway, toasts: GestorToasts, i18n: I18nManager) -> None:
        super().__init__(toasts, i18n)
        self._gateway = gateway
        self.sesion: EstadoSesion = _ANONIMO

    def registrar(self, datos: DatosRegistro) -> bool:
        def _registrar() -> bool:
            self._gateway.register(datos)
            return True

        return self._ejecutar(
            "auth_registrar",
            _registrar,
            por_defecto=False,
            exito_key="auth.exito.registro",
            error_key="auth.error.registro",
            registra_error=True,
            limpia_error=True,
        )

    def iniciar_sesion(self, credenciales: Credenciales) -> bool:
        def _login() -> bool:
            usuario = self._gateway.login(credenciales)
            self._set_sesion(EstadoSesion(autenticado=True, usuario=usuario))
            return True

        return self._ejecutar(
            "auth_iniciar_sesion",
            _login,
            por_defecto=False,
            exito_key="auth.exito.login",
            error_key="auth.error.login",
            registra_error=True,
            limpia_error=True,
        )

    def usuario_actual(self) -> Optional[EstadoSesion]:
        """Consulta la sesión en el servidor; cualquier fallo deja la sesión anónima."""

        def _consultar() -> EstadoSesion:
            sesion = self._gateway.current_user()
            self._set_sesion(sesion)
            return sesion

        resultado = self._ejecutar("auth_usuario_actual", _consultar, por_defecto=None)
        if resultado is None:
            self._set_sesion(_ANONIMO)
        return resultado

    def cerrar_sesion(self) -> bool:
        def _logout() -> bool:
            self._gateway.logout()
            self._set_sesion(_ANONIMO)
            return True

        return self._ejecutar(
            "auth_cerrar_sesion",
            _logout,
            por_defecto=False,
            exito_key="auth.exito.logout",
            error_key="auth.error.logout",
        )

    @property
    def autenticado(self) -> bool:
        return self.sesion.autenticado

    def _set_sesion(self, sesion: EstadoSesion) -> None:
        self.sesion = sesion
        set_user(sesion.usuario.username if sesion.usuario else None)
        LOGGER.info("auth_session_changed", extra={"autenticado": sesion.autenticado})
