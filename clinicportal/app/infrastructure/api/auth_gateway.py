from __future__ import annotations

from typing import Optional

from clinicportal.app.domain.modelos import Credenciales, DatosRegistro, EstadoSesion, Usuario
from clinicportal.app.infrastructure.api.mapeo import (
    credenciales_a_api,
    registro_a_api,
    sesion_desde_api,
    usuario_desde_api,
)
from clinicportal.app.infrastructure.api.repos_base import RepositorioApiBase


class AuthGateway(RepositorioApiBase):
    """Sesión contra /auth/. La cookie de sesión la conserva el httpx.Client."""

    RECURSO = "auth"

    def register(self, datos: DatosRegistro) -> None:
        self._cliente.post(self._ruta("register"), registro_a_api(datos))

    def login(self, credenciales: Credenciales) -> Optional[Usuario]:
        data = self._cliente.post(self._ruta("login"), credenciales_a_api(credenciales))
        usuario = data.get("user") if isinstance(data, dict) else None
        return usuario_desde_api(usuario) if usuario else None

    def current_user(self) -> EstadoSesion:
        return sesion_desde_api(self._json("user"))

    def logout(self) -> None:
        self._cliente.post(self._ruta("logout"), leer_json=False)
