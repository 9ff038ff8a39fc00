# infrastructure/api/cliente_http.py
"""
Cliente HTTP del backend REST.

Responsabilidades:
- Base URL, cabeceras comunes (incluidas las de bypass de túneles) y timeout.
- Traducir cualquier fallo a la jerarquía ApiError.
- Devolver el JSON ya decodificado (o None en respuestas sin cuerpo).

No conoce recursos ni formatos de entidad: eso vive en los repositorios.
"""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional

import httpx

from clinicportal.app.bootstrap_logging import get_logger, request_context
from clinicportal.app.infrastructure.api.errores import ApiHttpError, ApiJsonError, ApiTransportError

LOGGER = get_logger(__name__)

CABECERAS_POR_DEFECTO: dict[str, str] = {
    "bypass-tunnel-reminder": "true",
    "ngrok-skip-browser-warning": "true",
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def ruta(*partes: Any) -> str:
    """Une segmentos en una ruta relativa terminada en '/'.

    >>> ruta("patients", 3, "medical_record")
    'patients/3/medical_record/'
    """
    limpias = [str(p).strip("/") for p in partes if str(p).strip("/")]
    return "/".join(limpias) + "/"


class ClienteApi:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/") + "/"
        self._client = httpx.Client(
            base_url=self._base_url,
            headers=CABECERAS_POR_DEFECTO,
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    # --------------------------------------------------------------
    # Verbos
    # --------------------------------------------------------------

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Optional[Mapping[str, Any]] = None, *, leer_json: bool = True) -> Any:
        return self._request("POST", path, json=body, leer_json=leer_json)

    def put(self, path: str, body: Mapping[str, Any]) -> Any:
        return self._request("PUT", path, json=body)

    def delete(self, path: str) -> None:
        self._request("DELETE", path, leer_json=False)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ClienteApi":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --------------------------------------------------------------
    # Internos
    # --------------------------------------------------------------

    def _request(self, metodo: str, path: str, *, leer_json: bool = True, **kwargs: Any) -> Any:
        with request_context():
            inicio = time.perf_counter()
            try:
                response = self._client.request(metodo, path, **kwargs)
            except httpx.HTTPError as exc:
                LOGGER.warning(
                    "api_transport_failed",
                    extra={"metodo": metodo, "ruta": path, "error": str(exc), "error_type": type(exc).__name__},
                )
                raise ApiTransportError(str(exc) or type(exc).__name__, metodo=metodo, ruta=path) from exc

            duracion_ms = int((time.perf_counter() - inicio) * 1000)
            LOGGER.debug(
                "api_request",
                extra={"metodo": metodo, "ruta": path, "status": response.status_code, "duracion_ms": duracion_ms},
            )

            if not response.is_success:
                raise ApiHttpError(response.status_code, _payload_error(response), metodo=metodo, ruta=path)
            if not leer_json or not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                LOGGER.warning("api_json_invalid", extra={"metodo": metodo, "ruta": path, "status": response.status_code})
                raise ApiJsonError("Respuesta no es JSON válido", metodo=metodo, ruta=path) from exc


def _payload_error(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
