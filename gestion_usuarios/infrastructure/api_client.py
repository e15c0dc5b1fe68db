"""Cliente HTTP del recurso ``/api/usuarios``.

Encapsula las cuatro peticiones que acepta el backend. Las respuestas de
alta, edición y borrado se devuelven como :class:`RespuestaAPI` aunque el
estado HTTP no sea exitoso; solo los fallos de conexión o de formato se
propagan como excepciones.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from http.client import HTTPException
from typing import Any, Optional
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from gestion_usuarios.config import DEFAULT_API_BASE, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class ErrorAPI(Exception):
    """Error base al comunicarse con el backend."""


class ErrorConexionAPI(ErrorAPI):
    """La petición no pudo completarse (red, timeout o estado HTTP inesperado)."""

    def __init__(self, mensaje: str, estado: Optional[int] = None) -> None:
        super().__init__(mensaje)
        self.estado = estado


class RespuestaInvalidaAPI(ErrorAPI):
    """El backend respondió con un cuerpo que no se puede interpretar."""


@dataclass(frozen=True, slots=True)
class RespuestaAPI:
    """Resultado de una petición que modifica el recurso."""

    estado: int

    @property
    def ok(self) -> bool:
        return 200 <= self.estado < 300


class APIClient:
    """Provee acceso HTTP a los usuarios del backend."""

    RECURSO = "/api/usuarios"

    def __init__(self, api_base: str = DEFAULT_API_BASE, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}{self.RECURSO}"

    def _url(self, usuario_id: Any = None) -> str:
        if usuario_id is None:
            return self.endpoint
        return f"{self.endpoint}/{usuario_id}"

    # ------------------------------------------------------------------
    # Peticiones
    # ------------------------------------------------------------------
    def obtener_usuarios(self) -> list[dict]:
        """Recupera el listado completo de usuarios.

        Raises
        ------
        ErrorConexionAPI
            Si la petición falla o el estado HTTP no es exitoso.
        RespuestaInvalidaAPI
            Si el cuerpo no es JSON o no es una lista.
        """

        url = self._url()
        logger.debug("GET %s", url)
        try:
            with urlopen(
                Request(url, headers={"Accept": "application/json"}), timeout=self.timeout
            ) as response:
                raw_data = response.read()
        except HTTPError as exc:
            raise ErrorConexionAPI(f"GET {url} respondió {exc.code}", estado=exc.code) from exc
        # URLError, timeouts y cortes de conexión son OSError; lecturas truncadas, HTTPException.
        except (OSError, HTTPException) as exc:
            raise ErrorConexionAPI(f"No se pudo conectar a {url}: {exc}") from exc

        try:
            payload = json.loads(raw_data)
        except ValueError as exc:
            raise RespuestaInvalidaAPI(f"Respuesta de {url} no es JSON válido ({exc})") from exc

        if not isinstance(payload, list):
            raise RespuestaInvalidaAPI(f"Formato inesperado al leer usuarios: {type(payload).__name__}")
        return payload

    def crear_usuario(self, datos: dict) -> RespuestaAPI:
        return self._enviar("POST", self._url(), datos)

    def actualizar_usuario(self, usuario_id: Any, datos: dict) -> RespuestaAPI:
        return self._enviar("PUT", self._url(usuario_id), datos)

    def eliminar_usuario(self, usuario_id: Any) -> RespuestaAPI:
        return self._enviar("DELETE", self._url(usuario_id))

    def _enviar(self, metodo: str, url: str, datos: Optional[dict] = None) -> RespuestaAPI:
        headers = {"Accept": "application/json"}
        cuerpo = None
        if datos is not None:
            cuerpo = json.dumps(datos).encode("utf-8")
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s", metodo, url)
        try:
            with urlopen(
                Request(url, data=cuerpo, method=metodo, headers=headers), timeout=self.timeout
            ) as response:
                response.read()
                estado = response.status
        except HTTPError as exc:
            logger.info("%s %s respondió %s", metodo, url, exc.code)
            return RespuestaAPI(estado=exc.code)
        except (OSError, HTTPException) as exc:
            raise ErrorConexionAPI(f"No se pudo completar {metodo} {url}: {exc}") from exc

        return RespuestaAPI(estado=estado)


__all__ = [
    "APIClient",
    "ErrorAPI",
    "ErrorConexionAPI",
    "RespuestaAPI",
    "RespuestaInvalidaAPI",
]
