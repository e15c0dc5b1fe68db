"""Fixtures compartidos: cliente API, ``urlopen`` y notificador falsos."""

from __future__ import annotations

import pytest

from gestion_usuarios.core.services import UserDirectoryController
from gestion_usuarios.core.state import AppState
from gestion_usuarios.infrastructure import api_client as modulo_api
from gestion_usuarios.infrastructure.api_client import APIClient, ErrorConexionAPI, RespuestaAPI
from gestion_usuarios.infrastructure.repositories import UserRepository


class FakeAPIClient:
    """Registra las llamadas y devuelve respuestas preparadas por cada test."""

    def __init__(self) -> None:
        self.llamadas: list[tuple] = []
        self.listado: list[dict] = []
        self.estado_escritura = 200
        self.fallar_listado = False
        self.fallar_escritura = False

    def obtener_usuarios(self) -> list[dict]:
        self.llamadas.append(("GET",))
        if self.fallar_listado:
            raise ErrorConexionAPI("sin conexión")
        return list(self.listado)

    def crear_usuario(self, datos: dict) -> RespuestaAPI:
        return self._escribir(("POST", datos))

    def actualizar_usuario(self, usuario_id, datos: dict) -> RespuestaAPI:
        return self._escribir(("PUT", usuario_id, datos))

    def eliminar_usuario(self, usuario_id) -> RespuestaAPI:
        return self._escribir(("DELETE", usuario_id))

    def _escribir(self, llamada: tuple) -> RespuestaAPI:
        self.llamadas.append(llamada)
        if self.fallar_escritura:
            raise ErrorConexionAPI("sin conexión")
        return RespuestaAPI(estado=self.estado_escritura)

    @property
    def verbos(self) -> list[str]:
        return [llamada[0] for llamada in self.llamadas]


class FakeNotificador:
    def __init__(self, confirmar: bool = True) -> None:
        self.informados: list[str] = []
        self.advertidos: list[str] = []
        self.confirmaciones: list[str] = []
        self.respuesta_confirmacion = confirmar

    def informar(self, mensaje: str) -> None:
        self.informados.append(mensaje)

    def advertir(self, mensaje: str) -> None:
        self.advertidos.append(mensaje)

    def confirmar(self, mensaje: str) -> bool:
        self.confirmaciones.append(mensaje)
        return self.respuesta_confirmacion


class RespuestaFalsa:
    """Respuesta de ``urlopen`` usable como context manager."""

    def __init__(self, cuerpo: bytes = b"", status: int = 200, error_lectura: Exception | None = None) -> None:
        self._cuerpo = cuerpo
        self.status = status
        self._error_lectura = error_lectura

    def read(self) -> bytes:
        if self._error_lectura is not None:
            raise self._error_lectura
        return self._cuerpo

    def __enter__(self) -> "RespuestaFalsa":
        return self

    def __exit__(self, *exc) -> None:
        return None


@pytest.fixture
def peticiones(monkeypatch):
    """Reemplaza ``urlopen``; cada test define ``resultado`` (respuesta o excepción)."""

    registro = {"requests": [], "resultado": RespuestaFalsa(b"[]")}

    def fake_urlopen(request, timeout=None):
        registro["requests"].append((request, timeout))
        resultado = registro["resultado"]
        if isinstance(resultado, BaseException):
            raise resultado
        return resultado

    monkeypatch.setattr(modulo_api, "urlopen", fake_urlopen)
    return registro


@pytest.fixture
def api() -> FakeAPIClient:
    return FakeAPIClient()


@pytest.fixture
def notificador() -> FakeNotificador:
    return FakeNotificador()


@pytest.fixture
def controller(api, notificador) -> UserDirectoryController:
    return UserDirectoryController(
        state=AppState(),
        repository=UserRepository(api),
        notificador=notificador,
    )


@pytest.fixture
def controller_paridad(api, notificador) -> UserDirectoryController:
    return UserDirectoryController(
        state=AppState(),
        repository=UserRepository(api),
        notificador=notificador,
        paridad_estricta=True,
    )


def usuario_api(id_, nombre="Ana Gomez", correo="ana@x.com", telefono="5551234") -> dict:
    return {
        "id": id_,
        "nombreCompleto": nombre,
        "correoElectronico": correo,
        "numeroTelefono": telefono,
    }


@pytest.fixture
def controller_http(notificador) -> UserDirectoryController:
    """Controlador sobre el cliente HTTP real; usar junto con ``peticiones``."""

    return UserDirectoryController(
        state=AppState(),
        repository=UserRepository(APIClient()),
        notificador=notificador,
    )
