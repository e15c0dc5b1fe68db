"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from gestion_usuarios.infrastructure.api_client import APIClient, RespuestaAPI, RespuestaInvalidaAPI
from gestion_usuarios.models.user import Borrador, User, UserId

# Nombre del campo en el backend para cada atributo del dominio.
CAMPOS_API = {
    "nombre_completo": "nombreCompleto",
    "correo_electronico": "correoElectronico",
    "numero_telefono": "numeroTelefono",
}


class UserRepository:
    """Repositorio de usuarios basado en un cliente API."""

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    def obtener_usuarios(self) -> list[User]:
        """Devuelve la lista completa de usuarios en el orden del backend."""

        usuarios_crudos = self._api_client.obtener_usuarios()
        usuarios = []
        for datos in usuarios_crudos:
            if not isinstance(datos, dict):
                raise RespuestaInvalidaAPI(f"Elemento inesperado en el listado: {datos!r}")
            try:
                usuarios.append(
                    User(
                        id=datos["id"],
                        **{atributo: self._texto(datos, campo) for atributo, campo in CAMPOS_API.items()},
                    )
                )
            except KeyError as exc:
                raise RespuestaInvalidaAPI(f"Usuario sin el campo {exc.args[0]!r}: {datos!r}") from exc
        return usuarios

    @staticmethod
    def _texto(datos: dict, campo: str) -> str:
        """Valor de texto del campo; ``null`` del backend se muestra como vacío."""

        valor = datos[campo]
        if valor is None:
            return ""
        if not isinstance(valor, str):
            raise RespuestaInvalidaAPI(f"El campo {campo!r} no es texto: {datos!r}")
        return valor

    def crear(self, borrador: Borrador) -> RespuestaAPI:
        return self._api_client.crear_usuario(self._a_payload(borrador))

    def actualizar(self, usuario_id: UserId, borrador: Borrador) -> RespuestaAPI:
        return self._api_client.actualizar_usuario(usuario_id, self._a_payload(borrador))

    def eliminar(self, usuario_id: UserId) -> RespuestaAPI:
        return self._api_client.eliminar_usuario(usuario_id)

    @staticmethod
    def _a_payload(borrador: Borrador) -> dict:
        return {campo: getattr(borrador, atributo) for atributo, campo in CAMPOS_API.items()}


__all__ = ["CAMPOS_API", "UserRepository"]
