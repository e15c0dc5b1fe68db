"""Servicios de aplicación que coordinan el acceso a datos."""

from __future__ import annotations

import logging
from typing import Protocol

from gestion_usuarios.core.state import AppState
from gestion_usuarios.infrastructure.api_client import ErrorAPI
from gestion_usuarios.infrastructure.repositories import UserRepository
from gestion_usuarios.models.user import User, UserId

logger = logging.getLogger(__name__)

MENSAJE_CAMPOS_INCOMPLETOS = "Completa todos los campos"
MENSAJE_CREADO = "Usuario creado correctamente ✅"
MENSAJE_ERROR_CREAR = "Error al crear usuario ❌"
MENSAJE_ACTUALIZADO = "Usuario actualizado correctamente ✅"
MENSAJE_ERROR_ACTUALIZAR = "Error al actualizar usuario ❌"
MENSAJE_CONFIRMAR_ELIMINAR = "¿Seguro que deseas eliminar este usuario?"
MENSAJE_ERROR_ELIMINAR = "Error al eliminar usuario ❌"
MENSAJE_SIN_CONEXION = "No se pudo conectar con el servicio de usuarios."


class Notificador(Protocol):
    """Canal de mensajes hacia el usuario."""

    def informar(self, mensaje: str) -> None: ...

    def advertir(self, mensaje: str) -> None: ...

    def confirmar(self, mensaje: str) -> bool: ...


class UserDirectoryController:
    """Sincroniza el estado local con el recurso remoto de usuarios.

    Cada operación corre completa, incluida su petición HTTP, antes de
    devolver el control. El listado se vuelve a pedir entero tras cada
    alta, edición o borrado.

    Con ``paridad_estricta`` se reproduce el formulario original: el
    borrador se limpia después de cualquier envío que pase la validación y
    los errores de conexión solo se registran en el log. Sin ella, el
    borrador se conserva cuando el envío falla y todo error se notifica.
    """

    def __init__(
        self,
        *,
        state: AppState,
        repository: UserRepository,
        notificador: Notificador,
        paridad_estricta: bool = False,
    ) -> None:
        self.state = state
        self._repository = repository
        self._notificador = notificador
        self.paridad_estricta = paridad_estricta

    def refrescar(self) -> bool:
        """Pide el listado completo y lo aplica al estado.

        Devuelve ``True`` si el listado se aplicó. Los fallos solo quedan en
        el log y el listado anterior se mantiene.
        """

        secuencia = self.state.nueva_solicitud()
        try:
            usuarios = self._repository.obtener_usuarios()
        except ErrorAPI as exc:
            logger.warning("Error al obtener usuarios: %s", exc)
            return False

        if not self.state.aplicar_snapshot(usuarios, secuencia):
            logger.debug("Listado obsoleto descartado (solicitud %s)", secuencia)
            return False
        logger.debug("Listado aplicado: %s usuarios", len(usuarios))
        return True

    def actualizar_campo(self, campo: str, valor: str) -> None:
        self.state.actualizar_campo(campo, valor)

    def enviar_borrador(self) -> bool:
        """Crea o actualiza un usuario con los valores del borrador.

        Devuelve ``True`` si el backend aceptó el cambio.
        """

        borrador = self.state.borrador
        if not borrador.esta_completo():
            self._notificador.advertir(MENSAJE_CAMPOS_INCOMPLETOS)
            return False

        exito = False
        try:
            if self.state.editando:
                respuesta = self._repository.actualizar(self.state.id_editando, borrador)
                if respuesta.ok:
                    self._notificador.informar(MENSAJE_ACTUALIZADO)
                    self.state.finalizar_edicion()
                else:
                    self._notificador.advertir(MENSAJE_ERROR_ACTUALIZAR)
            else:
                respuesta = self._repository.crear(borrador)
                if respuesta.ok:
                    self._notificador.informar(MENSAJE_CREADO)
                else:
                    self._notificador.advertir(MENSAJE_ERROR_CREAR)
            exito = respuesta.ok
        except ErrorAPI as exc:
            logger.error("Error al guardar usuario: %s", exc)
            if not self.paridad_estricta:
                self._notificador.advertir(MENSAJE_SIN_CONEXION)

        if exito or self.paridad_estricta:
            self.state.limpiar_borrador()
        self.refrescar()
        return exito

    def solicitar_eliminacion(self, usuario_id: UserId) -> bool:
        """Elimina un usuario tras la confirmación del usuario.

        Devuelve ``False`` si no se confirmó o la petición no pudo completarse.
        """

        if not self._notificador.confirmar(MENSAJE_CONFIRMAR_ELIMINAR):
            return False

        try:
            respuesta = self._repository.eliminar(usuario_id)
        except ErrorAPI as exc:
            logger.error("Error al eliminar usuario %s: %s", usuario_id, exc)
            if not self.paridad_estricta:
                self._notificador.advertir(MENSAJE_SIN_CONEXION)
            return False

        if not self.paridad_estricta:
            if not respuesta.ok:
                self._notificador.advertir(MENSAJE_ERROR_ELIMINAR)
            elif self.state.editando and self.state.id_editando == usuario_id:
                self.cancelar_edicion()

        self.refrescar()
        return True

    def iniciar_edicion(self, usuario: User) -> None:
        self.state.iniciar_edicion(usuario)

    def cancelar_edicion(self) -> None:
        self.state.limpiar_borrador()
        self.state.finalizar_edicion()


__all__ = ["Notificador", "UserDirectoryController"]
