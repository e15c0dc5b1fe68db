"""Estado compartido de la aplicación."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from gestion_usuarios.models.user import CAMPOS_BORRADOR, Borrador, User, UserId


@dataclass
class AppState:
    """Mantiene los usuarios visibles, el borrador del formulario y el modo edición.

    ``usuarios`` es solo una copia del último listado aplicado; la fuente de
    verdad es el backend. Cada refresco toma un número de secuencia y un
    listado más viejo que el último aplicado se descarta.
    """

    usuarios: List[User] = field(default_factory=list)
    borrador: Borrador = field(default_factory=Borrador)
    editando: bool = False
    id_editando: UserId | None = None
    _ultima_solicitud: int = field(default=0, repr=False)
    _ultima_aplicada: int = field(default=0, repr=False)

    # ------------------------------------------------------------------
    # Listado
    # ------------------------------------------------------------------
    def nueva_solicitud(self) -> int:
        self._ultima_solicitud += 1
        return self._ultima_solicitud

    def aplicar_snapshot(self, usuarios: list[User], secuencia: int) -> bool:
        """Reemplaza el listado si ``secuencia`` no es más vieja que la última aplicada."""

        if secuencia < self._ultima_aplicada:
            return False
        self._ultima_aplicada = secuencia
        self.usuarios = list(usuarios)
        return True

    # ------------------------------------------------------------------
    # Borrador y edición
    # ------------------------------------------------------------------
    def actualizar_campo(self, campo: str, valor: str) -> None:
        if campo not in CAMPOS_BORRADOR:
            raise ValueError(f"Campo desconocido: {campo!r}")
        setattr(self.borrador, campo, valor)

    def limpiar_borrador(self) -> None:
        self.borrador = Borrador()

    def iniciar_edicion(self, usuario: User) -> None:
        self.borrador = Borrador.desde_usuario(usuario)
        self.editando = True
        self.id_editando = usuario.id

    def finalizar_edicion(self) -> None:
        self.editando = False
        self.id_editando = None


__all__ = ["AppState"]
