"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Union

UserId = Union[int, str]

CAMPOS_BORRADOR = ("nombre_completo", "correo_electronico", "numero_telefono")


@dataclass(frozen=True, slots=True)
class User:
    """Usuario tal como lo devuelve el backend.

    El ``id`` lo asigna siempre el servidor; el cliente nunca lo genera.
    """

    id: UserId
    nombre_completo: str
    correo_electronico: str
    numero_telefono: str


@dataclass(slots=True)
class Borrador:
    """Valores del formulario aún no enviados (alta o edición)."""

    nombre_completo: str = ""
    correo_electronico: str = ""
    numero_telefono: str = ""

    @classmethod
    def desde_usuario(cls, usuario: User) -> "Borrador":
        return cls(
            nombre_completo=usuario.nombre_completo,
            correo_electronico=usuario.correo_electronico,
            numero_telefono=usuario.numero_telefono,
        )

    def campos_vacios(self) -> list[str]:
        """Devuelve los campos vacíos (``""`` o ``None``). No se recortan espacios."""

        return [campo.name for campo in fields(self) if not getattr(self, campo.name)]

    def esta_completo(self) -> bool:
        return not self.campos_vacios()


__all__ = ["Borrador", "CAMPOS_BORRADOR", "User", "UserId"]
