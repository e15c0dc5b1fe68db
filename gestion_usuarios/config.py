"""Configuración de la aplicación leída desde variables de entorno."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_BASE = "http://localhost:8081"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"

_VALORES_VERDADEROS = {"1", "true", "si", "sí", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Configuracion:
    """Parámetros sustituibles de la aplicación.

    Attributes
    ----------
    api_base:
        Host y puerto del backend, sin la ruta ``/api/usuarios``.
    timeout:
        Segundos máximos de espera por cada petición HTTP.
    log_level:
        Nivel para ``logging.basicConfig``.
    paridad_estricta:
        Reproduce el comportamiento original del formulario: el borrador se
        limpia incluso cuando el envío falla y los errores de red solo se
        registran en el log.
    """

    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    paridad_estricta: bool = False

    @classmethod
    def desde_entorno(cls, entorno: Optional[Mapping[str, str]] = None) -> "Configuracion":
        entorno = os.environ if entorno is None else entorno

        timeout_texto = entorno.get("GESTION_USUARIOS_TIMEOUT", "").strip()
        if timeout_texto:
            try:
                timeout = float(timeout_texto)
            except ValueError:
                raise ValueError(
                    f"GESTION_USUARIOS_TIMEOUT debe ser numérico, se recibió {timeout_texto!r}"
                ) from None
            if not math.isfinite(timeout) or timeout <= 0:
                raise ValueError("GESTION_USUARIOS_TIMEOUT debe ser un número finito mayor que cero")
        else:
            timeout = DEFAULT_TIMEOUT

        api_base = entorno.get("GESTION_USUARIOS_API_BASE", "").strip() or DEFAULT_API_BASE
        log_level = entorno.get("GESTION_USUARIOS_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"GESTION_USUARIOS_LOG_LEVEL desconocido: {log_level!r}")
        paridad = entorno.get("GESTION_USUARIOS_PARIDAD", "").strip().lower() in _VALORES_VERDADEROS

        return cls(
            api_base=api_base.rstrip("/"),
            timeout=timeout,
            log_level=log_level,
            paridad_estricta=paridad,
        )


__all__ = ["Configuracion", "DEFAULT_API_BASE", "DEFAULT_TIMEOUT"]
