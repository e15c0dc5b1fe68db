"""Punto de entrada de la aplicación.

Lee la configuración, crea los componentes de infraestructura, estado y
controlador, y arranca la interfaz gráfica principal.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from gestion_usuarios.config import Configuracion
from gestion_usuarios.core.services import UserDirectoryController
from gestion_usuarios.core.state import AppState
from gestion_usuarios.infrastructure.api_client import APIClient
from gestion_usuarios.infrastructure.repositories import UserRepository
from gestion_usuarios.ui.main_window import MainWindow, QtNotificador


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    config = Configuracion.desde_entorno()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Backend de usuarios: %s", config.api_base)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    api_client = APIClient(config.api_base, timeout=config.timeout)
    repository = UserRepository(api_client)
    notificador = QtNotificador()
    controller = UserDirectoryController(
        state=AppState(),
        repository=repository,
        notificador=notificador,
        paridad_estricta=config.paridad_estricta,
    )

    window = MainWindow(controller=controller)
    notificador.parent = window
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
