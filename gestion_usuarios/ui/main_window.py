"""Ventana principal de la aplicación."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from gestion_usuarios.core.services import UserDirectoryController
from gestion_usuarios.models.user import User


@dataclass(slots=True)
class _TableColumns:
    id: int = 0
    nombre: int = 1
    correo: int = 2
    telefono: int = 3
    acciones: int = 4


class QtNotificador:
    """Muestra los mensajes del controlador con ``QMessageBox``."""

    TITULO = "Gestión de usuarios"

    def __init__(self, parent: QWidget | None = None) -> None:
        self.parent = parent

    def informar(self, mensaje: str) -> None:
        QMessageBox.information(self.parent, self.TITULO, mensaje)

    def advertir(self, mensaje: str) -> None:
        QMessageBox.warning(self.parent, self.TITULO, mensaje)

    def confirmar(self, mensaje: str) -> bool:
        respuesta = QMessageBox.question(
            self.parent,
            self.TITULO,
            mensaje,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return respuesta == QMessageBox.StandardButton.Yes


class MainWindow(QMainWindow):
    """Formulario de alta/edición y tabla de usuarios registrados.

    Todo lo que se dibuja sale de ``controller.state``; después de cada
    acción se vuelve a pintar la ventana completa.
    """

    def __init__(self, *, controller: UserDirectoryController) -> None:
        super().__init__()
        self.controller = controller
        self._columns = _TableColumns()

        self.setWindowTitle("Gestión de usuarios")
        self.resize(720, 520)

        self.inputs: dict[str, QLineEdit] = {
            "nombre_completo": QLineEdit(placeholderText="Nombre completo"),
            "correo_electronico": QLineEdit(placeholderText="Correo electrónico"),
            "numero_telefono": QLineEdit(placeholderText="Número de teléfono"),
        }
        for campo, line_edit in self.inputs.items():
            line_edit.textChanged.connect(self._on_text_changed(campo))
            line_edit.returnPressed.connect(self._on_submit)

        self.submit_button = QPushButton()
        self.submit_button.clicked.connect(self._on_submit)

        self.cancel_button = QPushButton("Cancelar")
        self.cancel_button.clicked.connect(self._on_cancel)

        self.refresh_button = QPushButton("Recargar")
        self.refresh_button.clicked.connect(self._reload_data)

        self.table = QTableWidget(columnCount=5)
        self.table.setHorizontalHeaderLabels(["ID", "Nombre", "Correo", "Teléfono", "Acciones"])
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)

        form = QFormLayout()
        form.addRow("Nombre", self.inputs["nombre_completo"])
        form.addRow("Correo", self.inputs["correo_electronico"])
        form.addRow("Teléfono", self.inputs["numero_telefono"])

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.submit_button)
        buttons.addWidget(self.cancel_button)
        buttons.addStretch(1)

        list_bar = QHBoxLayout()
        list_bar.addWidget(QLabel("Lista de usuarios registrados"))
        list_bar.addStretch(1)
        list_bar.addWidget(self.refresh_button)

        layout = QVBoxLayout()
        layout.addLayout(form)
        layout.addLayout(buttons)
        layout.addLayout(list_bar)
        layout.addWidget(self.table)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        self._reload_data()

    # ------------------------------------------------------------------
    # Eventos y acciones
    # ------------------------------------------------------------------
    def _reload_data(self) -> None:
        self.controller.refrescar()
        self._render()

    def _on_text_changed(self, campo: str) -> Callable[[str], None]:
        def _handler(texto: str) -> None:
            self.controller.actualizar_campo(campo, texto)

        return _handler

    def _on_submit(self) -> None:
        self.controller.enviar_borrador()
        self._render()

    def _on_cancel(self) -> None:
        self.controller.cancelar_edicion()
        self._render()

    def _on_edit(self, usuario: User) -> None:
        self.controller.iniciar_edicion(usuario)
        self._render()

    def _on_delete(self, usuario: User) -> None:
        self.controller.solicitar_eliminacion(usuario.id)
        self._render()

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def _render(self) -> None:
        state = self.controller.state

        for campo, line_edit in self.inputs.items():
            valor = getattr(state.borrador, campo)
            if line_edit.text() != valor:
                line_edit.blockSignals(True)
                line_edit.setText(valor)
                line_edit.blockSignals(False)

        self.submit_button.setText("Actualizar usuario" if state.editando else "Guardar usuario")
        self.cancel_button.setVisible(state.editando)
        self._populate_table(state.usuarios)

    def _populate_table(self, usuarios: list[User]) -> None:
        self.table.clearSpans()
        self.table.setRowCount(0)

        if not usuarios:
            self.table.setRowCount(1)
            vacio = QTableWidgetItem("No hay usuarios registrados")
            vacio.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            self.table.setItem(0, 0, vacio)
            self.table.setSpan(0, 0, 1, self.table.columnCount())
            return

        self.table.setRowCount(len(usuarios))
        for row, usuario in enumerate(usuarios):
            valores = {
                self._columns.id: str(usuario.id),
                self._columns.nombre: usuario.nombre_completo,
                self._columns.correo: usuario.correo_electronico,
                self._columns.telefono: usuario.numero_telefono,
            }
            for column, texto in valores.items():
                self.table.setItem(row, column, QTableWidgetItem(texto))
            self.table.setCellWidget(row, self._columns.acciones, self._action_buttons(usuario))

        self.table.resizeColumnsToContents()

    def _action_buttons(self, usuario: User) -> QWidget:
        edit_button = QPushButton("Editar")
        edit_button.clicked.connect(lambda _checked=False, u=usuario: self._on_edit(u))
        delete_button = QPushButton("Eliminar")
        delete_button.clicked.connect(lambda _checked=False, u=usuario: self._on_delete(u))

        layout = QHBoxLayout()
        layout.setContentsMargins(2, 2, 2, 2)
        layout.addWidget(edit_button)
        layout.addWidget(delete_button)

        widget = QWidget()
        widget.setLayout(layout)
        return widget


__all__ = ["MainWindow", "QtNotificador"]
