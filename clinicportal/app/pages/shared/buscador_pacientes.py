from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtWidgets import QLineEdit, QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from clinicportal.app.application.pacientes.busqueda import DEBOUNCE_MS, BusquedaPacientes
from clinicportal.app.controllers.pacientes_controller import PacientesController
from clinicportal.app.domain.modelos import Paciente


class BuscadorPacientesWidget(QWidget):
    """Campo de búsqueda con sugerencias del servidor tras 300 ms sin teclear."""

    paciente_seleccionado = Signal(object)

    def __init__(self, controller: PacientesController, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._estado = BusquedaPacientes(buscar=controller.buscar)

        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(DEBOUNCE_MS)

        self.txt_busqueda = QLineEdit(self)
        self.lst_sugerencias = QListWidget(self)
        self.lst_sugerencias.setVisible(False)
        self.lst_sugerencias.setMaximumHeight(200)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.txt_busqueda)
        layout.addWidget(self.lst_sugerencias)

        self.txt_busqueda.textEdited.connect(self._on_text_edited)
        self._debounce.timeout.connect(self._on_debounce)
        self.lst_sugerencias.itemClicked.connect(self._on_item_clicked)

    @property
    def seleccionado(self) -> Optional[Paciente]:
        return self._estado.seleccionado

    def set_placeholder(self, texto: str) -> None:
        self.txt_busqueda.setPlaceholderText(texto)

    def limpiar(self) -> None:
        self._debounce.stop()
        self._estado.limpiar()
        self.txt_busqueda.clear()
        self._render()

    def _on_text_edited(self, texto: str) -> None:
        self._estado.escribir(texto)
        self._debounce.start()

    def _on_debounce(self) -> None:
        self._estado.vencer_espera()
        self._render()

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        paciente = item.data(Qt.UserRole)
        self._estado.seleccionar(paciente)
        self.txt_busqueda.setText(self._estado.texto)
        self._render()
        self.paciente_seleccionado.emit(paciente)

    def _render(self) -> None:
        self.lst_sugerencias.clear()
        for paciente in self._estado.sugerencias:
            item = QListWidgetItem(f"{paciente.nombre_visible()}  ·  {paciente.paciente_id}")
            item.setData(Qt.UserRole, paciente)
            self.lst_sugerencias.addItem(item)
        self.lst_sugerencias.setVisible(self._estado.visible and bool(self._estado.sugerencias))
