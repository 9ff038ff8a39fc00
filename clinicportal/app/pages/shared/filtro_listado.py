from __future__ import annotations

from PySide6.QtCore import QTimer, Signal
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QLineEdit, QPushButton, QWidget

from clinicportal.app.application.pacientes.busqueda import DEBOUNCE_MS


class FiltroListadoWidget(QWidget):
    """Texto con debounce más un combo opcional de estado."""

    filtros_cambiados = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(DEBOUNCE_MS)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.txt_busqueda = QLineEdit(self)
        self.cbo_estado = QComboBox(self)
        self.cbo_estado.setVisible(False)
        self.btn_limpiar = QPushButton(self)
        self.lbl_contador = QLabel(self)

        layout.addWidget(self.txt_busqueda)
        layout.addWidget(self.cbo_estado)
        layout.addWidget(self.btn_limpiar)
        layout.addStretch(1)
        layout.addWidget(self.lbl_contador)

        self._debounce.timeout.connect(self.filtros_cambiados.emit)
        self.txt_busqueda.textChanged.connect(self._on_filter_change)
        self.cbo_estado.currentIndexChanged.connect(self.filtros_cambiados)
        self.btn_limpiar.clicked.connect(self._on_limpiar)

    def set_textos(self, *, placeholder: str, limpiar: str) -> None:
        self.txt_busqueda.setPlaceholderText(placeholder)
        self.btn_limpiar.setText(limpiar)

    def texto(self) -> str:
        return self.txt_busqueda.text().strip()

    def estado(self) -> str:
        return self.cbo_estado.currentData() or ""

    def set_estado_items(self, items: list[tuple[str, str]], default_value: str = "") -> None:
        self.cbo_estado.blockSignals(True)
        self.cbo_estado.clear()
        for etiqueta, valor in items:
            self.cbo_estado.addItem(etiqueta, valor)
        index = self.cbo_estado.findData(default_value)
        self.cbo_estado.setCurrentIndex(index if index >= 0 else 0)
        self.cbo_estado.setVisible(bool(items))
        self.cbo_estado.blockSignals(False)

    def set_contador(self, texto: str) -> None:
        self.lbl_contador.setText(texto)

    def limpiar(self) -> None:
        self.txt_busqueda.blockSignals(True)
        self.txt_busqueda.clear()
        self.txt_busqueda.blockSignals(False)
        self._debounce.stop()
        self.cbo_estado.setCurrentIndex(0)

    def _on_filter_change(self) -> None:
        self._debounce.start()

    def _on_limpiar(self) -> None:
        self.limpiar()
        self.filtros_cambiados.emit()
