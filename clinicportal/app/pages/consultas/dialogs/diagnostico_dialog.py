from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QGroupBox,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.application.consultas.diagnosticos import filtrar_diagnosticos
from clinicportal.app.controllers.diagnosticos_controller import DiagnosticosController
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import DatosDiagnostico, Diagnostico
from clinicportal.app.i18n import I18nManager
from clinicportal.app.ui.error_presenter import present_error


class DiagnosticoDialog(QDialog):
    """Selector de diagnóstico del catálogo, con alta rápida si no existe."""

    def __init__(self, controller: DiagnosticosController, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._controller = controller
        t = i18n.t
        self.setWindowTitle(t("diagnosticos.dialogo.titulo"))
        self.setMinimumSize(480, 460)
        self.seleccionado: Optional[Diagnostico] = None

        self.txt_buscar = QLineEdit()
        self.txt_buscar.setPlaceholderText(t("diagnosticos.dialogo.buscar"))
        self.lst = QListWidget()

        self.box_nuevo = QGroupBox(t("diagnosticos.dialogo.nuevo"))
        self.txt_nombre = QLineEdit()
        self.txt_descripcion = QLineEdit()
        self.txt_cie = QLineEdit()
        self.btn_crear = QPushButton(t("diagnosticos.dialogo.crear"))
        form = QFormLayout(self.box_nuevo)
        form.addRow(f"{t('diagnosticos.dialogo.nombre')} *", self.txt_nombre)
        form.addRow(t("diagnosticos.dialogo.descripcion"), self.txt_descripcion)
        form.addRow(t("diagnosticos.dialogo.cie"), self.txt_cie)
        form.addRow(self.btn_crear)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText(t("diagnosticos.dialogo.elegir"))
        self.buttons.button(QDialogButtonBox.Cancel).setText(t("comun.cancelar"))
        self.buttons.button(QDialogButtonBox.Ok).setEnabled(False)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addWidget(self.txt_buscar)
        root.addWidget(self.lst, 1)
        root.addWidget(self.box_nuevo)
        root.addWidget(self.buttons)

        self.txt_buscar.textChanged.connect(self._render)
        self.lst.currentItemChanged.connect(self._on_current_changed)
        self.lst.itemDoubleClicked.connect(lambda _: self.accept())
        self.btn_crear.clicked.connect(self._on_crear)

        if not controller.items:
            controller.cargar()
        self._render()

    def _render(self) -> None:
        self.lst.clear()
        for diagnostico in filtrar_diagnosticos(self._controller.items, self.txt_buscar.text().strip()):
            texto = diagnostico.nombre
            if diagnostico.codigo_cie:
                texto = f"{diagnostico.codigo_cie} · {texto}"
            item = QListWidgetItem(texto)
            item.setData(Qt.UserRole, diagnostico)
            item.setToolTip(diagnostico.descripcion or "")
            self.lst.addItem(item)

    def _on_current_changed(self, item: Optional[QListWidgetItem], _previous: Optional[QListWidgetItem]) -> None:
        self.seleccionado = item.data(Qt.UserRole) if item is not None else None
        self.buttons.button(QDialogButtonBox.Ok).setEnabled(self.seleccionado is not None)

    def _on_crear(self) -> None:
        datos = DatosDiagnostico(
            nombre=self.txt_nombre.text(),
            descripcion=self.txt_descripcion.text().strip(),
            codigo_cie=self.txt_cie.text().strip(),
        )
        try:
            creado = self._controller.crear(datos)
        except ValidationError as exc:
            present_error(self, exc)
            return
        if creado is None:
            return
        self.seleccionado = creado
        self.accept()
