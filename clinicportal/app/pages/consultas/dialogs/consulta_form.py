# pages/consultas/dialogs/consulta_form.py
"""
Formulario de nueva consulta.

Obligatorios: paciente, médico, motivo y observación.
El diagnóstico se elige (o se crea) desde DiagnosticoDialog.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.container import AppContainer
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import DatosConsulta, Diagnostico
from clinicportal.app.pages.consultas.dialogs.diagnostico_dialog import DiagnosticoDialog
from clinicportal.app.pages.shared.buscador_pacientes import BuscadorPacientesWidget
from clinicportal.app.pages.shared.crud_page_helpers import confirm_action
from clinicportal.app.ui.error_presenter import present_error


class ConsultaFormDialog(QDialog):
    def __init__(self, container: AppContainer, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = container.i18n
        t = self._i18n.t
        self.setWindowTitle(t("consultas.form.titulo"))
        self.setMinimumWidth(560)
        self._datos: Optional[DatosConsulta] = None
        self._diagnostico: Optional[Diagnostico] = None

        self.buscador = BuscadorPacientesWidget(container.pacientes, self)
        self.buscador.set_placeholder(t("citas.form.buscar_paciente"))
        self.cbo_medico = QComboBox()
        medicos = container.medicos
        if not medicos.items:
            medicos.cargar()
        self.cbo_medico.addItem(t("citas.form.seleccione_medico"), "")
        for medico in medicos.items:
            self.cbo_medico.addItem(medico.nombre_completo or f"{medico.nombre} {medico.apellidos}".strip(), medico.medico_id)

        self.txt_motivo = QLineEdit()
        self.txt_sintomas = QTextEdit()
        self.txt_observacion = QTextEdit()
        self.txt_pasos = QTextEdit()
        for editor in (self.txt_sintomas, self.txt_observacion, self.txt_pasos):
            editor.setFixedHeight(70)

        self.txt_diagnostico = QLineEdit()
        self.txt_diagnostico.setReadOnly(True)
        self.btn_diagnostico = QPushButton(t("consultas.form.elegir_diagnostico"))
        self.btn_diagnostico.clicked.connect(self._on_elegir_diagnostico)
        fila_diagnostico = QHBoxLayout()
        fila_diagnostico.addWidget(self.txt_diagnostico, 1)
        fila_diagnostico.addWidget(self.btn_diagnostico)

        form = QFormLayout()
        form.addRow(f"{t('col.paciente')} *", self.buscador)
        form.addRow(f"{t('col.medico')} *", self.cbo_medico)
        form.addRow(f"{t('col.motivo')} *", self.txt_motivo)
        form.addRow(t("consultas.form.sintomas"), self.txt_sintomas)
        form.addRow(f"{t('consultas.form.observacion')} *", self.txt_observacion)
        form.addRow(t("col.diagnostico"), fila_diagnostico)
        form.addRow(t("consultas.form.pasos"), self.txt_pasos)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Reset | QDialogButtonBox.Cancel)
        buttons.button(QDialogButtonBox.Save).setText(t("comun.guardar"))
        buttons.button(QDialogButtonBox.Reset).setText(t("comun.reiniciar"))
        buttons.button(QDialogButtonBox.Cancel).setText(t("comun.cancelar"))
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        buttons.button(QDialogButtonBox.Reset).clicked.connect(self._on_reiniciar)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(buttons)

    def _on_elegir_diagnostico(self) -> None:
        dialog = DiagnosticoDialog(self._container.diagnosticos, self._i18n, self)
        if dialog.exec() != DiagnosticoDialog.Accepted or dialog.seleccionado is None:
            return
        self._diagnostico = dialog.seleccionado
        self.txt_diagnostico.setText(self._diagnostico.nombre)

    def _on_reiniciar(self) -> None:
        t = self._i18n.t
        if not confirm_action(self, title=t("comun.reiniciar"), message=t("consultas.form.confirmar_reinicio")):
            return
        self.buscador.limpiar()
        self.cbo_medico.setCurrentIndex(0)
        for editor in (self.txt_motivo, self.txt_diagnostico):
            editor.clear()
        for editor in (self.txt_sintomas, self.txt_observacion, self.txt_pasos):
            editor.clear()
        self._diagnostico = None

    def _on_accept(self) -> None:
        paciente = self.buscador.seleccionado
        datos = DatosConsulta(
            paciente=paciente.paciente_id if paciente else "",
            medico=self.cbo_medico.currentData() or "",
            motivo=self.txt_motivo.text(),
            sintomas=self.txt_sintomas.toPlainText().strip(),
            observacion=self.txt_observacion.toPlainText(),
            diagnostico=self._diagnostico.diagnostico_id if self._diagnostico else "",
            pasos_recomendados=self.txt_pasos.toPlainText().strip(),
        )
        try:
            datos.validar()
        except ValidationError as exc:
            present_error(self, exc)
            return
        self._datos = datos
        self.accept()

    def get_data(self) -> Optional[DatosConsulta]:
        return self._datos
