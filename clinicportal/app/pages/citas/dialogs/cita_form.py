# pages/citas/dialogs/cita_form.py
"""
Formulario de cita (crear).

Campos:
- paciente (búsqueda con sugerencias) y médico
- fecha y hora
- notas
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from PySide6.QtCore import QDate, QDateTime, QTime
from PySide6.QtWidgets import (
    QComboBox,
    QDateTimeEdit,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.container import AppContainer
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import DatosCita
from clinicportal.app.pages.shared.buscador_pacientes import BuscadorPacientesWidget
from clinicportal.app.ui.error_presenter import present_error


def _a_qdatetime(valor: datetime) -> QDateTime:
    return QDateTime(QDate(valor.year, valor.month, valor.day), QTime(valor.hour, valor.minute))


class CitaFormDialog(QDialog):
    def __init__(
        self,
        container: AppContainer,
        parent: Optional[QWidget] = None,
        *,
        default_datetime: Optional[datetime] = None,
    ) -> None:
        super().__init__(parent)
        t = container.i18n.t
        self.setWindowTitle(t("citas.form.titulo"))
        self.setMinimumWidth(520)
        self._datos: Optional[DatosCita] = None

        self.buscador = BuscadorPacientesWidget(container.pacientes, self)
        self.buscador.set_placeholder(t("citas.form.buscar_paciente"))

        self.cbo_medico = QComboBox()
        medicos = container.medicos
        if not medicos.items:
            medicos.cargar()
        self.cbo_medico.addItem(t("citas.form.seleccione_medico"), "")
        for medico in medicos.items:
            etiqueta = medico.nombre_completo or f"{medico.nombre} {medico.apellidos}".strip()
            if medico.especialidad:
                etiqueta = f"{etiqueta} ({medico.especialidad})"
            self.cbo_medico.addItem(etiqueta, medico.medico_id)

        self.dt_fecha_hora = QDateTimeEdit()
        self.dt_fecha_hora.setCalendarPopup(True)
        self.dt_fecha_hora.setDisplayFormat("yyyy-MM-dd HH:mm")
        self.dt_fecha_hora.setDateTime(_a_qdatetime(default_datetime) if default_datetime else QDateTime.currentDateTime())

        self.txt_notas = QTextEdit()
        self.txt_notas.setFixedHeight(80)

        form = QFormLayout()
        form.addRow(f"{t('col.paciente')} *", self.buscador)
        form.addRow(f"{t('col.medico')} *", self.cbo_medico)
        form.addRow(f"{t('col.fecha')} *", self.dt_fecha_hora)
        form.addRow(t("col.notas"), self.txt_notas)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.button(QDialogButtonBox.Save).setText(t("comun.guardar"))
        buttons.button(QDialogButtonBox.Cancel).setText(t("comun.cancelar"))
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(buttons)

    def _on_accept(self) -> None:
        paciente = self.buscador.seleccionado
        datos = DatosCita(
            paciente=paciente.paciente_id if paciente else "",
            medico=self.cbo_medico.currentData() or "",
            fecha_hora=self.dt_fecha_hora.dateTime().toPython().astimezone(),
            notas=self.txt_notas.toPlainText().strip() or None,
        )
        try:
            datos.validar()
        except ValidationError as exc:
            present_error(self, exc)
            return
        self._datos = datos
        self.accept()

    def get_data(self) -> Optional[DatosCita]:
        return self._datos
