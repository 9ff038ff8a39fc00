from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFormLayout,
    QLineEdit,
    QWidget,
)

from clinicportal.app.domain.enums import Genero
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import DatosPaciente, Paciente
from clinicportal.app.i18n import I18nManager
from clinicportal.app.ui.error_presenter import present_error


def _required(texto: str) -> str:
    return f"{texto} *"


class PacienteFormDialog(QDialog):
    """Alta y edición de paciente. En edición solo se envían los campos con valor."""

    def __init__(self, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._i18n = i18n
        t = i18n.t
        self.setWindowTitle(t("pacientes.form.nuevo"))

        self.txt_nombre = QLineEdit()
        self.txt_apellidos = QLineEdit()
        self.cbo_genero = QComboBox()
        self.cbo_genero.addItem(t("genero.m"), Genero.MASCULINO.value)
        self.cbo_genero.addItem(t("genero.f"), Genero.FEMENINO.value)
        self.date_fecha_nacimiento = QDateEdit()
        self.date_fecha_nacimiento.setDisplayFormat("yyyy-MM-dd")
        self.date_fecha_nacimiento.setCalendarPopup(True)
        self.date_fecha_nacimiento.setDate(QDate.currentDate())
        self.txt_telefono = QLineEdit()
        self.txt_email = QLineEdit()
        self.txt_direccion = QLineEdit()
        self.txt_nacionalidad = QLineEdit()
        self.spn_altura = QDoubleSpinBox()
        self.spn_altura.setRange(0, 300)
        self.spn_altura.setSuffix(" cm")
        self.spn_peso = QDoubleSpinBox()
        self.spn_peso.setRange(0, 500)
        self.spn_peso.setSuffix(" kg")

        form = QFormLayout()
        form.addRow(_required(t("pacientes.form.nombre")), self.txt_nombre)
        form.addRow(_required(t("pacientes.form.apellidos")), self.txt_apellidos)
        form.addRow(_required(t("pacientes.form.genero")), self.cbo_genero)
        form.addRow(_required(t("pacientes.form.fecha_nacimiento")), self.date_fecha_nacimiento)
        form.addRow(t("pacientes.form.telefono"), self.txt_telefono)
        form.addRow(t("pacientes.form.email"), self.txt_email)
        form.addRow(t("pacientes.form.direccion"), self.txt_direccion)
        form.addRow(t("pacientes.form.nacionalidad"), self.txt_nacionalidad)
        form.addRow(t("pacientes.form.altura"), self.spn_altura)
        form.addRow(t("pacientes.form.peso"), self.spn_peso)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.button(QDialogButtonBox.Save).setText(t("comun.guardar"))
        buttons.button(QDialogButtonBox.Cancel).setText(t("comun.cancelar"))
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)

        layout = QFormLayout(self)
        layout.addRow(form)
        layout.addRow(buttons)
        self._datos: Optional[DatosPaciente] = None

    def set_paciente(self, paciente: Paciente) -> None:
        self.setWindowTitle(self._i18n.t("pacientes.form.editar"))
        self.txt_nombre.setText(paciente.nombre)
        self.txt_apellidos.setText(paciente.apellidos)
        index = self.cbo_genero.findData(paciente.genero)
        self.cbo_genero.setCurrentIndex(index if index >= 0 else 0)
        if paciente.fecha_nacimiento:
            nacimiento = paciente.fecha_nacimiento
            self.date_fecha_nacimiento.setDate(QDate(nacimiento.year, nacimiento.month, nacimiento.day))
        self.txt_telefono.setText(paciente.telefono or "")
        self.txt_email.setText(paciente.email or "")
        self.txt_direccion.setText(paciente.direccion or "")
        self.txt_nacionalidad.setText(paciente.nacionalidad or "")
        self.spn_altura.setValue(paciente.altura or 0)
        self.spn_peso.setValue(paciente.peso or 0)

    def _leer(self) -> DatosPaciente:
        return DatosPaciente(
            nombre=self.txt_nombre.text(),
            apellidos=self.txt_apellidos.text(),
            genero=self.cbo_genero.currentData(),
            fecha_nacimiento=self.date_fecha_nacimiento.date().toPython(),
            telefono=self.txt_telefono.text(),
            email=self.txt_email.text(),
            direccion=self.txt_direccion.text(),
            nacionalidad=self.txt_nacionalidad.text(),
            altura=self.spn_altura.value() or None,
            peso=self.spn_peso.value() or None,
        )

    def _on_accept(self) -> None:
        datos = self._leer()
        try:
            datos.validar()
        except ValidationError as exc:
            present_error(self, exc)
            return
        self._datos = datos
        self.accept()

    def get_data(self) -> Optional[DatosPaciente]:
        return self._datos
