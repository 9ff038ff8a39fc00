from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QDialog, QDialogButtonBox, QFormLayout, QLineEdit, QVBoxLayout, QWidget

from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import DatosRecetaItem
from clinicportal.app.i18n import I18nManager
from clinicportal.app.ui.error_presenter import present_error


class RecetaItemDialog(QDialog):
    def __init__(self, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        t = i18n.t
        self.setWindowTitle(t("recetas.item.titulo"))
        self.setMinimumWidth(420)
        self._datos: Optional[DatosRecetaItem] = None

        self.txt_nombre = QLineEdit()
        self.txt_dosis = QLineEdit()
        self.txt_frecuencia = QLineEdit()
        self.txt_duracion = QLineEdit()
        self.txt_indicacion = QLineEdit()

        form = QFormLayout()
        form.addRow(f"{t('recetas.item.medicamento')} *", self.txt_nombre)
        form.addRow(t("recetas.item.dosis"), self.txt_dosis)
        form.addRow(t("recetas.item.frecuencia"), self.txt_frecuencia)
        form.addRow(t("recetas.item.duracion"), self.txt_duracion)
        form.addRow(t("recetas.item.indicacion"), self.txt_indicacion)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.button(QDialogButtonBox.Save).setText(t("comun.guardar"))
        buttons.button(QDialogButtonBox.Cancel).setText(t("comun.cancelar"))
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(buttons)

    def _on_accept(self) -> None:
        datos = DatosRecetaItem(
            nombre=self.txt_nombre.text(),
            dosis=self.txt_dosis.text().strip(),
            frecuencia=self.txt_frecuencia.text().strip(),
            duracion=self.txt_duracion.text().strip(),
            indicacion=self.txt_indicacion.text().strip(),
        )
        try:
            datos.validar()
        except ValidationError as exc:
            present_error(self, exc)
            return
        self._datos = datos
        self.accept()

    def get_data(self) -> Optional[DatosRecetaItem]:
        return self._datos
