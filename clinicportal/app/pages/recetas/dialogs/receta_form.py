from __future__ import annotations

from typing import Optional, Sequence, Tuple

from PySide6.QtWidgets import QComboBox, QDialog, QDialogButtonBox, QFormLayout, QTextEdit, QVBoxLayout, QWidget

from clinicportal.app.domain.modelos import Consulta
from clinicportal.app.i18n import I18nManager
from clinicportal.app.pages.shared.table_utils import format_datetime


class RecetaFormDialog(QDialog):
    """Nueva receta ligada a una consulta existente."""

    def __init__(self, i18n: I18nManager, consultas: Sequence[Consulta], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        t = i18n.t
        self.setWindowTitle(t("recetas.nueva"))
        self.setMinimumWidth(480)

        self.cbo_consulta = QComboBox()
        for consulta in consultas:
            etiqueta = f"{format_datetime(consulta.fecha, '%d/%m/%Y')} · {consulta.paciente_nombre or consulta.consulta_id}"
            self.cbo_consulta.addItem(etiqueta, consulta.consulta_id)
        self.txt_notas = QTextEdit()
        self.txt_notas.setFixedHeight(90)

        form = QFormLayout()
        form.addRow(f"{t('col.consulta')} *", self.cbo_consulta)
        form.addRow(t("col.notas"), self.txt_notas)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Save).setText(t("comun.guardar"))
        self.buttons.button(QDialogButtonBox.Cancel).setText(t("comun.cancelar"))
        self.buttons.button(QDialogButtonBox.Save).setEnabled(self.cbo_consulta.count() > 0)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(self.buttons)

    def get_data(self) -> Tuple[str, str]:
        return self.cbo_consulta.currentData() or "", self.txt_notas.toPlainText().strip()
