from __future__ import annotations

from decimal import Decimal
from typing import Optional

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.application.consultas.pagos import MONEDA, datos_pago_por_defecto
from clinicportal.app.domain.enums import EstadoPago
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import Consulta, DatosPago
from clinicportal.app.i18n import I18nManager
from clinicportal.app.pages.shared.estados_presentacion import etiqueta_estado_pago, items_metodo_pago
from clinicportal.app.ui.error_presenter import present_error


class PagoDialog(QDialog):
    """Registro del pago de una consulta, precargado con la tarifa estándar."""

    def __init__(self, i18n: I18nManager, consulta: Consulta, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        t = i18n.t
        self.setWindowTitle(t("pagos.dialogo.titulo"))
        self.setMinimumWidth(420)
        self._datos: Optional[DatosPago] = None
        defecto = datos_pago_por_defecto(consulta.consulta_id)

        self.lbl_consulta = QLabel(f"{consulta.consulta_id} · {consulta.paciente_nombre or ''}")
        self.spn_importe = QDoubleSpinBox()
        self.spn_importe.setRange(0, 10_000_000)
        self.spn_importe.setDecimals(0)
        self.spn_importe.setSingleStep(1000)
        self.spn_importe.setSuffix(f" {MONEDA}")
        self.spn_importe.setValue(float(defecto.importe))
        self.cbo_metodo = QComboBox()
        for etiqueta, valor in items_metodo_pago(i18n):
            self.cbo_metodo.addItem(etiqueta, valor)
        self.cbo_estado = QComboBox()
        for estado in (EstadoPago.COMPLETED, EstadoPago.PENDING):
            self.cbo_estado.addItem(etiqueta_estado_pago(i18n, estado.value), estado.value)
        self.txt_referencia = QLineEdit(defecto.referencia)

        form = QFormLayout()
        form.addRow(t("col.consulta"), self.lbl_consulta)
        form.addRow(f"{t('col.importe')} *", self.spn_importe)
        form.addRow(t("col.metodo"), self.cbo_metodo)
        form.addRow(t("col.estado"), self.cbo_estado)
        form.addRow(t("col.referencia"), self.txt_referencia)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.button(QDialogButtonBox.Save).setText(t("pagos.dialogo.registrar"))
        buttons.button(QDialogButtonBox.Cancel).setText(t("comun.cancelar"))
        buttons.accepted.connect(lambda: self._on_accept(consulta.consulta_id))
        buttons.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(buttons)

    def _on_accept(self, consulta_id: str) -> None:
        datos = DatosPago(
            consulta=consulta_id,
            importe=Decimal(str(int(self.spn_importe.value()))),
            metodo=self.cbo_metodo.currentData(),
            estado=self.cbo_estado.currentData(),
            referencia=self.txt_referencia.text().strip(),
        )
        try:
            datos.validar()
        except ValidationError as exc:
            present_error(self, exc)
            return
        self._datos = datos
        self.accept()

    def get_data(self) -> Optional[DatosPago]:
        return self._datos
