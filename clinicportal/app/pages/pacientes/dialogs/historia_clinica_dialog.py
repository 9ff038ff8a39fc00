from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QGroupBox,
    QLabel,
    QTableWidget,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.application.consultas.pagos import formatear_importe
from clinicportal.app.application.pacientes.filtros import BalancePaciente
from clinicportal.app.domain.modelos import HistoriaClinica
from clinicportal.app.i18n import I18nManager
from clinicportal.app.pages.shared.estados_presentacion import etiqueta_estado_pago, etiqueta_metodo_pago
from clinicportal.app.pages.shared.table_utils import format_datetime, set_item


class HistoriaClinicaDialog(QDialog):
    """Historia clínica y situación de pagos de un paciente."""

    def __init__(self, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._i18n = i18n
        t = i18n.t
        self.setWindowTitle(t("pacientes.historia.titulo"))
        self.resize(760, 620)

        root = QVBoxLayout(self)
        self.lbl_estado = QLabel()
        root.addWidget(self.lbl_estado)

        self.box_historia = QGroupBox(t("pacientes.historia.titulo"))
        form = QFormLayout(self.box_historia)
        self.lbl_medico = QLabel()
        self.lbl_antecedentes = QLabel()
        self.lbl_cronicas = QLabel()
        self.lbl_familiares = QLabel()
        for label in (self.lbl_antecedentes, self.lbl_cronicas, self.lbl_familiares):
            label.setWordWrap(True)
        form.addRow(t("pacientes.historia.medico"), self.lbl_medico)
        form.addRow(t("pacientes.historia.antecedentes"), self.lbl_antecedentes)
        form.addRow(t("pacientes.historia.cronicas"), self.lbl_cronicas)
        form.addRow(t("pacientes.historia.familiares"), self.lbl_familiares)
        self.tbl_consultas = QTableWidget(0, 3)
        self.tbl_consultas.setHorizontalHeaderLabels([t("col.fecha"), t("col.medico"), t("col.motivo")])
        self.tbl_consultas.horizontalHeader().setStretchLastSection(True)
        form.addRow(self.tbl_consultas)
        root.addWidget(self.box_historia)

        self.box_pagos = QGroupBox(t("pacientes.pagos.titulo"))
        pagos_layout = QVBoxLayout(self.box_pagos)
        self.lbl_balance = QLabel()
        self.tbl_pagos = QTableWidget(0, 4)
        self.tbl_pagos.setHorizontalHeaderLabels([t("col.fecha"), t("col.importe"), t("col.metodo"), t("col.estado")])
        self.tbl_pagos.horizontalHeader().setStretchLastSection(True)
        pagos_layout.addWidget(self.lbl_balance)
        pagos_layout.addWidget(self.tbl_pagos)
        root.addWidget(self.box_pagos)

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)
        root.addWidget(buttons)

    def render_cargando(self) -> None:
        self.lbl_estado.setText(self._i18n.t("comun.cargando"))

    def render_historia(self, historia: Optional[HistoriaClinica]) -> None:
        t = self._i18n.t
        if historia is None:
            self.lbl_estado.setText(t("pacientes.historia.sin_historia"))
            self.box_historia.setVisible(False)
            return
        self.lbl_estado.setText(t("pacientes.historia.num_consultas", n=historia.num_consultas))
        self.box_historia.setVisible(True)
        self.lbl_medico.setText(historia.medico_responsable or "-")
        self.lbl_antecedentes.setText(historia.antecedentes or "-")
        self.lbl_cronicas.setText(historia.enfermedades_cronicas or "-")
        self.lbl_familiares.setText(historia.antecedentes_familiares or "-")
        self.tbl_consultas.setRowCount(0)
        for consulta in historia.consultas_recientes or historia.consultas:
            row = self.tbl_consultas.rowCount()
            self.tbl_consultas.insertRow(row)
            set_item(self.tbl_consultas, row, 0, format_datetime(consulta.fecha), data=consulta.consulta_id)
            set_item(self.tbl_consultas, row, 1, consulta.medico_nombre or "")
            set_item(self.tbl_consultas, row, 2, consulta.motivo or "")

    def render_balance(self, balance: BalancePaciente) -> None:
        t = self._i18n.t
        ultimo = format_datetime(balance.ultimo_pago, "%d/%m/%Y") or "-"
        self.lbl_balance.setText(
            t(
                "pacientes.pagos.resumen",
                pagado=formatear_importe(balance.total_pagado),
                pendiente=formatear_importe(balance.total_pendiente),
                ultimo=ultimo,
            )
        )
        self.tbl_pagos.setRowCount(0)
        for pago in balance.pagos:
            row = self.tbl_pagos.rowCount()
            self.tbl_pagos.insertRow(row)
            set_item(self.tbl_pagos, row, 0, format_datetime(pago.pagado_en or pago.creado_en, "%d/%m/%Y"))
            set_item(self.tbl_pagos, row, 1, formatear_importe(pago.importe))
            set_item(self.tbl_pagos, row, 2, etiqueta_metodo_pago(self._i18n, pago.metodo))
            set_item(self.tbl_pagos, row, 3, etiqueta_estado_pago(self._i18n, pago.estado))
