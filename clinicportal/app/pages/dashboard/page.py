from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTableWidget,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.application.consultas.pagos import formatear_importe
from clinicportal.app.application.dashboard.resumen import ResumenDashboard, cargar_resumen
from clinicportal.app.container import AppContainer
from clinicportal.app.pages.shared.table_utils import format_datetime, set_item
from clinicportal.app.ui.widgets.kpi_card import KpiCard


class PageDashboard(QWidget):
    """Panel de inicio: KPIs del día, consultas de hoy y próximas citas."""

    def __init__(self, container: AppContainer, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = container.i18n
        self.resumen = ResumenDashboard()

        self._build_ui()
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        header = QHBoxLayout()
        self.lbl_titulo = QLabel()
        self.lbl_titulo.setStyleSheet("font-size: 20px; font-weight: 700;")
        self.btn_refrescar = QPushButton()
        self.btn_refrescar.clicked.connect(self._refresh)
        header.addWidget(self.lbl_titulo)
        header.addStretch(1)
        header.addWidget(self.btn_refrescar)
        root.addLayout(header)

        grid = QGridLayout()
        self.kpi_pacientes = KpiCard("")
        self.kpi_consultas = KpiCard("")
        self.kpi_citas = KpiCard("")
        self.kpi_ingresos = KpiCard("")
        for col, card in enumerate((self.kpi_pacientes, self.kpi_consultas, self.kpi_citas, self.kpi_ingresos)):
            grid.addWidget(card, 0, col)
        root.addLayout(grid)

        listas = QHBoxLayout()
        self.box_consultas = QGroupBox()
        self.tbl_consultas = QTableWidget(0, 4)
        self.tbl_consultas.horizontalHeader().setStretchLastSection(True)
        QVBoxLayout(self.box_consultas).addWidget(self.tbl_consultas)

        self.box_citas = QGroupBox()
        self.tbl_citas = QTableWidget(0, 3)
        self.tbl_citas.horizontalHeader().setStretchLastSection(True)
        QVBoxLayout(self.box_citas).addWidget(self.tbl_citas)

        listas.addWidget(self.box_consultas, 1)
        listas.addWidget(self.box_citas, 1)
        root.addLayout(listas, 1)

    def _retranslate(self) -> None:
        t = self._i18n.t
        self.lbl_titulo.setText(t("dashboard.titulo"))
        self.btn_refrescar.setText(t("comun.refrescar"))
        self.kpi_pacientes.set_title(t("dashboard.kpi.pacientes"))
        self.kpi_consultas.set_title(t("dashboard.kpi.consultas_hoy"))
        self.kpi_citas.set_title(t("dashboard.kpi.citas"))
        self.kpi_ingresos.set_title(t("dashboard.kpi.ingresos"))
        self.box_consultas.setTitle(t("dashboard.consultas_hoy"))
        self.box_citas.setTitle(t("dashboard.proximas_citas"))
        self.tbl_consultas.setHorizontalHeaderLabels(
            [t("col.paciente"), t("col.hora"), t("col.estado"), t("col.diagnostico")]
        )
        self.tbl_citas.setHorizontalHeaderLabels([t("col.paciente"), t("col.fecha"), t("col.motivo")])
        self._render()

    def on_show(self) -> None:
        self._refresh()

    def _refresh(self) -> None:
        c = self._container
        self.resumen = cargar_resumen(c.pacientes, c.consultas, c.citas, c.pagos)
        self._render()

    def _render(self) -> None:
        t = self._i18n.t
        r = self.resumen
        self.kpi_pacientes.set_data(str(r.total_pacientes), state="info")
        self.kpi_consultas.set_data(
            str(r.consultas_hoy),
            subtitle=t("dashboard.kpi.consultas_total", n=r.total_consultas),
            state="ok" if r.consultas_hoy else "neutral",
        )
        self.kpi_citas.set_data(str(r.citas_programadas), state="info")
        self.kpi_ingresos.set_data(formatear_importe(r.ingresos), state="ok")

        self.tbl_consultas.setRowCount(0)
        for fila in r.consultas_recientes:
            row = self.tbl_consultas.rowCount()
            self.tbl_consultas.insertRow(row)
            set_item(self.tbl_consultas, row, 0, fila.paciente or t("dashboard.paciente_desconocido"), data=fila.consulta_id)
            set_item(self.tbl_consultas, row, 1, format_datetime(fila.hora, "%H:%M"))
            set_item(self.tbl_consultas, row, 2, t(fila.estado_key))
            set_item(self.tbl_consultas, row, 3, fila.diagnostico or t("dashboard.diagnostico_en_curso"))

        self.tbl_citas.setRowCount(0)
        for fila in r.proximas_citas:
            row = self.tbl_citas.rowCount()
            self.tbl_citas.insertRow(row)
            set_item(self.tbl_citas, row, 0, fila.paciente or t("dashboard.paciente_desconocido"), data=fila.cita_id)
            set_item(self.tbl_citas, row, 1, format_datetime(fila.fecha_hora, "%d %b %H:%M"))
            set_item(self.tbl_citas, row, 2, fila.motivo or t("dashboard.consulta_general"))
