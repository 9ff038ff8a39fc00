from __future__ import annotations

from typing import List, Optional

from PySide6.QtWidgets import (
    QAbstractItemView,
    QGridLayout,
    QHBoxLayout,
    QPushButton,
    QTableWidget,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.application.consultas.pagos import (
    estadisticas_financieras,
    filtrar_consultas_por_pago,
    formatear_importe,
    importe_pagado,
)
from clinicportal.app.bootstrap_logging import get_logger
from clinicportal.app.common.search_utils import contains_text
from clinicportal.app.container import AppContainer
from clinicportal.app.domain.enums import EstadoPago
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import Consulta, Pago
from clinicportal.app.pages.consultas.dialogs.consulta_form import ConsultaFormDialog
from clinicportal.app.pages.consultas.dialogs.pago_dialog import PagoDialog
from clinicportal.app.pages.shared.crud_page_helpers import confirm_action
from clinicportal.app.pages.shared.estados_presentacion import etiqueta_estado_pago
from clinicportal.app.pages.shared.filtro_listado import FiltroListadoWidget
from clinicportal.app.pages.shared.table_utils import apply_row_style, format_datetime, selected_data, set_item
from clinicportal.app.ui.error_presenter import present_error
from clinicportal.app.ui.widgets.kpi_card import KpiCard

LOGGER = get_logger(__name__)


class PageConsultas(QWidget):
    """Listado de consultas con su situación de cobro."""

    def __init__(self, container: AppContainer, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = container.i18n
        self._controller = container.consultas
        self._pagos = container.pagos
        self._visibles: List[Consulta] = []

        self._build_ui()
        self._bind_events()
        self._controller.subscribe(self._render)
        self._pagos.subscribe(self._render)
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        grid = QGridLayout()
        self.kpi_ingresos_hoy = KpiCard("")
        self.kpi_pagos_hoy = KpiCard("")
        self.kpi_sin_pagar = KpiCard("")
        self.kpi_ingresos_totales = KpiCard("")
        for col, card in enumerate(
            (self.kpi_ingresos_hoy, self.kpi_pagos_hoy, self.kpi_sin_pagar, self.kpi_ingresos_totales)
        ):
            grid.addWidget(card, 0, col)
        root.addLayout(grid)

        self.filtros = FiltroListadoWidget(self)
        root.addWidget(self.filtros)

        actions = QHBoxLayout()
        self.btn_nueva = QPushButton()
        self.btn_pago = QPushButton()
        self.btn_marcar_pagado = QPushButton()
        self.btn_reembolsar = QPushButton()
        self.btn_fallido = QPushButton()
        for button in (self.btn_nueva, self.btn_pago, self.btn_marcar_pagado, self.btn_reembolsar, self.btn_fallido):
            actions.addWidget(button)
        actions.addStretch(1)
        root.addLayout(actions)

        self.table = QTableWidget(0, 6)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.horizontalHeader().setStretchLastSection(True)
        root.addWidget(self.table, 1)

    def _bind_events(self) -> None:
        self.filtros.filtros_cambiados.connect(self._render)
        self.btn_nueva.clicked.connect(self._on_nueva)
        self.btn_pago.clicked.connect(self._on_registrar_pago)
        self.btn_marcar_pagado.clicked.connect(self._on_marcar_pagado)
        self.btn_reembolsar.clicked.connect(self._on_reembolsar)
        self.btn_fallido.clicked.connect(self._on_marcar_fallido)
        self.table.itemSelectionChanged.connect(self._update_buttons)

    def _retranslate(self) -> None:
        t = self._i18n.t
        self.kpi_ingresos_hoy.set_title(t("consultas.kpi.ingresos_hoy"))
        self.kpi_pagos_hoy.set_title(t("consultas.kpi.pagos_hoy"))
        self.kpi_sin_pagar.set_title(t("consultas.kpi.sin_pagar"))
        self.kpi_ingresos_totales.set_title(t("consultas.kpi.ingresos_totales"))
        self.filtros.set_textos(placeholder=t("consultas.buscar"), limpiar=t("comun.limpiar"))
        self.filtros.set_estado_items(
            [
                (t("comun.todos"), "all"),
                (t("pago.cita.pagado"), "paid"),
                (t("pago.cita.sin_pagar"), "unpaid"),
            ],
            default_value=self.filtros.estado() or "all",
        )
        self.btn_nueva.setText(t("consultas.nueva"))
        self.btn_pago.setText(t("consultas.registrar_pago"))
        self.btn_marcar_pagado.setText(t("pagos.marcar_pagado"))
        self.btn_reembolsar.setText(t("pagos.reembolsar"))
        self.btn_fallido.setText(t("pagos.marcar_fallido"))
        self.table.setHorizontalHeaderLabels(
            [t("col.fecha"), t("col.paciente"), t("col.medico"), t("col.motivo"), t("col.diagnostico"), t("col.pago")]
        )
        self._render()

    def on_show(self) -> None:
        self._refresh()

    def _refresh(self) -> None:
        self._pagos.cargar()
        self._controller.cargar()

    def _render(self) -> None:
        t = self._i18n.t
        pagos = self._pagos.items
        texto = self.filtros.texto()
        por_texto = [
            c
            for c in self._controller.items
            if not texto or contains_text(texto, c.paciente_nombre, c.medico_nombre, c.motivo, c.diagnostico_nombre)
        ]
        self._visibles = filtrar_consultas_por_pago(por_texto, pagos, self.filtros.estado() or "all")

        self.table.setRowCount(0)
        for consulta in self._visibles:
            row = self.table.rowCount()
            self.table.insertRow(row)
            importe = importe_pagado(consulta.consulta_id, pagos)
            set_item(self.table, row, 0, format_datetime(consulta.fecha), data=consulta.consulta_id)
            set_item(self.table, row, 1, consulta.paciente_nombre or "")
            set_item(self.table, row, 2, consulta.medico_nombre or "")
            set_item(self.table, row, 3, consulta.motivo or "")
            set_item(self.table, row, 4, consulta.diagnostico_nombre or "")
            pago = self._ultimo_pago(consulta)
            if importe:
                set_item(self.table, row, 5, formatear_importe(importe))
            elif pago is not None:
                set_item(self.table, row, 5, etiqueta_estado_pago(self._i18n, pago.estado))
            else:
                set_item(self.table, row, 5, t("pago.cita.sin_pagar"))
            apply_row_style(self.table, row, muted=not importe)

        stats = estadisticas_financieras(pagos, self._visibles)
        self.kpi_ingresos_hoy.set_data(formatear_importe(stats.ingresos_hoy), state="ok")
        self.kpi_pagos_hoy.set_data(str(stats.pagos_hoy), state="info")
        self.kpi_sin_pagar.set_data(str(stats.sin_pagar), state="warn" if stats.sin_pagar else "ok")
        self.kpi_ingresos_totales.set_data(formatear_importe(stats.ingresos_totales), state="info")
        self.filtros.set_contador(t("comun.contador", n=len(self._visibles), total=len(self._controller.items)))
        self._update_buttons()

    def _seleccionada(self) -> Optional[Consulta]:
        consulta_id = selected_data(self.table)
        if consulta_id is None:
            return None
        return next((c for c in self._controller.items if c.consulta_id == consulta_id), None)

    def _ultimo_pago(self, consulta: Consulta) -> Optional[Pago]:
        propios = [p for p in self._pagos.items if p.consulta_id == consulta.consulta_id]
        return propios[-1] if propios else None

    def _update_buttons(self) -> None:
        consulta = self._seleccionada()
        pago = self._ultimo_pago(consulta) if consulta is not None else None
        estado = pago.estado if pago is not None else None
        self.btn_pago.setEnabled(consulta is not None and estado != EstadoPago.COMPLETED.value)
        self.btn_marcar_pagado.setEnabled(estado in {EstadoPago.PENDING.value, EstadoPago.FAILED.value})
        self.btn_reembolsar.setEnabled(estado == EstadoPago.COMPLETED.value)
        self.btn_fallido.setEnabled(estado == EstadoPago.PENDING.value)

    def _on_nueva(self) -> None:
        dialog = ConsultaFormDialog(self._container, self)
        if dialog.exec() != ConsultaFormDialog.Accepted:
            return
        datos = dialog.get_data()
        if datos is None:
            return
        try:
            self._controller.crear(datos)
        except ValidationError as exc:
            present_error(self, exc)

    def _on_registrar_pago(self) -> None:
        consulta = self._seleccionada()
        if consulta is None:
            return
        dialog = PagoDialog(self._i18n, consulta, self)
        if dialog.exec() != PagoDialog.Accepted:
            return
        datos = dialog.get_data()
        if datos is None:
            return
        try:
            self._pagos.crear(datos)
        except ValidationError as exc:
            present_error(self, exc)

    def _pago_seleccionado(self) -> Optional[Pago]:
        consulta = self._seleccionada()
        return self._ultimo_pago(consulta) if consulta is not None else None

    def _on_marcar_pagado(self) -> None:
        pago = self._pago_seleccionado()
        if pago is not None:
            self._pagos.marcar_pagado(pago.id)

    def _on_reembolsar(self) -> None:
        pago = self._pago_seleccionado()
        if pago is None:
            return
        t = self._i18n.t
        if confirm_action(self, title=t("pagos.reembolsar"), message=t("pagos.reembolsar.confirmar")):
            self._pagos.reembolsar(pago.id)

    def _on_marcar_fallido(self) -> None:
        pago = self._pago_seleccionado()
        if pago is None:
            return
        t = self._i18n.t
        if confirm_action(self, title=t("pagos.marcar_fallido"), message=t("pagos.marcar_fallido.confirmar")):
            self._pagos.marcar_fallido(pago.id)
