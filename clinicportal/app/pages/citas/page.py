from __future__ import annotations

from datetime import date, datetime, time
from typing import List, Optional

from PySide6.QtWidgets import (
    QAbstractItemView,
    QCalendarWidget,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTableWidget,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.application.citas.filtros import (
    EstadoPagoCita,
    FiltrosCitas,
    contadores_dia,
    estado_pago,
    estados_pago_por_consulta,
    filtrar_citas,
)
from clinicportal.app.application.consultas.pagos import formatear_importe
from clinicportal.app.bootstrap_logging import get_logger
from clinicportal.app.common.fechas import dia_local
from clinicportal.app.container import AppContainer
from clinicportal.app.domain.enums import EstadoCita
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import Cita
from clinicportal.app.pages.citas.dialogs.cita_form import CitaFormDialog
from clinicportal.app.pages.shared.crud_page_helpers import confirm_action
from clinicportal.app.pages.shared.estados_presentacion import (
    etiqueta_estado_cita,
    etiqueta_pago_cita,
    items_estado_cita,
    items_filtro_pago_cita,
)
from clinicportal.app.pages.shared.filtro_listado import FiltroListadoWidget
from clinicportal.app.pages.shared.table_utils import apply_row_style, format_datetime, selected_data, set_item
from clinicportal.app.ui.error_presenter import present_error

LOGGER = get_logger(__name__)

_ESTADOS_CERRADOS = {EstadoCita.CANCELLED.value, EstadoCita.NO_SHOW.value}


class PageCitas(QWidget):
    def __init__(self, container: AppContainer, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = container.i18n
        self._controller = container.citas
        self._estados_pago: dict[str, EstadoPagoCita] = {}
        self._visibles: List[Cita] = []

        self._build_ui()
        self._bind_events()
        self._controller.subscribe(self._render)
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _build_ui(self) -> None:
        self.filtros = FiltroListadoWidget(self)
        self.cbo_pago = QComboBox(self)
        self.calendar = QCalendarWidget()
        self.lbl_fecha = QLabel()
        self.lbl_contadores = QLabel()
        self.lbl_contadores.setWordWrap(True)
        self.btn_nueva = QPushButton()
        self.btn_completar = QPushButton()
        self.btn_cancelar = QPushButton()
        self.btn_ausente = QPushButton()

        self.table = QTableWidget(0, 6)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.horizontalHeader().setStretchLastSection(True)

        barra = QHBoxLayout()
        barra.addWidget(self.filtros, 1)
        barra.addWidget(self.cbo_pago)

        panel_izquierdo = QVBoxLayout()
        panel_izquierdo.addWidget(self.calendar)
        panel_izquierdo.addWidget(self.lbl_fecha)
        panel_izquierdo.addWidget(self.lbl_contadores)
        panel_izquierdo.addWidget(self.btn_nueva)
        panel_izquierdo.addWidget(self.btn_completar)
        panel_izquierdo.addWidget(self.btn_cancelar)
        panel_izquierdo.addWidget(self.btn_ausente)
        panel_izquierdo.addStretch(1)

        cuerpo = QHBoxLayout()
        cuerpo.addLayout(panel_izquierdo, 1)
        cuerpo.addWidget(self.table, 3)

        root = QVBoxLayout(self)
        root.addLayout(barra)
        root.addLayout(cuerpo, 1)

    def _bind_events(self) -> None:
        self.filtros.filtros_cambiados.connect(self._render)
        self.cbo_pago.currentIndexChanged.connect(self._render)
        self.calendar.selectionChanged.connect(self._render)
        self.btn_nueva.clicked.connect(self._on_nueva)
        self.btn_completar.clicked.connect(self._on_completar)
        self.btn_cancelar.clicked.connect(self._on_cancelar)
        self.btn_ausente.clicked.connect(self._on_ausente)
        self.table.itemSelectionChanged.connect(self._update_buttons)

    def _retranslate(self) -> None:
        t = self._i18n.t
        self.filtros.set_textos(placeholder=t("citas.buscar"), limpiar=t("comun.limpiar"))
        self.filtros.set_estado_items(items_estado_cita(self._i18n), default_value=self.filtros.estado())
        pago_actual = self.cbo_pago.currentData() or ""
        self.cbo_pago.blockSignals(True)
        self.cbo_pago.clear()
        for etiqueta, valor in items_filtro_pago_cita(self._i18n):
            self.cbo_pago.addItem(etiqueta, valor)
        self.cbo_pago.setCurrentIndex(max(self.cbo_pago.findData(pago_actual), 0))
        self.cbo_pago.blockSignals(False)
        self.btn_nueva.setText(t("citas.nueva"))
        self.btn_completar.setText(t("citas.completar"))
        self.btn_cancelar.setText(t("citas.cancelar"))
        self.btn_ausente.setText(t("citas.ausente"))
        self.table.setHorizontalHeaderLabels(
            [t("col.hora"), t("col.paciente"), t("col.medico"), t("col.estado"), t("col.pago"), t("col.notas")]
        )
        self._render()

    def on_show(self) -> None:
        self._refresh()

    def _refresh(self) -> None:
        pacientes = self._container.pacientes
        if not pacientes.items:
            pacientes.cargar()
        self._estados_pago = estados_pago_por_consulta(self._container.pagos.cargar())
        self._controller.cargar()

    def _fecha_seleccionada(self) -> date:
        return self.calendar.selectedDate().toPython()

    def _render(self) -> None:
        t = self._i18n.t
        fecha = self._fecha_seleccionada()
        filtros = FiltrosCitas(
            fecha=fecha,
            texto=self.filtros.texto(),
            estado=self.filtros.estado(),
            pago=self.cbo_pago.currentData() or "",
        )
        self._visibles = filtrar_citas(
            self._controller.items,
            filtros,
            pacientes=self._container.pacientes.items,
            estados_pago=self._estados_pago,
        )
        self.table.setRowCount(0)
        for cita in sorted(self._visibles, key=lambda c: c.fecha_hora.timestamp() if c.fecha_hora else 0.0):
            row = self.table.rowCount()
            self.table.insertRow(row)
            pago = estado_pago(cita, self._estados_pago)
            texto_pago = etiqueta_pago_cita(self._i18n, pago)
            if pago.pagado:
                texto_pago = f"{texto_pago} · {formatear_importe(pago.importe)}"
            set_item(self.table, row, 0, format_datetime(cita.fecha_hora, "%H:%M"), data=cita.cita_id)
            set_item(self.table, row, 1, cita.paciente_nombre or "")
            set_item(self.table, row, 2, cita.medico_nombre or "")
            set_item(self.table, row, 3, etiqueta_estado_cita(self._i18n, cita.estado))
            set_item(self.table, row, 4, texto_pago)
            set_item(self.table, row, 5, cita.notas or "")
            apply_row_style(self.table, row, muted=cita.estado in _ESTADOS_CERRADOS, tooltip=cita.medico_especialidad)

        del_dia = [c for c in self._controller.items if dia_local(c.fecha_hora) == fecha]
        contadores = contadores_dia(del_dia, self._estados_pago)
        self.lbl_fecha.setText(fecha.strftime("%d/%m/%Y"))
        self.lbl_contadores.setText(
            t(
                "citas.contadores",
                total=contadores.total,
                completadas=contadores.completadas,
                programadas=contadores.programadas,
                canceladas=contadores.canceladas,
                pagadas=contadores.pagadas,
                sin_pagar=contadores.sin_pagar,
            )
        )
        self.filtros.set_contador(t("comun.contador", n=len(self._visibles), total=contadores.total))
        self._update_buttons()

    def _seleccionada(self) -> Optional[Cita]:
        cita_id = selected_data(self.table)
        if cita_id is None:
            return None
        return next((c for c in self._controller.items if c.cita_id == cita_id), None)

    def _update_buttons(self) -> None:
        cita = self._seleccionada()
        programada = cita is not None and cita.estado == EstadoCita.SCHEDULED.value
        for button in (self.btn_completar, self.btn_cancelar, self.btn_ausente):
            button.setEnabled(programada)

    def _on_nueva(self) -> None:
        inicio = datetime.combine(self._fecha_seleccionada(), time(hour=9))
        dialog = CitaFormDialog(self._container, self, default_datetime=inicio)
        if dialog.exec() != CitaFormDialog.Accepted:
            return
        datos = dialog.get_data()
        if datos is None:
            return
        try:
            self._controller.crear(datos)
        except ValidationError as exc:
            present_error(self, exc)

    def _on_completar(self) -> None:
        cita = self._seleccionada()
        if cita is not None:
            self._controller.completar(cita.cita_id)

    def _on_cancelar(self) -> None:
        cita = self._seleccionada()
        if cita is None:
            return
        t = self._i18n.t
        if confirm_action(self, title=t("citas.cancelar"), message=t("citas.cancelar.confirmar")):
            self._controller.cancelar(cita.cita_id)

    def _on_ausente(self) -> None:
        cita = self._seleccionada()
        if cita is not None:
            self._controller.marcar_ausente(cita.cita_id)
