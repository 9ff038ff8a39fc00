from __future__ import annotations

from datetime import datetime, time
from typing import List, Optional

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QDateEdit,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QSplitter,
    QTableWidget,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.application.consultas.pagos import formatear_importe
from clinicportal.app.application.recetas.filtros import (
    FiltrosRecetas,
    consulta_de_receta,
    filas_populares,
    filtrar_recetas,
    medico_por_id,
    paciente_por_id,
    pagos_de_receta,
)
from clinicportal.app.bootstrap_logging import get_logger
from clinicportal.app.container import AppContainer
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import Receta
from clinicportal.app.pages.recetas.dialogs.receta_form import RecetaFormDialog
from clinicportal.app.pages.recetas.dialogs.receta_item_dialog import RecetaItemDialog
from clinicportal.app.pages.shared.estados_presentacion import etiqueta_estado_pago, etiqueta_metodo_pago
from clinicportal.app.pages.shared.filtro_listado import FiltroListadoWidget
from clinicportal.app.pages.shared.table_utils import format_datetime, selected_data, set_item
from clinicportal.app.ui.error_presenter import present_error

LOGGER = get_logger(__name__)


def _fecha_edit() -> QDateEdit:
    editor = QDateEdit()
    editor.setCalendarPopup(True)
    editor.setDisplayFormat("yyyy-MM-dd")
    editor.setDate(QDate.currentDate())
    editor.setEnabled(False)
    return editor


class PageRecetas(QWidget):
    def __init__(self, container: AppContainer, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = container.i18n
        self._controller = container.recetas
        self._visibles: List[Receta] = []

        self._build_ui()
        self._bind_events()
        self._controller.subscribe(self._render)
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _build_ui(self) -> None:
        self.filtros = FiltroListadoWidget(self)
        self.chk_rango = QCheckBox()
        self.date_desde = _fecha_edit()
        self.date_hasta = _fecha_edit()
        barra = QHBoxLayout()
        barra.addWidget(self.filtros, 1)
        barra.addWidget(self.chk_rango)
        barra.addWidget(self.date_desde)
        barra.addWidget(self.date_hasta)

        actions = QHBoxLayout()
        self.btn_nueva = QPushButton()
        self.btn_item = QPushButton()
        self.btn_populares = QPushButton()
        for button in (self.btn_nueva, self.btn_item, self.btn_populares):
            actions.addWidget(button)
        actions.addStretch(1)

        self.table = QTableWidget(0, 5)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.horizontalHeader().setStretchLastSection(True)

        self.box_detalle = QGroupBox()
        detalle = QVBoxLayout(self.box_detalle)
        self.lbl_consulta = QLabel()
        self.lbl_consulta.setWordWrap(True)
        self.tbl_items = QTableWidget(0, 5)
        self.tbl_items.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.tbl_items.horizontalHeader().setStretchLastSection(True)
        self.lbl_pagos = QLabel()
        self.lbl_pagos.setWordWrap(True)
        detalle.addWidget(self.lbl_consulta)
        detalle.addWidget(self.tbl_items, 1)
        detalle.addWidget(self.lbl_pagos)

        splitter = QSplitter(self)
        splitter.addWidget(self.table)
        splitter.addWidget(self.box_detalle)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)

        root = QVBoxLayout(self)
        root.addLayout(barra)
        root.addLayout(actions)
        root.addWidget(splitter, 1)

    def _bind_events(self) -> None:
        self.filtros.filtros_cambiados.connect(self._render)
        self.chk_rango.toggled.connect(self._on_rango_toggled)
        self.date_desde.dateChanged.connect(self._render)
        self.date_hasta.dateChanged.connect(self._render)
        self.btn_nueva.clicked.connect(self._on_nueva)
        self.btn_item.clicked.connect(self._on_agregar_item)
        self.btn_populares.clicked.connect(self._on_populares)
        self.table.itemSelectionChanged.connect(self._render_detalle)

    def _retranslate(self) -> None:
        t = self._i18n.t
        self.filtros.set_textos(placeholder=t("recetas.buscar"), limpiar=t("comun.limpiar"))
        self.chk_rango.setText(t("recetas.rango"))
        self.btn_nueva.setText(t("recetas.nueva"))
        self.btn_item.setText(t("recetas.agregar_item"))
        self.btn_populares.setText(t("recetas.populares"))
        self.box_detalle.setTitle(t("recetas.detalle"))
        self.table.setHorizontalHeaderLabels(
            [t("col.receta"), t("col.fecha"), t("col.paciente"), t("col.medico"), t("col.medicamentos")]
        )
        self.tbl_items.setHorizontalHeaderLabels(
            [
                t("recetas.item.medicamento"),
                t("recetas.item.dosis"),
                t("recetas.item.frecuencia"),
                t("recetas.item.duracion"),
                t("recetas.item.indicacion"),
            ]
        )
        self._render()

    def on_show(self) -> None:
        self._refresh()

    def _refresh(self) -> None:
        c = self._container
        for controller in (c.consultas, c.pacientes, c.medicos):
            if not controller.items:
                controller.cargar()
        c.pagos.cargar()
        self._controller.cargar()

    def _filtros(self) -> FiltrosRecetas:
        if not self.chk_rango.isChecked():
            return FiltrosRecetas(texto=self.filtros.texto())
        return FiltrosRecetas(
            texto=self.filtros.texto(),
            desde=datetime.combine(self.date_desde.date().toPython(), time.min),
            hasta=datetime.combine(self.date_hasta.date().toPython(), time.max),
        )

    def _render(self) -> None:
        t = self._i18n.t
        c = self._container
        self._visibles = filtrar_recetas(self._controller.items, self._filtros())
        self.table.setRowCount(0)
        for receta in self._visibles:
            row = self.table.rowCount()
            self.table.insertRow(row)
            consulta = consulta_de_receta(receta, c.consultas.items)
            paciente = consulta.paciente_nombre if consulta else ""
            medico = consulta.medico_nombre if consulta else ""
            set_item(self.table, row, 0, receta.receta_id, data=receta.receta_id)
            set_item(self.table, row, 1, format_datetime(receta.creado_en))
            set_item(self.table, row, 2, paciente or "")
            set_item(self.table, row, 3, medico or "")
            set_item(self.table, row, 4, str(len(receta.items)))
        self.filtros.set_contador(t("comun.contador", n=len(self._visibles), total=len(self._controller.items)))
        self._render_detalle()

    def _seleccionada(self) -> Optional[Receta]:
        receta_id = selected_data(self.table)
        if receta_id is None:
            return None
        return next((r for r in self._controller.items if r.receta_id == receta_id), None)

    def _render_detalle(self) -> None:
        t = self._i18n.t
        c = self._container
        receta = self._seleccionada()
        self.btn_item.setEnabled(receta is not None)
        self.tbl_items.setRowCount(0)
        if receta is None:
            self.lbl_consulta.setText(t("recetas.sin_seleccion"))
            self.lbl_pagos.clear()
            return

        consulta = consulta_de_receta(receta, c.consultas.items)
        if consulta is None:
            self.lbl_consulta.setText(receta.notas or "")
        else:
            paciente = paciente_por_id(consulta.paciente, c.pacientes.items)
            medico = medico_por_id(consulta.medico, c.medicos.items)
            self.lbl_consulta.setText(
                t(
                    "recetas.detalle.consulta",
                    paciente=paciente.nombre_visible() if paciente else consulta.paciente_nombre or "",
                    medico=(medico.nombre_completo if medico else consulta.medico_nombre) or "",
                    especialidad=(medico.especialidad if medico else None) or "",
                    fecha=format_datetime(consulta.fecha),
                    notas=receta.notas or "",
                )
            )
        for item in receta.items:
            row = self.tbl_items.rowCount()
            self.tbl_items.insertRow(row)
            set_item(self.tbl_items, row, 0, item.nombre)
            set_item(self.tbl_items, row, 1, item.dosis or "")
            set_item(self.tbl_items, row, 2, item.frecuencia or "")
            set_item(self.tbl_items, row, 3, item.duracion or "")
            set_item(self.tbl_items, row, 4, item.indicacion or "")

        pagos = pagos_de_receta(receta, c.pagos.items)
        if not pagos:
            self.lbl_pagos.setText(t("pago.cita.sin_pagar"))
            return
        self.lbl_pagos.setText(
            "\n".join(
                f"{formatear_importe(p.importe)} · {etiqueta_metodo_pago(self._i18n, p.metodo)}"
                f" · {etiqueta_estado_pago(self._i18n, p.estado)} · {p.referencia or ''}"
                for p in pagos
            )
        )

    def _on_rango_toggled(self, activo: bool) -> None:
        self.date_desde.setEnabled(activo)
        self.date_hasta.setEnabled(activo)
        self._render()

    def _on_nueva(self) -> None:
        dialog = RecetaFormDialog(self._i18n, self._container.consultas.items, self)
        if dialog.exec() != RecetaFormDialog.Accepted:
            return
        consulta_id, notas = dialog.get_data()
        if consulta_id:
            self._controller.crear(consulta_id, notas)

    def _on_agregar_item(self) -> None:
        receta = self._seleccionada()
        if receta is None:
            return
        dialog = RecetaItemDialog(self._i18n, self)
        if dialog.exec() != RecetaItemDialog.Accepted:
            return
        datos = dialog.get_data()
        if datos is None:
            return
        try:
            self._controller.agregar_item(receta.receta_id, datos)
        except ValidationError as exc:
            present_error(self, exc)

    def _on_populares(self) -> None:
        t = self._i18n.t
        data = self._controller.medicamentos_populares()
        if data is None:
            return
        filas = filas_populares(data)
        texto = "\n".join(f"{nombre}: {veces}" for nombre, veces in filas) or t("recetas.populares.vacio")
        QMessageBox.information(self, t("recetas.populares"), texto)
