from __future__ import annotations

from datetime import date
from typing import List, Optional

from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTableWidget,
    QVBoxLayout,
    QWidget,
)

from clinicportal.app.application.pacientes.filtros import (
    BalancePaciente,
    balance_paciente,
    calcular_edad,
    filtrar_pacientes,
)
from clinicportal.app.bootstrap_logging import get_logger
from clinicportal.app.container import AppContainer
from clinicportal.app.domain.exceptions import ValidationError
from clinicportal.app.domain.modelos import Paciente
from clinicportal.app.pages.pacientes.dialogs.historia_clinica_dialog import HistoriaClinicaDialog
from clinicportal.app.pages.pacientes.dialogs.paciente_form import PacienteFormDialog
from clinicportal.app.pages.shared.crud_page_helpers import confirm_action, set_buttons_enabled
from clinicportal.app.pages.shared.filtro_listado import FiltroListadoWidget
from clinicportal.app.pages.shared.table_utils import selected_data, set_item
from clinicportal.app.ui.error_presenter import present_error

LOGGER = get_logger(__name__)


class PagePacientes(QWidget):
    def __init__(self, container: AppContainer, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = container.i18n
        self._controller = container.pacientes
        self._visibles: List[Paciente] = []

        self._build_ui()
        self._connect_signals()
        self._controller.subscribe(self._render)
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        self.filtros = FiltroListadoWidget(self)
        root.addWidget(self.filtros)

        actions = QHBoxLayout()
        self.btn_nuevo = QPushButton()
        self.btn_editar = QPushButton()
        self.btn_eliminar = QPushButton()
        self.btn_historia = QPushButton()
        self.lbl_total = QLabel()
        for button in (self.btn_nuevo, self.btn_editar, self.btn_eliminar, self.btn_historia):
            actions.addWidget(button)
        actions.addStretch(1)
        actions.addWidget(self.lbl_total)
        root.addLayout(actions)

        self.table = QTableWidget(0, 6)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.horizontalHeader().setStretchLastSection(True)
        root.addWidget(self.table, 1)
        self._update_buttons()

    def _connect_signals(self) -> None:
        self.filtros.filtros_cambiados.connect(self._render)
        self.btn_nuevo.clicked.connect(self._on_nuevo)
        self.btn_editar.clicked.connect(self._on_editar)
        self.btn_eliminar.clicked.connect(self._on_eliminar)
        self.btn_historia.clicked.connect(self._on_historia)
        self.table.itemSelectionChanged.connect(self._update_buttons)
        self.table.cellDoubleClicked.connect(lambda *_: self._on_editar())

    def _retranslate(self) -> None:
        t = self._i18n.t
        self.filtros.set_textos(placeholder=t("pacientes.buscar"), limpiar=t("comun.limpiar"))
        self.btn_nuevo.setText(t("pacientes.nuevo"))
        self.btn_editar.setText(t("comun.editar"))
        self.btn_eliminar.setText(t("comun.eliminar"))
        self.btn_historia.setText(t("pacientes.historia.ver"))
        self.table.setHorizontalHeaderLabels(
            [t("col.paciente"), t("col.edad"), t("col.genero"), t("col.telefono"), t("col.email"), t("col.num_seguro")]
        )
        self._render()

    def on_show(self) -> None:
        self._refresh()

    def _refresh(self) -> None:
        self._controller.cargar()
        stats = self._controller.estadisticas()
        if isinstance(stats, dict) and "total_patients" in stats:
            self.lbl_total.setText(self._i18n.t("pacientes.total", n=stats["total_patients"]))

    def _render(self) -> None:
        t = self._i18n.t
        self._visibles = filtrar_pacientes(self._controller.items, self.filtros.texto())
        self.table.setRowCount(0)
        hoy = date.today()
        for paciente in self._visibles:
            row = self.table.rowCount()
            self.table.insertRow(row)
            edad = str(calcular_edad(paciente.fecha_nacimiento, hoy)) if paciente.fecha_nacimiento else ""
            genero = t(f"genero.{paciente.genero.lower()}") if paciente.genero else ""
            set_item(self.table, row, 0, paciente.nombre_visible(), data=paciente.paciente_id)
            set_item(self.table, row, 1, edad)
            set_item(self.table, row, 2, genero)
            set_item(self.table, row, 3, paciente.telefono_formateado or paciente.telefono or "")
            set_item(self.table, row, 4, paciente.email or "")
            set_item(self.table, row, 5, paciente.num_seguro or "")
        self.filtros.set_contador(t("comun.contador", n=len(self._visibles), total=len(self._controller.items)))
        self._update_buttons()

    def _update_buttons(self) -> None:
        set_buttons_enabled(
            has_selection=self._seleccionado() is not None,
            buttons=[self.btn_editar, self.btn_eliminar, self.btn_historia],
        )

    def _seleccionado(self) -> Optional[Paciente]:
        paciente_id = selected_data(self.table)
        if paciente_id is None:
            return None
        return next((p for p in self._controller.items if p.paciente_id == paciente_id), None)

    def _on_nuevo(self) -> None:
        dialog = PacienteFormDialog(self._i18n, self)
        if dialog.exec() != PacienteFormDialog.Accepted:
            return
        datos = dialog.get_data()
        if datos is None:
            return
        try:
            self._controller.crear(datos)
        except ValidationError as exc:
            present_error(self, exc)

    def _on_editar(self) -> None:
        paciente = self._seleccionado()
        if paciente is None:
            return
        dialog = PacienteFormDialog(self._i18n, self)
        dialog.set_paciente(paciente)
        if dialog.exec() != PacienteFormDialog.Accepted:
            return
        datos = dialog.get_data()
        if datos is not None:
            self._controller.actualizar(paciente.paciente_id, datos)

    def _on_eliminar(self) -> None:
        paciente = self._seleccionado()
        if paciente is None:
            return
        t = self._i18n.t
        if not confirm_action(
            self,
            title=t("pacientes.eliminar.titulo"),
            message=t("pacientes.eliminar.confirmar", nombre=paciente.nombre_visible()),
        ):
            return
        self._controller.eliminar(paciente.paciente_id)

    def balance_actual(self, paciente: Paciente) -> BalancePaciente:
        """Recarga los pagos en cada apertura de la historia."""
        pagos = self._container.pagos
        pagos.cargar()
        return balance_paciente(paciente, pagos.items)

    def _on_historia(self) -> None:
        paciente = self._seleccionado()
        if paciente is None:
            return
        dialog = HistoriaClinicaDialog(self._i18n, self)
        dialog.render_cargando()
        dialog.render_historia(self._container.historias.de_paciente(paciente.paciente_id))
        dialog.render_balance(self.balance_actual(paciente))
        LOGGER.info("pacientes_historia_abierta", extra={"paciente_id": paciente.paciente_id})
        dialog.exec()
