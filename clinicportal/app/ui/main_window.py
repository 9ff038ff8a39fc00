from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QSizePolicy,
    QStackedWidget,
    QWidget,
)

from clinicportal.app.container import AppContainer
from clinicportal.app.pages.pages_registry import get_pages

_TOAST_COLORS = {"success": "#1b8f3d", "error": "#b3261e"}
_TOAST_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    def __init__(self, container: AppContainer, on_logout: Optional[Callable[[], None]] = None) -> None:
        super().__init__()
        self.container = container
        self._i18n = container.i18n
        self._on_logout = on_logout

        self.resize(1280, 820)

        root = QWidget()
        self.setCentralWidget(root)

        self._build_menu()

        layout = QHBoxLayout(root)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.sidebar = QListWidget()
        self.sidebar.setFixedWidth(220)
        self.sidebar.setSelectionMode(QListWidget.SingleSelection)

        self.stack = QStackedWidget()
        self.stack.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        layout.addWidget(self.sidebar)
        layout.addWidget(self.stack, 1)

        self.lbl_toast = QLabel()
        self.statusBar().addWidget(self.lbl_toast, 1)

        self._page_index_by_key: Dict[str, int] = {}
        self._factory_by_key: Dict[str, Callable[[], QWidget]] = {}
        self._title_key_by_key: Dict[str, str] = {}

        # Páginas se crean bajo demanda (lazy) gracias a factory/lambda.
        for p in get_pages(container):
            self._factory_by_key[p.key] = p.factory
            self._title_key_by_key[p.key] = p.title_key
            item = QListWidgetItem(self._i18n.t(p.title_key))
            item.setData(Qt.UserRole, p.key)
            self.sidebar.addItem(item)

        self.sidebar.currentRowChanged.connect(self._on_sidebar_changed)
        container.toasts.subscribe(self._show_toast)
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

        self.navigate("dashboard")

    def _build_menu(self) -> None:
        menu_bar = self.menuBar()
        self.menu_archivo = menu_bar.addMenu("")

        self.action_logout = QAction(self)
        self.action_logout.triggered.connect(self._logout)

        self.action_exit = QAction(self)
        self.action_exit.triggered.connect(self.close)

        self.menu_archivo.addAction(self.action_logout)
        self.menu_archivo.addSeparator()
        self.menu_archivo.addAction(self.action_exit)

    def _retranslate(self) -> None:
        usuario = self.container.auth.sesion.usuario
        titulo = self._i18n.t("app.title")
        self.setWindowTitle(f"{titulo} · {usuario.username}" if usuario else titulo)
        self.menu_archivo.setTitle(self._i18n.t("menu.archivo"))
        self.action_logout.setText(self._i18n.t("menu.logout"))
        self.action_exit.setText(self._i18n.t("menu.salir"))
        for row in range(self.sidebar.count()):
            item = self.sidebar.item(row)
            item.setText(self._i18n.t(self._title_key_by_key[item.data(Qt.UserRole)]))

    def reanudar_sesion(self) -> None:
        self._retranslate()
        self.lbl_toast.clear()
        self.navigate("dashboard")

    def _show_toast(self, payload: dict[str, Any]) -> None:
        color = _TOAST_COLORS.get(payload["tipo"], "#425466")
        self.lbl_toast.setStyleSheet(f"color: {color}; font-weight: 600;")
        self.statusBar().showMessage("", 1)
        self.lbl_toast.setText(payload["message"])

    def _logout(self) -> None:
        self.container.auth.cerrar_sesion()
        if self._on_logout is not None:
            self._on_logout()

    def _ensure_page_created(self, key: str) -> Optional[int]:
        if key in self._page_index_by_key:
            return self._page_index_by_key[key]

        factory = self._factory_by_key.get(key)
        if factory is None:
            return None

        widget = factory()
        index = self.stack.addWidget(widget)
        self._page_index_by_key[key] = index
        return index

    def _call_on_hide_current(self) -> None:
        w = self.stack.currentWidget()
        if w is not None and hasattr(w, "on_hide"):
            w.on_hide()

    def _call_on_show_index(self, index: int) -> None:
        w = self.stack.widget(index)
        if w is not None and hasattr(w, "on_show"):
            w.on_show()

    def navigate(self, key: str) -> None:
        self.sidebar.blockSignals(True)
        try:
            self._call_on_hide_current()

            index = self._ensure_page_created(key)
            if index is None:
                return

            self.stack.setCurrentIndex(index)
            self._call_on_show_index(index)

            for row in range(self.sidebar.count()):
                it = self.sidebar.item(row)
                if it.data(Qt.UserRole) == key:
                    self.sidebar.setCurrentRow(row)
                    break
        finally:
            self.sidebar.blockSignals(False)

    def _on_sidebar_changed(self, row: int) -> None:
        if row < 0:
            return
        key = self.sidebar.item(row).data(Qt.UserRole)
        self._call_on_hide_current()
        index = self._ensure_page_created(key)
        if index is None:
            return
        self.stack.setCurrentIndex(index)
        self._call_on_show_index(index)

    def closeEvent(self, event):
        """Evento Qt que se dispara al cerrar la ventana. Cerramos el cliente HTTP."""
        self.container.close()
        event.accept()
