from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
)

from clinicportal.app.bootstrap_logging import get_logger
from clinicportal.app.controllers.auth_controller import AuthController
from clinicportal.app.domain.modelos import Credenciales, DatosRegistro
from clinicportal.app.i18n import IDIOMAS_SOPORTADOS, I18nManager


@dataclass(frozen=True)
class LoginOutcome:
    username: str


LOGGER = get_logger(__name__)


class LoginDialog(QDialog):
    """Inicio de sesión (o alta) contra /auth/ antes de abrir la ventana principal."""

    def __init__(self, auth: AuthController, i18n: I18nManager, parent=None) -> None:
        super().__init__(parent)
        self._auth = auth
        self._i18n = i18n
        self._modo_registro = False
        self.outcome = LoginOutcome(username="")

        self._build_ui()
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _build_ui(self) -> None:
        self.setModal(True)
        main_layout = QVBoxLayout(self)

        self.lbl_info = QLabel()
        self.lbl_info.setWordWrap(True)
        main_layout.addWidget(self.lbl_info)

        lang_row = QHBoxLayout()
        self.lang_combo = QComboBox()
        for idioma in IDIOMAS_SOPORTADOS:
            self.lang_combo.addItem("", idioma)
        self.lang_combo.setCurrentIndex(max(0, self.lang_combo.findData(self._i18n.language)))
        self.lang_combo.currentIndexChanged.connect(self._on_language_changed)
        lang_row.addWidget(self.lang_combo)
        main_layout.addLayout(lang_row)

        form = QFormLayout()
        self.user_input = QLineEdit()
        self.pass_input = QLineEdit()
        self.pass_input.setEchoMode(QLineEdit.Password)
        self.email_input = QLineEdit()
        self.nombre_input = QLineEdit()
        self.apellidos_input = QLineEdit()
        self.lbl_user = QLabel()
        self.lbl_password = QLabel()
        self.lbl_email = QLabel()
        self.lbl_nombre = QLabel()
        self.lbl_apellidos = QLabel()
        form.addRow(self.lbl_user, self.user_input)
        form.addRow(self.lbl_password, self.pass_input)
        form.addRow(self.lbl_email, self.email_input)
        form.addRow(self.lbl_nombre, self.nombre_input)
        form.addRow(self.lbl_apellidos, self.apellidos_input)
        main_layout.addLayout(form)

        btn_row = QHBoxLayout()
        self.btn_login = QPushButton()
        self.btn_login.clicked.connect(self._on_login)
        self.btn_create = QPushButton()
        self.btn_create.clicked.connect(self._on_create)
        self.btn_toggle = QPushButton()
        self.btn_toggle.clicked.connect(self._on_toggle_mode)
        btn_row.addWidget(self.btn_login)
        btn_row.addWidget(self.btn_create)
        btn_row.addWidget(self.btn_toggle)
        main_layout.addLayout(btn_row)

        self._refresh_mode()

    def _refresh_mode(self) -> None:
        registro = self._modo_registro
        for widget in (self.email_input, self.nombre_input, self.apellidos_input,
                       self.lbl_email, self.lbl_nombre, self.lbl_apellidos):
            widget.setVisible(registro)
        self.btn_create.setVisible(registro)
        self.btn_login.setVisible(not registro)

    def _on_toggle_mode(self) -> None:
        self._modo_registro = not self._modo_registro
        self._refresh_mode()
        self._retranslate()

    def _on_language_changed(self) -> None:
        self._i18n.set_language(self.lang_combo.currentData())

    def _retranslate(self) -> None:
        self.setWindowTitle(self._i18n.t("login.title"))
        self.lbl_info.setText(self._i18n.t("login.info_registro") if self._modo_registro else "")
        self.lbl_user.setText(self._i18n.t("login.user"))
        self.lbl_password.setText(self._i18n.t("login.password"))
        self.lbl_email.setText(self._i18n.t("login.email"))
        self.lbl_nombre.setText(self._i18n.t("login.nombre"))
        self.lbl_apellidos.setText(self._i18n.t("login.apellidos"))
        for index in range(self.lang_combo.count()):
            self.lang_combo.setItemText(index, self._i18n.t(f"lang.{self.lang_combo.itemData(index)}"))
        self.btn_login.setText(self._i18n.t("login.submit"))
        self.btn_create.setText(self._i18n.t("login.create"))
        self.btn_toggle.setText(self._i18n.t("login.to_login" if self._modo_registro else "login.to_register"))

    def _credenciales(self) -> Credenciales | None:
        username = self.user_input.text().strip()
        password = self.pass_input.text()
        if not username or not password:
            QMessageBox.warning(self, self.windowTitle(), self._i18n.t("login.error.required"))
            return None
        return Credenciales(username=username, password=password)

    def _on_create(self) -> None:
        credenciales = self._credenciales()
        if credenciales is None:
            return
        datos = DatosRegistro(
            username=credenciales.username,
            password=credenciales.password,
            email=self.email_input.text().strip(),
            nombre=self.nombre_input.text().strip(),
            apellidos=self.apellidos_input.text().strip(),
        )
        if not self._auth.registrar(datos):
            QMessageBox.warning(self, self.windowTitle(), self._auth.error or self._i18n.t("auth.error.registro"))
            return
        LOGGER.info("auth_register_success")
        self._modo_registro = False
        self._refresh_mode()
        self._retranslate()

    def _on_login(self) -> None:
        credenciales = self._credenciales()
        if credenciales is None:
            return
        if not self._auth.iniciar_sesion(credenciales):
            LOGGER.warning("auth_login_failed")
            QMessageBox.warning(self, self.windowTitle(), self._auth.error or self._i18n.t("auth.error.login"))
            return
        LOGGER.info("auth_login_success")
        self.outcome = LoginOutcome(username=credenciales.username)
        self.accept()
