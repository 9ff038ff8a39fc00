from __future__ import annotations

import sys
import uuid

from PySide6.QtWidgets import QApplication, QDialog

from clinicportal.app.bootstrap import load_config
from clinicportal.app.bootstrap_logging import configure_logging, get_logger, set_run_context
from clinicportal.app.container import build_container
from clinicportal.app.crash_handler import install_global_exception_hook
from clinicportal.app.ui.login_dialog import LoginDialog
from clinicportal.app.ui.main_window import MainWindow


LOGGER = get_logger(__name__)


def main() -> int:
    config = load_config()
    configure_logging("clinicportal-ui", config.log_dir, level="INFO", json=True)
    set_run_context(uuid.uuid4().hex[:8])
    install_global_exception_hook(LOGGER)
    LOGGER.info("app_start", extra={"api_url": config.api_url, "language": config.language})

    app = QApplication(sys.argv)
    container = build_container(config)

    def open_authenticated_session() -> bool:
        login = LoginDialog(container.auth, container.i18n)
        if login.exec() != QDialog.Accepted:
            return False
        LOGGER.info("session_open", extra={"username": login.outcome.username})
        return True

    window: MainWindow | None = None

    def _logout() -> None:
        LOGGER.info("session_logout")
        if window is not None:
            window.hide()
        if open_authenticated_session() and window is not None:
            window.reanudar_sesion()
            window.show()
            return
        app.quit()

    if not open_authenticated_session():
        container.close()
        return 0

    window = MainWindow(container, on_logout=_logout)
    window.show()
    try:
        return app.exec()
    finally:
        container.close()


if __name__ == "__main__":
    raise SystemExit(main())
