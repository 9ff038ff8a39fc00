from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QPushButton, QWidget


def set_buttons_enabled(*, has_selection: bool, buttons: list[QPushButton]) -> None:
    for button in buttons:
        button.setEnabled(has_selection)


def confirm_action(parent: QWidget, *, title: str, message: str) -> bool:
    """Pregunta Sí/No antes de una acción irreversible (borrar, reembolsar...)."""
    return (
        QMessageBox.question(
            parent,
            title,
            message,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        == QMessageBox.Yes
    )
