from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import QTableWidget, QTableWidgetItem

MUTED_FOREGROUND = QBrush(QColor("#7a7a7a"))
MUTED_BACKGROUND = QBrush(QColor("#f2f2f2"))


def apply_row_style(
    table: QTableWidget,
    row: int,
    *,
    muted: bool = False,
    tooltip: Optional[str] = None,
) -> None:
    for col in range(table.columnCount()):
        item = table.item(row, col)
        if not item:
            continue
        if tooltip:
            item.setToolTip(tooltip)
        if muted:
            item.setForeground(MUTED_FOREGROUND)
            item.setBackground(MUTED_BACKGROUND)


def set_item(table: QTableWidget, row: int, col: int, value: str, *, data: Any = None) -> QTableWidgetItem:
    item = QTableWidgetItem(value)
    if data is not None:
        item.setData(Qt.UserRole, data)
    table.setItem(row, col, item)
    return item


def selected_data(table: QTableWidget, col: int = 0) -> Any:
    """Dato (Qt.UserRole) de la fila seleccionada, o None."""
    row = table.currentRow()
    if row < 0:
        return None
    item = table.item(row, col)
    return item.data(Qt.UserRole) if item is not None else None


def format_datetime(value: Optional[datetime], fmt: str = "%d/%m/%Y %H:%M") -> str:
    if value is None:
        return ""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(fmt)
