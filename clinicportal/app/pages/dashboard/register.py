from __future__ import annotations

from clinicportal.app.container import AppContainer
from clinicportal.app.pages.dashboard.page import PageDashboard
from clinicportal.app.pages.page_def import PageDef
from clinicportal.app.pages.pages_registry import PageRegistry


def register(registry: PageRegistry, container: AppContainer) -> None:
    registry.register(
        PageDef(
            key="dashboard",
            title_key="nav.dashboard",
            factory=lambda: PageDashboard(container),
        )
    )
