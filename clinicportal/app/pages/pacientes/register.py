from __future__ import annotations

from clinicportal.app.container import AppContainer
from clinicportal.app.pages.page_def import PageDef
from clinicportal.app.pages.pacientes.page import PagePacientes
from clinicportal.app.pages.pages_registry import PageRegistry


def register(registry: PageRegistry, container: AppContainer) -> None:
    registry.register(PageDef(key="pacientes", title_key="nav.pacientes", factory=lambda: PagePacientes(container)))
