from __future__ import annotations

from clinicportal.app.container import AppContainer
from clinicportal.app.pages.page_def import PageDef
from clinicportal.app.pages.pages_registry import PageRegistry
from clinicportal.app.pages.recetas.page import PageRecetas


def register(registry: PageRegistry, container: AppContainer) -> None:
    registry.register(PageDef(key="recetas", title_key="nav.recetas", factory=lambda: PageRecetas(container)))
