from __future__ import annotations

from typing import Dict, List

from clinicportal.app.container import AppContainer
from clinicportal.app.pages.page_def import PageDef


class PageRegistry:
    """Registro in-memory de PageDef.

    Cada feature registra su PageDef en un único lugar.
    La navegación (MainWindow) consume PageDef y crea widgets lazy vía factory().
    """

    def __init__(self) -> None:
        self._pages: Dict[str, PageDef] = {}

    def register(self, page: PageDef) -> None:
        if page.key in self._pages:
            raise ValueError(f"Página duplicada: {page.key}")
        self._pages[page.key] = page

    def get(self, key: str) -> PageDef:
        return self._pages[key]

    def list(self) -> List[PageDef]:
        return list(self._pages.values())


def register_pages(registry: PageRegistry, container: AppContainer) -> None:
    from clinicportal.app.pages.citas.register import register as register_citas
    from clinicportal.app.pages.consultas.register import register as register_consultas
    from clinicportal.app.pages.dashboard.register import register as register_dashboard
    from clinicportal.app.pages.pacientes.register import register as register_pacientes
    from clinicportal.app.pages.recetas.register import register as register_recetas

    register_dashboard(registry, container)
    register_consultas(registry, container)
    register_pacientes(registry, container)
    register_citas(registry, container)
    register_recetas(registry, container)


def get_pages(container: AppContainer) -> List[PageDef]:
    """Bootstrap UI: reúne todas las páginas registradas por feature."""
    reg = PageRegistry()
    register_pages(reg, container)
    return reg.list()
