from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from clinicportal.app.bootstrap import AppConfig
from clinicportal.app.controllers.auth_controller import AuthController
from clinicportal.app.controllers.citas_controller import CitasController
from clinicportal.app.controllers.consultas_controller import ConsultasController
from clinicportal.app.controllers.diagnosticos_controller import DiagnosticosController
from clinicportal.app.controllers.historias_controller import HistoriasClinicasController
from clinicportal.app.controllers.medicos_controller import MedicosController
from clinicportal.app.controllers.pacientes_controller import PacientesController
from clinicportal.app.controllers.pagos_controller import PagosController
from clinicportal.app.controllers.recetas_controller import RecetasController
from clinicportal.app.i18n import I18nManager
from clinicportal.app.infrastructure.api.auth_gateway import AuthGateway
from clinicportal.app.infrastructure.api.cliente_http import ClienteApi
from clinicportal.app.infrastructure.api.repos_citas import CitasRepository
from clinicportal.app.infrastructure.api.repos_consultas import ConsultasRepository
from clinicportal.app.infrastructure.api.repos_diagnosticos import DiagnosticosRepository
from clinicportal.app.infrastructure.api.repos_historias import HistoriasClinicasRepository
from clinicportal.app.infrastructure.api.repos_medicos import MedicosRepository
from clinicportal.app.infrastructure.api.repos_pacientes import PacientesRepository
from clinicportal.app.infrastructure.api.repos_pagos import PagosRepository
from clinicportal.app.infrastructure.api.repos_recetas import RecetasRepository
from clinicportal.app.ui.widgets.toast import GestorToasts


@dataclass(slots=True)
class AppContainer:
    cliente: ClienteApi
    toasts: GestorToasts
    i18n: I18nManager

    pacientes: PacientesController
    consultas: ConsultasController
    citas: CitasController
    diagnosticos: DiagnosticosController
    medicos: MedicosController
    pagos: PagosController
    recetas: RecetasController
    historias: HistoriasClinicasController
    auth: AuthController

    def close(self) -> None:
        self.cliente.close()


def build_container(
    config: AppConfig,
    *,
    i18n: Optional[I18nManager] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> AppContainer:
    cliente = ClienteApi(config.api_url, timeout=config.api_timeout, transport=transport)
    toasts = GestorToasts()
    i18n = i18n or I18nManager(config.language)

    pacientes_repo = PacientesRepository(cliente)
    consultas_repo = ConsultasRepository(cliente)

    return AppContainer(
        cliente=cliente,
        toasts=toasts,
        i18n=i18n,
        pacientes=PacientesController(pacientes_repo, toasts, i18n),
        consultas=ConsultasController(consultas_repo, toasts, i18n),
        citas=CitasController(CitasRepository(cliente), toasts, i18n),
        diagnosticos=DiagnosticosController(DiagnosticosRepository(cliente), toasts, i18n),
        medicos=MedicosController(MedicosRepository(cliente), toasts, i18n),
        pagos=PagosController(PagosRepository(cliente), toasts, i18n),
        recetas=RecetasController(RecetasRepository(cliente), toasts, i18n),
        historias=HistoriasClinicasController(
            HistoriasClinicasRepository(cliente), pacientes_repo, consultas_repo, toasts, i18n
        ),
        auth=AuthController(AuthGateway(cliente), toasts, i18n),
    )
