from __future__ import annotations

from clinicportal.app.application.citas.filtros import EstadoPagoCita
from clinicportal.app.domain.enums import EstadoCita, EstadoPago, MetodoPago
from clinicportal.app.i18n import I18nManager


def etiqueta_estado_cita(i18n: I18nManager, estado: str) -> str:
    if estado in {e.value for e in EstadoCita}:
        return i18n.t(f"cita.estado.{estado.lower()}")
    return estado.replace("_", " ").title()


def etiqueta_estado_pago(i18n: I18nManager, estado: str) -> str:
    if estado in {e.value for e in EstadoPago}:
        return i18n.t(f"pago.estado.{estado.lower()}")
    return estado


def etiqueta_metodo_pago(i18n: I18nManager, metodo: str | None) -> str:
    if metodo in {m.value for m in MetodoPago}:
        return i18n.t(f"pago.metodo.{metodo}")
    return metodo or ""


def etiqueta_pago_cita(i18n: I18nManager, estado: EstadoPagoCita) -> str:
    if estado.pagado:
        return i18n.t("pago.cita.pagado")
    if estado.estado == EstadoPago.PENDING.value:
        return i18n.t("pago.estado.pending")
    if estado.estado == EstadoPago.FAILED.value:
        return i18n.t("pago.estado.failed")
    return i18n.t("pago.cita.sin_pagar")


def items_estado_cita(i18n: I18nManager) -> list[tuple[str, str]]:
    return [(i18n.t("comun.todos"), "")] + [(etiqueta_estado_cita(i18n, e.value), e.value) for e in EstadoCita]


def items_filtro_pago_cita(i18n: I18nManager) -> list[tuple[str, str]]:
    return [
        (i18n.t("comun.todos"), ""),
        (i18n.t("pago.cita.pagado"), "paid"),
        (i18n.t("pago.cita.sin_pagar"), "unpaid"),
        (i18n.t("pago.estado.pending"), "pending"),
        (i18n.t("pago.estado.failed"), "failed"),
    ]


def items_metodo_pago(i18n: I18nManager) -> list[tuple[str, str]]:
    return [(etiqueta_metodo_pago(i18n, m.value), m.value) for m in MetodoPago]
