# domain/enums.py
from __future__ import annotations
from enum import Enum


class Genero(str, Enum):
    MASCULINO = "M"
    FEMENINO = "F"


class EstadoCita(str, Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class EstadoConsulta(str, Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class EstadoPago(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class MetodoPago(str, Enum):
    CASH = "cash"
    CARD = "card"
    INSURANCE = "insurance"
