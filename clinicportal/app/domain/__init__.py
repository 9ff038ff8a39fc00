from clinicportal.app.domain.modelos import (
    Cita,
    Consulta,
    Diagnostico,
    HistoriaClinica,
    Medico,
    Paciente,
    Pago,
    Receta,
    RecetaItem,
)

__all__ = [
    "Cita",
    "Consulta",
    "Diagnostico",
    "HistoriaClinica",
    "Medico",
    "Paciente",
    "Pago",
    "Receta",
    "RecetaItem",
]
