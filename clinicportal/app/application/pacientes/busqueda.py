"""Estado del buscador de pacientes con sugerencias.

La espera (debounce) la pone el widget con un QTimer; aquí solo vive la
decisión de qué hacer cuando el temporizador vence y al elegir sugerencia.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from clinicportal.app.domain.modelos import Paciente

DEBOUNCE_MS = 300
MAX_SUGERENCIAS = 10
MIN_CARACTERES = 2


@dataclass(slots=True)
class BusquedaPacientes:
    buscar: Callable[[str], List[Paciente]]
    texto: str = ""
    sugerencias: List[Paciente] = field(default_factory=list)
    visible: bool = False
    seleccionado: Optional[Paciente] = None

    def escribir(self, texto: str) -> None:
        self.texto = texto
        self.seleccionado = None

    def vencer_espera(self) -> List[Paciente]:
        """Se llama al vencer el debounce con el texto vigente en ese momento."""
        if len(self.texto) >= MIN_CARACTERES:
            self.sugerencias = self.buscar(self.texto)[:MAX_SUGERENCIAS]
            self.visible = True
        else:
            self.sugerencias = []
            self.visible = False
        return self.sugerencias

    def seleccionar(self, paciente: Paciente) -> None:
        self.seleccionado = paciente
        self.texto = paciente.nombre_visible()
        self.visible = False

    def limpiar(self) -> None:
        self.texto = ""
        self.sugerencias = []
        self.visible = False
        self.seleccionado = None
