# domain/modelos.py
"""
Modelos de dominio del cliente.

Características:
- Registros planos que reflejan la representación JSON del backend.
- Los nombres de campo son los del cliente; la traducción desde/hacia el
  formato snake_case de la API vive en infrastructure/api/mapeo.py.
- Los datos de formulario (Datos*) llevan las validaciones que en un
  formulario web haría la validación nativa (obligatorios, rangos).

Notas:
- El backend es la única fuente de verdad: aquí no hay ciclo de vida,
  las entidades se crean, leen y descartan por petición.
- Los campos que el backend devuelva y el cliente no conozca se conservan
  en `extra` para no perder información.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from clinicportal.app.domain.enums import EstadoCita, EstadoConsulta, EstadoPago, Genero, MetodoPago
from clinicportal.app.domain.exceptions import ValidationError


# ---------------------------------------------------------------------
# Utilidades internas de dominio
# ---------------------------------------------------------------------


def _strip_or_none(value: Optional[str]) -> Optional[str]:
    """Normaliza strings opcionales: devuelve None si queda vacío tras strip()."""
    if value is None:
        return None
    v = value.strip()
    return v if v else None


def _require_non_empty(value: Optional[str], field_name: str) -> str:
    """Exige string no vacío; lanza ValidationError si no cumple."""
    v = (value or "").strip()
    if not v:
        raise ValidationError(f"Campo obligatorio: {field_name}.")
    return v


def _ensure_non_negative(value: Optional[float], field_name: str) -> None:
    if value is not None and value < 0:
        raise ValidationError(f"{field_name} no puede ser negativo.")


def _validate_email_basic(email: Optional[str]) -> None:
    """Validación básica de email (no pretende ser RFC completa)."""
    if not email:
        return
    if "@" not in email or "." not in email:
        raise ValidationError("Email no parece válido.")


# ---------------------------------------------------------------------
# Personas
# ---------------------------------------------------------------------


@dataclass(slots=True)
class Paciente:
    """Paciente (recurso /patients)."""

    paciente_id: str = ""
    id: Any = None
    nombre: str = ""
    apellidos: str = ""
    nombre_completo: str = ""
    apellido_soltera: Optional[str] = None
    genero: Optional[str] = None
    altura: Optional[float] = None
    peso: Optional[float] = None
    alergias: Optional[str] = None
    grupo_sanguineo: Optional[str] = None
    fecha_nacimiento: Optional[date] = None
    nacionalidad: Optional[str] = None
    direccion: Optional[str] = None
    telefono: Optional[str] = None
    telefono_formateado: Optional[str] = None
    email: Optional[str] = None
    num_seguro: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def nombre_visible(self) -> str:
        """Nombre tal como se muestra en listados: nombre completo seguido del nombre."""
        return f"{self.nombre_completo} {self.nombre}".strip()

    def iniciales(self) -> str:
        return f"{self.nombre[:1]}{self.apellidos[:1]}".upper()


@dataclass(slots=True)
class Medico:
    """Médico (recurso /doctors)."""

    medico_id: str = ""
    id: Any = None
    nombre: str = ""
    apellidos: str = ""
    nombre_completo: str = ""
    especialidad: Optional[str] = None
    telefono: Optional[str] = None
    telefono_formateado: Optional[str] = None
    email: Optional[str] = None
    num_licencia: Optional[str] = None
    num_consultas: int = 0
    creado_en: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Usuario:
    id: Any = None
    username: str = ""
    email: Optional[str] = None
    nombre: Optional[str] = None
    apellidos: Optional[str] = None
    es_staff: bool = False
    es_superusuario: bool = False
    alta_en: Optional[datetime] = None
    ultimo_acceso: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class EstadoSesion:
    autenticado: bool = False
    usuario: Optional[Usuario] = None


# ---------------------------------------------------------------------
# Actividad clínica
# ---------------------------------------------------------------------


@dataclass(slots=True)
class Diagnostico:
    """Diagnóstico del catálogo (recurso /diagnostics)."""

    diagnostico_id: str = ""
    id: Any = None
    nombre: str = ""
    descripcion: Optional[str] = None
    codigo_cie: Optional[str] = None
    creado_en: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Consulta:
    """Visita médico-paciente registrada (recurso /consultations)."""

    consulta_id: str = ""
    id: Any = None
    fecha: Optional[datetime] = None
    paciente: Optional[str] = None
    medico: Optional[str] = None
    paciente_nombre: Optional[str] = None
    medico_nombre: Optional[str] = None
    diagnostico: Optional[str] = None
    diagnostico_nombre: Optional[str] = None
    motivo: Optional[str] = None
    sintomas: Optional[str] = None
    observacion: Optional[str] = None
    pasos_recomendados: Optional[str] = None
    estado: Optional[str] = None
    creado_en: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Cita:
    """Visita programada entre paciente y médico (recurso /appointments)."""

    cita_id: str = ""
    id: Any = None
    fecha_hora: Optional[datetime] = None
    paciente: Optional[str] = None
    medico: Optional[str] = None
    paciente_nombre: Optional[str] = None
    medico_nombre: Optional[str] = None
    medico_especialidad: Optional[str] = None
    estado: str = EstadoCita.SCHEDULED.value
    notas: Optional[str] = None
    creado_en: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class RecetaItem:
    """Medicamento prescrito dentro de una receta (recurso /prescription-items)."""

    id: Any = None
    nombre: str = ""
    descripcion: Optional[str] = None
    indicacion: Optional[str] = None
    dosis: Optional[str] = None
    frecuencia: Optional[str] = None
    duracion: Optional[str] = None
    creado_en: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Receta:
    """Conjunto de medicamentos ligado a una consulta (recurso /prescriptions)."""

    receta_id: str = ""
    id: Any = None
    consulta_id: Optional[str] = None
    notas: Optional[str] = None
    creado_en: Optional[datetime] = None
    items: List[RecetaItem] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Pago:
    """Pago de una consulta (recurso /payments)."""

    pago_id: str = ""
    id: Any = None
    consulta: Optional[str] = None
    consulta_id: Optional[str] = None
    paciente_nombre: Optional[str] = None
    importe: Decimal = Decimal("0")
    metodo: Optional[str] = None
    estado: str = EstadoPago.PENDING.value
    referencia: Optional[str] = None
    pagado_en: Optional[datetime] = None
    creado_en: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def completado(self) -> bool:
        return self.estado == EstadoPago.COMPLETED.value


@dataclass(slots=True)
class HistoriaClinica:
    """Dossier médico de un paciente (recurso /medical-records)."""

    historia_id: str = ""
    id: Any = None
    paciente_id: Optional[str] = None
    paciente_nombre: Optional[str] = None
    medico_responsable: Optional[str] = None
    antecedentes: Optional[str] = None
    enfermedades_cronicas: Optional[str] = None
    antecedentes_familiares: Optional[str] = None
    num_consultas: int = 0
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None
    consultas: List[Consulta] = field(default_factory=list)
    consultas_recientes: List[Consulta] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------
# Datos de formulario
# ---------------------------------------------------------------------


@dataclass(slots=True)
class DatosPaciente:
    nombre: str = ""
    apellidos: str = ""
    genero: Optional[str] = Genero.MASCULINO.value
    fecha_nacimiento: Optional[date] = None
    telefono: Optional[str] = None
    email: Optional[str] = None
    direccion: Optional[str] = None
    nacionalidad: Optional[str] = None
    altura: Optional[float] = None
    peso: Optional[float] = None

    def validar(self) -> None:
        self.nombre = _require_non_empty(self.nombre, "nombre")
        self.apellidos = _require_non_empty(self.apellidos, "apellidos")
        self.genero = _require_non_empty(self.genero, "género")
        if self.fecha_nacimiento is None:
            raise ValidationError("Campo obligatorio: fecha de nacimiento.")
        self.telefono = _strip_or_none(self.telefono)
        self.email = _strip_or_none(self.email)
        self.direccion = _strip_or_none(self.direccion)
        self.nacionalidad = _strip_or_none(self.nacionalidad)
        _validate_email_basic(self.email)
        _ensure_non_negative(self.altura, "Altura")
        _ensure_non_negative(self.peso, "Peso")


@dataclass(slots=True)
class DatosMedico:
    nombre: str = ""
    apellidos: str = ""
    especialidad: str = ""
    telefono: str = ""
    email: str = ""
    num_licencia: str = ""

    def validar(self) -> None:
        self.nombre = _require_non_empty(self.nombre, "nombre")
        self.apellidos = _require_non_empty(self.apellidos, "apellidos")
        self.especialidad = _require_non_empty(self.especialidad, "especialidad")
        _validate_email_basic(self.email.strip())


@dataclass(slots=True)
class DatosCita:
    paciente: str = ""
    medico: str = ""
    fecha_hora: Optional[datetime] = None
    estado: str = EstadoCita.SCHEDULED.value
    notas: Optional[str] = None

    def validar(self) -> None:
        self.paciente = _require_non_empty(self.paciente, "paciente")
        self.medico = _require_non_empty(self.medico, "médico")
        if self.fecha_hora is None:
            raise ValidationError("Campo obligatorio: fecha y hora.")


@dataclass(slots=True)
class DatosConsulta:
    paciente: str = ""
    medico: str = ""
    fecha: Optional[datetime] = None
    motivo: str = ""
    sintomas: str = ""
    observacion: str = ""
    diagnostico: str = ""
    pasos_recomendados: str = ""
    estado: str = EstadoConsulta.COMPLETED.value

    def validar(self) -> None:
        self.paciente = _require_non_empty(self.paciente, "paciente")
        self.medico = _require_non_empty(self.medico, "médico")
        self.observacion = _require_non_empty(self.observacion, "observación")
        self.motivo = _require_non_empty(self.motivo, "motivo de consulta")


@dataclass(slots=True)
class DatosDiagnostico:
    nombre: str = ""
    descripcion: str = ""
    codigo_cie: str = ""

    def validar(self) -> None:
        self.nombre = _require_non_empty(self.nombre, "nombre del diagnóstico")


@dataclass(slots=True)
class DatosPago:
    consulta: str = ""
    importe: Decimal = Decimal("0")
    metodo: str = MetodoPago.CASH.value
    estado: str = EstadoPago.COMPLETED.value
    referencia: str = ""

    def validar(self) -> None:
        self.consulta = _require_non_empty(self.consulta, "consulta")
        if self.importe <= 0:
            raise ValidationError("El importe debe ser positivo.")
        if self.metodo not in {m.value for m in MetodoPago}:
            raise ValidationError("Método de pago no válido.")


@dataclass(slots=True)
class DatosRecetaItem:
    nombre: str = ""
    dosis: str = ""
    frecuencia: str = ""
    duracion: str = ""
    indicacion: str = ""

    def validar(self) -> None:
        self.nombre = _require_non_empty(self.nombre, "medicamento")


@dataclass(frozen=True, slots=True)
class Credenciales:
    username: str
    password: str


@dataclass(frozen=True, slots=True)
class DatosRegistro:
    username: str
    password: str
    email: str
    nombre: str
    apellidos: str
