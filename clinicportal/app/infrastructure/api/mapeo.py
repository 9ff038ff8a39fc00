# infrastructure/api/mapeo.py
"""
Traducción entre el JSON del backend (snake_case en inglés) y el dominio.

Cada entidad se describe con un mapa declarativo
`campo_api -> (atributo, conversor)`. Lo que el mapa no conoce se guarda
en `extra`. Las funciones *_a_api construyen los cuerpos de las peticiones.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from clinicportal.app.common.numeros import a_decimal
from clinicportal.app.domain.modelos import (
    Cita,
    Consulta,
    Credenciales,
    DatosCita,
    DatosConsulta,
    DatosDiagnostico,
    DatosMedico,
    DatosPaciente,
    DatosPago,
    DatosRecetaItem,
    DatosRegistro,
    Diagnostico,
    EstadoSesion,
    HistoriaClinica,
    Medico,
    Paciente,
    Pago,
    Receta,
    RecetaItem,
    Usuario,
)
from clinicportal.app.infrastructure.api.errores import ApiJsonError

T = TypeVar("T")
Conversor = Callable[[Any], Any]
MapaCampos = Dict[str, Tuple[str, Conversor]]


# ---------------------------------------------------------------------
# Conversores
# ---------------------------------------------------------------------


def _tal_cual(valor: Any) -> Any:
    return valor


def _texto(valor: Any) -> str:
    return "" if valor is None else str(valor)


def _texto_opcional(valor: Any) -> Optional[str]:
    return None if valor is None else str(valor)


def _entero(valor: Any) -> int:
    try:
        return int(valor or 0)
    except (TypeError, ValueError):
        return 0


def _flotante(valor: Any) -> Optional[float]:
    if valor in (None, ""):
        return None
    try:
        return float(valor)
    except (TypeError, ValueError):
        return None


def _booleano(valor: Any) -> bool:
    return bool(valor)


def parse_fecha_hora(valor: Any) -> Optional[datetime]:
    """ISO 8601 a datetime; admite fecha sola y sufijo 'Z'. Valores no válidos -> None."""
    if valor in (None, ""):
        return None
    if isinstance(valor, datetime):
        return valor
    if isinstance(valor, date):
        return datetime(valor.year, valor.month, valor.day)
    texto = str(valor).strip()
    if texto.endswith(("Z", "z")):
        texto = texto[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(texto)
    except ValueError:
        return None


def parse_fecha(valor: Any) -> Optional[date]:
    if isinstance(valor, date) and not isinstance(valor, datetime):
        return valor
    parsed = parse_fecha_hora(valor)
    return parsed.date() if parsed else None


def fecha_hora_a_iso(valor: datetime) -> str:
    """Instante en UTC con sufijo 'Z'. Los datetimes naive se interpretan como hora local."""
    return valor.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ---------------------------------------------------------------------
# Núcleo genérico
# ---------------------------------------------------------------------


def extraer_resultados(data: Any) -> List[Mapping[str, Any]]:
    """Acepta una lista JSON o un objeto paginado con `results`."""
    if isinstance(data, Mapping) and "results" in data:
        data = data["results"]
    if not isinstance(data, list):
        raise ApiJsonError("Se esperaba una lista de resultados")
    return data


def _mapear(cls: Type[T], campos: MapaCampos, data: Any) -> T:
    if not isinstance(data, Mapping):
        raise ApiJsonError(f"Se esperaba un objeto para {cls.__name__}")
    valores: Dict[str, Any] = {}
    extra: Dict[str, Any] = {}
    for clave, valor in data.items():
        destino = campos.get(clave)
        if destino is None:
            extra[clave] = valor
            continue
        atributo, conversor = destino
        valores[atributo] = conversor(valor)
    return cls(**valores, extra=extra)


def _lista(mapper: Callable[[Any], T]) -> Conversor:
    def _convertir(valor: Any) -> List[T]:
        return [mapper(item) for item in (valor or [])]

    return _convertir


def mapear_lista(data: Any, mapper: Callable[[Any], T]) -> List[T]:
    return [mapper(item) for item in extraer_resultados(data)]


def _solo_informados(body: Dict[str, Any]) -> Dict[str, Any]:
    return {clave: valor for clave, valor in body.items() if valor}


# ---------------------------------------------------------------------
# Pacientes / médicos
# ---------------------------------------------------------------------

_CAMPOS_PACIENTE: MapaCampos = {
    "id": ("id", _tal_cual),
    "patient_id": ("paciente_id", _texto),
    "firstname": ("nombre", _texto),
    "lastname": ("apellidos", _texto),
    "fullname": ("nombre_completo", _texto),
    "maiden_name": ("apellido_soltera", _texto_opcional),
    "gender": ("genero", _texto_opcional),
    "height": ("altura", _flotante),
    "weight": ("peso", _flotante),
    "allergy": ("alergias", _texto_opcional),
    "blood_type": ("grupo_sanguineo", _texto_opcional),
    "birth_date": ("fecha_nacimiento", parse_fecha),
    "nationality": ("nacionalidad", _texto_opcional),
    "address": ("direccion", _texto_opcional),
    "phone": ("telefono", _texto_opcional),
    "phone_formatted": ("telefono_formateado", _texto_opcional),
    "email": ("email", _texto_opcional),
    "assurance_number": ("num_seguro", _texto_opcional),
}

_CAMPOS_MEDICO: MapaCampos = {
    "id": ("id", _tal_cual),
    "doctor_id": ("medico_id", _texto),
    "firstname": ("nombre", _texto),
    "lastname": ("apellidos", _texto),
    "fullname": ("nombre_completo", _texto),
    "specialty": ("especialidad", _texto_opcional),
    "phone": ("telefono", _texto_opcional),
    "phone_formatted": ("telefono_formateado", _texto_opcional),
    "email": ("email", _texto_opcional),
    "license_number": ("num_licencia", _texto_opcional),
    "consultation_count": ("num_consultas", _entero),
    "created_at": ("creado_en", parse_fecha_hora),
}


def paciente_desde_api(data: Any) -> Paciente:
    return _mapear(Paciente, _CAMPOS_PACIENTE, data)


def medico_desde_api(data: Any) -> Medico:
    return _mapear(Medico, _CAMPOS_MEDICO, data)


def medicos_por_especialidad_desde_api(data: Any) -> Dict[str, List[Medico]]:
    if not isinstance(data, Mapping):
        raise ApiJsonError("Se esperaba un objeto especialidad -> médicos")
    return {str(especialidad): [medico_desde_api(m) for m in (medicos or [])] for especialidad, medicos in data.items()}


def paciente_a_api(datos: DatosPaciente) -> Dict[str, Any]:
    return {
        "firstname": datos.nombre,
        "lastname": datos.apellidos,
        "gender": datos.genero,
        "birth_date": datos.fecha_nacimiento.isoformat() if datos.fecha_nacimiento else None,
        "phone": datos.telefono,
        "email": datos.email,
        "address": datos.direccion,
        "nationality": datos.nacionalidad,
        "height": datos.altura,
        "weight": datos.peso,
    }


def paciente_parcial_a_api(datos: DatosPaciente) -> Dict[str, Any]:
    """Cuerpo de actualización: solo los campos con valor."""
    return _solo_informados(paciente_a_api(datos))


def medico_a_api(datos: DatosMedico) -> Dict[str, Any]:
    return {
        "firstname": datos.nombre,
        "lastname": datos.apellidos,
        "specialty": datos.especialidad,
        "phone": datos.telefono,
        "email": datos.email,
        "license_number": datos.num_licencia,
    }


# ---------------------------------------------------------------------
# Actividad clínica
# ---------------------------------------------------------------------

_CAMPOS_DIAGNOSTICO: MapaCampos = {
    "id": ("id", _tal_cual),
    "diagnostic_id": ("diagnostico_id", _texto),
    "name": ("nombre", _texto),
    "description": ("descripcion", _texto_opcional),
    "icd_code": ("codigo_cie", _texto_opcional),
    "created_at": ("creado_en", parse_fecha_hora),
}

_CAMPOS_CONSULTA: MapaCampos = {
    "id": ("id", _tal_cual),
    "consultation_id": ("consulta_id", _texto),
    "consultation_date": ("fecha", parse_fecha_hora),
    "patient": ("paciente", _texto_opcional),
    "doctor": ("medico", _texto_opcional),
    "patient_name": ("paciente_nombre", _texto_opcional),
    "doctor_name": ("medico_nombre", _texto_opcional),
    "diagnostic": ("diagnostico", _texto_opcional),
    "diagnostic_name": ("diagnostico_nombre", _texto_opcional),
    "chief_complaint": ("motivo", _texto_opcional),
    "symptoms": ("sintomas", _texto_opcional),
    "observation": ("observacion", _texto_opcional),
    "recommended_steps": ("pasos_recomendados", _texto_opcional),
    "status": ("estado", _texto_opcional),
    "created_at": ("creado_en", parse_fecha_hora),
}

_CAMPOS_CITA: MapaCampos = {
    "id": ("id", _tal_cual),
    "appointment_id": ("cita_id", _texto),
    "appointment_time": ("fecha_hora", parse_fecha_hora),
    "patient": ("paciente", _texto_opcional),
    "doctor": ("medico", _texto_opcional),
    "patient_name": ("paciente_nombre", _texto_opcional),
    "doctor_name": ("medico_nombre", _texto_opcional),
    "doctor_specialty": ("medico_especialidad", _texto_opcional),
    "status": ("estado", _texto),
    "notes": ("notas", _texto_opcional),
    "created_at": ("creado_en", parse_fecha_hora),
}


def diagnostico_desde_api(data: Any) -> Diagnostico:
    return _mapear(Diagnostico, _CAMPOS_DIAGNOSTICO, data)


def consulta_desde_api(data: Any) -> Consulta:
    return _mapear(Consulta, _CAMPOS_CONSULTA, data)


def cita_desde_api(data: Any) -> Cita:
    return _mapear(Cita, _CAMPOS_CITA, data)


def diagnostico_a_api(datos: DatosDiagnostico) -> Dict[str, Any]:
    return {
        "name": datos.nombre,
        "description": datos.descripcion,
        "icd_code": datos.codigo_cie or "",
    }


def consulta_a_api(datos: DatosConsulta) -> Dict[str, Any]:
    fecha = datos.fecha or datetime.now(timezone.utc)
    return {
        "patient": datos.paciente,
        "doctor": datos.medico,
        "consultation_date": fecha_hora_a_iso(fecha),
        "chief_complaint": datos.motivo,
        "symptoms": datos.sintomas,
        "observation": datos.observacion,
        "diagnostic": datos.diagnostico or None,
        "recommended_steps": datos.pasos_recomendados,
        "status": datos.estado,
    }


def cita_a_api(datos: DatosCita) -> Dict[str, Any]:
    return {
        "doctor": datos.medico,
        "patient": datos.paciente,
        "appointment_time": fecha_hora_a_iso(datos.fecha_hora) if datos.fecha_hora else None,
        "status": datos.estado,
        "notes": datos.notas or "",
    }


# ---------------------------------------------------------------------
# Recetas
# ---------------------------------------------------------------------

_CAMPOS_RECETA_ITEM: MapaCampos = {
    "id": ("id", _tal_cual),
    "name": ("nombre", _texto),
    "description": ("descripcion", _texto_opcional),
    "indication": ("indicacion", _texto_opcional),
    "dosage": ("dosis", _texto_opcional),
    "frequency": ("frecuencia", _texto_opcional),
    "duration": ("duracion", _texto_opcional),
    "created_at": ("creado_en", parse_fecha_hora),
}


def receta_item_desde_api(data: Any) -> RecetaItem:
    return _mapear(RecetaItem, _CAMPOS_RECETA_ITEM, data)


_CAMPOS_RECETA: MapaCampos = {
    "id": ("id", _tal_cual),
    "prescription_id": ("receta_id", _texto),
    "consultation_id": ("consulta_id", _texto_opcional),
    "notes": ("notas", _texto_opcional),
    "created_at": ("creado_en", parse_fecha_hora),
    "items": ("items", _lista(receta_item_desde_api)),
}


def receta_desde_api(data: Any) -> Receta:
    return _mapear(Receta, _CAMPOS_RECETA, data)


def receta_a_api(consulta_id: str, notas: str) -> Dict[str, Any]:
    return {"consultation": consulta_id, "notes": notas}


def receta_item_a_api(receta_id: str, datos: DatosRecetaItem) -> Dict[str, Any]:
    return {
        "prescription": receta_id,
        "name": datos.nombre,
        "dosage": datos.dosis,
        "frequency": datos.frecuencia,
        "duration": datos.duracion,
        "indication": datos.indicacion,
    }


# ---------------------------------------------------------------------
# Pagos
# ---------------------------------------------------------------------

_CAMPOS_PAGO: MapaCampos = {
    "id": ("id", _tal_cual),
    "payment_id": ("pago_id", _texto),
    "consultation": ("consulta", _texto_opcional),
    "consultation_id": ("consulta_id", _texto_opcional),
    "patient_name": ("paciente_nombre", _texto_opcional),
    "amount": ("importe", a_decimal),
    "payment_method": ("metodo", _texto_opcional),
    "status": ("estado", _texto),
    "reference_number": ("referencia", _texto_opcional),
    "paid_at": ("pagado_en", parse_fecha_hora),
    "created_at": ("creado_en", parse_fecha_hora),
}


def pago_desde_api(data: Any) -> Pago:
    return _mapear(Pago, _CAMPOS_PAGO, data)


def pago_a_api(datos: DatosPago) -> Dict[str, Any]:
    return {
        "consultation": datos.consulta,
        "amount": str(datos.importe),
        "payment_method": datos.metodo,
        "status": datos.estado,
        "reference_number": datos.referencia,
    }


# ---------------------------------------------------------------------
# Historias clínicas
# ---------------------------------------------------------------------

_CAMPOS_HISTORIA: MapaCampos = {
    "id": ("id", _tal_cual),
    "medical_record_id": ("historia_id", _texto),
    "patient_id": ("paciente_id", _texto_opcional),
    "patient_name": ("paciente_nombre", _texto_opcional),
    "attending_physician": ("medico_responsable", _texto_opcional),
    "past_medical_history": ("antecedentes", _texto_opcional),
    "chronic_conditions": ("enfermedades_cronicas", _texto_opcional),
    "family_history": ("antecedentes_familiares", _texto_opcional),
    "consultation_count": ("num_consultas", _entero),
    "created_at": ("creado_en", parse_fecha_hora),
    "updated_at": ("actualizado_en", parse_fecha_hora),
    "consultations": ("consultas", _lista(consulta_desde_api)),
    "recent_consultations": ("consultas_recientes", _lista(consulta_desde_api)),
}


def historia_desde_api(data: Any) -> HistoriaClinica:
    return _mapear(HistoriaClinica, _CAMPOS_HISTORIA, data)


# ---------------------------------------------------------------------
# Sesión
# ---------------------------------------------------------------------


def usuario_desde_api(data: Any) -> Usuario:
    if not isinstance(data, Mapping):
        raise ApiJsonError("Se esperaba un objeto usuario")
    return Usuario(
        id=data.get("id"),
        username=_texto(data.get("username")),
        email=_texto_opcional(data.get("email")),
        nombre=_texto_opcional(data.get("first_name")),
        apellidos=_texto_opcional(data.get("last_name")),
        es_staff=_booleano(data.get("is_staff")),
        es_superusuario=_booleano(data.get("is_superuser")),
        alta_en=parse_fecha_hora(data.get("date_joined")),
        ultimo_acceso=parse_fecha_hora(data.get("last_login")),
    )


def sesion_desde_api(data: Any) -> EstadoSesion:
    """Admite `{authenticated, user}` o directamente `{user}` (respuesta de login)."""
    if not isinstance(data, Mapping):
        raise ApiJsonError("Se esperaba un objeto de sesión")
    usuario = data.get("user")
    autenticado = bool(data.get("authenticated", usuario is not None))
    return EstadoSesion(
        autenticado=autenticado and usuario is not None,
        usuario=usuario_desde_api(usuario) if usuario else None,
    )


def credenciales_a_api(credenciales: Credenciales) -> Dict[str, Any]:
    return {"username": credenciales.username, "password": credenciales.password}


def registro_a_api(datos: DatosRegistro) -> Dict[str, Any]:
    return {
        "username": datos.username,
        "password": datos.password,
        "email": datos.email,
        "first_name": datos.nombre,
        "last_name": datos.apellidos,
    }
