# domain/exceptions.py
"""
Excepciones del dominio.

Propósito:
- Distinguir errores de validación de formularios (dominio) de errores técnicos (API/red/UI).
- Permitir que los controladores y la UI traduzcan errores a mensajes para el usuario.
"""


class DomainError(Exception):
    """Error base del dominio."""


class ValidationError(DomainError):
    """Formulario o entidad en estado inválido."""
