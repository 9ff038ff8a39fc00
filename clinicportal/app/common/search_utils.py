from __future__ import annotations

from typing import Iterable, Optional


def contains_text(text: str, *candidates: Optional[str]) -> bool:
    """Coincidencia sin mayúsculas/minúsculas contra cualquiera de los candidatos."""
    needle = text.lower()
    return any(needle in candidate.lower() for candidate in _non_empty(candidates))


def _non_empty(values: Iterable[Optional[str]]) -> Iterable[str]:
    return (value for value in values if value)
