"""
Timestamps ISO-8601 en UTC para las entidades de la API.
"""
from __future__ import annotations

from datetime import datetime, timezone


def now_iso() -> str:
    """Hora actual en UTC con milisegundos y sufijo `Z` (p.ej. 2025-01-31T12:00:00.123Z)."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
