"""
Normalización de horas del día a formato canónico 24h `HH:MM`.

Usado por los horarios de trabajo de los odontólogos: la API remota puede
devolver `HH:MM:SS` y los navegadores pueden enviar `H:MM AM/PM`.
"""

import re

_HH_MM = re.compile(r"^(\d{2}):(\d{2})$")
_HH_MM_SS = re.compile(r"^(\d{2}):(\d{2}):\d{2}$")
_AM_PM = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)$", re.IGNORECASE)


def _format(hour: int, minute: int) -> str:
    if 0 <= hour <= 23 and 0 <= minute <= 59:
        return f"{hour:02d}:{minute:02d}"
    return ""


def normalize_time(value: object) -> str:
    """
    Convierte una hora a `HH:MM` (24h).

    Reglas, en orden:
        1. `HH:MM` → igual.
        2. `HH:MM:SS` → se recortan los segundos.
        3. `H:MM AM|PM` → 24h (12 AM → 00, 12 PM → 12, PM 1-11 → +12).
        4. Cualquier otra cosa → "" (sin definir, no es error).

    Con AM/PM la hora no se limita a 1-12: `0:30 PM` → `12:30`,
    `13:00 PM` → `13:00`. Solo el resultado debe caer en 00:00–23:59.
    Nunca lanza excepciones y es idempotente.
    """
    if not isinstance(value, str) or not value:
        return ""

    match = _HH_MM.match(value) or _HH_MM_SS.match(value)
    if match:
        return _format(int(match.group(1)), int(match.group(2)))

    match = _AM_PM.match(value)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2))
        meridiem = match.group(3).upper()
        if meridiem == "PM" and hour < 12:
            hour += 12
        elif meridiem == "AM" and hour == 12:
            hour = 0
        return _format(hour, minute)

    return ""
