"""fleetsim.core.units

Множители времени и номинальные значения, общие для физики и генератора.

Принцип: dt в физике всегда в секундах, накопители — в часах.
"""

from __future__ import annotations

SECOND: float = 1.0
MINUTE: float = 60.0 * SECOND
HOUR: float = 60.0 * MINUTE

DAYS_PER_YEAR: float = 365.0

# Номинальная скорость главного привода, к ней нормируются speedFactor/coolingRate
NOMINAL_SPEED_RPM: float = 2500.0

# Опорная температура узлов (C), от неё считаются tempFactor и температурные поправки
REFERENCE_TEMPERATURE_C: float = 65.0


def seconds_to_hours(seconds: float) -> float:
    return float(seconds) / HOUR


def seconds_to_minutes(seconds: float) -> float:
    return float(seconds) / MINUTE
