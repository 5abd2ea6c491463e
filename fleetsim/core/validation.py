"""fleetsim.core.validation

Проверки конфигов и входов физики: невозможные значения (отрицательный dt,
перевёрнутый диапазон, load вне [0, 1]) ловим при создании, а не на тике.
Все функции бросают ValueError с именем параметра.
"""

from __future__ import annotations

import math


def ensure_non_negative(value: float, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def ensure_positive(value: float, name: str) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")


def ensure_finite(value: float, name: str) -> None:
    if not math.isfinite(float(value)):
        raise ValueError(f"{name} must be finite, got {value}")


def ensure_in_range(value: float, min_value: float, max_value: float, name: str) -> None:
    if not (min_value <= value <= max_value):
        raise ValueError(f"{name} must be in [{min_value}, {max_value}], got {value}")


def ensure_fraction(value: float, name: str) -> None:
    """Доля в [0, 1] (load, коэффициенты загрузки)."""

    ensure_in_range(value, 0.0, 1.0, name)


def ensure_ordered(lo: float, hi: float, name: str) -> None:
    if lo > hi:
        raise ValueError(f"{name} bounds must satisfy lo <= hi, got ({lo}, {hi})")
