"""Накопители деградации: износ подшипников и старение масла.

Оба накопителя монотонны: приращение за тик не бывает отрицательным,
даже если температура опустилась сильно ниже опорной.
"""

from __future__ import annotations

from fleetsim.config.models import PhysicsConfig
from fleetsim.core.units import seconds_to_hours


def bearing_wear_increment(
    cfg: PhysicsConfig,
    *,
    speed_rpm: float,
    load: float,
    temperature_C: float,
    dt_s: float,
) -> float:
    speed_factor = float(speed_rpm) / cfg.nominal_speed_rpm
    temp_factor = (float(temperature_C) - cfg.reference_temp_C) / cfg.wear_temp_span_C

    stress = speed_factor * float(load) * (1.0 + temp_factor * cfg.wear_temp_gain)
    return max(0.0, stress) * seconds_to_hours(dt_s) * cfg.wear_rate_per_h


def oil_degradation_increment(cfg: PhysicsConfig, *, temperature_C: float, dt_s: float) -> float:
    temp_factor = (float(temperature_C) - cfg.reference_temp_C) / cfg.oil_temp_span_C
    stress = 1.0 + temp_factor * cfg.oil_temp_gain
    return max(0.0, stress) * seconds_to_hours(dt_s) * cfg.oil_rate_per_h
