"""Тепловой баланс узла (сосредоточенная масса).

dT/dt_min = Q_gen - k_cool * (T - T_amb)

Q_gen растёт с нагрузкой и оборотами, k_cool тоже растёт с оборотами
(обдув). Результат зажимается в [T_amb, T_max]: явный Эйлер на больших
dt перескакивает равновесие, clamp держит температуру в физических рамках.
"""

from __future__ import annotations

from fleetsim.config.models import PhysicsConfig
from fleetsim.core.units import seconds_to_minutes


def heat_generation(cfg: PhysicsConfig, *, load: float, speed_rpm: float) -> float:
    return float(load) * cfg.heat_per_load + (float(speed_rpm) / cfg.nominal_speed_rpm) * cfg.heat_per_speed


def cooling_rate(cfg: PhysicsConfig, *, speed_rpm: float) -> float:
    return cfg.cooling_base + (float(speed_rpm) / cfg.nominal_speed_rpm) * cfg.cooling_per_speed


def next_temperature(
    cfg: PhysicsConfig,
    *,
    temperature_C: float,
    ambient_C: float,
    load: float,
    speed_rpm: float,
    dt_s: float,
) -> float:
    T = float(temperature_C)
    q = heat_generation(cfg, load=load, speed_rpm=speed_rpm)
    k = cooling_rate(cfg, speed_rpm=speed_rpm)

    T += (q - k * (T - float(ambient_C))) * seconds_to_minutes(dt_s)
    return max(float(ambient_C), min(cfg.max_temperature_C, T))
