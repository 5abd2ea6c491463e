"""Состав парка и таблица коэффициентов архетипов.

Этот модуль намеренно является data-only ("мёртвым" конфигом):
- порядок строк = порядок машин в парке (индекс доступа через API);
- коэффициенты умножаются на метрики эталонного двигателя
  (speed, efficiency, power, temperature, vibration, health);
- load/pressure/flow_rate задаются абсолютно, в эталон они не масштабируются.

Ключевое правило:
- Таблица — внешний контракт. Аналитика сравнивает машины, предполагая
  именно эти соотношения, поэтому строки не переставляются и не удаляются.

Режим работы:
- "always_on"  — всегда в работе (главный двигатель);
- "standby"    — всегда выключен, текущая скорость 0 (резервные генераторы);
- "shift"      — работает только в рабочее время.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from fleetsim.core.types import MachineType
from fleetsim.core.validation import ensure_fraction, ensure_non_negative


DutyMode = Literal["always_on", "standby", "shift"]

# верхние границы для выведенных машин
DERIVED_EFFICIENCY_CAP: float = 95.0
DERIVED_HEALTH_CAP: float = 100.0


@dataclass(frozen=True)
class ArchetypeProfile:
    """Одна строка таблицы: идентичность + коэффициенты к эталону."""

    machine_id: str
    name: str
    machine_type: MachineType
    duty: DutyMode

    speed_ratio: float
    efficiency_ratio: float
    power_ratio: float
    temperature_ratio: float
    vibration_ratio: float
    health_ratio: float

    load: float
    pressure_bar: float = 0.0
    flow_rate: float = 0.0

    def __post_init__(self) -> None:
        if not self.machine_id:
            raise ValueError("machine_id must be non-empty")
        for name in (
            "speed_ratio",
            "efficiency_ratio",
            "power_ratio",
            "temperature_ratio",
            "vibration_ratio",
            "health_ratio",
            "pressure_bar",
            "flow_rate",
        ):
            ensure_non_negative(getattr(self, name), name)
        ensure_fraction(self.load, "load")

    @property
    def ratios(self) -> Tuple[float, float, float, float, float, float]:
        return (
            self.speed_ratio,
            self.efficiency_ratio,
            self.power_ratio,
            self.temperature_ratio,
            self.vibration_ratio,
            self.health_ratio,
        )


def _p(
    machine_id: str,
    name: str,
    machine_type: MachineType,
    duty: DutyMode,
    speed: float,
    eff: float,
    power: float,
    temp: float,
    vib: float,
    health: float,
    load: float,
    pressure: float = 0.0,
    flow: float = 0.0,
) -> ArchetypeProfile:
    return ArchetypeProfile(
        machine_id=machine_id,
        name=name,
        machine_type=machine_type,
        duty=duty,
        speed_ratio=speed,
        efficiency_ratio=eff,
        power_ratio=power,
        temperature_ratio=temp,
        vibration_ratio=vib,
        health_ratio=health,
        load=load,
        pressure_bar=pressure,
        flow_rate=flow,
    )


T = MachineType

#                 id          name                    type          duty        speed  eff   power  temp  vib   health load  pressure flow
ARCHETYPE_PROFILES: Tuple[ArchetypeProfile, ...] = (
    _p("MOTOR-001", "Main Drive Motor",   T.MOTOR,      "always_on", 1.00, 1.00, 1.00,  1.00, 1.00, 1.00, 0.70, 3.5,   15.0),
    _p("PUMP-101",  "Industrial Pump 1",  T.PUMP,       "shift",     0.76, 0.97, 0.82,  0.92, 0.87, 0.98, 0.70, 10.0,  30.0),
    _p("PUMP-102",  "Industrial Pump 2",  T.PUMP,       "shift",     0.80, 0.98, 0.93,  1.00, 0.93, 0.99, 0.80, 12.0,  35.0),
    _p("PUMP-103",  "Industrial Pump 3",  T.PUMP,       "shift",     0.84, 0.99, 1.04,  1.08, 1.00, 1.00, 0.90, 14.0,  40.0),
    _p("CONV-101",  "Conveyor Belt 1",    T.CONVEYOR,   "shift",     0.056, 0.96, 0.69, 0.74, 0.60, 0.97, 0.65),
    _p("CONV-102",  "Conveyor Belt 2",    T.CONVEYOR,   "shift",     0.064, 0.99, 0.76, 0.78, 0.67, 0.99, 0.80),
    _p("COMP-101",  "Air Compressor 1",   T.COMPRESSOR, "shift",     1.28, 0.93, 2.00,  1.28, 1.53, 0.96, 0.90, 15.0,  10.0),
    _p("COMP-102",  "Air Compressor 2",   T.COMPRESSOR, "shift",     1.36, 0.98, 2.33,  1.40, 1.67, 0.99, 1.00, 18.0,  12.0),
    _p("FAN-101",   "Industrial Fan 1",   T.FAN,        "shift",     0.36, 0.96, 0.67,  0.49, 0.47, 0.99, 0.50, 0.0,   140.0),
    _p("FAN-102",   "Industrial Fan 2",   T.FAN,        "shift",     0.40, 0.99, 0.76,  0.52, 0.53, 1.01, 0.60, 0.0,   160.0),
    _p("GEN-101",   "Backup Generator 1", T.GENERATOR,  "standby",   0.72, 1.02, 0.00,  0.38, 0.13, 1.01, 0.00),
    _p("GEN-102",   "Backup Generator 2", T.GENERATOR,  "standby",   0.72, 1.04, 0.00,  0.38, 0.13, 1.02, 0.00),
    _p("TURB-101",  "Steam Turbine 1",    T.TURBINE,    "shift",     1.44, 0.96, 0.00,  1.85, 1.20, 0.94, 0.90, 45.0,  150.0),
    _p("CRUSH-101", "Jaw Crusher 1",      T.CRUSHER,    "shift",     0.10, 0.85, 16.67, 0.69, 2.33, 0.86, 0.80),
    _p("MIX-101",   "Industrial Mixer 1", T.MIXER,      "shift",     0.032, 0.97, 1.44, 0.69, 0.93, 0.97, 0.70),
    _p("MIX-102",   "Industrial Mixer 2", T.MIXER,      "shift",     0.04, 0.99, 1.67,  0.77, 1.07, 0.99, 0.80),
    _p("PRESS-101", "Hydraulic Press 1",  T.PRESS,      "shift",     0.00, 0.92, 10.00, 0.54, 0.53, 0.93, 0.70, 200.0, 0.0),
)

DEFAULT_FLEET_SIZE: int = len(ARCHETYPE_PROFILES)
