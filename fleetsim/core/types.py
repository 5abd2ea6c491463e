"""fleetsim.core.types

Типы, которые видят внешние потребители (дашборд, аналитика).

Важно: порядковые номера MachineType и MaintenanceStatus — внешний контракт.
Аналитика хранит их как int, поэтому порядок членов менять нельзя.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal, TypedDict


class MachineType(IntEnum):
    MOTOR = 0
    PUMP = 1
    CONVEYOR = 2
    COMPRESSOR = 3
    FAN = 4
    GENERATOR = 5
    TURBINE = 6
    CRUSHER = 7
    MIXER = 8
    PRESS = 9

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def label_for(cls, code: int) -> str:
        """Имя типа по коду; "Unknown" для кода вне перечисления."""

        try:
            return cls(int(code)).label
        except ValueError:
            return "Unknown"


class MaintenanceStatus(IntEnum):
    GOOD = 0
    WARNING = 1
    CRITICAL = 2
    MAINTENANCE_DUE = 3


# Поля, которые отдаёт FleetController.get_metric()
MetricName = Literal[
    "speed",
    "temperature",
    "load",
    "efficiency",
    "power_consumption",
    "vibration",
    "health_score",
    "pressure",
    "flow_rate",
]


class VibrationAxes(TypedDict):
    """Трёхосевая вибрация главного двигателя (mm/s)."""

    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class MachineSnapshot:
    """Неизменяемый срез состояния машины после одного тика.

    Все геттеры одного цикла чтения берут значения из одного снимка,
    поэтому частично обновлённое состояние наружу не попадает.
    """

    index: int
    machine_id: str
    name: str
    machine_type: MachineType
    is_running: bool

    current_speed: float
    target_speed: float
    temperature: float
    load: float
    efficiency: float
    power_consumption: float
    vibration: float
    pressure: float
    flow_rate: float

    bearing_wear: float
    oil_degradation: float
    operating_hours: float

    health_score: float
    maintenance_status: MaintenanceStatus

    ambient_temperature: float

    def metric(self, name: str) -> float:
        if not isinstance(name, str):
            raise ValueError(f"Unknown metric: {name!r}")
        if name == "speed":
            return self.current_speed
        if name in _SNAPSHOT_METRICS:
            return float(getattr(self, name))
        raise ValueError(f"Unknown metric: {name}")


_SNAPSHOT_METRICS = frozenset(
    {
        "temperature",
        "load",
        "efficiency",
        "power_consumption",
        "vibration",
        "health_score",
        "pressure",
        "flow_rate",
    }
)

METRIC_NAMES = frozenset({"speed"} | _SNAPSHOT_METRICS)
