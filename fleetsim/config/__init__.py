"""Конфиги симулятора парка.

- физика, пороги обслуживания, окружение, шум датчиков: `fleetsim.config.models`;
- состав парка и коэффициенты архетипов: `fleetsim.config.fleet`.
"""

from __future__ import annotations

from .fleet import (  # noqa: F401
    ARCHETYPE_PROFILES,
    DEFAULT_FLEET_SIZE,
    ArchetypeProfile,
)
from .models import (  # noqa: F401
    BaselineConfig,
    EnvironmentConfig,
    MaintenanceThresholds,
    PhysicsConfig,
    SensorConfig,
    SimulationConfig,
    SystemConfig,
)


__all__ = [
    "ArchetypeProfile",
    "ARCHETYPE_PROFILES",
    "DEFAULT_FLEET_SIZE",
    "PhysicsConfig",
    "MaintenanceThresholds",
    "EnvironmentConfig",
    "SensorConfig",
    "SimulationConfig",
    "BaselineConfig",
    "SystemConfig",
]
