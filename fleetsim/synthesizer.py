"""Синтез парка из одной эталонной записи главного двигателя.

Каждая строка ARCHETYPE_PROFILES масштабирует метрики эталона своими
коэффициентами. Синтез детерминирован: тот же эталон и тот же момент
времени дают тот же список машин в том же порядке (никакого RNG), поэтому
параллельные потребители видят согласованный парк.

Выведенные КПД, здоровье и температура ограничены сверху (caps), включая
остановленные машины, которые тик не трогает.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Sequence
import logging

from fleetsim.config.fleet import (
    ARCHETYPE_PROFILES,
    DERIVED_EFFICIENCY_CAP,
    DERIVED_HEALTH_CAP,
    ArchetypeProfile,
)
from fleetsim.config.models import BaselineConfig, EnvironmentConfig, PhysicsConfig
from fleetsim.core.types import MachineType, MaintenanceStatus
from fleetsim.environment import is_working_hours
from fleetsim.state import MachineState

logger = logging.getLogger(__name__)


def baseline_from_config(cfg: BaselineConfig) -> MachineState:
    """Эталонный двигатель: всегда в работе, накопители нулевые."""

    return MachineState(
        machine_id=cfg.machine_id,
        name=cfg.name,
        machine_type=MachineType.MOTOR,
        is_running=True,
        current_speed=cfg.speed_rpm,
        target_speed=cfg.speed_rpm,
        temperature=cfg.temperature_C,
        load=cfg.load,
        efficiency=cfg.efficiency,
        power_consumption=cfg.power_kW,
        vibration=cfg.vibration,
        pressure=cfg.pressure_bar,
        flow_rate=cfg.flow_rate,
        health_score=cfg.health_score,
        maintenance_status=MaintenanceStatus.GOOD,
    )


class FleetSynthesizer:
    def __init__(
        self,
        profiles: Sequence[ArchetypeProfile] = ARCHETYPE_PROFILES,
        env_cfg: EnvironmentConfig | None = None,
        physics_cfg: PhysicsConfig | None = None,
    ) -> None:
        if not profiles:
            raise ValueError("profiles must be non-empty")
        if profiles[0].duty != "always_on":
            raise ValueError("first profile must describe the always-on baseline machine")
        self.profiles = tuple(profiles)
        self.env_cfg = env_cfg or EnvironmentConfig()
        self.physics_cfg = physics_cfg or PhysicsConfig()

    def _running(self, profile: ArchetypeProfile, shift_on: bool) -> bool:
        if profile.duty == "always_on":
            return True
        if profile.duty == "standby":
            return False
        return shift_on

    def derive(self, baseline: MachineState, profile: ArchetypeProfile, shift_on: bool) -> MachineState:
        """Одна машина архетипа из эталона."""

        running = self._running(profile, shift_on)
        target = baseline.target_speed * profile.speed_ratio
        current = 0.0 if profile.duty == "standby" else baseline.current_speed * profile.speed_ratio

        return MachineState(
            machine_id=profile.machine_id,
            name=profile.name,
            machine_type=profile.machine_type,
            is_running=running,
            current_speed=current,
            target_speed=target,
            temperature=min(self.physics_cfg.max_temperature_C, baseline.temperature * profile.temperature_ratio),
            load=profile.load,
            efficiency=min(DERIVED_EFFICIENCY_CAP, baseline.efficiency * profile.efficiency_ratio),
            power_consumption=baseline.power_consumption * profile.power_ratio,
            vibration=baseline.vibration * profile.vibration_ratio,
            pressure=profile.pressure_bar,
            flow_rate=profile.flow_rate,
            health_score=min(DERIVED_HEALTH_CAP, baseline.health_score * profile.health_ratio),
            maintenance_status=MaintenanceStatus.GOOD,
        )

    def synthesize(self, baseline: MachineState, now: datetime) -> List[MachineState]:
        shift_on = is_working_hours(now, self.env_cfg)

        motor = baseline.copy()
        motor.is_running = True
        machines = [motor]
        machines.extend(self.derive(baseline, p, shift_on) for p in self.profiles[1:])

        logger.info(
            "Synthesized fleet of %d machines at %s (working hours: %s)",
            len(machines),
            now.isoformat(timespec="seconds"),
            shift_on,
        )
        return machines
