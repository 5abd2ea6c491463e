"""Граница для внешних потребителей (дашборд, аналитика).

Контракт:
- API тотален: исключения наружу не выходят. Неверный индекс даёт
  документированное значение по умолчанию (UNKNOWN_ID, UNKNOWN_NAME, 0.0,
  False, статус 0), команды управления по неверному индексу игнорируются.
- Чтение метрики продвигает машину на read_step_s (по умолчанию 1 с) и
  добавляет шум датчика. Для чтения без тика есть snapshot().
- Агрегаты по пустому множеству работающих машин возвращают 0.0.

Это сознательное упрощение: потребитель не отличает «нет машины» от
«машина показывает ноль». Ошибки конфигурации (ValueError) возникают
только в конструкторе.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional
import logging
import math

import numpy as np

from fleetsim.config import SystemConfig
from fleetsim.core.types import METRIC_NAMES, MachineSnapshot, MachineType, MaintenanceStatus, VibrationAxes
from fleetsim.environment import ambient_temperature, is_working_hours, seasonal_factor
from fleetsim.fleet import Fleet
from fleetsim.physics.engine import PhysicsEngine
from fleetsim.sensors import SensorModel
from fleetsim.state import MachineState
from fleetsim.synthesizer import FleetSynthesizer, baseline_from_config

logger = logging.getLogger(__name__)


UNKNOWN_ID = "UNKNOWN"
UNKNOWN_NAME = "Unknown Machine"
DEFAULT_METRIC = 0.0

# вибрация главного двигателя по осям: Y и Z как доли X
VIBRATION_AXIS_RATIOS = (1.0, 0.8, 0.6)

# приборная панель снимается с главного двигателя
MOTOR_INDEX = 0
RPM_SCALE = 0.6
SHAFT_DEG_PER_RPM = 6.0


Clock = Callable[[], datetime]


class FleetController:
    def __init__(
        self,
        cfg: SystemConfig | None = None,
        *,
        rng: np.random.Generator | None = None,
        clock: Clock | None = None,
        baseline: MachineState | None = None,
    ) -> None:
        self.cfg = cfg or SystemConfig()
        self.clock: Clock = clock or datetime.now
        self.rng = rng if rng is not None else np.random.default_rng(self.cfg.sim.seed)

        self.engine = PhysicsEngine(self.cfg)
        self.synthesizer = FleetSynthesizer(env_cfg=self.cfg.environment, physics_cfg=self.cfg.physics)
        self.sensors = SensorModel(self.cfg, self.rng)

        self._baseline = baseline.copy() if baseline is not None else baseline_from_config(self.cfg.baseline)
        self.fleet = self._build_fleet(self.clock())

    def _build_fleet(self, now: datetime) -> Fleet:
        machines = self.synthesizer.synthesize(self._baseline, now)
        return Fleet(machines, self.engine, self.cfg.environment)

    def resynthesize(self) -> None:
        """Пересобрать парк из эталона на текущий момент (накопители обнуляются)."""

        self.fleet = self._build_fleet(self.clock())

    # ---------- внутреннее ----------

    def _valid(self, index: int) -> bool:
        ok = index in self.fleet
        if not ok:
            logger.debug("Ignoring out-of-range machine index %r (fleet size %d)", index, len(self.fleet))
        return ok

    def _advance(self, index: int) -> MachineSnapshot:
        return self.fleet.advance(index, self.cfg.sim.read_step_s, self.clock())

    # ---------- снимки ----------

    def machine_count(self) -> int:
        return len(self.fleet)

    def read(self, index: int) -> Optional[MachineSnapshot]:
        """Тик + полный снимок; все поля из одного и того же тика."""

        if not self._valid(index):
            return None
        return self._advance(index)

    def snapshot(self, index: int) -> Optional[MachineSnapshot]:
        """Текущее состояние без продвижения времени."""

        if not self._valid(index):
            return None
        return self.fleet.snapshot(index, self.clock())

    def snapshots(self) -> List[MachineSnapshot]:
        return self.fleet.snapshots(self.clock())

    # ---------- идентичность ----------

    def get_machine_id(self, index: int) -> str:
        snap = self.snapshot(index)
        return snap.machine_id if snap is not None else UNKNOWN_ID

    def get_machine_name(self, index: int) -> str:
        snap = self.snapshot(index)
        return snap.name if snap is not None else UNKNOWN_NAME

    def get_machine_type(self, index: int) -> int:
        snap = self.snapshot(index)
        return int(snap.machine_type) if snap is not None else int(MachineType.MOTOR)

    def get_machine_type_label(self, index: int) -> str:
        snap = self.snapshot(index)
        return snap.machine_type.label if snap is not None else "Unknown"

    def is_running(self, index: int) -> bool:
        snap = self.snapshot(index)
        return bool(snap.is_running) if snap is not None else False

    # ---------- метрики (каждое чтение = тик) ----------

    def get_metric(self, index: int, field: str) -> float:
        # имя проверяется до тика: неизвестная метрика не двигает время машины
        if not isinstance(field, str) or field not in METRIC_NAMES:
            logger.warning("Unknown metric %r requested for machine %r", field, index)
            return DEFAULT_METRIC
        snap = self.read(index)
        if snap is None:
            return DEFAULT_METRIC
        return self.sensors.jitter(field, snap.metric(field))

    def get_speed(self, index: int) -> float:
        return self.get_metric(index, "speed")

    def get_temperature(self, index: int) -> float:
        return self.get_metric(index, "temperature")

    def get_load(self, index: int) -> float:
        return self.get_metric(index, "load")

    def get_efficiency(self, index: int) -> float:
        return self.get_metric(index, "efficiency")

    def get_power_consumption(self, index: int) -> float:
        return self.get_metric(index, "power_consumption")

    def get_vibration(self, index: int) -> float:
        return self.get_metric(index, "vibration")

    def get_health_score(self, index: int) -> float:
        return self.get_metric(index, "health_score")

    def get_pressure(self, index: int) -> float:
        return self.get_metric(index, "pressure")

    def get_flow_rate(self, index: int) -> float:
        return self.get_metric(index, "flow_rate")

    def get_maintenance_status(self, index: int) -> int:
        snap = self.read(index)
        return int(snap.maintenance_status) if snap is not None else int(MaintenanceStatus.GOOD)

    def get_vibration_axes(self, index: int = 0) -> VibrationAxes:
        """Трёхосевая вибрация: один тик, один шум, оси — доли X."""

        x = self.get_vibration(index)
        rx, ry, rz = VIBRATION_AXIS_RATIOS
        return VibrationAxes(x=x * rx, y=x * ry, z=x * rz)

    # ---------- управление ----------

    def start(self, index: int) -> None:
        if self._valid(index):
            self.fleet.set_running(index, True)

    def stop(self, index: int) -> None:
        if self._valid(index):
            self.fleet.set_running(index, False)

    def set_target_speed(self, index: int, speed_rpm: float) -> None:
        if not self._valid(index):
            return
        try:
            speed = float(speed_rpm)
        except (TypeError, ValueError):
            speed = math.nan
        if not math.isfinite(speed) or speed < 0.0:
            logger.debug("Ignoring invalid target speed %r for machine %d", speed_rpm, index)
            return
        self.fleet.set_target_speed(index, speed)

    def reset(self, index: int) -> None:
        if self._valid(index):
            self.fleet.reset(index)

    def reset_all(self) -> None:
        for i in self.fleet:
            self.fleet.reset(i)
        logger.info("Reset wear accumulators on all %d machines", len(self.fleet))

    # ---------- агрегаты ----------

    def count_online(self) -> int:
        return sum(1 for s in self.snapshots() if s.is_running)

    def _advance_running(self) -> List[MachineSnapshot]:
        return [self._advance(i) for i in self.fleet if self.fleet.snapshot(i, self.clock()).is_running]

    def average_efficiency(self) -> float:
        running = self._advance_running()
        if not running:
            return 0.0
        return float(sum(s.efficiency for s in running) / len(running))

    def total_power_consumption(self) -> float:
        return float(sum(s.power_consumption for s in self._advance_running()))

    def system_health_score(self) -> int:
        snaps = [self._advance(i) for i in self.fleet]
        if not snaps:
            return 0
        return int(sum(s.health_score for s in snaps) / len(snaps))

    # ---------- приборы главного двигателя ----------

    def get_motor_speed(self) -> int:
        return int(self.get_speed(MOTOR_INDEX))

    def get_motor_temperature(self) -> int:
        return int(self.get_temperature(MOTOR_INDEX))

    def get_rpm(self) -> int:
        """Показание тахометра: скорость двигателя в шкале прибора."""

        return int(self.get_speed(MOTOR_INDEX) * RPM_SCALE)

    def get_shaft_position(self) -> float:
        """Угол вала, градусы в [0, 360)."""

        return math.fmod(self.get_speed(MOTOR_INDEX) * SHAFT_DEG_PER_RPM, 360.0)

    def get_instrument(self, name: str) -> float:
        if not isinstance(name, str) or name not in self.cfg.sensor.instruments:
            logger.warning("Unknown instrument %r requested", name)
            return DEFAULT_METRIC
        return self.sensors.instrument(name)

    def get_oil_pressure(self) -> float:
        return self.get_instrument("oil_pressure")

    def get_air_pressure(self) -> float:
        return self.get_instrument("air_pressure")

    def get_hydraulic_pressure(self) -> float:
        return self.get_instrument("hydraulic_pressure")

    def get_coolant_flow_rate(self) -> float:
        return self.get_instrument("coolant_flow_rate")

    def get_fuel_flow_rate(self) -> float:
        return self.get_instrument("fuel_flow_rate")

    def get_voltage(self) -> float:
        return self.get_instrument("voltage")

    def get_current(self) -> float:
        return self.get_instrument("current")

    def get_power_factor(self) -> float:
        return self.get_instrument("power_factor")

    def get_torque(self) -> float:
        return self.get_instrument("torque")

    def get_ambient_pressure(self) -> float:
        return self.get_instrument("ambient_pressure")

    def get_displacement(self) -> float:
        return self.get_instrument("displacement")

    def get_strain_gauge(self, gauge: int) -> float:
        """Тензодатчики 1..3; другой номер даёт 0.0."""

        return self.get_instrument(f"strain_gauge_{gauge}") if gauge in (1, 2, 3) else DEFAULT_METRIC

    def get_sound_level(self) -> float:
        return self.get_instrument("sound_level")

    def get_bearing_health(self) -> float:
        return self.get_instrument("bearing_health")

    # наработка двигателя без тика: целые часы, минуты внутри часа, секунды внутри минуты

    def _motor_hours(self) -> float:
        snap = self.snapshot(MOTOR_INDEX)
        return snap.operating_hours if snap is not None else 0.0

    def get_operating_hours(self) -> int:
        return int(self._motor_hours())

    def get_operating_minutes(self) -> int:
        return int(self._motor_hours() * 60.0) % 60

    def get_operating_seconds(self) -> float:
        return math.fmod(self._motor_hours() * 3600.0, 60.0)

    # ---------- окружение ----------

    def is_working_hours(self) -> bool:
        return is_working_hours(self.clock(), self.cfg.environment)

    def seasonal_factor(self) -> float:
        return seasonal_factor(self.clock(), self.cfg.environment)

    def get_ambient_temperature(self) -> float:
        return self.sensors.jitter("ambient_temperature", ambient_temperature(self.clock(), self.cfg.environment))

    def get_humidity(self) -> float:
        env = self.cfg.environment
        base = env.humidity_base_pct + seasonal_factor(self.clock(), env) * env.humidity_seasonal_gain_pct
        return self.sensors.jitter("humidity", base)

    def __repr__(self) -> str:
        return f"FleetController(machines={len(self.fleet)}, seed={self.cfg.sim.seed})"
