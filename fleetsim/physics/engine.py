"""Шаг физики одной машины.

Реализует последовательное обновление состояния за тик dt:
- наработка, износ подшипников, старение масла;
- температура (тепловой баланс с окружением);
- КПД, вибрация;
- регулятор скорости, нагрузка (производственный цикл + сезонность);
- потребляемая мощность, индекс здоровья, статус обслуживания.

Важно:
- Порядок шагов фиксирован: каждый следующий шаг видит значения, уже
  обновлённые в этом же тике (скорость и нагрузка считаются по свежей
  температуре и КПД). Так получается один согласованный снимок за тик.
- Каждая метрика зажимается в свой физический диапазон.
- Остановленная машина не меняется вообще.
"""

from __future__ import annotations

from datetime import datetime
import math

from fleetsim.config.models import EnvironmentConfig, MaintenanceThresholds, PhysicsConfig, SystemConfig
from fleetsim.core.units import seconds_to_hours
from fleetsim.core.validation import ensure_finite, ensure_non_negative
from fleetsim.environment import ambient_temperature, seasonal_factor
from fleetsim.maintenance import classify
from fleetsim.physics.degradation import bearing_wear_increment, oil_degradation_increment
from fleetsim.physics.thermal import next_temperature
from fleetsim.state import MachineState


def clamp(x: float, lo: float, hi: float) -> float:
    return float(max(lo, min(hi, x)))


class PhysicsEngine:
    def __init__(self, cfg: SystemConfig | None = None) -> None:
        cfg = cfg or SystemConfig()
        self.cfg: PhysicsConfig = cfg.physics
        self.env: EnvironmentConfig = cfg.environment
        self.thresholds: MaintenanceThresholds = cfg.maintenance

    # ---------- отдельные шаги (чистые функции текущих значений) ----------

    def efficiency(self, m: MachineState) -> float:
        c = self.cfg
        wear_loss = m.bearing_wear * c.efficiency_wear_loss
        oil_loss = m.oil_degradation * c.efficiency_oil_loss
        temp_loss = max(0.0, (m.temperature - c.derating_temp_C) * c.efficiency_temp_loss)
        load_loss = abs(m.load - c.optimal_load) * c.efficiency_load_loss

        eff = c.base_efficiency - wear_loss - oil_loss - temp_loss - load_loss
        return clamp(eff, *c.efficiency_range)

    def vibration(self, m: MachineState) -> float:
        c = self.cfg
        speed_harmonic = math.sin(m.current_speed * 0.01) * c.speed_harmonic
        load_harmonic = math.sin(m.load * 10.0) * c.load_harmonic
        wear_harmonic = m.bearing_wear * c.wear_harmonic
        resonance = math.sin(m.operating_hours * 0.5) * c.resonance

        vib = c.base_vibration + speed_harmonic + load_harmonic + wear_harmonic + resonance
        return clamp(vib, *c.vibration_range)

    def speed(self, m: MachineState, dt_s: float) -> float:
        c = self.cfg
        target = m.target_speed
        load_response = (m.load - c.load_reference) * c.load_response_rpm
        temp_response = (m.temperature - c.reference_temp_C) * c.temp_response_rpm
        efficiency_response = (m.efficiency - c.efficiency_reference) * c.efficiency_response_rpm

        error = target + load_response - temp_response - efficiency_response - m.current_speed
        speed = m.current_speed + error * c.speed_gain_per_min * (dt_s / 60.0)

        lo, hi = c.speed_band
        return clamp(speed, target * lo, target * hi)

    def load(self, m: MachineState, season: float) -> float:
        c = self.cfg
        h = m.operating_hours
        production_cycle = math.sin(h * c.production_cycle_freq) * c.production_cycle_amp
        demand = math.sin(h * c.demand_freq) * c.demand_amp
        efficiency_variation = (m.efficiency - c.efficiency_reference) * c.load_per_efficiency
        seasonal_variation = season * c.load_per_season

        load = c.base_load + production_cycle + demand + efficiency_variation + seasonal_variation
        return clamp(load, *c.load_range)

    def power(self, m: MachineState) -> float:
        c = self.cfg
        power = (
            c.base_power
            + m.load * c.power_per_load
            + (100.0 - m.efficiency) * c.power_per_efficiency_loss
            + (m.temperature - c.reference_temp_C) * c.power_per_temp
            + m.bearing_wear * c.power_per_wear
        )
        return clamp(power, *c.power_range)

    def health(self, m: MachineState) -> float:
        c = self.cfg
        wear_impact = m.bearing_wear * c.health_wear_weight
        oil_impact = m.oil_degradation * c.health_oil_weight
        temp_impact = max(0.0, (m.temperature - c.derating_temp_C) * c.health_temp_weight)
        vibration_impact = (m.vibration - c.base_vibration) * c.health_vibration_weight
        efficiency_impact = (100.0 - m.efficiency) * c.health_efficiency_weight
        age_impact = m.operating_hours * c.health_age_weight

        score = 100.0 - wear_impact - oil_impact - temp_impact - vibration_impact - efficiency_impact - age_impact
        return clamp(score, *c.health_range)

    # ---------- тик ----------

    def tick(self, machine: MachineState, elapsed_s: float, now: datetime) -> None:
        """Продвинуть машину на elapsed_s секунд (in place)."""

        if not machine.is_running:
            return

        dt = float(elapsed_s)
        ensure_finite(dt, "elapsed_s")
        ensure_non_negative(dt, "elapsed_s")

        season = seasonal_factor(now, self.env)
        ambient = ambient_temperature(now, self.env)
        m = machine

        m.operating_hours += seconds_to_hours(dt)

        m.bearing_wear += bearing_wear_increment(
            self.cfg, speed_rpm=m.current_speed, load=m.load, temperature_C=m.temperature, dt_s=dt
        )
        m.oil_degradation += oil_degradation_increment(self.cfg, temperature_C=m.temperature, dt_s=dt)

        m.temperature = next_temperature(
            self.cfg,
            temperature_C=m.temperature,
            ambient_C=ambient,
            load=m.load,
            speed_rpm=m.current_speed,
            dt_s=dt,
        )

        m.efficiency = self.efficiency(m)
        m.vibration = self.vibration(m)
        m.current_speed = self.speed(m, dt)
        m.load = self.load(m, season)
        m.power_consumption = self.power(m)
        m.health_score = self.health(m)
        m.maintenance_status = classify(m, self.thresholds)

    def __repr__(self) -> str:
        return f"PhysicsEngine(nominal_speed={self.cfg.nominal_speed_rpm} rpm)"
