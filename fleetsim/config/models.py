from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from fleetsim.core.units import DAYS_PER_YEAR, NOMINAL_SPEED_RPM, REFERENCE_TEMPERATURE_C
from fleetsim.core.validation import (
    ensure_finite,
    ensure_fraction,
    ensure_in_range,
    ensure_non_negative,
    ensure_ordered,
    ensure_positive,
)


Range = Tuple[float, float]


@dataclass(frozen=True)
class PhysicsConfig:
    # нормировка
    nominal_speed_rpm: float = NOMINAL_SPEED_RPM
    reference_temp_C: float = REFERENCE_TEMPERATURE_C

    # износ подшипников / деградация масла (в долях за час работы)
    wear_rate_per_h: float = 0.0008
    wear_temp_gain: float = 0.5
    wear_temp_span_C: float = 30.0
    oil_rate_per_h: float = 0.00015
    oil_temp_gain: float = 0.3
    oil_temp_span_C: float = 20.0

    # тепловой баланс (dT в C за минуту)
    heat_per_load: float = 15.0
    heat_per_speed: float = 8.0
    cooling_base: float = 0.8
    cooling_per_speed: float = 0.4      # на высоких оборотах охлаждение лучше
    max_temperature_C: float = 120.0

    # КПД (%)
    base_efficiency: float = 95.0
    efficiency_wear_loss: float = 120.0
    efficiency_oil_loss: float = 80.0
    derating_temp_C: float = 75.0
    efficiency_temp_loss: float = 0.2
    optimal_load: float = 0.8
    efficiency_load_loss: float = 5.0
    efficiency_range: Range = (70.0, 96.0)

    # вибрация (mm/s): гармоники + резонанс по наработке
    base_vibration: float = 1.0
    speed_harmonic: float = 0.3
    load_harmonic: float = 0.2
    wear_harmonic: float = 15.0
    resonance: float = 0.1
    vibration_range: Range = (0.5, 8.0)

    # регулятор скорости (доля рассогласования за минуту)
    speed_gain_per_min: float = 0.1
    load_reference: float = 0.7
    load_response_rpm: float = 300.0
    temp_response_rpm: float = 1.5
    efficiency_reference: float = 90.0
    efficiency_response_rpm: float = 2.0
    speed_band: Range = (0.7, 1.3)      # доли target_speed

    # нагрузка: производственный цикл ~20 ч, спрос ~5 ч
    base_load: float = 0.75
    production_cycle_amp: float = 0.15
    production_cycle_freq: float = 0.05
    demand_amp: float = 0.1
    demand_freq: float = 0.2
    load_per_efficiency: float = 0.01
    load_per_season: float = 0.05
    load_range: Range = (0.2, 1.0)

    # потребляемая мощность (kW)
    base_power: float = 4.5
    power_per_load: float = 1.8
    power_per_efficiency_loss: float = 0.15
    power_per_temp: float = 0.05
    power_per_wear: float = 50.0
    power_range: Range = (2.0, 15.0)

    # индекс здоровья (0..100)
    health_wear_weight: float = 250.0
    health_oil_weight: float = 150.0
    health_temp_weight: float = 0.8
    health_vibration_weight: float = 12.0
    health_efficiency_weight: float = 0.8
    health_age_weight: float = 0.01
    health_range: Range = (0.0, 100.0)

    def __post_init__(self) -> None:
        ensure_positive(self.nominal_speed_rpm, "nominal_speed_rpm")
        ensure_positive(self.wear_temp_span_C, "wear_temp_span_C")
        ensure_positive(self.oil_temp_span_C, "oil_temp_span_C")
        ensure_non_negative(self.wear_rate_per_h, "wear_rate_per_h")
        ensure_non_negative(self.oil_rate_per_h, "oil_rate_per_h")
        for name in ("efficiency_range", "vibration_range", "speed_band", "load_range", "power_range", "health_range"):
            lo, hi = getattr(self, name)
            ensure_ordered(lo, hi, name)


@dataclass(frozen=True)
class MaintenanceThresholds:
    critical_wear: float = 0.1
    critical_oil: float = 0.05
    critical_temp_C: float = 90.0
    critical_vibration: float = 3.0

    warning_wear: float = 0.05
    warning_oil: float = 0.02
    warning_temp_C: float = 80.0
    warning_vibration: float = 2.5
    warning_efficiency: float = 85.0

    service_interval_h: int = 100

    def __post_init__(self) -> None:
        ensure_positive(self.service_interval_h, "service_interval_h")


@dataclass(frozen=True)
class EnvironmentConfig:
    # рабочее время: [start, end) по часам, дни datetime.weekday() (0 = понедельник)
    work_start_hour: int = 8
    work_end_hour: int = 18
    work_days: Tuple[int, ...] = (0, 1, 2, 3, 4)

    seasonal_amplitude: float = 0.1
    days_per_year: float = DAYS_PER_YEAR

    ambient_base_C: float = 22.0
    ambient_seasonal_gain_C: float = 5.0

    humidity_base_pct: float = 50.0
    humidity_seasonal_gain_pct: float = 10.0

    def __post_init__(self) -> None:
        ensure_in_range(self.work_start_hour, 0, 24, "work_start_hour")
        ensure_in_range(self.work_end_hour, 0, 24, "work_end_hour")
        ensure_ordered(self.work_start_hour, self.work_end_hour, "work_hours")
        ensure_positive(self.days_per_year, "days_per_year")
        ensure_non_negative(self.seasonal_amplitude, "seasonal_amplitude")


@dataclass(frozen=True)
class SensorConfig:
    # равномерный шум ±half_range, добавляется только при чтении
    jitter: Dict[str, float] = field(default_factory=lambda: {
        "speed": 1.0,
        "temperature": 0.5,
        "load": 0.05,
        "efficiency": 0.5,
        "power_consumption": 0.2,
        "vibration": 0.1,
        "health_score": 1.0,
        "ambient_temperature": 1.0,
        # приборы главного двигателя
        "oil_pressure": 0.1,
        "air_pressure": 0.2,
        "hydraulic_pressure": 5.0,
        "coolant_flow_rate": 1.0,
        "fuel_flow_rate": 0.5,
        "voltage": 2.0,
        "current": 1.0,
        "power_factor": 0.02,
        "torque": 2.0,
        "humidity": 3.0,
        "ambient_pressure": 0.2,
        "displacement": 0.05,
        "strain_gauge_1": 50.0,
        "strain_gauge_2": 40.0,
        "strain_gauge_3": 45.0,
        "sound_level": 3.0,
        "bearing_health": 2.0,
    })

    # номинальные показания приборов главного двигателя (шум из jitter)
    instruments: Dict[str, float] = field(default_factory=lambda: {
        "oil_pressure": 3.5,          # bar
        "air_pressure": 7.2,          # bar
        "hydraulic_pressure": 175.0,  # bar
        "coolant_flow_rate": 15.0,    # l/min
        "fuel_flow_rate": 10.0,       # l/h
        "voltage": 230.0,             # V
        "current": 20.0,              # A
        "power_factor": 0.92,
        "torque": 55.0,               # N*m
        "ambient_pressure": 101.3,    # kPa
        "displacement": 0.1,          # mm
        "strain_gauge_1": 400.0,      # microstrain
        "strain_gauge_2": 350.0,
        "strain_gauge_3": 380.0,
        "sound_level": 70.0,          # dB
        "bearing_health": 95.0,       # %
    })

    def __post_init__(self) -> None:
        for name, half_range in self.jitter.items():
            ensure_non_negative(half_range, f"jitter[{name}]")
        for name, value in self.instruments.items():
            ensure_finite(value, f"instruments[{name}]")


@dataclass(frozen=True)
class SimulationConfig:
    seed: int = 42
    read_step_s: float = 1.0        # шаг тика, который делает каждое чтение метрики

    # запись трасс (generator)
    record_step_s: float = 60.0
    duration_h: float = 24.0

    def __post_init__(self) -> None:
        ensure_positive(self.read_step_s, "read_step_s")
        ensure_positive(self.record_step_s, "record_step_s")
        ensure_positive(self.duration_h, "duration_h")


@dataclass(frozen=True)
class BaselineConfig:
    """Эталонная запись главного двигателя, из неё выводится весь парк."""

    machine_id: str = "MOTOR-001"
    name: str = "Main Drive Motor"
    speed_rpm: float = 2500.0
    temperature_C: float = 65.0
    load: float = 0.7
    efficiency: float = 92.0
    power_kW: float = 4.5
    vibration: float = 1.5
    pressure_bar: float = 3.5
    flow_rate: float = 15.0
    health_score: float = 95.0

    def __post_init__(self) -> None:
        ensure_non_negative(self.speed_rpm, "speed_rpm")
        ensure_fraction(self.load, "load")
        ensure_in_range(self.health_score, 0.0, 100.0, "health_score")


@dataclass(frozen=True)
class SystemConfig:
    physics: PhysicsConfig = PhysicsConfig()
    maintenance: MaintenanceThresholds = MaintenanceThresholds()
    environment: EnvironmentConfig = EnvironmentConfig()
    sensor: SensorConfig = SensorConfig()
    sim: SimulationConfig = SimulationConfig()
    baseline: BaselineConfig = BaselineConfig()
