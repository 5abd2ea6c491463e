import math
from datetime import datetime

import pytest

from fleetsim.config import PhysicsConfig, SystemConfig
from fleetsim.core.types import MaintenanceStatus
from fleetsim.physics import PhysicsEngine, clamp
from fleetsim.physics.degradation import bearing_wear_increment, oil_degradation_increment
from fleetsim.physics.thermal import next_temperature
from fleetsim.synthesizer import baseline_from_config


NOW = datetime(2025, 4, 2, 10, 0)


@pytest.fixture
def engine():
    return PhysicsEngine(SystemConfig())


@pytest.fixture
def motor():
    return baseline_from_config(SystemConfig().baseline)


def test_clamp():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.3, 0.0, 1.0) == pytest.approx(0.3)


class TestDegradation:
    cfg = PhysicsConfig()

    def test_wear_rate_at_reference(self):
        # speedFactor=1, load=1, T=T_ref -> ровно wear_rate_per_h за час
        inc = bearing_wear_increment(self.cfg, speed_rpm=2500.0, load=1.0, temperature_C=65.0, dt_s=3600.0)
        assert inc == pytest.approx(0.0008)

    def test_wear_never_negative(self):
        inc = bearing_wear_increment(self.cfg, speed_rpm=2500.0, load=1.0, temperature_C=-100.0, dt_s=3600.0)
        assert inc == 0.0

    def test_oil_rate_at_reference(self):
        inc = oil_degradation_increment(self.cfg, temperature_C=65.0, dt_s=3600.0)
        assert inc == pytest.approx(0.00015)

    def test_hot_oil_ages_faster(self):
        cold = oil_degradation_increment(self.cfg, temperature_C=65.0, dt_s=60.0)
        hot = oil_degradation_increment(self.cfg, temperature_C=85.0, dt_s=60.0)
        assert hot > cold


class TestThermal:
    cfg = PhysicsConfig()

    def test_never_below_ambient(self):
        T = next_temperature(self.cfg, temperature_C=30.0, ambient_C=25.0, load=0.0, speed_rpm=0.0, dt_s=3600.0)
        assert T >= 25.0

    def test_never_above_max(self):
        T = next_temperature(self.cfg, temperature_C=110.0, ambient_C=25.0, load=1.0, speed_rpm=5000.0, dt_s=3600.0)
        assert T <= self.cfg.max_temperature_C

    def test_small_step_heats_loaded_machine(self):
        T = next_temperature(self.cfg, temperature_C=30.0, ambient_C=22.0, load=1.0, speed_rpm=2500.0, dt_s=1.0)
        assert T > 30.0


class TestTick:
    def test_stopped_machine_unchanged(self, engine, motor):
        motor.is_running = False
        before = motor.copy()
        engine.tick(motor, 3600.0, NOW)
        assert motor == before

    def test_zero_dt_keeps_accumulators(self, engine, motor):
        engine.tick(motor, 0.0, NOW)
        assert motor.bearing_wear == 0.0
        assert motor.oil_degradation == 0.0
        assert motor.operating_hours == 0.0

    @pytest.mark.parametrize("dt", [-1.0, math.nan, math.inf])
    def test_invalid_dt_raises(self, engine, motor, dt):
        with pytest.raises(ValueError):
            engine.tick(motor, dt, NOW)

    def test_one_second_tick(self, engine, motor):
        engine.tick(motor, 1.0, NOW)
        assert motor.operating_hours == pytest.approx(1.0 / 3600.0)
        assert motor.bearing_wear > 0.0
        assert motor.oil_degradation > 0.0

    def test_bounds_hold_over_many_ticks(self, engine, motor):
        c = engine.cfg
        for i in range(2000):
            engine.tick(motor, 60.0 if i % 2 else 900.0, NOW)
            assert c.efficiency_range[0] <= motor.efficiency <= c.efficiency_range[1]
            assert c.vibration_range[0] <= motor.vibration <= c.vibration_range[1]
            assert c.load_range[0] <= motor.load <= c.load_range[1]
            assert c.power_range[0] <= motor.power_consumption <= c.power_range[1]
            assert c.health_range[0] <= motor.health_score <= c.health_range[1]
            lo, hi = c.speed_band
            assert motor.target_speed * lo <= motor.current_speed <= motor.target_speed * hi
            assert motor.temperature <= c.max_temperature_C

    def test_accumulators_monotonic(self, engine, motor):
        prev = (motor.bearing_wear, motor.oil_degradation, motor.operating_hours)
        for _ in range(500):
            engine.tick(motor, 120.0, NOW)
            cur = (motor.bearing_wear, motor.oil_degradation, motor.operating_hours)
            assert all(c >= p for c, p in zip(cur, prev))
            prev = cur

    def test_thousand_operating_hours(self, engine, motor):
        initial_health = motor.health_score
        assert initial_health == pytest.approx(95.0)

        for _ in range(1000):
            engine.tick(motor, 3600.0, NOW)

        assert motor.bearing_wear > 0.0
        assert motor.operating_hours == pytest.approx(1000.0)
        assert 0.0 <= motor.health_score < initial_health

    def test_long_run_ends_critical(self, engine, motor):
        for _ in range(1000):
            engine.tick(motor, 3600.0, NOW)
        assert motor.maintenance_status == MaintenanceStatus.CRITICAL

    def test_pressure_and_flow_are_static(self, engine, motor):
        for _ in range(50):
            engine.tick(motor, 60.0, NOW)
        assert motor.pressure == pytest.approx(3.5)
        assert motor.flow_rate == pytest.approx(15.0)

    def test_identity_preserved(self, engine, motor):
        engine.tick(motor, 60.0, NOW)
        assert motor.machine_id == "MOTOR-001"
        assert motor.name == "Main Drive Motor"


@pytest.mark.parametrize("index", range(17))
def test_bounds_hold_for_every_started_machine(engine, index):
    from fleetsim.environment import ambient_temperature
    from fleetsim.synthesizer import FleetSynthesizer

    cfg = SystemConfig()
    machines = FleetSynthesizer().synthesize(baseline_from_config(cfg.baseline), NOW)
    m = machines[index]
    m.is_running = True
    ambient = ambient_temperature(NOW, cfg.environment)
    c = engine.cfg
    lo, hi = c.speed_band

    for _ in range(300):
        engine.tick(m, 600.0, NOW)
        assert ambient <= m.temperature <= c.max_temperature_C
        assert c.efficiency_range[0] <= m.efficiency <= c.efficiency_range[1]
        assert c.vibration_range[0] <= m.vibration <= c.vibration_range[1]
        assert c.load_range[0] <= m.load <= c.load_range[1]
        assert c.power_range[0] <= m.power_consumption <= c.power_range[1]
        assert c.health_range[0] <= m.health_score <= c.health_range[1]
        assert m.target_speed * lo <= m.current_speed <= m.target_speed * hi
