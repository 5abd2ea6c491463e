import pytest

from fleetsim.config import (
    ARCHETYPE_PROFILES,
    DEFAULT_FLEET_SIZE,
    ArchetypeProfile,
    BaselineConfig,
    EnvironmentConfig,
    MaintenanceThresholds,
    PhysicsConfig,
    SensorConfig,
    SimulationConfig,
    SystemConfig,
)
from fleetsim.core.types import MachineType


class TestSystemConfig:
    def test_defaults_construct(self):
        cfg = SystemConfig()
        assert cfg.physics.nominal_speed_rpm == pytest.approx(2500.0)
        assert cfg.maintenance.critical_wear == pytest.approx(0.1)
        assert cfg.environment.work_days == (0, 1, 2, 3, 4)
        assert cfg.sim.read_step_s == pytest.approx(1.0)

    def test_frozen(self):
        cfg = SystemConfig()
        with pytest.raises(AttributeError):
            cfg.sim = SimulationConfig(seed=1)  # type: ignore[misc]

    def test_baseline_matches_main_motor(self):
        b = BaselineConfig()
        assert b.machine_id == "MOTOR-001"
        assert b.speed_rpm == pytest.approx(2500.0)
        assert b.temperature_C == pytest.approx(65.0)
        assert b.load == pytest.approx(0.7)
        assert b.health_score == pytest.approx(95.0)


class TestValidation:
    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError, match="efficiency_range"):
            PhysicsConfig(efficiency_range=(96.0, 70.0))

    def test_non_positive_nominal_speed_rejected(self):
        with pytest.raises(ValueError):
            PhysicsConfig(nominal_speed_rpm=0.0)

    def test_work_hours_must_be_ordered(self):
        with pytest.raises(ValueError):
            EnvironmentConfig(work_start_hour=18, work_end_hour=8)

    def test_service_interval_positive(self):
        with pytest.raises(ValueError):
            MaintenanceThresholds(service_interval_h=0)

    def test_negative_jitter_rejected(self):
        with pytest.raises(ValueError, match="jitter"):
            SensorConfig(jitter={"speed": -1.0})

    def test_non_finite_instrument_rejected(self):
        with pytest.raises(ValueError, match="instruments"):
            SensorConfig(instruments={"voltage": float("nan")})

    def test_every_instrument_has_noise_range(self):
        cfg = SensorConfig()
        assert set(cfg.instruments) <= set(cfg.jitter)

    def test_read_step_positive(self):
        with pytest.raises(ValueError):
            SimulationConfig(read_step_s=0.0)

    def test_baseline_load_in_unit_interval(self):
        with pytest.raises(ValueError):
            BaselineConfig(load=1.5)


class TestArchetypeProfiles:
    def test_roster_size_and_order(self):
        assert DEFAULT_FLEET_SIZE == 17
        ids = [p.machine_id for p in ARCHETYPE_PROFILES]
        assert ids[0] == "MOTOR-001"
        assert ids[1:4] == ["PUMP-101", "PUMP-102", "PUMP-103"]
        assert ids[-1] == "PRESS-101"
        assert len(set(ids)) == len(ids)

    def test_first_row_is_always_on_motor(self):
        first = ARCHETYPE_PROFILES[0]
        assert first.duty == "always_on"
        assert first.machine_type == MachineType.MOTOR
        assert first.ratios == (1.0, 1.0, 1.0, 1.0, 1.0, 1.0)

    def test_pump1_efficiency_ratio(self):
        pump1 = ARCHETYPE_PROFILES[1]
        assert pump1.name == "Industrial Pump 1"
        assert pump1.efficiency_ratio == pytest.approx(0.97)

    def test_generators_are_standby(self):
        gens = [p for p in ARCHETYPE_PROFILES if p.machine_type == MachineType.GENERATOR]
        assert len(gens) == 2
        assert all(p.duty == "standby" for p in gens)

    def test_profile_validation(self):
        with pytest.raises(ValueError):
            ArchetypeProfile(
                machine_id="X-1",
                name="Broken",
                machine_type=MachineType.FAN,
                duty="shift",
                speed_ratio=-0.1,
                efficiency_ratio=1.0,
                power_ratio=1.0,
                temperature_ratio=1.0,
                vibration_ratio=1.0,
                health_ratio=1.0,
                load=0.5,
            )


class TestMachineType:
    def test_ordinals_are_stable(self):
        assert [int(t) for t in MachineType] == list(range(10))
        assert MachineType.PRESS == 9

    def test_labels(self):
        assert MachineType.PUMP.label == "Pump"
        assert MachineType.label_for(3) == "Compressor"
        assert MachineType.label_for(42) == "Unknown"
