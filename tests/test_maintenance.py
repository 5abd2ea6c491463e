import pytest

from fleetsim.config import MaintenanceThresholds
from fleetsim.core.types import MachineType, MaintenanceStatus
from fleetsim.maintenance import classify, is_service_due
from fleetsim.state import MachineState


@pytest.fixture
def nominal():
    """Машина с метриками в норме и наработкой вне сервисного окна."""

    return MachineState(
        machine_id="MOTOR-001",
        name="Main Drive Motor",
        machine_type=MachineType.MOTOR,
        is_running=True,
        temperature=65.0,
        efficiency=92.0,
        vibration=1.5,
        operating_hours=42.5,
    )


class TestClassify:
    def test_nominal_is_good(self, nominal):
        assert classify(nominal) == MaintenanceStatus.GOOD

    def test_worn_bearings_are_critical(self, nominal):
        nominal.bearing_wear = 0.15
        assert classify(nominal) == MaintenanceStatus.CRITICAL

    def test_critical_regardless_of_efficiency_and_temperature(self, nominal):
        nominal.bearing_wear = 0.15
        nominal.efficiency = 60.0
        nominal.temperature = 20.0
        assert classify(nominal) == MaintenanceStatus.CRITICAL

    @pytest.mark.parametrize(
        "field, value",
        [
            ("oil_degradation", 0.06),
            ("temperature", 91.0),
            ("vibration", 3.1),
        ],
    )
    def test_other_critical_triggers(self, nominal, field, value):
        setattr(nominal, field, value)
        assert classify(nominal) == MaintenanceStatus.CRITICAL

    @pytest.mark.parametrize(
        "field, value",
        [
            ("bearing_wear", 0.06),
            ("oil_degradation", 0.03),
            ("temperature", 85.0),
            ("vibration", 2.6),
            ("efficiency", 84.0),
        ],
    )
    def test_warning_triggers(self, nominal, field, value):
        setattr(nominal, field, value)
        assert classify(nominal) == MaintenanceStatus.WARNING

    def test_thresholds_are_strict(self, nominal):
        nominal.bearing_wear = 0.1
        assert classify(nominal) == MaintenanceStatus.WARNING
        nominal.bearing_wear = 0.05
        assert classify(nominal) == MaintenanceStatus.GOOD

    def test_warning_beats_service_window(self, nominal):
        nominal.operating_hours = 200.5
        nominal.vibration = 2.6
        assert classify(nominal) == MaintenanceStatus.WARNING

    def test_service_window(self, nominal):
        nominal.operating_hours = 100.4
        assert classify(nominal) == MaintenanceStatus.MAINTENANCE_DUE
        nominal.operating_hours = 101.0
        assert classify(nominal) == MaintenanceStatus.GOOD

    def test_deterministic(self, nominal):
        nominal.oil_degradation = 0.03
        assert {classify(nominal) for _ in range(10)} == {MaintenanceStatus.WARNING}

    def test_custom_thresholds(self, nominal):
        thr = MaintenanceThresholds(critical_vibration=1.0)
        assert classify(nominal, thr) == MaintenanceStatus.CRITICAL

    def test_accepts_snapshot(self, nominal):
        snap = nominal.snapshot(0, ambient_temperature=22.0)
        assert classify(snap) == classify(nominal)


class TestServiceDue:
    @pytest.mark.parametrize(
        "hours, expected",
        [
            (0.0, False),
            (0.5, True),
            (1.0, False),
            (99.9, False),
            (100.0, True),
            (100.99, True),
            (300.2, True),
        ],
    )
    def test_window(self, hours, expected):
        assert is_service_due(hours) is expected
