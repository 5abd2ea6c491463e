from __future__ import annotations
from dataclasses import dataclass, replace

from .core.types import MachineSnapshot, MachineType, MaintenanceStatus


@dataclass
class MachineState:
    # идентичность (задаётся при создании, дальше не меняется)
    machine_id: str
    name: str
    machine_type: MachineType

    is_running: bool = False

    # скорость (rpm)
    current_speed: float = 0.0
    target_speed: float = 0.0

    # рабочие метрики
    temperature: float = 25.0        # C
    load: float = 0.0                # 0..1
    efficiency: float = 90.0         # %
    power_consumption: float = 0.0   # kW
    vibration: float = 1.0           # mm/s
    pressure: float = 0.0            # bar, не обновляется тиком
    flow_rate: float = 0.0           # m3/h, не обновляется тиком

    # накопители (растут только пока машина работает)
    bearing_wear: float = 0.0
    oil_degradation: float = 0.0
    operating_hours: float = 0.0

    health_score: float = 95.0
    maintenance_status: MaintenanceStatus = MaintenanceStatus.GOOD

    def copy(self) -> "MachineState":
        return replace(self)

    def reset_wear(self) -> None:
        self.bearing_wear = 0.0
        self.oil_degradation = 0.0
        self.operating_hours = 0.0
        self.health_score = 95.0
        self.maintenance_status = MaintenanceStatus.GOOD

    def snapshot(self, index: int, ambient_temperature: float) -> MachineSnapshot:
        return MachineSnapshot(
            index=int(index),
            machine_id=self.machine_id,
            name=self.name,
            machine_type=MachineType(self.machine_type),
            is_running=bool(self.is_running),
            current_speed=float(self.current_speed),
            target_speed=float(self.target_speed),
            temperature=float(self.temperature),
            load=float(self.load),
            efficiency=float(self.efficiency),
            power_consumption=float(self.power_consumption),
            vibration=float(self.vibration),
            pressure=float(self.pressure),
            flow_rate=float(self.flow_rate),
            bearing_wear=float(self.bearing_wear),
            oil_degradation=float(self.oil_degradation),
            operating_hours=float(self.operating_hours),
            health_score=float(self.health_score),
            maintenance_status=MaintenanceStatus(self.maintenance_status),
            ambient_temperature=float(ambient_temperature),
        )
