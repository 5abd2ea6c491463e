from __future__ import annotations
from typing import Dict, Tuple
import numpy as np

from .config import SystemConfig
from .core.types import MachineSnapshot, MetricName


# поля снимка, которые уходят потребителю как «показания датчиков»
OBSERVED_FIELDS: Tuple[MetricName, ...] = (
    "speed",
    "temperature",
    "load",
    "efficiency",
    "power_consumption",
    "vibration",
    "health_score",
    "pressure",
    "flow_rate",
)


class SensorModel:
    """Шум чтения поверх детерминированного состояния физики.

    RNG инжектируется снаружи (numpy Generator), поэтому при одинаковом seed
    последовательность показаний воспроизводима.
    """

    def __init__(self, cfg: SystemConfig, rng: np.random.Generator):
        self.cfg = cfg
        self.rng = rng

    def half_range(self, name: str) -> float:
        return float(self.cfg.sensor.jitter.get(name, 0.0))

    def jitter(self, name: str, value: float) -> float:
        h = self.half_range(name)
        if h <= 0.0:
            return float(value)
        return float(value + self.rng.uniform(-h, h))

    def instrument(self, name: str) -> float:
        """Показание прибора: номинал из cfg.sensor.instruments + шум. KeyError для неизвестного прибора."""

        return self.jitter(name, self.cfg.sensor.instruments[name])

    def observe(self, snap: MachineSnapshot) -> Dict[str, float]:
        out = {}
        for k in OBSERVED_FIELDS:
            out[k] = self.jitter(k, snap.metric(k))
        out["maintenance_status"] = float(int(snap.maintenance_status))
        out["bearing_wear"] = snap.bearing_wear
        out["oil_degradation"] = snap.oil_degradation
        out["operating_hours"] = snap.operating_hours
        out["is_running"] = 1.0 if snap.is_running else 0.0
        return out
