from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
import logging
import numpy as np

from .api import FleetController
from .config import ARCHETYPE_PROFILES, SystemConfig
from .environment import is_working_hours
from .logger import H5Recorder, MachineMeta
from .sensors import OBSERVED_FIELDS

logger = logging.getLogger(__name__)


class SimClock:
    """Часы симуляции: generator двигает их сам, контроллер только читает."""

    def __init__(self, start: datetime):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)

    def __call__(self) -> datetime:
        return self.now


@dataclass
class GeneratorSettings:
    out_dir: str = "out_trace"
    duration_h: float | None = None  # None -> cfg.sim.duration_h
    step_s: float | None = None      # None -> cfg.sim.record_step_s
    start: datetime | None = None
    follow_shifts: bool = True  # включать/выключать сменные машины по рабочему времени


TIMELINE_FIELDS = (
    *OBSERVED_FIELDS,
    "maintenance_status",
    "bearing_wear",
    "oil_degradation",
    "operating_hours",
    "is_running",
)


class TraceGenerator:
    def __init__(self, cfg: SystemConfig, settings: GeneratorSettings):
        self.cfg = cfg
        self.settings = settings
        self.rng = np.random.default_rng(cfg.sim.seed)

        start = settings.start or datetime(2025, 1, 6, 6, 0, 0)  # понедельник, до начала смены
        self.clock = SimClock(start)
        self.controller = FleetController(cfg, rng=self.rng, clock=self.clock)

        self.duration_h = settings.duration_h if settings.duration_h is not None else cfg.sim.duration_h
        self.step_s = settings.step_s if settings.step_s is not None else cfg.sim.record_step_s

        self.recorder = H5Recorder(settings.out_dir)

    @property
    def n_steps(self) -> int:
        return int(self.duration_h * 3600.0 / self.step_s)

    def _apply_shifts(self) -> None:
        on_shift = is_working_hours(self.clock(), self.cfg.environment)
        for i, profile in enumerate(ARCHETYPE_PROFILES[: self.controller.machine_count()]):
            if profile.duty != "shift":
                continue
            if on_shift:
                self.controller.start(i)
            else:
                self.controller.stop(i)

    def run(self):
        steps = self.n_steps
        step_s = self.step_s
        fleet = self.controller.fleet
        sensors = self.controller.sensors
        start_iso = self.clock().isoformat(timespec="seconds")

        self.recorder.write_roster(self.controller.snapshots(), start_iso, step_s)

        n = len(fleet)
        time_h = np.zeros((steps,), dtype=np.float32)
        bufs = [{k: np.zeros((steps,), dtype=np.float32) for k in TIMELINE_FIELDS} for _ in range(n)]
        last = self.controller.snapshots()

        try:
            for i in range(steps):
                self.clock.advance(step_s)
                time_h[i] = (i + 1) * step_s / 3600.0

                if self.settings.follow_shifts:
                    self._apply_shifts()

                last = fleet.advance_all(step_s, self.clock())
                for snap in last:
                    obs = sensors.observe(snap)
                    for k in TIMELINE_FIELDS:
                        bufs[snap.index][k][i] = obs.get(k, np.nan)

            for snap in last:
                meta = MachineMeta(
                    index=snap.index,
                    machine_id=snap.machine_id,
                    name=snap.name,
                    machine_type=int(snap.machine_type),
                    type_label=snap.machine_type.label,
                    duty=ARCHETYPE_PROFILES[snap.index].duty if snap.index < len(ARCHETYPE_PROFILES) else "shift",
                    start_time=start_iso,
                    step_s=step_s,
                    n_steps=steps,
                    final_status=int(snap.maintenance_status),
                    final_health=snap.health_score,
                )
                self.recorder.log_machine(meta, {"time_h": time_h, **bufs[snap.index]})
                logger.info("[%d/%d] %s written", snap.index + 1, n, snap.machine_id)
        finally:
            self.recorder.close()

        logger.info("Done. Output: %s", Path(self.settings.out_dir).resolve())
        return self.recorder.h5_path
