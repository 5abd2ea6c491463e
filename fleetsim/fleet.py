"""Хранилище парка: индексированный список машин + по замку на машину.

Симуляция pull-based: время машины идёт только когда её продвигают.
Чтобы параллельные читатели одного индекса не разрывали тик, все
мутации конкретной машины (тик, управление, сброс) идут под её замком,
а наружу отдаётся неизменяемый MachineSnapshot.

Сам список фиксирован после синтеза и разделяется по ссылке.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterator, List, Sequence
import threading

from fleetsim.config.models import EnvironmentConfig
from fleetsim.core.types import MachineSnapshot
from fleetsim.environment import ambient_temperature
from fleetsim.physics.engine import PhysicsEngine
from fleetsim.state import MachineState


class Fleet:
    def __init__(
        self,
        machines: Sequence[MachineState],
        engine: PhysicsEngine,
        env_cfg: EnvironmentConfig | None = None,
    ) -> None:
        self._machines: tuple[MachineState, ...] = tuple(machines)
        self._locks: tuple[threading.Lock, ...] = tuple(threading.Lock() for _ in self._machines)
        self._engine = engine
        self._env = env_cfg or engine.env

    def __len__(self) -> int:
        return len(self._machines)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(self._machines)

    def _check(self, index: int) -> None:
        if index not in self:
            raise IndexError(f"machine index out of range: {index}")

    # ---------- чтение ----------

    def snapshot(self, index: int, now: datetime) -> MachineSnapshot:
        """Срез без тика."""

        self._check(index)
        with self._locks[index]:
            return self._machines[index].snapshot(index, ambient_temperature(now, self._env))

    def snapshots(self, now: datetime) -> List[MachineSnapshot]:
        return [self.snapshot(i, now) for i in range(len(self))]

    def advance(self, index: int, elapsed_s: float, now: datetime) -> MachineSnapshot:
        """Тик + срез одной операцией под замком машины."""

        self._check(index)
        with self._locks[index]:
            m = self._machines[index]
            self._engine.tick(m, elapsed_s, now)
            return m.snapshot(index, ambient_temperature(now, self._env))

    def advance_all(self, elapsed_s: float, now: datetime) -> List[MachineSnapshot]:
        return [self.advance(i, elapsed_s, now) for i in range(len(self))]

    # ---------- управление ----------

    def set_running(self, index: int, running: bool) -> None:
        self._check(index)
        with self._locks[index]:
            self._machines[index].is_running = bool(running)

    def set_target_speed(self, index: int, speed_rpm: float) -> None:
        self._check(index)
        with self._locks[index]:
            self._machines[index].target_speed = float(speed_rpm)

    def reset(self, index: int) -> None:
        self._check(index)
        with self._locks[index]:
            self._machines[index].reset_wear()

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._machines)))

    def __repr__(self) -> str:
        return f"Fleet(size={len(self)})"
