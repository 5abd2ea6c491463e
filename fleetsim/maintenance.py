"""Классификатор статуса обслуживания.

Статус не хранится как история переходов: на каждом тике он заново
выводится из текущих метрик. Порядок проверок — приоритет (первое
совпадение выигрывает): Critical -> Warning -> MaintenanceDue -> Good.

Гистерезиса нет: машина на границе порога может переключаться между
Warning и Critical от тика к тику.
"""

from __future__ import annotations

from typing import Any
import math

from fleetsim.config.models import MaintenanceThresholds
from fleetsim.core.types import MaintenanceStatus


_DEFAULT_THRESHOLDS = MaintenanceThresholds()


def is_critical(machine: Any, thr: MaintenanceThresholds = _DEFAULT_THRESHOLDS) -> bool:
    return (
        machine.bearing_wear > thr.critical_wear
        or machine.oil_degradation > thr.critical_oil
        or machine.temperature > thr.critical_temp_C
        or machine.vibration > thr.critical_vibration
    )


def is_warning(machine: Any, thr: MaintenanceThresholds = _DEFAULT_THRESHOLDS) -> bool:
    return (
        machine.bearing_wear > thr.warning_wear
        or machine.oil_degradation > thr.warning_oil
        or machine.temperature > thr.warning_temp_C
        or machine.vibration > thr.warning_vibration
        or machine.efficiency < thr.warning_efficiency
    )


def is_service_due(operating_hours: float, thr: MaintenanceThresholds = _DEFAULT_THRESHOLDS) -> bool:
    # NOTE: floor(h) % 100 == 0 выполняется и для h в (0, 1):
    # первый час после пуска тоже попадает в сервисное окно.
    hours = float(operating_hours)
    return hours > 0.0 and int(math.floor(hours)) % thr.service_interval_h == 0


def classify(machine: Any, thr: MaintenanceThresholds = _DEFAULT_THRESHOLDS) -> MaintenanceStatus:
    """Статус по (wear, oil, temperature, vibration, efficiency, hours).

    `machine` — любой объект с этими атрибутами (MachineState или MachineSnapshot).
    """

    if is_critical(machine, thr):
        return MaintenanceStatus.CRITICAL
    if is_warning(machine, thr):
        return MaintenanceStatus.WARNING
    if is_service_due(machine.operating_hours, thr):
        return MaintenanceStatus.MAINTENANCE_DUE
    return MaintenanceStatus.GOOD
