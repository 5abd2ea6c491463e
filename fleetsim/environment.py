"""Модель окружения: рабочее время, сезонность, температура цеха.

Все функции чистые: зависят только от переданного `now` и конфига.
Часы не читаются внутри — источник времени передаёт вызывающий код
(FleetController держит инжектируемый clock).
"""

from __future__ import annotations

from datetime import datetime
import math

from fleetsim.config.models import EnvironmentConfig


_DEFAULT_ENV = EnvironmentConfig()


def day_of_year(now: datetime) -> int:
    """Номер дня в году с нуля (1 января -> 0)."""

    return now.timetuple().tm_yday - 1


def is_working_hours(now: datetime, cfg: EnvironmentConfig = _DEFAULT_ENV) -> bool:
    return now.weekday() in cfg.work_days and cfg.work_start_hour <= now.hour < cfg.work_end_hour


def seasonal_factor(now: datetime, cfg: EnvironmentConfig = _DEFAULT_ENV) -> float:
    """Сезонная поправка в [-A, A], период — days_per_year дней."""

    phase = 2.0 * math.pi * day_of_year(now) / cfg.days_per_year
    return float(cfg.seasonal_amplitude * math.sin(phase))


def ambient_temperature(now: datetime, cfg: EnvironmentConfig = _DEFAULT_ENV) -> float:
    return float(cfg.ambient_base_C + seasonal_factor(now, cfg) * cfg.ambient_seasonal_gain_C)
