"""fleetsim package.

Важно: пакет не должен иметь побочных эффектов при импорте.
Поэтому здесь нет eager-import'ов (синтез парка, генератор, h5py).

Импортируй нужное напрямую:
- from fleetsim.api import FleetController
- from fleetsim.config import SystemConfig
"""

from __future__ import annotations

__all__: list[str] = []
