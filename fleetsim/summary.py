"""Сводка по записанной трассе парка (trace.h5 -> таблица по машинам).

Одна строка на машину:
- средние/максимальные показания за время работы;
- энергия (kWh) = сумма power * dt по шагам, где машина работала;
- финальные накопители, здоровье и статус обслуживания.
"""

from __future__ import annotations

from pathlib import Path

import h5py
import numpy as np
import pandas as pd

from fleetsim.core.types import MachineType, MaintenanceStatus


SUMMARY_COLUMNS = [
    "index",
    "machine_id",
    "name",
    "type_label",
    "running_hours",
    "mean_speed",
    "mean_temperature",
    "max_temperature",
    "mean_efficiency",
    "energy_kWh",
    "final_bearing_wear",
    "final_oil_degradation",
    "final_health",
    "final_status",
]


def _attr_str(value) -> str:
    return value.decode() if isinstance(value, (bytes, np.bytes_)) else str(value)


def _masked_mean(values: np.ndarray, mask: np.ndarray) -> float:
    if not mask.any():
        return float("nan")
    return float(np.mean(values[mask]))


def summarize_trace(h5_path: str | Path) -> pd.DataFrame:
    rows = []
    with h5py.File(h5_path, "r") as f:
        step_h = float(f.attrs.get("step_s", 60.0)) / 3600.0
        machines = f["machines"]

        for key in sorted(machines.keys()):
            g = machines[key]
            running = np.asarray(g["is_running"][:]) > 0.5
            power = np.asarray(g["power_consumption"][:], dtype=np.float64)
            temp = np.asarray(g["temperature"][:], dtype=np.float64)

            status = int(g["maintenance_status"][-1]) if len(running) else int(MaintenanceStatus.GOOD)
            rows.append(
                {
                    "index": int(key.split("_")[-1]),
                    "machine_id": _attr_str(g.attrs["machine_id"]),
                    "name": _attr_str(g.attrs["name"]),
                    "type_label": MachineType.label_for(int(g.attrs["machine_type"])),
                    "running_hours": float(running.sum() * step_h),
                    "mean_speed": _masked_mean(np.asarray(g["speed"][:]), running),
                    "mean_temperature": _masked_mean(temp, running),
                    "max_temperature": float(temp[running].max()) if running.any() else float("nan"),
                    "mean_efficiency": _masked_mean(np.asarray(g["efficiency"][:]), running),
                    "energy_kWh": float(np.sum(power[running]) * step_h),
                    "final_bearing_wear": float(g["bearing_wear"][-1]) if len(running) else 0.0,
                    "final_oil_degradation": float(g["oil_degradation"][-1]) if len(running) else 0.0,
                    "final_health": float(g.attrs["final_health"]),
                    "final_status": MaintenanceStatus(status).name,
                }
            )

    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    return df.sort_values("index").reset_index(drop=True)


def write_summary_csv(h5_path: str | Path, out_csv: str | Path) -> Path:
    out = Path(out_csv)
    out.parent.mkdir(parents=True, exist_ok=True)
    summarize_trace(h5_path).to_csv(out, index=False)
    return out
