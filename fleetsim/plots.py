"""Быстрая визуальная проверка записанной трассы парка.

По одному PNG на машину: все поля таймлайна на одной странице (мультиплот).
Используется backend Agg: скрипт работает без дисплея.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import h5py
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402


PLOT_FIELDS = (
    "speed",
    "temperature",
    "load",
    "efficiency",
    "power_consumption",
    "vibration",
    "health_score",
    "bearing_wear",
    "oil_degradation",
    "maintenance_status",
)

UNITS = {
    "speed": "rpm",
    "temperature": "C",
    "load": "",
    "efficiency": "%",
    "power_consumption": "kW",
    "vibration": "mm/s",
    "health_score": "",
}


def plot_trace(
    h5_path: str | Path,
    out_dir: str | Path = "plots",
    machines: Sequence[int] | None = None,
    fields: Sequence[str] = PLOT_FIELDS,
) -> List[Path]:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    with h5py.File(h5_path, "r") as f:
        grp = f["machines"]
        keys = sorted(grp.keys())
        if machines is not None:
            wanted = {f"machine_{i:02d}" for i in machines}
            keys = [k for k in keys if k in wanted]

        for key in keys:
            g = grp[key]
            t = g["time_h"][:]
            names = [name for name in fields if name in g]
            if not names:
                continue

            cols = 2
            rows = int(np.ceil(len(names) / cols))
            fig, axes = plt.subplots(rows, cols, figsize=(14, 2.2 * rows), sharex=True)
            axes = np.array(axes).reshape(-1)

            for i, name in enumerate(names):
                ax = axes[i]
                ax.plot(t, g[name][:], linewidth=0.8)
                unit = UNITS.get(name, "")
                ax.set_title(name + (f" [{unit}]" if unit else ""))
                ax.grid(True, alpha=0.3)

            for j in range(len(names), len(axes)):
                axes[j].axis("off")

            machine_id = g.attrs["machine_id"]
            if isinstance(machine_id, (bytes, np.bytes_)):
                machine_id = machine_id.decode()
            fig.suptitle(f"{key} / {machine_id}")
            for ax in axes[-cols:]:
                ax.set_xlabel("t, h")
            fig.tight_layout()

            path = out / f"{key}.png"
            fig.savefig(path, dpi=100)
            plt.close(fig)
            written.append(path)

    return written
