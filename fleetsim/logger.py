from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, List
from pathlib import Path
import json
import h5py
import numpy as np

from .core.types import MachineSnapshot


@dataclass
class MachineMeta:
    index: int
    machine_id: str
    name: str
    machine_type: int
    type_label: str
    duty: str
    start_time: str
    step_s: float
    n_steps: int
    final_status: int
    final_health: float


class H5Recorder:
    def __init__(self, out_dir: str | Path):
        self.out_dir = Path(out_dir)
        self.out_dir.mkdir(parents=True, exist_ok=True)

        self.h5_path = self.out_dir / "trace.h5"
        self.meta_path = self.out_dir / "machines_meta.jsonl"
        self.roster_path = self.out_dir / "fleet.json"

        self.h5 = h5py.File(self.h5_path, "w")
        self.grp = self.h5.create_group("machines")

        self._meta_f = open(self.meta_path, "w", encoding="utf-8")

    def write_roster(self, snapshots: List[MachineSnapshot], start_time: str, step_s: float):
        # Важно: index в ростере совпадает с индексом группы machine_XX в trace.h5
        roster = {
            "machines": [
                {
                    "index": s.index,
                    "id": s.machine_id,
                    "name": s.name,
                    "type": int(s.machine_type),
                    "type_label": s.machine_type.label,
                }
                for s in snapshots
            ],
            "start_time": start_time,
            "step_s": float(step_s),
        }
        self.h5.attrs["start_time"] = start_time
        self.h5.attrs["step_s"] = float(step_s)
        self.roster_path.write_text(json.dumps(roster, ensure_ascii=False, indent=2), encoding="utf-8")

    def log_machine(self, meta: MachineMeta, timeline: Dict[str, np.ndarray]):
        mid = f"machine_{meta.index:02d}"
        g = self.grp.create_group(mid)

        for k, arr in timeline.items():
            g.create_dataset(k, data=np.asarray(arr, dtype=np.float32), compression="gzip", compression_opts=5)

        g.attrs["machine_id"] = meta.machine_id
        g.attrs["name"] = meta.name
        g.attrs["machine_type"] = meta.machine_type
        g.attrs["type_label"] = meta.type_label
        g.attrs["duty"] = meta.duty
        g.attrs["final_status"] = meta.final_status
        g.attrs["final_health"] = meta.final_health

        self._meta_f.write(json.dumps(asdict(meta), ensure_ascii=False) + "\n")
        self._meta_f.flush()

    def close(self):
        self._meta_f.close()
        self.h5.close()
