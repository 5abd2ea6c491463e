from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from datetime import datetime

from fleetsim.config import SystemConfig
from fleetsim.generator import GeneratorSettings, TraceGenerator


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", type=str, default="out_trace")
    ap.add_argument("--hours", type=float, default=24.0)
    ap.add_argument("--step", type=float, default=60.0, help="seconds per simulation step")
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--start", type=str, default=None, help="ISO start time, e.g. 2025-01-06T06:00")
    ap.add_argument("--no-shifts", action="store_true", help="keep running state fixed after synthesis")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO)

    base = SystemConfig()
    cfg = replace(base, sim=replace(base.sim, seed=args.seed, record_step_s=args.step, duration_h=args.hours))
    settings = GeneratorSettings(
        out_dir=args.out,
        duration_h=args.hours,
        step_s=args.step,
        start=datetime.fromisoformat(args.start) if args.start else None,
        follow_shifts=not args.no_shifts,
    )

    gen = TraceGenerator(cfg, settings)
    gen.run()


if __name__ == "__main__":
    main()
