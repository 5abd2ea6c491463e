#!/usr/bin/env python
"""
Run Fleet Simulator: record machine traces to HDF5 and summarize them

Usage:
    python scripts/run_simulator.py [--hours 24] [--step 60] [--seed 42]
    python -m fleetsim.generate_dataset  # Alternative (trace only, no summary)

Output:
    <output-dir>/trace.h5              — per-machine timelines
    <output-dir>/machines_meta.jsonl   — one meta line per machine
    <output-dir>/fleet.json            — roster (index, id, name, type)
    <output-dir>/summary.csv           — per-machine summary
    <output-dir>/plots/machine_XX.png  — only with --plots
"""

import sys
import argparse
import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fleetsim.config import SystemConfig
from fleetsim.generator import GeneratorSettings, TraceGenerator
from fleetsim.summary import summarize_trace, write_summary_csv


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Simulate an industrial machine fleet and record traces",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One working day (quick test)
  python scripts/run_simulator.py --hours 8 --start 2025-01-08T08:00

  # One week at 5-minute resolution with plots
  python scripts/run_simulator.py --hours 168 --step 300 --plots
        """
    )

    parser.add_argument(
        "--hours",
        type=float,
        default=24.0,
        help="Simulated duration in hours (default: 24)"
    )

    parser.add_argument(
        "--step",
        type=float,
        default=60.0,
        help="Simulation step in seconds (default: 60)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Sensor noise seed (default: 42)"
    )

    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="ISO start time (default: 2025-01-06T06:00, Monday before the shift)"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default="data/raw/fleet",
        help="Output directory (default: data/raw/fleet)"
    )

    parser.add_argument(
        "--no-shifts",
        action="store_true",
        help="Do not start/stop shift machines by working hours"
    )

    parser.add_argument(
        "--plots",
        action="store_true",
        help="Also write one PNG per machine"
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output"
    )

    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()

    if args.hours <= 0 or args.step <= 0:
        print("Error: --hours and --step must be > 0")
        sys.exit(1)

    try:
        start = datetime.fromisoformat(args.start) if args.start else None
    except ValueError:
        print(f"Error: invalid --start: {args.start}")
        sys.exit(1)

    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if not args.quiet:
        print(f"\n{'='*70}")
        print("Industrial Fleet Simulator - Trace Generation")
        print(f"{'='*70}")
        print(f"Duration: {args.hours:g} h")
        print(f"Step: {args.step:g} s")
        print(f"Seed: {args.seed}")
        print(f"Output directory: {output_dir}")
        print(f"{'='*70}\n")

    base = SystemConfig()
    cfg = replace(base, sim=replace(base.sim, seed=args.seed, record_step_s=args.step, duration_h=args.hours))
    settings = GeneratorSettings(
        out_dir=str(output_dir),
        start=start,
        follow_shifts=not args.no_shifts,
    )

    try:
        h5_path = TraceGenerator(cfg, settings).run()
        csv_path = write_summary_csv(h5_path, output_dir / "summary.csv")

        plots = []
        if args.plots:
            from fleetsim.plots import plot_trace

            plots = plot_trace(h5_path, output_dir / "plots")

        if not args.quiet:
            df = summarize_trace(h5_path)
            print(df[["machine_id", "running_hours", "energy_kWh", "final_health", "final_status"]].to_string(index=False))

        print(f"\n✓ Simulation completed successfully!")
        print(f"Output files:")
        print(f"  - {h5_path}")
        print(f"  - {csv_path}")
        if plots:
            print(f"  - {output_dir / 'plots'} ({len(plots)} PNG)")

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\nError during simulation: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
