#!/usr/bin/env python3
"""
Random Walk Path Generator

Generates seeded random walks for one or more walkers and exports them.

Usage:
    python -m walkpath.main [options]

Examples:
    python -m walkpath.main --steps 100 --seed 1337
    python -m walkpath.main --steps 50 --walkers 3 --gif --out-dir results/
    python -m walkpath.main --walkers 10 --pattern four --fixed-start --no-csv
    python -m walkpath.main --min-speed 2 --max-speed 5 --quiet
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import MovePattern, RunConfig, WalkConfig
from .errors import InvalidArgument
from .model.simulation import Simulation
from .export.csv_writer import CSVWriter
from .export.visualizer import Visualizer
from .export.reporter import OUTPUT_FILES, Reporter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    defaults = WalkConfig()
    parser = argparse.ArgumentParser(
        description='Seeded random walk path generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m walkpath.main --steps 100 --seed 1337
    python -m walkpath.main --steps 50 --walkers 3 --gif --out-dir results/
    python -m walkpath.main --walkers 10 --pattern four --fixed-start --no-csv
        """
    )

    # Walk shape
    parser.add_argument('--steps', type=int, default=100,
                        help='Steps per walker (default: 100)')
    parser.add_argument('--walkers', type=int, default=1,
                        help='Number of walkers (default: 1)')
    parser.add_argument('--seed', type=int, default=defaults.seed,
                        help=f'Base random seed (default: {defaults.seed})')
    parser.add_argument('--min-speed', type=float, default=defaults.min_speed,
                        help=f'Minimum walker speed (default: {defaults.min_speed})')
    parser.add_argument('--max-speed', type=float, default=defaults.max_speed,
                        help=f'Maximum walker speed (default: {defaults.max_speed})')
    parser.add_argument('--pattern', choices=[p.value for p in MovePattern],
                        default=defaults.move_pattern.value,
                        help='Move pattern: four or eight directions (default: eight)')
    parser.add_argument('--fixed-start', action='store_true', default=False,
                        help='Start every walker at the origin')
    parser.add_argument('--start-range-factor', type=float,
                        default=defaults.start_range_factor,
                        help='Spread of random start points, times sqrt(steps)')

    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=True,
                        help='Enable CSV export (default)')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=True,
                        help='Enable PNG snapshot (default)')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable PNG snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RunConfig:
    """Translate parsed arguments into a run configuration."""
    walk = WalkConfig(
        seed=args.seed,
        min_speed=args.min_speed,
        max_speed=args.max_speed,
        move_pattern=MovePattern(args.pattern),
        random_start=not args.fixed_start,
        start_range_factor=args.start_range_factor,
    )
    return RunConfig(
        total_steps=args.steps,
        num_walkers=args.walkers,
        walk=walk,
        csv_enabled=args.csv,
        snapshot_enabled=args.snapshot,
        gif_enabled=args.gif,
        quiet=args.quiet,
        out_dir=args.out_dir,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
        simulation = Simulation(config.total_steps, config.num_walkers, config.walk)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.quiet:
        print("Generating random walks...")
        print(f"  Walkers: {config.num_walkers}")
        print(f"  Steps: {config.total_steps}")
        print(f"  Pattern: {config.walk.move_pattern.value}-direction")

    simulation.generate()

    reporter = Reporter()
    if not config.quiet:
        print()
        print(reporter.describe_walkers(simulation))

    if config.csv_enabled:
        csv_path = config.out_dir / OUTPUT_FILES['csv']
        with CSVWriter(csv_path) as writer:
            rows = writer.append(simulation)
        if not config.quiet:
            print(f"\nCSV saved: {csv_path} ({rows} rows)")

    if config.snapshot_enabled or config.gif_enabled:
        visualizer = Visualizer(simulation)

        if config.snapshot_enabled:
            snapshot_path = config.out_dir / OUTPUT_FILES['snapshot']
            visualizer.save_snapshot(snapshot_path)
            if not config.quiet:
                print(f"Snapshot saved: {snapshot_path}")

        if config.gif_enabled:
            gif_path = config.out_dir / OUTPUT_FILES['gif']
            visualizer.buffer_steps(every=max(1, config.total_steps // 50))
            if not config.quiet:
                print(f"Generating GIF ({len(visualizer.frames)} frames)...")
            visualizer.generate_gif(gif_path, fps=10)
            if not config.quiet:
                print(f"Animation saved: {gif_path}")

    if not config.quiet:
        print(reporter.generate_summary(
            simulation,
            config.out_dir,
            config.csv_enabled,
            config.snapshot_enabled,
            config.gif_enabled
        ))

    return 0


if __name__ == '__main__':
    sys.exit(main())
