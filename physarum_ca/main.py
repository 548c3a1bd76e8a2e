#!/usr/bin/env python3
"""
Physarum Cellular Automata Simulation

An agent-based slime mould model: agents move, sense and deposit onto a
diffusing chemoattractant trail.

Usage:
    physarum-ca [--config configs/default.yaml] [options]

Examples:
    physarum-ca --size 200 --steps 500
    physarum-ca --config configs/default.yaml --gif --out-dir results/
    physarum-ca --steps 50 --no-snapshot --quiet
    physarum-ca --seed 42 --density 0.2
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .config import RunConfig, default_run_config, load_config
from .model.rng import seeded_source
from .model.simulation import Simulation
from .export.visualizer import Visualizer
from .export.reporter import Reporter

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Physarum Cellular Automata Simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    physarum-ca --size 200 --steps 500
    physarum-ca --config configs/default.yaml --gif --out-dir results/
    physarum-ca --steps 50 --no-snapshot --quiet
    physarum-ca --seed 42 --density 0.2
        """
    )

    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file')

    # Optional overrides
    parser.add_argument('--steps', type=int, default=None,
                        help='Override number of ticks to run')
    parser.add_argument('--size', type=int, default=None,
                        help='Override grid size (square)')
    parser.add_argument('--density', type=float, default=None,
                        help='Override initial agent density (0-1)')
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable final snapshot (default)')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final snapshot')

    parser.add_argument('--gif', dest='gif', action='store_true', default=None,
                        help='Enable GIF animation export')
    parser.add_argument('--no-gif', dest='gif', action='store_false',
                        help='Disable GIF animation export')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')
    parser.add_argument('--verbose', action='store_true', default=False,
                        help='Enable debug logging')

    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    return parser.parse_args(argv)


def apply_overrides(config: RunConfig, args: argparse.Namespace) -> RunConfig:
    """Apply CLI overrides on top of a loaded configuration."""
    if args.size is not None:
        config.simulation = dataclasses.replace(
            config.simulation, width=args.size, height=args.size)
    if args.steps is not None:
        config.steps = args.steps
    if args.density is not None:
        config.initial_density = args.density
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif is not None:
        config.gif_enabled = args.gif
    config.quiet = args.quiet
    if args.seed is not None:
        config.seed = args.seed
    config.out_dir = args.out_dir

    # Re-run validation on the overridden values
    return dataclasses.replace(config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    # Load configuration
    try:
        config = load_config(args.config) if args.config else default_run_config()
        config = apply_overrides(config, args)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except (ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    sim_config = config.simulation

    if not config.quiet:
        print(f"Initializing simulation...")
        print(f"  Grid: {sim_config.width}x{sim_config.height}")
        print(f"  Density: {config.initial_density}")
        print(f"  Ticks: {config.steps}")

    simulation = Simulation.from_config(
        sim_config, seeded_source(config.seed),
        density=config.initial_density,
        random_trail=config.random_trail
    )

    if not config.quiet:
        print(f"  Seeded: {simulation.live_agent_count()} agents")

    visualizer = Visualizer(sim_config.width, sim_config.height)
    reporter = Reporter(str(args.config) if args.config else None, config.seed)

    state = simulation.snapshot()
    reporter.update(state)
    if config.gif_enabled:
        visualizer.buffer_frame(state)

    # Main simulation loop
    if not config.quiet:
        print(f"\nRunning simulation...")

    try:
        while simulation.tick < config.steps:
            ticks = min(config.steps_per_frame, config.steps - simulation.tick)
            simulation.advance(ticks)
            state = simulation.snapshot()

            if config.gif_enabled:
                visualizer.buffer_frame(state)

            reporter.update(state)

            # Progress indicator
            if not config.quiet and state.tick % 100 == 0:
                print(f"  Tick {state.tick}: {state.live_agents} agents, "
                      f"mean trail {state.metrics['trail_mean']:.1f}")

    except KeyboardInterrupt:
        if not config.quiet:
            print("\nSimulation interrupted by user.")
        state = simulation.snapshot()

    # Final exports
    if config.snapshot_enabled:
        snapshot_path = config.out_dir / 'final_state.png'
        visualizer.save_snapshot(state, snapshot_path)
        logger.info("Snapshot written to %s", snapshot_path)
        if not config.quiet:
            print(f"Snapshot saved: {snapshot_path}")

    if config.gif_enabled:
        gif_path = config.out_dir / 'simulation.gif'
        if not config.quiet:
            print(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(gif_path, fps=10)
        if not config.quiet:
            print(f"Animation saved: {gif_path}")

    # Print summary report
    if not config.quiet:
        report = reporter.generate_summary(
            state,
            config.out_dir,
            config.snapshot_enabled,
            config.gif_enabled
        )
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
