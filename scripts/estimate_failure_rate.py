#!/usr/bin/env python3
"""
Estimate the observed failure rate of a GT4500 firing mode by simulation.

Usage:
    python scripts/estimate_failure_rate.py --primary-rate 0.2 --trials 10000
    python scripts/estimate_failure_rate.py --primary-count 0 --secondary-rate 0.5 --mode ALL --seed 42
"""

import sys
from pathlib import Path

# Add project root to path for proper imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import random

from spaceship.ship import FiringMode, GT4500
from spaceship.salvo import simulate_salvo


def main():
    parser = argparse.ArgumentParser(
        description="Estimate GT4500 torpedo failure rates by simulation",
    )
    parser.add_argument("--primary-count", type=int, default=1, help="Primary bank tubes (default: 1)")
    parser.add_argument("--primary-rate", type=float, default=0.0, help="Primary bank failure rate (default: 0)")
    parser.add_argument("--secondary-count", type=int, default=1, help="Secondary bank tubes (default: 1)")
    parser.add_argument("--secondary-rate", type=float, default=0.0, help="Secondary bank failure rate (default: 0)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in FiringMode],
        default=FiringMode.SINGLE.value,
        help="Firing mode (default: SINGLE)",
    )
    parser.add_argument("--trials", type=int, default=10_000, help="Number of fire orders (default: 10000)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    args = parser.parse_args()

    if args.trials <= 0:
        parser.error("--trials must be positive")

    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    ship = GT4500(
        args.primary_count,
        args.primary_rate,
        args.secondary_count,
        args.secondary_rate,
        rng=rng,
    )

    print("GT4500 Salvo Estimate")
    print("=" * 40)
    print(f"  Primary:   {args.primary_count} tubes, failure rate {args.primary_rate}")
    print(f"  Secondary: {args.secondary_count} tubes, failure rate {args.secondary_rate}")
    print(f"  Trials:    {args.trials}")
    print()

    report = simulate_salvo(ship, FiringMode(args.mode), args.trials)
    print(f"  {report}")


if __name__ == "__main__":
    main()
