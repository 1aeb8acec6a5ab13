"""
Salvo statistics: fire a ship many times and measure how often it fails.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .ship import FiringMode, SpaceShip


@dataclass
class SalvoReport:
    """
    Outcome counts for a batch of fire orders.

    Attributes:
        mode: Firing mode used for every order.
        trials: Number of fire orders issued.
        successes: Orders that reported success.
        failures: Orders that reported failure.
        failure_rate: Observed fraction of failed orders.
    """
    mode: FiringMode
    trials: int
    successes: int
    failures: int
    failure_rate: float

    def __str__(self) -> str:
        return (
            f"{self.mode.value}: {self.successes}/{self.trials} succeeded, "
            f"observed failure rate {self.failure_rate:.4f}"
        )


def simulate_salvo(ship: SpaceShip, mode: FiringMode, trials: int) -> SalvoReport:
    """
    Fire a ship repeatedly in one mode.

    Seed the ship's random generator beforehand for reproducible reports.

    Args:
        ship: Ship to fire.
        mode: Firing mode for every order.
        trials: Number of fire orders.

    Returns:
        SalvoReport summarizing the outcomes.

    Raises:
        ValueError: If trials is not positive.
    """
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")

    outcomes = np.fromiter(
        (ship.fire_torpedo(mode) for _ in range(trials)),
        dtype=bool,
        count=trials,
    )
    successes = int(outcomes.sum())
    return SalvoReport(
        mode=mode,
        trials=trials,
        successes=successes,
        failures=trials - successes,
        failure_rate=float(1.0 - outcomes.mean()),
    )
