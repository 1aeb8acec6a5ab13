"""
Torpedo tube banks for the GT4500 console simulator.

A TorpedoStore is one battery of torpedo tubes sharing a single failure
probability. Firing is a weighted coin-flip against that probability; the
tube count is a capacity label and is never decremented.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from loguru import logger


@dataclass(frozen=True)
class TorpedoStore:
    """
    One bank of torpedo tubes.

    Attributes:
        count: Number of tubes in the bank. Zero or negative means the bank
            cannot be selected for firing.
        failure_rate: Probability (nominally 0.0 to 1.0) that a shot fails.
    """
    count: int
    failure_rate: float

    @property
    def is_empty(self) -> bool:
        """Returns True if the bank has no tubes to fire from."""
        return self.count <= 0

    def fire(self, rng: random.Random) -> bool:
        """
        Fire a single torpedo from this bank.

        Draws one uniform value in [0, 1); the shot fails if the draw is
        below the failure rate.

        Args:
            rng: Random number generator supplying the draw.

        Returns:
            True if the torpedo fired successfully.
        """
        roll = rng.random()
        success = roll >= self.failure_rate
        logger.debug(
            f"Torpedo roll {roll:.4f} vs failure rate {self.failure_rate}: "
            f"{'success' if success else 'failure'}"
        )
        return success
