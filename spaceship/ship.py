"""
Spaceship models for the console simulator.

Implements:
- FiringMode: how many torpedoes a fire order launches
- SpaceShip: the interface the console drives
- GT4500: a ship with a primary and a secondary torpedo bank
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional, Protocol

from loguru import logger

from .torpedo_store import TorpedoStore


class FiringMode(Enum):
    """Torpedo firing modes."""
    SINGLE = "SINGLE"  # One torpedo, primary bank preferred
    ALL = "ALL"  # One torpedo from every bank that has tubes


class SpaceShip(Protocol):
    """Interface for ships that can be fired from the console."""

    def fire_torpedo(self, firing_mode: FiringMode) -> bool:
        """Fire torpedoes in the given mode and report overall success."""
        ...


class GT4500:
    """
    GT4500 light cruiser with two torpedo banks.

    SINGLE mode fires from the primary bank, falling back to the secondary
    bank when the primary has no tubes. ALL mode fires once from every bank
    with tubes and only succeeds if every shot succeeds.
    """

    def __init__(
        self,
        primary_count: int,
        primary_failure_rate: float,
        secondary_count: int,
        secondary_failure_rate: float,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the ship.

        Args:
            primary_count: Tubes in the primary bank.
            primary_failure_rate: Failure probability of the primary bank.
            secondary_count: Tubes in the secondary bank.
            secondary_failure_rate: Failure probability of the secondary bank.
            rng: Optional random number generator for reproducible results.
        """
        self.primary_store = TorpedoStore(primary_count, primary_failure_rate)
        self.secondary_store = TorpedoStore(secondary_count, secondary_failure_rate)
        self.rng = rng or random.Random()

    def __repr__(self) -> str:
        return (
            f"GT4500(primary={self.primary_store}, "
            f"secondary={self.secondary_store})"
        )

    def fire_torpedo(self, firing_mode: FiringMode) -> bool:
        """
        Fire torpedoes according to the firing mode.

        Args:
            firing_mode: SINGLE or ALL.

        Returns:
            True if the order was carried out successfully.
        """
        if firing_mode == FiringMode.SINGLE:
            return self._fire_single()
        if firing_mode == FiringMode.ALL:
            return self._fire_all()
        raise ValueError(f"Unsupported firing mode: {firing_mode!r}")

    def _fire_single(self) -> bool:
        """Fire one torpedo, primary bank first."""
        if not self.primary_store.is_empty:
            logger.debug("SINGLE: firing primary bank")
            return self.primary_store.fire(self.rng)
        if not self.secondary_store.is_empty:
            logger.debug("SINGLE: primary empty, firing secondary bank")
            return self.secondary_store.fire(self.rng)
        logger.debug("SINGLE: both banks empty")
        return False

    def _fire_all(self) -> bool:
        """Fire one torpedo from each bank with tubes."""
        # Every non-empty bank fires even after an earlier failure.
        success = True
        for name, store in (("primary", self.primary_store), ("secondary", self.secondary_store)):
            if store.is_empty:
                continue
            logger.debug(f"ALL: firing {name} bank")
            success = store.fire(self.rng) and success
        return success
