"""
Console configuration loaded from the environment.

Values can come from a .env file in the working directory; command-line
flags override them.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from loguru import logger


SEED_ENV_VAR = "SPACESHIP_SEED"
INTERACTIVE_ENV_VAR = "SPACESHIP_INTERACTIVE"
LOG_LEVEL_ENV_VAR = "SPACESHIP_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ConsoleConfig:
    """
    Settings for a console run.

    Attributes:
        seed: Seed for the session random generator (None for an unseeded one).
        interactive: Whether to write the banner and prompts.
        log_level: Minimum level for diagnostic logging on stderr.
    """
    seed: Optional[int] = None
    interactive: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ConsoleConfig":
        """
        Build a configuration from environment variables.

        Raises:
            ValueError: If SPACESHIP_SEED is not an integer or
                SPACESHIP_LOG_LEVEL is not a known log level.
        """
        load_dotenv()

        seed = None
        raw_seed = os.getenv(SEED_ENV_VAR)
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError as e:
                raise ValueError(
                    f"{SEED_ENV_VAR} must be an integer, got {raw_seed!r}"
                ) from e

        raw_interactive = os.getenv(INTERACTIVE_ENV_VAR, "")
        interactive = raw_interactive.strip().lower() not in _FALSE_VALUES

        raw_log_level = os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
        try:
            log_level = validate_log_level(raw_log_level)
        except ValueError as e:
            raise ValueError(
                f"{LOG_LEVEL_ENV_VAR} must be a log level name, got {raw_log_level!r}"
            ) from e

        return cls(seed=seed, interactive=interactive, log_level=log_level)


def validate_log_level(name: str) -> str:
    """
    Normalize a log level name and check that loguru knows it.

    Raises:
        ValueError: If no such level is registered.
    """
    level = name.strip().upper()
    logger.level(level)
    return level
