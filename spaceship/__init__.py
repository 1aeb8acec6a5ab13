"""GT4500 spaceship console simulator package."""

from loguru import logger

from .torpedo_store import TorpedoStore

from .ship import (
    FiringMode,
    GT4500,
    SpaceShip,
)

from .console import (
    # Errors and results
    ValidationError,
    CommandResult,
    # Sinks
    OutputSink,
    StreamSink,
    NullSink,
    # Session and dispatch
    Session,
    COMMAND_HANDLERS,
    handle,
    run,
)

from .config import ConsoleConfig

from .salvo import SalvoReport, simulate_salvo

# Silent as a library; the CLI turns logging on.
logger.disable("spaceship")

__all__ = [
    # Torpedo store
    "TorpedoStore",
    # Ship module
    "FiringMode",
    "GT4500",
    "SpaceShip",
    # Console module - Errors and results
    "ValidationError",
    "CommandResult",
    # Console module - Sinks
    "OutputSink",
    "StreamSink",
    "NullSink",
    # Console module - Session and dispatch
    "Session",
    "COMMAND_HANDLERS",
    "handle",
    "run",
    # Config
    "ConsoleConfig",
    # Salvo statistics
    "SalvoReport",
    "simulate_salvo",
]
