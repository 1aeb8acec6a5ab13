"""
Command console for initializing and firing spaceships.

Reads comma-separated commands line by line, dispatches them to a fixed
table of handlers, and writes results to an output sink. Prompts and the
welcome banner go to a separate interactive sink that can be disabled so
scripted sessions produce only the result lines.

Commands:
- HELP
- GT4500,<PRI_CNT>,<PRI_FAIL_RATE>,<SEC_CNT>,<SEC_FAIL_RATE>
- TORPEDO,<SINGLE|ALL>
- EXIT
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Protocol, TextIO

from loguru import logger

from .ship import FiringMode, GT4500, SpaceShip


COMMENT_MARKER = "#"
FIELD_SEPARATOR = ","
PROMPT = "> "

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# ERRORS AND RESULTS
# =============================================================================

class ValidationError(Exception):
    """Raised by a command handler when its arguments or preconditions are invalid."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CommandResult(Enum):
    """Whether the console should keep reading commands."""
    CONTINUE = "continue"
    EXIT = "exit"


# =============================================================================
# OUTPUT SINKS
# =============================================================================

class OutputSink(Protocol):
    """Write-only text destination."""

    def write(self, text: str) -> None:
        ...

    def write_line(self, text: str) -> None:
        ...


class StreamSink:
    """Output sink backed by a text stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def write_line(self, text: str) -> None:
        self.write(text + "\n")


class NullSink:
    """Output sink that discards everything."""

    def write(self, text: str) -> None:
        pass

    def write_line(self, text: str) -> None:
        pass


@dataclass
class Session:
    """
    Mutable state shared by the handlers of one console run.

    Attributes:
        out: Sink receiving command results.
        rng: Random number generator handed to every ship created.
        ship: The currently configured ship, if any.
    """
    out: OutputSink
    rng: random.Random = field(default_factory=random.Random)
    ship: Optional[SpaceShip] = None


Handler = Callable[[Session, List[str]], CommandResult]


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def parse_int(text: str) -> int:
    """
    Parse a decimal integer argument.

    Only an optional sign followed by digits is accepted; surrounding
    whitespace is rejected.

    Raises:
        ValueError: If the text is not a plain decimal integer.
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"invalid literal for int() with base 10: {text!r}")
    return int(text)


def parse_float(text: str) -> float:
    """
    Parse a floating point argument, tolerating surrounding whitespace.

    Raises:
        ValueError: If the text is not a number.
    """
    if "_" in text:
        raise ValueError(f"could not convert string to float: {text!r}")
    return float(text)


def split_command(line: str) -> Optional[List[str]]:
    """
    Strip comments from a raw line and split it into fields.

    Args:
        line: The raw input line, without its line terminator.

    Returns:
        The fields (keyword first, not upper-cased), or None if the line
        holds no command.
    """
    if line.lstrip().startswith(COMMENT_MARKER):
        return None

    command = line.split(COMMENT_MARKER, 1)[0].strip()
    if not command:
        return None

    fields = command.split(FIELD_SEPARATOR)
    # A trailing separator does not add an empty argument
    while len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return fields


# =============================================================================
# HANDLERS
# =============================================================================

def _command_list() -> str:
    return "[" + ", ".join(COMMAND_HANDLERS) + "]"


def handle_help(session: Session, params: List[str]) -> CommandResult:
    """Handle the HELP command."""
    session.out.write_line(f"Available commands: {_command_list()}")
    session.out.write_line("Generally, commands receive parameters; refer to the documentation")
    session.out.write_line(
        "Before firing torpedoes using the TORPEDO command, you must initialize "
        "a ship (eg. a GT4500) using its name as a command"
    )
    return CommandResult.CONTINUE


def handle_gt4500(session: Session, params: List[str]) -> CommandResult:
    """Handle the GT4500 command."""
    if len(params) != 5:
        raise ValidationError(
            "usage: GT4500,<PRI_CNT>,<PRI_FAIL_RATE>,<SEC_CNT>,<SEC_FAIL_RATE>"
        )

    try:
        primary_count = parse_int(params[1])
        primary_failure_rate = parse_float(params[2])
        secondary_count = parse_int(params[3])
        secondary_failure_rate = parse_float(params[4])
    except ValueError as e:
        raise ValidationError(f"Invalid numerical arguments passed: {e}") from e

    session.ship = GT4500(
        primary_count,
        primary_failure_rate,
        secondary_count,
        secondary_failure_rate,
        rng=session.rng,
    )
    logger.info(f"Configured {session.ship!r}")
    session.out.write_line("SUCCESS")
    return CommandResult.CONTINUE


def handle_torpedo(session: Session, params: List[str]) -> CommandResult:
    """Handle the TORPEDO command."""
    if session.ship is None:
        raise ValidationError("No ship has been initialized")
    if len(params) != 2:
        raise ValidationError("usage: TORPEDO,<SINGLE|ALL>")

    mode_name = params[1].upper()
    try:
        firing_mode = FiringMode[mode_name]
    except KeyError as e:
        raise ValidationError(f"Unknown firing mode: '{mode_name}'") from e

    success = session.ship.fire_torpedo(firing_mode)
    logger.info(f"TORPEDO {firing_mode.value}: {'SUCCESS' if success else 'FAIL'}")
    session.out.write_line("SUCCESS" if success else "FAIL")
    return CommandResult.CONTINUE


def handle_exit(session: Session, params: List[str]) -> CommandResult:
    """Handle the EXIT command."""
    return CommandResult.EXIT


COMMAND_HANDLERS: Mapping[str, Handler] = MappingProxyType({
    "HELP": handle_help,
    "GT4500": handle_gt4500,
    "TORPEDO": handle_torpedo,
    "EXIT": handle_exit,
})


# =============================================================================
# DISPATCH AND LOOP
# =============================================================================

def handle(session: Session, line: str) -> CommandResult:
    """
    Handle one raw input line.

    Validation errors raised by the handler are written to the session
    output and do not stop the console; anything else propagates.

    Args:
        session: The current console session.
        line: The raw line, without its line terminator.

    Returns:
        Whether the console should keep reading commands.
    """
    params = split_command(line)
    if params is None:
        return CommandResult.CONTINUE

    keyword = params[0].upper()
    handler = COMMAND_HANDLERS.get(keyword)
    if handler is None:
        logger.debug(f"Unknown command {keyword!r}")
        session.out.write_line(f"Unknown command: '{keyword}'")
        return CommandResult.CONTINUE

    logger.debug(f"Dispatching {keyword} with {len(params) - 1} argument(s)")
    try:
        return handler(session, params)
    except ValidationError as e:
        logger.debug(f"{keyword} rejected: {e.message}")
        session.out.write_line(e.message)
        return CommandResult.CONTINUE


def run(
    stream_in: TextIO,
    out: OutputSink,
    interactive: Optional[OutputSink] = None,
    rng: Optional[random.Random] = None,
) -> Session:
    """
    Read and handle commands until EXIT or end of input.

    Args:
        stream_in: Text stream to read commands from.
        out: Sink receiving command results.
        interactive: Sink for the banner and prompts; disabled when None.
        rng: Random number generator for the session's ships.

    Returns:
        The session as it stood when the console stopped.
    """
    interactive = interactive or NullSink()
    session = Session(out=out, rng=rng or random.Random())

    interactive.write_line(
        f"Welcome to the console interface.  Available commands: {_command_list()}"
    )
    result = CommandResult.CONTINUE
    while result == CommandResult.CONTINUE:
        interactive.write(PROMPT)
        line = stream_in.readline()
        if not line:
            logger.debug("End of input")
            break
        result = handle(session, line.rstrip("\r\n"))

    return session
