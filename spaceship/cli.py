"""
Command-line entry point for the spaceship console.

Usage:
    spaceship                      # interactive session on stdin/stdout
    spaceship --quiet < commands   # scripted session, results only
    spaceship scenario1.txt scenario2.txt --seed 42
"""

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .config import ConsoleConfig, validate_log_level
from .console import NullSink, StreamSink, run


def log_level_arg(value: str) -> str:
    """argparse type for --log-level."""
    try:
        return validate_log_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"unknown log level: {value!r}") from e


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="spaceship",
        description="Console for initializing and firing GT4500 spaceships",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    spaceship
    spaceship --quiet < commands.txt
    spaceship test-data/basic/input.txt --seed 7
        """,
    )
    parser.add_argument(
        "scripts",
        nargs="*",
        type=Path,
        metavar="SCRIPT",
        help="Command files to run, one session each (default: read stdin)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for torpedo failure rolls (default: SPACESHIP_SEED or unseeded)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print the welcome banner and prompts",
    )
    parser.add_argument(
        "--log-level",
        type=log_level_arg,
        default=None,
        help="Diagnostic log level on stderr (default: SPACESHIP_LOG_LEVEL or WARNING)",
    )

    args = parser.parse_args(argv)
    for script in args.scripts:
        if not script.is_file():
            parser.error(f"script not found: {script}")
    return args


def configure_logging(level: str) -> None:
    """Send package logs to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.enable("spaceship")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the console."""
    args = parse_args(argv)
    config = ConsoleConfig.from_env()

    if args.seed is not None:
        config.seed = args.seed
    if args.quiet:
        config.interactive = False
    if args.log_level:
        config.log_level = args.log_level

    configure_logging(config.log_level)
    rng = random.Random(config.seed) if config.seed is not None else random.Random()
    out = StreamSink(sys.stdout)

    if not args.scripts:
        interactive = StreamSink(sys.stderr) if config.interactive else NullSink()
        run(sys.stdin, out, interactive, rng=rng)
        return 0

    for script in args.scripts:
        logger.info(f"Running {script}")
        # Undecodable bytes are read as U+FFFD
        with script.open(encoding="utf-8", errors="replace") as f:
            run(f, out, NullSink(), rng=rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())
