# MIT License (see LICENSE)
"""
Command-line entry point.

Usage:
    projectile-sim INIT_ALT INIT_VEL ANGLE DT FINAL_TIME
    projectile-sim            # prompts for each value

With anything other than exactly five positional values the tool falls
back to asking for the inputs one at a time, repeating a prompt until the
answer parses and is in range.
"""
from __future__ import annotations
import argparse
import logging
import math
import sys
from typing import Callable, TextIO

from .config import (
    LaunchParameters,
    check_angle,
    check_time_step,
    check_final_time,
    default_log_level,
)
from .renderer import ConsoleRenderer, NullRenderer
from .simulation import run_simulation

logger = logging.getLogger(__name__)

INVALID_INPUT = "Error - Invalid input."


def _any_value(value: float) -> float:
    return value


# (field, prompt, validator) in the order the values are asked for.
PROMPTS: list[tuple[str, str, Callable[[float], float]]] = [
    ("init_alt", "Enter initial altitude/elevation: ", _any_value),
    ("angle_deg", "Enter firing angle in degrees (0-90): ", check_angle),
    ("init_vel", "Enter initial velocity (m/s): ", _any_value),
    ("dt", "Enter the time step (s) per integration: ", check_time_step),
    ("final_time", "Enter final time (s): ", check_final_time),
]


def prompt_float(prompt: str, check: Callable[[float], float], stdin: TextIO, stdout: TextIO) -> float:
    """
    Ask for a number until a valid one is entered.

    Args:
        prompt: Text shown before each attempt.
        check: Validator returning the value or raising ValueError.
        stdin: Stream answers are read from.
        stdout: Stream prompts and error messages go to.

    Raises:
        EOFError: If the input stream ends before a valid value is read.
    """
    while True:
        stdout.write(prompt + "\n")
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError(f"input ended while waiting for: {prompt.strip()}")
        try:
            value = float(line.strip())
            if not math.isfinite(value):
                raise ValueError(f"not a finite number: {value}")
            return check(value)
        except ValueError as exc:
            logger.debug("Rejected input %r: %s", line.strip(), exc)
            stdout.write(INVALID_INPUT + "\n")


def prompt_parameters(stdin: TextIO, stdout: TextIO) -> LaunchParameters:
    """Interactively collect all five launch parameters."""
    values = {name: prompt_float(prompt, check, stdin, stdout) for name, prompt, check in PROMPTS}
    return LaunchParameters(**values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projectile-sim",
        description="2D projectile trajectory under altitude-dependent gravity (fixed-step RK4).",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="INIT_ALT (m) INIT_VEL (m/s) ANGLE (deg) DT (s) FINAL_TIME (s); prompts when not all five are given",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print the trajectory")
    parser.add_argument(
        "--log-level",
        default=default_log_level(),
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level (default: $PROJECTILE_SIM_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the command-line tool and return the process exit status."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logging.getLogger().setLevel(getattr(logging, args.log_level, logging.WARNING))

    if len(args.values) == 5:
        try:
            params = LaunchParameters(*(float(v) for v in args.values)).validate()
        except ValueError as exc:
            parser.error(str(exc))
    else:
        logger.warning("Command line arguments error or not provided.")
        try:
            params = prompt_parameters(stdin, stdout)
        except EOFError as exc:
            logger.error("Aborted: %s", exc)
            return 1

    renderer = NullRenderer() if args.quiet else ConsoleRenderer(stdout)
    run_simulation(params, renderer)
    return 0
