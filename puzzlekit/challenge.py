"""Command-line harness shared by puzzle solvers.

A solver is a function taking a ``Challenge`` and printing its answers. The
harness parses arguments, reads the input files, merges debug flags from the
command line and the environment, and turns any exception into a single
error line (tagged with the input file being processed) and exit status 1.

Usage pattern:
    def solve(challenge: Challenge) -> None:
        grid = parse_grid(MyParser(), challenge.input).grid
        print_answer(1, ...)

    if __name__ == "__main__":
        wrap_main(solve)

Run: python examples/maze/run.py input.txt -d path
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, Sequence

from .config import Config
from .logging_utils import log_debug, log_error


class ChallengeError(RuntimeError):
    """Harness-level failure, optionally tied to an input file."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            return f"{self.path}: {message}"
        return message


@dataclass
class InputFile:
    """One loaded puzzle input."""

    path: Path
    text: str


@dataclass
class Challenge:
    """Inputs and debug flags for a single solver run."""

    inputs: List[InputFile]
    debug_flags: frozenset[str] = field(default_factory=frozenset)
    # Input currently being processed; used for error context.
    current: Optional[InputFile] = field(default=None, repr=False)
    # Set by --no-color; applied by wrap_main for the duration of the run.
    no_color: bool = False

    @property
    def input(self) -> str:
        """Text of the first input file."""
        if not self.inputs:
            raise ChallengeError("no input files were given")
        self.current = self.inputs[0]
        return self.current.text

    def has_flag(self, name: str) -> bool:
        return name in self.debug_flags

    def each_input(self) -> Iterator[InputFile]:
        """Iterate inputs, recording each as ``current`` while it is processed."""
        for input_file in self.inputs:
            self.current = input_file
            yield input_file

    def debug(self, flag: str, message: str) -> None:
        """Print ``message`` when ``flag`` is enabled."""
        if self.has_flag(flag):
            log_debug(message, force=True)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse solver CLI arguments."""
    parser = argparse.ArgumentParser(description="Run a puzzle solver on one or more input files")
    parser.add_argument("input_files", nargs="+", type=Path, help="Puzzle input file(s)")
    parser.add_argument(
        "-d",
        "--debug",
        action="append",
        default=[],
        metavar="FLAG",
        help="Enable a debug flag (repeatable, comma-separated values allowed)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    return parser.parse_args(argv)


def _collect_flags(raw_flags: Sequence[str]) -> frozenset[str]:
    flags = set(Config.DEBUG_FLAGS)
    for raw in raw_flags:
        flags.update(flag.strip() for flag in raw.split(",") if flag.strip())
    return frozenset(flags)


def read_input(path: Path) -> InputFile:
    """Read an input file, normalising Windows line endings."""
    try:
        text = path.read_text(encoding=Config.INPUT_ENCODING)
    except OSError as exc:
        raise ChallengeError(f"could not read input file: {exc.strerror or exc}", path) from exc
    except UnicodeDecodeError as exc:
        raise ChallengeError(f"input is not valid {Config.INPUT_ENCODING}: {exc.reason}", path) from exc
    return InputFile(path=path, text=text.replace("\r\n", "\n"))


def load_challenge(argv: Optional[Sequence[str]] = None) -> Challenge:
    args = parse_args(argv)
    inputs = [read_input(path) for path in args.input_files]
    return Challenge(inputs=inputs, debug_flags=_collect_flags(args.debug), no_color=args.no_color)


def print_answer(part: int, answer: Any) -> None:
    print(f"part {part}: {answer}")


def wrap_main(solver: Callable[[Challenge], None], argv: Optional[Sequence[str]] = None) -> None:
    """Run ``solver`` under the harness; exits with status 1 on any error."""
    challenge: Optional[Challenge] = None
    previous_no_color = Config.NO_COLOR
    try:
        Config.validate()
        challenge = load_challenge(argv)
        Config.NO_COLOR = previous_no_color or challenge.no_color
        solver(challenge)
    except Exception as exc:  # report every failure the same way, then exit
        has_path = isinstance(exc, ChallengeError) and exc.path is not None
        if has_path or challenge is None or challenge.current is None:
            log_error(str(exc))
        else:
            log_error(f"{challenge.current.path}: {exc}")
        sys.exit(1)
    finally:
        # --no-color only lasts for this run
        Config.NO_COLOR = previous_no_color
