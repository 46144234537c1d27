"""Command-line entry point for the author application questionnaire."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from authorcompany.console import Console
from authorcompany.early import run_bookstore, run_first_version
from authorcompany.upgraded import (
    run_code_runner_version,
    run_last_version,
    run_second_version,
)

EDITIONS: dict[str, Callable[[Console], None]] = {
    "first": run_first_version,
    "bookstore": run_bookstore,
    "second": run_second_version,
    "code-runner": run_code_runner_version,
    "last": run_last_version,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authorcompany",
        description="Apply to become an author at Author Company.",
    )
    parser.add_argument(
        "--edition",
        choices=sorted(EDITIONS),
        default="last",
        help="which questionnaire to run (default: last)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen questionnaire on standard input and output."""
    args = _parser().parse_args(argv)
    console = Console()
    try:
        EDITIONS[args.edition](console)
    except EOFError:
        print("authorcompany: input ended before the form was complete", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"authorcompany: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())