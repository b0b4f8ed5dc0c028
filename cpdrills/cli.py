"""Command-line entry point for the counting and coin drills."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from cpdrills.basics import CallCounter
from cpdrills.coins import min_coins_recursive, min_coins_search


def _count_calls(n: int) -> list[str]:
    counter = CallCounter()
    counter(n)
    return [str(counter.times)]


def _coins_recursive(n: int) -> list[str]:
    best, calls = min_coins_recursive(n)
    return [str(best), f"calls: {calls}"]


def _coins_search(n: int) -> list[str]:
    best, calls = min_coins_search(n)
    return [f"best: {best}", f"calls: {calls}"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cpdrills")
    commands = parser.add_subparsers(dest="command", required=True)
    handlers: dict[str, tuple[Callable[[int], list[str]], str]] = {
        "calls": (_count_calls, "count calls of a doubly recursive function"),
        "coins": (_coins_recursive, "fewest coins of 1, 3, 4 by plain recursion"),
        "coin-search": (_coins_search, "fewest coins of 1, 3, 4 by pruned search"),
    }
    for name, (handler, help_text) in handlers.items():
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("n", type=int)
        sub.set_defaults(handler=handler)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one drill named on the command line and print its results."""
    args = _build_parser().parse_args(argv)
    try:
        lines = args.handler(args.n)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())