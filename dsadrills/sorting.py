"""Bubble sort and insertion sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["bubble_sort", "insertion_sort", "main"]


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, made by bubbling the largest value to the end.

    Stops early once a pass makes no swap.
    """
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, made by moving each value back into place."""
    result = list(items)
    for i in range(1, len(result)):
        j = i
        while j > 0 and result[j - 1] > result[j]:
            result[j - 1], result[j] = result[j], result[j - 1]
            j -= 1
    return result


_ALGORITHMS = {"bubble": bubble_sort, "insertion": insertion_sort}


def main(argv: Sequence[str] | None = None) -> int:
    """Read n and n integers from standard input and print them sorted."""
    parser = argparse.ArgumentParser(description="Sort integers from standard input.")
    parser.add_argument("--algorithm", choices=sorted(_ALGORITHMS), default="bubble")
    args = parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        size = int(tokens[0]) if tokens else 0
        values = [int(token) for token in tokens[1 : 1 + size]]
    except ValueError as exc:
        parser.error(str(exc))
    if len(values) < size:
        parser.error("fewer numbers than announced")
    ordered = _ALGORITHMS[args.algorithm](values)
    sys.stdout.write("".join(f"{value} " for value in ordered))
    return 0


if __name__ == "__main__":
    sys.exit(main())