"""Counting how often each value occurs, then answering lookups from the counts."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

__all__ = ["frequency_table", "main"]

K = TypeVar("K", bound=Hashable)


def frequency_table(values: Iterable[K]) -> dict[K, int]:
    """Map each distinct value to how often it occurs, in ascending key order."""
    counts = Counter(values)
    return {key: counts[key] for key in sorted(counts)}


def main(argv: Sequence[str] | None = None) -> int:
    """Read n numbers, print their counts, then answer k count queries.

    Standard input holds n, then n integers, then k, then k integers to look
    up. Every distinct number is printed as ``value->count`` in ascending
    order, followed by one count per query (0 for numbers never seen).
    """
    parser = argparse.ArgumentParser(
        description="Count integers from standard input and answer lookups."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        size = int(next(tokens, "0"))
        values = [int(next(tokens)) for _ in range(size)]
        table = frequency_table(values)
        for value, count in table.items():
            print(f"{value}->{count}")
        queries = int(next(tokens, "0"))
        for _ in range(queries):
            token = next(tokens, None)
            if token is None:
                break
            print(table.get(int(token), 0))
    except StopIteration:
        parser.error("fewer numbers than announced")
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())