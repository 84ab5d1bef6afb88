"""Small recursion drills: Fibonacci, sums, counting, palindromes, reversal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import MutableSequence, Sequence

__all__ = [
    "fibonacci",
    "sum_to",
    "repeat_name",
    "count_up",
    "count_down",
    "is_palindrome",
    "reverse_in_place",
    "main",
]


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number; any n of 1 or less is returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def sum_to(n: int) -> int:
    """The sum 1 + 2 + ... + n.

    Raises ValueError for negative n, which never reaches the base case.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return n * (n + 1) // 2


def repeat_name(name: str, n: int) -> list[str]:
    """The name repeated n times, one entry per line to print."""
    return [name] * max(n, 0)


def count_up(n: int) -> list[int]:
    """The numbers 1 to n in rising order."""
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """The numbers n down to 1."""
    return list(range(n, 0, -1))


def is_palindrome(text: str) -> bool:
    """Whether text reads the same forwards and backwards."""
    half = len(text) // 2
    return all(a == b for a, b in zip(text[:half], reversed(text)))


def reverse_in_place(items: MutableSequence) -> None:
    """Reverse items by swapping the ends towards the middle."""
    items.reverse()


def _print_lines(values) -> None:
    for value in values:
        print(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one drill on input read from standard input."""
    parser = argparse.ArgumentParser(description="Run a recursion drill.")
    parser.add_argument(
        "drill",
        choices=[
            "fibonacci",
            "sum",
            "name",
            "count-up",
            "count-down",
            "palindrome",
            "reverse",
        ],
    )
    parser.add_argument("--name", default="Hello", help="text printed by the name drill")
    args = parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        if args.drill == "palindrome":
            text = tokens[0] if tokens else "madam"
            sys.stdout.write("1" if is_palindrome(text) else "0")
            return 0
        if not tokens:
            parser.error("expected a number on standard input")
        n = int(tokens[0])
        if args.drill == "fibonacci":
            sys.stdout.write(str(fibonacci(n)))
        elif args.drill == "sum":
            sys.stdout.write(f"The sum of n number is : {sum_to(n)}")
        elif args.drill == "name":
            _print_lines(repeat_name(args.name, n))
        elif args.drill == "count-up":
            _print_lines(count_up(n))
        elif args.drill == "count-down":
            _print_lines(count_down(n))
        else:
            values = [int(token) for token in tokens[1 : 1 + n]]
            if len(values) < n:
                parser.error("fewer numbers than announced")
            reverse_in_place(values)
            sys.stdout.write("".join(f"{value} " for value in values))
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())