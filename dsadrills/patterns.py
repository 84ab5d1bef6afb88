"""Text patterns built from stars, digits and letters.

Every pattern function takes a size ``n`` and returns the rendered pattern as a
string. Each row ends with a newline, and padding spaces are kept exactly.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

__all__ = [
    "square",
    "right_triangle",
    "number_triangle",
    "repeated_number_triangle",
    "inverted_triangle",
    "inverted_number_triangle",
    "pyramid",
    "inverted_pyramid",
    "diamond",
    "half_diamond",
    "number_crown",
    "floyd_triangle",
    "letter_triangle",
    "inverted_letter_triangle",
    "repeated_letter_triangle",
    "letter_pyramid",
    "reverse_letter_triangle",
    "hollow_diamond",
    "render",
    "main",
    "PATTERNS",
]


def _rows(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _letters(first: int, last: int) -> str:
    return "".join(chr(code) for code in range(first, last + 1))


def square(n: int) -> str:
    """An n by n block of stars, each star followed by a space."""
    return _rows("* " * n for _ in range(n))


def right_triangle(n: int) -> str:
    """Rows of 1 to n stars."""
    return _rows("*" * i for i in range(1, n + 1))


def number_triangle(n: int) -> str:
    """Row i counts from 1 up to i."""
    return _rows(
        "".join(str(j) for j in range(1, i + 1)) for i in range(1, n + 1)
    )


def repeated_number_triangle(n: int) -> str:
    """Row i repeats the number i, i times."""
    return _rows(str(i) * i for i in range(1, n + 1))


def inverted_triangle(n: int) -> str:
    """Rows of n down to 1 stars."""
    return _rows("*" * (n - i + 1) for i in range(1, n + 1))


def inverted_number_triangle(n: int) -> str:
    """Row i counts from i up to n."""
    return _rows(
        "".join(str(j) for j in range(i, n + 1)) for i in range(1, n + 1)
    )


def _pyramid_rows(n: int, rows: int) -> list[str]:
    lines = []
    for i in range(rows):
        pad = " " * (n - i - 1)
        lines.append(f"{pad}{'*' * (2 * i + 1)}{pad}")
    return lines


def _inverted_pyramid_rows(n: int) -> list[str]:
    lines = []
    for i in range(n):
        pad = " " * i
        lines.append(f"{pad}{'*' * (2 * n - (2 * i + 1))}{pad}")
    return lines


def pyramid(n: int) -> str:
    """A centred star pyramid of n + 1 rows; the last row is 2n + 1 stars wide."""
    return _rows(_pyramid_rows(n, n + 1))


def inverted_pyramid(n: int) -> str:
    """A centred star pyramid of n rows, widest row first."""
    return _rows(_inverted_pyramid_rows(n))


def diamond(n: int) -> str:
    """An n-row pyramid followed by an n-row inverted pyramid."""
    return _rows(_pyramid_rows(n, n) + _inverted_pyramid_rows(n))


def half_diamond(n: int) -> str:
    """Star rows growing from 0 to n and shrinking back to 1, 2n rows in all."""
    return _rows("*" * (i if i <= n else 2 * n - i) for i in range(2 * n))


def number_crown(n: int) -> str:
    """Row i counts up to i, then a gap, then counts back down to 1."""
    lines = []
    for i in range(1, n + 1):
        rising = "".join(str(j) for j in range(1, i + 1))
        falling = "".join(str(j) for j in range(i, 0, -1))
        lines.append(f"{rising}{' ' * (2 * (n - i))}{falling}")
    return _rows(lines)


def floyd_triangle(n: int) -> str:
    """Consecutive numbers from 1, i of them on row i."""
    lines = []
    start = 1
    for i in range(1, n + 1):
        lines.append("".join(str(k) for k in range(start, start + i)))
        start += i
    return _rows(lines)


def letter_triangle(n: int) -> str:
    """Row i holds the letters from A onwards, i + 1 of them."""
    return _rows(_letters(ord("A"), ord("A") + i) for i in range(n))


def inverted_letter_triangle(n: int) -> str:
    """Letter rows from A, n of them on the first row and one on the last."""
    return _rows(_letters(ord("A"), ord("A") + n - i - 1) for i in range(n))


def repeated_letter_triangle(n: int) -> str:
    """Row i repeats the i-th letter, i + 1 times."""
    return _rows(chr(ord("A") + i) * (i + 1) for i in range(n))


def letter_pyramid(n: int) -> str:
    """A centred pyramid whose rows rise from A and fall back to A."""
    lines = []
    for i in range(n):
        pad = " " * (n - i - 1)
        rising = _letters(ord("A"), ord("A") + i)
        lines.append(f"{pad}{rising}{rising[-2::-1]}{pad}")
    return _rows(lines)


def reverse_letter_triangle(n: int) -> str:
    """Rows that end in E and reach one letter further back on each row.

    Raises ValueError when a row would need a character below code point 0.
    """
    last = ord("E")
    if n > last + 1:
        raise ValueError(f"size {n} reaches below the first character")
    return _rows(_letters(last - i, last) for i in range(n))


def hollow_diamond(n: int) -> str:
    """Stars around a diamond-shaped gap, 2n rows of width 2n - 1."""
    lines = []
    for i in range(n):
        side = "*" * (n - i - 1)
        lines.append(f"{side}{' ' * (2 * i + 1)}{side}")
    for i in range(n):
        side = "*" * i
        lines.append(f"{side}{' ' * (2 * n - (2 * i + 1))}{side}")
    return _rows(lines)


PATTERNS: dict[str, Callable[[int], str]] = {
    "square": square,
    "right_triangle": right_triangle,
    "number_triangle": number_triangle,
    "repeated_number_triangle": repeated_number_triangle,
    "inverted_triangle": inverted_triangle,
    "inverted_number_triangle": inverted_number_triangle,
    "pyramid": pyramid,
    "inverted_pyramid": inverted_pyramid,
    "diamond": diamond,
    "half_diamond": half_diamond,
    "number_crown": number_crown,
    "floyd_triangle": floyd_triangle,
    "letter_triangle": letter_triangle,
    "inverted_letter_triangle": inverted_letter_triangle,
    "repeated_letter_triangle": repeated_letter_triangle,
    "letter_pyramid": letter_pyramid,
    "reverse_letter_triangle": reverse_letter_triangle,
    "hollow_diamond": hollow_diamond,
}


def render(name: str, n: int) -> str:
    """Render the pattern called ``name`` at size ``n``."""
    try:
        pattern = PATTERNS[name]
    except KeyError:
        raise ValueError(f"unknown pattern: {name!r}") from None
    return pattern(n)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a case count and that many sizes from stdin; print each pattern."""
    parser = argparse.ArgumentParser(
        description="Print a text pattern for each size read from standard input."
    )
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        count = int(next(tokens, "0"))
        for _ in range(count):
            token = next(tokens, None)
            if token is None:
                break
            sys.stdout.write(render(args.pattern, int(token)))
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())