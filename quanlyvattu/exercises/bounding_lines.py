"""Binary search for the two lines that enclose a point."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def find_bounding_lines(
    slopes: Sequence[float], intercepts: Sequence[float], x: float, y: float
) -> tuple[int, int]:
    """Indices (below, above) of the lines y = a*x + b that enclose point (x, y).

    The lines are expected in ascending order at *x*.
    """
    if len(slopes) != len(intercepts):
        raise ValueError("slopes and intercepts differ in length")
    if not slopes:
        raise ValueError("at least one line is required")
    left, right = 0, len(slopes) - 1
    while left < right - 1:
        mid = (left + right) // 2
        if slopes[mid] * x + intercepts[mid] < y:
            left = mid
        else:
            right = mid
    return left, right


def _fmt(value: float) -> str:
    return f"{value:g}"


def main(argv: list[str] | None = None) -> int:
    """Read the lines and the point from standard input and print the enclosing pair."""
    tokens = iter(sys.stdin.read().split())
    print("Nhap so luong duong thang N: ", end="")
    count = int(next(tokens))
    print("Nhap he so a va b cho moi duong (y = ax + b):")
    slopes: list[float] = []
    intercepts: list[float] = []
    for _ in range(count):
        slopes.append(float(next(tokens)))
        intercepts.append(float(next(tokens)))
    print("Nhap toa do diem P(x, y): ", end="")
    x, y = float(next(tokens)), float(next(tokens))

    below, above = find_bounding_lines(slopes, intercepts, x, y)
    print("Hai duong bao quanh P la:")
    print(f"Duong 1: y = {_fmt(slopes[below])}x + {_fmt(intercepts[below])}")
    print(f"Duong 2: y = {_fmt(slopes[above])}x + {_fmt(intercepts[above])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())