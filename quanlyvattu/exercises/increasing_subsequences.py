"""Count strictly increasing subsequences of a given length."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def count_increasing_subsequences(values: Sequence[int], length: int) -> int:
    """Number of strictly increasing subsequences of *values* with *length* elements."""
    if length < 1:
        raise ValueError("subsequence length must be at least 1")
    # ending[i] holds the count of increasing subsequences of the current
    # length that end at position i.
    ending = [1] * len(values)
    for _ in range(2, length + 1):
        ending = [
            sum(count for earlier, count in zip(values[:i], ending) if earlier < value)
            for i, value in enumerate(values)
        ]
    return sum(ending)


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print the count for each."""
    tokens = iter(sys.stdin.read().split())
    print("nhap so luong bo test: ", end="")
    cases = int(next(tokens))
    results: list[int] = []
    for _ in range(cases):
        print("nhap N va K: ", end="")
        size, length = int(next(tokens)), int(next(tokens))
        values: list[int] = []
        for position in range(1, size + 1):
            print(f"Nhap phan tu thu: {position}: ", end="")
            values.append(int(next(tokens)))
        results.append(count_increasing_subsequences(values, length))
    print("Ket qua: " + "".join(f"{result} " for result in results))
    return 0


if __name__ == "__main__":
    sys.exit(main())