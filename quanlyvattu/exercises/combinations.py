"""List the k-element subsets of 1..n in lexicographic order."""

from __future__ import annotations

import itertools
import sys
from collections.abc import Iterator


def combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every increasing k-tuple drawn from 1..n, in lexicographic order."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return itertools.combinations(range(1, n + 1), k)


def main(argv: list[str] | None = None) -> int:
    """Read n and k from standard input and print each combination in turn."""
    tokens = iter(sys.stdin.read().split())
    print("\n Nhap n=", end="")
    n = int(next(tokens))
    print("\n Nhap k=", end="")
    k = int(next(tokens))
    for step, combination in enumerate(combinations(n, k), start=1):
        print(f"\n Ket qua buoc {step}:" + "".join(f"{value} " for value in combination), end="")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())