"""Sort numbers with the primes first, each part in ascending order."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable


def is_prime(number: int) -> bool:
    """True when *number* is a prime."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, math.isqrt(number) + 1))


def primes_first(numbers: Iterable[int]) -> list[int]:
    """Sorted primes followed by the sorted remaining numbers."""
    primes: list[int] = []
    others: list[int] = []
    for number in numbers:
        (primes if is_prime(number) else others).append(number)
    return sorted(primes) + sorted(others)


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many numbers from standard input and print the result."""
    tokens = iter(sys.stdin.read().split())
    print("Nhap so luong phan tu cua day: ", end="")
    count = int(next(tokens))
    print("Nhap day so: ", end="")
    numbers = [int(next(tokens)) for _ in range(count)]
    result = primes_first(numbers)
    print("Ket Qua: " + "".join(f"{number} " for number in result))
    return 0


if __name__ == "__main__":
    sys.exit(main())