"""Number routines: fast powers, prime factors, Pascal's triangle, counting."""

from __future__ import annotations


def power(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n`` by repeated squaring.

    Raises ``ZeroDivisionError`` for zero raised to a negative power.
    """
    result = 1.0
    base = float(x)
    remaining = abs(n)
    while remaining:
        if remaining % 2:
            result *= base
            remaining -= 1
        else:
            base *= base
            remaining //= 2
    if n < 0:
        return 1.0 / result
    return result


def prime_factors(n: int) -> list[int]:
    """Return the distinct prime factors of ``n`` in ascending order.

    Raises ``ValueError`` if ``n`` is less than 1.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    factors: list[int] = []
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            factors.append(divisor)
            while n % divisor == 0:
                n //= divisor
        divisor += 1
    if n != 1:
        factors.append(n)
    return factors


def pascal_row(n: int) -> list[int]:
    """Return row ``n`` (1-based) of Pascal's triangle.

    Raises ``ValueError`` if ``n`` is less than 1.
    """
    if n < 1:
        raise ValueError(f"row number must be at least 1, got {n}")
    value = 1
    row = [value]
    for i in range(1, n):
        value = value * (n - i) // i
        row.append(value)
    return row


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    return [pascal_row(i) for i in range(1, num_rows + 1)]


def ascending(n: int) -> list[int]:
    """Return the numbers from 1 up to ``n``."""
    return list(range(1, n + 1))


def descending(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    return list(range(n, 0, -1))