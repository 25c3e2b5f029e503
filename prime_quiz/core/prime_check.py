"""Primality test used to grade answers."""

from __future__ import annotations

import math


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, using trial division by odd numbers."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for divisor in range(3, math.isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True
