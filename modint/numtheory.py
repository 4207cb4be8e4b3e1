"""Number-theoretic helpers on plain Python ints.

API
---
pow_mod(x, n, m)        -> x^n mod m        (square-and-multiply)
inv_mod(x, m)           -> x^-1 mod m       (extended Euclid)
is_prime(n)             -> bool             (deterministic Miller-Rabin, n < 2^64)
is_prime_trial(m)       -> bool             (trial division, any int-like type)
prime_factors(n)        -> distinct primes of n, ascending
primitive_root(m)       -> smallest generator of (Z/mZ)^* for prime m
"""

from __future__ import annotations

import logging
from typing import Any, List

from modint.config import (
    FIXED_WIDTH_BITS,
    KNOWN_PRIMITIVE_ROOTS,
    MILLER_RABIN_SMALL_LIMIT,
    MILLER_RABIN_SMALL_WITNESSES,
    MILLER_RABIN_WITNESSES_64,
)
from modint.errors import NotInvertibleError

logger = logging.getLogger(__name__)


def pow_mod(x: int, n: int, m: int) -> int:
    """Compute ``x^n mod m`` by binary exponentiation, low bits first."""
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")
    x %= m
    r = 1 % m
    while n:
        if n & 1:
            r = r * x % m
        x = x * x % m
        n >>= 1
    return r


def inv_mod(x: int, m: int) -> int:
    """Inverse of *x* modulo *m* via the extended Euclidean algorithm.

    Tracks ``(remainder, coefficient of x)`` pairs starting from
    ``s = (m, 0)`` and ``t = (x, 1)``; on exit ``s[0] = gcd(x, m)`` and
    ``s[1] * x = s[0] (mod m)``.
    """
    if x == 0:
        raise ZeroDivisionError("division by zero occurred")
    s0, s1 = m, 0
    t0, t1 = x, 1
    while t0 != 0:
        u = s0 // t0
        s0 -= t0 * u
        s1 -= t1 * u
        s0, s1, t0, t1 = t0, t1, s0, s1
    if s0 != 1:
        raise NotInvertibleError(f"gcd({x}, {m}) = {s0}, which is not 1")
    if s1 < 0:
        s1 += m // s0
    return s1


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin primality test for ``0 <= n < 2**64``."""
    if n >= 1 << FIXED_WIDTH_BITS:
        raise ValueError(f"{n} does not fit in {FIXED_WIDTH_BITS} bits")
    if n <= 1:
        return False
    if n in MILLER_RABIN_SMALL_WITNESSES:
        return True
    if n % 2 == 0:
        return False

    if n < MILLER_RABIN_SMALL_LIMIT:
        witnesses = MILLER_RABIN_SMALL_WITNESSES
    else:
        witnesses = MILLER_RABIN_WITNESSES_64

    d = n - 1
    while d % 2 == 0:
        d //= 2

    for a in witnesses:
        a %= n
        if a == 0:
            continue
        t = d
        y = pow_mod(a, t, n)
        while t != n - 1 and y != 1 and y != n - 1:
            y = y * y % n
            t <<= 1
        # t even here means y hit 1 without passing through n-1, or never
        # reached n-1 at all.
        if y != n - 1 and t % 2 == 0:
            return False
    return True


def is_prime_trial(m: Any) -> bool:
    """Trial-division primality test for any int-like type.

    Only needs ``+``, ``*``, ``%``, ordering and construction from bools,
    so it works for types without fast bit operations.
    """
    kind = type(m)
    zero, one = kind(False), kind(True)
    if m <= one:
        return False
    i = one + one
    while i * i <= m:
        if m % i == zero:
            return False
        i = i + one
    return True


def prime_factors(n: int) -> List[int]:
    """Distinct prime factors of *n* (``n >= 1``) in ascending order."""
    if n < 1:
        raise ValueError(f"Cannot factor {n}")
    factors: List[int] = []
    if n % 2 == 0:
        factors.append(2)
        while n % 2 == 0:
            n //= 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            factors.append(i)
            while n % i == 0:
                n //= i
        i += 2
    if n > 1:
        factors.append(n)
    return factors


def primitive_root(m: int) -> int:
    """Smallest generator of the multiplicative group mod prime *m*.

    ``g`` generates the whole group of order ``m-1`` iff
    ``g^((m-1)/p) != 1`` for every prime ``p`` dividing ``m-1``.
    """
    if m in KNOWN_PRIMITIVE_ROOTS:
        return KNOWN_PRIMITIVE_ROOTS[m]
    if not is_prime(m):
        raise ValueError(f"{m} is not a prime")

    factors = prime_factors(m - 1)
    logger.debug("factors of %d - 1: %s", m, factors)
    g = 2
    while True:
        if all(pow_mod(g, (m - 1) // p, m) != 1 for p in factors):
            logger.debug("primitive root of %d is %d", m, g)
            return g
        g += 1
