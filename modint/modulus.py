"""Modulus strategies.

A ``Modulus`` owns all arithmetic semantics on reduced values.  Every
method except ``rem`` expects its ``x`` / ``y`` arguments to satisfy
``rem(x) == x``; violating that raises ``NotReducedError``.

Two variants:

  StaticModulus64[M]  – one class per constant M (0 < M < 2**64); instances
                        are stateless and default-constructible.
  DynamicModulus(m)   – M chosen at run time, of any int-like type.
"""

from __future__ import annotations

import functools
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Type

from modint import numtheory
from modint.config import (
    FIXED_WIDTH_BITS,
    MOD1000000007,
    MOD998244353,
    PRIMITIVE_ROOT_CACHE_SIZE,
)
from modint.errors import NotInvertibleError, NotReducedError

_cached_primitive_root = functools.lru_cache(maxsize=PRIMITIVE_ROOT_CACHE_SIZE)(
    numtheory.primitive_root
)


class Modulus(ABC):
    """Operation set shared by every modulus strategy."""

    @abstractmethod
    def modulus(self) -> Any:
        """Return M."""

    @abstractmethod
    def rem(self, x: Any) -> Any:
        """Reduce an arbitrary *x* into ``[0, M)``."""

    @abstractmethod
    def zero(self) -> Any:
        ...

    @abstractmethod
    def one(self) -> Any:
        ...

    @abstractmethod
    def neg(self, x: Any) -> Any:
        """Additive inverse."""

    @abstractmethod
    def add(self, x: Any, y: Any) -> Any:
        ...

    @abstractmethod
    def mul(self, x: Any, y: Any) -> Any:
        ...

    @abstractmethod
    def inv(self, x: Any) -> Any:
        """Multiplicative inverse; requires ``gcd(x, M) == 1``."""

    @abstractmethod
    def is_prime(self) -> bool:
        ...

    def sub(self, x: Any, y: Any) -> Any:
        return self.add(x, self.neg(y))

    def div(self, x: Any, y: Any) -> Any:
        return self.mul(x, self.inv(y))

    def pow(self, x: Any, y: int) -> Any:
        """Square-and-multiply over the bits of *y*, least significant first."""
        if y < 0:
            raise ValueError(f"Exponent must be non-negative, got {y}")
        z = self.one()
        while y != 0:
            if y & 1:
                z = self.mul(z, x)
            x = self.mul(x, x)
            y >>= 1
        return z


class StaticModulus64(Modulus):
    """Modulus fixed per class.  Use ``StaticModulus64[M]`` to get the class."""

    MODULUS: ClassVar[int] = 0
    _classes: ClassVar[Dict[int, Type["StaticModulus64"]]] = {}

    def __class_getitem__(cls, m: int) -> Type["StaticModulus64"]:
        if cls.MODULUS:
            raise TypeError(f"{cls.__name__} is already bound to a modulus")
        if not isinstance(m, int) or isinstance(m, bool):
            raise ValueError(f"Modulus must be an int, got {m!r}")
        if not 0 < m < 1 << FIXED_WIDTH_BITS:
            raise ValueError(
                f"Modulus must satisfy 0 < M < 2**{FIXED_WIDTH_BITS}, got {m}"
            )
        bound = StaticModulus64._classes.get(m)
        if bound is None:
            name = f"StaticModulus64[{m}]"
            bound = type(StaticModulus64)(name, (StaticModulus64,), {"MODULUS": m})
            bound.__qualname__ = name
            StaticModulus64._classes[m] = bound
        return bound

    def __init__(self) -> None:
        if not type(self).MODULUS:
            raise TypeError("StaticModulus64 needs a constant: use StaticModulus64[M]()")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StaticModulus64) and type(other).MODULUS == type(self).MODULUS

    def __hash__(self) -> int:
        return hash((StaticModulus64, type(self).MODULUS))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def _check(self, x: int) -> None:
        if not isinstance(x, numbers.Integral):
            raise NotReducedError(f"{x!r} is not an integer")
        if not 0 <= x < type(self).MODULUS:
            raise NotReducedError(f"{x} is not reduced modulo {type(self).MODULUS}")

    def modulus(self) -> int:
        return type(self).MODULUS

    def rem(self, x: int) -> int:
        if not isinstance(x, numbers.Integral):
            raise TypeError(f"Expected an integer, got {x!r}")
        return int(x) % type(self).MODULUS

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1 % type(self).MODULUS

    def neg(self, x: int) -> int:
        self._check(x)
        if x == 0:
            return 0
        return type(self).MODULUS - x

    def add(self, x: int, y: int) -> int:
        self._check(x)
        self._check(y)
        z = x + y
        if z >= type(self).MODULUS:
            z -= type(self).MODULUS
        return z

    def mul(self, x: int, y: int) -> int:
        self._check(x)
        self._check(y)
        return x * y % type(self).MODULUS

    def inv(self, x: int) -> int:
        self._check(x)
        return numtheory.inv_mod(x, type(self).MODULUS)

    def is_prime(self) -> bool:
        return numtheory.is_prime(type(self).MODULUS)

    @classmethod
    def primitive_root(cls) -> int:
        """Generator of the multiplicative group; M must be prime."""
        if not cls.MODULUS:
            raise TypeError("StaticModulus64 needs a constant: use StaticModulus64[M]")
        return _cached_primitive_root(cls.MODULUS)


Mod998244353 = StaticModulus64[MOD998244353]
Mod1000000007 = StaticModulus64[MOD1000000007]


@dataclass(frozen=True, eq=False)
class DynamicModulus(Modulus):
    """Modulus held as a runtime value of an int-like type.

    The type needs ``+ - * // %``, ordering, and ``T(False)`` / ``T(True)``
    as zero / one.  Types whose ``%`` truncates toward zero (e.g.
    ``decimal.Decimal``) are normalized by ``rem``.
    """

    m: Any

    def __post_init__(self) -> None:
        if not self.m > type(self.m)(False):
            raise ValueError(f"Modulus must be positive, got {self.m!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicModulus):
            return NotImplemented
        return type(self.m) is type(other.m) and self.m == other.m

    def __hash__(self) -> int:
        return hash((DynamicModulus, type(self.m), self.m))

    def _check(self, x: Any) -> None:
        if not self.zero() <= x < self.m:
            raise NotReducedError(f"{x!r} is not reduced modulo {self.m!r}")

    def modulus(self) -> Any:
        return self.m

    def rem(self, x: Any) -> Any:
        r = x % self.m
        if r < self.zero():
            r = r + self.m
        return r

    def zero(self) -> Any:
        return type(self.m)(False)

    def one(self) -> Any:
        return type(self.m)(True) % self.m

    def neg(self, x: Any) -> Any:
        self._check(x)
        if x == self.zero():
            return x
        return self.m - x

    def add(self, x: Any, y: Any) -> Any:
        self._check(x)
        self._check(y)
        z = x + y
        if z >= self.m:
            z = z - self.m
        return z

    def mul(self, x: Any, y: Any) -> Any:
        self._check(x)
        self._check(y)
        return self.rem(x * y)

    def inv(self, x: Any) -> Any:
        self._check(x)
        zero = self.zero()
        if x == zero:
            raise ZeroDivisionError("division by zero occurred")
        s = (self.m, zero)
        t = (x, type(self.m)(True))
        while t[0] != zero:
            u = s[0] // t[0]
            s = (s[0] + -(t[0] * u), s[1] + -(t[1] * u))
            s, t = t, s
        if s[0] != type(self.m)(True):
            raise NotInvertibleError(f"gcd({x!r}, {self.m!r}) = {s[0]!r}, which is not 1")
        coeff = s[1]
        if coeff < zero:
            coeff = coeff + self.m // s[0]
        return coeff

    def is_prime(self) -> bool:
        return numtheory.is_prime_trial(self.m)
