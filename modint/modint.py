"""Integers taken modulo M.

``ModInt`` pairs a reduced value with a ``Modulus`` and forwards every
operation to it.  Subclasses created with ``ModInt.over(ModulusClass)``
carry a default modulus, which enables ``ModInt998244353(5)``,
``.zero()``, ``.one()`` and ``.from_int()``.
"""

from __future__ import annotations

import numbers
from typing import Any, ClassVar, Optional, Type

from modint.errors import ModulusMismatchError
from modint.modulus import Mod1000000007, Mod998244353, Modulus


class ModInt:
    """An immutable residue ``value mod M``."""

    __slots__ = ("_value", "_modulus")

    default_modulus: ClassVar[Optional[Type[Modulus]]] = None

    def __init__(self, value: Any, modulus: Optional[Modulus] = None) -> None:
        if modulus is None:
            modulus = type(self)._default()
        self._value = modulus.rem(value)
        self._modulus = modulus

    # ---- construction ----

    @classmethod
    def over(cls, modulus_type: Type[Modulus], name: Optional[str] = None) -> Type["ModInt"]:
        """Return a subclass whose default modulus is ``modulus_type()``."""
        name = name or f"ModInt[{modulus_type.__name__}]"
        return type(name, (cls,), {"__slots__": (), "default_modulus": modulus_type})

    @classmethod
    def _default(cls) -> Modulus:
        if cls.default_modulus is None:
            raise TypeError(f"{cls.__name__} has no default modulus; pass one explicitly")
        return cls.default_modulus()

    @classmethod
    def _raw(cls, value: Any, modulus: Modulus) -> "ModInt":
        obj = object.__new__(cls)
        obj._value = value
        obj._modulus = modulus
        return obj

    @classmethod
    def from_int(cls, value: Any) -> "ModInt":
        return cls(value)

    @classmethod
    def zero(cls) -> "ModInt":
        modulus = cls._default()
        return cls._raw(modulus.zero(), modulus)

    @classmethod
    def one(cls) -> "ModInt":
        modulus = cls._default()
        return cls._raw(modulus.one(), modulus)

    # ---- accessors ----

    @property
    def value(self) -> Any:
        return self._value

    @property
    def modulus(self) -> Modulus:
        return self._modulus

    # ---- arithmetic ----

    def inv(self) -> "ModInt":
        return self._raw(self._modulus.inv(self._value), self._modulus)

    def pow(self, n: int) -> "ModInt":
        return self._raw(self._modulus.pow(self._value, n), self._modulus)

    def _operand(self, other: Any) -> Any:
        """Reduced value of *other*, or ``NotImplemented``."""
        if isinstance(other, ModInt):
            if other._modulus != self._modulus:
                raise ModulusMismatchError(
                    f"mod mismatch: {self._modulus!r} vs {other._modulus!r}"
                )
            return other._value
        if isinstance(other, numbers.Integral) or isinstance(
            other, type(self._modulus.modulus())
        ):
            return self._modulus.rem(other)
        return NotImplemented

    def __add__(self, other: Any) -> "ModInt":
        y = self._operand(other)
        if y is NotImplemented:
            return NotImplemented
        return self._raw(self._modulus.add(self._value, y), self._modulus)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "ModInt":
        y = self._operand(other)
        if y is NotImplemented:
            return NotImplemented
        return self._raw(self._modulus.sub(self._value, y), self._modulus)

    def __rsub__(self, other: Any) -> "ModInt":
        y = self._operand(other)
        if y is NotImplemented:
            return NotImplemented
        return self._raw(self._modulus.sub(y, self._value), self._modulus)

    def __mul__(self, other: Any) -> "ModInt":
        y = self._operand(other)
        if y is NotImplemented:
            return NotImplemented
        return self._raw(self._modulus.mul(self._value, y), self._modulus)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "ModInt":
        y = self._operand(other)
        if y is NotImplemented:
            return NotImplemented
        return self._raw(self._modulus.div(self._value, y), self._modulus)

    def __rtruediv__(self, other: Any) -> "ModInt":
        y = self._operand(other)
        if y is NotImplemented:
            return NotImplemented
        return self._raw(self._modulus.div(y, self._value), self._modulus)

    def __pow__(self, n: int) -> "ModInt":
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        return self.pow(int(n))

    def __neg__(self) -> "ModInt":
        return self._raw(self._modulus.neg(self._value), self._modulus)

    def __pos__(self) -> "ModInt":
        return self

    # ---- comparison / display ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModInt):
            return NotImplemented
        return self._value == other._value and self._modulus == other._modulus

    def __hash__(self) -> int:
        return hash((self._value, self._modulus))

    def __bool__(self) -> bool:
        return self._value != self._modulus.zero()

    def __int__(self) -> int:
        return int(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, {self._modulus!r})"


ModInt998244353 = ModInt.over(Mod998244353, "ModInt998244353")
ModInt1000000007 = ModInt.over(Mod1000000007, "ModInt1000000007")
