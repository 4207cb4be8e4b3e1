"""Exceptions raised on broken arithmetic preconditions.

None of these are meant to be recovered from: they signal that a caller
handed over an unreduced operand, a non-invertible element, or mixed two
moduli.
"""


class ModIntError(Exception):
    """Base class for modint contract violations."""


class NotReducedError(ModIntError, ValueError):
    """Raised when an operand is outside ``[0, M)``."""


class NotInvertibleError(ModIntError, ArithmeticError):
    """Raised when ``gcd(x, M) != 1``."""


class ModulusMismatchError(ModIntError, ValueError):
    """Raised when two values under different moduli are combined."""
