"""Tests for the modulus strategies."""

from __future__ import annotations

import random
from decimal import Decimal

import pytest

from modint.errors import NotInvertibleError, NotReducedError
from modint.modulus import DynamicModulus, Mod1000000007, Mod998244353, StaticModulus64

P = 998244353


@pytest.fixture(params=["static", "dynamic"])
def mod24(request):
    if request.param == "static":
        return StaticModulus64[24]()
    return DynamicModulus(24)


@pytest.fixture(params=["static", "dynamic"])
def mod_p(request):
    if request.param == "static":
        return Mod998244353()
    return DynamicModulus(P)


# =========================================================================
# 1. Construction
# =========================================================================


class TestStaticConstruction:
    def test_class_is_cached(self):
        assert StaticModulus64[7] is StaticModulus64[7]
        assert StaticModulus64[P] is Mod998244353

    def test_equality_by_constant(self):
        assert Mod998244353() == StaticModulus64[P]()
        assert Mod998244353() != Mod1000000007()
        assert hash(Mod998244353()) == hash(StaticModulus64[P]())

    def test_static_differs_from_dynamic(self):
        assert Mod998244353() != DynamicModulus(P)

    @pytest.mark.parametrize("m", [0, -1, 2**64, 1.5, True])
    def test_invalid_constant(self, m):
        with pytest.raises(ValueError):
            StaticModulus64[m]

    def test_unbound_instance(self):
        with pytest.raises(TypeError, match="needs a constant"):
            StaticModulus64()

    def test_rebinding(self):
        with pytest.raises(TypeError, match="already bound"):
            StaticModulus64[7][11]

    def test_largest_constant(self):
        m = StaticModulus64[2**64 - 59]()
        assert m.modulus() == 2**64 - 59
        assert m.is_prime()


class TestDynamicConstruction:
    @pytest.mark.parametrize("m", [0, -5])
    def test_non_positive(self, m):
        with pytest.raises(ValueError, match="positive"):
            DynamicModulus(m)

    def test_equality_by_value(self):
        assert DynamicModulus(24) == DynamicModulus(24)
        assert DynamicModulus(24) != DynamicModulus(25)
        assert len({DynamicModulus(24), DynamicModulus(24)}) == 1

    def test_immutable(self):
        m = DynamicModulus(24)
        with pytest.raises(AttributeError):
            m.m = 25


# =========================================================================
# 2. Basic operations (both variants)
# =========================================================================


def test_modulus(mod24):
    assert mod24.modulus() == 24


def test_rem(mod24):
    assert mod24.rem(24) == 0
    assert mod24.rem(50) == 2
    assert mod24.rem(-1) == 23
    for x in range(24):
        assert mod24.rem(x) == x


def test_zero_one(mod24):
    assert mod24.zero() == 0
    assert mod24.one() == 1


def test_one_modulo_one():
    assert StaticModulus64[1]().one() == 0
    assert DynamicModulus(1).one() == 0


def test_neg(mod24):
    assert mod24.neg(0) == 0
    assert mod24.neg(1) == 23
    for x in range(24):
        assert mod24.add(x, mod24.neg(x)) == 0


def test_add_wrap(mod_p):
    assert mod_p.add(P - 1, 2) == 1
    assert mod_p.add(P - 1, 1) == 0


def test_sub_underflow(mod_p):
    assert mod_p.sub(0, 1) == P - 1
    assert mod_p.sub(10, 3) == 7


def test_mul_wide(mod_p):
    assert mod_p.mul(P - 1, P - 1) == 1
    assert mod_p.mul(6, 7) == 42


def test_div(mod_p):
    assert mod_p.mul(mod_p.div(10, 4), 4) == 10


def test_unreduced_operand(mod24):
    with pytest.raises(NotReducedError):
        mod24.add(24, 0)
    with pytest.raises(NotReducedError):
        mod24.mul(3, -1)
    with pytest.raises(NotReducedError):
        mod24.neg(100)


# =========================================================================
# 3. Algebraic laws
# =========================================================================


def test_add_mul_commutative_associative(mod_p):
    rng = random.Random(1234)
    for _ in range(200):
        a, b, c = (rng.randrange(P) for _ in range(3))
        assert mod_p.add(a, b) == mod_p.add(b, a)
        assert mod_p.mul(a, b) == mod_p.mul(b, a)
        assert mod_p.add(mod_p.add(a, b), c) == mod_p.add(a, mod_p.add(b, c))
        assert mod_p.mul(mod_p.mul(a, b), c) == mod_p.mul(a, mod_p.mul(b, c))


def test_pow_laws(mod_p):
    rng = random.Random(99)
    for _ in range(50):
        x = rng.randrange(P)
        a, b = rng.randrange(1000), rng.randrange(1000)
        assert mod_p.pow(x, 0) == 1
        assert mod_p.pow(x, 1) == mod_p.rem(x)
        assert mod_p.pow(x, a + b) == mod_p.mul(mod_p.pow(x, a), mod_p.pow(x, b))
        assert mod_p.pow(x, a) == pow(x, a, P)


def test_pow_negative_exponent(mod24):
    with pytest.raises(ValueError, match="non-negative"):
        mod24.pow(5, -1)


def test_fermat(mod_p):
    assert mod_p.pow(3, P - 1) == 1


# =========================================================================
# 4. Inversion
# =========================================================================


def test_inv_exhaustive_24(mod24):
    invertible = set()
    for x in range(1, 24):
        try:
            y = mod24.inv(x)
        except NotInvertibleError:
            continue
        assert mod24.mul(x, y) == 1
        invertible.add(x)
    assert invertible == {1, 5, 7, 11, 13, 17, 19, 23}


def test_inv_not_coprime(mod24):
    with pytest.raises(NotInvertibleError, match="which is not 1"):
        mod24.inv(9)


def test_inv_zero(mod24):
    with pytest.raises(ZeroDivisionError, match="division by zero occurred"):
        mod24.inv(0)


def test_inv_prime(mod_p):
    for x in (1, 2, 3, 12345, P - 1):
        assert mod_p.mul(x, mod_p.inv(x)) == 1


# =========================================================================
# 5. Primality / primitive roots
# =========================================================================


@pytest.mark.parametrize(
    "m, expected",
    [(1, False), (2, True), (4, False), (998244353, True), (1000000007, True), (1000000008, False)],
)
def test_is_prime_both_variants(m, expected):
    assert StaticModulus64[m]().is_prime() is expected
    assert DynamicModulus(m).is_prime() is expected


def test_primitive_root():
    assert Mod998244353.primitive_root() == 3
    assert Mod1000000007.primitive_root() == 5
    assert StaticModulus64[65537].primitive_root() == 3
    assert StaticModulus64[7]().primitive_root() == 3


def test_primitive_root_composite():
    with pytest.raises(ValueError, match="not a prime"):
        StaticModulus64[24].primitive_root()


def test_primitive_root_unbound():
    with pytest.raises(TypeError):
        StaticModulus64.primitive_root()


# =========================================================================
# 6. Dynamic modulus over a non-int type
# =========================================================================


class TestDecimalModulus:
    def setup_method(self):
        self.m = DynamicModulus(Decimal(13))

    def test_rem_normalizes_truncating_remainder(self):
        assert self.m.rem(Decimal(-1)) == Decimal(12)
        assert self.m.rem(Decimal(27)) == Decimal(1)

    def test_identities(self):
        assert self.m.zero() == Decimal(0)
        assert self.m.one() == Decimal(1)

    def test_inv(self):
        assert self.m.inv(Decimal(5)) == Decimal(8)
        assert self.m.mul(Decimal(5), Decimal(8)) == Decimal(1)

    def test_neg_sub(self):
        assert self.m.neg(Decimal(3)) == Decimal(10)
        assert self.m.sub(Decimal(3), Decimal(5)) == Decimal(11)

    def test_pow(self):
        assert self.m.pow(Decimal(2), 12) == Decimal(1)

    def test_is_prime(self):
        assert self.m.is_prime()
        assert not DynamicModulus(Decimal(91)).is_prime()


# =========================================================================
# 7. Non-integer operands
# =========================================================================


class TestNonIntegerOperands:
    def test_rem_rejects_float(self):
        with pytest.raises(TypeError, match="integer"):
            Mod998244353().rem(2.5)

    def test_ops_reject_float(self):
        m = Mod998244353()
        with pytest.raises(NotReducedError, match="not an integer"):
            m.add(1.0, 1)
        with pytest.raises(NotReducedError):
            m.mul(2, 3.0)
        with pytest.raises(NotReducedError):
            m.inv(2.0)

    def test_dynamic_equality_includes_type(self):
        assert DynamicModulus(24) != DynamicModulus(24.0)
        assert DynamicModulus(Decimal(13)) != DynamicModulus(13)
        assert len({DynamicModulus(24), DynamicModulus(24.0)}) == 2
