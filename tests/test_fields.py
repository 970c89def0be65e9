# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import pytest
from py_ecc.fields import optimized_bls12_381_FQ as FQ
from py_ecc.fields import optimized_bls12_381_FQ2 as FQ2

from hash2curve.fields import PrimeField, QuadraticField, prime_field_class

F17 = PrimeField(prime_field_class("F17", 17))
FP = PrimeField(FQ)
FP2 = QuadraticField(FQ2)


def test_prime_field_class_is_cached():
    assert prime_field_class("F17", 17) is prime_field_class("F17", 17)


def test_elt_reduces():
    assert F17.elt(18) == F17.one()
    assert F17.elt(-1) == F17.elt(16)


def test_squares_mod_17():
    squares = {F17.elt(x * x).n for x in range(17)}
    for n in range(17):
        assert F17.is_square(F17.elt(n)) == (n in squares)


def test_sqrt_mod_17():
    # 17 = 1 (mod 4), so no single-exponentiation shortcut applies
    for n in range(17):
        a = F17.elt(n)
        if F17.is_square(a):
            r = F17.sqrt(a)
            assert F17.sqr(r) == a
        else:
            with pytest.raises(ValueError):
                F17.sqrt(a)


def test_sqrt_bls12_381_base_field():
    a = FP.elt(0x1234567890ABCDEF)
    r = FP.sqrt(FP.sqr(a))
    assert r == a or r == -a


def test_inverse():
    a = FP.elt(987654321)
    assert FP.mul(a, FP.inv(a)) == FP.one()
    assert FP.div(a, a) == FP.one()


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        FP.inv(FP.zero())
    with pytest.raises(ZeroDivisionError):
        FP2.inv(FP2.zero())


def test_sgn0_prime():
    assert F17.sgn0(F17.elt(0)) == 0
    assert F17.sgn0(F17.elt(3)) == 1
    assert F17.sgn0(F17.elt(-3)) == 0


def test_cmov():
    a, b = F17.elt(5), F17.elt(9)
    assert F17.cmov(a, b, False) == a
    assert F17.cmov(a, b, True) == b
    x, y = FP2.elt((1, 2)), FP2.elt((3, 4))
    assert FP2.cmov(x, y, False) == x
    assert FP2.cmov(x, y, True) == y


def test_coordinates_round_trip():
    x = FP2.from_coordinates([7, 11])
    assert FP2.coordinates(x) == (7, 11)
    assert FP.coordinates(FP.elt(7)) == (7,)


def test_quadratic_sqrt():
    for coords in [(0, 0), (1, 0), (0, 1), (3, 5), (2**200 + 1, 2**100 + 7)]:
        a = FP2.elt(coords)
        square = FP2.sqr(a)
        assert FP2.is_square(square)
        r = FP2.sqrt(square)
        assert FP2.are_equal(FP2.sqr(r), square)


def test_quadratic_non_square():
    # the SSWU constant of the G2 suites, -(2 + I), is a non-square
    z = FP2.elt((-2, -1))
    assert not FP2.is_square(z)
    with pytest.raises(ValueError):
        FP2.sqrt(z)


def test_quadratic_sgn0():
    assert FP2.sgn0(FP2.elt((0, 0))) == 0
    assert FP2.sgn0(FP2.elt((1, 0))) == 1
    assert FP2.sgn0(FP2.elt((2, 1))) == 0
    assert FP2.sgn0(FP2.elt((0, 1))) == 1
    assert FP2.sgn0(FP2.elt((0, 2))) == 0


def test_quadratic_rejects_p_1_mod_4():
    with pytest.raises(ValueError):
        QuadraticField(type("BadFQ2", (FQ2,), {"field_modulus": 17}))


def test_degree_and_characteristic():
    assert FP.degree == 1
    assert FP2.degree == 2
    assert FP.characteristic == FP2.characteristic == FQ.field_modulus


if __name__ == "__main__":
    pytest.main()
