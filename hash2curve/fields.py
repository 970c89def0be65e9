# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
"""
Field adapters over py_ecc element classes.

py_ecc supplies the element arithmetic (`+`, `-`, `*`, `/`, `**`). The
adapters add what the hash-to-curve core needs on top of it: square tests,
square roots, the RFC 9380 `sgn0` sign, constant-time style selection and
construction from the integers produced by hash_to_field.
"""
from functools import lru_cache
from typing import Any, Iterable

from ecdsa.numbertheory import jacobi, square_root_mod_prime
from py_ecc.fields.optimized_field_elements import FQ as _FQ

Element = Any


@lru_cache(maxsize=None)
def prime_field_class(name: str, modulus: int) -> type:
    """
    Create a py_ecc prime-field element class for an arbitrary modulus.

    Args:
        name: Class name, used in reprs only.
        modulus: The field characteristic.

    Returns:
        A subclass of py_ecc's optimized `FQ` with `field_modulus` set.
    """
    return type(name, (_FQ,), {"field_modulus": modulus})


def _select(field: "PrimeField | QuadraticField", a: Element, b: Element, c: bool) -> Element:
    # a + (b - a) * c, no data-dependent branch
    return a + (b - a) * int(bool(c))


class PrimeField:
    """GF(p) on top of a py_ecc `FQ` class."""

    degree = 1

    def __init__(self, element_class: type):
        self.element_class = element_class
        self.p = element_class.field_modulus

    def __repr__(self) -> str:
        return f"PrimeField({self.element_class.__name__})"

    def __eq__(self, other):
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.p == other.p

    def __hash__(self):
        return hash(("GF(p)", self.p))

    @property
    def characteristic(self) -> int:
        return self.p

    # constructors -----------------------------------------------------------
    def elt(self, value: int | Element) -> Element:
        if isinstance(value, self.element_class):
            return value
        return self.element_class(int(value) % self.p)

    def from_coordinates(self, coordinates: Iterable[int]) -> Element:
        (value,) = coordinates
        return self.elt(value)

    def coordinates(self, x: Element) -> tuple[int, ...]:
        return (x.n,)

    def zero(self) -> Element:
        return self.element_class.zero()

    def one(self) -> Element:
        return self.element_class.one()

    # arithmetic -------------------------------------------------------------
    def add(self, a: Element, b: Element) -> Element:
        return a + b

    def sub(self, a: Element, b: Element) -> Element:
        return a - b

    def mul(self, a: Element, b: Element) -> Element:
        return a * b

    def sqr(self, a: Element) -> Element:
        return a * a

    def neg(self, a: Element) -> Element:
        return -a

    def inv(self, a: Element) -> Element:
        if self.is_zero(a):
            raise ZeroDivisionError("inverse of zero")
        return self.element_class(pow(a.n, -1, self.p))

    def div(self, a: Element, b: Element) -> Element:
        return a * self.inv(b)

    # predicates -------------------------------------------------------------
    def is_zero(self, a: Element) -> bool:
        return a.n == 0

    def are_equal(self, a: Element, b: Element) -> bool:
        return a.n == b.n

    def is_square(self, a: Element) -> bool:
        """Jacobi symbol test; zero counts as a square."""
        return jacobi(a.n, self.p) != -1

    def sgn0(self, a: Element) -> int:
        return a.n % 2

    def cmov(self, a: Element, b: Element, c: bool) -> Element:
        """Return `b` when `c` is true, else `a`."""
        return _select(self, a, b, c)

    def sqrt(self, a: Element) -> Element:
        """
        A square root of `a`, from `ecdsa.numbertheory.square_root_mod_prime`.

        Which of the two roots comes back is unspecified.

        Raises:
            ValueError: If `a` is not a square.
        """
        if not self.is_square(a):
            raise ValueError(f"{a} is not a square")
        return self.element_class(square_root_mod_prime(a.n, self.p))


class QuadraticField:
    """
    GF(p^2) = GF(p)[I] / (I^2 + 1) on top of a py_ecc `FQ2` class.

    Requires p = 3 (mod 4), which is what makes -1 a non-residue.
    """

    degree = 2

    def __init__(self, element_class: type):
        self.element_class = element_class
        self.p = element_class.field_modulus
        if self.p % 4 != 3:
            raise ValueError("QuadraticField needs p = 3 (mod 4)")
        self.base = PrimeField(prime_field_class(f"{element_class.__name__}_base", self.p))
        self.i = element_class([0, 1])

    def __repr__(self) -> str:
        return f"QuadraticField({self.element_class.__name__})"

    def __eq__(self, other):
        if not isinstance(other, QuadraticField):
            return NotImplemented
        return self.p == other.p

    def __hash__(self):
        return hash(("GF(p^2)", self.p))

    @property
    def characteristic(self) -> int:
        return self.p

    def elt(self, value: int | Iterable[int] | Element) -> Element:
        if isinstance(value, self.element_class):
            return value
        if isinstance(value, int):
            return self.element_class([value % self.p, 0])
        return self.from_coordinates(value)

    def from_coordinates(self, coordinates: Iterable[int]) -> Element:
        c0, c1 = coordinates
        return self.element_class([int(c0) % self.p, int(c1) % self.p])

    def coordinates(self, x: Element) -> tuple[int, ...]:
        return tuple(int(c) for c in x.coeffs)

    def zero(self) -> Element:
        return self.element_class.zero()

    def one(self) -> Element:
        return self.element_class.one()

    def add(self, a: Element, b: Element) -> Element:
        return a + b

    def sub(self, a: Element, b: Element) -> Element:
        return a - b

    def mul(self, a: Element, b: Element) -> Element:
        return a * b

    def sqr(self, a: Element) -> Element:
        return a * a

    def neg(self, a: Element) -> Element:
        return -a

    def inv(self, a: Element) -> Element:
        if self.is_zero(a):
            raise ZeroDivisionError("inverse of zero")
        return a.inv()

    def div(self, a: Element, b: Element) -> Element:
        return a * self.inv(b)

    def is_zero(self, a: Element) -> bool:
        return all(int(c) == 0 for c in a.coeffs)

    def are_equal(self, a: Element, b: Element) -> bool:
        return self.coordinates(a) == self.coordinates(b)

    def _norm(self, a: Element) -> int:
        a0, a1 = self.coordinates(a)
        return (a0 * a0 + a1 * a1) % self.p

    def is_square(self, a: Element) -> bool:
        """An element of GF(p^2) is a square iff its norm is a square in GF(p)."""
        return self.base.is_square(self.base.elt(self._norm(a)))

    def sgn0(self, a: Element) -> int:
        a0, a1 = self.coordinates(a)
        sign_0 = a0 % 2
        zero_0 = a0 == 0
        sign_1 = a1 % 2
        return sign_0 | (zero_0 & sign_1)

    def cmov(self, a: Element, b: Element, c: bool) -> Element:
        """Return `b` when `c` is true, else `a`."""
        return _select(self, a, b, c)

    def sqrt(self, a: Element) -> Element:
        """
        A square root of `a` (Adj and Rodriguez-Henriquez, algorithm 9).

        Raises:
            ValueError: If `a` is not a square.
        """
        if not self.is_square(a):
            raise ValueError(f"{a} is not a square")
        p = self.p
        a1 = a ** ((p - 3) // 4)
        alpha = a1 * a1 * a
        x0 = a1 * a
        if self.are_equal(alpha, -self.one()):
            return self.i * x0
        b = (self.one() + alpha) ** ((p - 1) // 2)
        return b * x0
