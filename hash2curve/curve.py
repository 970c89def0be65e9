# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
"""
Short Weierstrass curves  y^2 = x^3 + A*x + B  in affine coordinates.

Coordinates are py_ecc field elements handled through the adapters in
:mod:`hash2curve.fields`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hash2curve.fields import PrimeField, QuadraticField

Field = PrimeField | QuadraticField


@dataclass(frozen=True, eq=False)
class AffinePoint:
    x: Any = None
    y: Any = None
    infinity: bool = False

    def __eq__(self, other):
        if not isinstance(other, AffinePoint):
            return NotImplemented
        if self.infinity or other.infinity:
            return self.infinity == other.infinity
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        if self.infinity:
            return "AffinePoint(infinity)"
        return f"AffinePoint({self.x}, {self.y})"

    def is_identity(self) -> bool:
        return self.infinity


class WeierstrassCurve:
    """
    A curve over a prime or quadratic field.

    `order` is the order of the prime-order subgroup, `cofactor` the group
    cofactor and `h_eff` the scalar used by `clear_cofactor`, which defaults
    to the cofactor.

    The base class knows the curve equation only. The group law comes from
    the subclasses, which hand it to a library: `NISTCurve` to `ecdsa` and
    `BLS12381Curve` to py_ecc. A bare `WeierstrassCurve` is still enough as
    the target of an SSWU map onto an isogenous curve.
    """

    def __init__(
        self,
        name: str,
        field: Field,
        a: Any,
        b: Any,
        order: int,
        cofactor: int = 1,
        h_eff: int | None = None,
    ):
        self.name = name
        self.field = field
        self.a = field.elt(a)
        self.b = field.elt(b)
        self.order = order
        self.cofactor = cofactor
        self.h_eff = cofactor if h_eff is None else h_eff

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"

    # equation ---------------------------------------------------------------
    def rhs(self, x: Any) -> Any:
        """Evaluate g(x) = x^3 + A*x + B."""
        F = self.field
        return F.add(F.mul(F.add(F.sqr(x), self.a), x), self.b)

    def is_on_curve(self, point: AffinePoint) -> bool:
        if point.infinity:
            return True
        return self.field.are_equal(self.field.sqr(point.y), self.rhs(point.x))

    def new_point(self, x: Any, y: Any) -> AffinePoint:
        """
        Build an affine point, checking the curve equation.

        Raises:
            ValueError: If (x, y) is not on the curve.
        """
        point = AffinePoint(self.field.elt(x), self.field.elt(y))
        if not self.is_on_curve(point):
            raise ValueError(f"({x}, {y}) is not on {self.name}")
        return point

    def identity(self) -> AffinePoint:
        return AffinePoint(infinity=True)

    # group law --------------------------------------------------------------
    def neg(self, point: AffinePoint) -> AffinePoint:
        if point.infinity:
            return point
        return AffinePoint(point.x, self.field.neg(point.y))

    def double(self, point: AffinePoint) -> AffinePoint:
        return self.add(point, point)

    def add(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        raise NotImplementedError(f"{self.name} has no group law")

    def multiply(self, point: AffinePoint, scalar: int) -> AffinePoint:
        raise NotImplementedError(f"{self.name} has no group law")

    def clear_cofactor(self, point: AffinePoint) -> AffinePoint:
        if self.h_eff == 1:
            return point
        return self.multiply(point, self.h_eff)

    def in_subgroup(self, point: AffinePoint) -> bool:
        return self.multiply(point, self.order).infinity

    # output -----------------------------------------------------------------
    def point_to_dict(self, point: AffinePoint) -> dict[str, Any]:
        """
        Hex coordinates of a point, the way the published vectors print them.

        Extension-field coordinates are joined with commas.
        """
        if point.infinity:
            return {"infinity": True}
        return {
            "x": element_hex(self.field, point.x),
            "y": element_hex(self.field, point.y),
        }


def element_hex(field: Field, value: Any) -> str:
    return ",".join(f"0x{c:x}" for c in field.coordinates(value))
