# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
"""
NIST prime curves P-256, P-384 and P-521 backed by the `ecdsa` package.

Curve parameters come from `ecdsa.curves`; the group law runs on
`ecdsa.ellipticcurve.PointJacobi`. Points cross the boundary in affine form
so the SSWU map and the encodings see the same `AffinePoint` type for every
curve.
"""
from ecdsa import curves
from ecdsa.ellipticcurve import INFINITY, CurveFp, PointJacobi

from hash2curve.curve import AffinePoint, WeierstrassCurve
from hash2curve.fields import PrimeField, prime_field_class


class NISTCurve(WeierstrassCurve):
    """
    A prime-order NIST curve whose arithmetic is done by `ecdsa`.

    Args:
        name: Display name, e.g. ``P-256``.
        params: An `ecdsa.curves.Curve` such as `curves.NIST256p`.
    """

    def __init__(self, name: str, params: curves.Curve):
        curve_fp: CurveFp = params.curve
        field = PrimeField(prime_field_class(f"{params.name}FQ", curve_fp.p()))
        super().__init__(name, field, curve_fp.a(), curve_fp.b(), params.order)
        self.params = params
        self.curve_fp = curve_fp

    def to_jacobi(self, point: AffinePoint) -> PointJacobi:
        return PointJacobi(self.curve_fp, point.x.n, point.y.n, 1)

    def from_jacobi(self, pt) -> AffinePoint:
        if pt == INFINITY:
            return self.identity()
        return self.new_point(pt.x(), pt.y())

    def add(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        if p.infinity:
            return q
        if q.infinity:
            return p
        return self.from_jacobi(self.to_jacobi(p) + self.to_jacobi(q))

    def double(self, point: AffinePoint) -> AffinePoint:
        if point.infinity:
            return point
        return self.from_jacobi(self.to_jacobi(point).double())

    def multiply(self, point: AffinePoint, scalar: int) -> AffinePoint:
        if scalar < 0:
            return self.multiply(self.neg(point), -scalar)
        if point.infinity or scalar == 0:
            return self.identity()
        return self.from_jacobi(self.to_jacobi(point) * scalar)

    def generator(self) -> AffinePoint:
        g = self.params.generator
        return self.new_point(g.x(), g.y())


def p256_curve() -> NISTCurve:
    return NISTCurve("P-256", curves.NIST256p)


def p384_curve() -> NISTCurve:
    return NISTCurve("P-384", curves.NIST384p)


def p521_curve() -> NISTCurve:
    return NISTCurve("P-521", curves.NIST521p)
