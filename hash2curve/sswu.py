# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
"""
Simplified Shallue-van de Woestijne-Ulas map (RFC 9380 §6.6.2).

:class:`SSWU` maps a field element to a point of  y^2 = x^3 + A*x + B  with
A*B != 0. Curves with A = 0 or B = 0 go through :class:`SSWUIsogeny`, which
maps onto an isogenous curve first and pushes the result forward.
"""
import logging
from typing import Any, Callable

from hash2curve.curve import AffinePoint, WeierstrassCurve
from hash2curve.errors import ConfigurationError

logger = logging.getLogger(__name__)


class SSWU:
    """
    Straight-line SSWU map onto `curve` with non-square constant `z`.

    Raises:
        ConfigurationError: If A = 0, B = 0, Z is a square, Z = -1 or
            g(B / (Z*A)) is not a square.
    """

    def __init__(self, curve: WeierstrassCurve, z: Any):
        self.curve = curve
        self.z = curve.field.elt(z)
        if not self.verify():
            raise ConfigurationError(f"{curve.name} does not meet the SSWU requirements for Z={z}")
        self.precompute()

    def __repr__(self) -> str:
        return f"SSWU({self.curve.name})"

    def verify(self) -> bool:
        F = self.curve.field
        A, B, Z = self.curve.a, self.curve.b, self.z
        if F.is_zero(A) or F.is_zero(B):
            return False
        if F.is_square(Z):
            return False
        if F.are_equal(Z, F.neg(F.one())):
            return False
        t0 = F.div(B, F.mul(Z, A))  # B / (Z*A)
        return F.is_square(self.curve.rhs(t0))

    def precompute(self) -> None:
        F = self.curve.field
        self.c1 = F.neg(F.div(self.curve.b, self.curve.a))  # -B/A
        self.c2 = F.neg(F.inv(self.z))  # -1/Z

    def sqrt_ratio(self, u: Any, v: Any) -> tuple[bool, Any]:
        """
        (True, sqrt(u/v)) if u/v is square, else (False, sqrt(Z * u/v)).
        """
        F = self.curve.field
        r = F.div(u, v)
        is_square = F.is_square(r)
        r = F.cmov(F.mul(self.z, r), r, is_square)
        return is_square, F.sqrt(r)

    def map(self, u: Any) -> AffinePoint:
        """
        Map `u` to a point on `self.curve` (RFC 9380 §6.6.2, straight-line form).

        The sign of the returned y matches sgn0(u).
        """
        F = self.curve.field
        A, B, Z = self.curve.a, self.curve.b, self.z

        tv1 = F.mul(Z, F.sqr(u))
        tv2 = F.add(F.sqr(tv1), tv1)
        tv3 = F.mul(B, F.add(tv2, F.one()))
        # tv4 = A * CMOV(Z, -tv2, tv2 != 0)
        tv4 = F.mul(A, F.cmov(Z, F.neg(tv2), not F.is_zero(tv2)))

        # g(x) = tv2 / tv6 with x = tv3 / tv4
        tv2 = F.sqr(tv3)
        tv6 = F.sqr(tv4)
        tv5 = F.mul(A, tv6)
        tv2 = F.add(tv2, tv5)
        tv2 = F.mul(tv2, tv3)
        tv6 = F.mul(tv6, tv4)
        tv5 = F.mul(B, tv6)
        tv2 = F.add(tv2, tv5)

        x = F.mul(tv1, tv3)
        is_gx1_square, y1 = self.sqrt_ratio(tv2, tv6)
        y = F.mul(F.mul(tv1, u), y1)
        x = F.cmov(x, tv3, is_gx1_square)
        y = F.cmov(y, y1, is_gx1_square)
        e1 = F.sgn0(u) == F.sgn0(y)
        y = F.cmov(F.neg(y), y, e1)
        x = F.div(x, tv4)
        return self.curve.new_point(x, y)


class SSWUIsogeny:
    """
    SSWU for a curve with A = 0 or B = 0.

    `inner` maps onto `isogeny.domain`; the result is pushed forward onto
    `curve`, so callers see the same `map(u)` contract as :class:`SSWU`.
    """

    def __init__(self, curve: WeierstrassCurve, isogeny: Any, inner: SSWU):
        self.curve = curve
        self.isogeny = isogeny
        self.inner = inner

    def __repr__(self) -> str:
        return f"SSWUIsogeny({self.curve.name} via {self.isogeny.domain.name})"

    def map(self, u: Any) -> AffinePoint:
        return self.isogeny.push(self.inner.map(u))


def new_sswu(
    curve: WeierstrassCurve, z: Any, isogeny: Callable[[], Any] | None = None
) -> SSWU | SSWUIsogeny:
    """
    Build the SSWU map for `curve`.

    When A = 0 or B = 0 and an isogeny factory is given, the map is built over
    the isogeny's domain and composed with the pushforward. Otherwise the
    direct map is built, which fails for such curves.

    Args:
        curve: Target curve.
        z: Non-square constant for the curve the map actually runs on.
        isogeny: Optional zero-argument factory returning an object with
            `domain` and `push`.

    Returns:
        An object with `map(u) -> AffinePoint` onto `curve`.

    Raises:
        ConfigurationError: If the curve the map runs on fails the SSWU
            requirements.
    """
    F = curve.field
    degenerate = F.is_zero(curve.a) or F.is_zero(curve.b)
    if degenerate and isogeny is not None:
        iso = isogeny()
        logger.debug("SSWU for %s through %s", curve.name, iso.domain.name)
        return SSWUIsogeny(curve, iso, SSWU(iso.domain, z))
    logger.debug("SSWU for %s", curve.name)
    return SSWU(curve, z)
