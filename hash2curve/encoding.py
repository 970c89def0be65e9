# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
"""
End-to-end encodings: hash_to_field, map_to_curve and clear_cofactor.

Both classes expose the same capabilities (`is_random_oracle`, `hash`,
`curve`, `hash_to_scalar`), so callers pick one when a suite is configured
and never inspect which one they hold.
"""
from typing import Any

from hash2curve.curve import AffinePoint, WeierstrassCurve
from hash2curve.fields import PrimeField, prime_field_class
from hash2curve.hash_to_field import FieldHasher, security_length
from hash2curve.sswu import SSWU, SSWUIsogeny


class Encoding:
    """
    Shared wiring of a hash-to-curve encoding.

    Args:
        curve: Target curve, also the curve `mapper` lands on.
        mapper: An `SSWU` or `SSWUIsogeny` onto `curve`.
        field_hasher: hash_to_field over the curve's base field.
        k: Security level in bits, used to size hash_to_scalar.
    """

    random_oracle = False

    def __init__(
        self,
        curve: WeierstrassCurve,
        mapper: SSWU | SSWUIsogeny,
        field_hasher: FieldHasher,
        k: int = 128,
    ):
        self._curve = curve
        self.mapper = mapper
        self.field_hasher = field_hasher
        self.k = k

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._curve.name}, {self.field_hasher.expander!r})"

    @property
    def is_random_oracle(self) -> bool:
        return self.random_oracle

    @property
    def curve(self) -> WeierstrassCurve:
        return self._curve

    def hash_to_field(self, msg: bytes | str, count: int) -> tuple[Any, ...]:
        return self.field_hasher.hash_to_field(msg, count)

    def map_to_curve(self, u: Any) -> AffinePoint:
        return self.mapper.map(u)

    def hash_to_scalar(self) -> FieldHasher:
        """
        hash_to_field into the scalar field Z_r of the curve's subgroup.

        Uses the same expander and DST as the point encoding, with
        L = ceil((ceil(log2(r)) + k) / 8).
        """
        order = self._curve.order
        scalar_field = PrimeField(prime_field_class("Zr", order))
        return FieldHasher(
            scalar_field, self.field_hasher.expander, security_length(order, self.k)
        )

    def hash(self, msg: bytes | str) -> AffinePoint:
        raise NotImplementedError


class EncodeToCurve(Encoding):
    """
    Nonuniform encoding: one field element, mapped and cofactor-cleared.

    The output distribution is not indistinguishable from a random oracle.
    """

    random_oracle = False

    def hash(self, msg: bytes | str) -> AffinePoint:
        (u,) = self.hash_to_field(msg, 1)
        Q = self.map_to_curve(u)
        return self._curve.clear_cofactor(Q)


class HashToCurve(Encoding):
    """
    Random-oracle encoding: two field elements, mapped, added, cofactor-cleared.
    """

    random_oracle = True

    def hash(self, msg: bytes | str) -> AffinePoint:
        u0, u1 = self.hash_to_field(msg, 2)
        Q0 = self.map_to_curve(u0)
        Q1 = self.map_to_curve(u1)
        R = self._curve.add(Q0, Q1)
        return self._curve.clear_cofactor(R)
