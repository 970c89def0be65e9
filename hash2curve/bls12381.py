# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from typing import Any, Callable

from eth_typing import BLSPubkey, BLSSignature
from py_ecc.bls.g2_primitives import (
    G1_to_pubkey,
    G2_to_signature,
    pubkey_to_G1,
    signature_to_G2,
)
from py_ecc.fields import optimized_bls12_381_FQ as FQ
from py_ecc.fields import optimized_bls12_381_FQ2 as FQ2
from py_ecc.optimized_bls12_381 import (
    add,
    b,
    b2,
    curve_order,
    is_inf,
    iso_map_G1,
    iso_map_G2,
    multiply,
    multiply_clear_cofactor_G1,
    multiply_clear_cofactor_G2,
    normalize,
)
from py_ecc.optimized_bls12_381.constants import (
    ISO_3_A,
    ISO_3_B,
    ISO_3_Z,
    ISO_11_A,
    ISO_11_B,
    ISO_11_Z,
)

from hash2curve.curve import AffinePoint, WeierstrassCurve
from hash2curve.fields import PrimeField, QuadraticField

# G1 cofactor and the effective cofactor of RFC 9380 §8.8.1
G1_COFACTOR = 0x396C8C005555E1568C00AAAB0000AAAB
G1_H_EFF = 0xD201000000010001

FP = PrimeField(FQ)
FP2 = QuadraticField(FQ2)

# SSWU constants of the isogenous curves
G1_Z = ISO_11_Z
G2_Z = ISO_3_Z


class BLS12381Curve(WeierstrassCurve):
    """
    A BLS12-381 group whose arithmetic is done by py_ecc.

    Points stay affine at the boundary; addition, scalar multiplication and
    cofactor clearing are delegated to py_ecc's projective routines.
    """

    def __init__(
        self,
        name: str,
        field: PrimeField | QuadraticField,
        b_coefficient: Any,
        clear: Callable,
        cofactor: int = 1,
        h_eff: int | None = None,
    ):
        super().__init__(name, field, 0, b_coefficient, curve_order, cofactor, h_eff)
        self._clear = clear

    def to_projective(self, point: AffinePoint) -> tuple:
        F = self.field
        if point.infinity:
            return (F.one(), F.one(), F.zero())
        return (point.x, point.y, F.one())

    def from_projective(self, pt: tuple) -> AffinePoint:
        if is_inf(pt):
            return self.identity()
        x, y = normalize(pt)
        return self.new_point(x, y)

    def add(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        return self.from_projective(add(self.to_projective(p), self.to_projective(q)))

    def multiply(self, point: AffinePoint, scalar: int) -> AffinePoint:
        if scalar < 0:
            return self.multiply(self.neg(point), -scalar)
        return self.from_projective(multiply(self.to_projective(point), scalar))

    def clear_cofactor(self, point: AffinePoint) -> AffinePoint:
        return self.from_projective(self._clear(self.to_projective(point)))


class BLS12381Isogeny:
    """
    The isogeny  E' -> E  used by the BLS12-381 suites, evaluated by py_ecc.

    Args:
        domain: The isogenous curve E' the SSWU map lands on.
        codomain: The BLS12-381 group E.
        iso_map: py_ecc's `iso_map_G1` or `iso_map_G2`.
    """

    def __init__(self, domain: WeierstrassCurve, codomain: BLS12381Curve, iso_map: Callable):
        self.domain = domain
        self.codomain = codomain
        self._iso_map = iso_map

    def __repr__(self) -> str:
        return f"BLS12381Isogeny({self.domain.name} -> {self.codomain.name})"

    def push(self, point: AffinePoint) -> AffinePoint:
        if point.infinity:
            return self.codomain.identity()
        one = self.domain.field.one()
        return self.codomain.from_projective(self._iso_map(point.x, point.y, one))


def g1_curve() -> BLS12381Curve:
    return BLS12381Curve(
        "BLS12-381 G1", FP, b, multiply_clear_cofactor_G1, G1_COFACTOR, G1_H_EFF
    )


def g2_curve() -> BLS12381Curve:
    return BLS12381Curve("BLS12-381 G2", FP2, b2, multiply_clear_cofactor_G2)


def g1_isogeny() -> BLS12381Isogeny:
    """11-isogeny from  y^2 = x^3 + A'x + B'  onto G1 (RFC 9380 appendix E.2)."""
    domain = WeierstrassCurve(
        "BLS12-381 G1 11-isogenous", FP, ISO_11_A, ISO_11_B, curve_order, G1_COFACTOR
    )
    return BLS12381Isogeny(domain, g1_curve(), iso_map_G1)


def g2_isogeny() -> BLS12381Isogeny:
    """3-isogeny from  y^2 = x^3 + 240i*x + 1012(1+i)  onto G2 (RFC 9380 appendix E.3)."""
    domain = WeierstrassCurve("BLS12-381 G2 3-isogenous", FP2, ISO_3_A, ISO_3_B, curve_order)
    return BLS12381Isogeny(domain, g2_curve(), iso_map_G2)


def compress(curve: BLS12381Curve, point: AffinePoint) -> str:
    """
    Compresses a BLS12-381 point to a hexadecimal string.

    Args:
        curve: The G1 or G2 curve the point lives on.
        point: The point to be compressed.

    Returns:
        str: 48-byte (G1) or 96-byte (G2) compressed encoding as hex.
    """
    pt = curve.to_projective(point)
    if curve.field.degree == 1:
        return G1_to_pubkey(pt).hex()
    else:
        return G2_to_signature(pt).hex()


def uncompress(curve: BLS12381Curve, element: str) -> AffinePoint:
    """
    Uncompresses a hexadecimal string to a point of `curve`.

    Args:
        curve: The G1 or G2 curve to decode onto; its field degree picks the
            48-byte or the 96-byte encoding.
        element (str): The compressed point as a hexadecimal string.

    Returns:
        AffinePoint: The uncompressed point.

    Raises:
        ValueError: If the encoding has the wrong length for `curve`.
    """
    data = bytes.fromhex(element)
    size = 48 * curve.field.degree
    if len(data) != size:
        raise ValueError(f"{curve.name} points compress to {size} bytes, got {len(data)}")
    if curve.field.degree == 1:
        pt = pubkey_to_G1(BLSPubkey(data))
    else:
        pt = signature_to_G2(BLSSignature(data))
    return curve.from_projective(pt)
