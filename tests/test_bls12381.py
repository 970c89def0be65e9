# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import pytest
from py_ecc.optimized_bls12_381 import G1, G2, Z1, multiply

from hash2curve.bls12381 import (
    compress,
    g1_curve,
    g1_isogeny,
    g2_curve,
    g2_isogeny,
    uncompress,
)
from hash2curve.constants import BLS12381G1_RO, BLS12381G2_NU, vector_dst
from hash2curve.suites import get_suite

G1_GENERATOR = "97f1d3a73197d7942695638c4fa9ac0fc3688c4f9774b905a14e3a3f171bac586c55e83ff97a1aeffb3af00adb22c6bb"


def test_g1_generator_compressed():
    curve = g1_curve()
    assert compress(curve, curve.from_projective(G1)) == G1_GENERATOR


def test_g1_identity():
    curve = g1_curve()
    assert curve.from_projective(Z1).is_identity()
    assert uncompress(curve, compress(curve, curve.identity())).is_identity()


def test_g1_compress_is_uncompressed():
    curve = g1_curve()
    point = curve.from_projective(multiply(G1, 123456789))
    assert uncompress(curve, compress(curve, point)) == point


def test_g2_compress_is_uncompressed():
    curve = g2_curve()
    point = curve.from_projective(multiply(G2, 123456789))
    assert uncompress(curve, compress(curve, point)) == point


def test_hash_output_compresses():
    g1 = get_suite(BLS12381G1_RO, vector_dst(BLS12381G1_RO))
    g2 = get_suite(BLS12381G2_NU, vector_dst(BLS12381G2_NU))
    assert len(compress(g1.curve, g1.hash(b"abc"))) == 96
    assert len(compress(g2.curve, g2.hash(b"abc"))) == 192


def test_isogeny_codomains():
    assert g1_isogeny().codomain.name == "BLS12-381 G1"
    assert g2_isogeny().codomain.name == "BLS12-381 G2"


def test_g1_clear_cofactor_constants():
    curve = g1_curve()
    assert curve.h_eff == 0xD201000000010001
    g = curve.from_projective(G1)
    # G1 has prime order, so clearing scales by h_eff
    assert curve.clear_cofactor(g) == curve.multiply(g, curve.h_eff)


def test_uncompress_follows_curve():
    g1, g2 = g1_curve(), g2_curve()
    g1_hex = compress(g1, g1.from_projective(G1))
    g2_hex = compress(g2, g2.from_projective(G2))
    assert uncompress(g2, g2_hex) == g2.from_projective(G2)
    with pytest.raises(ValueError):
        uncompress(g2, g1_hex)
    with pytest.raises(ValueError):
        uncompress(g1, g2_hex)


if __name__ == "__main__":
    pytest.main()
