# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import hashlib

import pytest
from ecdsa.curves import NIST256p
from py_ecc.bls.hash_to_curve import hash_to_field_FQ, hash_to_field_FQ2
from py_ecc.optimized_bls12_381 import field_modulus

from hash2curve.bls12381 import FP, FP2
from hash2curve.constants import BLS12381G1_RO, BLS12381G2_RO, P256_RO, vector_dst
from hash2curve.expander import ExpanderXMD
from hash2curve.hash_to_field import FieldHasher, security_length
from hash2curve.nist import p256_curve


def test_security_length():
    assert security_length(NIST256p.curve.p(), 128) == 48
    assert security_length(field_modulus, 128) == 64
    assert security_length(2**384 - 2**128 - 2**96 + 2**32 - 1, 192) == 72
    assert security_length(2**521 - 1, 256) == 98
    assert security_length(NIST256p.order, 128) == 48


def test_p256_known_answer():
    dst = vector_dst(P256_RO)
    hasher = FieldHasher(p256_curve().field, ExpanderXMD("SHA-256", dst), 48)
    u0, u1 = hasher.hash_to_field(b"", 2)
    assert u0.n == 0xAD5342C66A6DD0FF080DF1DA0EA1C04B96E0330DD89406465EEBA11582515009
    assert u1.n == 0x8C0F1D43204BD6F6EA70AE8013070A1518B43873BCD850AAFA0A9E220E2EEA5A


@pytest.mark.parametrize("msg", [b"", b"abc", "ünïcödé".encode()])
@pytest.mark.parametrize("count", [1, 2])
def test_g1_matches_py_ecc(msg, count):
    dst = vector_dst(BLS12381G1_RO)
    hasher = FieldHasher(FP, ExpanderXMD(hashlib.sha256, dst), 64)
    assert hasher.hash_to_field(msg, count) == hash_to_field_FQ(msg, count, dst, hashlib.sha256)


@pytest.mark.parametrize("msg", [b"", b"abc", "ünïcödé".encode()])
@pytest.mark.parametrize("count", [1, 2])
def test_g2_matches_py_ecc(msg, count):
    dst = vector_dst(BLS12381G2_RO)
    hasher = FieldHasher(FP2, ExpanderXMD(hashlib.sha256, dst), 64)
    assert hasher.hash_to_field(msg, count) == hash_to_field_FQ2(msg, count, dst, hashlib.sha256)


def test_single_element_is_not_first_of_two():
    # the requested length is bound into the expander output
    hasher = FieldHasher(FP, ExpanderXMD("SHA-256", b"DST"), 64)
    (single,) = hasher.hash_to_field(b"msg", 1)
    first, _ = hasher.hash_to_field(b"msg", 2)
    assert single != first
    assert hasher.hash(b"msg") == single


def test_elements_are_reduced():
    hasher = FieldHasher(FP2, ExpanderXMD("SHA-256", b"DST"), 64)
    for u in hasher.hash_to_field(b"msg", 2):
        assert all(0 <= c < field_modulus for c in FP2.coordinates(u))


@pytest.mark.parametrize("count", [0, 3])
def test_count_must_be_one_or_two(count):
    hasher = FieldHasher(FP, ExpanderXMD("SHA-256", b"DST"), 64)
    with pytest.raises(ValueError):
        hasher.hash_to_field(b"msg", count)


def test_scalar_field():
    hasher = FieldHasher(FP, ExpanderXMD("SHA-256", b"DST"), 64)
    assert hasher.scalar_field is FP


if __name__ == "__main__":
    pytest.main()
