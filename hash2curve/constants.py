# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# expand_message_xmd limits
MAX_DST_LENGTH = 255
MAX_OUTPUT_LENGTH = 65535
MAX_BLOCKS = 255

# suite ids
P256_RO = "P256_XMD:SHA-256_SSWU_RO_"
P256_NU = "P256_XMD:SHA-256_SSWU_NU_"
P384_RO = "P384_XMD:SHA-384_SSWU_RO_"
P384_NU = "P384_XMD:SHA-384_SSWU_NU_"
P521_RO = "P521_XMD:SHA-512_SSWU_RO_"
P521_NU = "P521_XMD:SHA-512_SSWU_NU_"
BLS12381G1_RO = "BLS12381G1_XMD:SHA-256_SSWU_RO_"
BLS12381G1_NU = "BLS12381G1_XMD:SHA-256_SSWU_NU_"
BLS12381G2_RO = "BLS12381G2_XMD:SHA-256_SSWU_RO_"
BLS12381G2_NU = "BLS12381G2_XMD:SHA-256_SSWU_NU_"

# domain tags used by the published test vectors
TEST_DST_PREFIX = "QUUX-V01-CS02-with-"
EXPANDER_SHA256_DST = b"QUUX-V01-CS02-with-expander-SHA256-128"

# messages used by the published test vectors
TEST_MESSAGES = [
    b"",
    b"abc",
    b"abcdef0123456789",
    b"q128_" + b"q" * 128,
    b"a512_" + b"a" * 512,
]


def vector_dst(suite_id: str) -> bytes:
    """
    Build the domain separation tag the published vectors use for a suite.

    Args:
        suite_id: Ciphersuite identifier, e.g. ``P256_XMD:SHA-256_SSWU_RO_``.

    Returns:
        The tag ``QUUX-V01-CS02-with-<suite_id>`` as bytes.
    """
    return (TEST_DST_PREFIX + suite_id).encode("utf-8")
