# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
"""
Ciphersuites of RFC 9380 §8 built on SSWU and expand_message_xmd.

A :class:`Suite` is plain configuration. Calling :meth:`Suite.encoding`
with a domain separation tag builds the expander, field hasher, mapper and
curve once and returns a `HashToCurve` (``_RO_`` suites) or an
`EncodeToCurve` (``_NU_`` suites).
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable

from hash2curve import bls12381
from hash2curve.constants import (
    BLS12381G1_NU,
    BLS12381G1_RO,
    BLS12381G2_NU,
    BLS12381G2_RO,
    P256_NU,
    P256_RO,
    P384_NU,
    P384_RO,
    P521_NU,
    P521_RO,
)
from hash2curve.curve import WeierstrassCurve
from hash2curve.encoding import Encoding, EncodeToCurve, HashToCurve
from hash2curve.errors import ConfigurationError
from hash2curve.expander import ExpanderXMD
from hash2curve.hash_to_field import FieldHasher
from hash2curve.nist import p256_curve, p384_curve, p521_curve
from hash2curve.sswu import new_sswu

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suite:
    """
    Parameters of one hash-to-curve ciphersuite.

    Attributes:
        suite_id: Identifier, e.g. ``P256_XMD:SHA-256_SSWU_RO_``.
        curve: Factory for the target curve.
        z: SSWU constant for the curve the map runs on (the isogenous curve
            when `isogeny` is set).
        length: Bytes per field coordinate, L.
        k: Security level in bits.
        hash_name: Hash function of expand_message_xmd.
        random_oracle: True for ``_RO_`` suites.
        isogeny: Factory for the isogeny used when A = 0 or B = 0.
    """

    suite_id: str
    curve: Callable[[], WeierstrassCurve]
    z: Any
    length: int
    k: int
    hash_name: str
    random_oracle: bool
    isogeny: Callable[[], Any] | None = None

    def encoding(self, dst: bytes | str) -> Encoding:
        """
        Build the encoding for this suite bound to `dst`.

        Raises:
            ConfigurationError: If `dst` is longer than 255 bytes or the
                curve does not meet the SSWU requirements.
        """
        curve = self.curve()
        expander = ExpanderXMD(self.hash_name, dst)
        field_hasher = FieldHasher(curve.field, expander, self.length)
        mapper = new_sswu(curve, self.z, self.isogeny)
        cls = HashToCurve if self.random_oracle else EncodeToCurve
        logger.debug("built %s for %s", cls.__name__, self.suite_id)
        return cls(curve, mapper, field_hasher, self.k)


def _nist(ro: str, nu: str, curve: Callable, z: int, length: int, k: int, hash_name: str):
    return [
        Suite(ro, curve, z, length, k, hash_name, True),
        Suite(nu, curve, z, length, k, hash_name, False),
    ]


def _bls(ro: str, nu: str, curve: Callable, z: Any, isogeny: Callable):
    return [
        Suite(ro, curve, z, 64, 128, "SHA-256", True, isogeny),
        Suite(nu, curve, z, 64, 128, "SHA-256", False, isogeny),
    ]


SUITES: dict[str, Suite] = {
    suite.suite_id: suite
    for suite in (
        _nist(P256_RO, P256_NU, p256_curve, -10, 48, 128, "SHA-256")
        + _nist(P384_RO, P384_NU, p384_curve, -12, 72, 192, "SHA-384")
        + _nist(P521_RO, P521_NU, p521_curve, -4, 98, 256, "SHA-512")
        + _bls(BLS12381G1_RO, BLS12381G1_NU, bls12381.g1_curve, bls12381.G1_Z, bls12381.g1_isogeny)
        + _bls(BLS12381G2_RO, BLS12381G2_NU, bls12381.g2_curve, bls12381.G2_Z, bls12381.g2_isogeny)
    )
}


def get_suite(suite_id: str, dst: bytes | str) -> Encoding:
    """
    Look up a suite by id and bind it to a domain separation tag.

    Args:
        suite_id: One of the ids in `SUITES`.
        dst: Domain separation tag, at most 255 bytes.

    Returns:
        `HashToCurve` for ``_RO_`` suites, `EncodeToCurve` for ``_NU_``.

    Raises:
        ConfigurationError: If the id is unknown or the DST is too long.
    """
    try:
        suite = SUITES[suite_id]
    except KeyError:
        raise ConfigurationError(f"Unknown suite {suite_id!r}") from None
    return suite.encoding(dst)
