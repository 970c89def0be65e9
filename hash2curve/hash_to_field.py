# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from typing import Any

from hash2curve.expander import ExpanderXMD
from hash2curve.fields import PrimeField, QuadraticField
from hash2curve.hashing import os2ip


def security_length(modulus: int, k: int) -> int:
    """
    Per-coordinate byte length L = ceil((ceil(log2(p)) + k) / 8).

    With L bytes reduced modulo p the bias is at most 2^-k.

    Args:
        modulus: The field characteristic p.
        k: Target security level in bits.

    Returns:
        The byte length L.
    """
    return -(-((modulus - 1).bit_length() + k) // 8)


class FieldHasher:
    """
    hash_to_field (RFC 9380 §5.2) over a fixed field and expander.

    Args:
        field: Target field adapter; its degree is m.
        expander: Source of uniform bytes, already bound to the DST.
        length: Bytes per coordinate, L.
    """

    def __init__(self, field: PrimeField | QuadraticField, expander: ExpanderXMD, length: int):
        self.field = field
        self.expander = expander
        self.length = length

    def __repr__(self) -> str:
        return f"FieldHasher({self.field!r}, L={self.length})"

    @property
    def scalar_field(self) -> PrimeField | QuadraticField:
        """The field the hashed elements belong to."""
        return self.field

    def hash_to_field(self, msg: bytes | str, count: int) -> tuple[Any, ...]:
        """
        Hash a message into `count` field elements.

        Requests count * m * L bytes from the expander, then reads each
        coordinate from the next L bytes as a big-endian integer reduced
        modulo p.

        Args:
            msg: Message to hash.
            count: Number of elements, 1 or 2.

        Returns:
            A tuple of `count` field elements.

        Raises:
            ValueError: If `count` is not 1 or 2.
            ConfigurationError: Propagated from the expander.
        """
        if count not in (1, 2):
            raise ValueError(f"count must be 1 or 2, got {count}")
        m = self.field.degree
        p = self.field.characteristic
        L = self.length

        uniform_bytes = self.expander.expand(msg, count * m * L)
        u = []
        for i in range(count):
            e = []
            for j in range(m):
                elm_offset = L * (j + i * m)
                tv = uniform_bytes[elm_offset : elm_offset + L]
                e.append(os2ip(tv) % p)
            u.append(self.field.from_coordinates(e))
        return tuple(u)

    def hash(self, msg: bytes | str) -> Any:
        """
        Hash a message to a single field element.

        Equivalent to `hash_to_field(msg, 1)[0]`.
        """
        return self.hash_to_field(msg, 1)[0]
