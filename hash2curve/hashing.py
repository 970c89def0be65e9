# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

import hashlib
from typing import Any, Callable

from hash2curve.errors import ConfigurationError

HashFunction = Callable[..., Any]

# suite spelling -> hashlib constructor
_HASHES: dict[str, HashFunction] = {
    "SHA-256": hashlib.sha256,
    "SHA-384": hashlib.sha384,
    "SHA-512": hashlib.sha512,
    "SHA3-256": hashlib.sha3_256,
    "SHA3-384": hashlib.sha3_384,
    "SHA3-512": hashlib.sha3_512,
}


def hash_function(name: str | HashFunction) -> HashFunction:
    """
    Resolve a hash function by name into a hashlib constructor.

    Accepts the spelling used in suite ids ("SHA-256") as well as the hashlib
    spelling ("sha256"). Callables are returned unchanged.

    Args:
        name: A hash name or a hashlib-style constructor.

    Returns:
        A zero-argument callable returning a fresh hash object.

    Raises:
        ConfigurationError: If the name is unknown or names an
            extendable-output function.
    """
    if callable(name):
        return name
    key = name.strip().upper().replace("_", "-")
    if key in _HASHES:
        return _HASHES[key]
    for fn in _HASHES.values():
        if fn().name.upper() == name.strip().upper():
            return fn
    raise ConfigurationError(f"Unsupported hash function {name!r}")


def digest(hash_fn: HashFunction, *parts: bytes) -> bytes:
    """
    Hash the concatenation of byte strings.

    Args:
        hash_fn: A hashlib-style constructor.
        *parts: Byte strings fed to the hash in order.

    Returns:
        The digest bytes.
    """
    h = hash_fn()
    for part in parts:
        h.update(part)
    return h.digest()


def i2osp(value: int, length: int) -> bytes:
    """
    Integer-to-octet-string primitive: big-endian, fixed width.

    Raises:
        ValueError: If the value does not fit in `length` bytes.
    """
    if value < 0 or value >= 1 << (8 * length):
        raise ValueError(f"bad I2OSP call: val={value} length={length}")
    return value.to_bytes(length, "big")


def os2ip(octets: bytes) -> int:
    """Octet-string-to-integer primitive: big-endian, unsigned."""
    return int.from_bytes(octets, "big")


def strxor(left: bytes, right: bytes) -> bytes:
    """Bytewise XOR of two equal-length strings."""
    return bytes(a ^ b for a, b in zip(left, right))
