# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging

from hash2curve.constants import MAX_BLOCKS, MAX_DST_LENGTH, MAX_OUTPUT_LENGTH
from hash2curve.errors import ConfigurationError
from hash2curve.hashing import HashFunction, digest, hash_function, i2osp, strxor

logger = logging.getLogger(__name__)


def as_bytes(value: bytes | str) -> bytes:
    """
    Normalize a message or tag into bytes.

    Strings are UTF-8 encoded; bytes-like values are copied into `bytes`.

    Raises:
        TypeError: For anything that is neither text nor bytes-like.
    """
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected bytes or str, got {type(value).__name__}")


def check_dst(dst: bytes) -> None:
    if len(dst) > MAX_DST_LENGTH:
        raise ConfigurationError(
            f"DST must be at most {MAX_DST_LENGTH} bytes, got {len(dst)}"
        )


def expand_message_xmd(
    msg: bytes | str, dst: bytes | str, len_in_bytes: int, hash_fn: HashFunction | str
) -> bytes:
    """
    Stretch a message into `len_in_bytes` pseudorandom bytes (RFC 9380 §5.3.1).

    The construction chains a fixed-output hash H with digest size b:

        DST_prime = DST || I2OSP(len(DST), 1)
        b_0 = H(Z_pad || msg || I2OSP(len_in_bytes, 2) || I2OSP(0, 1) || DST_prime)
        b_1 = H(b_0 || I2OSP(1, 1) || DST_prime)
        b_i = H(strxor(b_0, b_(i-1)) || I2OSP(i, 1) || DST_prime)

    and returns the first `len_in_bytes` bytes of b_1 || ... || b_ell, where
    ell = ceil(len_in_bytes / b) and Z_pad is one input block of zeros.

    Args:
        msg: Message to expand.
        dst: Domain separation tag, at most 255 bytes.
        len_in_bytes: Requested output length, at most 65535.
        hash_fn: A hashlib constructor or hash name (see `hash_function`).

    Returns:
        Exactly `len_in_bytes` bytes.

    Raises:
        ConfigurationError: If the DST, the output length or the number of
            blocks exceeds the limits. Nothing is hashed in that case.
    """
    msg = as_bytes(msg)
    dst = as_bytes(dst)
    hash_fn = hash_function(hash_fn)

    h = hash_fn()
    b_in_bytes = h.digest_size
    r_in_bytes = h.block_size
    if b_in_bytes == 0:
        raise ConfigurationError(f"{h.name} has no fixed output length")

    if len_in_bytes < 0 or len_in_bytes > MAX_OUTPUT_LENGTH:
        raise ConfigurationError(
            f"len_in_bytes must be in [0, {MAX_OUTPUT_LENGTH}], got {len_in_bytes}"
        )
    ell = (len_in_bytes + b_in_bytes - 1) // b_in_bytes
    if ell > MAX_BLOCKS:
        raise ConfigurationError(f"expand_message_xmd needs {ell} blocks, max is {MAX_BLOCKS}")
    check_dst(dst)

    dst_prime = dst + i2osp(len(dst), 1)
    z_pad = i2osp(0, r_in_bytes)
    l_i_b_str = i2osp(len_in_bytes, 2)

    b_0 = digest(hash_fn, z_pad, msg, l_i_b_str, i2osp(0, 1), dst_prime)
    b_i = digest(hash_fn, b_0, i2osp(1, 1), dst_prime)
    blocks = [b_i]
    for i in range(2, ell + 1):
        b_i = digest(hash_fn, strxor(b_0, b_i), i2osp(i, 1), dst_prime)
        blocks.append(b_i)

    return b"".join(blocks)[:len_in_bytes]


class ExpanderXMD:
    """
    expand_message_xmd bound to a hash function and a domain separation tag.

    The tag is validated once here, so a misconfigured expander never gets
    to hash anything.
    """

    def __init__(self, hash_fn: HashFunction | str, dst: bytes | str):
        self.hash_fn = hash_function(hash_fn)
        self.dst = as_bytes(dst)
        check_dst(self.dst)

    def __repr__(self) -> str:
        return f"ExpanderXMD({self.hash_fn().name}, {self.dst!r})"

    def expand(self, msg: bytes | str, len_in_bytes: int) -> bytes:
        logger.debug("expand_message_xmd: %d bytes with %s", len_in_bytes, self.hash_fn().name)
        return expand_message_xmd(msg, self.dst, len_in_bytes, self.hash_fn)
