# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from pathlib import Path
from typing import Any, Iterable

from hash2curve.bls12381 import BLS12381Curve, compress
from hash2curve.curve import element_hex
from hash2curve.expander import as_bytes
from hash2curve.files import load_vectors, save_vectors
from hash2curve.suites import get_suite


def hash_message(suite_id: str, dst: bytes | str, message: bytes | str) -> dict[str, Any]:
    """
    Hash one message and describe every intermediate value.

    The result mirrors the layout of the published vectors:

        {"msg": ..., "u": [...], "Q0": {...}, "Q1": {...}, "P": {...}}

    `Q1` is only present for random-oracle suites. BLS12-381 suites also
    carry `P_compressed`, the 48- or 96-byte compressed form of `P`.

    Args:
        suite_id: Ciphersuite identifier.
        dst: Domain separation tag.
        message: Message to hash; text is UTF-8 encoded.

    Returns:
        A JSON-serializable dict with hex-encoded field elements and points.
    """
    encoding = get_suite(suite_id, dst)
    curve = encoding.curve
    msg = as_bytes(message)

    count = 2 if encoding.is_random_oracle else 1
    u = encoding.hash_to_field(msg, count)
    entry: dict[str, Any] = {
        "msg": msg.decode("utf-8", errors="backslashreplace"),
        "msg_hex": msg.hex(),
        "u": [element_hex(curve.field, ui) for ui in u],
    }
    for i, ui in enumerate(u):
        entry[f"Q{i}"] = curve.point_to_dict(encoding.map_to_curve(ui))
    P = encoding.hash(msg)
    entry["P"] = curve.point_to_dict(P)
    if isinstance(curve, BLS12381Curve):
        entry["P_compressed"] = compress(curve, P)
    return entry


def vectors_for_suite(
    suite_id: str, dst: bytes | str, messages: Iterable[bytes | str]
) -> dict[str, Any]:
    """
    Compute a vector set for one suite.

    Args:
        suite_id: Ciphersuite identifier.
        dst: Domain separation tag.
        messages: Messages to hash.

    Returns:
        {"ciphersuite": suite_id, "dst": <text>, "vectors": [...]}.
    """
    dst = as_bytes(dst)
    return {
        "ciphersuite": suite_id,
        "dst": dst.decode("utf-8", errors="backslashreplace"),
        "dst_hex": dst.hex(),
        "vectors": [hash_message(suite_id, dst, m) for m in messages],
    }


def vectors_to_file(
    path: str | Path, suite_id: str, dst: bytes | str, messages: Iterable[bytes | str]
) -> None:
    """
    Write a vector set for one suite to a JSON file.

    Raises:
        OSError: If the file cannot be written.
    """
    save_vectors(path, vectors_for_suite(suite_id, dst, messages))


def check_vectors(path: str | Path) -> bool:
    """
    Recompute a vector file written by `vectors_to_file` and compare.

    Args:
        path: Path to the JSON vector file.

    Returns:
        True when every entry matches, False otherwise. Mismatching messages
        are printed.
    """
    data = load_vectors(path)
    suite_id = data["ciphersuite"]
    dst = bytes.fromhex(data["dst_hex"])
    ok = True
    for vector in data["vectors"]:
        msg = bytes.fromhex(vector["msg_hex"])
        if hash_message(suite_id, dst, msg) != vector:
            print(f"{suite_id}: mismatch for msg={vector['msg']!r}")
            ok = False
    return ok
