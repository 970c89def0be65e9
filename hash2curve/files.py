# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
"""
Reading and writing hash-to-curve vector files.

A vector file is one JSON object per ciphersuite:

    {"ciphersuite": ..., "dst": ..., "dst_hex": ..., "vectors": [...]}

where each vector carries the message, the `u` values, the mapped points
and the final point `P`, all hex-encoded by :mod:`hash2curve.commands`.
"""
import json

from pathlib import Path
from typing import Any

VECTOR_FILE_KEYS = ("ciphersuite", "dst", "dst_hex", "vectors")
VECTOR_KEYS = ("msg", "msg_hex", "u", "Q0", "P")


def check_vector_file(data: Any, source: str | Path = "<vectors>") -> None:
    """
    Check the shape of a vector file.

    Only the keys are checked; the values are recomputed by
    `commands.check_vectors`.

    Args:
        data: Parsed JSON.
        source: Where `data` came from, for error messages.

    Raises:
        ValueError: If a required key is missing or `vectors` is not a list.
    """
    if not isinstance(data, dict):
        raise ValueError(f"{source}: expected a JSON object")
    missing = [key for key in VECTOR_FILE_KEYS if key not in data]
    if missing:
        raise ValueError(f"{source}: missing {', '.join(missing)}")
    if not isinstance(data["vectors"], list):
        raise ValueError(f"{source}: 'vectors' must be a list")
    for i, vector in enumerate(data["vectors"]):
        missing = [key for key in VECTOR_KEYS if key not in vector]
        if missing:
            raise ValueError(f"{source}: vector {i} is missing {', '.join(missing)}")


def save_vectors(path: str | Path, data: dict[str, Any]) -> Path:
    """
    Write a vector file, creating parent directories as needed.

    Keys are sorted and the file ends with a newline, so regenerating an
    unchanged suite leaves the file byte-identical.

    Returns:
        The path written.

    Raises:
        ValueError: If `data` is not a well-formed vector file.
    """
    check_vector_file(data, path)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def load_vectors(path: str | Path) -> dict[str, Any]:
    """
    Read a vector file written by `save_vectors`.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not JSON.
        ValueError: If the JSON is not a well-formed vector file.
    """
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    check_vector_file(data, path)
    return data
