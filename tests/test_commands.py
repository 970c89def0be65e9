# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import json

import pytest

from hash2curve.bls12381 import g1_curve, uncompress
from hash2curve.commands import check_vectors, hash_message, vectors_for_suite, vectors_to_file
from hash2curve.constants import BLS12381G1_NU, P256_NU, P256_RO, vector_dst


def test_hash_message_random_oracle():
    entry = hash_message(P256_RO, vector_dst(P256_RO), b"")
    assert entry["msg"] == ""
    assert len(entry["u"]) == 2
    assert set(entry) == {"msg", "msg_hex", "u", "Q0", "Q1", "P"}
    assert entry["P"]["x"] == "0x2c15230b26dbc6fc9a37051158c95b79656e17a1a920b11394ca91c44247d3e4"


def test_hash_message_nonuniform():
    entry = hash_message(P256_NU, vector_dst(P256_NU), "abc")
    assert len(entry["u"]) == 1
    assert "Q1" not in entry
    # P-256 has cofactor 1, so the encoding is the mapped point
    assert entry["P"] == entry["Q0"]


def test_vectors_for_suite():
    data = vectors_for_suite(BLS12381G1_NU, vector_dst(BLS12381G1_NU), [b"", b"abc"])
    assert data["ciphersuite"] == BLS12381G1_NU
    assert data["dst"] == "QUUX-V01-CS02-with-BLS12381G1_XMD:SHA-256_SSWU_NU_"
    assert [v["msg"] for v in data["vectors"]] == ["", "abc"]


def test_vectors_round_trip(tmp_path):
    path = tmp_path / "p256.json"
    vectors_to_file(path, P256_RO, vector_dst(P256_RO), [b"", b"abc", "é".encode()])
    assert check_vectors(path)


def test_check_vectors_detects_tampering(tmp_path, capsys):
    path = tmp_path / "p256.json"
    vectors_to_file(path, P256_RO, vector_dst(P256_RO), [b"abc"])
    data = json.loads(path.read_text())
    data["vectors"][0]["P"]["x"] = "0x1"
    path.write_text(json.dumps(data))
    assert not check_vectors(path)
    assert "mismatch" in capsys.readouterr().out


def test_bls_entry_carries_compressed_point():
    entry = hash_message(BLS12381G1_NU, vector_dst(BLS12381G1_NU), b"")
    curve = g1_curve()
    assert len(entry["P_compressed"]) == 96
    assert curve.point_to_dict(uncompress(curve, entry["P_compressed"])) == entry["P"]
    assert "P_compressed" not in hash_message(P256_RO, vector_dst(P256_RO), b"")


def test_check_vectors_rejects_malformed_file(tmp_path):
    path = tmp_path / "p256.json"
    path.write_text(json.dumps({"ciphersuite": P256_RO, "vectors": []}))
    with pytest.raises(ValueError):
        check_vectors(path)


if __name__ == "__main__":
    pytest.main()
