#!/usr/bin/env python3

# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

"""
Generate <suite>.json vector files for every supported ciphersuite.

Uses the tags and messages of the published RFC 9380 vectors, so the output
can be diffed against appendix J.

Run from the repository root:
    PYTHONPATH=. python test-vectors/generate_vectors.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from hash2curve.commands import vectors_to_file
from hash2curve.constants import TEST_MESSAGES, vector_dst
from hash2curve.suites import SUITES


def file_name(suite_id: str) -> str:
    return suite_id.strip("_").replace(":", "_") + ".json"


out_dir = Path(__file__).resolve().parent
for suite_id in SUITES:
    out_path = out_dir / file_name(suite_id)
    vectors_to_file(out_path, suite_id, vector_dst(suite_id), TEST_MESSAGES)
    print(f"Wrote {len(TEST_MESSAGES)} vectors to {out_path}")
