# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Hashing utilities for pybm.

Generated scripts record the SHA256 of the document they came from, so a
kept script can always be traced back to the exact source text.
"""

import hashlib

HASH_ALGORITHM = "sha256"


def compute_sha256_text(text: str, encoding: str = "utf-8") -> str:
    """
    Compute the SHA256 hex digest of a string.

    Args:
        text: The text to hash.
        encoding: Encoding applied before hashing.

    Returns:
        Lowercase hex string of the SHA256 digest.
    """
    return hashlib.sha256(text.encode(encoding)).hexdigest()
