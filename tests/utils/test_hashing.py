# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for document fingerprinting."""

from pybm.utils.hashing import compute_sha256_text


class TestComputeSha256Text:
    def test_known_digest(self) -> None:
        assert (
            compute_sha256_text("")
            == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_deterministic(self) -> None:
        assert compute_sha256_text("#@bench a\nx = 1\n") == compute_sha256_text("#@bench a\nx = 1\n")

    def test_sensitive_to_content(self) -> None:
        assert compute_sha256_text("a") != compute_sha256_text("b")

    def test_hex_length(self) -> None:
        assert len(compute_sha256_text("μs")) == 64
