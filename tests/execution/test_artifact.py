# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for generated script placement and cleanup."""

from pathlib import Path

import pytest

from pybm.execution.artifact import GeneratedScript, script_path_for


class TestScriptPathFor:
    def test_tag_goes_before_extension(self) -> None:
        assert script_path_for(Path("benches/bench.py")) == Path("benches/bench.pybm.py")

    def test_only_last_extension_is_split(self) -> None:
        assert script_path_for(Path("bench.v2.py")) == Path("bench.v2.pybm.py")

    def test_no_extension(self) -> None:
        assert script_path_for(Path("bench")) == Path("bench.pybm")


class TestGeneratedScript:
    def test_written_on_enter_removed_on_exit(self, tmp_path: Path) -> None:
        target = tmp_path / "bench.pybm.py"

        with GeneratedScript(target, "print(1)\n") as script:
            assert script == target
            assert target.read_text(encoding="utf-8") == "print(1)\n"

        assert not target.exists()

    def test_keep_leaves_the_file(self, tmp_path: Path) -> None:
        target = tmp_path / "bench.pybm.py"

        with GeneratedScript(target, "print(1)\n", keep=True):
            pass

        assert target.read_text(encoding="utf-8") == "print(1)\n"

    def test_removed_when_block_raises(self, tmp_path: Path) -> None:
        target = tmp_path / "bench.pybm.py"

        with pytest.raises(KeyboardInterrupt):
            with GeneratedScript(target, "print(1)\n"):
                raise KeyboardInterrupt

        assert not target.exists()

    def test_already_removed_file_is_fine(self, tmp_path: Path) -> None:
        target = tmp_path / "bench.pybm.py"

        with GeneratedScript(target, "print(1)\n"):
            target.unlink()

        assert not target.exists()

    def test_path_property(self, tmp_path: Path) -> None:
        target = tmp_path / "x.pybm.py"
        assert GeneratedScript(target, "").path == target
