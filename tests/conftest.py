# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for pybm tests.

Fixtures here are available to every test file automatically.
We keep them minimal: just the stuff that multiple test modules need.
"""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """
    Create a minimal valid config YAML file in a temp directory.

    Small sample counts keep generated scripts fast when tests run them.
    """
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          log_level: "DEBUG"
        bench:
          samples: 5
          iterations: 2
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """A config file that's valid YAML but fails schema validation (missing required field)."""
    config_content = textwrap.dedent("""\
        global:
          log_level: "INFO"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file


@pytest.fixture()
def sample_document(tmp_path: Path) -> Path:
    """
    An annotated document with helper code, two passing snippets and one
    that always raises, placed between them.
    """
    content = textwrap.dedent('''\
        """Lists versus tuples."""

        items = list(range(100))

        #@bench list-copy
        copied = list(items)

        #@bench {always fails}
        1 / 0

        #@bench tuple-copy
        copied = tuple(items)
    ''')
    document = tmp_path / "bench_sample.py"
    document.write_text(content, encoding="utf-8")
    return document
