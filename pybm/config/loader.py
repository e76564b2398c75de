# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config loader. Reads YAML from disk and produces a validated, frozen PybmConfig.

The loading pipeline is deliberately simple and linear:
  1. Read raw text from the file
  2. Parse as YAML into a plain dict
  3. Hand the dict to pydantic for schema validation
  4. Return the frozen, immutable config object

If anything goes wrong at any step, we fail immediately with a clear error.
A broken config should stop the run before any script is generated.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pybm.config.exceptions import ConfigLoadError, ConfigValidationError
from pybm.config.schema import BenchConfig, PybmConfig


def _read_yaml_file(config_path: Path) -> dict[str, Any]:
    """
    Read a YAML file and return the parsed dict.

    We explicitly check for file existence before parsing, because
    yaml.safe_load gives cryptic errors on missing files.

    Raises:
        ConfigLoadError: If the file doesn't exist, isn't readable, or isn't valid YAML.
    """
    if not config_path.exists():
        raise ConfigLoadError(f"Config file not found: {config_path}", path=config_path)

    if not config_path.is_file():
        raise ConfigLoadError(f"Config path is not a file: {config_path}", path=config_path)

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}", path=config_path) from err

    try:
        parsed = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}", path=config_path) from err

    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file must contain a YAML mapping (dict), got {type(parsed).__name__}",
            path=config_path,
        )

    return parsed


def load_config(config_path: Path) -> PybmConfig:
    """
    Load, validate, and freeze a config file into a PybmConfig object.

    Raises:
        ConfigLoadError: File I/O or YAML parse failures.
        ConfigValidationError: Schema violations (missing fields, wrong types, unknown keys).
    """
    raw_data = _read_yaml_file(config_path)

    try:
        config = PybmConfig.model_validate(raw_data)
    except ValidationError as err:
        raise ConfigValidationError(
            f"Config validation failed for {config_path}:\n{err}",
            path=config_path,
        ) from err

    return config


def apply_overrides(bench: BenchConfig, **overrides: Any) -> BenchConfig:
    """
    Return a new BenchConfig with command-line overrides applied.

    Overrides whose value is None were not given on the command line and
    leave the configured value alone. The result is validated again, so a
    `--samples 0` fails exactly like `samples: 0` in the file would.

    Raises:
        ConfigValidationError: If an override violates the schema.
    """
    merged = bench.model_dump()
    merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return BenchConfig.model_validate(merged)
    except ValidationError as err:
        raise ConfigValidationError(f"Invalid benchmark options:\n{err}") from err
