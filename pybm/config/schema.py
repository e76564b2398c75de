# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for pybm.

Every config section gets its own frozen pydantic model. Frozen means once
you create it, you cannot mutate it. CLI overrides produce a new, validated
model (see `pybm.config.loader.apply_overrides`) instead of patching the
loaded one.

The models use pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SAMPLES = 1000
DEFAULT_ITERATIONS = 1
DEFAULT_RUNTIMES = ("python3", "python", "pypy3")


class GlobalConfig(BaseModel):
    """
    Cross-cutting settings that apply to every command: observability and
    the schema version of the file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{value}'")
        return upper


class BenchConfig(BaseModel):
    """
    Everything a benchmark run needs: how many trials, how many iterations
    per trial, which interpreters execute the generated script and what to
    do with the script afterwards.

    Zero samples or zero iterations would produce an empty result list and
    NaN statistics, so both are rejected here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    samples: int = Field(
        default=DEFAULT_SAMPLES,
        ge=1,
        description="Independent trials per snippet",
    )
    iterations: int = Field(
        default=DEFAULT_ITERATIONS,
        ge=1,
        description="Executions of the snippet body inside one timed trial",
    )
    runtimes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RUNTIMES),
        min_length=1,
        description="Interpreters to try, in order. The first available one is used "
        "unless runtimes are named explicitly on the command line",
    )
    keep: bool = Field(
        default=False,
        description="Keep the generated script next to the document",
    )
    markdown: bool = Field(
        default=False,
        description="Print banners, results and code listings as markdown",
    )
    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Kill a generated script that runs longer than this",
    )


class PybmConfig(BaseModel):
    """
    Top-level config container.

    A file must contain `global:`; `bench:` is optional and falls back to
    the defaults above.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    bench: BenchConfig = Field(default_factory=BenchConfig)
