# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Statistics engine.

Reduces the raw duration samples of one snippet (fractional milliseconds,
one per trial) to a trimmed mean, a standard deviation and the share of
samples thrown away as outliers:

  1. sort the samples
  2. fq = len / 4, top = ceil(fq * 3), bot = floor(fq)
  3. margin = (sorted[top] - sorted[bot]) * 1.5
  4. keep sorted[bot] - margin <= v <= sorted[top] + margin
  5. mean and population std of the kept values, in whole microseconds
  6. outliers = 100 - kept * 100 / len, in whole percent

This is not a textbook IQR: fq indexes the sorted list directly. Printed
results depend on this exact arithmetic, so do not "fix" it.

The arithmetic lives in pybm.harness.runtime because generated scripts
carry their own copy of it. This module is the in-process face of the
same code.
"""

from dataclasses import dataclass
from typing import Sequence

from pybm.harness.runtime import _pybm_reduce


@dataclass(frozen=True)
class Stats:
    """Reduced timing of one snippet. mean/std in microseconds, outliers in percent."""

    mean: int
    std: int
    outliers: int

    def as_dict(self) -> dict[str, int]:
        return {"mean": self.mean, "std": self.std, "outliers": self.outliers}


def reduce_samples(samples: Sequence[float]) -> Stats:
    """
    Reduce millisecond samples to trimmed statistics.

    The input is not modified. With fewer than four samples the upper
    quartile index would point past the end of the list, so it is clamped
    to the last sample.

    Raises:
        ValueError: If `samples` is empty.
    """
    reduced = _pybm_reduce(list(samples))
    return Stats(
        mean=reduced["mean"],
        std=reduced["std"],
        outliers=reduced["outliers"],
    )
