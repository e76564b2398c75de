# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the statistics engine.

The trimming formula is not a textbook IQR, so the expected values here are
worked out from the formula itself:

    fq = n / 4, top = ceil(3 * fq), bot = floor(fq)
    margin = (s[top] - s[bot]) * 1.5
"""

import pytest

from pybm.harness.stats import Stats, reduce_samples


class TestTrimming:
    def test_five_samples_with_a_spike(self) -> None:
        # n=5: top=4, bot=1, margin=(100-10)*1.5=135 -> the 100 stays in range.
        stats = reduce_samples([10, 10, 10, 10, 100])
        assert stats == Stats(mean=28000, std=36000, outliers=0)

    def test_spike_outside_the_margin_is_dropped(self) -> None:
        # n=8: top=6, bot=2, both 1 -> margin 0, so 50 falls outside.
        stats = reduce_samples([1, 1, 1, 50, 1, 1, 1, 1])
        assert stats.mean == 1000
        assert stats.std == 0
        # 100 - 7 * 100 / 8 = 12.5, rounded half up.
        assert stats.outliers == 13

    def test_low_outlier_is_dropped(self) -> None:
        stats = reduce_samples([0.001, 2, 2, 2, 2, 2, 2, 2])
        assert stats.mean == 2000
        assert stats.outliers == 13


class TestUniformSamples:
    def test_uniform_samples_have_no_spread(self) -> None:
        stats = reduce_samples([0.25] * 40)
        assert stats == Stats(mean=250, std=0, outliers=0)

    def test_single_sample(self) -> None:
        assert reduce_samples([2.5]) == Stats(mean=2500, std=0, outliers=0)

    @pytest.mark.parametrize("count", [1, 2, 3])
    def test_short_inputs_clamp_the_upper_index(self, count: int) -> None:
        stats = reduce_samples([4.0] * count)
        assert stats == Stats(mean=4000, std=0, outliers=0)


class TestSpread:
    def test_population_standard_deviation(self) -> None:
        # mean 2, squared deviations 1, 0, 0, 1 -> variance 0.5
        stats = reduce_samples([1, 2, 2, 3])
        assert stats.mean == 2000
        assert stats.std == 707
        assert stats.outliers == 0


class TestInputHandling:
    def test_order_does_not_matter(self) -> None:
        samples = [5.0, 1.0, 3.0, 2.0, 4.0, 90.0, 2.5]
        assert reduce_samples(samples) == reduce_samples(sorted(samples))

    def test_input_is_not_modified(self) -> None:
        samples = [3.0, 1.0, 2.0, 5.0]
        reduce_samples(samples)
        assert samples == [3.0, 1.0, 2.0, 5.0]

    def test_accepts_tuples(self) -> None:
        assert reduce_samples((1.0, 1.0, 1.0, 1.0)).mean == 1000

    def test_empty_input_raises(self) -> None:
        with pytest.raises(ValueError):
            reduce_samples([])

    def test_as_dict(self) -> None:
        assert Stats(1, 2, 3).as_dict() == {"mean": 1, "std": 2, "outliers": 3}
