from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from simrng.stats.merging import FrequencyInterval, frequency_table, merge_intervals
from simrng.stats.partition import Partition


def _table(observed, expected):
    partition = Partition(0.0, float(len(observed)), len(observed))
    return frequency_table(
        partition, np.asarray(observed, dtype=np.int64), np.asarray(expected, dtype=np.float64)
    )


class TestFrequencyTable:
    def test_pairs_bins_with_counts(self) -> None:
        table = _table([1, 2], [1.5, 2.5])
        assert table == [
            FrequencyInterval(0.0, 1.0, 1, 1.5),
            FrequencyInterval(1.0, 2.0, 2, 2.5),
        ]

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            frequency_table(Partition(0.0, 1.0, 2), np.array([1]), np.array([1.0, 2.0]))


class TestMergeIntervals:
    def test_intervals_above_threshold_are_kept(self) -> None:
        table = _table([6, 7, 8], [5.0, 6.0, 9.0])
        assert merge_intervals(table) == table

    def test_pending_run_is_folded_forward(self) -> None:
        merged = merge_intervals(_table([1, 2, 3, 10], [1.0, 2.0, 3.0, 10.0]))

        assert merged == [
            FrequencyInterval(0.0, 3.0, 6, 6.0),
            FrequencyInterval(3.0, 4.0, 10, 10.0),
        ]

    def test_trailing_run_joins_last_interval(self) -> None:
        merged = merge_intervals(_table([8, 9, 1, 1], [8.0, 9.0, 1.0, 2.0]))

        assert merged == [
            FrequencyInterval(0.0, 1.0, 8, 8.0),
            FrequencyInterval(1.0, 4.0, 11, 12.0),
        ]

    def test_nothing_reaches_threshold(self) -> None:
        merged = merge_intervals(_table([1, 0, 2], [1.0, 1.0, 1.0]))
        assert merged == [FrequencyInterval(0.0, 3.0, 3, 3.0)]

    def test_empty_input(self) -> None:
        assert merge_intervals([]) == []

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_sums_are_conserved_and_threshold_met(self, seed) -> None:
        rng = np.random.default_rng(seed)
        expected = rng.uniform(0.0, 9.0, size=30)
        observed = rng.integers(0, 10, size=30)
        merged = merge_intervals(_table(observed, expected))

        assert sum(i.observed for i in merged) == observed.sum()
        assert sum(i.expected for i in merged) == pytest.approx(expected.sum())
        below = [i for i in merged if i.expected < 5.0]
        assert len(below) <= 1
        assert merged[0].lower == 0.0
        assert merged[-1].upper == 30.0
        for left, right in zip(merged, merged[1:]):
            assert left.upper == right.lower

    def test_custom_threshold(self) -> None:
        merged = merge_intervals(_table([1, 1, 1, 1], [1.0, 1.0, 1.0, 1.0]), minimum_expected=2.0)
        assert [i.expected for i in merged] == [2.0, 2.0]
