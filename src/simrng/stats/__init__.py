"""
Statistical evaluation engine.

Histogram binning, expected frequencies, interval merging, Pearson's
chi-squared statistic and chi-squared critical values.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .chi_squared import (
    ChiSquaredTest,
    chi_squared_statistic,
    degrees_of_freedom,
    evaluate,
    evaluate_intervals,
)
from .critical import (
    chi_squared_critical_value,
    critical_value,
    gamma_inverse,
    regularized_lower_gamma,
    table_critical_value,
)
from .expected import expected_frequencies, expected_probabilities
from .histogram import Histogram, build_histogram, count_observed, effective_workers
from .merging import MINIMUM_EXPECTED, FrequencyInterval, frequency_table, merge_intervals
from .partition import Partition

__all__ = [
    "Partition",
    "Histogram",
    "build_histogram",
    "count_observed",
    "effective_workers",
    "expected_probabilities",
    "expected_frequencies",
    "FrequencyInterval",
    "frequency_table",
    "merge_intervals",
    "MINIMUM_EXPECTED",
    "ChiSquaredTest",
    "chi_squared_statistic",
    "degrees_of_freedom",
    "evaluate",
    "evaluate_intervals",
    "regularized_lower_gamma",
    "gamma_inverse",
    "chi_squared_critical_value",
    "table_critical_value",
    "critical_value",
]
