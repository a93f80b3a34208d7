"""Unit tests for the entropy math."""

import math

import numpy as np
import pytest

from id3 import (
    InvalidGroupSize,
    InvalidProbabilityDistribution,
    InvalidTotalEntries,
    calculate_average_information_entropy,
    calculate_entropy,
)


class TestCalculateEntropy:
    """Tests for the entropy of a probability distribution."""

    def test_fair_coin_is_one_bit(self):
        assert calculate_entropy([0.5, 0.5]) == 1.0

    def test_pure_distribution_is_zero(self):
        """A single certain outcome carries no uncertainty."""
        assert calculate_entropy([1.0]) == 0.0
        assert calculate_entropy([0.0, 1.0, 0.0]) == 0.0

    def test_zero_probabilities_do_not_produce_nan(self):
        entropy = calculate_entropy([0.5, 0.0, 0.5])
        assert not math.isnan(entropy)
        assert entropy == pytest.approx(1.0)

    def test_uniform_distribution_is_log2_of_outcomes(self):
        assert calculate_entropy([0.25] * 4) == pytest.approx(2.0)
        assert calculate_entropy([1 / 3] * 3) == pytest.approx(math.log2(3))

    def test_skewed_distribution(self):
        assert calculate_entropy([9 / 14, 5 / 14]) == pytest.approx(0.940286, abs=1e-6)

    def test_entropy_is_never_negative(self):
        for probabilities in ([0.9, 0.1], [0.7, 0.2, 0.1], [1.0, 0.0], [0.6, 0.4]):
            assert calculate_entropy(probabilities) >= 0.0

    def test_accepts_numpy_arrays(self):
        assert calculate_entropy(np.array([0.5, 0.5])) == 1.0

    def test_subnormal_probability_stays_finite(self):
        """A vanishingly rare outcome adds almost nothing to the entropy."""
        entropy = calculate_entropy([1.0, 5e-324])
        assert math.isfinite(entropy)
        assert 0.0 <= entropy <= 1.0
        assert entropy == pytest.approx(0.0, abs=1e-300)

    def test_pure_distribution_is_positive_zero(self):
        assert math.copysign(1.0, calculate_entropy([1.0])) == 1.0

    def test_rounding_drift_is_tolerated(self):
        """Ten times 0.1 does not sum to exactly 1.0 in floating point."""
        assert calculate_entropy([0.1] * 10) == pytest.approx(math.log2(10))

    def test_sum_below_one_raises(self):
        with pytest.raises(InvalidProbabilityDistribution, match="not 1"):
            calculate_entropy([0.5, 0.4])

    def test_sum_above_one_raises(self):
        with pytest.raises(InvalidProbabilityDistribution):
            calculate_entropy([0.6, 0.6])

    def test_empty_distribution_raises(self):
        with pytest.raises(InvalidProbabilityDistribution):
            calculate_entropy([])

    def test_strict_tolerance_rejects_small_drift(self):
        with pytest.raises(InvalidProbabilityDistribution):
            calculate_entropy([0.5, 0.5 + 1e-12], tolerance=0)

    def test_negative_probability_raises(self):
        with pytest.raises(InvalidProbabilityDistribution, match="negative"):
            calculate_entropy([1.5, -0.5])

    def test_nan_probability_raises(self):
        with pytest.raises(InvalidProbabilityDistribution):
            calculate_entropy([float("nan"), 1.0])

    def test_nested_sequence_raises(self):
        with pytest.raises(InvalidProbabilityDistribution):
            calculate_entropy([[0.5, 0.5]])

    def test_invalid_tolerance_raises_value_error(self):
        with pytest.raises(ValueError, match="tolerance"):
            calculate_entropy([1.0], tolerance=-1)

    def test_errors_are_value_errors(self):
        """Callers guarding with ValueError still catch distribution errors."""
        with pytest.raises(ValueError):
            calculate_entropy([0.2])


class TestCalculateAverageInformationEntropy:
    """Tests for the weighted average of group entropies."""

    def test_weighted_average(self):
        result = calculate_average_information_entropy(10, [(4, 0.0), (6, 1.0)])
        assert result == pytest.approx(0.6)

    def test_outlook_groups(self):
        """Matches the textbook I(outlook) for the weather data."""
        h = calculate_entropy([2 / 5, 3 / 5])
        result = calculate_average_information_entropy(14, [(5, h), (4, 0.0), (5, h)])
        assert result == pytest.approx(0.693536, abs=1e-6)

    def test_no_groups_is_zero(self):
        assert calculate_average_information_entropy(3, []) == 0.0

    def test_accepts_generator(self):
        groups = ((count, 1.0) for count in (1, 1))
        assert calculate_average_information_entropy(2, groups) == pytest.approx(1.0)

    def test_group_larger_than_total_raises(self):
        with pytest.raises(InvalidGroupSize) as excinfo:
            calculate_average_information_entropy(5, [(6, 1.0)])
        message = str(excinfo.value)
        assert "(6)" in message
        assert "(5)" in message

    def test_negative_group_raises(self):
        with pytest.raises(InvalidGroupSize, match="negative"):
            calculate_average_information_entropy(5, [(-1, 1.0)])

    @pytest.mark.parametrize("total", [0, -3])
    def test_non_positive_total_raises(self, total):
        with pytest.raises(InvalidTotalEntries):
            calculate_average_information_entropy(total, [(0, 0.0)])
