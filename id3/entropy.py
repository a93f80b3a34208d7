"""
Entropy math used to pick the splitting attribute in ID3.

Two pure functions live here:

- ``calculate_entropy`` computes H(S) = -∑(p_i * log2(p_i)) of a discrete
  probability distribution, in bits.
- ``calculate_average_information_entropy`` computes the information-weighted
  average I(A) = ∑((|S_v| / |S|) * H(S_v)) of the entropies of the groups an
  attribute splits a table into.

Information gain is then IG(S, A) = H(S) - I(A). Since H(S) is the same for
every attribute of a given table, the attribute with the lowest I(A) is the
one with the highest gain.
"""

import numbers

import numpy as np

from .exceptions import (
    InvalidGroupSize,
    InvalidProbabilityDistribution,
    InvalidTotalEntries,
)

Count = int
Entropy = float

# Relative frequencies such as ten times 0.1 do not add up to exactly 1.0
PROBABILITY_TOLERANCE = 1e-9


def validate_tolerance(tolerance):
    """Raise ValueError unless ``tolerance`` is a finite, non-negative number."""
    if isinstance(tolerance, bool) or not isinstance(tolerance, numbers.Real):
        raise ValueError(f"Invalid tolerance {tolerance!r}. Must be a number")
    if not np.isfinite(tolerance) or tolerance < 0:
        raise ValueError(f"Invalid tolerance {tolerance!r}. Must be finite and >= 0")
    return float(tolerance)


def calculate_entropy(probabilities, tolerance=PROBABILITY_TOLERANCE):
    """
    Calculate the entropy of a discrete probability distribution.

    Entropy measures how mixed a set of outcomes is. It's defined as:
    H = -∑(p_i * log2(p_i))
    where p_i is the probability of outcome i. An outcome with probability 0
    contributes nothing (0 * log2(0) is taken to be 0).

    Args:
        probabilities (array-like): P(outcome 0) = probabilities[0],
                                    P(outcome 1) = probabilities[1] and so on.
                                    Must be non-negative and sum to 1.
        tolerance (float, optional): How far the sum may drift from 1 before
                                     the distribution is rejected. Pass 0 to
                                     require an exact sum. Defaults to 1e-9.

    Returns:
        float: Entropy in bits, in the range [0, log2(len(probabilities))].

    Raises:
        InvalidProbabilityDistribution: If the probabilities are not a flat
            sequence of finite, non-negative numbers summing to 1.

    Example:
        >>> calculate_entropy([0.5, 0.5])
        1.0
        >>> calculate_entropy([1.0, 0.0])
        0.0
    """
    tolerance = validate_tolerance(tolerance)
    try:
        p = np.asarray(probabilities, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidProbabilityDistribution(
            f"Probabilities must be numbers: {probabilities!r}"
        ) from e

    if p.ndim != 1:
        raise InvalidProbabilityDistribution(
            f"Probabilities must be a flat sequence, got shape {p.shape}"
        )
    if not np.all(np.isfinite(p)):
        raise InvalidProbabilityDistribution(
            f"Probabilities must be finite: {p.tolist()}"
        )
    if np.any(p < 0):
        raise InvalidProbabilityDistribution(
            f"Probabilities cannot be negative: {p.tolist()}"
        )

    total = float(np.sum(p))
    if abs(total - 1.0) > tolerance:
        raise InvalidProbabilityDistribution(
            f"Sum of all probabilities is not 1 (got {total!r})"
        )

    # log2(0) is undefined, so zero probabilities are dropped
    nonzero = p[p > 0]
    # adding 0.0 turns the -0.0 of a pure distribution into 0.0
    return float(-np.sum(nonzero * np.log2(nonzero))) + 0.0


def calculate_average_information_entropy(total_entries, groups):
    """
    Calculate the average information entropy of an attribute.

    Say the attribute 'outlook' has three values: rainy, overcast and sunny.
    Then
    I(outlook) = (entries with rainy outlook / total entries) * H(outlook = rainy)
               + (entries with overcast outlook / total entries) * H(outlook = overcast)
               + (entries with sunny outlook / total entries) * H(outlook = sunny)

    Args:
        total_entries (int): Number of entries in the whole table.
        groups (iterable): (count, entropy) pairs, one per attribute value.

    Returns:
        float: The weighted average of the group entropies.

    Raises:
        InvalidTotalEntries: If total_entries is zero or negative.
        InvalidGroupSize: If a group count is negative or higher than
            total_entries.

    Example:
        >>> calculate_average_information_entropy(10, [(4, 0.0), (6, 1.0)])
        0.6
    """
    if total_entries <= 0:
        raise InvalidTotalEntries(
            f"The total number of entries must be positive (got {total_entries})."
        )

    average_information_entropy = 0.0
    for count, entropy in groups:
        if count > total_entries:
            raise InvalidGroupSize(
                f"The number of entries for a specific attribute value ({count}) "
                f"cannot be higher than the total number of entries ({total_entries})."
            )
        if count < 0:
            raise InvalidGroupSize(
                f"The number of entries for a specific attribute value cannot be "
                f"negative (got {count})."
            )
        average_information_entropy += (count / total_entries) * entropy

    return average_information_entropy
