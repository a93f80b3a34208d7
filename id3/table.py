"""
Observation table queried by an ID3 tree builder.

An ObservationTable holds the rows that reached one node of the tree. Each row
is a sequence of string tokens: column 0 is the class label and columns
1..N-1 are attribute values. The table answers one question for the builder,
which attribute splits these rows best, plus the statistics needed to get
there (class sets, value groups, per-value entropy).

Building the tree itself is the caller's job. A typical builder:
1. Stops if the table is empty or all entries share one class
2. Asks the table for the attribute with the highest information gain
3. Partitions its rows by that attribute's values (one child per value)
4. Recurses with a new ObservationTable per child
"""

import logging
from collections import Counter

import numpy as np

from .entropy import (
    PROBABILITY_TOLERANCE,
    calculate_average_information_entropy,
    calculate_entropy,
    validate_tolerance,
)
from .exceptions import InvalidAttributeId, InvalidRow, InvalidTotalEntries

logger = logging.getLogger(__name__)

CLASS_COLUMN = 0


class ObservationTable:
    """
    Read-only table of labeled categorical observations.

    Rows are copied into tuples on construction and never change afterwards,
    so every query is side-effect free and a table can be shared freely.

    Attributes:
        tolerance (float): Allowed drift from 1 when class frequencies are
                           checked as a probability distribution.
    """

    def __init__(self, rows=(), tolerance=PROBABILITY_TOLERANCE):
        """
        Args:
            rows (iterable): Rows of tokens, class label first. All rows must
                             have the same, non-zero number of columns.
            tolerance (float, optional): Passed on to calculate_entropy.
                                         Defaults to 1e-9.

        Raises:
            InvalidRow: If a row is empty or the rows differ in length.
            ValueError: If tolerance is negative or not a number.
        """
        self._tolerance = validate_tolerance(tolerance)
        self._rows = tuple(tuple(row) for row in rows)

        widths = {len(row) for row in self._rows}
        if len(widths) > 1:
            raise InvalidRow(
                f"All rows must have the same number of columns, got {sorted(widths)}"
            )
        if 0 in widths:
            raise InvalidRow("Every row needs at least the class column")
        self._num_columns = widths.pop() if widths else 0

    @classmethod
    def from_arrays(cls, X, y, tolerance=PROBABILITY_TOLERANCE):
        """
        Build a table from a feature matrix and a label vector.

        Args:
            X (array-like): Attribute values (n_samples, n_attributes)
            y (array-like): Class labels (n_samples,)
            tolerance (float, optional): See __init__.

        Returns:
            ObservationTable: Rows of the form [y[i], *X[i]], so attribute j
                              of X becomes attribute id j + 1.
        """
        X = np.asarray(X, dtype=object)
        y = np.asarray(y, dtype=object)
        if X.ndim == 1 and len(X) == 0:
            X = X.reshape(0, 0)
        if X.ndim != 2 or y.ndim != 1:
            raise InvalidRow(
                f"Expected a 2-d X and a 1-d y, got shapes {X.shape} and {y.shape}"
            )
        if len(X) != len(y):
            raise InvalidRow(f"X has {len(X)} rows but y has {len(y)} labels")

        return cls(
            ([label] + list(values) for label, values in zip(y.tolist(), X.tolist())),
            tolerance=tolerance,
        )

    @property
    def rows(self):
        return self._rows

    @property
    def tolerance(self):
        return self._tolerance

    @property
    def num_columns(self):
        """Row length, class column included. 0 for an empty table."""
        return self._num_columns

    @property
    def attribute_ids(self):
        return range(1, self._num_columns)

    def get_data(self):
        """Return a copy of the rows as lists."""
        return [list(row) for row in self._rows]

    def __len__(self):
        return len(self._rows)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(entries={len(self._rows)}, "
            f"columns={self._num_columns})"
        )

    def is_empty(self):
        return len(self._rows) == 0

    def are_all_entries_with_same_class(self):
        """
        Check whether the table holds exactly one class.

        Tree builders use this as the pure-leaf stop condition. An empty
        table has no class at all and therefore returns False; check
        is_empty() first to tell the two cases apart.
        """
        return len(self.get_classes()) == 1

    def get_classes(self):
        """Return the set of distinct class labels (column 0)."""
        return {row[CLASS_COLUMN] for row in self._rows}

    def count_entries_by_class(self):
        """Return a Counter mapping each class label to its number of rows."""
        return Counter(row[CLASS_COLUMN] for row in self._rows)

    def get_all_possible_attribute_values(self, attribute_id):
        """Return the set of distinct values seen in the given attribute column."""
        self._check_attribute_id(attribute_id)
        return {row[attribute_id] for row in self._rows}

    def count_entries_by_attribute(self, attribute_id, attribute_value):
        """Count the entries whose attribute equals attribute_value."""
        self._check_attribute_id(attribute_id)
        return sum(1 for row in self._rows if row[attribute_id] == attribute_value)

    def calculate_class_entropy(self):
        """
        Calculate H(S), the entropy of the class labels over the whole table.

        Returns:
            float: Entropy in bits. Returns 0 for an empty table.
        """
        return self._entropy_of(self.count_entries_by_class())

    def calculate_attribute_entropy(self, attribute_id, attribute_value):
        """
        Calculate E(A=x), e.g. E(outlook=sunny).

        This is the entropy of the class labels among the entries whose
        attribute equals attribute_value.

        Args:
            attribute_id (int): Column of the attribute, 1..num_columns-1
            attribute_value (str): Value of the attribute to restrict to

        Returns:
            float: Entropy in bits. Returns 0 when no entry has that value.

        Raises:
            InvalidAttributeId: If attribute_id is not an attribute column.
        """
        self._check_attribute_id(attribute_id)
        class_counts = Counter(
            row[CLASS_COLUMN] for row in self._rows if row[attribute_id] == attribute_value
        )
        return self._entropy_of(class_counts)

    def calculate_attribute_average_information_entropy(self, attribute_id):
        """
        Calculate I(A), the average information entropy of an attribute.

        Each distinct value of the attribute contributes its entropy weighted
        by the share of entries holding that value.

        Args:
            attribute_id (int): Column of the attribute, 1..num_columns-1

        Returns:
            float: Average information entropy in bits.

        Raises:
            InvalidAttributeId: If attribute_id is not an attribute column.
                An empty table has no attribute columns.
        """
        self._check_attribute_id(attribute_id)
        groups = [
            (
                self.count_entries_by_attribute(attribute_id, value),
                self.calculate_attribute_entropy(attribute_id, value),
            )
            for value in self._distinct_values(attribute_id)
        ]
        # a fixed summation order keeps equal attributes bit-for-bit equal
        return calculate_average_information_entropy(len(self._rows), sorted(groups))

    def information_gain(self, attribute_id):
        """
        Calculate IG(S, A) = H(S) - I(A) for the given attribute.

        Raises:
            InvalidAttributeId: If attribute_id is not an attribute column.
                An empty table has no attribute columns.
        """
        average = self.calculate_attribute_average_information_entropy(attribute_id)
        return self.calculate_class_entropy() - average

    def get_attribute_with_highest_information_gain(self):
        """
        Pick the attribute that best separates the entries by class.

        The attribute with the lowest average information entropy has the
        highest information gain, because H(S) is the same for all of them.
        When attributes tie exactly, the lowest column index wins.

        Returns:
            int: Attribute id in 1..num_columns-1

        Raises:
            InvalidTotalEntries: If the table is empty.
            InvalidAttributeId: If the rows have no attribute columns.
        """
        if self.is_empty():
            raise InvalidTotalEntries("Cannot select an attribute from an empty table")
        if self._num_columns < 2:
            raise InvalidAttributeId("The table has no attribute columns, only classes")

        attribute_ids = self.attribute_ids
        averages = [
            self.calculate_attribute_average_information_entropy(attribute_id)
            for attribute_id in attribute_ids
        ]
        for attribute_id, average in zip(attribute_ids, averages):
            logger.debug("I(attribute %d) = %.6f bits", attribute_id, average)

        # np.argmin returns the first minimum, so ties go to the lowest column
        best_attribute_id = attribute_ids[int(np.argmin(averages))]
        logger.debug(
            "Selected attribute %d out of %d over %d entries",
            best_attribute_id,
            len(attribute_ids),
            len(self._rows),
        )
        return best_attribute_id

    def _distinct_values(self, attribute_id):
        # dict keys keep first-seen order so the groups come out deterministically
        return list(dict.fromkeys(row[attribute_id] for row in self._rows))

    def _entropy_of(self, class_counts):
        total = sum(class_counts.values())
        if total == 0:
            return 0.0
        probabilities = [count / total for count in sorted(class_counts.values())]
        return calculate_entropy(probabilities, self._tolerance)

    def _check_attribute_id(self, attribute_id):
        if isinstance(attribute_id, bool) or not isinstance(attribute_id, (int, np.integer)):
            raise InvalidAttributeId(
                f"Attribute id must be an integer, got {attribute_id!r}"
            )
        if not 1 <= attribute_id < self._num_columns:
            raise InvalidAttributeId(
                f"Attribute id {attribute_id} is out of range; "
                f"attributes are columns 1 to {self._num_columns - 1}"
            )
