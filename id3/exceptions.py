"""
Errors raised when the entropy bookkeeping receives inconsistent input.

All of them derive from ValueError, so callers that already guard against bad
arguments with ``except ValueError`` keep working. None of them is transient:
each one points at a bug in whoever built the probabilities, the value groups
or the rows.
"""


class ID3Error(ValueError):
    """Base class for every error raised by the id3 package."""


class InvalidProbabilityDistribution(ID3Error):
    """The probabilities passed to the entropy calculation do not sum to 1."""


class InvalidGroupSize(ID3Error):
    """A value group claims more entries than the table it was taken from."""


class InvalidTotalEntries(ID3Error):
    """The total number of entries is zero or negative."""


class InvalidAttributeId(ID3Error, IndexError):
    """An attribute id does not name one of the non-class columns."""


class InvalidRow(ID3Error):
    """Rows are ragged, empty, or do not line up with their labels."""
