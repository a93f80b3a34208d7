"""Information-gain attribute selection for ID3 decision-tree induction."""

from .entropy import (
    PROBABILITY_TOLERANCE,
    Count,
    Entropy,
    calculate_average_information_entropy,
    calculate_entropy,
)
from .exceptions import (
    ID3Error,
    InvalidAttributeId,
    InvalidGroupSize,
    InvalidProbabilityDistribution,
    InvalidRow,
    InvalidTotalEntries,
)
from .table import ObservationTable

__version__ = "0.1.0"

__all__ = [
    "PROBABILITY_TOLERANCE",
    "Count",
    "Entropy",
    "ID3Error",
    "InvalidAttributeId",
    "InvalidGroupSize",
    "InvalidProbabilityDistribution",
    "InvalidRow",
    "InvalidTotalEntries",
    "ObservationTable",
    "calculate_average_information_entropy",
    "calculate_entropy",
]
