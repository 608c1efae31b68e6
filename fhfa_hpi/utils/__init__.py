"""Utility functions for fhfa_hpi"""

from .logging_config import setup_logging
from .exceptions import (
    HPIError,
    ConfigurationError,
    DataValidationError,
    FetchError,
    InvalidDateError,
    DateOutOfRangeError,
    DiscontinuousAppendError,
    GeoNotFoundError,
    InvalidArgumentsError,
    UnrecognizedGeoLevelError,
    NoMatchError,
    QuarterPreconditionError,
)

__all__ = [
    "setup_logging",
    "HPIError",
    "ConfigurationError",
    "DataValidationError",
    "FetchError",
    "InvalidDateError",
    "DateOutOfRangeError",
    "DiscontinuousAppendError",
    "GeoNotFoundError",
    "InvalidArgumentsError",
    "UnrecognizedGeoLevelError",
    "NoMatchError",
    "QuarterPreconditionError",
]
