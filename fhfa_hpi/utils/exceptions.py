"""Custom exceptions for FHFA HPI tables."""


class HPIError(Exception):
    """Base exception for fhfa_hpi package."""
    pass


class ConfigurationError(HPIError):
    """Raised when configuration is invalid."""
    pass


class DataValidationError(HPIError):
    """Raised when a source table cannot be turned into series."""
    pass


class FetchError(HPIError):
    """Raised when a source workbook cannot be downloaded."""
    pass


class InvalidDateError(HPIError):
    """Raised when a year-quarter code has an illegal year or quarter."""
    pass


class DateOutOfRangeError(HPIError):
    """Raised when a lookup date falls outside a series."""
    pass


class DiscontinuousAppendError(HPIError):
    """Raised when appended dates do not continue a series quarter by quarter."""
    pass


class GeoNotFoundError(HPIError):
    """Raised when a geography key is not in a dataset."""
    pass


class InvalidArgumentsError(HPIError):
    """Raised when paired arguments disagree in length or kind."""
    pass


class UnrecognizedGeoLevelError(HPIError):
    """Raised when a geography class is not one of the supported levels."""
    pass


class NoMatchError(HPIError):
    """Raised when no dataset in a best-match cascade has the geo/date."""
    pass


class QuarterPreconditionError(ValueError):
    """Raised when advancing a year-quarter code that was never valid.

    Not an HPIError: callers are expected to validate before advancing.
    """
    pass
