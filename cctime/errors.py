"""Exception hierarchy for cctime."""


class CctimeError(Exception):
    """Base class for cctime errors."""


class ValidationError(CctimeError, ValueError):
    """A value did not match the format it is required to have."""


class DataSourceError(CctimeError):
    """An explicitly requested data location is missing or unusable."""
