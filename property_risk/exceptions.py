"""Custom exception hierarchy for property-risk."""


class PropertyRiskError(Exception):
    """Base exception for all property-risk errors."""


class PreconditionViolationError(PropertyRiskError):
    """Raised when a caller passes input outside the documented contract."""


class InvalidPriceError(PreconditionViolationError):
    """Raised when a price is negative, non-finite or not a number."""


class InvalidQuerySpecError(PreconditionViolationError):
    """Raised when a query spec carries an unknown or missing value."""


class RecordValidationError(PropertyRiskError):
    """Raised when a raw record cannot be turned into a Property."""


class DataSourceError(PropertyRiskError):
    """Raised when the property catalog cannot be read or parsed."""


class ConfigurationError(PropertyRiskError):
    """Raised when configuration is invalid or missing."""
