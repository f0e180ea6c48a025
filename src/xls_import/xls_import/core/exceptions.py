class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request input or an uploaded file is invalid."""


class AuthenticationError(DomainError):
    """Raised when the import key is missing or does not match."""


class ConfigurationError(DomainError):
    """Raised at startup when a required setting is missing."""


class RowNormalizationError(DomainError):
    """Raised when a single spreadsheet row cannot be converted."""
