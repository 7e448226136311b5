"""Custom exceptions for the ContractHub application."""


class ContractHubException(Exception):
    """Base exception for ContractHub application."""

    pass


class ValidationError(ContractHubException):
    """Raised when request data fails validation."""

    pass


class NotFoundError(ContractHubException):
    """Raised when a resource is not found."""

    pass


class TransportError(ContractHubException):
    """Raised when a mail transport cannot deliver a message."""

    pass


class DatabaseError(ContractHubException):
    """Raised when a database operation fails."""

    pass


class ConfigurationError(ContractHubException):
    """Raised when configuration is invalid."""

    pass
