"""Custom exceptions for model and service layers."""


class ModelError(Exception):
    """Base class for model-related failures."""


class ModelValidationError(ModelError):
    """Raised when model data fails custom business validation."""


class ModelNotFoundError(ModelError):
    """Raised when a requested demo record does not exist."""


class AuthenticationError(ModelError):
    """Raised when demo credentials do not match the user directory."""
