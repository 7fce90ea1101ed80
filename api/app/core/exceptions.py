"""
Custom exceptions for the application.
"""


class SpacedRecallException(Exception):
    """Base exception for all Spaced Recall application exceptions."""
    pass


class ValidationError(SpacedRecallException):
    """Raised when validation fails."""
    pass


class AuthenticationError(SpacedRecallException):
    """Raised when no identity can be resolved for the request."""
    pass


class StoreError(SpacedRecallException):
    """Raised when the durable store fails or a transaction is rolled back."""
    pass
