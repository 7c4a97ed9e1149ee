"""
Custom exceptions for the deduplication data structures.

This module defines the exception classes raised by the log cache and the
Bloom filter, providing specific error types for configuration mistakes
and timestamp precondition violations.
"""


class DedupStructuresError(Exception):
    """
    Base exception for dedup_structures errors.

    All package-specific exceptions inherit from this base class,
    allowing for easy catching of every error raised by this package.
    """
    pass


class ConfigurationError(DedupStructuresError):
    """
    Raised when configuration is invalid.

    This exception is raised when:
    - Bloom filter size or hash count is not a positive integer
    - The log cache window is not a positive integer
    - Sizing helpers receive out-of-range arguments
    - Environment settings cannot be parsed

    Attributes:
        message: Error message describing the configuration issue
        validation_errors: List of validation error messages

    Examples:
        >>> raise ConfigurationError(
        ...     "Invalid Bloom filter configuration",
        ...     validation_errors=["size must be positive, got 0"]
        ... )
    """

    def __init__(self, message: str, validation_errors: list = None):
        """
        Initialize ConfigurationError.

        Args:
            message: Error message
            validation_errors: List of validation error messages (optional)
        """
        super().__init__(message)
        self.validation_errors = validation_errors or []

    def __str__(self):
        """Return string representation with validation errors if available."""
        if self.validation_errors:
            errors_str = "; ".join(self.validation_errors)
            return f"{super().__str__()}: {errors_str}"
        return super().__str__()


class InvalidTimestampError(DedupStructuresError):
    """
    Raised when a timestamp moves backwards.

    The log cache keeps its timeline in arrival order and requires that
    arrival order matches timestamp order. A message whose timestamp is
    older than the newest timeline entry is rejected with this error and
    the cache is left unchanged.

    Attributes:
        content: Message content that was rejected
        timestamp: Rejected timestamp
        latest_timestamp: Timestamp of the newest timeline entry
    """

    def __init__(
        self,
        message: str,
        content: str = None,
        timestamp: int = None,
        latest_timestamp: int = None
    ):
        """
        Initialize InvalidTimestampError.

        Args:
            message: Error message
            content: Message content that was rejected (optional)
            timestamp: Rejected timestamp (optional)
            latest_timestamp: Newest accepted timestamp (optional)
        """
        super().__init__(message)
        self.content = content
        self.timestamp = timestamp
        self.latest_timestamp = latest_timestamp
