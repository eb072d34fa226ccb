"""Custom exceptions for Jobly.

Each exception carries the HTTP status a boundary layer should answer with.
"""


class JoblyError(Exception):
    """Base exception for all Jobly errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        """Initialize exception with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details


class BadRequestError(JoblyError):
    """Exception raised when the caller supplied unusable input."""

    status_code = 400


class NotFoundError(JoblyError):
    """Exception raised when a requested company or job does not exist."""

    status_code = 404


class EmptyUpdateError(BadRequestError):
    """Exception raised when a partial update is given no fields to set."""

    def __init__(self, message: str = "No data", details: dict | None = None):
        super().__init__(message, details)
