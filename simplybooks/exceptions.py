"""
Custom exception classes for the application.

Commands raise these exceptions; HTTP endpoints translate them into
responses through simplybooks.utils.error_handler.handle_http_errors.
Store failures (constraint violations, lost connections) are not wrapped:
they propagate as SQLAlchemyError and end up as a generic 500.
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when a lookup by ID misses, and also when a uid filter
    (favorite authors, books on sale) matches no rows.

    HTTP Status: 404 Not Found
    """

    http_status = 404


class DatabaseError(AppException):
    """
    Database operation failed.

    Raised when the database cannot be reached during startup.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
