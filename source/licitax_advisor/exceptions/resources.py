"""This module defines the error taxonomy shared by the resource services.

Every failure a service raises is one of these classes. The web layer maps
each class to a single HTTP status code, so services never deal with HTTP
concerns directly.
"""


class LicitaxError(Exception):
    """Base exception for failures surfaced to API consumers.

    Attributes:
        message: A human-readable summary, safe to show in the UI.
        error: Optional diagnostic text, usually the underlying exception message.
    """

    status_code: int = 500

    def __init__(self, message: str, error: str | None = None) -> None:
        """Initializes the exception.

        Args:
            message: A human-readable summary of the failure.
            error: Optional diagnostic text.
        """
        super().__init__(message)
        self.message = message
        self.error = error


class StoreNotInitializedError(LicitaxError):
    """Raised when the document store could not be initialized at startup."""

    status_code = 503


class NotFoundError(LicitaxError):
    """Raised when a target or referenced entity does not exist."""

    status_code = 404


class ConflictError(LicitaxError):
    """Raised when a write would violate a uniqueness constraint."""

    status_code = 409


class InvalidArgumentError(LicitaxError):
    """Raised for missing required fields, malformed values and invalid enum values."""

    status_code = 400


class InternalError(LicitaxError):
    """Raised for any other failure, typically coming from the document store."""

    status_code = 500


class MappingError(Exception):
    """Raised when a stored document cannot be converted to its wire representation.

    Attributes:
        document_id: The id of the offending document.
        reason: Why the document could not be mapped.
    """

    def __init__(self, document_id: str, reason: str) -> None:
        """Initializes the exception.

        Args:
            document_id: The id of the offending document.
            reason: Why the document could not be mapped.
        """
        super().__init__(f"Document '{document_id}' could not be mapped: {reason}")
        self.document_id = document_id
        self.reason = reason
