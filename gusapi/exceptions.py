"""
Exceptions raised by the GUS registry client.

Transport problems detected while reading a SOAP response are reported as
TransportFault subclasses. Network and HTTP status errors raised by httpx
are not wrapped and reach the caller unchanged.
"""

from typing import Any


class GusApiError(Exception):
    """
    Base exception for all errors raised by this package.

    Carries a machine-readable code and optional details next to the message.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "NOT_FOUND")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class TransportFault(GusApiError):
    """
    Raised when the SOAP layer returns something the client cannot use.
    """


class SoapFaultError(TransportFault):
    """
    Raised when the service answers with a SOAP Fault.
    """

    def __init__(self, reason: str, fault_code: str | None = None, operation: str | None = None):
        self.reason = reason
        self.fault_code = fault_code
        self.operation = operation
        details: dict[str, Any] = {}
        if fault_code:
            details["fault_code"] = fault_code
        if operation:
            details["operation"] = operation
        super().__init__(reason, "SOAP_FAULT", details)


class InvalidResponseError(TransportFault):
    """
    Raised when a response carries no envelope or no result element.
    """

    def __init__(self, message: str, operation: str | None = None):
        self.operation = operation
        super().__init__(message, "INVALID_RESPONSE", {"operation": operation} if operation else None)


class NotFoundError(GusApiError):
    """
    Raised when a search or report payload cannot be decoded.

    The service signals "no matching record" with an empty payload, so any
    decoding failure is reported this way.
    """

    def __init__(self, message: str = "No data found", operation: str | None = None):
        self.operation = operation
        super().__init__(message, "NOT_FOUND", {"operation": operation} if operation else None)


class InvalidUserKeyError(GusApiError):
    """
    Raised when login returns an empty session id.
    """

    def __init__(self, message: str = "Invalid user key"):
        super().__init__(message, "INVALID_USER_KEY")


class NotLoggedInError(GusApiError):
    """
    Raised when a session operation is attempted before login.
    """

    def __init__(self, message: str = "Session not started, call login() first"):
        super().__init__(message, "NOT_LOGGED_IN")
