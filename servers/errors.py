from typing import Optional


class NetSuiteError(Exception):
    """Base class for errors raised by the NetSuite server."""


class InvalidInputError(NetSuiteError):
    """Raised when tool arguments are malformed. No request is sent."""


class NetSuiteAPIError(NetSuiteError):
    """Raised when NetSuite answers with a non-success status."""

    def __init__(self, status_code: int, body: str, prefix: str = "NetSuite API error"):
        super().__init__(f"{prefix} {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class InvalidResponseError(NetSuiteAPIError):
    """Raised when a success response does not carry valid JSON."""

    def __init__(self, status_code: int, body: str, cause: Optional[BaseException] = None):
        super().__init__(status_code, body, prefix="NetSuite returned invalid JSON")
        self.cause = cause
