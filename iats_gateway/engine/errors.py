"""
Error hierarchy for the iATS gateway client.

Every error is surfaced to the immediate caller. The client performs a single
attempt per call: nothing here is retried, and retry policy (if any) belongs
to the caller.
"""


class GatewayError(Exception):
    """Base exception for gateway client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GatewayError):
    """Invalid client configuration (e.g. unknown server identifier)."""


class RemoteCallError(GatewayError):
    """Fault reported by the vendor or the SOAP transport.

    ``code`` and ``message`` are carried exactly as the fault supplied them.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ParseError(GatewayError):
    """Input to the XML converter is not well-formed."""


class UnknownRejectCodeError(GatewayError, LookupError):
    """Reject code is not in the vendor's reject code table."""

    def __init__(self, code: int):
        super().__init__(f"Unknown reject code: {code}")
        self.code = code


class RestrictedServiceError(GatewayError):
    """A service operation was invoked on a server it is not available on."""

    def __init__(self, message: str, server_id: str):
        super().__init__(message)
        self.server_id = server_id


class TransportFault(Exception):
    """Fault raised by a SOAP transport implementation.

    Transports raise this; the client translates it into RemoteCallError.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message
