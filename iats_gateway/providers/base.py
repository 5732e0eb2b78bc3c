"""
Abstract SOAP transport interface.

The gateway client never speaks SOAP itself. It hands a remote method name and
a flat parameter mapping to a transport and gets back either the vendor's
response or a TransportFault. Production wiring uses ZeepTransport; tests and
local development use MockTransport.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping


class SoapTransport(ABC):
    """Abstract base class for SOAP transports."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Transport identifier (e.g. 'zeep')."""
        ...

    @abstractmethod
    def invoke(self, method: str, params: Mapping[str, Any]) -> Any:
        """
        Invoke a remote operation with a flat key/value parameter set.

        Implementations make exactly one attempt.

        Raises:
            TransportFault: On a vendor SOAP fault or transport failure.
        """
        ...


# Builds a transport for a WSDL URL (base server URL + service endpoint).
TransportFactory = Callable[[str], SoapTransport]
