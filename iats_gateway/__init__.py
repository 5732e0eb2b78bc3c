"""Client library for the iATS Payments web services."""

from iats_gateway.client import GatewayClient
from iats_gateway.engine.errors import (
    ConfigurationError,
    GatewayError,
    ParseError,
    RemoteCallError,
    RestrictedServiceError,
    TransportFault,
    UnknownRejectCodeError,
)
from iats_gateway.models.results import GatewayResult
from iats_gateway.services import CustomerLink, ProcessLink

__all__ = [
    "ConfigurationError",
    "CustomerLink",
    "GatewayClient",
    "GatewayError",
    "GatewayResult",
    "ParseError",
    "ProcessLink",
    "RemoteCallError",
    "RestrictedServiceError",
    "TransportFault",
    "UnknownRejectCodeError",
]

__version__ = "0.1.0"
