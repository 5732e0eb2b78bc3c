"""
Regional server selection.

iATS runs separate North America and UK deployments. A client is bound to one
of them by its server identifier; the WSDL for a service is the server's base
URL followed by the service endpoint path.
"""

from iats_gateway.engine.errors import ConfigurationError
from iats_gateway.models.enums import ServerId

NA_SERVER = "https://www.iatspayments.com"
UK_SERVER = "https://www.uk.iatspayments.com"

SERVER_URLS: dict[str, str] = {
    ServerId.NA.value: NA_SERVER,
    ServerId.UK.value: UK_SERVER,
}


def resolve_server(server_id: str) -> str:
    """
    Return the base URL for a server identifier.

    Raises:
        ConfigurationError: If server_id is neither "NA" nor "UK".
    """
    if isinstance(server_id, ServerId):
        server_id = server_id.value
    try:
        return SERVER_URLS[server_id]
    except (KeyError, TypeError):
        raise ConfigurationError("Invalid Server ID.") from None
