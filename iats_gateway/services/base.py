"""
Base class for iATS web service wrappers.

Each iATS service (ProcessLink, CustomerLink) lives at its own WSDL endpoint
on the regional server and answers every operation with a ``<Method>Result``
element wrapping an IATSRESPONSE document. A service wrapper:

  1. Refuses operations on servers the service is not available on
  2. Dispatches the call through the GatewayClient
  3. Pulls the IATSRESPONSE document out of the SOAP result
  4. Parses it into a GatewayResult
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from lxml import etree

from iats_gateway.client import GatewayClient
from iats_gateway.engine.errors import ParseError, RestrictedServiceError
from iats_gateway.models.results import GatewayResult

logger = logging.getLogger("iats_gateway.services")

# Attribute names under which SOAP clients expose <xs:any> content
_ANY_KEYS = ("any", "_value_1")


def _lookup(response: Any, key: str) -> Any:
    if isinstance(response, Mapping):
        return response.get(key)
    return getattr(response, key, None)


def extract_result_xml(response: Any, result_name: str) -> Union[str, bytes]:
    """
    Locate the IATSRESPONSE document in a raw SOAP result.

    Accepts the shapes SOAP clients produce: the document as a string, an XML
    element, or an object/mapping holding it under ``result_name`` or an
    ``<xs:any>`` slot.

    Raises:
        ParseError: If no document can be found.
    """
    if isinstance(response, (str, bytes)):
        return response
    if isinstance(response, etree._Element):
        return etree.tostring(response)
    if isinstance(response, (list, tuple)) and response:
        return extract_result_xml(response[0], result_name)

    for key in (result_name, *_ANY_KEYS):
        value = _lookup(response, key) if response is not None else None
        if value is not None:
            return extract_result_xml(value, result_name)

    raise ParseError(f"No {result_name} payload in response")


class GatewayService:
    """Common request handling for iATS service wrappers."""

    endpoint: str = ""
    restricted_servers: tuple[str, ...] = ()

    def __init__(self, client: GatewayClient):
        self.client = client

    def _request(
        self,
        method: str,
        params: Mapping[str, Any],
        restricted_servers: Optional[tuple[str, ...]] = None,
    ) -> GatewayResult:
        restricted = self.restricted_servers if restricted_servers is None else restricted_servers
        server_id = self.client.server_id
        if self.client.is_server_restricted(server_id, restricted):
            logger.warning("%s refused: not available on %s server", method, server_id)
            raise RestrictedServiceError("Service cannot be used on this server.", server_id)

        response = self.client.call(method, params, endpoint=self.endpoint)
        payload = extract_result_xml(response, f"{method}Result")
        result = GatewayResult.from_mapping(self.client.parse_xml(payload))

        logger.info(
            "%s completed: status=%s authorization=%s",
            method,
            result.status or "-",
            result.authorization_result or "-",
        )
        return result
