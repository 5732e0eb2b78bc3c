"""
SOAP transport backed by zeep.

A zeep client is built from the service WSDL for each transport instance, and
the gateway client builds one transport per call. Faults are normalized into
TransportFault so the client can surface them with the vendor's code and
message untouched. Connection failures (WSDL load or operation) use the
fault code "HTTP", and unknown operations the fault code "Client".
"""

import logging
from typing import Any, Mapping, Optional

import zeep
from requests.exceptions import RequestException
from zeep.exceptions import Fault, TransportError
from zeep.transports import Transport

from iats_gateway.config import settings
from iats_gateway.engine.errors import TransportFault
from iats_gateway.providers.base import SoapTransport

logger = logging.getLogger("iats_gateway.transport")


class ZeepTransport(SoapTransport):
    """Transport that calls iATS web services through a zeep client."""

    def __init__(self, wsdl_url: str, timeout: Optional[int] = None):
        self._wsdl_url = wsdl_url
        self._timeout = timeout if timeout is not None else settings.transport_timeout
        self._client: Optional[zeep.Client] = None

    @property
    def name(self) -> str:
        return "zeep"

    @property
    def wsdl_url(self) -> str:
        return self._wsdl_url

    def _get_client(self) -> zeep.Client:
        if self._client is None:
            transport = Transport(timeout=self._timeout, operation_timeout=self._timeout)
            self._client = zeep.Client(wsdl=self._wsdl_url, transport=transport)
        return self._client

    def invoke(self, method: str, params: Mapping[str, Any]) -> Any:
        try:
            client = self._get_client()
            try:
                operation = getattr(client.service, method)
            except AttributeError as e:
                raise TransportFault("Client", f"{method} is not a valid method for this service") from e
            return operation(**params)
        except Fault as e:
            logger.warning("SOAP fault from %s.%s: %s", self._wsdl_url, method, e.code)
            raise TransportFault(e.code, e.message) from e
        except TransportError as e:
            logger.warning("Transport error from %s.%s: HTTP %s", self._wsdl_url, method, e.status_code)
            raise TransportFault(str(e.status_code), e.message) from e
        except RequestException as e:
            # Connection refused, DNS failure, timeouts; WSDL load or operation
            logger.warning("Connection error from %s.%s: %s", self._wsdl_url, method, type(e).__name__)
            raise TransportFault("HTTP", str(e)) from e


def zeep_transport_factory(wsdl_url: str) -> SoapTransport:
    return ZeepTransport(wsdl_url)
