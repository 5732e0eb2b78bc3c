"""
iATS gateway client, the core of the library.

Holds the account credentials and the regional server selection, and for each
remote call:

  1. Merges the caller's parameters with the credentials (agentCode, password)
  2. Resolves the regional base URL from the server identifier
  3. Builds a transport for base URL + service endpoint
  4. Invokes the remote method once, surfacing faults as RemoteCallError

Also exposes the static helpers the service wrappers rely on: XML conversion,
server and method-of-payment restriction checks, and reject code lookup.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from iats_gateway.config import Settings, settings
from iats_gateway.engine import reject_codes, xml_parser
from iats_gateway.engine.errors import RemoteCallError, TransportFault
from iats_gateway.providers.base import TransportFactory
from iats_gateway.providers.zeep_transport import zeep_transport_factory
from iats_gateway.routing import restrictions, servers

logger = logging.getLogger("iats_gateway.client")

AGENT_CODE_FIELD = "agentCode"
PASSWORD_FIELD = "password"


class GatewayClient:
    """
    Client for the iATS web services.

    The server identifier is validated when a call is made, not here.
    Credentials and server are fixed for the lifetime of the instance and no
    per-call state is retained, so an instance can be reused freely.
    """

    def __init__(
        self,
        agent_code: str,
        password: str,
        server_id: str = "NA",
        transport_factory: Optional[TransportFactory] = None,
    ):
        self._agent_code = agent_code
        self._password = password
        self._server_id = server_id
        self._transport_factory = transport_factory or zeep_transport_factory

    @classmethod
    def from_settings(
        cls,
        config: Settings = settings,
        transport_factory: Optional[TransportFactory] = None,
    ) -> "GatewayClient":
        return cls(
            agent_code=config.agent_code,
            password=config.password.get_secret_value(),
            server_id=config.server_id,
            transport_factory=transport_factory,
        )

    @property
    def agent_code(self) -> str:
        return self._agent_code

    @property
    def server_id(self) -> str:
        return self._server_id

    def __repr__(self) -> str:
        return f"GatewayClient(server_id={self._server_id!r})"

    # ─── Remote calls ──────────────────────────────────────────────────

    @staticmethod
    def resolve_server(server_id: str) -> str:
        """Base URL for "NA" or "UK"; raises ConfigurationError otherwise."""
        return servers.resolve_server(server_id)

    def build_params(self, params: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """
        Merge caller parameters with the account credentials.

        Credentials are written last and win over same-named caller fields.
        """
        merged = dict(params or {})
        merged[AGENT_CODE_FIELD] = self._agent_code
        merged[PASSWORD_FIELD] = self._password
        return merged

    def call(self, method: str, params: Optional[Mapping[str, Any]] = None, endpoint: str = "") -> Any:
        """
        Invoke a remote iATS operation.

        Args:
            method: Remote operation name (e.g. "ProcessCreditCard").
            params: Operation fields, without credentials.
            endpoint: Service WSDL path appended to the server base URL.

        Returns:
            The transport's response, as received.

        Raises:
            ConfigurationError: If the client's server identifier is invalid.
            RemoteCallError: If the remote call faults. Not retried.
        """
        merged = self.build_params(params)
        base_url = self.resolve_server(self._server_id)
        transport = self._transport_factory(base_url + endpoint)

        logger.info("Calling %s on %s server via %s", method, self._server_id, transport.name)
        try:
            return transport.invoke(method, merged)
        except TransportFault as e:
            logger.warning("Call to %s failed with fault %s", method, e.code)
            raise RemoteCallError(e.code, e.message) from e

    # ─── Static helpers ────────────────────────────────────────────────

    @staticmethod
    def parse_xml(xml_string: Union[str, bytes]) -> dict[str, Any]:
        return xml_parser.parse_xml(xml_string)

    @staticmethod
    def is_server_restricted(server_id: str, restricted_servers: Iterable[str]) -> bool:
        return restrictions.is_server_restricted(server_id, restricted_servers)

    @staticmethod
    def is_mop_allowed(server_id: str, currency: str, mop: str) -> bool:
        return restrictions.is_mop_allowed(server_id, currency, mop)

    @staticmethod
    def explain_reject_code(code: int) -> str:
        return reject_codes.explain_reject_code(code)
