"""
Scripted transport for tests and local development.

Behaves like a remote iATS service without the network:
  - Returns a scripted response per remote method
  - Raises scripted faults per remote method
  - Records every invocation (WSDL URL, method, parameters)
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from iats_gateway.engine.errors import TransportFault
from iats_gateway.providers.base import SoapTransport


@dataclass
class Invocation:
    """A single recorded remote call."""

    wsdl_url: str
    method: str
    params: dict[str, Any]


@dataclass
class MockTransport(SoapTransport):
    """
    Transport that answers from in-memory scripts.

    Use ``factory`` wherever a TransportFactory is expected; every transport it
    builds shares this instance's scripts and invocation log.
    """

    responses: dict[str, Any] = field(default_factory=dict)
    faults: dict[str, TransportFault] = field(default_factory=dict)
    invocations: list[Invocation] = field(default_factory=list)
    wsdl_url: str = ""

    @property
    def name(self) -> str:
        return "mock_transport"

    @property
    def last_invocation(self) -> Optional[Invocation]:
        return self.invocations[-1] if self.invocations else None

    def factory(self, wsdl_url: str) -> "MockTransport":
        self.wsdl_url = wsdl_url
        return self

    def invoke(self, method: str, params: Mapping[str, Any]) -> Any:
        self.invocations.append(Invocation(wsdl_url=self.wsdl_url, method=method, params=dict(params)))

        if method in self.faults:
            raise self.faults[method]
        return self.responses.get(method)
