"""Shared test fixtures."""

import pytest

from iats_gateway.client import GatewayClient
from iats_gateway.providers.mock_transport import MockTransport

AGENT_CODE = "TEST88"
PASSWORD = "TEST88"

APPROVED_RESPONSE = """<?xml version="1.0" encoding="utf-8"?>
<IATSRESPONSE xmlns="">
  <STATUS>Success</STATUS>
  <ERRORS />
  <PROCESSRESULT>
    <AUTHORIZATIONRESULT> OK: 678594:</AUTHORIZATIONRESULT>
    <CUSTOMERCODE />
    <SETTLEMENTBATCHDATE>04/22/2014</SETTLEMENTBATCHDATE>
    <SETTLEMENTDATE>04/23/2014</SETTLEMENTDATE>
    <TRANSACTIONID>A6DE6F24</TRANSACTIONID>
  </PROCESSRESULT>
</IATSRESPONSE>"""

REJECTED_RESPONSE = """<IATSRESPONSE>
  <STATUS>Success</STATUS>
  <ERRORS />
  <PROCESSRESULT>
    <AUTHORIZATIONRESULT> REJECT: 2</AUTHORIZATIONRESULT>
    <CUSTOMERCODE />
    <TRANSACTIONID>A6DE6F25</TRANSACTIONID>
  </PROCESSRESULT>
</IATSRESPONSE>"""

FAILURE_RESPONSE = """<IATSRESPONSE>
  <STATUS>Failure</STATUS>
  <ERRORS>Agent code has not been set up on the authorization system.</ERRORS>
  <PROCESSRESULT>
    <AUTHORIZATIONRESULT />
  </PROCESSRESULT>
</IATSRESPONSE>"""

CUSTOMER_CREATED_RESPONSE = """<IATSRESPONSE>
  <STATUS>Success</STATUS>
  <ERRORS />
  <PROCESSRESULT>
    <AUTHORIZATIONRESULT>OK</AUTHORIZATIONRESULT>
    <CUSTOMERCODE>A12345678</CUSTOMERCODE>
  </PROCESSRESULT>
</IATSRESPONSE>"""

CUSTOMER_DETAIL_RESPONSE = """<IATSRESPONSE>
  <STATUS>Success</STATUS>
  <ERRORS />
  <AUTHORIZATIONRESULT>
    <CUSTOMERS>
      <CST ID="1">
        <CSTC>A12345678</CSTC>
        <FN>Test</FN>
        <LN>Account</LN>
        <AC>
          <CCN>41111111XXXX1111</CCN>
          <EXP>12/30</EXP>
          <MP>VISA</MP>
        </AC>
      </CST>
    </CUSTOMERS>
  </AUTHORIZATIONRESULT>
</IATSRESPONSE>"""


def soap_result(method: str, document: str) -> dict:
    """Wrap a response document the way a SOAP client returns it."""
    return {f"{method}Result": {"any": document}}


@pytest.fixture
def mock_transport():
    return MockTransport()


@pytest.fixture
def client(mock_transport):
    return GatewayClient(AGENT_CODE, PASSWORD, transport_factory=mock_transport.factory)


@pytest.fixture
def uk_client(mock_transport):
    return GatewayClient(AGENT_CODE, PASSWORD, server_id="UK", transport_factory=mock_transport.factory)
