"""
Typed view over a parsed iATS response.

Transaction responses look like:

    <IATSRESPONSE>
      <STATUS>Success</STATUS>
      <ERRORS />
      <PROCESSRESULT>
        <AUTHORIZATIONRESULT>OK: 678594:</AUTHORIZATIONRESULT>
        <CUSTOMERCODE />
        <TRANSACTIONID>A6DE6F24</TRANSACTIONID>
      </PROCESSRESULT>
    </IATSRESPONSE>

A declined transaction carries "REJECT: <code>" as its authorization result.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, Field

from iats_gateway.engine.reject_codes import explain_reject_code
from iats_gateway.models.enums import ResponseStatus

_REJECT_PATTERN = re.compile(r"^\s*REJECT:\s*(\d+)")


def _text(value: Any) -> str:
    # Empty elements parse to {}; only text nodes are meaningful here
    return value.strip() if isinstance(value, str) else ""


class GatewayResult(BaseModel):
    """Result of an iATS service operation."""

    status: str = ""
    errors: str = ""
    authorization_result: str = ""
    transaction_id: str = ""
    customer_code: str = ""
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "GatewayResult":
        process = data.get("PROCESSRESULT")
        if not isinstance(process, dict):
            process = data
        return cls(
            status=_text(data.get("STATUS")),
            errors=_text(data.get("ERRORS")),
            authorization_result=_text(process.get("AUTHORIZATIONRESULT")),
            transaction_id=_text(process.get("TRANSACTIONID")),
            customer_code=_text(process.get("CUSTOMERCODE")),
            data=data,
        )

    @property
    def succeeded(self) -> bool:
        """True if iATS accepted the request (not necessarily approved it)."""
        return self.status == ResponseStatus.SUCCESS.value

    @property
    def approved(self) -> bool:
        return self.authorization_result.upper().startswith("OK")

    @property
    def reject_code(self) -> Optional[int]:
        match = _REJECT_PATTERN.match(self.authorization_result)
        return int(match.group(1)) if match else None

    @property
    def reject_message(self) -> Optional[str]:
        """
        Vendor explanation of the reject code, or None if not rejected.

        Raises:
            UnknownRejectCodeError: If the code is not in the reject table.
        """
        code = self.reject_code
        if code is None:
            return None
        return explain_reject_code(code)
