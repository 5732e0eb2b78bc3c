"""CustomerLink: stored customer code management."""

from typing import Any, Mapping

from iats_gateway.models.results import GatewayResult
from iats_gateway.services.base import GatewayService


class CustomerLink(GatewayService):
    endpoint = "/NetGate/CustomerLinkv3.asmx?WSDL"

    def get_customer_code_detail(self, customer_code: str) -> GatewayResult:
        """
        Fetch a stored customer; details are under result.data["AUTHORIZATIONRESULT"].

        The authorization result here is a customer listing, not an OK/REJECT
        line, so result.approved is always False. Check result.succeeded.
        """
        return self._request("GetCustomerCodeDetail", {"customerCode": customer_code})

    def create_credit_card_customer_code(self, params: Mapping[str, Any]) -> GatewayResult:
        return self._request("CreateCreditCardCustomerCode", params)

    def update_credit_card_customer_code(self, params: Mapping[str, Any]) -> GatewayResult:
        return self._request("UpdateCreditCardCustomerCode", params)

    def delete_customer_code(self, customer_code: str) -> GatewayResult:
        return self._request("DeleteCustomerCode", {"customerCode": customer_code})
