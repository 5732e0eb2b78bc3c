"""
ProcessLink: credit card and ACH/EFT transaction processing.

Charges and refunds either against raw card details or against a stored
customer code. ACH/EFT is only offered on the North America server.
"""

from typing import Any, Mapping

from iats_gateway.models.results import GatewayResult
from iats_gateway.services.base import GatewayService


class ProcessLink(GatewayService):
    endpoint = "/NetGate/ProcessLinkv3.asmx?WSDL"

    ACH_RESTRICTED_SERVERS = ("UK",)

    def process_credit_card(self, params: Mapping[str, Any]) -> GatewayResult:
        """Charge a credit card (creditCardNum, creditCardExpiry, mop, total, ...)."""
        return self._request("ProcessCreditCard", params)

    def process_credit_card_with_customer_code(self, params: Mapping[str, Any]) -> GatewayResult:
        return self._request("ProcessCreditCardWithCustomerCode", params)

    def create_customer_code_and_process_credit_card(self, params: Mapping[str, Any]) -> GatewayResult:
        """Charge a card and store it; the new code is in result.customer_code."""
        return self._request("CreateCustomerCodeAndProcessCreditCard", params)

    def process_credit_card_refund_with_transaction_id(self, params: Mapping[str, Any]) -> GatewayResult:
        """Refund a prior transaction. ``total`` must be negative."""
        return self._request("ProcessCreditCardRefundWithTransactionId", params)

    def process_credit_card_refund_with_customer_code(self, params: Mapping[str, Any]) -> GatewayResult:
        return self._request("ProcessCreditCardRefundWithCustomerCode", params)

    def process_ach_eft(self, params: Mapping[str, Any]) -> GatewayResult:
        return self._request("ProcessACHEFT", params, restricted_servers=self.ACH_RESTRICTED_SERVERS)
