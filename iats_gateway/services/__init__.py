from iats_gateway.services.base import GatewayService, extract_result_xml
from iats_gateway.services.customer_link import CustomerLink
from iats_gateway.services.process_link import ProcessLink

__all__ = ["CustomerLink", "GatewayService", "ProcessLink", "extract_result_xml"]
