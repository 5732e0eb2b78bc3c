from iats_gateway.models.enums import MethodOfPayment, ResponseStatus, ServerId
from iats_gateway.models.results import GatewayResult

__all__ = [
    "GatewayResult",
    "MethodOfPayment",
    "ResponseStatus",
    "ServerId",
]
