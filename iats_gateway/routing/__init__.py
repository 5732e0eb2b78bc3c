from iats_gateway.routing.restrictions import MOP_CURRENCY_MATRIX, is_mop_allowed, is_server_restricted
from iats_gateway.routing.servers import NA_SERVER, SERVER_URLS, UK_SERVER, resolve_server

__all__ = [
    "MOP_CURRENCY_MATRIX",
    "NA_SERVER",
    "SERVER_URLS",
    "UK_SERVER",
    "is_mop_allowed",
    "is_server_restricted",
    "resolve_server",
]
