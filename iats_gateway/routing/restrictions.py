"""
Server and method-of-payment restriction checks.

MOP_CURRENCY_MATRIX lists, per server and currency, the card brands iATS
treats as significant for that pair. is_mop_allowed returns True when the
brand is NOT listed for the pair, and True for any pair absent from the
matrix (default-permit). Keep this exact boolean behavior: callers of the
original wrapper depend on it, even though the matrix reads like an
allow-list.
"""

from typing import Iterable

MOP_CURRENCY_MATRIX: dict[str, dict[str, tuple[str, ...]]] = {
    # ─── North America ─────────────────────────────────────────────────
    "NA": {
        "USD": ("VISA", "MC", "AMX", "DSC", "VISA DEBIT", "MC DEBIT"),
        "CDN": ("VISA", "MC", "AMX", "VISA DEBIT"),
    },
    # ─── UK ────────────────────────────────────────────────────────────
    "UK": {
        "GBP": ("VISA", "MC", "AMX", "MAESTRO", "VISA DEBIT"),
        "EUR": ("VISA", "MC", "AMX", "VISA DEBIT"),
    },
}


def is_server_restricted(server_id: str, restricted_servers: Iterable[str]) -> bool:
    """Return True if server_id is one of restricted_servers."""
    return server_id in set(restricted_servers)


def is_mop_allowed(server_id: str, currency: str, mop: str) -> bool:
    """
    Check a method of payment against the server/currency matrix.

    Args:
        server_id: "NA" or "UK".
        currency: Currency code (e.g. "USD", "CDN", "GBP", "EUR").
        mop: Method of payment (e.g. "VISA", "MC DEBIT").

    Returns:
        True if the server/currency pair is not in the matrix, or if mop is
        not listed for it. False if mop is listed.
    """
    listed = MOP_CURRENCY_MATRIX.get(server_id, {}).get(currency)
    if listed is None:
        return True
    return mop not in listed
