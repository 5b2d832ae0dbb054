from __future__ import annotations

from txgraph.ports.name_port import NameLookupPort


def shorten_address(address: str) -> str:
    return f"{address[:3]}...{address[-2:]}"


def resolve_label(address: str, names: NameLookupPort) -> str:
    """Known display name for ``address``, else its shortened form."""
    return names.get_name(address) or shorten_address(address)
