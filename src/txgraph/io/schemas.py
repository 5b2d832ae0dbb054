from __future__ import annotations

import math
from typing import Any, Dict, Optional

from txgraph.core.dto import Transaction
from txgraph.core.models import GraphData


def _num(x: float) -> Optional[float]:
    # JSON has no NaN
    return None if math.isnan(x) else x


def transaction_from_dict(r: Any) -> Transaction:
    """
    Maps one API row to a Transaction.

    Raises ValueError when the row is not an object or lacks a usable
    "from"/"to" address (missing or null).
    """
    if not isinstance(r, dict):
        raise ValueError(f"Invalid transaction entry: {r!r}")
    for key in ("from", "to"):
        if r.get(key) is None:
            raise ValueError(f"Transaction missing field {key!r}")
    return Transaction(
        id=str(r.get("id", "")),
        from_address=str(r["from"]),
        to_address=str(r["to"]),
        value=str(r.get("value", "")),
        timestamp=str(r.get("timestamp", "")),
    )


def graph_to_dict(g: GraphData) -> Dict[str, Any]:
    return {
        "nodes": [
            {
                "id": n.id,
                "label": n.label,
                "color": n.color,
                "type": n.type.value,
            }
            for n in g.nodes.values()
        ],
        "links": [
            {
                "source": link.source,
                "target": link.target,
                "value": _num(link.value),
            }
            for link in g.links
        ],
    }
