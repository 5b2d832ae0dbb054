from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class NodeType(str, Enum):
    IN = "in"
    OUT = "out"
    BOTH = "both"


class WidgetState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERRORED = "errored"



# Graph models

@dataclass
class GraphNode:

    id: str                 # address
    label: str
    color: str
    type: NodeType


@dataclass
class GraphLink:

    source: str
    target: str
    value: float            # NaN when the tx value did not parse


@dataclass
class GraphData:
    """
    Counterparty graph for one queried address.

    Nodes are keyed by address (at most one per address); every link
    endpoint is a key of ``nodes``.
    """

    nodes: Dict[str, GraphNode] = field(default_factory=dict)
    links: List[GraphLink] = field(default_factory=list)
