from __future__ import annotations

import hashlib
import math
from dataclasses import replace
from typing import Callable, Dict, Iterable, Set

from txgraph.core.dto import Transaction
from txgraph.core.models import GraphData, GraphLink, GraphNode, NodeType
from txgraph.ports.name_port import NameLookupPort
from txgraph.services.address_resolver import resolve_label


def address_color(address: str) -> str:
    # stable across runs: same address, same color
    digest = hashlib.md5(address.encode("utf-8")).hexdigest()
    return f"#{digest[:6]}"


def parse_value(text: str) -> float:
    try:
        return float(text)
    except (TypeError, ValueError):
        return math.nan


def classify_nodes(graph: GraphData) -> GraphData:
    """
    Marks every node that is both a link source and a link target as BOTH.

    Returns ``graph`` itself when no node changes, so callers can detect a
    no-op with an identity check.
    """
    sources: Set[str] = {link.source for link in graph.links}
    targets: Set[str] = {link.target for link in graph.links}

    changed = False
    nodes: Dict[str, GraphNode] = {}
    for node_id, node in graph.nodes.items():
        if node.type != NodeType.BOTH and node_id in sources and node_id in targets:
            node = replace(node, type=NodeType.BOTH)
            changed = True
        nodes[node_id] = node

    if not changed:
        return graph
    return GraphData(nodes=nodes, links=list(graph.links))


class GraphService:
    """
    Folds a page of transactions into a counterparty graph.

    - One node per distinct address, typed by flow relative to the query
      address (``out`` for the sender side, ``in`` for the receiver side)
    - One link per transaction, in input order
    - Nodes seen on both ends of links end up as ``both``
    """

    def __init__(
        self,
        names: NameLookupPort,
        colors: Callable[[str], str] = address_color,
    ) -> None:
        self.names = names
        self.colors = colors

    def build(self, address: str, transactions: Iterable[Transaction]) -> GraphData:
        graph = GraphData(nodes={}, links=[])

        for tx in transactions:
            if tx.from_address not in graph.nodes:
                self._add_node(
                    graph,
                    tx.from_address,
                    NodeType.OUT if tx.from_address == address else NodeType.IN,
                )
            if tx.to_address not in graph.nodes:
                self._add_node(
                    graph,
                    tx.to_address,
                    NodeType.IN if tx.to_address == address else NodeType.OUT,
                )

            graph.links.append(
                GraphLink(
                    source=tx.from_address,
                    target=tx.to_address,
                    value=parse_value(tx.value),
                )
            )

        return classify_nodes(graph)

    # -------------------------
    # Helpers
    # -------------------------

    def _add_node(self, graph: GraphData, address: str, node_type: NodeType) -> None:
        graph.nodes[address] = GraphNode(
            id=address,
            label=resolve_label(address, self.names),
            color=self.colors(address),
            type=node_type,
        )
