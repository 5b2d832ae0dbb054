import math
import unittest

from txgraph.adapters.names.static_name_adapter import StaticNameAdapter
from txgraph.core.dto import Transaction
from txgraph.core.models import GraphData, GraphLink, GraphNode, NodeType
from txgraph.services.address_resolver import resolve_label, shorten_address
from txgraph.services.graph_service import (
    GraphService,
    address_color,
    classify_nodes,
    parse_value,
)


def _tx(frm: str, to: str, value: str = "1", tx_id: str = "0x1") -> Transaction:
    return Transaction(id=tx_id, from_address=frm, to_address=to, value=value, timestamp="0")


class AddressResolverTests(unittest.TestCase):
    def test_unknown_address_is_shortened(self) -> None:
        names = StaticNameAdapter({})
        self.assertEqual(resolve_label("0xabcdef1234", names), "0xa...34")
        self.assertEqual(shorten_address("0xabcdef1234"), "0xa...34")

    def test_known_address_uses_name(self) -> None:
        names = StaticNameAdapter()
        self.assertEqual(
            resolve_label("0x1234567890123456789012345678901234567890", names),
            "Alice",
        )

    def test_lookup_is_exact_match(self) -> None:
        names = StaticNameAdapter({"0xAbC": "Carol"})
        self.assertIsNone(names.get_name("0xabc"))
        self.assertEqual(names.get_name("0xAbC"), "Carol")


class GraphServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.svc = GraphService(names=StaticNameAdapter({}))

    def test_single_outgoing_transaction(self) -> None:
        # counterparties are typed from the receiving side: "in" only for the query address
        graph = self.svc.build("0xQUERY", [_tx("0xQUERY", "0xB", "1.5")])

        self.assertEqual(set(graph.nodes), {"0xQUERY", "0xB"})
        self.assertEqual(graph.nodes["0xQUERY"].type, NodeType.OUT)
        self.assertEqual(graph.nodes["0xB"].type, NodeType.OUT)
        self.assertEqual(
            graph.links,
            [GraphLink(source="0xQUERY", target="0xB", value=1.5)],
        )

    def test_incoming_transaction_types(self) -> None:
        graph = self.svc.build("0xQUERY", [_tx("0xA", "0xQUERY")])

        # counterparty sending to the query address is typed "in", the query "in"
        self.assertEqual(graph.nodes["0xA"].type, NodeType.IN)
        self.assertEqual(graph.nodes["0xQUERY"].type, NodeType.IN)

    def test_nodes_are_distinct_addresses_and_links_match_transactions(self) -> None:
        txs = [
            _tx("0xQ", "0xA", tx_id="1"),
            _tx("0xA", "0xQ", tx_id="2"),
            _tx("0xQ", "0xA", tx_id="3"),
            _tx("0xB", "0xC", tx_id="4"),
        ]
        graph = self.svc.build("0xQ", txs)

        expected = {a for t in txs for a in (t.from_address, t.to_address)}
        self.assertEqual(set(graph.nodes), expected)
        self.assertEqual(len(graph.links), len(txs))
        for link in graph.links:
            self.assertIn(link.source, graph.nodes)
            self.assertIn(link.target, graph.nodes)

    def test_both_iff_source_and_target(self) -> None:
        txs = [
            _tx("0xQ", "0xA"),
            _tx("0xA", "0xB"),
            _tx("0xC", "0xQ"),
        ]
        graph = self.svc.build("0xQ", txs)

        sources = {link.source for link in graph.links}
        targets = {link.target for link in graph.links}
        for node_id, node in graph.nodes.items():
            is_both = node_id in sources and node_id in targets
            self.assertEqual(node.type == NodeType.BOTH, is_both, node_id)

        self.assertEqual(graph.nodes["0xQ"].type, NodeType.BOTH)
        self.assertEqual(graph.nodes["0xA"].type, NodeType.BOTH)
        self.assertEqual(graph.nodes["0xB"].type, NodeType.OUT)
        self.assertEqual(graph.nodes["0xC"].type, NodeType.IN)

    def test_self_transfer_is_both(self) -> None:
        graph = self.svc.build("0xQ", [_tx("0xQ", "0xQ")])

        self.assertEqual(len(graph.nodes), 1)
        self.assertEqual(graph.nodes["0xQ"].type, NodeType.BOTH)

    def test_unparseable_value_yields_nan(self) -> None:
        graph = self.svc.build("0xQ", [_tx("0xQ", "0xA", "not-a-number")])

        self.assertTrue(math.isnan(graph.links[0].value))

    def test_empty_transactions(self) -> None:
        graph = self.svc.build("0xQ", [])

        self.assertEqual(graph.nodes, {})
        self.assertEqual(graph.links, [])

    def test_labels_and_colors(self) -> None:
        svc = GraphService(names=StaticNameAdapter({"0xQUERY": "Me"}))
        graph = svc.build("0xQUERY", [_tx("0xQUERY", "0xBBBBBB")])

        self.assertEqual(graph.nodes["0xQUERY"].label, "Me")
        self.assertEqual(graph.nodes["0xBBBBBB"].label, "0xB...BB")
        self.assertEqual(graph.nodes["0xBBBBBB"].color, address_color("0xBBBBBB"))

    def test_custom_color_function(self) -> None:
        svc = GraphService(names=StaticNameAdapter({}), colors=lambda a: "#000000")
        graph = svc.build("0xQ", [_tx("0xQ", "0xA")])

        self.assertEqual({n.color for n in graph.nodes.values()}, {"#000000"})


class HelperTests(unittest.TestCase):
    def test_address_color_is_stable_hex(self) -> None:
        color = address_color("0xabc")
        self.assertRegex(color, r"^#[0-9a-f]{6}$")
        self.assertEqual(color, address_color("0xabc"))

    def test_parse_value(self) -> None:
        self.assertEqual(parse_value("1.5"), 1.5)
        self.assertEqual(parse_value("1000000000000000000"), 1e18)
        self.assertTrue(math.isnan(parse_value("")))

    def test_classify_returns_same_graph_when_unchanged(self) -> None:
        graph = GraphData(
            nodes={
                "0xA": GraphNode(id="0xA", label="A", color="#000000", type=NodeType.OUT),
                "0xB": GraphNode(id="0xB", label="B", color="#000000", type=NodeType.IN),
            },
            links=[GraphLink(source="0xA", target="0xB", value=1.0)],
        )
        self.assertIs(classify_nodes(graph), graph)

    def test_classify_is_idempotent(self) -> None:
        graph = GraphData(
            nodes={
                "0xA": GraphNode(id="0xA", label="A", color="#000000", type=NodeType.OUT),
                "0xB": GraphNode(id="0xB", label="B", color="#000000", type=NodeType.IN),
            },
            links=[
                GraphLink(source="0xA", target="0xB", value=1.0),
                GraphLink(source="0xB", target="0xA", value=2.0),
            ],
        )
        once = classify_nodes(graph)

        self.assertIsNot(once, graph)
        self.assertEqual(graph.nodes["0xA"].type, NodeType.OUT)
        self.assertEqual(once.nodes["0xA"].type, NodeType.BOTH)
        self.assertEqual(once.nodes["0xB"].type, NodeType.BOTH)
        self.assertIs(classify_nodes(once), once)


if __name__ == "__main__":
    unittest.main()
