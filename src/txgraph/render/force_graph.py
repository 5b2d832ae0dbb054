from __future__ import annotations

import html
import json
import math

from pyvis.network import Network

from txgraph.config import settings
from txgraph.core.models import GraphData, GraphLink, GraphNode, NodeType


_CLICK_HANDLER = """
<script type="text/javascript">
  var explorerUrls = %s;
  network.on("click", function (params) {
    if (params.nodes.length > 0 && explorerUrls[params.nodes[0]]) {
      window.open(explorerUrls[params.nodes[0]], "_blank");
    }
  });
</script>
"""

_ERROR_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Transaction Graph</title>
  <style>
    .card {
      width: %(width)dpx;
      height: 500px;
      display: flex;
      align-items: center;
      justify-content: center;
      border: 1px solid #e5e7eb;
      border-radius: 8px;
      font-family: Sans-Serif;
    }
    .error { color: #ef4444; text-align: center; }
  </style>
</head>
<body>
  <div class="card"><p class="error">Error: %(message)s</p></div>
</body>
</html>
"""


class ForceGraphRenderer:
    """
    Draws a GraphData with pyvis (vis-network, force-directed physics).
    Node click opens the address on the block explorer in a new tab.
    """

    def __init__(
        self,
        explorer_url: str = settings.EXPLORER_ADDRESS_URL,
        width: int = settings.RENDER_WIDTH,
        height: int = settings.RENDER_HEIGHT,
        node_scale: int = settings.RENDER_NODE_SCALE,
    ) -> None:
        self.explorer_url = explorer_url
        self.width = width
        self.height = height
        self.node_scale = node_scale

    # ---------- node / link callbacks ----------

    @staticmethod
    def node_title(node: GraphNode) -> str:
        return node.id

    @staticmethod
    def node_color(node: GraphNode) -> str:
        return node.color

    @staticmethod
    def node_fill(node: GraphNode) -> str:
        return settings.NODE_FILL[NodeType(node.type).value]

    @staticmethod
    def node_radius(node: GraphNode) -> int:
        return settings.NODE_RADIUS_BOTH if node.type == NodeType.BOTH else settings.NODE_RADIUS

    @staticmethod
    def link_title(link: GraphLink) -> str:
        return "NaN" if math.isnan(link.value) else f"{link.value:g}"

    def node_url(self, node: GraphNode) -> str:
        return self.explorer_url.format(address=node.id)

    def _label_font(self, node: GraphNode) -> dict:
        # dot labels sit below the circle by default; pull them onto its center
        size = self.node_radius(node) * self.node_scale
        return {
            "color": settings.LABEL_COLOR,
            "size": settings.LABEL_FONT_SIZE,
            "vadjust": -(size + settings.LABEL_FONT_SIZE),
        }

    # ---------- drawing ----------

    def build_network(self, graph: GraphData) -> Network:
        net = Network(
            height=f"{self.height}px",
            width=f"{self.width}px",
            directed=True,
            cdn_resources="remote",
        )
        net.force_atlas_2based()

        for node in graph.nodes.values():
            net.add_node(
                node.id,
                label=node.label,
                title=self.node_title(node),
                shape="dot",
                size=self.node_radius(node) * self.node_scale,
                color={"background": self.node_fill(node), "border": self.node_color(node)},
                font=self._label_font(node),
            )

        for link in graph.links:
            net.add_edge(
                link.source,
                link.target,
                title=self.link_title(link),
                width=settings.LINK_WIDTH,
                color=settings.LINK_COLOR,
                arrows="to",
            )

        net.toggle_physics(True)
        return net

    def render_html(self, graph: GraphData) -> str:
        page = self.build_network(graph).generate_html()
        urls = {node.id: self.node_url(node) for node in graph.nodes.values()}
        # "</" must not close the script tag early
        handler = _CLICK_HANDLER % json.dumps(urls).replace("</", "<\\/")
        return page.replace("</body>", handler + "</body>", 1)

    def render_error_html(self, message: str) -> str:
        return _ERROR_PAGE % {"width": self.width, "message": html.escape(message)}
