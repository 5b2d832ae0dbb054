from __future__ import annotations

import json
from pathlib import Path

from txgraph.core.models import GraphData
from txgraph.io.schemas import graph_to_dict
from txgraph.render.force_graph import ForceGraphRenderer


def _write_text(text: str, out_dir: str, filename: str) -> str:
    p = Path(out_dir)
    p.mkdir(parents=True, exist_ok=True)

    out_path = p / filename
    with out_path.open("w", encoding="utf-8") as f:
        f.write(text)

    return str(out_path)


def write_graph_json(graph: GraphData, out_dir: str, filename: str = "graph.json") -> str:
    return _write_text(json.dumps(graph_to_dict(graph), indent=2), out_dir, filename)


def write_graph_html(
    renderer: ForceGraphRenderer,
    graph: GraphData,
    out_dir: str,
    filename: str = "index.html",
) -> str:
    return _write_text(renderer.render_html(graph), out_dir, filename)


def write_error_html(
    renderer: ForceGraphRenderer,
    message: str,
    out_dir: str,
    filename: str = "index.html",
) -> str:
    """
    Full-card error page in place of the graph.
    """
    return _write_text(renderer.render_error_html(message), out_dir, filename)
