from __future__ import annotations

import argparse
import datetime as dt
import json
import sys
from typing import List, Optional

from txgraph.config import settings
from txgraph.core.models import WidgetState
from txgraph.services.graph_service import GraphService
from txgraph.services.widget import TransactionGraphWidget
from txgraph.render.force_graph import ForceGraphRenderer
from txgraph.io.output_writer import write_error_html, write_graph_html, write_graph_json
from txgraph.utils.logging import configure_logging, get_logger

from txgraph.adapters.api.http_transaction_adapter import HttpTransactionAdapter
from txgraph.adapters.api.static_transaction_adapter import StaticTransactionAdapter
from txgraph.adapters.names.static_name_adapter import StaticNameAdapter

logger = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="txgraph", description="Transaction counterparty graph for one address")
    p.add_argument("--address", required=False, help="Address to graph")
    p.add_argument("--out", default="out", help="Output folder")
    p.add_argument("--base-url", default=settings.TXGRAPH_API_BASE_URL, help="Base URL of the transactions API")
    p.add_argument("--timeout", type=float, default=settings.TXGRAPH_TIMEOUT_SEC, help="Request timeout in seconds")
    p.add_argument("--use-static", metavar="JSON", help="Read transactions from a JSON file instead of the API (dev/testing)")
    p.add_argument("--names", metavar="JSON", help="JSON object mapping address -> display name")
    p.add_argument("--verbose", action="store_true", help="Verbose logging")
    p.add_argument("--log-file", help="Also write logs to this file")
    return p


def _make_progress_reporter():

    def _ts() -> str:
        return dt.datetime.now().strftime("%H:%M:%S")

    def progress(event: str, data: dict) -> None:
        if event == "fetch":
            print(f"[{_ts()}] Fetching transactions for {data['address']}...")
            return
        if event == "ready":
            print(f"[{_ts()}] Graph ready • {data['nodes']} nodes • {data['links']} links")
            return
        if event == "error":
            print(f"[{_ts()}] Error: {data.get('message', 'Unknown error')}", file=sys.stderr)

    return progress


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file)

    if not args.address:
        # no address, nothing to fetch or render
        print("Missing --address", file=sys.stderr)
        return 2

    # Ports
    if args.use_static:
        try:
            transactions = StaticTransactionAdapter.from_json_file(args.use_static)
        except (OSError, ValueError) as exc:
            print(f"Cannot load {args.use_static}: {exc}", file=sys.stderr)
            return 1
        adapter_label = "StaticTransactionAdapter (dev/testing)"
    else:
        transactions = HttpTransactionAdapter(base_url=args.base_url, timeout_sec=args.timeout)
        adapter_label = f"HttpTransactionAdapter ({args.base_url})"

    names = StaticNameAdapter()
    if args.names:
        try:
            with open(args.names, "r", encoding="utf-8") as f:
                names = StaticNameAdapter(json.load(f))
        except (OSError, ValueError) as exc:
            print(f"Cannot load {args.names}: {exc}", file=sys.stderr)
            return 1

    progress = _make_progress_reporter()
    widget = TransactionGraphWidget(
        transactions=transactions,
        graph_service=GraphService(names=names),
        on_event=progress,
    )
    renderer = ForceGraphRenderer()
    print(f"Adapter: {adapter_label}")
    logger.info("Using %s", adapter_label)

    try:
        widget.set_address(args.address)
    except Exception as exc:
        progress("error", {"message": f"{exc.__class__.__name__}: {exc}"})
        return 1

    # Outputs
    if widget.state == WidgetState.ERRORED:
        error_path = write_error_html(renderer, widget.error or settings.FETCH_ERROR_FALLBACK, args.out)
        print(f"Wrote: {error_path}")
        return 1

    graph_path = write_graph_json(widget.graph, args.out)
    html_path = write_graph_html(renderer, widget.graph, args.out)
    print(f"Wrote: {graph_path}")
    print(f"Wrote: {html_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
