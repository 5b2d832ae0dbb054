from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from txgraph.core.errors import FetchError
from txgraph.core.models import GraphData, WidgetState
from txgraph.ports.transaction_port import TransactionPort
from txgraph.services.graph_service import GraphService

logger = logging.getLogger(__name__)

EventCallback = Callable[[str, Dict[str, Any]], None]

BUILD_ERROR_MESSAGE = "Failed to build transaction graph"


class TransactionGraphWidget:
    """
    State holder for the transaction graph view.

    idle -> loading -> ready | errored -> loading (on every new address).

    Each ``set_address`` call takes a new generation number; a response that
    comes back after a newer request was started is dropped instead of
    overwriting the newer state.
    """

    def __init__(
        self,
        transactions: TransactionPort,
        graph_service: GraphService,
        on_event: Optional[EventCallback] = None,
    ) -> None:
        self.transactions = transactions
        self.graph_service = graph_service
        self._on_event = on_event

        self.address: Optional[str] = None
        self.state = WidgetState.IDLE
        self.graph: Optional[GraphData] = None
        self.error: Optional[str] = None
        self.loading = False
        self._generation = 0

    def set_address(self, address: Optional[str]) -> None:
        if address == self.address and self.state != WidgetState.IDLE:
            # only a changed address triggers a fetch
            return
        self.address = address
        if not address:
            # nothing to fetch; keep whatever was rendered before
            return

        self._generation += 1
        generation = self._generation

        self.loading = True
        self.error = None
        self.state = WidgetState.LOADING
        self._emit("fetch", {"address": address})

        try:
            txs = self.transactions.fetch_transactions(address)
            if generation != self._generation:
                self._emit("stale", {"address": address})
                return
            graph = self.graph_service.build(address, txs)
        except FetchError as exc:
            if generation != self._generation:
                self._emit("stale", {"address": address})
                return
            logger.error("Error fetching transaction data for graph: %s", exc)
            self.loading = False
            self.error = str(exc)
            self.state = WidgetState.ERRORED
            self._emit("error", {"address": address, "message": self.error})
            return
        except Exception:
            # unexpected failure while building; never stay in LOADING
            if generation == self._generation:
                self.loading = False
                self.error = BUILD_ERROR_MESSAGE
                self.state = WidgetState.ERRORED
            raise

        self.loading = False
        self.graph = graph
        self.state = WidgetState.READY
        logger.info(
            "Graph ready for %s: %d nodes, %d links",
            address, len(graph.nodes), len(graph.links),
        )
        self._emit("ready", {"address": address, "nodes": len(graph.nodes), "links": len(graph.links)})

    def teardown(self) -> None:
        # invalidate anything still in flight
        self._generation += 1
        self.address = None
        self.graph = None
        self.error = None
        self.loading = False
        self.state = WidgetState.IDLE

    def _emit(self, event: str, data: Dict[str, Any]) -> None:
        if self._on_event is not None:
            self._on_event(event, data)
