import logging
from typing import Any, Dict, List, Optional
import requests

from txgraph.config.settings import (
    TXGRAPH_API_BASE_URL,
    TRANSACTIONS_PATH,
    TRANSACTIONS_PAGE_SIZE,
    TXGRAPH_TIMEOUT_SEC,
    FETCH_ERROR_FALLBACK,
)

from txgraph.core.errors import FetchError
from txgraph.io.schemas import transaction_from_dict
from txgraph.ports.transaction_port import TransactionPort
from txgraph.core.dto import Transaction

logger = logging.getLogger(__name__)


class HttpTransactionAdapter(TransactionPort):

    def __init__(
        self,
        base_url: str = TXGRAPH_API_BASE_URL,
        page_size: int = TRANSACTIONS_PAGE_SIZE,
        timeout_sec: float = TXGRAPH_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._url = base_url.rstrip("/") + TRANSACTIONS_PATH
        self._page_size = page_size
        self._timeout = timeout_sec
        self._session = session or requests.Session()

    # ---------- internal ----------

    def _call(self, params: Dict[str, Any]) -> Any:
        # single attempt; no retry policy
        try:
            resp = self._session.get(self._url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise FetchError(str(e) or FETCH_ERROR_FALLBACK) from e

        # error payloads come with 4xx/5xx too; the server message wins
        try:
            data = resp.json()
        except ValueError as e:
            data, parse_err = None, e
        else:
            parse_err = None

        if isinstance(data, dict) and "error" in data:
            raise FetchError(str(data["error"]) or FETCH_ERROR_FALLBACK)

        try:
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(str(e) or FETCH_ERROR_FALLBACK) from e

        if parse_err is not None:
            raise FetchError(str(parse_err) or FETCH_ERROR_FALLBACK) from parse_err
        return data

    # ---------- port methods ----------

    def fetch_transactions(self, address: str) -> List[Transaction]:
        if not address:
            raise ValueError("address is required")

        data = self._call({
            "address": address,
            "offset": self._page_size,
        })

        if not isinstance(data, list):
            raise FetchError(f"Invalid transactions response: {data!r}")

        try:
            txs = [transaction_from_dict(r) for r in data]
        except ValueError as e:
            raise FetchError(str(e)) from e
        logger.debug("Fetched %d transaction(s) for %s", len(txs), address)
        return txs
