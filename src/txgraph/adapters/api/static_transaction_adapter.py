import json

from txgraph.config import settings
from txgraph.io.schemas import transaction_from_dict
from txgraph.ports.transaction_port import TransactionPort
from txgraph.core.dto import Transaction
from typing import Optional, List

class StaticTransactionAdapter(TransactionPort):
    def __init__(self,
                 transactions: Optional[List[Transaction]] = None,
                 page_size: int = settings.TRANSACTIONS_PAGE_SIZE,
                 ):
        self._txs = transactions or []
        self._page_size = page_size

    @classmethod
    def from_json_file(cls, path: str) -> "StaticTransactionAdapter":
        # same row shape as the API; raises OSError / ValueError
        with open(path, "r", encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValueError(f"Expected a JSON array of transactions in {path}")
        return cls([transaction_from_dict(r) for r in rows])

    def fetch_transactions(self, address):
        if not address:
            raise ValueError("address is required")
        items = [
            t for t in self._txs
            if t.from_address == address or t.to_address == address
        ]
        return items[:self._page_size]
