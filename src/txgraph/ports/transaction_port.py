from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List
from txgraph.core.dto import Transaction

class TransactionPort(ABC):
    """
    Abstract Class for fetching one page of transactions for an address.
    """

    @abstractmethod
    def fetch_transactions(self, address: str) -> List[Transaction]:
        """Raises FetchError on server-signaled, transport or parse failure."""
        raise NotImplementedError
