from dataclasses import dataclass


@dataclass(frozen=True)
class Transaction:
    id: str
    from_address: str
    to_address: str
    value: str              # decimal string as served by the API (unvalidated)
    timestamp: str
