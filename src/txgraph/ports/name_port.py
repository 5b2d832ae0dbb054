from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class NameLookupPort(ABC):

    @abstractmethod
    def get_name(self, address: str) -> Optional[str]:
        raise NotImplementedError
