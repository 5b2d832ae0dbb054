from txgraph.config import settings
from txgraph.ports.name_port import NameLookupPort
from typing import Optional, Dict

class StaticNameAdapter(NameLookupPort):
    def __init__(self, names: Optional[Dict[str, str]] = None):
        self._names = dict(settings.KNOWN_NAMES if names is None else names)

    def get_name(self, address):
        # empty names count as unknown
        return self._names.get(address) or None
