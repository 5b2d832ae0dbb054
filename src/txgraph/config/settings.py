import os
from dotenv import load_dotenv
load_dotenv()
# ---- Transactions API ----
TXGRAPH_API_BASE_URL = os.environ.get("TXGRAPH_API_BASE_URL", "http://localhost:3000")
TRANSACTIONS_PATH = "/api/transactions"
TRANSACTIONS_PAGE_SIZE = 50         # sent as the "offset" query parameter
TXGRAPH_TIMEOUT_SEC = float(os.environ.get("TXGRAPH_TIMEOUT_SEC", "15"))
FETCH_ERROR_FALLBACK = "Failed to fetch transaction data for graph"

# ---- Block explorer ----
EXPLORER_ADDRESS_URL = os.environ.get(
    "TXGRAPH_EXPLORER_ADDRESS_URL", "https://etherscan.io/address/{address}"
)

# ----- Name lookup ------

# Demo names; exact-match on the address string
KNOWN_NAMES = {
    "0x1234567890123456789012345678901234567890": "Alice",
    "0x0987654321098765432109876543210987654321": "Bob",
}

# ----- Render surface -----
RENDER_WIDTH = 800
RENDER_HEIGHT = 440
RENDER_NODE_SCALE = 4               # vis-network px per radius unit
NODE_RADIUS = 3
NODE_RADIUS_BOTH = 4
NODE_FILL = {
    "in": "rgba(0, 255, 0, 0.5)",
    "out": "rgba(255, 0, 0, 0.5)",
    "both": "rgba(255, 255, 0, 0.5)",
}
LABEL_COLOR = "black"
LABEL_FONT_SIZE = 12
LINK_COLOR = "rgba(0,0,0,0.2)"
LINK_WIDTH = 1
