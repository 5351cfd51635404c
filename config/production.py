import os

SELECTION_MARGIN_MINUTES = int(os.getenv("SELECTION_MARGIN_MINUTES", "240"))

LOG_VERBOSE = bool(int(os.getenv("LOG_VERBOSE", "0")))
# Structured JSON lines for log shipping
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))
