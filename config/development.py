import os

# Slack around the scheduled window when selecting a shift's time logs
SELECTION_MARGIN_MINUTES = int(os.getenv("SELECTION_MARGIN_MINUTES", "240"))

LOG_VERBOSE = bool(int(os.getenv("LOG_VERBOSE", "1")))
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))
