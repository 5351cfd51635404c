import os

SELECTION_MARGIN_MINUTES = int(os.getenv("SELECTION_MARGIN_MINUTES", "15"))

LOG_VERBOSE = False
LOG_JSON = False
