"""Runtime settings, read once from the environment."""

import os

# "scan" walks the collection per lookup, "index" builds a name map per call
LOOKUP_STRATEGY = os.environ.get("DATAPACKAGE_LOOKUP_STRATEGY", "scan")

LOG_LEVEL = os.environ.get("DATAPACKAGE_LOG_LEVEL", "INFO")

API_HOST = os.environ.get("DATAPACKAGE_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("DATAPACKAGE_API_PORT", "8001"))
