"""
Settings and configuration for Doushi.

Every value can be overridden with a DOUSHI_* environment variable.
"""

import os

API_VERSION = "0.3.0"

# Server
HOST = os.environ.get("DOUSHI_HOST", "0.0.0.0")
PORT = int(os.environ.get("DOUSHI_PORT", "8000"))
RELOAD = os.environ.get("DOUSHI_RELOAD", "").lower() in ("1", "true", "yes")

# Comma separated list of allowed origins
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("DOUSHI_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Logging
LOG_LEVEL = os.environ.get("DOUSHI_LOG_LEVEL", "INFO").upper()

# Debug mode
DEBUG = os.environ.get("DOUSHI_DEBUG", "").lower() in ("1", "true", "yes")
