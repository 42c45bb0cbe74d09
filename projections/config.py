# projections/config.py

import os

# --- HTTP API ---
# Comma-separated list of origins allowed to call /api/*
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "PROJECTIONS_CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")
    if origin.strip()
]
DEBUG = os.getenv("PROJECTIONS_DEBUG", "false").lower() in ("1", "true", "yes")

# --- Logging ---
LOG_LEVEL = os.getenv("PROJECTIONS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
