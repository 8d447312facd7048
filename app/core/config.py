import os

APP_NAME = "Recipe LD Bridge"

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Page fetching ---
FETCH_TIMEOUT_S = float(os.getenv("FETCH_TIMEOUT_S", "20"))
FETCH_USER_AGENT = os.getenv(
    "FETCH_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36",
)
