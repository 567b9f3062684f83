import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")


def _env_flag(name: str, default: bool = False) -> bool:
    """Reads a boolean switch from the environment ('1', 'true', 'yes', 'on')."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# --- Path Configuration ---
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# Optional CSV of transactions (Action,SKU,Quantity,Price) to replay on startup.
_transactions_file = os.getenv("TRANSACTIONS_FILE")
TRANSACTIONS_FILE = BASE_DIR / _transactions_file if _transactions_file else None

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Output Configuration ---
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME_BASE", "sku_report")
SAVE_REPORT = _env_flag("SAVE_REPORT")
SAVE_JSON_OUTPUT = _env_flag("SAVE_JSON_OUTPUT")

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")

# --- Ledger Policy ---
# When set, ItemRecord.sell skips its overselling guard and stock may go negative.
ALLOW_OVERSELL = _env_flag("ALLOW_OVERSELL")
