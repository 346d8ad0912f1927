# config.py
import os
from pathlib import Path

# Data directory: one JSON document per storage key
DATA_DIR = Path(os.environ.get("SHIPPY_DATA_DIR", Path.home() / ".shippy"))
LOG_LEVEL = os.environ.get("SHIPPY_LOG_LEVEL", "INFO").upper()

# Withdrawal wizard timing (ms)
PROCESSING_DELAY_MS = 10_000
FAILURE_DISPLAY_MS = 5_000

CLOCK_TICK_MS = 1_000

CURRENCY = "₹"
SUPPORT_EMAIL = "support@shippy.com"
SUPPORT_PHONE = "+91 9876543210"
