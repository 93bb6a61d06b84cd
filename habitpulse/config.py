"""Configuration — loads environment variables with sensible defaults.

All tunables live here. Override via .env file or environment variables.
No hardcoded thresholds/timings elsewhere in the codebase.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

def _env(key: str, default: str = "") -> str:
    return os.getenv(key, default)

def _env_int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))

def _env_float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))

def _env_bool(key: str, default: bool = False) -> bool:
    return os.getenv(key, str(default)).lower() in ("1", "true", "yes")


# ═══════════════════════════════════════════════════════════════════════════
# Notifications
# ═══════════════════════════════════════════════════════════════════════════
# One message at a time. A newer message replaces the old one and restarts
# the countdown.

NOTIFICATION_DURATION_SECONDS = _env_float("NOTIFICATION_DURATION_SECONDS", 3.0)

# ═══════════════════════════════════════════════════════════════════════════
# History window
# ═══════════════════════════════════════════════════════════════════════════

HISTORY_WINDOW_DAYS = _env_int("HISTORY_WINDOW_DAYS", 7)
DATE_LABEL_FORMAT = _env("DATE_LABEL_FORMAT", "%b %d")   # e.g. "Oct 16"

# ═══════════════════════════════════════════════════════════════════════════
# New habit defaults
# ═══════════════════════════════════════════════════════════════════════════

DEFAULT_GOAL = _env_float("DEFAULT_GOAL", 1)
DEFAULT_UNIT = _env("DEFAULT_UNIT", "times")
DEFAULT_ICON = _env("DEFAULT_ICON", "✨")

# ═══════════════════════════════════════════════════════════════════════════
# Demo data
# ═══════════════════════════════════════════════════════════════════════════
# RANDOM_SEED empty = different demo history on every start.

SEED_DEMO_HABITS = _env_bool("SEED_DEMO_HABITS", True)
RANDOM_SEED = _env("RANDOM_SEED")

# ═══════════════════════════════════════════════════════════════════════════
# Display
# ═══════════════════════════════════════════════════════════════════════════

DARK_MODE = _env_bool("DARK_MODE", False)

# ═══════════════════════════════════════════════════════════════════════════
# Timezone (default UTC, override for your locale in .env)
# ═══════════════════════════════════════════════════════════════════════════
# Decides which calendar day counts as "today" for the history window.

TIMEZONE_OFFSET_HOURS = _env_int("TIMEZONE_OFFSET_HOURS", 0)
