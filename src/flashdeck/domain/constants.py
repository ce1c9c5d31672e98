"""Centralized constants for the flashdeck scheduler.

All magic numbers and defaults live here so every layer imports from a
single source of truth.
"""

# ---------- Time ----------
MS_PER_MINUTE = 60 * 1000
MS_PER_DAY = 24 * 60 * MS_PER_MINUTE

# Sentinel for "never reviewed": epoch zero is eligible for every now >= 0.
NEVER = 0

# ---------- Review intervals (ms) ----------
EASY_INTERVAL_MS = 7 * MS_PER_DAY
GOOD_INTERVAL_MS = 3 * MS_PER_DAY
DIFFICULT_INTERVAL_MS = 1 * MS_PER_DAY
REPEAT_INTERVAL_MS = 10 * MS_PER_MINUTE

# ---------- Presentation ----------
PROGRESS_SCALE = 100.0
EMPTY_DECK_MESSAGE = "No cards available for review."

# ---------- Server ----------
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8778
