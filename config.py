"""Service-wide configuration constants for the Combat View service."""

import os

SERVICE_NAME = "Combat View"
SERVICE_VERSION = "0.1.0"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
DEBUG_ENDPOINTS = os.environ.get("DEBUG_ENDPOINTS", "1") != "0"  # /debug/* routes

MELEE_RANGE = 1          # Chebyshev squares; ranged attacks need more than this
LEGACY_RANGED_LONG = 8   # Ceiling for ranged weapons declared without a range
LEGACY_RANGED_SHORT = 4  # Short band for the same
STAT_BONUS_DIVISOR = 10  # AGI 35 -> bonus 3
TAG_FORMAT_VERSION = 1
