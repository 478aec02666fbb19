# config_pwordgen.py
"""
Configuration constants
"""
# ==============================================================
# Application settings
# ==============================================================
# Software version
VERSION = "1.0.0"

# Address used when no shared link is supplied
BASE_URL = "https://pwordgen.com/"

# ==============================================================
# Option defaults (used when a link carries no parameters)
# ==============================================================
OPTION_DEFAULTS = {
    "length": 16,
    "include_upper": True,
    "include_lower": True,
    "include_digits": True,
    "include_symbols": True,
    "custom_chars": "",
    "exclude_similar": False,
    "exclude": "",
    "require_each_selected_class": True,
}

# Accepted password length. Links outside this range are ignored.
LENGTH_MIN = 1
LENGTH_MAX = 256

# ==============================================================
# Character pools
# ==============================================================
SYMBOLS_POOL = "!@#$%^&*()-_=+[]{};:,.<>?/|~"
SIMILAR_CHARS = "il1Lo0O"

# ==============================================================
# Strength labels (entropy bits)
# ==============================================================
ENTROPY_STRONG = 60
ENTROPY_MODERATE = 40

GENERATE_ERROR_FALLBACK = "Failed to generate password"

# ==============================================================
# Clipboard
# ==============================================================
COPY_SUCCESS_TIMEOUT = 2.0           # Seconds the "copied" flag stays up

# ==============================================================
# Display & logging
# ==============================================================
UTF8 = "utf-8"
CLEAR_SCREEN = True
LOG_FILE = "error.log"

# separator
SEP_LG = "=" * 50
SEP_SM = "-" * 50

# ==============================================================
# Optional: local overrides
# Local configuration file overrides standard config values

# ==============================================================
try:
    from pwordgen.config.config_local import *
except ImportError:
    pass  # No local config, use defaults above
