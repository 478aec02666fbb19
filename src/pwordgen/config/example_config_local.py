# Local configuration file overrides standard config values. Never commit this file!
# Used for changing user defaults
from pwordgen.config.config_pwordgen import OPTION_DEFAULTS

BASE_URL = "http://localhost:5173/"
COPY_SUCCESS_TIMEOUT = 3.0
CLEAR_SCREEN = False
OPTION_DEFAULTS["length"] = 24
OPTION_DEFAULTS["include_symbols"] = False

# Rename this file to config_local.py to enable it
