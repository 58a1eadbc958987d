"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Settings file defaults
# ============================================================================

CONFIG_ENV_VAR: Final = "KUBEVIEW_CONFIG"
CONFIG_DIR_NAME: Final = "kubeview"
CONFIG_FILE_NAME: Final = "settings.yaml"

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_FORMAT_DEFAULT: Final = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT_DEFAULT: Final = "%Y-%m-%d %H:%M:%S"

# ============================================================================
# Style defaults (Rich style strings, 256-color palette)
# ============================================================================

STYLE_TITLE_DEFAULT: Final = "bold color(39)"
STYLE_ITEM_DEFAULT: Final = ""
STYLE_SELECTED_ITEM_DEFAULT: Final = "color(170)"
STYLE_STATUS_DEFAULT: Final = "color(240)"
STYLE_HELP_DEFAULT: Final = "color(240)"
STYLE_ERROR_DEFAULT: Final = "color(9)"
STYLE_TABLE_HEADER_DEFAULT: Final = "bold color(39)"
STYLE_SUCCESS_DEFAULT: Final = "color(2)"
STYLE_WARNING_DEFAULT: Final = "color(3)"
STYLE_HEADER_DEFAULT: Final = "bold underline color(69)"

__all__ = [
    "CONFIG_DIR_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "LOG_DATE_FORMAT_DEFAULT",
    "LOG_FORMAT_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "STYLE_ERROR_DEFAULT",
    "STYLE_HEADER_DEFAULT",
    "STYLE_HELP_DEFAULT",
    "STYLE_ITEM_DEFAULT",
    "STYLE_SELECTED_ITEM_DEFAULT",
    "STYLE_STATUS_DEFAULT",
    "STYLE_SUCCESS_DEFAULT",
    "STYLE_TABLE_HEADER_DEFAULT",
    "STYLE_TITLE_DEFAULT",
    "STYLE_WARNING_DEFAULT",
]
