"""
Application configuration for the ARGB color converter.

Defaults and UI constants are centralized here.
"""

from typing import Any, Dict

# ====================================================================
# APPLICATION CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Application Metadata
    "app_version": "0.1.0",
    "app_name": "ARGB Color Converter",
    "docs_url": "https://developer.android.com/reference/android/graphics/Color",
    # Initial color shown on page load (ARGB 0x8080FF80)
    "default_color": {"alpha": 128, "red": 128, "green": 255, "blue": 128},
    # Integer field shows the Android-style signed reading when True
    "signed_integer_field": False,
    # Swatch rendering
    "checker_color": "#808080",
    "preview_size_px": 100,
    "preview_tile_px": 20,
    "preset_size_px": 20,
    "preset_tile_px": 10,
    # Logging (loguru level name)
    "log_level": "INFO",
}

# Query parameters understood by the app, in precedence order
URL_PARAMS = ("preset", "hex", "int", "signed")
