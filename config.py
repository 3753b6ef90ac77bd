"""Central configuration for the background image catalog server.

All fixed names and defaults are defined here. Runtime overrides (host,
port, asset root, config path) come from the command line in ``web.app``.
"""

# =============================================================================
# PUBLIC URL LAYOUT
# =============================================================================

# URL path segment under which every catalog asset is served
PUBLIC_PREFIX = "/backgroundimages"

# Endpoint that returns the catalog document
CATALOG_ENDPOINT = "/config.json"

# Methods advertised for the catalog endpoint
CATALOG_ALLOWED_METHODS = "GET, OPTIONS"

# Top-level key of the catalog document (also accepted in the config file)
CATALOG_KEY = "videoBackgroundImages"

# =============================================================================
# SERVER DEFAULTS
# =============================================================================

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5333

# Directory holding the config file and the image assets
DEFAULT_ASSET_ROOT = "backgrounds"

# Config file name inside the asset root
CONFIG_FILENAME = "config.json"

# =============================================================================
# ENTRY NORMALIZATION
# =============================================================================

# Extensions picked up by directory scans (compared lowercased)
IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"})

# File type reported when none is given and none can be inferred
DEFAULT_FILETYPE = "png"

# Identifier base used when nothing else sanitizes to a usable id
FALLBACK_ID = "background"
