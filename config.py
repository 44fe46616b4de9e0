# config.py
APP_VERSION = "1.4.0"
APP_TITLE = "Asset Registry"

# Logging
LOG_LEVEL = "INFO"
LOG_FILE = None  # e.g. "asset_registry.log"

# Lists / Pagination
DEFAULT_PAGE_SIZE = 6
FILTER_SENTINEL = "All"  # "All" or "All <Something>" means no constraint

# Notifications (seconds)
NOTIFICATION_DURATION_SECONDS = 4
NOTIFICATION_KINDS = ("success", "error", "warning")

# Destructive actions: cosmetic spinner before the commit (seconds)
DELETE_DELAY_SECONDS = 0.8

# Identity generation
IDENTITY_MAX_ATTEMPTS = 50

# Export
EXPORT_DATE_FORMAT = "%Y-%m-%d"
EXPORT_MIME = "text/csv"
EXPORT_ENCODING = "utf-8"
