"""Constants for suitetrace."""

# Workspace configuration directory and file
CONFIG_DIR = ".suitetrace"
CONFIG_FILE = "config.toml"

# Placeholder author until an identity provider supplies one
DEFAULT_AUTHOR = "Current User"

# Auto-save cadence (seconds)
DEFAULT_AUTOSAVE_INTERVAL = 300  # 5 minutes
AUTOSAVE_DESCRIPTION = "Auto-save"

# Export formats
EXPORT_FORMATS = ("csv", "json")
