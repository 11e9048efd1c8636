"""
Constants for bookit.

These constants are used by various modules for sensible defaults.
Most of them can be overridden via the config system.
"""

# Store file
DEFAULT_CONFIG_PATH = "~/.bookit"
STORE_ROOT_KEY = "bookmarks"
EMPTY_STORE = "---\nbookmarks: {}"

# Settings
ENV_PREFIX = "BOOKIT_"

# Edit action placeholders
PLACEHOLDER_CONFIG_PATH = "$BOOKIT_CONFIG_PATH"
PLACEHOLDER_BOOKMARK_NAME = "$BOOKIT_BOOKMARK_NAME"
PLACEHOLDER_VIM_BOOKMARK_NAME = "$VIM_BOOKIT_BOOKMARK_NAME"

# Default '$EDITOR' is assumed to be vim compliant
DEFAULT_EDIT_COMMAND = '$EDITOR "$BOOKIT_CONFIG_PATH" "+/$VIM_BOOKIT_BOOKMARK_NAME"'

# View output
ICON_MARKER = "\0icon\x1f"
FIELD_SEPARATOR = "\t"
TAG_SEPARATOR = ","

# Exit codes
EXIT_ERROR = 2
EXIT_INTERRUPTED = 130
