"""Application-wide constants."""

APP_DESCRIPTION = "Programmatic control of tmux sessions and windows"

# tmux invocation
DEFAULT_TMUX_BINARY = "tmux"

# Format strings passed to -F; parsers depend on these exactly
SESSION_NAME_FORMAT = "#{session_name}"
WINDOW_LIST_FORMAT = "#{window_index} #{window_name}"

# Only the first pane of a window is ever targeted
DEFAULT_PANE_INDEX = 0

# Environment
ENV_PREFIX = "TMUXCTL_"

# Logging
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_FILE_BACKUP_COUNT = 5
