"""Constants module for deadswitch.

All timing values and shared constants are defined here (SSOT).
"""

from __future__ import annotations

# === Countdown Timing (seconds) ===
POLL_INTERVAL = 1.0  # Watcher wake-up interval while armed
THREAD_JOIN_TIMEOUT = 5.0  # Watcher join timeout on shutdown

# === Configuration File ===
DEFAULT_CONFIG_FILE = "config.ini"
CONFIG_ENV_VAR = "DEADSWITCH_CONFIG"  # Overrides DEFAULT_CONFIG_FILE
SETTINGS_SECTION = "Settings"
KEY_GIT_REPO_PATH = "git_repo_path"
KEY_LOCAL_CODE_PATH = "local_code_path"
KEY_TIME_LIMIT = "time_limit_seconds"

# === HTTP Server ===
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
ARMED_MESSAGE = "Countdown started. Files will be deleted after the countdown ends."

# === Display ===
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
