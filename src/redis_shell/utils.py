import os
from pathlib import Path

# --- Centralized Path Constant ---
# The history file lives in the user's home directory unless overridden.
HISTORY_PATH = Path(
    os.getenv("REDIS_SHELL_HISTORY", Path.home() / ".redis_shell_history")
)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = "6379"

