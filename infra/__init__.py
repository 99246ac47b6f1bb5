from .paths import CONFIG_STORAGE_DIR, LOG_DIR, PROJECT_ROOT, REPLAY_STORAGE_DIR, STORAGE_DIR
from .logger import configure_logging, get_logger

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "CONFIG_STORAGE_DIR",
    "LOG_DIR",
    "REPLAY_STORAGE_DIR",
    "configure_logging",
    "get_logger",
]
