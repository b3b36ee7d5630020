from .paths import PROJECT_ROOT, STORAGE_DIR, LOG_DIR
from .logger import configure_logging, get_logger

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "LOG_DIR",
    "configure_logging",
    "get_logger",
]
