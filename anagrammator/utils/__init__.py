# anagrammator/utils/__init__.py
# small helpers shared by the CLI: file logging/timing and JSON config

from .logger_utils import Log
from .config_manager import Config

__all__ = [
    "Log",
    "Config",
]
