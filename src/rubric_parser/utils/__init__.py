"""
Utility module.

Logging setup shared by the library and the command-line tool.
"""

from .logging import setup_logging, get_logger, level_from_name

__all__ = ["setup_logging", "get_logger", "level_from_name"]
