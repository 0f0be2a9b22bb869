"""
Configuration module.

Handles loading and validation of logging and rendering settings.
"""

from .loader import ConfigLoader
from .models import AppConfig, LoggingSettings, RenderSettings

__all__ = ["ConfigLoader", "AppConfig", "LoggingSettings", "RenderSettings"]
