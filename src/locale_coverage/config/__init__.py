"""
Configuration module for the translation coverage checker
"""

from .settings import Settings, LocaleSettings, ReportSettings, LoggingSettings
from .load_config import load_settings, get_settings, reload_settings

__all__ = [
    'Settings', 'LocaleSettings', 'ReportSettings', 'LoggingSettings',
    'load_settings', 'get_settings', 'reload_settings'
]
