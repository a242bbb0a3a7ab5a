"""
Configuration settings with validation
"""

import os
from dataclasses import dataclass
from typing import List

DEFAULT_EXCLUDED_LOCALES = ['index', '__init__', 'compare_translations']


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class LocaleSettings:
    """Where locale files live and which one is the baseline"""
    locales_dir: str = 'locales'
    baseline_locale: str = 'en'
    excluded_locales: List[str] = None

    def __post_init__(self):
        if not self.locales_dir:
            raise ValueError("Locales directory is required")

        self.baseline_locale = (self.baseline_locale or '').strip()
        if not self.baseline_locale:
            raise ValueError("Baseline locale is required")

        if self.excluded_locales is None:
            self.excluded_locales = list(DEFAULT_EXCLUDED_LOCALES)


@dataclass
class ReportSettings:
    """Console report configuration"""
    preview_length: int = 60
    fail_on_incomplete: bool = False

    def __post_init__(self):
        if self.preview_length <= 0:
            raise ValueError("Preview length must be a positive integer")


@dataclass
class LoggingSettings:
    """Logging configuration"""
    log_level: str = 'WARNING'

    def __post_init__(self):
        # Validate log level
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")

        self.log_level = self.log_level.upper()


@dataclass
class Settings:
    """Main configuration settings"""
    locales: LocaleSettings
    report: ReportSettings
    logging: LoggingSettings

    @classmethod
    def from_env(cls) -> 'Settings':
        """Create settings from environment variables"""
        excluded_str = os.getenv('EXCLUDED_LOCALES')
        excluded_locales = None
        if excluded_str is not None:
            excluded_locales = [x.strip() for x in excluded_str.split(',') if x.strip()]

        preview_str = os.getenv('PREVIEW_LENGTH', '60')
        try:
            preview_length = int(preview_str)
        except ValueError:
            raise ValueError("Invalid PREVIEW_LENGTH format. Use a positive integer.")

        return cls(
            locales=LocaleSettings(
                locales_dir=os.getenv('LOCALES_DIR', 'locales'),
                baseline_locale=os.getenv('BASELINE_LOCALE', 'en'),
                excluded_locales=excluded_locales
            ),
            report=ReportSettings(
                preview_length=preview_length,
                fail_on_incomplete=_parse_bool(os.getenv('FAIL_ON_INCOMPLETE', 'false'))
            ),
            logging=LoggingSettings(
                log_level=os.getenv('LOG_LEVEL', 'WARNING')
            )
        )
