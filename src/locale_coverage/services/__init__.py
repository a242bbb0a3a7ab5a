"""
Services for the translation coverage checker
"""

from .comparator import compare, validate_baseline, coverage_percent, InvalidInputError
from .locale_loader import LocaleRegistry, LocaleLoadError
from .report_service import CoverageReporter

__all__ = [
    'compare', 'validate_baseline', 'coverage_percent', 'InvalidInputError',
    'LocaleRegistry', 'LocaleLoadError', 'CoverageReporter'
]
