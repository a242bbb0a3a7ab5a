"""
Utility modules for the translation coverage checker
"""

from .validators import LocaleValidator

__all__ = ['LocaleValidator']
