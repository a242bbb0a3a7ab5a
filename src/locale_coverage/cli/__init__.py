"""
Command line helpers
"""

from .prompt import LocaleSelector, BatchSelector

__all__ = ['LocaleSelector', 'BatchSelector']
