"""
Data models for the translation coverage checker
"""

from .translation import TranslationSet, ComparisonResult, LocaleSource

__all__ = ['TranslationSet', 'ComparisonResult', 'LocaleSource']
