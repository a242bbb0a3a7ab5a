"""
Input validation utilities
"""

import re
from collections.abc import Mapping
from typing import Any, Tuple


class LocaleValidator:
    """Locale code and translation set validation"""
    
    @staticmethod
    def validate_locale_code(locale: str) -> Tuple[bool, str]:
        """Validate a locale identifier such as 'ru', 'pt-BR' or 'zh_Hans'"""
        if not locale or not locale.strip():
            return False, "Locale code cannot be empty"
        
        # Locale ids become file names, so no separators or dots
        if not re.match(r'^[A-Za-z0-9_-]+$', locale.strip()):
            return False, f"Invalid locale code: {locale!r}"
        
        return True, ""
    
    @staticmethod
    def validate_translation_set(data: Any) -> Tuple[bool, str]:
        """
        Validate loaded translations
        
        Returns:
            (is_valid, error_message)
        """
        if not isinstance(data, Mapping):
            return False, f"Expected a key/value mapping, got {type(data).__name__}"
        
        bad_keys = [key for key in data if not isinstance(key, str)]
        if bad_keys:
            return False, f"Translation keys must be strings, found: {bad_keys[:5]!r}"
        
        return True, ""
