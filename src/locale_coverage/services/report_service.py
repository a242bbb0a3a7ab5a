"""
Plain-text coverage report
"""

import json
from typing import Any, Callable

from ..models.translation import TranslationSet, ComparisonResult

RULE_WIDTH = 60


class CoverageReporter:
    """Writes the coverage report line by line"""
    
    def __init__(self, write: Callable[[str], Any] = print, preview_length: int = 60):
        self.write = write
        self.preview_length = preview_length
    
    def preview(self, value: Any) -> str:
        """Short rendering of a baseline value for the missing-key list"""
        if not isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        if len(value) > self.preview_length:
            return value[:self.preview_length] + "..."
        return value
    
    def header(self, baseline_name: str, baseline_keys: int):
        self.write("\n" + "=" * RULE_WIDTH)
        self.write("TRANSLATION COVERAGE REPORT")
        self.write("=" * RULE_WIDTH)
        self.write(f"Baseline: {baseline_name} ({baseline_keys} keys)\n")
    
    def footer(self):
        self.write("=" * RULE_WIDTH)
    
    def report_result(
        self,
        result: ComparisonResult,
        locale_name: str,
        baseline: TranslationSet,
        baseline_name: str
    ):
        """Write coverage, missing keys, extra keys and status for one locale"""
        self.write(f"Locale: {locale_name}")
        self.write(f"  Coverage: {result.coverage}% ({result.total_keys}/{result.baseline_keys} keys)")
        
        if result.missing:
            self.write(f"  Missing: {len(result.missing)} keys")
            for key in result.missing:
                self.write(f'    - "{key}": "{self.preview(baseline[key])}"')
        
        if result.extra:
            self.write(f"  Extra: {len(result.extra)} keys (not in {baseline_name})")
            for key in result.extra:
                self.write(f'    - "{key}"')
        
        self.write(f"  Status: {'Complete' if result.is_complete else 'Incomplete'}")
        self.write("")
    
    def report_load_error(self, locale_name: str, reason: str):
        self.write(f"Locale: {locale_name}")
        self.write(f"  Error: Failed to load ({reason})")
        self.write("")
