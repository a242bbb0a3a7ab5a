"""
Locale selection for the command line
"""

import logging
import re
from typing import Any, Callable, List

logger = logging.getLogger(__name__)


class BatchSelector:
    """Non-interactive selection: every locale is checked"""
    
    def select(self, locales: List[str]) -> List[str]:
        return list(locales)


class LocaleSelector:
    """Numbered menu read from a line-input function"""
    
    def __init__(self, input_func: Callable[[str], str] = input, output: Callable[[str], Any] = print):
        """
        Initialize LocaleSelector
        
        Args:
            input_func: Blocking line reader, receives the prompt text
            output: Line writer for the menu
        """
        self.input_func = input_func
        self.output = output
    
    def select(self, locales: List[str]) -> List[str]:
        """
        Ask which locale to check
        
        Returns:
            The chosen locale, or all locales for the "check all" entry and
            for anything that is not a valid menu number
        """
        self.output("\nAvailable locales:")
        for idx, locale in enumerate(locales, start=1):
            self.output(f"  {idx}. {locale}")
        self.output(f"  {len(locales) + 1}. Check all locales")
        
        try:
            answer = self.input_func("\nSelect locale (enter number): ")
        except EOFError:
            answer = ""
        
        # Leading digits only, so "2abc" and "2.9" both pick entry 2
        match = re.match(r'\s*(\d+)', answer)
        choice = int(match.group(1)) if match else 0
        
        if 0 < choice <= len(locales):
            return [locales[choice - 1]]
        if choice == len(locales) + 1:
            return list(locales)
        
        logger.debug(f"Invalid locale selection: {answer!r}")
        self.output("Invalid selection. Checking all locales.")
        return list(locales)
