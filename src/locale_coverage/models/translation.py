"""
Translation-related data models
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping, Tuple

# One locale's translations: key -> value
TranslationSet = Mapping[str, Any]


@dataclass(frozen=True)
class LocaleSource:
    """A locale file found in the locales directory"""
    locale: str
    path: Path
    loader: Callable[[Path], Awaitable[Any]]

    @property
    def display_name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing one candidate against the baseline"""
    locale: str
    total_keys: int
    baseline_keys: int
    missing: Tuple[str, ...]
    extra: Tuple[str, ...]
    coverage: str
    is_complete: bool

