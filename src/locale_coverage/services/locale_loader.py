"""
Locale discovery and loading
"""

import importlib.util
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional

import aiofiles

from ..models.translation import LocaleSource, TranslationSet
from ..utils.validators import LocaleValidator

logger = logging.getLogger(__name__)


class LocaleLoadError(Exception):
    """Raised when a locale file cannot be found, read or parsed"""

    def __init__(self, locale: str, reason: str):
        self.locale = locale
        self.reason = reason
        super().__init__(reason)


async def load_json_locale(path: Path) -> Any:
    """Read a JSON locale file"""
    async with aiofiles.open(path, 'r', encoding='utf-8') as f:
        content = await f.read()
    return json.loads(content)


async def load_module_locale(path: Path) -> Any:
    """
    Import a Python locale module by file path

    The module exposes its translations as ``translations``, or ``default``
    when ``translations`` is absent.
    """
    module_name = f"_locale_coverage_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot import {path.name}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except SystemExit as e:
        raise ImportError(f"{path.name} exited during import (status {e.code})") from e

    if hasattr(module, 'translations'):
        return module.translations
    if hasattr(module, 'default'):
        return module.default
    raise AttributeError(f"{path.name} defines neither 'translations' nor 'default'")


# Extension -> loader; earlier entries win when one locale has several files
DEFAULT_LOADERS: Dict[str, Callable[[Path], Awaitable[Any]]] = {
    '.json': load_json_locale,
    '.py': load_module_locale,
}


class LocaleRegistry:
    """Maps locale identifiers to the files and loaders that provide them"""

    def __init__(
        self,
        locales_dir: str,
        baseline_locale: str = 'en',
        excluded_locales: Optional[Iterable[str]] = None,
        loaders: Optional[Dict[str, Callable[[Path], Awaitable[Any]]]] = None
    ):
        """
        Initialize LocaleRegistry

        Args:
            locales_dir: Directory holding locale files
            baseline_locale: Locale every other locale is measured against
            excluded_locales: Locale ids that are never candidates
            loaders: Extension to loader mapping (defaults to JSON and Python modules)
        """
        self.locales_dir = Path(locales_dir)
        self.baseline_locale = baseline_locale
        self.excluded_locales = set(excluded_locales or [])
        self.loaders = loaders if loaders is not None else dict(DEFAULT_LOADERS)
        self._sources: Optional[Dict[str, LocaleSource]] = None

    def discover(self) -> Dict[str, LocaleSource]:
        """Scan the locales directory once and return sources sorted by locale id"""
        if self._sources is not None:
            return self._sources

        sources: Dict[str, LocaleSource] = {}
        if not self.locales_dir.is_dir():
            logger.warning(f"Locales directory not found: {self.locales_dir}")
            self._sources = sources
            return sources

        for extension, loader in self.loaders.items():
            for path in sorted(self.locales_dir.glob(f"*{extension}")):
                if not path.is_file():
                    continue
                locale = path.stem
                if locale in sources:
                    logger.warning(
                        f"Ignoring {path.name}: locale '{locale}' already provided by "
                        f"{sources[locale].display_name}"
                    )
                    continue
                sources[locale] = LocaleSource(locale=locale, path=path, loader=loader)
                logger.debug(f"Discovered locale {locale}: {path.name}")

        self._sources = dict(sorted(sources.items()))
        return self._sources

    def get_source(self, locale: str) -> Optional[LocaleSource]:
        """Get the source for a locale id, if one was discovered"""
        return self.discover().get(locale)

    def display_name(self, locale: str) -> str:
        """File name shown in reports for a locale"""
        source = self.get_source(locale)
        if source is not None:
            return source.display_name
        return f"{locale}{next(iter(self.loaders), '')}"

    def available_locales(self) -> List[str]:
        """Candidate locale ids: everything except the baseline and excluded ids"""
        return [
            locale for locale in self.discover()
            if locale != self.baseline_locale and locale not in self.excluded_locales
        ]

    async def load(self, locale: str) -> TranslationSet:
        """
        Load translations for a locale

        Raises:
            LocaleLoadError: If the locale is unknown or its file cannot be parsed
        """
        source = self.get_source(locale)
        if source is None:
            raise LocaleLoadError(locale, f"no locale file for '{locale}' in {self.locales_dir}")

        try:
            data = await source.loader(source.path)
        except Exception as e:
            logger.debug(f"Loading {source.display_name} failed: {e!r}")
            raise LocaleLoadError(locale, str(e) or type(e).__name__) from e

        is_valid, error = LocaleValidator.validate_translation_set(data)
        if not is_valid:
            raise LocaleLoadError(locale, f"{source.display_name}: {error}")

        logger.info(f"Loaded {len(data)} keys for locale: {locale}")
        return dict(data)
