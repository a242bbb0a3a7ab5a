"""
Pytest configuration and fixtures
"""

import json
import sys
from pathlib import Path
from typing import Callable, Dict, List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from locale_coverage.config.settings import Settings, LocaleSettings, ReportSettings, LoggingSettings


BASELINE = {
    "greeting": "Hello",
    "farewell": "Goodbye",
    "long_text": "This sentence is deliberately written to be longer than sixty characters in total.",
}


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    """Write a locale file into the temporary locales directory."""
    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def locales_dir(tmp_path: Path, write_json) -> Path:
    """Locales directory with a baseline, one complete, one partial and one broken locale."""
    write_json("en.json", BASELINE)
    write_json("de.json", {"greeting": "Hallo", "farewell": "Tschüss", "long_text": "Lang"})
    write_json("ru.json", {"greeting": "Привет", "obsolete": "Старое"})
    (tmp_path / "fr.json").write_text("{not valid json", encoding="utf-8")
    (tmp_path / "index.json").write_text("{}", encoding="utf-8")
    return tmp_path


@pytest.fixture
def test_settings(locales_dir: Path) -> Settings:
    """Create test settings."""
    return Settings(
        locales=LocaleSettings(locales_dir=str(locales_dir), baseline_locale="en"),
        report=ReportSettings(),
        logging=LoggingSettings()
    )


@pytest.fixture
def output_lines() -> List[str]:
    """Collects everything written by the reporter."""
    return []


@pytest.fixture(autouse=True)
def reset_cached_settings(monkeypatch):
    """Each test starts without a cached settings instance."""
    from locale_coverage.config import load_config
    monkeypatch.setattr(load_config, "_settings", None)
