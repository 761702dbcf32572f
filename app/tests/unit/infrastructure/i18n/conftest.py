"""Shared fixtures for i18n tests."""

from typing import Any, Dict, List, Optional

import pytest
import yaml

from infrastructure.i18n.backends import TranslationBackend
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.repository import InMemoryTranslationRepository
from infrastructure.operations.result import OperationResult
from tests.factories.i18n import make_database_backend, make_memory_backend


class StubBackend(TranslationBackend):
    """Backend answering from a fixed key -> value mapping and recording calls."""

    name = "stub"

    def __init__(self, values: Optional[Dict[str, Any]] = None, accepts_writes=False):
        self.values = dict(values or {})
        self.accepts_writes = accepts_writes
        self.calls: List[tuple] = []
        self.stored: List[tuple] = []
        self.loaded = 0
        self.reloaded = 0

    def resolve(self, locale, key, options=None):
        options = dict(options or {})
        self.calls.append((locale, str(key), options))
        if str(key) in self.values:
            return OperationResult.success(self.values[str(key)])
        return OperationResult.not_found()

    def store_translation(self, locale, key, value, count=None):
        if self.accepts_writes:
            self.stored.append((locale, key, value, count))
        return self.accepts_writes

    def store_translations(self, locale, data):
        if self.accepts_writes:
            self.stored.append((locale, data))
        return self.accepts_writes

    def load_translations(self, *paths):
        self.loaded += 1

    def reload(self):
        self.reloaded += 1


@pytest.fixture
def stub_backend():
    """Factory for StubBackend instances."""

    def _make(values=None, accepts_writes=False):
        return StubBackend(values, accepts_writes=accepts_writes)

    return _make


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with test YAML files.

    Creates:
    - common.en.yml
    - errors.en.yml
    - common.fr.yml
    """
    en_common = {
        "common": {
            "welcome": "Welcome, {{name}}!",
            "inbox": {"one": "One message", "other": "{{count}} messages"},
        },
        "date": {
            "formats": {"default": "%Y-%m-%d", "long": "%A %d %B %Y"},
            "day_names": [
                "Sunday",
                "Monday",
                "Tuesday",
                "Wednesday",
                "Thursday",
                "Friday",
                "Saturday",
            ],
            "month_names": [
                None,
                "January",
                "February",
                "March",
                "April",
                "May",
                "June",
                "July",
                "August",
                "September",
                "October",
                "November",
                "December",
            ],
        },
        "time": {"formats": {"default": "%Y-%m-%d %H:%M", "short": "%H:%M"}},
    }
    with open(tmp_path / "common.en.yml", "w") as f:
        yaml.dump(en_common, f)

    en_errors = {"errors": {"not_found": "{{item}} not found"}}
    with open(tmp_path / "errors.en.yml", "w") as f:
        yaml.dump(en_errors, f)

    fr_common = {
        "common": {
            "welcome": "Bienvenue, {{name}} !",
            "inbox": {"one": "Un message", "other": "{{count}} messages"},
        },
        "date": {
            "formats": {"default": "%d/%m/%Y", "long": "%A %d %B %Y"},
            "day_names": [
                "dimanche",
                "lundi",
                "mardi",
                "mercredi",
                "jeudi",
                "vendredi",
                "samedi",
            ],
            "month_names": [
                None,
                "janvier",
                "février",
                "mars",
                "avril",
                "mai",
                "juin",
                "juillet",
                "août",
                "septembre",
                "octobre",
                "novembre",
                "décembre",
            ],
        },
    }
    with open(tmp_path / "common.fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_common, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def translation_repository():
    """Empty in-memory row repository."""
    return InMemoryTranslationRepository()


@pytest.fixture
def database_backend(translation_repository):
    """DatabaseBackend preloaded with the standard "en" and "cz" trees."""
    return make_database_backend(repository=translation_repository)


@pytest.fixture
def memory_backend():
    """InMemoryBackend with a small English tree."""
    return make_memory_backend(
        {
            "en": {
                "greeting": "Hello {{name}}",
                "plain": "Hello",
                "inbox": {"zero": "No messages", "one": "One message", "other": "{count} messages"},
                "cart": {"one": "One item", "other": "{{count}} items"},
                "scoped": {"home": "Home"},
            }
        }
    )
