"""Persistent translation backend.

Translations are stored as flattened rows in a ``TranslationRepository``
and mirrored in memory for lookups. Every write re-reads the stored row
group and merges it into the mirror before returning, so reads see the
write immediately.
"""

from typing import Any, Dict, List, Optional

import structlog
from infrastructure.configuration import settings
from infrastructure.i18n.backends.memory import InMemoryBackend
from infrastructure.i18n.errors import InvalidPluralizationDataError
from infrastructure.i18n.flattening import flatten, unflatten
from infrastructure.i18n.keys import join_key, split_key
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import is_plural_map, normalize_locale
from infrastructure.i18n.pluralization import PluralizerRegistry
from infrastructure.i18n.repository import (
    DynamoDBTranslationRepository,
    TranslationRepository,
)

logger = structlog.get_logger().bind(component="i18n.database_backend")


class DatabaseBackend(InMemoryBackend):
    """Translation backend persisted through a row repository.

    Attributes:
        repository: Row store (defaults to the configured DynamoDB table).
    """

    name = "database"

    def __init__(
        self,
        repository: Optional[TranslationRepository] = None,
        loader: Optional[TranslationLoader] = None,
        pluralizers: Optional[PluralizerRegistry] = None,
    ):
        super().__init__(loader=loader, pluralizers=pluralizers)
        if repository is None:
            repository = DynamoDBTranslationRepository(settings.i18n.I18N_DYNAMODB_TABLE)
        self.repository = repository

    def load_translations(self, *paths: Any) -> None:
        """Read every stored row and merge the rebuilt trees into the mirror."""
        with self._lock:
            super().load_translations(*paths)
            rows = self.repository.load_all_rows()
            for locale, tree in unflatten(rows).items():
                self.merge_translations(locale, tree)
        logger.info("database_translations_loaded", row_count=len(rows))

    def store_translations(self, locale: Any, data: Dict[str, Any]) -> bool:
        """Flatten a nested tree and store each row group.

        Returns:
            True only if every row group was written.
        """
        locale = normalize_locale(locale)
        stored = True
        for key, value in flatten(data).items():
            stored = self.store_translation(locale, key, value) and stored
        return stored

    def store_translation(
        self, locale: Any, key: Any, value: Any, count: Any = None
    ) -> bool:
        """Store one translation row group.

        Without a count the value is stored as given (a plural mapping is
        stored form by form). With a count only the matching plural form is
        written; forms already stored for the key are kept.

        Returns:
            True if the rows were written.
        """
        locale = normalize_locale(locale)
        path = join_key(split_key(key))
        if not path:
            raise ValueError("Translation key must not be empty")

        if count is None and isinstance(value, dict) and not is_plural_map(value):
            return self.store_translations(locale, {path: value})

        if count is None:
            data = value
        else:
            data = {self.pluralizers.plural_tag(locale, count): value}

        with self._lock:
            self._ensure_initialized()
            if not self.repository.upsert(locale, path, data):
                logger.error("translation_store_failed", locale=locale, key=path)
                return False
            entry = self.repository.load_entry(locale, path)
            if entry is not None:
                self.merge_translations(locale, {path: entry})

        logger.debug("translation_stored", backend=self.name, locale=locale, key=path)
        return True

    def available_locales(self) -> List[str]:
        """Stored locales followed by locales only present in the mirror."""
        locales = self.repository.distinct_locales()
        for locale in super().available_locales():
            if locale not in locales:
                locales.append(locale)
        return locales

    def flat_translations(self) -> Dict[str, Dict[str, Any]]:
        """Mirror contents as ``{locale: {dotted_key: value}}``."""
        return {
            locale: flatten(tree) for locale, tree in self.translations.items()
        }

    def pluralize(self, locale: str, entry: Any, count: Any) -> Any:
        """Select a plural form, defaulting to the form for one.

        Without a count a plural mapping resolves to its form for 1 when
        present and is otherwise returned whole; namespace branches are
        returned unchanged.

        Raises:
            InvalidPluralizationDataError: If a count was given and the entry
                lacks the form.
        """
        if not isinstance(entry, dict):
            return entry
        if count is None and not is_plural_map(entry):
            return entry

        tag = self.pluralizers.plural_tag(locale, 1 if count is None else count)
        if tag == "zero" and "zero" not in entry:
            tag = "other"

        if tag in entry:
            return entry[tag]
        if count is not None:
            raise InvalidPluralizationDataError(entry, count)
        return entry
