"""In-memory translation backend.

Keeps one nested translation tree per locale. Trees are filled from an
optional ``TranslationLoader`` and from locale-rooted YAML files the first
time they are read, and whenever ``load_translations`` is called. Writes
merge into the tree under a per-instance lock.
"""

import copy
import re
import threading
from datetime import datetime, time
from typing import Any, Dict, List, Optional

import structlog
from infrastructure.i18n.backends.base import TranslationBackend
from infrastructure.i18n.defaults import resolve_default
from infrastructure.i18n.errors import (
    InvalidPluralizationDataError,
    MissingInterpolationArgumentError,
    MissingTranslationDataError,
)
from infrastructure.i18n.flattening import deep_merge, expand_dotted_key, nest_dotted_keys
from infrastructure.i18n.keys import join_key, key_segments, split_key
from infrastructure.i18n.loader import TranslationLoader, load_locale_file
from infrastructure.i18n.models import (
    interpolation_values,
    is_plural_map,
    normalize_locale,
)
from infrastructure.i18n.pluralization import PluralizerRegistry
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger().bind(component="i18n.memory_backend")

DOUBLE_BRACE_PATTERN = re.compile(r"\{\{(\w+)\}\}")
SINGLE_BRACE_PATTERN = re.compile(r"\{(\w+)\}")

# strftime directives replaced by translated names: directive -> (key, index source)
LOCALIZED_DIRECTIVES = {
    "%a": ("date.abbr_day_names", "weekday"),
    "%A": ("date.day_names", "weekday"),
    "%b": ("date.abbr_month_names", "month"),
    "%B": ("date.month_names", "month"),
}


class InMemoryBackend(TranslationBackend):
    """Translation backend holding nested trees in memory.

    Attributes:
        loader: Optional loader consulted by load_translations().
        pluralizers: Plural rules used for count lookups.
    """

    name = "memory"

    def __init__(
        self,
        loader: Optional[TranslationLoader] = None,
        pluralizers: Optional[PluralizerRegistry] = None,
    ):
        self.loader = loader
        self.pluralizers = pluralizers or PluralizerRegistry()
        self._translations: Dict[str, Dict[str, Any]] = {}
        self._initialized = False
        self._lock = threading.RLock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def translations(self) -> Dict[str, Dict[str, Any]]:
        """Copy of the locale -> tree mapping (loads on first access)."""
        self._ensure_initialized()
        with self._lock:
            return copy.deepcopy(self._translations)

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.load_translations()

    def load_translations(self, *paths: Any) -> None:
        """Merge translations from the loader and from locale-rooted files.

        Args:
            *paths: YAML files whose top-level keys are locales.
        """
        with self._lock:
            if self.loader is not None:
                for locale, tree in self.loader.load_all().items():
                    self.merge_translations(locale, tree)
            for path in paths:
                for locale, tree in load_locale_file(path).items():
                    self.merge_translations(locale, tree)
            self._initialized = True
        logger.info(
            "translations_loaded",
            backend=self.name,
            file_count=len(paths),
            locale_count=len(self._translations),
        )

    def merge_translations(self, locale: Any, data: Dict[str, Any]) -> None:
        """Deep-merge a tree into a locale; top-level dotted keys are expanded."""
        locale = normalize_locale(locale)
        with self._lock:
            current = self._translations.get(locale, {})
            self._translations[locale] = deep_merge(current, nest_dotted_keys(data))

    def reload(self) -> None:
        """Forget every translation; the next read loads them again."""
        with self._lock:
            self._translations = {}
            self._initialized = False
            if self.loader is not None:
                self.loader.clear_cache()
        logger.info("translations_reset", backend=self.name)

    def available_locales(self) -> List[str]:
        self._ensure_initialized()
        with self._lock:
            return list(self._translations)

    def store_translations(self, locale: Any, data: Dict[str, Any]) -> bool:
        self._ensure_initialized()
        self.merge_translations(locale, data)
        logger.debug("translations_stored", backend=self.name, locale=locale)
        return True

    def store_translation(
        self, locale: Any, key: Any, value: Any, count: Any = None
    ) -> bool:
        """Store one translation; with a count, store the matching plural form.

        Plural forms stored one by one accumulate into the same tag mapping.
        """
        locale = normalize_locale(locale)
        path = join_key(split_key(key))
        with self._lock:
            self._ensure_initialized()
            if count is None:
                data = value
            else:
                tag = self.pluralizers.plural_tag(locale, count)
                existing = self._lookup_entry(locale, path)
                data = dict(existing) if is_plural_map(existing) else {}
                data[tag] = value
            self.merge_translations(locale, expand_dotted_key(path, data))
        logger.debug("translation_stored", backend=self.name, locale=locale, key=path)
        return True

    def resolve(
        self, locale: Any, key: Any, options: Optional[Dict[str, Any]] = None
    ) -> OperationResult:
        locale = normalize_locale(locale)
        options = dict(options or {})

        if isinstance(key, (list, tuple)):
            values = []
            for item in key:
                result = self.resolve(locale, item, dict(options))
                if not result.is_success:
                    return result
                values.append(result.data)
            return OperationResult.success(values)

        default = options.pop("default", None)
        count = options.get("count")

        entry = self._lookup_entry(locale, key, options.get("scope"))
        if entry is None:
            fallback = resolve_default(self.resolve, locale, default, options)
            if not fallback.is_success:
                path = [locale] + key_segments(key, options.get("scope"))
                return OperationResult.not_found(
                    f"translation missing: {', '.join(path)}", data=path
                )
            entry = fallback.data

        entry = self.pluralize(locale, entry, count)
        entry = self.interpolate(entry, interpolation_values(options))
        return OperationResult.success(entry)

    def _lookup_entry(self, locale: str, key: Any, scope: Any = None) -> Any:
        segments = key_segments(key, scope)
        if not segments:
            return None
        self._ensure_initialized()
        with self._lock:
            node: Any = self._translations.get(locale)
            for segment in segments:
                if not isinstance(node, dict) or segment not in node:
                    return None
                node = node[segment]
            return copy.deepcopy(node)

    def pluralize(self, locale: str, entry: Any, count: Any) -> Any:
        """Select the plural form for a count.

        Without a count the entry is returned unchanged.

        Raises:
            InvalidPluralizationDataError: If the entry lacks the form.
        """
        if not isinstance(entry, dict) or count is None:
            return entry
        tag = self.pluralizers.plural_tag(locale, count)
        if tag == "zero" and "zero" not in entry:
            tag = "other"
        if tag not in entry:
            raise InvalidPluralizationDataError(entry, count)
        return entry[tag]

    def interpolate(self, entry: Any, values: Dict[str, Any]) -> Any:
        """Replace {{name}} and {name} placeholders in a string entry.

        Raises:
            MissingInterpolationArgumentError: If a placeholder has no value.
        """
        if not isinstance(entry, str) or not values:
            return entry

        double_matches = DOUBLE_BRACE_PATTERN.findall(entry)
        single_matches = SINGLE_BRACE_PATTERN.findall(entry)

        for name in dict.fromkeys(double_matches + single_matches):
            if name not in values:
                raise MissingInterpolationArgumentError(name, values, entry)

        # Double braces first so "{{name}}" is not left as "{value}"
        for name in double_matches:
            entry = entry.replace(f"{{{{{name}}}}}", str(values[name]))
        for name in single_matches:
            entry = entry.replace(f"{{{name}}}", str(values[name]))
        return entry

    def localize(self, locale: Any, obj: Any, format: str = "default") -> str:
        """Format a date, datetime or time.

        ``format`` names an entry under ``date.formats`` (dates) or
        ``time.formats`` (datetimes and times); a value containing "%" is used
        as a strftime pattern directly.

        Raises:
            TypeError: If obj cannot be formatted.
            MissingTranslationDataError: If the named format does not exist.
        """
        locale = normalize_locale(locale)
        if not hasattr(obj, "strftime"):
            raise TypeError(f"Object must be a date, datetime or time: {obj!r}")

        kind = "time" if isinstance(obj, (datetime, time)) else "date"
        pattern = format
        if "%" not in str(format):
            format_key = f"{kind}.formats.{format}"
            pattern = self._lookup_entry(locale, format_key)
            if not isinstance(pattern, str):
                raise MissingTranslationDataError(locale, format_key)

        return obj.strftime(self._localize_names(locale, obj, pattern))

    def _localize_names(self, locale: str, obj: Any, pattern: str) -> str:
        for directive, (names_key, source) in LOCALIZED_DIRECTIVES.items():
            if directive not in pattern or not hasattr(obj, source):
                continue
            names = self._lookup_entry(locale, names_key)
            if not isinstance(names, list):
                continue
            if source == "weekday":
                # Name lists start on Sunday; weekday() starts on Monday
                index = (obj.weekday() + 1) % 7
            else:
                index = obj.month
            if index < len(names) and names[index] is not None:
                name = str(names[index]).replace("%", "%%")
                pattern = re.sub(
                    f"(?<!%){re.escape(directive)}", lambda _match: name, pattern
                )
        return pattern
