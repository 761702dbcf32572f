"""Translation lookup layer.

Wraps a backend (normally a ChainBackend) with a default locale and the
missing-translation policy: by default a missing key renders the
"translation missing: <locale>, <key segments>" placeholder instead of raising.
"""

from typing import Any, Dict, List, Optional

from core.logging import get_module_logger
from infrastructure.i18n.backends import TranslationBackend
from infrastructure.i18n.errors import MissingTranslationDataError
from infrastructure.i18n.models import normalize_locale

logger = get_module_logger()


class Translator:
    """Translate keys through a backend with variable interpolation.

    Attributes:
        backend: Backend answering lookups.
        default_locale: Locale used when a call does not pass one.
        raise_on_missing: Raise MissingTranslationDataError instead of
            returning the placeholder.
    """

    def __init__(
        self,
        backend: TranslationBackend,
        default_locale: str = "en",
        raise_on_missing: bool = False,
    ):
        """Initialize Translator.

        Args:
            backend: Backend (or chain) answering lookups.
            default_locale: Locale used when none is given (default: en).
            raise_on_missing: Strict mode (default: False).
        """
        self.backend = backend
        self.default_locale = normalize_locale(default_locale)
        self.raise_on_missing = raise_on_missing
        logger.info(
            "initialized_translator",
            backend=backend.name,
            default_locale=self.default_locale,
            raise_on_missing=raise_on_missing,
        )

    def translate(
        self,
        key: Any,
        locale: Any = None,
        raise_missing: Optional[bool] = None,
        **options: Any,
    ) -> Any:
        """Retrieve and interpolate a translation.

        Args:
            key: Dotted key, TranslationKey, or list of keys.
            locale: Locale to translate to (default: default_locale).
            raise_missing: Override strict mode for this call.
            **options: count, default, scope and interpolation variables.

        Returns:
            The translation (a string, a namespace dict, or a list for a list
            of keys), or the missing-translation placeholder.

        Raises:
            MissingTranslationDataError: In strict mode, if nothing resolves.
            InvalidPluralizationDataError: If count does not fit the entry.
            MissingInterpolationArgumentError: If a placeholder has no value.
        """
        locale = normalize_locale(locale or self.default_locale)
        strict = self.raise_on_missing if raise_missing is None else raise_missing

        try:
            return self.backend.translate(locale, key, options)
        except MissingTranslationDataError as e:
            logger.warning(
                "translation_not_found",
                key=str(key),
                locale=locale,
                options=options,
            )
            if strict:
                raise
            return str(e)

    def has_translation(self, key: Any, locale: Any = None, **options: Any) -> bool:
        """Check whether a key resolves (defaults are ignored).

        Args:
            key: Key to check.
            locale: Locale to check (default: default_locale).

        Returns:
            True if the backend has a value for the key.
        """
        locale = normalize_locale(locale or self.default_locale)
        options.pop("default", None)
        return self.backend.resolve(locale, key, options).is_success

    def localize(
        self, obj: Any, locale: Any = None, format: str = "default"
    ) -> Optional[str]:
        """Format a date, datetime or time for a locale.

        Returns:
            The formatted value, or None if no backend can format it.
        """
        locale = normalize_locale(locale or self.default_locale)
        return self.backend.localize(locale, obj, format)

    def available_locales(self) -> List[str]:
        return self.backend.available_locales()

    def store_translation(
        self, key: Any, value: Any, locale: Any = None, count: Any = None
    ) -> bool:
        locale = normalize_locale(locale or self.default_locale)
        return self.backend.store_translation(locale, key, value, count)

    def store_translations(self, data: Dict[str, Any], locale: Any = None) -> bool:
        locale = normalize_locale(locale or self.default_locale)
        return self.backend.store_translations(locale, data)

    def load_translations(self, *paths: Any) -> None:
        """Load translations into every backend."""
        self.backend.load_translations(*paths)
        logger.info("loaded_all_translations", file_count=len(paths))

    def reload(self) -> None:
        """Drop loaded translations; they are read again on next use."""
        self.backend.reload()
        logger.info("reloaded_all_translations")
