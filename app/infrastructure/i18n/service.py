"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, Dict, List, Optional

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    This is a thin facade - all actual work is delegated to the underlying
    Translator instance created by the factory.

    Usage:
        service = TranslationService()
        service.translate("inbox.messages", locale="en", count=3)
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(self, key: Any, locale: Any = None, **options: Any) -> Any:
        """Retrieve and interpolate a translated message.

        Args:
            key: Dotted key, TranslationKey, or list of keys
            locale: Locale to translate to (default: configured default locale)
            **options: count, default, scope and interpolation variables

        Returns:
            The translation, or the missing-translation placeholder
        """
        return self._translator.translate(key, locale=locale, **options)

    def has_translation(self, key: Any, locale: Any = None) -> bool:
        return self._translator.has_translation(key, locale=locale)

    def localize(
        self, obj: Any, locale: Any = None, format: str = "default"
    ) -> Optional[str]:
        return self._translator.localize(obj, locale=locale, format=format)

    def get_available_locales(self) -> List[str]:
        return self._translator.available_locales()

    def store_translations(self, data: Dict[str, Any], locale: Any = None) -> bool:
        return self._translator.store_translations(data, locale=locale)

    def reload(self) -> None:
        self._translator.reload()

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Returns:
            The underlying Translator instance
        """
        return self._translator
