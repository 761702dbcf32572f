"""Translation backend contract.

Every store in a backend chain implements this interface. ``resolve`` is
the primitive: it answers a lookup with an ``OperationResult`` (SUCCESS with
the value, or NOT_FOUND), so a chain can fold over backends without using
exceptions for control flow. ``translate`` is the raising convenience built
on top of it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from infrastructure.i18n.errors import MissingTranslationDataError
from infrastructure.i18n.models import normalize_locale
from infrastructure.operations.result import OperationResult


class TranslationBackend(ABC):
    """Abstract translation store.

    Only ``resolve`` is required. The remaining operations default to "not
    supported": writes return False, loading does nothing, no locales are
    reported and localization yields None.
    """

    name = "backend"

    @abstractmethod
    def resolve(
        self, locale: Any, key: Any, options: Optional[Dict[str, Any]] = None
    ) -> OperationResult:
        """Look up a key.

        Args:
            locale: Locale identifier (required).
            key: Dotted key, TranslationKey, or list of keys.
            options: count, default, scope and interpolation variables.

        Returns:
            OperationResult: SUCCESS with the value, or NOT_FOUND.

        Raises:
            InvalidLocaleError: If locale is missing.
            InvalidPluralizationDataError: If count does not match the entry.
        """

    def translate(
        self, locale: Any, key: Any, options: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Look up a key, raising when nothing is found.

        A list of keys returns the list of their translations.

        Raises:
            InvalidLocaleError: If locale is missing.
            MissingTranslationDataError: If the key (or any key of a list)
                resolves to nothing.
        """
        locale = normalize_locale(locale)
        options = dict(options or {})
        if isinstance(key, (list, tuple)):
            return [self.translate(locale, item, dict(options)) for item in key]

        result = self.resolve(locale, key, options)
        if not result.is_success:
            raise MissingTranslationDataError(locale, key, options)
        return result.data

    def store_translation(
        self, locale: Any, key: Any, value: Any, count: Any = None
    ) -> bool:
        return False

    def store_translations(self, locale: Any, data: Dict[str, Any]) -> bool:
        return False

    def load_translations(self, *paths: Any) -> None:
        return None

    def available_locales(self) -> List[str]:
        return []

    def localize(self, locale: Any, obj: Any, format: str = "default") -> Optional[str]:
        return None

    def reload(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
