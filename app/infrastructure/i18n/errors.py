"""Translation error taxonomy.

- InvalidLocaleError: the locale argument is missing. Fatal to the call.
- MissingTranslationDataError: nothing in the backend chain (nor any default)
  produced a value. Carries locale, key and options for diagnostics.
- InvalidPluralizationDataError: a count was given but the stored entry has
  no matching plural form. Never absorbed by the chain.
- MissingInterpolationArgumentError: a placeholder has no value.
"""

from typing import Any, Dict, Optional

from infrastructure.i18n.keys import key_segments


class I18nError(Exception):
    """Base class for translation errors."""


class InvalidLocaleError(I18nError):
    """Raised when a translation call is made without a locale."""

    def __init__(self, locale: Any):
        self.locale = locale
        super().__init__(f"{locale!r} is not a valid locale")


class MissingTranslationDataError(I18nError):
    """Raised when no translation (and no default) exists for a key."""

    def __init__(self, locale: str, key: Any, options: Optional[Dict[str, Any]] = None):
        self.locale = locale
        self.key = key
        self.options = dict(options or {})
        self.keys = [locale] + key_segments(key, self.options.get("scope"))
        super().__init__(f"translation missing: {', '.join(str(k) for k in self.keys)}")


class InvalidPluralizationDataError(I18nError):
    """Raised when a count is given but the entry lacks the plural form."""

    def __init__(self, entry: Any, count: Any):
        self.entry = entry
        self.count = count
        super().__init__(
            f"translation data {entry!r} can not be used with count {count!r}"
        )


class MissingInterpolationArgumentError(I18nError, ValueError):
    """Raised when a placeholder in a translation has no value."""

    def __init__(self, name: str, values: Dict[str, Any], string: str):
        self.name = name
        self.values = values
        self.string = string
        super().__init__(
            f"missing interpolation argument {name!r} in {string!r} "
            f"(available: {sorted(values)})"
        )
