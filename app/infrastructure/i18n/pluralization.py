"""Pluralization rules.

A plural rule maps a cardinal count to a plural-category tag ("one",
"few", "other", ...). Rules are held by an explicitly constructed
``PluralizerRegistry``; every registry is seeded with the English rule for
its default locale, which also serves as the fallback for locales without
a rule of their own.

Usage:
    registry = PluralizerRegistry()
    registry.register("cs", czech_rule)
    registry.plural_tag("cs", 3)  # -> "few"
"""

import threading
from typing import Any, Callable, Dict, List

import structlog
from infrastructure.i18n.models import normalize_locale

logger = structlog.get_logger().bind(component="i18n.pluralization")

PluralRule = Callable[[Any], str]

DEFAULT_LOCALE = "en"


def english_rule(count: Any) -> str:
    """English: 1 -> one, 0 -> zero, everything else -> other.

    "zero" is only used when the entry defines it; lookups fall back to
    "other" otherwise.
    """
    if count == 1:
        return "one"
    if count == 0:
        return "zero"
    return "other"


def french_rule(count: Any) -> str:
    """French: 0 and 1 -> one, everything else -> other."""
    return "one" if 0 <= count < 2 else "other"


def czech_rule(count: Any) -> str:
    """Czech/Slovak: 1 -> one, 2..4 -> few, everything else -> other."""
    if count == 1:
        return "one"
    if count in (2, 3, 4):
        return "few"
    return "other"


def russian_rule(count: Any) -> str:
    """Russian/Ukrainian: one (1, 21, ...), few (2-4, 22-24, ...), many."""
    if not isinstance(count, int):
        return "other"
    mod10, mod100 = count % 10, count % 100
    if mod10 == 1 and mod100 != 11:
        return "one"
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return "few"
    return "many"


def arabic_rule(count: Any) -> str:
    """Arabic: zero, one, two, few (3-10), many (11-99), other."""
    if count == 0:
        return "zero"
    if count == 1:
        return "one"
    if count == 2:
        return "two"
    if not isinstance(count, int):
        return "other"
    mod100 = count % 100
    if 3 <= mod100 <= 10:
        return "few"
    if 11 <= mod100 <= 99:
        return "many"
    return "other"


BUILTIN_RULES: Dict[str, PluralRule] = {
    "en": english_rule,
    "fr": french_rule,
    "cs": czech_rule,
    "sk": czech_rule,
    "ru": russian_rule,
    "uk": russian_rule,
    "ar": arabic_rule,
}


class PluralizerRegistry:
    """Per-locale plural rules with a default-locale fallback.

    Attributes:
        default_locale: Locale whose rule is used when none is registered.
    """

    def __init__(
        self,
        default_locale: str = DEFAULT_LOCALE,
        default_rule: PluralRule = english_rule,
    ):
        self.default_locale = normalize_locale(default_locale)
        self._rules: Dict[str, PluralRule] = {}
        self._lock = threading.Lock()
        self.register(self.default_locale, default_rule)

    @classmethod
    def with_builtin_rules(cls, default_locale: str = DEFAULT_LOCALE) -> "PluralizerRegistry":
        """Create a registry preloaded with the bundled rules."""
        registry = cls(default_locale=default_locale)
        for locale, rule in BUILTIN_RULES.items():
            if locale != registry.default_locale:
                registry.register(locale, rule)
        return registry

    def register(self, locale: Any, rule: PluralRule) -> None:
        """Register (or replace) the plural rule for a locale.

        Raises:
            TypeError: If rule is not callable.
        """
        if not callable(rule):
            raise TypeError(f"Plural rule for {locale!r} must be callable")
        locale = normalize_locale(locale)
        with self._lock:
            self._rules[locale] = rule
        logger.debug("plural_rule_registered", locale=locale)

    def rule_for(self, locale: Any) -> PluralRule:
        """Rule for a locale, or the default locale's rule."""
        locale = normalize_locale(locale)
        return self._rules.get(locale) or self._rules[self.default_locale]

    def has_rule(self, locale: Any) -> bool:
        return normalize_locale(locale) in self._rules

    def plural_tag(self, locale: Any, count: Any) -> str:
        """Plural-category tag for a count under a locale's rule."""
        return str(self.rule_for(locale)(count))

    @property
    def locales(self) -> List[str]:
        """Locales with an explicitly registered rule."""
        return sorted(self._rules)
