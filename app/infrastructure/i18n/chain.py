"""Chained translation backends.

A ``ChainBackend`` answers one lookup from an ordered list of independent
backends:

- Defaults are never passed to the backends. The chain resolves them itself
  and translates a symbolic default through the whole chain.
- Namespace lookup: when ``count`` is absent, mapping results from every
  backend are deep-merged (later backends win where leaves collide). When
  ``count`` is present a mapping is a pluralization answer and is returned
  like any other value.
- The first non-mapping value (anything except None and False) is returned
  immediately; later backends are not consulted.
- A backend that has nothing is skipped. Only when the whole chain and the
  default come up empty does ``translate`` raise MissingTranslationDataError.
- A list of keys is translated key by key.

Usage:
    chain = ChainBackend(DatabaseBackend(repository), InMemoryBackend(loader))
    chain.translate("en", "scoped.home", {"default": TranslationKey("home")})
"""

from typing import Any, Dict, List, Optional, Tuple

from core.logging import get_module_logger
from infrastructure.i18n.backends import TranslationBackend, get_backend_class
from infrastructure.i18n.defaults import resolve_default
from infrastructure.i18n.errors import I18nError
from infrastructure.i18n.flattening import deep_merge
from infrastructure.i18n.keys import key_segments
from infrastructure.i18n.models import normalize_locale
from infrastructure.operations.result import OperationResult

logger = get_module_logger()


class ChainBackend(TranslationBackend):
    """Ordered, append-only chain of translation backends.

    A chain is itself a TranslationBackend, so chains can be nested.
    """

    name = "chain"

    def __init__(self, *backends: Any):
        self._backends: List[TranslationBackend] = []
        if backends:
            self.add(*backends)

    @property
    def backends(self) -> Tuple[TranslationBackend, ...]:
        """Backends in lookup order."""
        return tuple(self._backends)

    def add(self, *backends: Any) -> List[TranslationBackend]:
        """Append backends to the end of the chain.

        Each argument may be a backend instance, a backend class (instantiated
        without arguments) or a registered backend name such as "memory".

        Returns:
            The backend instances that were added.

        Raises:
            ValueError: If a name is not registered.
            TypeError: If an argument is not a backend.
        """
        added = []
        for backend in backends:
            if isinstance(backend, str):
                backend = get_backend_class(backend)
            if isinstance(backend, type):
                backend = backend()
            if not isinstance(backend, TranslationBackend):
                raise TypeError(f"Not a translation backend: {backend!r}")
            self._backends.append(backend)
            added.append(backend)
            logger.info(
                "backend_added",
                backend=backend.name,
                position=len(self._backends) - 1,
            )
        return added

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
        namespace: Optional[Dict[str, Any]] = None

        for backend in self._backends:
            result = backend.resolve(locale, key, options)
            if not result.is_success:
                continue

            translation = result.data
            if self._is_namespace_lookup(translation, options):
                namespace = deep_merge(namespace, translation)
            elif translation is not None and translation is not False:
                logger.debug(
                    "translation_resolved",
                    backend=backend.name,
                    locale=locale,
                    key=str(key),
                )
                return OperationResult.success(translation)

        if namespace:
            return OperationResult.success(namespace)

        fallback = resolve_default(self.resolve, locale, default, options)
        if fallback.is_success and fallback.data is not None:
            return fallback

        path = [locale] + key_segments(key, options.get("scope"))
        logger.debug("translation_not_in_chain", locale=locale, key=str(key))
        return OperationResult.not_found(
            f"translation missing: {', '.join(path)}", data=path
        )

    @staticmethod
    def _is_namespace_lookup(translation: Any, options: Dict[str, Any]) -> bool:
        return isinstance(translation, dict) and "count" not in options

    def localize(self, locale: Any, obj: Any, format: str = "default") -> Optional[str]:
        """Result of the first backend that can localize the object.

        Returns:
            The formatted value, or None when no backend succeeds.
        """
        locale = normalize_locale(locale)
        for backend in self._backends:
            try:
                result = backend.localize(locale, obj, format)
            except (I18nError, TypeError, ValueError) as e:
                logger.debug(
                    "backend_localize_failed",
                    backend=backend.name,
                    locale=locale,
                    error=str(e),
                )
                continue
            if result is not None:
                return result
        return None

    def store_translations(self, locale: Any, data: Dict[str, Any]) -> bool:
        """Store a tree in the first backend that accepts it."""
        locale = normalize_locale(locale)
        for backend in self._backends:
            if backend.store_translations(locale, data):
                logger.info("translations_stored", backend=backend.name, locale=locale)
                return True
        logger.warning("no_backend_accepted_translations", locale=locale)
        return False

    def store_translation(
        self, locale: Any, key: Any, value: Any, count: Any = None
    ) -> bool:
        """Store one translation in the first backend that accepts it."""
        locale = normalize_locale(locale)
        for backend in self._backends:
            if backend.store_translation(locale, key, value, count):
                logger.info(
                    "translation_stored",
                    backend=backend.name,
                    locale=locale,
                    key=str(key),
                )
                return True
        logger.warning("no_backend_accepted_translation", locale=locale, key=str(key))
        return False

    def load_translations(self, *paths: Any) -> None:
        for backend in self._backends:
            backend.load_translations(*paths)

    def reload(self) -> None:
        for backend in self._backends:
            backend.reload()

    def available_locales(self) -> List[str]:
        """Locales of every backend, in chain order, without duplicates."""
        locales: List[str] = []
        for backend in self._backends:
            for locale in backend.available_locales():
                if locale not in locales:
                    locales.append(locale)
        return locales
