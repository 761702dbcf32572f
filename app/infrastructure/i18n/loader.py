"""Translation loading interface and YAML implementation.

Loaders read translation trees from files and hand them to an in-memory
backend. Two file layouts are supported:

- Directory layout (``YAMLTranslationLoader``): files named ``<locale>.yml``
  or ``<domain>.<locale>.yml``; each file holds the tree for that locale.
- Locale-rooted files (``load_locale_file``): top-level keys are locales.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import yaml

import structlog
from infrastructure.i18n.flattening import deep_merge

logger = structlog.get_logger()

YAML_SUFFIXES = (".yml", ".yaml")


def _stringify_keys(data: Any) -> Any:
    """YAML parses keys like ``yes`` or ``1`` into non-strings; keys are paths."""
    if isinstance(data, dict):
        return {str(key): _stringify_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_stringify_keys(item) for item in data]
    return data


def _read_yaml(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return _stringify_keys(yaml.safe_load(f))
    except yaml.YAMLError as e:
        logger.error("yaml_parse_error", file=str(path), error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e


def load_locale_file(path: Path) -> Dict[str, Dict[str, Any]]:
    """Load a YAML file whose top-level keys are locales.

    Example file:
        en:
          foo: Foo
        cs:
          foo: Fú

    Returns:
        Dict of locale -> translation tree.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If parsing fails or the root is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Translation file not found: {path}")

    data = _read_yaml(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Translation file {path} must contain a mapping of locales")

    result: Dict[str, Dict[str, Any]] = {}
    for locale, tree in data.items():
        if not isinstance(tree, dict):
            logger.warning("invalid_locale_tree", file=str(path), locale=locale)
            continue
        result[locale] = tree

    logger.info("loaded_locale_file", file=str(path), locale_count=len(result))
    return result


class TranslationLoader(ABC):
    """Abstract base for translation loaders."""

    @abstractmethod
    def load(self, locale: str) -> Dict[str, Any]:
        """Load the translation tree for one locale.

        Raises:
            FileNotFoundError: If no translation files exist for the locale.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load translation trees for every locale the loader knows."""

    @abstractmethod
    def available_locales(self) -> List[str]:
        """Locales the loader has files for."""

    def clear_cache(self) -> None:
        """Drop any cached trees. Loaders without a cache do nothing."""


class YAMLTranslationLoader(TranslationLoader):
    """Loader for a directory of per-locale YAML files.

    Files are matched by their last dotted name part, so ``en.yml``,
    ``errors.en.yml`` and ``errors.en.yaml`` all belong to locale ``en``.
    Files for the same locale are deep-merged in sorted filename order.

    Attributes:
        translations_dir: Directory containing YAML files.
        use_cache: Whether parsed trees are kept in memory.
        cache: Locale -> parsed tree.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        """Initialize YAML translation loader.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, Any]] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files(self) -> List[Path]:
        return sorted(
            path
            for path in self.translations_dir.iterdir()
            if path.is_file() and path.suffix in YAML_SUFFIXES
        )

    @staticmethod
    def _locale_of(path: Path) -> str:
        # "errors.en.yml" -> "en", "en.yml" -> "en"
        return path.stem.split(".")[-1]

    def available_locales(self) -> List[str]:
        return sorted({self._locale_of(path) for path in self._files()})

    def load(self, locale: str) -> Dict[str, Any]:
        """Load and merge every file for a locale."""
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        files = [path for path in self._files() if self._locale_of(path) == locale]
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        tree: Dict[str, Any] = {}
        for path in files:
            data = _read_yaml(path)
            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning("invalid_yaml_format", file=str(path), expected="dict")
                continue
            tree = deep_merge(tree, data)

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(files),
            namespace_count=len(tree),
        )

        if self.use_cache:
            self.cache[locale] = tree

        return tree

    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load every locale found in the directory.

        Returns an empty mapping when the directory has no YAML files.
        """
        result = {}
        for locale in self.available_locales():
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale)
        return result

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
