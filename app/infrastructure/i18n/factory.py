"""Factory functions for creating i18n components.

Builds the backend chain named by ``settings.i18n.I18N_BACKENDS`` and wraps
it in a Translator, with defaults suitable for the application.
"""

from pathlib import Path
from typing import Optional

import structlog
from infrastructure.configuration import Settings, settings as default_settings
from infrastructure.i18n.backends import (
    DatabaseBackend,
    InMemoryBackend,
    TranslationBackend,
    get_backend_class,
)
from infrastructure.i18n.chain import ChainBackend
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.pluralization import PluralizerRegistry
from infrastructure.i18n.repository import (
    DynamoDBTranslationRepository,
    TranslationRepository,
)
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def default_translations_dir() -> Path:
    """Locate the application's bundled locales directory."""
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_backend_chain(
    settings: Optional[Settings] = None,
    translations_dir: Optional[Path] = None,
    repository: Optional[TranslationRepository] = None,
    pluralizers: Optional[PluralizerRegistry] = None,
    use_cache: bool = True,
) -> ChainBackend:
    """Create the backend chain described by the settings.

    Args:
        settings: Settings to read I18N_* values from (default: global settings).
        translations_dir: YAML directory for the memory backend (default:
            I18N_TRANSLATIONS_DIR, else auto-discover app/locales).
        repository: Row store for the database backend (default: DynamoDB
            table I18N_DYNAMODB_TABLE).
        pluralizers: Plural rules shared by every backend (default: builtin rules).
        use_cache: Whether the YAML loader caches parsed files.

    Returns:
        ChainBackend: Chain with one backend per configured name, in order.

    Raises:
        ValueError: If a backend name is unknown.
    """
    settings = settings or default_settings
    i18n_settings = settings.i18n
    pluralizers = pluralizers or PluralizerRegistry.with_builtin_rules(
        i18n_settings.I18N_DEFAULT_LOCALE
    )

    if translations_dir is None:
        if i18n_settings.I18N_TRANSLATIONS_DIR:
            translations_dir = Path(i18n_settings.I18N_TRANSLATIONS_DIR)
        else:
            translations_dir = default_translations_dir()

    loader = None
    if Path(translations_dir).is_dir():
        loader = YAMLTranslationLoader(
            translations_dir=Path(translations_dir), use_cache=use_cache
        )
    else:
        logger.warning(
            "translations_dir_missing", translations_dir=str(translations_dir)
        )

    backends = []
    for name in i18n_settings.I18N_BACKENDS:
        backend_class = get_backend_class(name)
        backend: TranslationBackend
        if issubclass(backend_class, DatabaseBackend):
            backend = backend_class(
                repository=repository
                or DynamoDBTranslationRepository(i18n_settings.I18N_DYNAMODB_TABLE),
                pluralizers=pluralizers,
            )
        elif issubclass(backend_class, InMemoryBackend):
            backend = backend_class(loader=loader, pluralizers=pluralizers)
        else:
            backend = backend_class()
        backends.append(backend)

    chain = ChainBackend(*backends)
    logger.info(
        "backend_chain_created",
        backends=[backend.name for backend in chain.backends],
        translations_dir=str(translations_dir),
    )
    return chain


def create_translator(
    settings: Optional[Settings] = None,
    translations_dir: Optional[Path] = None,
    repository: Optional[TranslationRepository] = None,
    pluralizers: Optional[PluralizerRegistry] = None,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator over the backend chain.

    Args:
        settings: Settings to read I18N_* values from (default: global settings).
        translations_dir: YAML directory (default: auto-discover app/locales).
        repository: Row store for the database backend.
        pluralizers: Plural rules shared by every backend.
        use_cache: Whether the YAML loader caches parsed files.
        preload: Whether to load all translations immediately (default: True).

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use defaults (settings-driven chain, preload all)
        translator = create_translator()

        # Memory-only chain over a custom directory
        translator = create_translator(
            settings=Settings(i18n=I18nSettings(I18N_BACKENDS=["memory"])),
            translations_dir=Path("/custom/locales"),
        )
    """
    settings = settings or default_settings
    chain = create_backend_chain(
        settings=settings,
        translations_dir=translations_dir,
        repository=repository,
        pluralizers=pluralizers,
        use_cache=use_cache,
    )
    translator = Translator(
        backend=chain,
        default_locale=settings.i18n.I18N_DEFAULT_LOCALE,
        raise_on_missing=settings.i18n.I18N_RAISE_ON_MISSING,
    )

    if preload:
        translator.load_translations()
        logger.info(
            "translator_created_with_preload",
            locale_count=len(translator.available_locales()),
        )
    else:
        logger.info("translator_created_lazy")

    return translator
