"""i18n system - chained translation backends.

Resolves translation keys through an ordered chain of backends with scoped
namespace lookup, count-driven pluralization, bulk lookup and default
fallbacks.

Main components:
- keys: TranslationKey and key path helpers
- models: entry kinds, plural tags, TranslationRow
- pluralization: PluralizerRegistry and builtin plural rules
- flattening: deep_merge, flatten and unflatten of translation trees
- backends: TranslationBackend, InMemoryBackend, DatabaseBackend
- repository: row stores backing DatabaseBackend (DynamoDB, in-memory)
- chain: ChainBackend resolving through several backends
- translator: Translator with the missing-translation placeholder
"""

from infrastructure.i18n.backends import (
    DatabaseBackend,
    InMemoryBackend,
    TranslationBackend,
)
from infrastructure.i18n.chain import ChainBackend
from infrastructure.i18n.errors import (
    I18nError,
    InvalidLocaleError,
    InvalidPluralizationDataError,
    MissingInterpolationArgumentError,
    MissingTranslationDataError,
)
from infrastructure.i18n.flattening import deep_merge, flatten, unflatten
from infrastructure.i18n.keys import TranslationKey
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import EntryKind, TranslationRow, entry_kind
from infrastructure.i18n.pluralization import PluralizerRegistry
from infrastructure.i18n.repository import (
    DynamoDBTranslationRepository,
    InMemoryTranslationRepository,
    TranslationRepository,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "TranslationKey",
    "EntryKind",
    "TranslationRow",
    "entry_kind",
    "PluralizerRegistry",
    "deep_merge",
    "flatten",
    "unflatten",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "TranslationBackend",
    "InMemoryBackend",
    "DatabaseBackend",
    "TranslationRepository",
    "InMemoryTranslationRepository",
    "DynamoDBTranslationRepository",
    "ChainBackend",
    "Translator",
    "I18nError",
    "InvalidLocaleError",
    "MissingTranslationDataError",
    "InvalidPluralizationDataError",
    "MissingInterpolationArgumentError",
]
