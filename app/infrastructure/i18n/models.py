"""Translation models for the i18n system.

Defines the shapes a translation entry can take, the pluralization tag
vocabulary, the flattened storage row, and locale normalization.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from infrastructure.i18n.errors import InvalidLocaleError

# Plural-category tags. A mapping whose keys all come from this set (and whose
# values are all leaves) is treated as pluralization data.
PLURALIZATION_TAGS = frozenset({"zero", "one", "two", "few", "many", "other"})

# Options consumed by resolution itself; everything else is an
# interpolation variable
RESERVED_OPTION_KEYS = frozenset({"scope", "default"})


class EntryKind(str, Enum):
    """Shape of a translation entry.

    LEAF: terminal value (usually a string)
    BRANCH: nested mapping used for namespace scoping
    PLURAL: mapping from plural-category tag to leaf
    """

    LEAF = "leaf"
    BRANCH = "branch"
    PLURAL = "plural"


def is_plural_map(value: Any) -> bool:
    """Check whether a value is a pluralization mapping.

    Note: a business namespace whose keys happen to be e.g. "one"/"other"
    is indistinguishable from plural data and is classified as PLURAL.
    """
    if not isinstance(value, dict) or not value:
        return False
    return all(
        str(tag) in PLURALIZATION_TAGS and not isinstance(item, dict)
        for tag, item in value.items()
    )


def entry_kind(value: Any) -> EntryKind:
    """Classify a translation entry."""
    if is_plural_map(value):
        return EntryKind.PLURAL
    if isinstance(value, dict):
        return EntryKind.BRANCH
    return EntryKind.LEAF


def normalize_locale(locale: Any) -> str:
    """Normalize a locale identifier to a plain string.

    Accepts strings and enum members with a string value.

    Raises:
        InvalidLocaleError: If locale is None or blank.
    """
    if isinstance(locale, Enum):
        locale = locale.value
    if locale is None or not str(locale).strip():
        raise InvalidLocaleError(locale)
    return str(locale).strip()


def interpolation_values(options: Dict[str, Any]) -> Dict[str, Any]:
    """Options that are interpolation variables (``count`` included)."""
    return {
        key: value
        for key, value in options.items()
        if key not in RESERVED_OPTION_KEYS
    }


@dataclass(frozen=True)
class TranslationRow:
    """One persisted translation row.

    Attributes:
        locale: Locale partition key.
        key: Dotted key path.
        pluralization_index: Plural-category tag, or None for plain rows.
        text: Stored translation text.
    """

    locale: str
    key: str
    pluralization_index: Optional[str]
    text: Any
