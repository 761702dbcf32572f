"""Translation key helpers.

Keys are dotted paths ("scoped.home"). A plain ``str`` key is looked up as
given; a ``TranslationKey`` marks a key as *symbolic*, which matters for
default values: a symbolic default is translated again, a plain string
default is returned literally.
"""

from dataclasses import dataclass
from typing import Any, List

SEPARATOR = "."


@dataclass(frozen=True)
class TranslationKey:
    """Symbolic reference to a translation.

    Frozen to stay hashable so it can be used in sets and as a dict key.

    Attributes:
        path: Dot-separated key path (e.g., "errors.not_found").
    """

    path: str

    def __str__(self) -> str:
        return self.path

    @property
    def segments(self) -> List[str]:
        """Key path split on the separator."""
        return split_key(self.path)

    @classmethod
    def from_segments(cls, *segments: str) -> "TranslationKey":
        """Build a key from individual path segments.

        Example:
            TranslationKey.from_segments("errors", "not_found").path
            # -> "errors.not_found"
        """
        return cls(path=join_key(segments))


def split_key(key: Any) -> List[str]:
    """Split a key, scope or list of either into path segments.

    Empty segments (leading, trailing or doubled separators) are dropped.

    Args:
        key: ``str``, ``TranslationKey``, list/tuple of those, or None.

    Returns:
        List of path segments.
    """
    if key is None:
        return []
    if isinstance(key, TranslationKey):
        key = key.path
    if isinstance(key, (list, tuple)):
        return [segment for part in key for segment in split_key(part)]
    return [segment for segment in str(key).split(SEPARATOR) if segment]


def key_segments(key: Any, scope: Any = None) -> List[str]:
    """Full lookup path for a key with an optional scope prefix."""
    return split_key(scope) + split_key(key)


def join_key(segments) -> str:
    """Join path segments into a dotted key."""
    return SEPARATOR.join(str(segment) for segment in segments)
