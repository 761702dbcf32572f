"""Key flattening, unflattening and deep merge for translation trees.

Persistent storage keeps one row per dotted key. Flattening walks a nested
tree and emits ``{dotted_key: value}``; pluralization mappings are atomic
and stay whole under their parent's key:

    flatten({
        "scope": {
            "foo": {"one": "one foo", "other": "other foo"},
            "bar": "a bar",
        },
        "global": "not scoped",
    })
    # -> {
    #     "scope.foo": {"one": "one foo", "other": "other foo"},
    #     "scope.bar": "a bar",
    #     "global": "not scoped",
    # }

Unflattening rebuilds the per-locale trees from storage rows.

Known ambiguity: any mapping whose keys are all plural-category tags is
treated as pluralization data, even a namespace that uses e.g. "one" and
"other" as ordinary keys. Such a namespace round-trips as plural data.
"""

import copy
from typing import Any, Dict, Iterable, Optional

import structlog
from infrastructure.i18n.keys import join_key, split_key
from infrastructure.i18n.models import (
    EntryKind,
    TranslationRow,
    entry_kind,
    is_plural_map,
)

logger = structlog.get_logger().bind(component="i18n.flattening")


def deep_merge(left: Any, right: Any) -> Any:
    """Merge two translation entries.

    Two branches merge recursively; at any other pairing (leaf, plural map,
    missing value) the right-hand value wins. Neither input is mutated.
    """
    if left is None:
        return copy.deepcopy(right)
    if entry_kind(left) is EntryKind.BRANCH and entry_kind(right) is EntryKind.BRANCH:
        merged = dict(left)
        for key, value in right.items():
            if key in merged:
                merged[key] = deep_merge(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged
    return copy.deepcopy(right)


def flatten(tree: Dict[str, Any], scope: Optional[str] = None) -> Dict[str, Any]:
    """Flatten a nested translation tree into dotted keys.

    Args:
        tree: Nested mapping of branches, plural maps and leaves.
        scope: Optional dotted prefix for every emitted key.

    Returns:
        Dict of dotted key -> leaf value or plural map.
    """
    flat: Dict[str, Any] = {}

    def walk(mapping: Dict[str, Any], prefix: list) -> None:
        for key, value in mapping.items():
            path = prefix + split_key(key)
            if is_plural_map(value):
                flat[join_key(path)] = {str(tag): text for tag, text in value.items()}
            elif isinstance(value, dict):
                walk(value, path)
            else:
                flat[join_key(path)] = value

    walk(tree, split_key(scope))
    return flat


def expand_dotted_key(key: Any, value: Any) -> Dict[str, Any]:
    """Build the nested tree for a single dotted key.

    Example:
        expand_dotted_key("scoped.home", "home")
        # -> {"scoped": {"home": "home"}}
    """
    segments = split_key(key)
    if not segments:
        raise ValueError("Translation key must not be empty")
    tree: Any = copy.deepcopy(value)
    for segment in reversed(segments):
        tree = {segment: tree}
    return tree


def nest_dotted_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Expand top-level dotted keys of a mapping into nested branches."""
    nested: Dict[str, Any] = {}
    for key, value in data.items():
        nested = deep_merge(nested, expand_dotted_key(key, value))
    return nested


def unflatten(rows: Iterable[TranslationRow]) -> Dict[str, Dict[str, Any]]:
    """Rebuild per-locale translation trees from storage rows.

    Rows with a pluralization index build (or extend) a tag -> text mapping
    at their key; other rows set the text directly.

    Returns:
        Dict of locale -> nested translation tree.
    """
    data: Dict[str, Dict[str, Any]] = {}

    for row in rows:
        segments = split_key(row.key)
        if not segments:
            logger.warning("skipped_row_without_key", locale=row.locale)
            continue

        node = data.setdefault(row.locale, {})
        *parents, leaf = segments
        for segment in parents:
            child = node.get(segment)
            if not isinstance(child, dict):
                if child is not None:
                    logger.warning(
                        "flattened_key_conflict",
                        locale=row.locale,
                        key=row.key,
                        segment=segment,
                    )
                child = node[segment] = {}
            node = child

        if row.pluralization_index:
            existing = node.get(leaf)
            if isinstance(existing, dict):
                existing[row.pluralization_index] = row.text
            else:
                node[leaf] = {row.pluralization_index: row.text}
        else:
            node[leaf] = row.text

    return data
