"""Default value resolution.

A ``default`` option supplies a fallback when a key resolves to nothing:

- ``TranslationKey``: translated again with the remaining options
- list/tuple: alternatives tried in order; the first that yields a value wins
- anything else: returned literally

A default that cannot be resolved yields NOT_FOUND; the caller decides
whether that is an error.
"""

from typing import Any, Callable, Dict

from infrastructure.i18n.keys import TranslationKey
from infrastructure.operations.result import OperationResult

Resolve = Callable[[str, Any, Dict[str, Any]], OperationResult]


def resolve_default(
    resolve: Resolve,
    locale: str,
    default: Any,
    options: Dict[str, Any],
) -> OperationResult:
    """Resolve a default value.

    Args:
        resolve: Lookup used for symbolic defaults; for a chain this is the
            chain's own resolve, so the default goes through every backend.
        locale: Normalized locale.
        default: The ``default`` option value.
        options: Remaining options (``default`` already removed).

    Returns:
        OperationResult: SUCCESS with the resolved value, or NOT_FOUND.
    """
    if default is None:
        return OperationResult.not_found("no default given")

    if isinstance(default, TranslationKey):
        return resolve(locale, default, dict(options))

    if isinstance(default, (list, tuple)):
        for alternative in default:
            result = resolve_default(resolve, locale, alternative, dict(options))
            if result.is_success and result.data is not None:
                return result
        return OperationResult.not_found("no default alternative resolved")

    return OperationResult.success(default)
