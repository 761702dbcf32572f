"""Translation backends.

- TranslationBackend: contract implemented by every chain member
- InMemoryBackend: nested trees in memory, fed by YAML
- DatabaseBackend: flattened rows in a repository, mirrored in memory
"""

from typing import Dict, Type

from infrastructure.i18n.backends.base import TranslationBackend
from infrastructure.i18n.backends.database import DatabaseBackend
from infrastructure.i18n.backends.memory import InMemoryBackend

BACKEND_CLASSES: Dict[str, Type[TranslationBackend]] = {
    InMemoryBackend.name: InMemoryBackend,
    DatabaseBackend.name: DatabaseBackend,
}


def get_backend_class(name: str) -> Type[TranslationBackend]:
    """Backend class registered under a name.

    Raises:
        ValueError: If no backend is registered under the name.
    """
    try:
        return BACKEND_CLASSES[name.strip().lower()]
    except KeyError as e:
        raise ValueError(
            f"Unknown translation backend: {name} (known: {sorted(BACKEND_CLASSES)})"
        ) from e


__all__ = [
    "TranslationBackend",
    "InMemoryBackend",
    "DatabaseBackend",
    "BACKEND_CLASSES",
    "get_backend_class",
]
